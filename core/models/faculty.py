# =============================================================================
# core/models/faculty.py - Faculty Roster Schemas
# =============================================================================
# These models define the roster side of the API:
# - FacultyRecord: One row of the roster sheet (or a derived placeholder)
# - RosterSource: Where a roster came from (fresh / derived / empty)
# - RosterResult: Tagged roster returned by the faculty cache
# - FacultySubmission: Input for adding a faculty member
#
# Record ids are assigned at read time (1-based, read order). They are NOT
# stable across cache refreshes and must not be stored by clients.
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field, field_validator

# Placeholders for records derived from review rows
PLACEHOLDER_DEPARTMENT = "Not specified"
PLACEHOLDER_SUBJECT = "Not specified"
PLACEHOLDER_MOBILE = "Not available"


class FacultyRecord(BaseModel):
    """
    A single faculty member as served to clients.

    Example:
        {
            "id": 1,
            "name": "Dr. Rao",
            "department": "Physics",
            "subject": "Optics",
            "mobile": "9876543210"
        }
    """

    id: int = Field(..., ge=1, description="Sequential id assigned at read time")
    name: str = Field(..., description="Faculty name")
    department: str = Field(default="", description="Department")
    subject: str = Field(default="", description="Subject taught")
    mobile: str = Field(default="", description="Contact number")

    @classmethod
    def from_sheet_row(cls, row: list[str], record_id: int) -> "FacultyRecord":
        """Create a record from a roster row (Name, Department, Subject, Mobile)."""
        padded = list(row) + [""] * (4 - len(row))
        return cls(
            id=record_id,
            name=padded[0],
            department=padded[1],
            subject=padded[2],
            mobile=padded[3],
        )

    @classmethod
    def derived(cls, name: str, record_id: int) -> "FacultyRecord":
        """Create a placeholder record for a name seen only in reviews."""
        return cls(
            id=record_id,
            name=name,
            department=PLACEHOLDER_DEPARTMENT,
            subject=PLACEHOLDER_SUBJECT,
            mobile=PLACEHOLDER_MOBILE,
        )


class RosterSource(str, Enum):
    """
    Origin of a roster.

    - fresh: Read from the roster sheet
    - derived: Synthesized from review names (roster sheet unavailable)
    - empty: Both reads failed; nothing to serve
    """
    FRESH = "fresh"
    DERIVED = "derived"
    EMPTY = "empty"


@dataclass
class RosterResult:
    """Roster plus where it came from and whether it was served from cache."""
    records: list[FacultyRecord] = field(default_factory=list)
    source: RosterSource = RosterSource.EMPTY
    cached: bool = False

    @property
    def is_degraded(self) -> bool:
        return self.source != RosterSource.FRESH


class FacultySubmission(BaseModel):
    """
    Input for POST /api/add-faculty.

    Name and department are required (non-blank); subject and mobile
    default to empty strings. All values are stored trimmed.
    """

    name: str = Field(..., description="Faculty name")
    department: str = Field(..., description="Department")
    subject: str | None = Field(default="", description="Subject taught")
    mobile: str | None = Field(default="", description="Contact number")

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Dr. Rao",
                "department": "Physics",
                "subject": "Optics",
                "mobile": "9876543210",
            }
        }
    }

    @field_validator("name", "department")
    @classmethod
    def require_text(cls, v: str) -> str:
        """Strip whitespace and reject blank values."""
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("subject", "mobile")
    @classmethod
    def strip_optional(cls, v: str | None) -> str:
        return (v or "").strip()

    def to_sheet_row(self) -> list[str]:
        return [self.name, self.department, self.subject or "", self.mobile or ""]
