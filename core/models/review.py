# =============================================================================
# core/models/review.py - Review & Statistics Schemas
# =============================================================================
# These models define the review side of the API:
# - ReviewSubmission: Validated input for a new review
# - FacultyAverages: Per-faculty rating averages computed from review rows
#
# Review rows in the sheet are plain lists of text:
#   [facultyName, teaching, evaluation, behaviour, internals,
#    classAverage, overall, timestamp]
# Numeric cells may be missing or hold arbitrary text.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Rating categories in sheet column order (column 0 is the faculty name)
RATING_CATEGORIES: list[tuple[str, int]] = [
    ("teaching", 1),
    ("evaluation", 2),
    ("behaviour", 3),
    ("internals", 4),
    ("class_average", 5),
    ("overall", 6),
]

MIN_RATING = 1
MAX_RATING = 5


def _rating_field(description: str) -> Any:
    return Field(
        ...,
        ge=MIN_RATING,
        le=MAX_RATING,
        allow_inf_nan=False,
        description=description,
    )


class ReviewSubmission(BaseModel):
    """
    Input for POST /api/submit-review.

    Ratings accept numbers or numeric strings (HTML forms post strings).
    Five of them are individual ratings on a 1-5 scale. classAverage is a
    class statistic, so it only has to be a finite number.

    Example:
        {
            "name": "Dr. Rao",
            "teaching": 4,
            "evaluation": 5,
            "behaviour": 4,
            "internals": "3",
            "classAverage": 7.8,
            "overall": 4
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Faculty name being reviewed")
    teaching: float = _rating_field("Teaching rating (1-5)")
    evaluation: float = _rating_field("Evaluation rating (1-5)")
    behaviour: float = _rating_field("Behaviour rating (1-5)")
    internals: float = _rating_field("Internals rating (1-5)")
    class_average: float = Field(
        ...,
        alias="classAverage",
        allow_inf_nan=False,
        description="Class average (not range checked)",
    )
    overall: float = _rating_field("Overall rating (1-5)")

    @field_validator("name")
    @classmethod
    def require_name(cls, v: str) -> str:
        """Strip whitespace and reject blank names."""
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    def to_sheet_row(self, timestamp: str) -> list[str | int | float]:
        """
        Build the row appended to the review sheet.

        Individual ratings are truncated to whole numbers; classAverage
        keeps its fraction.
        """
        return [
            self.name,
            int(self.teaching),
            int(self.evaluation),
            int(self.behaviour),
            int(self.internals),
            float(self.class_average),
            int(self.overall),
            timestamp,
        ]


class FacultyAverages(BaseModel):
    """
    Rating averages for one faculty member.

    Each category is the mean of its valid numeric cells, rounded half-up
    to one decimal. A category with no valid cells is exactly 0.

    latest_review is the first matching row in sheet order. Reviews are
    appended, so this is the earliest submitted review, not the newest.
    """

    model_config = ConfigDict(populate_by_name=True)

    teaching: float = 0
    evaluation: float = 0
    behaviour: float = 0
    internals: float = 0
    class_average: float = Field(default=0, alias="classAverage")
    overall: float = 0
    count: int = Field(..., ge=1, description="Number of matching reviews")
    latest_review: list[str] = Field(
        default_factory=list,
        alias="latestReview",
        description="First matching review row in sheet order",
    )

    def to_response(self) -> dict[str, Any]:
        """Serialize with the camelCase keys clients expect."""
        return self.model_dump(by_alias=True)
