# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - faculty.py: Roster records, roster source tagging, add-faculty input
# - review.py: Review submission input and per-faculty averages
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Faculty Models - Roster
# -----------------------------------------------------------------------------
from .faculty import (
    PLACEHOLDER_DEPARTMENT,
    PLACEHOLDER_MOBILE,
    PLACEHOLDER_SUBJECT,
    FacultyRecord,
    FacultySubmission,
    RosterResult,
    RosterSource,
)

# -----------------------------------------------------------------------------
# Review Models - Submissions and statistics
# -----------------------------------------------------------------------------
from .review import (
    MAX_RATING,
    MIN_RATING,
    RATING_CATEGORIES,
    FacultyAverages,
    ReviewSubmission,
)

__all__ = [
    # Faculty
    "PLACEHOLDER_DEPARTMENT",
    "PLACEHOLDER_MOBILE",
    "PLACEHOLDER_SUBJECT",
    "FacultyRecord",
    "FacultySubmission",
    "RosterResult",
    "RosterSource",
    # Review
    "MAX_RATING",
    "MIN_RATING",
    "RATING_CATEGORIES",
    "FacultyAverages",
    "ReviewSubmission",
]
