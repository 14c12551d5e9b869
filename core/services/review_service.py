# =============================================================================
# core/services/review_service.py - Review & Roster Writes
# =============================================================================
# Handles the two write operations of the API:
# - Submit review: append a review row
# - Add faculty: append a roster row
#
# Both invalidate the faculty cache after a successful append. Input is
# validated by the Pydantic models before reaching this service, so an
# invalid request never appends a row or touches the cache.
#
# Upstream failures are NOT swallowed here: losing a submission silently
# would lose user data.
# =============================================================================

import logging
from datetime import datetime
from typing import Any, Callable
from zoneinfo import ZoneInfo

from app.exceptions import UpstreamError
from core.models.faculty import FacultySubmission
from core.models.review import ReviewSubmission
from core.services.faculty_cache import FacultyCache
from lib.sheets_client import SheetsClient, SheetsClientError

logger = logging.getLogger(__name__)

REVIEW_APPEND_CELLS = "A2:I"
ROSTER_APPEND_CELLS = "A2:D"


def format_review_timestamp(moment: datetime) -> str:
    """
    Format a timestamp the way the review sheet stores it (en-IN locale).

    Day, month and hour are not zero-padded; midnight and noon are 12.

    Example: "5/1/2024, 9:03:07 am"
    """
    hour = moment.hour % 12 or 12
    meridiem = "am" if moment.hour < 12 else "pm"
    return (
        f"{moment.day}/{moment.month}/{moment.year}, "
        f"{hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}"
    )


class ReviewService:
    """
    Service for spreadsheet writes.

    Provides a clean interface between API routes and the spreadsheet.
    """

    def __init__(
        self,
        client: SheetsClient,
        cache: FacultyCache,
        faculty_sheet: str,
        reviews_sheet: str,
        timezone: str = "Asia/Kolkata",
        clock: Callable[[ZoneInfo], datetime] = datetime.now,
    ):
        self.client = client
        self.cache = cache
        self.faculty_sheet = faculty_sheet
        self.reviews_sheet = reviews_sheet
        self.timezone = ZoneInfo(timezone)
        self._clock = clock

    def submit_review(self, submission: ReviewSubmission) -> dict[str, Any]:
        """
        Append a review row and invalidate the roster cache.

        In derived-roster mode a review can introduce a new faculty name,
        so the roster is invalidated as well.

        Returns:
            Stored review summary: faculty, ratings, timestamp

        Raises:
            UpstreamError: If the append fails
        """
        timestamp = format_review_timestamp(self._clock(self.timezone))
        row = submission.to_sheet_row(timestamp)

        try:
            self.client.append_row(self.reviews_sheet, REVIEW_APPEND_CELLS, row)
        except SheetsClientError as e:
            raise UpstreamError("Failed to submit review", e)

        self.cache.invalidate()
        logger.info(f"Review submitted for {row[0]!r}")

        return {
            "faculty": row[0],
            "ratings": {
                "teaching": row[1],
                "evaluation": row[2],
                "behaviour": row[3],
                "internals": row[4],
                "classAverage": row[5],
                "overall": row[6],
            },
            "timestamp": row[7],
        }

    def add_faculty(self, submission: FacultySubmission) -> dict[str, str]:
        """
        Append a roster row and invalidate the roster cache.

        Raises:
            UpstreamError: If the append fails
        """
        row = submission.to_sheet_row()

        try:
            self.client.append_row(self.faculty_sheet, ROSTER_APPEND_CELLS, row)
        except SheetsClientError as e:
            raise UpstreamError("Failed to add faculty member", e)

        self.cache.invalidate()
        logger.info(f"Faculty member added: {row[0]!r} ({row[1]})")

        return {
            "name": row[0],
            "department": row[1],
            "subject": row[2],
            "mobile": row[3],
        }
