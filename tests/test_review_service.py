# =============================================================================
# tests/test_review_service.py - Write Operation Tests
# =============================================================================
# Tests for:
# - Rows appended for reviews and faculty
# - Cache invalidation after successful writes
# - Upstream failures surfacing as UpstreamError
# =============================================================================

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from app.exceptions import UpstreamError
from core.models import FacultySubmission, ReviewSubmission
from core.services.review_service import ReviewService, format_review_timestamp


def fixed_clock(tz):
    return datetime(2024, 1, 15, 17, 5, 9, tzinfo=tz)


@pytest.fixture
def cache():
    return MagicMock()


@pytest.fixture
def service(fake_sheets, cache):
    return ReviewService(
        client=fake_sheets,
        cache=cache,
        faculty_sheet="Faculty",
        reviews_sheet="Reviews",
        timezone="Asia/Kolkata",
        clock=fixed_clock,
    )


@pytest.fixture
def submission():
    return ReviewSubmission(
        name="  Dr. Rao ",
        teaching=4,
        evaluation="5",
        behaviour=4.7,
        internals=3,
        classAverage=7.25,
        overall=4,
    )


class TestFormatTimestamp:
    def test_format(self):
        moment = datetime(2024, 1, 5, 9, 3, 7)
        assert format_review_timestamp(moment) == "5/1/2024, 9:03:07 am"

    def test_afternoon(self):
        moment = datetime(2024, 1, 5, 21, 3, 7)
        assert format_review_timestamp(moment) == "5/1/2024, 9:03:07 pm"

    def test_midnight_and_noon_are_twelve(self):
        assert format_review_timestamp(datetime(2024, 12, 31, 0, 0, 5)) == "31/12/2024, 12:00:05 am"
        assert format_review_timestamp(datetime(2024, 12, 31, 12, 30, 0)) == "31/12/2024, 12:30:00 pm"


class TestSubmitReview:
    """POST /submit-review business logic."""

    def test_appends_one_row(self, service, submission, fake_sheets):
        service.submit_review(submission)

        assert fake_sheets.appends == [(
            "Reviews",
            "A2:I",
            ["Dr. Rao", 4, 5, 4, 3, 7.25, 4, "15/1/2024, 5:05:09 pm"],
        )]

    def test_invalidates_cache(self, service, submission, cache):
        service.submit_review(submission)

        cache.invalidate.assert_called_once()

    def test_returns_summary(self, service, submission):
        stored = service.submit_review(submission)

        assert stored["faculty"] == "Dr. Rao"
        assert stored["ratings"]["classAverage"] == 7.25
        assert stored["ratings"]["behaviour"] == 4
        assert stored["timestamp"] == "15/1/2024, 5:05:09 pm"

    def test_upstream_failure_raises_and_keeps_cache(self, service, submission, fake_sheets, cache):
        """Test a failed append is surfaced, not swallowed."""
        fake_sheets.fail_appends = True

        with pytest.raises(UpstreamError) as exc_info:
            service.submit_review(submission)

        assert exc_info.value.status_code == 500
        assert exc_info.value.error == "Failed to submit review"
        cache.invalidate.assert_not_called()


class TestAddFaculty:
    """POST /add-faculty business logic."""

    def test_appends_roster_row(self, service, fake_sheets):
        service.add_faculty(FacultySubmission(name=" Dr. Menon ", department=" Biology "))

        assert fake_sheets.appends == [("Faculty", "A2:D", ["Dr. Menon", "Biology", "", ""])]

    def test_invalidates_cache(self, service, cache):
        service.add_faculty(FacultySubmission(name="Dr. Menon", department="Biology"))

        cache.invalidate.assert_called_once()

    def test_upstream_failure(self, service, fake_sheets, cache):
        fake_sheets.fail_appends = True

        with pytest.raises(UpstreamError):
            service.add_faculty(FacultySubmission(name="Dr. Menon", department="Biology"))

        cache.invalidate.assert_not_called()
