# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Sheet rows map to records as expected
#
# Run with: poetry run pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import (
    FacultyAverages,
    FacultyRecord,
    FacultySubmission,
    ReviewSubmission,
    RosterResult,
    RosterSource,
)


def valid_review(**overrides):
    data = {
        "name": "Dr. Rao",
        "teaching": 4,
        "evaluation": 5,
        "behaviour": 4,
        "internals": 3,
        "classAverage": 7.5,
        "overall": 4,
    }
    data.update(overrides)
    return data


# =============================================================================
# ReviewSubmission Tests
# =============================================================================

class TestReviewSubmission:
    """Tests for review input validation."""

    def test_valid_review(self):
        review = ReviewSubmission.model_validate(valid_review())

        assert review.name == "Dr. Rao"
        assert review.class_average == 7.5

    def test_numeric_strings_accepted(self):
        """Test form-style string ratings are parsed."""
        review = ReviewSubmission.model_validate(valid_review(teaching="5", classAverage="6.25"))

        assert review.teaching == 5.0
        assert review.class_average == 6.25

    @pytest.mark.parametrize("field", ["teaching", "evaluation", "behaviour", "internals", "overall"])
    @pytest.mark.parametrize("value", [0, 6, 5.5, -1])
    def test_ratings_out_of_range_rejected(self, field, value):
        with pytest.raises(ValidationError):
            ReviewSubmission.model_validate(valid_review(**{field: value}))

    @pytest.mark.parametrize("value", [1, 5])
    def test_rating_bounds_inclusive(self, value):
        review = ReviewSubmission.model_validate(valid_review(teaching=value))
        assert review.teaching == value

    def test_class_average_not_range_checked(self):
        """Test classAverage is a statistic, not a 1-5 rating."""
        review = ReviewSubmission.model_validate(valid_review(classAverage=42))
        assert review.class_average == 42

    @pytest.mark.parametrize("value", ["abc", "nan", "inf", None])
    def test_non_finite_or_non_numeric_rejected(self, value):
        with pytest.raises(ValidationError):
            ReviewSubmission.model_validate(valid_review(classAverage=value))

    def test_missing_rating_rejected(self):
        data = valid_review()
        del data["overall"]

        with pytest.raises(ValidationError):
            ReviewSubmission.model_validate(data)

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError):
            ReviewSubmission.model_validate(valid_review(name=name))

    def test_to_sheet_row_truncates_ratings(self):
        review = ReviewSubmission.model_validate(valid_review(teaching=4.9, classAverage=7.25))

        row = review.to_sheet_row("ts")

        assert row == ["Dr. Rao", 4, 5, 4, 3, 7.25, 4, "ts"]


# =============================================================================
# Faculty Model Tests
# =============================================================================

class TestFacultySubmission:
    def test_optional_fields_default_to_empty(self):
        faculty = FacultySubmission(name="Dr. Menon", department="Biology")

        assert faculty.to_sheet_row() == ["Dr. Menon", "Biology", "", ""]

    def test_values_trimmed(self):
        faculty = FacultySubmission(name=" A ", department=" B ", subject=" C ", mobile=" 1 ")

        assert faculty.to_sheet_row() == ["A", "B", "C", "1"]

    def test_null_optional_fields(self):
        faculty = FacultySubmission(name="A", department="B", subject=None, mobile=None)

        assert faculty.subject == ""
        assert faculty.mobile == ""

    @pytest.mark.parametrize("field", ["name", "department"])
    def test_blank_required_field_rejected(self, field):
        data = {"name": "Dr. Menon", "department": "Biology", field: "  "}

        with pytest.raises(ValidationError):
            FacultySubmission(**data)


class TestFacultyRecord:
    def test_from_sheet_row(self):
        record = FacultyRecord.from_sheet_row(["Dr. Rao", "Physics", "Optics", "123"], record_id=3)

        assert record.id == 3
        assert record.mobile == "123"

    def test_derived(self):
        record = FacultyRecord.derived("Dr. Rao", record_id=1)

        assert record.department == "Not specified"
        assert record.mobile == "Not available"


class TestRosterResult:
    def test_degraded_flag(self):
        assert RosterResult(source=RosterSource.FRESH).is_degraded is False
        assert RosterResult(source=RosterSource.DERIVED).is_degraded is True
        assert RosterResult().is_degraded is True


class TestFacultyAverages:
    def test_count_must_be_positive(self):
        with pytest.raises(ValidationError):
            FacultyAverages(count=0)
