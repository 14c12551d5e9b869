# =============================================================================
# app/routers/reviews.py - Review & Roster Write Endpoints
# =============================================================================
# - POST /submit-review   Append a review row
# - POST /add-faculty     Append a roster row
#
# Body validation happens in the Pydantic models; failures become 400
# responses via the RequestValidationError handler in app/main.py.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import ReviewServiceDep
from core.models.faculty import FacultySubmission
from core.models.review import ReviewSubmission

router = APIRouter()


@router.post("/submit-review")
def submit_review(submission: ReviewSubmission, service: ReviewServiceDep):
    """
    Submit a review.

    teaching, evaluation, behaviour, internals and overall must be numbers
    between 1 and 5. classAverage must be a number.
    """
    stored = service.submit_review(submission)

    return {
        "success": True,
        "message": "Review submitted successfully",
        "data": stored,
    }


@router.post("/add-faculty")
def add_faculty(submission: FacultySubmission, service: ReviewServiceDep):
    """Add a faculty member to the roster sheet."""
    stored = service.add_faculty(submission)

    return {
        "success": True,
        "message": "Faculty member added successfully",
        "data": stored,
    }
