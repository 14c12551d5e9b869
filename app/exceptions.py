# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every failure is returned in the same envelope:
#   {"success": false, "error": "...", "message": "...", "details": ...}
# Errors should tell HOW to fix, not just WHAT failed.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """
    Raised when a required setting is missing or invalid.

    Fatal at startup: the process does not start.
    """


class FacultyReviewException(Exception):
    """
    Base exception for the Faculty Review API.

    All custom HTTP-facing exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        error: str = "Request failed",
        code: str = "FACULTY_REVIEW_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.error = error
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the failure envelope."""
        result: dict[str, Any] = {
            "success": False,
            "error": self.error,
            "message": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Client Errors
# =============================================================================

class InvalidInputError(FacultyReviewException):
    """Raised when a request body or query fails validation."""

    def __init__(self, message: str, details: Any = None, error: str = "Invalid input data"):
        super().__init__(
            message=message,
            error=error,
            code="VALIDATION_ERROR",
            status_code=400,
            suggestion="Fix the listed fields and resend the request",
            details=details,
        )


class FacultyNotFoundError(FacultyReviewException):
    """Raised when no roster entry matches a lookup."""

    def __init__(self, name: str):
        super().__init__(
            message=f"No faculty found with name containing: {name}",
            error="Faculty not found",
            code="FACULTY_NOT_FOUND",
            status_code=404,
            suggestion="Search with GET /api/faculty?search=... to find the exact name",
            details={"name": name},
        )


# =============================================================================
# Upstream Errors
# =============================================================================

class UpstreamError(FacultyReviewException):
    """Raised when a spreadsheet write or probe fails and there is no fallback."""

    def __init__(self, error: str, cause: Exception):
        super().__init__(
            message=str(cause),
            error=error,
            code="UPSTREAM_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details=str(cause),
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def faculty_review_exception_handler(
    request: Request,
    exc: FacultyReviewException
) -> JSONResponse:
    """Convert FacultyReviewException to JSON response."""
    if exc.status_code >= 500:
        logger.error(f"{exc.error}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic request validation errors.

    FastAPI's default is 422; this API reports validation failures as 400.
    """
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", []) if part != "body"),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": "Invalid input data",
            "message": "; ".join(f"{e['field']}: {e['message']}" for e in errors),
            "code": "VALIDATION_ERROR",
            "details": jsonable_encoder(errors),
        }
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap framework HTTP errors (unknown routes, wrong methods) in the envelope."""
    if exc.status_code == 404:
        content = {
            "success": False,
            "error": "Endpoint not found",
            "message": f"The endpoint {request.method} {request.url.path} was not found",
        }
    else:
        content = {
            "success": False,
            "error": str(exc.detail),
            "message": str(exc.detail),
        }
    return JSONResponse(status_code=exc.status_code, content=content)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "message": "Something went wrong on the server",
        }
    )
