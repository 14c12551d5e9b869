# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The Sheets client and faculty cache are process-wide singletons; tests
# replace them through app.dependency_overrides.
# =============================================================================

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.config import settings
from core.services.aggregation import AggregationService
from core.services.faculty_cache import FacultyCache
from core.services.review_service import ReviewService
from lib.sheets_client import SheetsClient


@lru_cache
def get_sheets_client() -> SheetsClient:
    """Get the shared Google Sheets client."""
    return SheetsClient(
        spreadsheet_id=settings.SPREADSHEET_ID,
        credentials_file=settings.GOOGLE_CREDENTIALS_FILE,
        timeout_seconds=settings.SHEETS_TIMEOUT_SECONDS,
    )


@lru_cache
def get_faculty_cache() -> FacultyCache:
    """Get the process-wide faculty roster cache."""
    return FacultyCache(
        client=get_sheets_client(),
        faculty_sheet=settings.FACULTY_SHEET,
        reviews_sheet=settings.REVIEWS_SHEET,
        ttl_seconds=settings.CACHE_DURATION_SECONDS,
    )


def get_aggregation_service(
    client: Annotated[SheetsClient, Depends(get_sheets_client)],
) -> AggregationService:
    return AggregationService(client=client, reviews_sheet=settings.REVIEWS_SHEET)


def get_review_service(
    client: Annotated[SheetsClient, Depends(get_sheets_client)],
    cache: Annotated[FacultyCache, Depends(get_faculty_cache)],
) -> ReviewService:
    return ReviewService(
        client=client,
        cache=cache,
        faculty_sheet=settings.FACULTY_SHEET,
        reviews_sheet=settings.REVIEWS_SHEET,
        timezone=settings.REVIEW_TIMEZONE,
    )


# Type aliases for dependency injection
SheetsClientDep = Annotated[SheetsClient, Depends(get_sheets_client)]
FacultyCacheDep = Annotated[FacultyCache, Depends(get_faculty_cache)]
AggregationDep = Annotated[AggregationService, Depends(get_aggregation_service)]
ReviewServiceDep = Annotated[ReviewService, Depends(get_review_service)]
