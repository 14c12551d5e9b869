# =============================================================================
# app/routers/faculty.py - Faculty Roster & Statistics Endpoints
# =============================================================================
# Read side of the API:
# - GET  /faculty            List or search the roster
# - GET  /faculty/{name}     One faculty member plus review statistics
# - GET  /faculty-averages   Review statistics only
# - POST /refresh-cache      Force a roster re-read
#
# Handlers are plain `def` so the blocking spreadsheet calls run in
# FastAPI's thread pool.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Query

from app.dependencies import AggregationDep, FacultyCacheDep
from app.exceptions import FacultyNotFoundError, FacultyReviewException
from core.models.faculty import RosterSource
from core.services.search import find_faculty, search_faculty

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/faculty")
def list_faculty(
    cache: FacultyCacheDep,
    search: Annotated[str | None, Query(description="Substring of name, department or subject")] = None,
):
    """
    List all faculty, or those matching `search`.

    `source` tells whether the roster came from the roster sheet ("fresh"),
    was derived from review names ("derived"), or is unavailable ("empty").
    """
    roster = cache.get()
    records = roster.records

    if search and search.strip():
        records = search_faculty(records, search)
        message = f"Found {len(records)} faculty members"
    else:
        message = f"Retrieved {len(records)} faculty members"

    return {
        "success": True,
        "data": [record.model_dump() for record in records],
        "total": len(records),
        "source": roster.source.value,
        "message": message,
    }


@router.get("/faculty/{name}")
def get_faculty(
    name: Annotated[str, Path(description="Full or partial faculty name")],
    cache: FacultyCacheDep,
    aggregation: AggregationDep,
):
    """
    Get one faculty member with review statistics.

    The roster lookup is a case-insensitive substring match and returns the
    first hit. Statistics use the matched record's full name (exact match),
    and are null when the member has no reviews yet.
    """
    faculty = find_faculty(cache.get().records, name)
    if faculty is None:
        raise FacultyNotFoundError(name)

    averages = aggregation.averages_for(faculty.name)

    return {
        "success": True,
        "data": {
            **faculty.model_dump(),
            "statistics": averages.to_response() if averages else None,
        },
    }


@router.get("/faculty-averages")
def get_faculty_averages(
    faculty: Annotated[str, Query(min_length=1, description="Exact faculty name")],
    aggregation: AggregationDep,
):
    """
    Get review statistics for a faculty member.

    A name with no reviews is not an error: the response is 200 with
    `averages: null`.
    """
    averages = aggregation.averages_for(faculty)

    if averages is None:
        return {
            "success": True,
            "averages": None,
            "message": f"No reviews found for {faculty}",
        }

    return {
        "success": True,
        "averages": averages.to_response(),
        "message": f"Found {averages.count} reviews for {faculty}",
    }


@router.post("/refresh-cache")
def refresh_cache(cache: FacultyCacheDep):
    """
    Invalidate the roster cache and re-read it immediately.

    Fails with 500 when neither sheet could be read; the cache then still
    holds whatever it held before.
    """
    cache.invalidate()
    roster = cache.get()

    if roster.source == RosterSource.EMPTY:
        raise FacultyReviewException(
            message="Neither the faculty sheet nor the reviews sheet could be read",
            error="Failed to refresh cache",
            code="CACHE_REFRESH_FAILED",
            suggestion="Check GET /api/health for spreadsheet access",
        )

    logger.info(f"Faculty cache refreshed on request ({roster.source.value})")

    return {
        "success": True,
        "message": "Faculty cache refreshed successfully",
        "data": {
            "totalFaculty": len(roster.records),
            "lastUpdated": cache.snapshot()["lastUpdated"],
            "source": roster.source.value,
        },
    }
