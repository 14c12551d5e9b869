# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.dependencies import FacultyCacheDep, SheetsClientDep
from lib.sheets_client import SheetsClientError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health_check(client: SheetsClientDep, cache: FacultyCacheDep):
    """
    Health check endpoint.

    Probes the spreadsheet (title and sheet names) and reports the state
    of the faculty cache. Returns 500 when the spreadsheet is unreachable.
    """
    try:
        metadata = client.get_spreadsheet_metadata()
    except SheetsClientError as e:
        logger.warning(f"Health check failed: {e}")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "status": "unhealthy",
                "error": e.message,
                "cache": cache.snapshot(),
            },
        )

    return {
        "success": True,
        "status": "healthy",
        "spreadsheet": metadata,
        "cache": cache.snapshot(),
    }


@router.get("/health/live")
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive. No remote calls.
    """
    return {
        "success": True,
        "status": "alive",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
