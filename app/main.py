# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Faculty Review API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
#   poetry run python -m app
# =============================================================================

import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.dependencies import get_faculty_cache
from app.exceptions import (
    FacultyReviewException,
    faculty_review_exception_handler,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.routers import faculty, health, reviews

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(settings.STATIC_DIR)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup logs the spreadsheet configuration and warms the roster cache.
    A failed warm-up is not fatal; the roster loads on first request.
    """
    logger.info(f"Starting Faculty Review API in {settings.ENVIRONMENT} mode")
    logger.info(f"Using spreadsheet: {settings.SPREADSHEET_ID}")
    logger.info(f"Reviews sheet: {settings.REVIEWS_SHEET}")
    logger.info(f"Faculty sheet: {settings.FACULTY_SHEET}")
    logger.info(f"Cache duration: {settings.CACHE_DURATION_SECONDS}s")

    roster = await asyncio.to_thread(get_faculty_cache().get)
    if roster.records:
        logger.info(f"Loaded {len(roster.records)} faculty members ({roster.source.value})")
    else:
        logger.warning("Faculty data will be loaded on first request")

    yield

    logger.info("Shutting down Faculty Review API")


# Create FastAPI application
app = FastAPI(
    title="Faculty Review API",
    description="""
## Faculty Teaching Reviews

Submit and look up faculty teaching reviews. Data lives in a Google Sheets
spreadsheet: one sheet for the faculty roster, one for reviews.

### Quick Start

```bash
# Search the roster
curl "http://localhost:3001/api/faculty?search=physics"

# Submit a review
curl -X POST http://localhost:3001/api/submit-review \\
  -H "Content-Type: application/json" \\
  -d '{"name": "Dr. Rao", "teaching": 4, "evaluation": 5, "behaviour": 4,
       "internals": 4, "classAverage": 7.5, "overall": 4}'

# Averages for one faculty member
curl "http://localhost:3001/api/faculty-averages?faculty=Dr.%20Rao"
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Faculty",
            "description": "Roster listing, search, lookup and statistics",
        },
        {
            "name": "Reviews",
            "description": "Review submission and roster additions",
        },
        {
            "name": "Health",
            "description": "Spreadsheet reachability and cache state",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(FacultyReviewException, faculty_review_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    return await unhandled_exception_handler(request, exc)


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)

app.include_router(
    faculty.router,
    prefix="/api",
    tags=["Faculty"]
)

app.include_router(
    reviews.router,
    prefix="/api",
    tags=["Reviews"]
)


# =============================================================================
# Front-end
# =============================================================================

if STATIC_DIR.is_dir():
    app.mount("/static", StaticFiles(directory=STATIC_DIR, html=True), name="static")

    @app.get("/review", include_in_schema=False)
    async def review_form():
        """Serve the review submission form."""
        return FileResponse(STATIC_DIR / "review.html")


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Faculty Review API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/health",
    }
