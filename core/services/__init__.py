# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .faculty_cache import FacultyCache
from .aggregation import AggregationService, compute_averages
from .search import search_faculty, find_faculty
from .review_service import ReviewService

__all__ = [
    "FacultyCache",
    "AggregationService",
    "compute_averages",
    "search_faculty",
    "find_faculty",
    "ReviewService",
]
