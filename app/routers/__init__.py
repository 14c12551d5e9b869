# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Spreadsheet probe, cache introspection, liveness
# - faculty.py: Roster listing/search, lookup, statistics, cache refresh
# - reviews.py: Review submission and roster additions
#
# Each router is mounted in main.py under the /api prefix.
# =============================================================================

from . import health
from . import faculty
from . import reviews

__all__ = [
    "health",
    "faculty",
    "reviews",
]
