# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - sheets_client.py: Typed Google Sheets wrapper for range reads and appends
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.sheets_client import SheetsClient, SheetsClientError, a1_range

__all__ = [
    "SheetsClient",
    "SheetsClientError",
    "a1_range",
]
