# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Faculty Review API:
# - test_models.py: Pydantic model validation
# - test_faculty_cache.py: Roster cache, expiry, derivation fallback
# - test_aggregation.py: Rating averages
# - test_search.py: Roster search and lookup
# - test_review_service.py: Spreadsheet writes
# - test_sheets_client.py: Google Sheets wrapper (mocked API)
# - test_config.py: Settings loading
# - test_api.py: HTTP endpoints via TestClient
#
# Run tests with: poetry run pytest
# =============================================================================
