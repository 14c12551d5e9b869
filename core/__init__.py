# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic of the review service:
# - models/: Pydantic schemas for roster records, reviews and averages
# - services/: Faculty cache, aggregation, search and write operations
#
# Code in this package talks to the spreadsheet only through
# lib.sheets_client, which keeps it testable with a fake client.
# =============================================================================
