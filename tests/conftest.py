# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides an in-memory fake of the Google Sheets client
# - Provides a controllable clock for cache expiry tests
# =============================================================================

import os
from datetime import datetime, timedelta, timezone

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SPREADSHEET_ID", "test-spreadsheet-id")
os.environ.setdefault("FACULTY_SHEET", "Faculty")
os.environ.setdefault("REVIEWS_SHEET", "Reviews")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("STATIC_DIR", "tests/no-static-dir")

import pytest

from lib.sheets_client import SheetsClientError


# =============================================================================
# Fakes
# =============================================================================

class FakeSheetsClient:
    """
    In-memory stand-in for SheetsClient.

    Sheets are keyed by name; a sheet listed in `broken` raises on read,
    emulating a missing sheet or an unreachable API.
    """

    def __init__(self, sheets: dict[str, list[list[str]]] | None = None):
        self.sheets = sheets or {}
        self.broken: set[str] = set()
        self.fail_appends = False
        self.reads: list[tuple[str, str]] = []
        self.appends: list[tuple[str, str, list]] = []

    def read_range(self, sheet_name: str, cells: str) -> list[list[str]]:
        self.reads.append((sheet_name, cells))
        if sheet_name in self.broken or sheet_name not in self.sheets:
            raise SheetsClientError(
                message=f"Unable to parse range: '{sheet_name}'!{cells}",
                code="SHEETS_HTTP_ERROR",
            )
        rows = self.sheets[sheet_name]
        if cells.endswith(":A"):
            return [row[:1] for row in rows if row]
        return [list(row) for row in rows]

    def append_row(self, sheet_name: str, cells: str, row: list) -> dict:
        if self.fail_appends:
            raise SheetsClientError(message="The service is currently unavailable.", retryable=True)
        self.appends.append((sheet_name, cells, row))
        self.sheets.setdefault(sheet_name, []).append([str(value) for value in row])
        return {"updatedRows": 1}

    def get_spreadsheet_metadata(self) -> dict:
        if "__metadata__" in self.broken:
            raise SheetsClientError(message="Requested entity was not found.")
        return {"title": "Faculty Reviews", "sheets": list(self.sheets)}


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def roster_rows():
    """Sample roster sheet rows (Name, Department, Subject, Mobile)."""
    return [
        ["Dr. Rao", "Physics", "Optics", "9876500001"],
        ["Dr. Singh", "Chemistry", "Organic Chemistry", "9876500002"],
        ["  ", "Math", "Algebra", ""],
        ["Prof. Iyer", "Mathematics"],
    ]


@pytest.fixture
def review_rows():
    """Sample review sheet rows in append order."""
    return [
        ["Dr. Rao", "4", "5", "4", "3", "7.5", "4", "15/01/2024, 10:00:00 am"],
        ["Dr. Singh", "3", "3", "4", "4", "6.0", "3", "15/01/2024, 10:05:00 am"],
        ["dr. rao ", "5", "4", "", "abc", "8.5", "5", "15/01/2024, 11:00:00 am"],
    ]


@pytest.fixture
def fake_sheets(roster_rows, review_rows):
    """Fake client holding both sheets."""
    return FakeSheetsClient({"Faculty": roster_rows, "Reviews": review_rows})


@pytest.fixture
def fake_clock():
    return FakeClock()
