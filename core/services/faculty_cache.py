# =============================================================================
# core/services/faculty_cache.py - Time-Boxed Faculty Roster Cache
# =============================================================================
# Holds the full faculty roster in memory for a freshness window so the
# rate-limited spreadsheet is not read on every request.
#
# Population order:
#   1. Roster sheet (A2:D)            -> source=fresh
#   2. Names from review sheet (A2:A) -> source=derived
#   3. Nothing                         -> source=empty (not stored)
#
# The cache is shared process-wide without locks. Concurrent refreshes may
# race; the last one to finish wins.
# =============================================================================

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

from core.models.faculty import FacultyRecord, RosterResult, RosterSource
from lib.sheets_client import SheetsClient, SheetsClientError

logger = logging.getLogger(__name__)

ROSTER_CELLS = "A2:D"
REVIEW_NAME_CELLS = "A2:A"

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FacultyCache:
    """
    Single cache entry for the faculty roster.

    The gateway and clock are injected so tests can drive expiry without
    sleeping.

    Example:
        cache = FacultyCache(client, faculty_sheet="Faculty", reviews_sheet="Reviews")
        roster = cache.get()
        cache.invalidate()  # next get() re-reads the sheet
    """

    def __init__(
        self,
        client: SheetsClient,
        faculty_sheet: str,
        reviews_sheet: str,
        ttl_seconds: float = 300,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.client = client
        self.faculty_sheet = faculty_sheet
        self.reviews_sheet = reviews_sheet
        self.ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock

        self._data: list[FacultyRecord] | None = None
        self._source: RosterSource = RosterSource.EMPTY
        self._timestamp: datetime = EPOCH

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def get(self) -> RosterResult:
        """
        Get the roster, re-reading the spreadsheet when expired.

        Never raises: upstream failures degrade to a derived or empty
        roster.
        """
        if self._data is not None and self._clock() - self._timestamp < self.ttl:
            return RosterResult(records=self._data, source=self._source, cached=True)

        return self._repopulate()

    def invalidate(self) -> None:
        """
        Mark the cache expired.

        Data is kept, only the timestamp is reset, so a request racing with
        the next refresh may still see the previous roster.
        """
        self._timestamp = EPOCH
        logger.debug("Faculty cache invalidated")

    def snapshot(self) -> dict[str, Any]:
        """Cache state for the health endpoint."""
        return {
            "hasFacultyData": self._data is not None,
            "facultyCount": len(self._data) if self._data else 0,
            "lastUpdated": self._timestamp.isoformat() if self._timestamp != EPOCH else None,
            "source": self._source.value,
        }

    # -------------------------------------------------------------------------
    # Population
    # -------------------------------------------------------------------------

    def _repopulate(self) -> RosterResult:
        try:
            records = self._fetch_roster()
            source = RosterSource.FRESH
        except SheetsClientError as e:
            logger.warning(f"Roster sheet unavailable, deriving faculty from reviews: {e}")
            try:
                records = self._derive_from_reviews()
                source = RosterSource.DERIVED
            except SheetsClientError as fallback_error:
                logger.error(f"Failed to derive faculty from reviews: {fallback_error}")
                return RosterResult(records=[], source=RosterSource.EMPTY)

        # Replace wholesale, never patch
        self._data = records
        self._source = source
        self._timestamp = self._clock()

        logger.info(f"Faculty cache populated with {len(records)} records ({source.value})")
        return RosterResult(records=records, source=source)

    def _fetch_roster(self) -> list[FacultyRecord]:
        rows = self.client.read_range(self.faculty_sheet, ROSTER_CELLS)

        records = [
            FacultyRecord.from_sheet_row(row, record_id=index)
            for index, row in enumerate(rows, start=1)
        ]
        return [record for record in records if record.name.strip()]

    def _derive_from_reviews(self) -> list[FacultyRecord]:
        rows = self.client.read_range(self.reviews_sheet, REVIEW_NAME_CELLS)

        # Keyed like averages matching; the first spelling seen wins
        names: dict[str, str] = {}
        for row in rows:
            name = row[0].strip() if row else ""
            if name:
                names.setdefault(name.casefold(), name)

        return [
            FacultyRecord.derived(name, record_id=index)
            for index, name in enumerate(names.values(), start=1)
        ]
