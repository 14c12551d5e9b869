# =============================================================================
# core/services/aggregation.py - Per-Faculty Rating Averages
# =============================================================================
# Computes rating averages from raw review rows. Reviews are read from the
# sheet on every call so just-submitted reviews are always counted.
#
# Faculty matching here is EXACT (trimmed, case-insensitive). Substring
# matching belongs to roster search only; using it here would mix the
# reviews of "Dr. Rao" into "Dr. Raosaheb".
# =============================================================================

import logging
import math
from decimal import ROUND_HALF_UP, Decimal

from core.models.review import RATING_CATEGORIES, FacultyAverages
from lib.sheets_client import SheetsClient, SheetsClientError

logger = logging.getLogger(__name__)

REVIEW_CELLS = "A2:I"

# Past this a float has no tenths digit worth rounding
MAX_ROUNDED_MAGNITUDE = 1e15


def _normalize_name(name: str) -> str:
    return name.strip().casefold()


def parse_rating(value: str | None) -> float | None:
    """
    Parse a sheet cell as a finite number.

    Returns None for missing, blank, non-numeric, NaN or infinite cells.
    """
    if value is None or not str(value).strip():
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def round_half_up(value: float, digits: int = 1) -> float:
    """
    Round like a person would (2.25 -> 2.3), not banker's rounding.

    Values too large to carry a meaningful fraction are returned as-is.
    """
    if not math.isfinite(value) or abs(value) >= MAX_ROUNDED_MAGNITUDE:
        return value
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def mean(values: list[float]) -> float:
    """Arithmetic mean that does not overflow when the sum exceeds float range."""
    total = sum(values)
    if math.isfinite(total):
        return total / len(values)
    return sum(value / len(values) for value in values)


def category_average(rows: list[list[str]], column: int) -> float:
    """
    Average the valid numeric cells of one column.

    Returns exactly 0 when the column has no valid cells.
    """
    values = [
        number
        for number in (parse_rating(row[column]) if column < len(row) else None for row in rows)
        if number is not None
    ]
    if not values:
        return 0
    return round_half_up(mean(values))


def compute_averages(rows: list[list[str]], faculty_name: str) -> FacultyAverages | None:
    """
    Compute averages for one faculty member from review rows.

    Args:
        rows: Review rows in sheet order
        faculty_name: Name to match exactly (trimmed, case-insensitive)

    Returns:
        FacultyAverages, or None when no row matches
    """
    target = _normalize_name(faculty_name)
    if not target:
        return None

    matches = [row for row in rows if row and _normalize_name(row[0]) == target]
    if not matches:
        return None

    averages = {
        category: category_average(matches, column)
        for category, column in RATING_CATEGORIES
    }

    return FacultyAverages(
        **averages,
        count=len(matches),
        latest_review=matches[0],
    )


class AggregationService:
    """
    Reads review rows and computes averages on demand (uncached).
    """

    def __init__(self, client: SheetsClient, reviews_sheet: str):
        self.client = client
        self.reviews_sheet = reviews_sheet

    def averages_for(self, faculty_name: str) -> FacultyAverages | None:
        """
        Get averages for a faculty member.

        Statistics are best-effort: upstream failures are logged and
        reported as "no statistics" (None), never raised.
        """
        try:
            rows = self.client.read_range(self.reviews_sheet, REVIEW_CELLS)
        except SheetsClientError as e:
            logger.error(f"Failed to read reviews for averages: {e}")
            return None

        averages = compute_averages(rows, faculty_name)
        if averages:
            logger.debug(f"Computed averages for {faculty_name!r} from {averages.count} reviews")
        return averages
