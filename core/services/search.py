# =============================================================================
# core/services/search.py - Roster Search & Lookup
# =============================================================================
# Pure filters over an in-memory roster. No I/O.
# =============================================================================

from core.models.faculty import FacultyRecord


def search_faculty(roster: list[FacultyRecord], term: str) -> list[FacultyRecord]:
    """
    Filter the roster by a case-insensitive substring.

    A record matches when the trimmed term occurs in its name, department
    or subject. Input order is preserved.

    Example:
        search_faculty(roster, "phys")  # everyone in Physics, plus "Dr. Physick"
    """
    needle = term.strip().lower()
    return [
        faculty
        for faculty in roster
        if needle in faculty.name.lower()
        or needle in faculty.department.lower()
        or needle in faculty.subject.lower()
    ]


def find_faculty(roster: list[FacultyRecord], name: str) -> FacultyRecord | None:
    """Return the first record whose name contains `name` (case-insensitive)."""
    needle = name.strip().lower()
    for faculty in roster:
        if needle in faculty.name.lower():
            return faculty
    return None
