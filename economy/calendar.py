"""Game calendar arithmetic.

The calendar uses a fixed month-length table and has no leap years, so
February always has 28 days.
"""

from __future__ import annotations

from models.game_date import DAYS_IN_MONTH, GameDate

MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def days_in_month(month: int) -> int:
    """Number of days in *month* (1-12)."""
    return DAYS_IN_MONTH[month - 1]


def increment_date(date: GameDate, days: int) -> GameDate:
    """Return *date* advanced by *days*, rolling over months and years.

    Raises ``ValueError`` for a negative *days*; the calendar only moves
    forward.
    """
    if days < 0:
        raise ValueError(f"Cannot move the calendar backwards ({days} days).")

    year, month, day = date.year, date.month, date.day + days

    while day > days_in_month(month):
        day -= days_in_month(month)
        month += 1
        if month > 12:
            month = 1
            year += 1

    return GameDate(year=year, month=month, day=day)


def format_date(date: GameDate) -> str:
    """Human-readable date, e.g. ``Jan 1, 2000``."""
    return f"{MONTH_NAMES[date.month - 1]} {date.day}, {date.year}"
