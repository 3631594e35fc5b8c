"""
Reveal policy - decides whether a calendar day is visible to members.

A day is revealed when an admin flipped its manual flag, or when its
reveal date has been reached:

    visible = is_revealed OR (reveal_date is set AND reveal_date <= today)

Both sides are compared as calendar dates, never as timestamps, so a
day does not flicker around midnight in different timezones.

The transition locked -> revealed is one-way in time. Clearing the
manual flag after the reveal date has passed leaves the day revealed;
only days whose date is still in the future can be hidden again.

Nothing here touches the database. Callers pass the current date
explicitly (usually ``timezone.localdate()``).
"""

from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional, Union

DateLike = Union[date, datetime, str, None]


class DayState(str, Enum):
    LOCKED = 'locked'
    REVEALED = 'revealed'


def to_calendar_date(value: DateLike) -> Optional[date]:
    """
    Normalize a date-like value to a plain ``date``.

    Accepts ``date``, ``datetime`` (time of day is dropped) and ISO
    strings such as ``"2024-12-05"`` or ``"2024-12-05T18:00:00Z"``.
    Empty values return None.
    """
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def is_revealed_on(*, is_revealed: bool, reveal_date: DateLike, today: DateLike) -> bool:
    """
    Core reveal rule.

    Args:
        is_revealed: Manual admin override
        reveal_date: Date the day opens on its own (may be None)
        today: Current calendar date

    Returns:
        True if the day's content may be shown to members
    """
    if is_revealed:
        return True

    opens_on = to_calendar_date(reveal_date)
    if opens_on is None:
        return False

    current = to_calendar_date(today)
    if current is None:
        return False

    return opens_on <= current


def is_day_revealed(day, today: DateLike) -> bool:
    """Apply the reveal rule to anything with is_revealed and reveal_date."""
    return is_revealed_on(
        is_revealed=bool(getattr(day, 'is_revealed', False)),
        reveal_date=getattr(day, 'reveal_date', None),
        today=today,
    )


def day_state(day, today: DateLike) -> DayState:
    if is_day_revealed(day, today):
        return DayState.REVEALED
    return DayState.LOCKED


def can_view_day_content(day, today: DateLike, *, is_admin: bool) -> bool:
    """Admins can always open a day; members only once it is revealed."""
    return is_admin or is_day_revealed(day, today)


def reveal_date_for_day(start_date: DateLike, day_number: int) -> date:
    """Day 1 opens on the event's start date, day N on start + (N - 1) days."""
    return to_calendar_date(start_date) + timedelta(days=day_number - 1)


def is_today(day_number: int, today: DateLike) -> bool:
    """Highlight rule for the calendar grid: day N is "today" on December N."""
    current = to_calendar_date(today)
    if current is None:
        return False
    return current.month == 12 and current.day == day_number
