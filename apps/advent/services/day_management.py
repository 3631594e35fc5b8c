"""Calendar day service - grid, detail gating, assignment and reveals."""

import logging
from datetime import date
from typing import Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.events.models import Event
from apps.bottles.models import BottleSubmission
from apps.advent.models import CalendarDay, CALENDAR_DAYS

from .reveal_policy import (
    is_day_revealed,
    is_today,
    can_view_day_content,
    reveal_date_for_day,
)
from .statistics import get_tasting_summary
from .exceptions import (
    EventNotFoundError,
    DayNotFoundError,
    SubmissionNotFoundError,
    DayLockedError,
    BottleNotInEventError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)


def create_days_for_event(*, event: Event) -> list:
    """
    Create the 24 calendar days of a new event.

    Day N opens on start_date + (N - 1) days. Called from create_event
    inside its transaction.

    Returns:
        List of created CalendarDay instances, ordered by day_number
    """
    days = [
        CalendarDay(
            event=event,
            day_number=number,
            reveal_date=reveal_date_for_day(event.start_date, number),
        )
        for number in range(1, CALENDAR_DAYS + 1)
    ]
    return CalendarDay.objects.bulk_create(days)


def get_calendar_day(*, day_id: UUID) -> CalendarDay:
    try:
        return (
            CalendarDay.objects
            .select_related('event', 'bottle_submission__user')
            .get(id=day_id)
        )
    except CalendarDay.DoesNotExist:
        raise DayNotFoundError(f"Calendar day with ID {day_id} not found")


def get_open_day(*, day_id: UUID, user: User, today: date) -> CalendarDay:
    """
    Fetch a day whose content the user may see.

    Raises:
        DayNotFoundError: If day doesn't exist
        DayLockedError: If the day is still locked for this user
    """
    day = get_calendar_day(day_id=day_id)
    if not can_view_day_content(day, today, is_admin=day.event.is_admin(user)):
        raise DayLockedError(f"Day {day.day_number} is not revealed yet")
    return day


def get_calendar_for_viewer(*, event_id: UUID, user: User, today: date) -> list:
    """
    Build the calendar grid of an event.

    Grid entries never carry bottle details, so they are safe to show
    to every member regardless of reveal state.

    Args:
        event_id: UUID of the event
        user: Viewing user
        today: Current calendar date

    Returns:
        List of dicts with keys: id, day_number, reveal_date,
        is_revealed (derived), is_today, has_bottle, can_view

    Raises:
        EventNotFoundError: If event doesn't exist
    """
    try:
        event = Event.objects.get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    is_admin = event.is_admin(user)

    return [
        {
            'id': day.id,
            'day_number': day.day_number,
            'reveal_date': day.reveal_date,
            'is_revealed': is_day_revealed(day, today),
            'is_today': is_today(day.day_number, today),
            'has_bottle': day.has_bottle,
            'can_view': can_view_day_content(day, today, is_admin=is_admin),
        }
        for day in event.calendar_days.order_by('day_number')
    ]


def get_day_detail(*, day_id: UUID, user: User, today: date) -> dict:
    """
    Day detail for the viewer.

    Bottle details, the tasting aggregate and comments are only included
    when the viewer may see the day's content; otherwise the day is
    reported as locked with everything else empty.

    Returns:
        Dictionary with:
        - day: CalendarDay instance
        - is_revealed: bool - derived reveal state
        - locked: bool - True if content is withheld from this viewer
        - has_bottle: bool
        - bottle: BottleSubmission or None
        - tasting_summary: dict or None
        - comments: list of Comment

    Raises:
        DayNotFoundError: If day doesn't exist
    """
    day = get_calendar_day(day_id=day_id)
    viewable = can_view_day_content(day, today, is_admin=day.event.is_admin(user))

    detail = {
        'day': day,
        'is_revealed': is_day_revealed(day, today),
        'locked': not viewable,
        'has_bottle': day.has_bottle,
        'bottle': None,
        'tasting_summary': None,
        'comments': [],
    }

    if viewable:
        detail['bottle'] = day.bottle_submission
        detail['tasting_summary'] = get_tasting_summary(day_id=day.id)
        detail['comments'] = list(day.comments.select_related('user').order_by('created_at'))

    return detail


@transaction.atomic
def assign_bottle(
    *,
    day_id: UUID,
    bottle_submission_id: Optional[UUID],
    assigned_by: User
) -> CalendarDay:
    """
    Assign a bottle to a day, or clear the assignment (admin only).

    Args:
        day_id: UUID of the calendar day
        bottle_submission_id: Bottle to assign, None to unassign
        assigned_by: User performing the change

    Raises:
        DayNotFoundError: If day doesn't exist
        InsufficientPermissionsError: If user is not an event admin
        SubmissionNotFoundError: If the bottle doesn't exist
        BottleNotInEventError: If the bottle belongs to another event
    """
    try:
        day = (
            CalendarDay.objects
            .select_for_update()
            .select_related('event')
            .get(id=day_id)
        )
    except CalendarDay.DoesNotExist:
        raise DayNotFoundError(f"Calendar day with ID {day_id} not found")

    if not day.event.is_admin(assigned_by):
        raise InsufficientPermissionsError("Only admins can assign bottles to days")

    submission = None
    if bottle_submission_id is not None:
        try:
            submission = BottleSubmission.objects.get(id=bottle_submission_id)
        except BottleSubmission.DoesNotExist:
            raise SubmissionNotFoundError(
                f"Bottle submission with ID {bottle_submission_id} not found"
            )
        if submission.event_id != day.event_id:
            raise BottleNotInEventError("Bottle belongs to a different event")

    day.bottle_submission = submission
    day.save(update_fields=['bottle_submission'])

    logger.info(
        "Day %s of %s assigned to %s by %s",
        day.day_number,
        day.event.name,
        submission.whiskey_name if submission else 'nothing',
        assigned_by.email,
    )

    return day


@transaction.atomic
def set_day_revealed(*, day_id: UUID, is_revealed: bool, updated_by: User) -> CalendarDay:
    """
    Set or clear the manual reveal flag (admin only).

    Clearing the flag does not lock a day whose reveal date has passed.

    Raises:
        DayNotFoundError: If day doesn't exist
        InsufficientPermissionsError: If user is not an event admin
    """
    try:
        day = (
            CalendarDay.objects
            .select_for_update()
            .select_related('event')
            .get(id=day_id)
        )
    except CalendarDay.DoesNotExist:
        raise DayNotFoundError(f"Calendar day with ID {day_id} not found")

    if not day.event.is_admin(updated_by):
        raise InsufficientPermissionsError("Only admins can reveal days")

    day.is_revealed = is_revealed
    day.save(update_fields=['is_revealed'])

    logger.info(
        "Day %s of %s %s by %s",
        day.day_number,
        day.event.name,
        'revealed' if is_revealed else 'hidden',
        updated_by.email,
    )

    return day
