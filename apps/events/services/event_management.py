"""
Event management service.

Handles event CRUD operations with proper transaction safety.
Creating an event also lays out its calendar days.
"""

import logging
from datetime import date
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import Q, QuerySet

from apps.accounts.models import User
from apps.events.models import Event, EventStatus
from apps.advent.services import create_days_for_event

from .exceptions import (
    EventNotFoundError,
    DuplicateEventYearError,
    InvalidEventDatesError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)


def _validate_dates(start_date: date, end_date: date) -> None:
    if end_date < start_date:
        raise InvalidEventDatesError("Event end date must not be before its start date")


def create_event(
    *,
    name: str,
    year: int,
    start_date: date,
    end_date: date,
    created_by: User,
    description: str = '',
    status: str = EventStatus.PLANNED
) -> Event:
    """
    Create a new event and its calendar days (admin only).

    This is a multi-step operation wrapped in a transaction:
    1. Create the event
    2. Create the 24 calendar days, one reveal date per day from start_date

    Args:
        name: Event name
        year: Club year (one event per year)
        start_date: First reveal date
        end_date: Last day of the event
        created_by: Admin creating the event
        description: Optional description
        status: Informational status (default planned)

    Returns:
        Created Event instance

    Raises:
        InsufficientPermissionsError: If created_by is not a club admin
        InvalidEventDatesError: If end_date is before start_date
        DuplicateEventYearError: If an event already exists for the year
    """
    if not created_by.is_club_admin:
        raise InsufficientPermissionsError("Only admins can create events")

    _validate_dates(start_date, end_date)

    if Event.objects.filter(year=year).exists():
        raise DuplicateEventYearError(f"An event already exists for {year}")

    try:
        with transaction.atomic():
            event = Event.objects.create(
                name=name,
                year=year,
                start_date=start_date,
                end_date=end_date,
                description=description,
                status=status,
                created_by=created_by
            )
            create_days_for_event(event=event)
    except IntegrityError:
        raise DuplicateEventYearError(f"An event already exists for {year}")

    logger.info("Event %s created for %s by %s", event.id, year, created_by.email)
    return event


def get_event_by_id(*, event_id: UUID) -> Event:
    """
    Get an event by ID.

    Raises:
        EventNotFoundError: If event doesn't exist
    """
    try:
        return Event.objects.select_related('created_by').get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")


@transaction.atomic
def update_event(
    *,
    event_id: UUID,
    user: User,
    name: Optional[str] = None,
    description: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    status: Optional[str] = None
) -> Event:
    """
    Update event details (admin only).

    Reveal dates of existing days are left alone.

    Raises:
        EventNotFoundError: If event doesn't exist
        InsufficientPermissionsError: If user is not an admin
        InvalidEventDatesError: If resulting dates are inverted
    """
    try:
        event = Event.objects.select_for_update().get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    if not event.is_admin(user):
        raise InsufficientPermissionsError("Only admins can update events")

    update_fields = []

    if name is not None:
        event.name = name
        update_fields.append('name')
    if description is not None:
        event.description = description
        update_fields.append('description')
    if start_date is not None:
        event.start_date = start_date
        update_fields.append('start_date')
    if end_date is not None:
        event.end_date = end_date
        update_fields.append('end_date')
    if status is not None:
        event.status = status
        update_fields.append('status')

    _validate_dates(event.start_date, event.end_date)

    if update_fields:
        event.save(update_fields=update_fields)

    return event


@transaction.atomic
def delete_event(*, event_id: UUID, user: User) -> None:
    """
    Delete an event and everything attached to it (admin only).

    Raises:
        EventNotFoundError: If event doesn't exist
        InsufficientPermissionsError: If user is not a club admin
    """
    try:
        event = Event.objects.select_for_update().get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    if not user.is_club_admin:
        raise InsufficientPermissionsError("Only admins can delete events")

    event.delete()
    logger.info("Event %s deleted by %s", event_id, user.email)


def get_current_event(*, today: date) -> Optional[Event]:
    """Return the event for today's year, or None if none exists."""
    return Event.objects.filter(year=today.year).first()


def get_past_events(*, today: date) -> QuerySet[Event]:
    """Events from earlier years plus any marked completed."""
    return Event.objects.filter(
        Q(year__lt=today.year) | Q(status=EventStatus.COMPLETED)
    ).order_by('-year')
