"""Announcement management service - organizer posts per event."""

from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.events.models import Event, Announcement

from .exceptions import (
    EventNotFoundError,
    AnnouncementNotFoundError,
    InsufficientPermissionsError,
)


def create_announcement(
    *,
    event_id: UUID,
    title: str,
    created_by: User,
    body: str = ''
) -> Announcement:
    """
    Post an announcement to an event (admin only).

    Raises:
        EventNotFoundError: If event doesn't exist
        InsufficientPermissionsError: If created_by is not an admin
    """
    try:
        event = Event.objects.get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    if not event.is_admin(created_by):
        raise InsufficientPermissionsError("Only admins can post announcements")

    return Announcement.objects.create(
        event=event,
        title=title,
        body=body,
        created_by=created_by
    )


@transaction.atomic
def update_announcement(
    *,
    announcement_id: UUID,
    user: User,
    title: Optional[str] = None,
    body: Optional[str] = None
) -> Announcement:
    """
    Edit an announcement (admin only).

    Raises:
        AnnouncementNotFoundError: If announcement doesn't exist
        InsufficientPermissionsError: If user is not an admin
    """
    try:
        announcement = (
            Announcement.objects
            .select_for_update()
            .select_related('event')
            .get(id=announcement_id)
        )
    except Announcement.DoesNotExist:
        raise AnnouncementNotFoundError(f"Announcement with ID {announcement_id} not found")

    if not announcement.event.is_admin(user):
        raise InsufficientPermissionsError("Only admins can edit announcements")

    update_fields = []
    if title is not None:
        announcement.title = title
        update_fields.append('title')
    if body is not None:
        announcement.body = body
        update_fields.append('body')

    if update_fields:
        announcement.save(update_fields=update_fields)

    return announcement


def delete_announcement(*, announcement_id: UUID, user: User) -> None:
    """
    Delete an announcement (admin only).

    Raises:
        AnnouncementNotFoundError: If announcement doesn't exist
        InsufficientPermissionsError: If user is not an admin
    """
    try:
        announcement = Announcement.objects.select_related('event').get(id=announcement_id)
    except Announcement.DoesNotExist:
        raise AnnouncementNotFoundError(f"Announcement with ID {announcement_id} not found")

    if not announcement.event.is_admin(user):
        raise InsufficientPermissionsError("Only admins can delete announcements")

    announcement.delete()


def get_event_announcements(*, event_id: UUID) -> QuerySet[Announcement]:
    """Announcements for an event, newest first."""
    return (
        Announcement.objects
        .filter(event_id=event_id)
        .select_related('created_by')
        .order_by('-created_at')
    )
