"""
Membership management service.

Handles event membership operations with concurrency protection.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.events.models import Event, EventMembership

from .exceptions import (
    EventNotFoundError,
    AlreadyMemberError,
    NotMemberError,
    UserNotFoundError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)


@transaction.atomic
def add_member(
    *,
    event_id: UUID,
    user_id: UUID,
    added_by: User,
    role_override: Optional[str] = None
) -> EventMembership:
    """
    Add a user to an event (admin only).

    Uses row-level locking on the event so concurrent adds of the
    same user cannot both pass the membership check.

    Args:
        event_id: UUID of the event
        user_id: UUID of the user to add
        added_by: Admin performing the add
        role_override: Optional per-event role

    Returns:
        Created EventMembership instance

    Raises:
        EventNotFoundError: If event doesn't exist
        InsufficientPermissionsError: If added_by is not an admin
        UserNotFoundError: If user doesn't exist
        AlreadyMemberError: If user is already a member
    """
    try:
        event = Event.objects.select_for_update().get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    if not event.is_admin(added_by):
        raise InsufficientPermissionsError("Only admins can add members")

    try:
        user = User.objects.get(id=user_id, is_active=True)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User with ID {user_id} not found")

    if event.has_member(user):
        raise AlreadyMemberError(f"{user.get_display_name()} is already a member of {event.name}")

    try:
        membership = EventMembership.objects.create(
            event=event,
            user=user,
            role_override=role_override
        )
    except IntegrityError:
        # Database constraint caught duplicate membership
        raise AlreadyMemberError(f"{user.get_display_name()} is already a member of {event.name}")

    logger.info("User %s added to event %s by %s", user.email, event.id, added_by.email)
    return membership


@transaction.atomic
def remove_member(*, event_id: UUID, user_id: UUID, removed_by: User) -> None:
    """
    Remove a user from an event (admin only).

    Their bottle submission, if any, stays in place and keeps them a
    settle-up participant.

    Raises:
        EventNotFoundError: If event doesn't exist
        InsufficientPermissionsError: If removed_by is not an admin
        NotMemberError: If target user is not a member
    """
    try:
        event = Event.objects.get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    if not event.is_admin(removed_by):
        raise InsufficientPermissionsError("Only admins can remove members")

    try:
        membership = (
            EventMembership.objects
            .select_for_update()
            .get(event=event, user_id=user_id)
        )
    except EventMembership.DoesNotExist:
        raise NotMemberError("User is not a member of this event")

    membership.delete()
    logger.info("User %s removed from event %s by %s", user_id, event.id, removed_by.email)


def get_event_members(*, event_id: UUID) -> QuerySet[EventMembership]:
    """
    Get all memberships of an event.

    Raises:
        EventNotFoundError: If event doesn't exist
    """
    if not Event.objects.filter(id=event_id).exists():
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    return (
        EventMembership.objects
        .filter(event_id=event_id)
        .select_related('user')
        .order_by('created_at')
    )


def get_member_user_ids(*, event_id: UUID) -> list:
    """User IDs holding a membership in the event, in join order."""
    return list(
        EventMembership.objects
        .filter(event_id=event_id)
        .order_by('created_at')
        .values_list('user_id', flat=True)
    )
