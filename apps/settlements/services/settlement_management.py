"""
Settlement management service.

Fetches event snapshots for the calculator and records who has settled.
"""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError

from apps.accounts.models import User
from apps.events.models import Event
from apps.events.services import get_member_user_ids
from apps.bottles.models import BottleSubmission
from apps.bottles.services import get_submission_user_ids
from apps.settlements.models import Settlement

from .settlement_calculator import derive_participants, summarize_settle_up, SettleUpSummary
from .exceptions import (
    EventNotFoundError,
    UserNotFoundError,
    NotParticipantError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)


def _get_event(event_id: UUID) -> Event:
    try:
        return Event.objects.get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")


def get_event_participants(*, event_id: UUID) -> list:
    """Members plus anyone who submitted a bottle, in first-seen order."""
    return derive_participants(
        get_member_user_ids(event_id=event_id),
        get_submission_user_ids(event_id=event_id),
    )


def get_settle_up_summary(*, event_id: UUID, viewer: User) -> SettleUpSummary:
    """
    Compute the settle-up ledger of an event.

    Open to admins and to the event's participants.

    Args:
        event_id: UUID of the event
        viewer: Requesting user

    Returns:
        SettleUpSummary with one entry per participant

    Raises:
        EventNotFoundError: If event doesn't exist
        InsufficientPermissionsError: If viewer neither participates nor administers
    """
    event = _get_event(event_id)
    participants = get_event_participants(event_id=event.id)

    if not event.is_admin(viewer) and viewer.id not in participants:
        raise InsufficientPermissionsError("Only participants can view the settle-up")

    submissions = BottleSubmission.objects.filter(event=event).order_by('created_at').values('user_id', 'price')
    settlements = Settlement.objects.filter(event=event).values('user_id', 'has_settled')

    return summarize_settle_up(
        participants=participants,
        submissions=list(submissions),
        settlements=list(settlements),
    )


def get_participant_profiles(*, user_ids) -> dict:
    """Map of user ID to User for rendering ledger rows."""
    return User.objects.in_bulk(list(user_ids))


@transaction.atomic
def toggle_settlement(
    *,
    event_id: UUID,
    user_id: UUID,
    has_settled: bool,
    updated_by: User,
    amount: Optional[Decimal] = None
) -> Settlement:
    """
    Mark a participant as settled or unsettled (admin only).

    Upserts the single settlement record of (event, user). The stored
    amount is only changed when one is given.

    Args:
        event_id: UUID of the event
        user_id: Participant to update
        has_settled: New settled flag
        updated_by: Admin performing the change
        amount: Optional amount paid or received

    Returns:
        The saved Settlement

    Raises:
        EventNotFoundError: If event doesn't exist
        InsufficientPermissionsError: If updated_by is not an admin
        UserNotFoundError: If user doesn't exist
        NotParticipantError: If user takes no part in the event
    """
    event = _get_event(event_id)

    if not event.is_admin(updated_by):
        raise InsufficientPermissionsError("Only admins can update settlements")

    try:
        user = User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User with ID {user_id} not found")

    if user.id not in get_event_participants(event_id=event.id):
        raise NotParticipantError(f"{user.get_display_name()} is not part of {event.name}")

    values = {'has_settled': has_settled}
    if amount is not None:
        values['amount'] = amount

    try:
        with transaction.atomic():
            settlement, _ = Settlement.objects.update_or_create(
                event=event,
                user=user,
                defaults=values
            )
    except IntegrityError:
        # Concurrent first toggle for the same (event, user)
        settlement = Settlement.objects.select_for_update().get(event=event, user=user)
        for key, value in values.items():
            setattr(settlement, key, value)
        settlement.save(update_fields=[*values, 'updated_at'])

    logger.info(
        "Settlement of %s for %s set to %s by %s",
        user.email,
        event.name,
        'settled' if has_settled else 'unsettled',
        updated_by.email,
    )

    return settlement
