"""
Bottle submission service.

One submission per (event, user) is enforced here and by a conditional
unique constraint; unassigned bottles (no user) are unrestricted.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import Q, QuerySet

from apps.accounts.models import User
from apps.events.models import Event, MemberRole
from apps.bottles.models import BottleSubmission

from .exceptions import (
    SubmissionNotFoundError,
    DuplicateSubmissionError,
    EventNotFoundError,
    UserNotFoundError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    'whiskey_name',
    'distillery',
    'country',
    'style',
    'abv',
    'volume',
    'price',
    'purchase_url',
    'notes',
)


def _resolve_owner(*, event: Event, submitted_by: User, owner_id: Optional[UUID], unassigned: bool) -> Optional[User]:
    is_admin = event.is_admin(submitted_by)

    if unassigned:
        if not is_admin:
            raise InsufficientPermissionsError("Only admins can add unassigned bottles")
        return None

    if owner_id is None or str(owner_id) == str(submitted_by.id):
        return submitted_by

    if not is_admin:
        raise InsufficientPermissionsError("Only admins can submit bottles for other members")

    try:
        return User.objects.get(id=owner_id, is_active=True)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User with ID {owner_id} not found")


@transaction.atomic
def submit_bottle(
    *,
    event_id: UUID,
    submitted_by: User,
    whiskey_name: str,
    owner_id: Optional[UUID] = None,
    unassigned: bool = False,
    **details
) -> BottleSubmission:
    """
    Create a bottle submission for an event.

    Members submit their own bottle. Admins may also submit on behalf of
    another member or add a bottle with no owner.

    Args:
        event_id: UUID of the event
        submitted_by: User performing the submission
        whiskey_name: Name of the whiskey (required)
        owner_id: Submit on behalf of this user (admin only)
        unassigned: Create without an owner (admin only)
        **details: Optional descriptive fields (distillery, country, style,
            abv, volume, price, purchase_url, notes)

    Returns:
        Created BottleSubmission instance

    Raises:
        EventNotFoundError: If event doesn't exist
        InsufficientPermissionsError: If a non-admin submits for someone else
        UserNotFoundError: If owner_id doesn't exist
        DuplicateSubmissionError: If the owner already has a submission
    """
    try:
        event = Event.objects.get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    owner = _resolve_owner(event=event, submitted_by=submitted_by, owner_id=owner_id, unassigned=unassigned)

    if owner is not None and BottleSubmission.objects.filter(event=event, user=owner).exists():
        raise DuplicateSubmissionError(
            f"{owner.get_display_name()} already has a bottle for {event.name}. "
            "Update the existing submission instead."
        )

    fields = {key: value for key, value in details.items() if key in EDITABLE_FIELDS}

    try:
        submission = BottleSubmission.objects.create(
            event=event,
            user=owner,
            whiskey_name=whiskey_name,
            **fields
        )
    except IntegrityError:
        raise DuplicateSubmissionError("A bottle for this member already exists for the event")

    return submission


@transaction.atomic
def update_submission(
    *,
    submission_id: UUID,
    user: User,
    owner_id: Optional[UUID] = None,
    **changes
) -> BottleSubmission:
    """
    Update a bottle submission (owner or admin).

    Admins may reassign the bottle to another member via owner_id.

    Raises:
        SubmissionNotFoundError: If submission doesn't exist
        InsufficientPermissionsError: If user is neither owner nor admin
        UserNotFoundError: If owner_id doesn't exist
        DuplicateSubmissionError: If reassignment collides with an existing bottle
    """
    try:
        submission = (
            BottleSubmission.objects
            .select_for_update(of=('self',))
            .select_related('event')
            .get(id=submission_id)
        )
    except BottleSubmission.DoesNotExist:
        raise SubmissionNotFoundError(f"Bottle submission with ID {submission_id} not found")

    is_owner = submission.user_id is not None and submission.user_id == user.id
    is_admin = submission.event.is_admin(user)
    if not (is_owner or is_admin):
        raise InsufficientPermissionsError("You can only edit your own bottle")

    update_fields = []

    for key, value in changes.items():
        if key in EDITABLE_FIELDS:
            setattr(submission, key, value)
            update_fields.append(key)

    if owner_id is not None:
        if not is_admin:
            raise InsufficientPermissionsError("Only admins can reassign bottles")
        try:
            owner = User.objects.get(id=owner_id, is_active=True)
        except User.DoesNotExist:
            raise UserNotFoundError(f"User with ID {owner_id} not found")

        clash = (
            BottleSubmission.objects
            .filter(event_id=submission.event_id, user=owner)
            .exclude(id=submission.id)
            .exists()
        )
        if clash:
            raise DuplicateSubmissionError(
                f"{owner.get_display_name()} already has a bottle for this event"
            )
        submission.user = owner
        update_fields.append('user')

    if update_fields:
        submission.save(update_fields=update_fields)

    return submission


def delete_submission(*, submission_id: UUID, user: User) -> None:
    """
    Delete a bottle submission (admin only).

    Calendar days pointing at it become unassigned.

    Raises:
        SubmissionNotFoundError: If submission doesn't exist
        InsufficientPermissionsError: If user is not an admin
    """
    try:
        submission = BottleSubmission.objects.select_related('event').get(id=submission_id)
    except BottleSubmission.DoesNotExist:
        raise SubmissionNotFoundError(f"Bottle submission with ID {submission_id} not found")

    if not submission.event.is_admin(user):
        raise InsufficientPermissionsError("Only admins can delete bottles")

    submission.delete()

    logger.info("Bottle submission %s deleted by %s", submission_id, user.email)


def get_user_submission(*, event_id: UUID, user: User) -> Optional[BottleSubmission]:
    """Return the user's bottle for the event, if any."""
    return BottleSubmission.objects.filter(event_id=event_id, user=user).first()


def get_event_submissions(*, event_id: UUID, viewer: User) -> QuerySet[BottleSubmission]:
    """
    Submissions visible to the viewer.

    Admins see every bottle of the event; members only their own, so
    the line-up stays a surprise until each day is revealed.
    """
    queryset = (
        BottleSubmission.objects
        .filter(event_id=event_id)
        .select_related('user')
        .order_by('created_at')
    )
    event = Event.objects.filter(id=event_id).first()
    if event is not None and event.is_admin(viewer):
        return queryset
    return queryset.filter(user=viewer)


def get_visible_submissions(*, viewer: User) -> QuerySet[BottleSubmission]:
    """
    Submissions the viewer may open across all events.

    Club admins see everything; others see their own bottles plus every
    bottle of events where their membership carries an admin override.
    """
    queryset = BottleSubmission.objects.select_related('user', 'event')
    if viewer.is_club_admin:
        return queryset
    return queryset.filter(
        Q(user=viewer)
        | Q(event__memberships__user=viewer, event__memberships__role_override=MemberRole.ADMIN)
    ).distinct()


def get_submission_user_ids(*, event_id: UUID) -> list:
    """Owner IDs of the event's submissions (None for unassigned bottles)."""
    return list(
        BottleSubmission.objects
        .filter(event_id=event_id)
        .order_by('created_at')
        .values_list('user_id', flat=True)
    )
