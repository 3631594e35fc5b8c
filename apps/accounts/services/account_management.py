"""Account management service - profile updates and club roles."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet
from django.contrib.auth import get_user_model

from apps.accounts.models import UserRole
from .exceptions import (
    UserNotFoundError,
    InsufficientPermissionsError,
    CannotDemoteSelfError,
)

User = get_user_model()

logger = logging.getLogger(__name__)


def update_profile(
    *,
    user,
    name: Optional[str] = None,
    avatar_url: Optional[str] = None
):
    """
    Update the caller's own profile fields.

    Only fields that are passed are written.

    Args:
        user: User updating their profile
        name: New display name
        avatar_url: New avatar URL (blank clears it)

    Returns:
        Updated User instance
    """
    update_fields = []

    if name is not None:
        user.name = name
        update_fields.append('name')

    if avatar_url is not None:
        user.avatar_url = avatar_url
        update_fields.append('avatar_url')

    if update_fields:
        user.save(update_fields=update_fields)

    return user


def list_users() -> QuerySet:
    """Return all active profiles ordered by name."""
    return User.objects.filter(is_active=True).order_by('name', 'email')


@transaction.atomic
def update_user_role(*, user_id: UUID, role: str, updated_by):
    """
    Change a user's club role (admin only).

    Args:
        user_id: UUID of the user to change
        role: New role ('user' or 'admin')
        updated_by: Admin performing the change

    Returns:
        Updated User instance

    Raises:
        InsufficientPermissionsError: If updated_by is not a club admin
        UserNotFoundError: If user doesn't exist
        CannotDemoteSelfError: If an admin tries to drop their own admin role
    """
    if not updated_by.is_club_admin:
        raise InsufficientPermissionsError("Only admins can change user roles")

    if role not in UserRole.values:
        raise ValueError(f"Invalid role: {role}")

    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User with ID {user_id} not found")

    if user.pk == updated_by.pk and role != UserRole.ADMIN:
        raise CannotDemoteSelfError("Admins cannot remove their own admin role")

    user.role = role
    user.save(update_fields=['role'])

    logger.info("User %s role set to %s by %s", user.email, role, updated_by.email)
    return user
