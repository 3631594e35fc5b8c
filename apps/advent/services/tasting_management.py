"""Tasting service - private per-member notes for a calendar day."""

from datetime import date
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError

from apps.accounts.models import User
from apps.advent.models import TastingEntry

from .day_management import get_open_day
from .exceptions import InvalidRatingError


def get_my_tasting(*, day_id: UUID, user: User, today: date) -> Optional[TastingEntry]:
    """
    Return the user's own tasting for the day, or None.

    Raises:
        DayNotFoundError: If day doesn't exist
        DayLockedError: If the day is still locked for this user
    """
    day = get_open_day(day_id=day_id, user=user, today=today)
    return TastingEntry.objects.filter(calendar_day=day, user=user).first()


@transaction.atomic
def save_tasting(
    *,
    day_id: UUID,
    user: User,
    today: date,
    rating: Optional[int] = None,
    tasting_notes: str = '',
    would_buy_again: Optional[bool] = None
) -> TastingEntry:
    """
    Create or replace the user's tasting for a day.

    There is at most one entry per (day, user); saving again overwrites it.

    Args:
        day_id: UUID of the calendar day
        user: Author of the notes
        today: Current calendar date
        rating: 1-10, or None for unrated
        tasting_notes: Free-form notes
        would_buy_again: Optional yes/no

    Returns:
        The saved TastingEntry

    Raises:
        DayNotFoundError: If day doesn't exist
        DayLockedError: If the day is still locked for this user
        InvalidRatingError: If rating is outside 1..10
    """
    if rating is not None and not 1 <= rating <= 10:
        raise InvalidRatingError("Rating must be between 1 and 10")

    day = get_open_day(day_id=day_id, user=user, today=today)

    values = {
        'rating': rating,
        'tasting_notes': tasting_notes or '',
        'would_buy_again': would_buy_again,
    }

    try:
        with transaction.atomic():
            entry, _ = TastingEntry.objects.update_or_create(
                calendar_day=day,
                user=user,
                defaults=values
            )
    except IntegrityError:
        # Concurrent first save for the same (day, user)
        entry = TastingEntry.objects.select_for_update().get(calendar_day=day, user=user)
        for key, value in values.items():
            setattr(entry, key, value)
        entry.save(update_fields=[*values, 'updated_at'])

    return entry
