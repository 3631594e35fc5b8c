# ==========================================
# apps/advent/models.py
# ==========================================

from django.db import models
from django.db.models import Q
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid

CALENDAR_DAYS = 24


class CalendarDay(models.Model):
    """One of the 24 doors of an event's calendar."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey('events.Event', on_delete=models.CASCADE, related_name='calendar_days')
    day_number = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(CALENDAR_DAYS)]
    )
    bottle_submission = models.ForeignKey(
        'bottles.BottleSubmission',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='calendar_days'
    )
    reveal_date = models.DateField(null=True, blank=True)
    # Manual override; an admin may reveal a day before its date
    is_revealed = models.BooleanField(default=False)

    class Meta:
        db_table = 'calendar_days'
        constraints = [
            models.UniqueConstraint(fields=['event', 'day_number'], name='unique_day_per_event'),
            models.CheckConstraint(
                condition=Q(day_number__gte=1) & Q(day_number__lte=CALENDAR_DAYS),
                name='calendar_day_number_range',
            ),
        ]
        ordering = ['event', 'day_number']

    def __str__(self):
        return f"Day {self.day_number} - {self.event}"

    @property
    def has_bottle(self):
        return self.bottle_submission_id is not None


class TastingEntry(models.Model):
    """A member's private notes for one calendar day."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    calendar_day = models.ForeignKey(CalendarDay, on_delete=models.CASCADE, related_name='tastings')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='tastings')
    rating = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(10)]
    )
    tasting_notes = models.TextField(blank=True)
    would_buy_again = models.BooleanField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'tasting_entries'
        unique_together = [['calendar_day', 'user']]
        indexes = [
            models.Index(fields=['calendar_day', 'rating'], name='tastings_day_rating_idx'),
        ]
        ordering = ['-updated_at']

    def __str__(self):
        return f"{self.user} - Day {self.calendar_day.day_number}"


class Comment(models.Model):
    """Public discussion on a calendar day."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    calendar_day = models.ForeignKey(CalendarDay, on_delete=models.CASCADE, related_name='comments')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='comments')
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'comments'
        indexes = [
            models.Index(fields=['calendar_day', 'created_at'], name='comments_day_created_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.user} on Day {self.calendar_day.day_number}"
