# ==========================================
# apps/bottles/models.py
# ==========================================

from django.db import models
from django.db.models import Q
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid


class BottleSubmission(models.Model):
    """A whiskey contributed to an event by a member (or left unassigned)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey('events.Event', on_delete=models.CASCADE, related_name='bottle_submissions')
    # Null for bottles an admin entered without an owner yet
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='bottle_submissions'
    )

    whiskey_name = models.CharField(max_length=200)
    distillery = models.CharField(max_length=200, blank=True)
    country = models.CharField(max_length=100, blank=True)
    style = models.CharField(max_length=100, blank=True)
    abv = models.DecimalField(
        max_digits=4,
        decimal_places=1,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))]
    )
    volume = models.CharField(max_length=50, blank=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0'))]
    )
    purchase_url = models.URLField(max_length=500, blank=True)
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'bottle_submissions'
        constraints = [
            models.UniqueConstraint(
                fields=['event', 'user'],
                condition=Q(user__isnull=False),
                name='unique_submission_per_event_user',
            ),
        ]
        indexes = [
            models.Index(fields=['event', 'created_at'], name='bottles_event_created_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        owner = self.user.get_display_name() if self.user else 'Unassigned'
        return f"{self.whiskey_name} ({owner})"
