# ==========================================
# apps/settlements/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class Settlement(models.Model):
    """Whether a participant has paid or received their settle-up balance."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey('events.Event', on_delete=models.CASCADE, related_name='settlements')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='settlements')
    has_settled = models.BooleanField(default=False)
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0'))]
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'settlements'
        unique_together = [['event', 'user']]
        ordering = ['event', 'user']

    def __str__(self):
        state = 'settled' if self.has_settled else 'open'
        return f"{self.user} - {self.event} ({state})"
