# ==========================================
# apps/events/models.py
# ==========================================

from django.db import models
import uuid


class EventStatus(models.TextChoices):
    PLANNED = 'planned', 'Planned'
    ACTIVE = 'active', 'Active'
    COMPLETED = 'completed', 'Completed'


class MemberRole(models.TextChoices):
    USER = 'user', 'Member'
    ADMIN = 'admin', 'Admin'


class Event(models.Model):
    """One advent calendar season (one per club-year)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    year = models.PositiveIntegerField(unique=True)
    start_date = models.DateField()
    end_date = models.DateField()
    description = models.TextField(blank=True)
    # Informational only, never enforced by reveal or settle-up logic
    status = models.CharField(max_length=20, choices=EventStatus.choices, default=EventStatus.PLANNED)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_events'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'events'
        ordering = ['-year']

    def __str__(self):
        return f"{self.name} ({self.year})"

    def has_member(self, user):
        return self.memberships.filter(user=user).exists()

    def is_admin(self, user):
        """Club admins, or members with an admin override for this event."""
        if user.is_club_admin:
            return True
        return self.memberships.filter(user=user, role_override=MemberRole.ADMIN).exists()


class EventMembership(models.Model):
    """User participation in an event."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name='memberships')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='event_memberships')
    role_override = models.CharField(max_length=10, choices=MemberRole.choices, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'event_memberships'
        unique_together = [['event', 'user']]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.user.get_display_name()} in {self.event.name}"


class Announcement(models.Model):
    """Organizer announcement for an event."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name='announcements')
    title = models.CharField(max_length=200)
    body = models.TextField(blank=True)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        related_name='announcements'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'announcements'
        ordering = ['-created_at']

    def __str__(self):
        return self.title
