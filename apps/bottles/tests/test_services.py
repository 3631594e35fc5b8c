"""
Service layer unit tests for bottles app.

Tests cover:
- One submission per (event, user)
- Admin-only unassigned and on-behalf submissions
- Owner/admin edit rules
- Visibility of submissions
"""

import pytest
from datetime import date
from decimal import Decimal
from uuid import uuid4
from django.db import IntegrityError, transaction

from apps.events.services import create_event
from apps.bottles.models import BottleSubmission
from apps.bottles.services import (
    submit_bottle,
    update_submission,
    delete_submission,
    get_user_submission,
    get_event_submissions,
    get_submission_user_ids,
)
from apps.bottles.services.exceptions import (
    SubmissionNotFoundError,
    DuplicateSubmissionError,
    EventNotFoundError,
    UserNotFoundError,
    InsufficientPermissionsError,
)


# =============================================================================
# Submission Service Tests
# =============================================================================

@pytest.mark.django_db
class TestSubmitBottle:
    """Tests for submit_bottle()."""

    def test_member_submits_own_bottle(self, event, member_user):
        """Members submit for themselves."""
        bottle = submit_bottle(
            event_id=event.id,
            submitted_by=member_user,
            whiskey_name='Ardbeg 10',
            price=Decimal('49.90'),
            abv=Decimal('46.0'),
        )

        assert bottle.user == member_user
        assert bottle.price == Decimal('49.90')

    def test_second_submission_rejected(self, event, member_user, member_bottle):
        """Only one bottle per member per event."""
        with pytest.raises(DuplicateSubmissionError):
            submit_bottle(event_id=event.id, submitted_by=member_user, whiskey_name='Another')

    def test_database_enforces_uniqueness(self, event, member_user, member_bottle):
        """The constraint holds even when the service is bypassed."""
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                BottleSubmission.objects.create(event=event, user=member_user, whiskey_name='Sneaky')

    def test_admin_adds_unassigned_bottles(self, event, admin_user):
        """Unassigned bottles are not limited to one."""
        first = submit_bottle(event_id=event.id, submitted_by=admin_user, whiskey_name='Mystery 1', unassigned=True)
        second = submit_bottle(event_id=event.id, submitted_by=admin_user, whiskey_name='Mystery 2', unassigned=True)

        assert first.user is None
        assert second.user is None

    def test_member_cannot_add_unassigned(self, event, member_user):
        """Unassigned bottles are admin only."""
        with pytest.raises(InsufficientPermissionsError):
            submit_bottle(event_id=event.id, submitted_by=member_user, whiskey_name='X', unassigned=True)

    def test_admin_submits_for_member(self, event, admin_user, other_member):
        """Admins may submit on behalf of a member."""
        bottle = submit_bottle(
            event_id=event.id,
            submitted_by=admin_user,
            whiskey_name='Bunnahabhain 12',
            owner_id=other_member.id,
        )

        assert bottle.user == other_member

    def test_member_cannot_submit_for_others(self, event, member_user, other_member):
        """Members cannot submit for someone else."""
        with pytest.raises(InsufficientPermissionsError):
            submit_bottle(
                event_id=event.id,
                submitted_by=member_user,
                whiskey_name='X',
                owner_id=other_member.id,
            )

    def test_unknown_owner(self, event, admin_user):
        """Unknown owners raise UserNotFoundError."""
        with pytest.raises(UserNotFoundError):
            submit_bottle(event_id=event.id, submitted_by=admin_user, whiskey_name='X', owner_id=uuid4())

    def test_unknown_event(self, member_user):
        """Unknown events raise EventNotFoundError."""
        with pytest.raises(EventNotFoundError):
            submit_bottle(event_id=uuid4(), submitted_by=member_user, whiskey_name='X')


@pytest.mark.django_db
class TestUpdateSubmission:
    """Tests for update_submission() and delete_submission()."""

    def test_owner_updates(self, member_bottle, member_user):
        """Owners edit their bottle."""
        updated = update_submission(
            submission_id=member_bottle.id,
            user=member_user,
            notes='Bought in Portree',
            price=Decimal('47.00'),
        )

        assert updated.notes == 'Bought in Portree'
        assert updated.price == Decimal('47.00')

    def test_other_member_cannot_update(self, member_bottle, other_member):
        """Other members cannot edit."""
        with pytest.raises(InsufficientPermissionsError):
            update_submission(submission_id=member_bottle.id, user=other_member, notes='Mine')

    def test_admin_reassigns_unassigned_bottle(self, event, admin_user, other_member):
        """Admins hand an unassigned bottle to a member."""
        bottle = submit_bottle(event_id=event.id, submitted_by=admin_user, whiskey_name='Orphan', unassigned=True)

        updated = update_submission(submission_id=bottle.id, user=admin_user, owner_id=other_member.id)

        assert updated.user == other_member

    def test_reassign_collision(self, admin_user, member_bottle, other_bottle, other_member):
        """Reassigning onto a member who already has a bottle fails."""
        with pytest.raises(DuplicateSubmissionError):
            update_submission(submission_id=member_bottle.id, user=admin_user, owner_id=other_member.id)

    def test_member_cannot_reassign(self, member_bottle, member_user, other_member):
        """Owners cannot give their bottle away."""
        with pytest.raises(InsufficientPermissionsError):
            update_submission(submission_id=member_bottle.id, user=member_user, owner_id=other_member.id)

    def test_update_missing(self, admin_user):
        """Unknown submissions raise SubmissionNotFoundError."""
        with pytest.raises(SubmissionNotFoundError):
            update_submission(submission_id=uuid4(), user=admin_user, notes='x')

    def test_delete_admin_only(self, member_bottle, member_user, admin_user):
        """Only admins delete bottles."""
        with pytest.raises(InsufficientPermissionsError):
            delete_submission(submission_id=member_bottle.id, user=member_user)

        delete_submission(submission_id=member_bottle.id, user=admin_user)
        assert not BottleSubmission.objects.filter(id=member_bottle.id).exists()

    def test_delete_unassigns_day(self, event, member_bottle, admin_user):
        """Days pointing at a deleted bottle become empty."""
        day = event.calendar_days.get(day_number=1)
        day.bottle_submission = member_bottle
        day.save()

        delete_submission(submission_id=member_bottle.id, user=admin_user)

        day.refresh_from_db()
        assert day.bottle_submission is None


@pytest.mark.django_db
class TestSubmissionQueries:
    """Tests for lookup helpers."""

    def test_members_only_see_their_own(self, event, member_user, member_bottle, other_bottle):
        """Bottle identities stay hidden from other members."""
        assert list(get_event_submissions(event_id=event.id, viewer=member_user)) == [member_bottle]

    def test_admins_see_everything(self, event, admin_user, member_bottle, other_bottle):
        """Admins see every bottle."""
        assert set(get_event_submissions(event_id=event.id, viewer=admin_user)) == {member_bottle, other_bottle}

    def test_get_user_submission(self, event, member_user, other_member, member_bottle):
        """Returns the user's bottle or None."""
        assert get_user_submission(event_id=event.id, user=member_user) == member_bottle
        assert get_user_submission(event_id=event.id, user=other_member) is None

    def test_submission_user_ids_include_unassigned(self, event, admin_user, member_bottle):
        """Unassigned bottles show up as None."""
        submit_bottle(event_id=event.id, submitted_by=admin_user, whiskey_name='Orphan', unassigned=True)

        user_ids = get_submission_user_ids(event_id=event.id)

        assert member_bottle.user_id in user_ids
        assert None in user_ids


@pytest.mark.django_db
class TestEventAdminOverride:
    """Members with an admin override manage the bottles of their event."""

    def test_sees_every_bottle(self, event, event_admin, member_bottle, other_bottle):
        assert event.is_admin(event_admin)
        assert set(get_event_submissions(event_id=event.id, viewer=event_admin)) == {member_bottle, other_bottle}

    def test_adds_unassigned_and_reassigns(self, event, event_admin, other_member):
        bottle = submit_bottle(event_id=event.id, submitted_by=event_admin, whiskey_name='Orphan', unassigned=True)

        bottle = update_submission(submission_id=bottle.id, user=event_admin, owner_id=other_member.id)

        assert bottle.user == other_member

    def test_edits_and_deletes_other_bottle(self, event_admin, other_bottle):
        update_submission(submission_id=other_bottle.id, user=event_admin, notes='Checked')
        delete_submission(submission_id=other_bottle.id, user=event_admin)

        assert not BottleSubmission.objects.filter(id=other_bottle.id).exists()

    def test_override_is_scoped_to_its_event(self, event_admin, admin_user):
        """The override grants nothing in other events."""
        later = create_event(
            name='Whiskey Advent 2025',
            year=2025,
            start_date=date(2025, 12, 1),
            end_date=date(2025, 12, 24),
            created_by=admin_user,
        )
        foreign = BottleSubmission.objects.create(event=later, whiskey_name='Elsewhere')

        assert list(get_event_submissions(event_id=later.id, viewer=event_admin)) == []
        with pytest.raises(InsufficientPermissionsError):
            delete_submission(submission_id=foreign.id, user=event_admin)
