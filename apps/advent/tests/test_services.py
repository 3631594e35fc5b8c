"""
Service layer unit tests for advent app.

Tests cover:
- Calendar grid derivation
- Day detail gating for members and admins
- Bottle assignment and manual reveals
- Tasting upserts and the tasting aggregate
- Comment permissions
"""

import pytest
from datetime import date
from uuid import uuid4
from django.db import IntegrityError, transaction
from django.db.models import Q

from apps.advent.models import CalendarDay, TastingEntry, Comment
from apps.events.models import MemberRole
from apps.bottles.models import BottleSubmission
from apps.advent.services import (
    get_calendar_for_viewer,
    get_day_detail,
    get_open_day,
    assign_bottle,
    set_day_revealed,
    get_my_tasting,
    save_tasting,
    get_tasting_summary,
    get_day_comments,
    post_comment,
    update_comment,
    delete_comment,
)
from apps.advent.services.exceptions import (
    EventNotFoundError,
    DayNotFoundError,
    DayLockedError,
    SubmissionNotFoundError,
    BottleNotInEventError,
    InvalidRatingError,
    EmptyCommentError,
    InsufficientPermissionsError,
)

BEFORE = date(2099, 11, 30)
DAY_ONE = date(2099, 12, 1)


# =============================================================================
# Day Model Tests
# =============================================================================

@pytest.mark.django_db
class TestCalendarDayConstraints:
    """Database constraints on calendar days."""

    def test_day_number_unique_per_event(self, event):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                CalendarDay.objects.create(event=event, day_number=1)

    def test_day_number_range(self, event):
        event.calendar_days.filter(day_number=24).delete()
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                CalendarDay.objects.create(event=event, day_number=25)

    def test_range_constraint_declares_condition(self):
        """Days are limited to 1..24 by a check constraint."""
        constraint = next(c for c in CalendarDay._meta.constraints if c.name == 'calendar_day_number_range')
        assert constraint.condition == Q(day_number__gte=1) & Q(day_number__lte=24)


# =============================================================================
# Calendar Grid Tests
# =============================================================================

@pytest.mark.django_db
class TestCalendarGrid:
    """Tests for get_calendar_for_viewer()."""

    def test_grid_has_24_days(self, event, member_user):
        grid = get_calendar_for_viewer(event_id=event.id, user=member_user, today=BEFORE)

        assert [cell['day_number'] for cell in grid] == list(range(1, 25))
        assert not any(cell['is_revealed'] for cell in grid)

    def test_grid_derives_reveal_from_date(self, event, member_user):
        """Days up to today are revealed."""
        grid = get_calendar_for_viewer(event_id=event.id, user=member_user, today=date(2099, 12, 3))

        revealed = [cell['day_number'] for cell in grid if cell['is_revealed']]
        assert revealed == [1, 2, 3]

    def test_grid_flags_today_and_bottles(self, event, member_user, locked_day):
        grid = get_calendar_for_viewer(event_id=event.id, user=member_user, today=date(2099, 12, 2))

        assert grid[0]['has_bottle'] is True
        assert grid[1]['has_bottle'] is False
        assert [cell['day_number'] for cell in grid if cell['is_today']] == [2]

    def test_admin_can_view_locked_days(self, event, admin_user, member_user):
        admin_grid = get_calendar_for_viewer(event_id=event.id, user=admin_user, today=BEFORE)
        member_grid = get_calendar_for_viewer(event_id=event.id, user=member_user, today=BEFORE)

        assert all(cell['can_view'] for cell in admin_grid)
        assert not any(cell['can_view'] for cell in member_grid)

    def test_unknown_event(self, member_user):
        with pytest.raises(EventNotFoundError):
            get_calendar_for_viewer(event_id=uuid4(), user=member_user, today=BEFORE)


# =============================================================================
# Day Detail Tests
# =============================================================================

@pytest.mark.django_db
class TestDayDetail:
    """Tests for get_day_detail()."""

    def test_locked_for_members(self, locked_day, member_user):
        """Locked days withhold the bottle and discussion."""
        detail = get_day_detail(day_id=locked_day.id, user=member_user, today=BEFORE)

        assert detail['locked'] is True
        assert detail['has_bottle'] is True
        assert detail['bottle'] is None
        assert detail['tasting_summary'] is None
        assert detail['comments'] == []

    def test_open_on_reveal_date(self, locked_day, member_user):
        detail = get_day_detail(day_id=locked_day.id, user=member_user, today=DAY_ONE)

        assert detail['locked'] is False
        assert detail['bottle'].whiskey_name == 'Springbank 15'
        assert detail['tasting_summary']['tasting_count'] == 0

    def test_admin_sees_locked_content(self, locked_day, admin_user):
        detail = get_day_detail(day_id=locked_day.id, user=admin_user, today=BEFORE)

        assert detail['locked'] is False
        assert detail['is_revealed'] is False
        assert detail['bottle'] is not None

    def test_revealed_day_without_bottle(self, event, member_user):
        """An empty revealed day is open but reports no bottle."""
        day = event.calendar_days.get(day_number=2)
        detail = get_day_detail(day_id=day.id, user=member_user, today=date(2099, 12, 2))

        assert detail['locked'] is False
        assert detail['has_bottle'] is False
        assert detail['bottle'] is None

    def test_unknown_day(self, member_user):
        with pytest.raises(DayNotFoundError):
            get_day_detail(day_id=uuid4(), user=member_user, today=BEFORE)


@pytest.mark.django_db
class TestOpenDay:
    """Tests for get_open_day(), the gate shared by tastings and comments."""

    def test_locked_for_members(self, locked_day, member_user):
        with pytest.raises(DayLockedError):
            get_open_day(day_id=locked_day.id, user=member_user, today=BEFORE)

    def test_open_on_reveal_date(self, locked_day, member_user):
        assert get_open_day(day_id=locked_day.id, user=member_user, today=DAY_ONE) == locked_day

    def test_open_for_event_admin_override(self, event, locked_day, member_user):
        """A membership admin override opens locked days like a club admin."""
        event.memberships.filter(user=member_user).update(role_override=MemberRole.ADMIN)

        assert get_open_day(day_id=locked_day.id, user=member_user, today=BEFORE) == locked_day

    def test_tastings_and_comments_share_the_gate(self, locked_day, member_user):
        with pytest.raises(DayLockedError):
            get_my_tasting(day_id=locked_day.id, user=member_user, today=BEFORE)
        with pytest.raises(DayLockedError):
            get_day_comments(day_id=locked_day.id, user=member_user, today=BEFORE)

    def test_unknown_day(self, member_user):
        with pytest.raises(DayNotFoundError):
            get_open_day(day_id=uuid4(), user=member_user, today=BEFORE)


# =============================================================================
# Day Administration Tests
# =============================================================================

@pytest.mark.django_db
class TestDayAdministration:
    """Tests for assign_bottle() and set_day_revealed()."""

    def test_assign_and_clear(self, event, bottle, admin_user):
        day = event.calendar_days.get(day_number=5)

        day = assign_bottle(day_id=day.id, bottle_submission_id=bottle.id, assigned_by=admin_user)
        assert day.bottle_submission == bottle

        day = assign_bottle(day_id=day.id, bottle_submission_id=None, assigned_by=admin_user)
        assert day.bottle_submission is None

    def test_member_cannot_assign(self, event, bottle, member_user):
        day = event.calendar_days.get(day_number=5)
        with pytest.raises(InsufficientPermissionsError):
            assign_bottle(day_id=day.id, bottle_submission_id=bottle.id, assigned_by=member_user)

    def test_bottle_from_other_event(self, event, past_event, admin_user):
        foreign = BottleSubmission.objects.create(event=past_event, whiskey_name='Elsewhere')
        day = event.calendar_days.get(day_number=5)

        with pytest.raises(BottleNotInEventError):
            assign_bottle(day_id=day.id, bottle_submission_id=foreign.id, assigned_by=admin_user)

    def test_unknown_bottle(self, event, admin_user):
        day = event.calendar_days.get(day_number=5)
        with pytest.raises(SubmissionNotFoundError):
            assign_bottle(day_id=day.id, bottle_submission_id=uuid4(), assigned_by=admin_user)

    def test_reveal_early(self, locked_day, admin_user, member_user):
        """A manual reveal opens the day before its date."""
        set_day_revealed(day_id=locked_day.id, is_revealed=True, updated_by=admin_user)

        detail = get_day_detail(day_id=locked_day.id, user=member_user, today=BEFORE)
        assert detail['locked'] is False

    def test_hide_after_date_is_noop(self, revealed_day, admin_user, member_user):
        """Clearing the flag does not lock a day whose date has passed."""
        set_day_revealed(day_id=revealed_day.id, is_revealed=False, updated_by=admin_user)

        assert get_day_detail(day_id=revealed_day.id, user=member_user, today=DAY_ONE)['locked'] is False
        assert get_day_detail(day_id=revealed_day.id, user=member_user, today=BEFORE)['locked'] is True

    def test_member_cannot_reveal(self, locked_day, member_user):
        with pytest.raises(InsufficientPermissionsError):
            set_day_revealed(day_id=locked_day.id, is_revealed=True, updated_by=member_user)


# =============================================================================
# Tasting Tests
# =============================================================================

@pytest.mark.django_db
class TestTastings:
    """Tests for save_tasting(), get_my_tasting() and get_tasting_summary()."""

    def test_save_creates_then_updates(self, revealed_day, member_user):
        """One entry per (day, user); saving again overwrites."""
        save_tasting(day_id=revealed_day.id, user=member_user, today=BEFORE, rating=6, tasting_notes='Brine')
        entry = save_tasting(day_id=revealed_day.id, user=member_user, today=BEFORE, rating=8, would_buy_again=True)

        assert TastingEntry.objects.filter(calendar_day=revealed_day, user=member_user).count() == 1
        assert entry.rating == 8
        assert entry.tasting_notes == ''
        assert entry.would_buy_again is True

    def test_locked_day_rejected(self, locked_day, member_user):
        with pytest.raises(DayLockedError):
            save_tasting(day_id=locked_day.id, user=member_user, today=BEFORE, rating=5)
        assert not TastingEntry.objects.exists()

    def test_admin_may_taste_early(self, locked_day, admin_user):
        entry = save_tasting(day_id=locked_day.id, user=admin_user, today=BEFORE, rating=7)
        assert entry.rating == 7

    @pytest.mark.parametrize('rating', [0, 11, -3])
    def test_rating_range(self, revealed_day, member_user, rating):
        with pytest.raises(InvalidRatingError):
            save_tasting(day_id=revealed_day.id, user=member_user, today=BEFORE, rating=rating)

    def test_unrated_entry(self, revealed_day, member_user):
        entry = save_tasting(day_id=revealed_day.id, user=member_user, today=BEFORE, tasting_notes='Notes only')
        assert entry.rating is None

    def test_my_tasting_is_private(self, revealed_day, member_user, other_member):
        save_tasting(day_id=revealed_day.id, user=member_user, today=BEFORE, rating=9)

        assert get_my_tasting(day_id=revealed_day.id, user=member_user, today=BEFORE).rating == 9
        assert get_my_tasting(day_id=revealed_day.id, user=other_member, today=BEFORE) is None

    def test_summary(self, revealed_day, member_user, other_member, admin_user):
        save_tasting(day_id=revealed_day.id, user=member_user, today=BEFORE, rating=8, would_buy_again=True)
        save_tasting(day_id=revealed_day.id, user=other_member, today=BEFORE, rating=6, would_buy_again=False)
        save_tasting(day_id=revealed_day.id, user=admin_user, today=BEFORE, tasting_notes='No score')

        summary = get_tasting_summary(day_id=revealed_day.id)

        assert summary['tasting_count'] == 3
        assert summary['rated_count'] == 2
        assert summary['avg_rating'] == 7.0
        assert summary['rating_distribution']['8'] == 1
        assert summary['rating_distribution']['10'] == 0
        assert summary['would_buy_again_count'] == 1
        assert summary['would_buy_again_pct'] == 50.0

    def test_empty_summary(self, revealed_day):
        summary = get_tasting_summary(day_id=revealed_day.id)

        assert summary['tasting_count'] == 0
        assert summary['avg_rating'] == 0
        assert summary['would_buy_again_pct'] == 0


# =============================================================================
# Comment Tests
# =============================================================================

@pytest.mark.django_db
class TestComments:
    """Tests for comment_management.py service functions."""

    def test_post_and_list(self, revealed_day, member_user, other_member):
        post_comment(day_id=revealed_day.id, user=member_user, content='  Lovely  ', today=BEFORE)
        post_comment(day_id=revealed_day.id, user=other_member, content='Agreed', today=BEFORE)

        comments = list(get_day_comments(day_id=revealed_day.id, user=member_user, today=BEFORE))
        assert {c.content for c in comments} == {'Lovely', 'Agreed'}

    def test_locked_day(self, locked_day, member_user):
        with pytest.raises(DayLockedError):
            post_comment(day_id=locked_day.id, user=member_user, content='Early', today=BEFORE)
        with pytest.raises(DayLockedError):
            get_day_comments(day_id=locked_day.id, user=member_user, today=BEFORE)

    def test_empty_comment(self, revealed_day, member_user):
        with pytest.raises(EmptyCommentError):
            post_comment(day_id=revealed_day.id, user=member_user, content='   ', today=BEFORE)

    def test_author_edits(self, revealed_day, member_user, other_member):
        comment = Comment.objects.create(calendar_day=revealed_day, user=member_user, content='Frist')

        updated = update_comment(comment_id=comment.id, user=member_user, content='First')
        assert updated.content == 'First'

        with pytest.raises(InsufficientPermissionsError):
            update_comment(comment_id=comment.id, user=other_member, content='Hijack')

    def test_admin_deletes_any(self, revealed_day, member_user, other_member, admin_user):
        comment = Comment.objects.create(calendar_day=revealed_day, user=member_user, content='Spam')

        with pytest.raises(InsufficientPermissionsError):
            delete_comment(comment_id=comment.id, user=other_member)

        delete_comment(comment_id=comment.id, user=admin_user)
        assert not Comment.objects.filter(id=comment.id).exists()
