import pytest
from datetime import date
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.events.models import EventMembership
from apps.events.services import create_event
from apps.bottles.models import BottleSubmission


def client_for(user):
    """Return an API client authenticated as the given user."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def admin_user(db):
    """Create and return a club admin."""
    return User.objects.create_user(
        email='admin@example.com',
        password='TestPass123!',
        name='Club Admin',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def member_user(db):
    """Create and return a regular member."""
    return User.objects.create_user(
        email='member@example.com',
        password='TestPass123!',
        name='Taster',
    )


@pytest.fixture
def other_member(db):
    """Create and return a second member."""
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
        name='Second Taster',
    )


@pytest.fixture
def event(admin_user, member_user, other_member):
    """
    Event whose days open from December 1st of a far-future year.

    Every day is locked by date unless a test reveals it.
    """
    event = create_event(
        name='Whiskey Advent 2099',
        year=2099,
        start_date=date(2099, 12, 1),
        end_date=date(2099, 12, 24),
        created_by=admin_user,
    )
    EventMembership.objects.create(event=event, user=member_user)
    EventMembership.objects.create(event=event, user=other_member)
    return event


@pytest.fixture
def past_event(admin_user, member_user):
    """Event whose days have all opened by date."""
    event = create_event(
        name='Whiskey Advent 2020',
        year=2020,
        start_date=date(2020, 12, 1),
        end_date=date(2020, 12, 24),
        created_by=admin_user,
    )
    EventMembership.objects.create(event=event, user=member_user)
    return event


@pytest.fixture
def bottle(event, other_member):
    """A bottle submitted by the second member."""
    return BottleSubmission.objects.create(
        event=event,
        user=other_member,
        whiskey_name='Springbank 15',
        distillery='Springbank',
        price=Decimal('110.00'),
    )


@pytest.fixture
def locked_day(event, bottle):
    """Day 1 with a bottle, still locked."""
    day = event.calendar_days.get(day_number=1)
    day.bottle_submission = bottle
    day.save()
    return day


@pytest.fixture
def revealed_day(locked_day):
    """Day 1 manually revealed."""
    locked_day.is_revealed = True
    locked_day.save()
    return locked_day


@pytest.fixture
def admin_client(admin_user):
    return client_for(admin_user)


@pytest.fixture
def member_client(member_user):
    return client_for(member_user)


@pytest.fixture
def other_client(other_member):
    return client_for(other_member)


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()
