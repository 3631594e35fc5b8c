import pytest
from datetime import date
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.events.models import EventMembership, MemberRole
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
        name='Bottle Member',
    )


@pytest.fixture
def other_member(db):
    """Create and return a second member."""
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
        name='Other Member',
    )


@pytest.fixture
def event(admin_user, member_user, other_member):
    """Create a 2024 event with both members enrolled."""
    event = create_event(
        name='Whiskey Advent 2024',
        year=2024,
        start_date=date(2024, 12, 1),
        end_date=date(2024, 12, 24),
        created_by=admin_user,
    )
    EventMembership.objects.create(event=event, user=member_user)
    EventMembership.objects.create(event=event, user=other_member)
    return event


@pytest.fixture
def event_admin(event, member_user):
    """The member, promoted to admin of this event only."""
    EventMembership.objects.filter(event=event, user=member_user).update(role_override=MemberRole.ADMIN)
    return member_user


@pytest.fixture
def member_bottle(event, member_user):
    """The member's submitted bottle."""
    return BottleSubmission.objects.create(
        event=event,
        user=member_user,
        whiskey_name='Talisker 10',
        distillery='Talisker',
        price=Decimal('45.00'),
    )


@pytest.fixture
def other_bottle(event, other_member):
    """The second member's bottle."""
    return BottleSubmission.objects.create(
        event=event,
        user=other_member,
        whiskey_name='Glenfarclas 15',
        price=Decimal('70.00'),
    )


@pytest.fixture
def admin_client(admin_user):
    return client_for(admin_user)


@pytest.fixture
def member_client(member_user):
    return client_for(member_user)


@pytest.fixture
def other_client(other_member):
    return client_for(other_member)
