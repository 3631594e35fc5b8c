import pytest
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.events.models import EventMembership
from apps.events.services import create_event


def client_for(user):
    """Return an API client authenticated as the given user."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


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
        name='Event Member',
    )


@pytest.fixture
def outsider_user(db):
    """Create and return a user who is not part of the event."""
    return User.objects.create_user(
        email='outsider@example.com',
        password='TestPass123!',
        name='Outsider',
    )


@pytest.fixture
def event(admin_user):
    """Create an event for 2024 with its calendar days."""
    return create_event(
        name='Whiskey Advent 2024',
        year=2024,
        start_date=date(2024, 12, 1),
        end_date=date(2024, 12, 24),
        created_by=admin_user,
    )


@pytest.fixture
def membership(event, member_user):
    """Add member_user to the event."""
    return EventMembership.objects.create(event=event, user=member_user)


@pytest.fixture
def admin_client(admin_user):
    return client_for(admin_user)


@pytest.fixture
def member_client(member_user):
    return client_for(member_user)


@pytest.fixture
def outsider_client(outsider_user):
    return client_for(outsider_user)
