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


def _user(email, name, **extra):
    return User.objects.create_user(email=email, password='TestPass123!', name=name, **extra)


@pytest.fixture
def admin_user(db):
    """Club admin who takes no part in the event."""
    return _user('admin@example.com', 'Club Admin', role=UserRole.ADMIN)


@pytest.fixture
def alice(db):
    return _user('alice@example.com', 'Alice')


@pytest.fixture
def bob(db):
    return _user('bob@example.com', 'Bob')


@pytest.fixture
def carol(db):
    return _user('carol@example.com', 'Carol')


@pytest.fixture
def outsider(db):
    return _user('outsider@example.com', 'Outsider')


@pytest.fixture
def event(admin_user, alice, bob, carol):
    """
    Event with three members who spent 150, 90 and 120.

    Carol has already settled.
    """
    event = create_event(
        name='Whiskey Advent 2024',
        year=2024,
        start_date=date(2024, 12, 1),
        end_date=date(2024, 12, 24),
        created_by=admin_user,
    )
    for user, name, price in [
        (alice, 'Ardbeg Uigeadail', Decimal('150.00')),
        (bob, 'Glenmorangie 10', Decimal('90.00')),
        (carol, 'Glendronach 12', Decimal('120.00')),
    ]:
        EventMembership.objects.create(event=event, user=user)
        BottleSubmission.objects.create(event=event, user=user, whiskey_name=name, price=price)

    event.settlements.create(user=carol, has_settled=True)
    return event


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_client(admin_user):
    return client_for(admin_user)


@pytest.fixture
def alice_client(alice):
    return client_for(alice)


@pytest.fixture
def outsider_client(outsider):
    return client_for(outsider)
