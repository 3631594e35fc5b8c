"""
API integration tests for settlements app.
"""

import pytest
from uuid import uuid4
from django.urls import reverse
from rest_framework import status

from apps.settlements.models import Settlement


@pytest.mark.django_db
class TestSettleUpAPI:
    """Tests for GET /api/settlements/events/{id}/"""

    def test_summary(self, alice_client, event, alice, bob):
        url = reverse('settlements:settle-up', kwargs={'event_id': event.id})
        response = alice_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['currency'] == 'EUR'
        assert response.data['total_spent'] == '360.00'
        assert response.data['average_target'] == '120.00'
        assert response.data['participant_count'] == 3
        assert response.data['settled_count'] == 1

        rows = {row['user_id']: row for row in response.data['entries']}
        assert rows[str(alice.id)]['balance'] == '30.00'
        assert rows[str(alice.id)]['balance_status'] == 'owed'
        assert rows[str(alice.id)]['user']['display_name'] == 'Alice'
        assert rows[str(bob.id)]['balance'] == '-30.00'
        assert rows[str(bob.id)]['balance_status'] == 'owes'

    def test_outsider_forbidden(self, outsider_client, event):
        url = reverse('settlements:settle-up', kwargs={'event_id': event.id})
        response = outsider_client.get(url)
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_unknown_event(self, alice_client):
        url = reverse('settlements:settle-up', kwargs={'event_id': uuid4()})
        response = alice_client.get(url)
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_requires_auth(self, api_client, event):
        url = reverse('settlements:settle-up', kwargs={'event_id': event.id})
        response = api_client.get(url)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestToggleSettlementAPI:
    """Tests for POST /api/settlements/events/{id}/toggle/"""

    def test_admin_toggles(self, admin_client, event, bob):
        url = reverse('settlements:toggle', kwargs={'event_id': event.id})
        response = admin_client.post(
            url,
            {'user_id': str(bob.id), 'has_settled': True, 'amount': '30.00'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['has_settled'] is True
        assert response.data['amount'] == '30.00'
        assert Settlement.objects.get(event=event, user=bob).has_settled is True

    def test_member_forbidden(self, alice_client, event, bob):
        url = reverse('settlements:toggle', kwargs={'event_id': event.id})
        response = alice_client.post(url, {'user_id': str(bob.id), 'has_settled': True}, format='json')
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_not_participant(self, admin_client, event, outsider):
        url = reverse('settlements:toggle', kwargs={'event_id': event.id})
        response = admin_client.post(url, {'user_id': str(outsider.id), 'has_settled': True}, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_negative_amount(self, admin_client, event, bob):
        url = reverse('settlements:toggle', kwargs={'event_id': event.id})
        response = admin_client.post(
            url,
            {'user_id': str(bob.id), 'has_settled': True, 'amount': '-5.00'},
            format='json'
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
