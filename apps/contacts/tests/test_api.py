import pytest
from uuid import uuid4
from unittest.mock import patch
from django.db import DatabaseError
from django.urls import reverse
from rest_framework import status

from apps.contacts.models import Contact, ContactInvitation, InvitationStatus


# =============================================================================
# Existence Check Tests
# =============================================================================

@pytest.mark.django_db
class TestCheckUserExists:
    """Tests for POST /api/check-user-exists/"""

    def test_existing_user(self, alice_client, bob):
        url = reverse('check-user-exists')
        response = alice_client.post(url, {'email': 'BOB@example.com'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'exists': True, 'userId': str(bob.id)}

    def test_unknown_user(self, alice_client):
        url = reverse('check-user-exists')
        response = alice_client.post(url, {'email': 'ghost@example.com'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'exists': False, 'userId': None}

    def test_missing_email(self, alice_client):
        url = reverse('check-user-exists')
        response = alice_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Email is required'

    def test_degraded_lookup_reports_not_found(self, alice_client, bob):
        url = reverse('check-user-exists')
        with patch(
            'apps.contacts.services.user_lookup._lookup_registered_user',
            side_effect=DatabaseError('down'),
        ):
            response = alice_client.post(url, {'email': bob.email}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['exists'] is False

    def test_unauthenticated(self, api_client):
        url = reverse('check-user-exists')
        response = api_client.post(url, {'email': 'bob@example.com'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Contact List Tests
# =============================================================================

@pytest.mark.django_db
class TestContactList:
    """Tests for GET /api/contacts/"""

    def test_list_contacts(self, alice_client, accepted_invitation, bob):
        response = alice_client.get(reverse('contacts:contact-list'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['contact_user']['id'] == str(bob.id)
        assert response.data[0]['display_name'] == 'Bob'

    def test_list_empty(self, carol_client):
        response = carol_client.get(reverse('contacts:contact-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == []

    def test_list_unauthenticated(self, api_client):
        response = api_client.get(reverse('contacts:contact-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Invitation Tests
# =============================================================================

@pytest.mark.django_db
class TestSendInvitation:
    """Tests for POST /api/contacts/invitations/"""

    def test_send_invitation(self, alice_client, alice, bob):
        url = reverse('contacts:invitation-list')
        response = alice_client.post(url, {'email': 'bob@example.com'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['invitee_email'] == 'bob@example.com'
        assert response.data['status'] == InvitationStatus.PENDING
        assert ContactInvitation.objects.filter(inviter=alice, invitee_user=bob).exists()

    def test_invite_unknown_user(self, alice_client):
        url = reverse('contacts:invitation-list')
        response = alice_client.post(url, {'email': 'ghost@example.com'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'does not exist' in response.data['error']

    def test_invite_self(self, alice_client):
        url = reverse('contacts:invitation-list')
        response = alice_client.post(url, {'email': 'alice@example.com'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'You cannot invite yourself'

    def test_invite_duplicate(self, alice_client, pending_invitation):
        url = reverse('contacts:invitation-list')
        response = alice_client.post(url, {'email': 'bob@example.com'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_invite_existing_contact(self, alice_client, accepted_invitation):
        url = reverse('contacts:invitation-list')
        response = alice_client.post(url, {'email': 'bob@example.com'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'This user is already in your contacts'

    def test_invite_malformed_email(self, alice_client):
        url = reverse('contacts:invitation-list')
        response = alice_client.post(url, {'email': 'nope'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestInvitationListings:
    """Tests for GET /api/contacts/invitations/sent|received/"""

    def test_sent(self, alice_client, pending_invitation):
        response = alice_client.get(reverse('contacts:invitation-sent'))

        assert response.status_code == status.HTTP_200_OK
        assert [i['id'] for i in response.data] == [str(pending_invitation.id)]

    def test_received(self, bob_client, pending_invitation, alice):
        response = bob_client.get(reverse('contacts:invitation-received'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]['inviter']['display_name'] == 'Alice'

    def test_received_excludes_accepted(self, bob_client, accepted_invitation):
        response = bob_client.get(reverse('contacts:invitation-received'))

        assert response.data == []


@pytest.mark.django_db
class TestAcceptInvitation:
    """Tests for POST /api/contacts/invitations/{id}/accept/"""

    def test_accept(self, bob_client, pending_invitation, alice, bob):
        url = reverse('contacts:invitation-accept', args=[pending_invitation.id])
        response = bob_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == InvitationStatus.ACCEPTED
        assert Contact.objects.filter(owner=alice, contact_user=bob).exists()
        assert Contact.objects.filter(owner=bob, contact_user=alice).exists()

    def test_accept_not_invitee(self, carol_client, pending_invitation):
        url = reverse('contacts:invitation-accept', args=[pending_invitation.id])
        response = carol_client.post(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_accept_twice(self, bob_client, pending_invitation):
        url = reverse('contacts:invitation-accept', args=[pending_invitation.id])
        bob_client.post(url)
        response = bob_client.post(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_accept_missing(self, bob_client):
        url = reverse('contacts:invitation-accept', args=[uuid4()])
        response = bob_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_accept_malformed_id(self, bob_client, pending_invitation):
        response = bob_client.post(f'/api/contacts/invitations/{"0" * 36}/accept/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        pending_invitation.refresh_from_db()
        assert pending_invitation.status == InvitationStatus.PENDING
