import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.contacts.models import Contact, ContactInvitation, InvitationStatus


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
def alice(db):
    return User.objects.create_user(
        email='alice@example.com',
        password='TestPass123!',
        display_name='Alice',
    )


@pytest.fixture
def bob(db):
    return User.objects.create_user(
        email='bob@example.com',
        password='TestPass123!',
        display_name='Bob',
    )


@pytest.fixture
def carol(db):
    return User.objects.create_user(
        email='carol@example.com',
        password='TestPass123!',
        display_name='carol',
    )


@pytest.fixture
def alice_client(alice):
    return client_for(alice)


@pytest.fixture
def bob_client(bob):
    return client_for(bob)


@pytest.fixture
def carol_client(carol):
    return client_for(carol)


@pytest.fixture
def pending_invitation(alice, bob):
    """Alice has invited Bob."""
    return ContactInvitation.objects.create(
        inviter=alice,
        invitee_email=bob.email,
        invitee_user=bob,
        status=InvitationStatus.PENDING,
    )


@pytest.fixture
def accepted_invitation(alice, bob):
    """Alice invited Bob and Bob accepted; both hold contact rows."""
    invitation = ContactInvitation.objects.create(
        inviter=alice,
        invitee_email=bob.email,
        invitee_user=bob,
        status=InvitationStatus.ACCEPTED,
    )
    Contact.objects.create(owner=alice, contact_user=bob, name='Bob')
    Contact.objects.create(owner=bob, contact_user=alice, name='Alice')
    return invitation
