import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.contacts.models import Contact
from apps.payments.models import PaymentRequest, PaymentRequestStatus


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
def requester(db):
    """User A: asks for money."""
    return User.objects.create_user(
        email='requester@example.com',
        password='TestPass123!',
        display_name='Requester',
    )


@pytest.fixture
def payer(db):
    """User B: owes money."""
    return User.objects.create_user(
        email='payer@example.com',
        password='TestPass123!',
        display_name='Payer',
    )


@pytest.fixture
def outsider(db):
    """User C: unrelated to any request."""
    return User.objects.create_user(
        email='outsider@example.com',
        password='TestPass123!',
        display_name='Outsider',
    )


@pytest.fixture
def contacts(requester, payer):
    """Requester and payer are mutual contacts."""
    Contact.objects.create(owner=requester, contact_user=payer, name='Payer')
    Contact.objects.create(owner=payer, contact_user=requester, name='Requester')


@pytest.fixture
def pending_request(requester, payer, contacts):
    """A pending request from A to B for 500 pence."""
    return PaymentRequest.objects.create(
        from_user=requester,
        to_user=payer,
        amount_cents=500,
        memo='Lunch',
        status=PaymentRequestStatus.PENDING,
    )


@pytest.fixture
def settled_request(requester, payer, contacts):
    return PaymentRequest.objects.create(
        from_user=requester,
        to_user=payer,
        amount_cents=1200,
        status=PaymentRequestStatus.SETTLED,
    )


@pytest.fixture
def cancelled_request(requester, payer, contacts):
    return PaymentRequest.objects.create(
        from_user=requester,
        to_user=payer,
        amount_cents=300,
        status=PaymentRequestStatus.CANCELLED,
    )


@pytest.fixture
def requester_client(requester):
    return client_for(requester)


@pytest.fixture
def payer_client(payer):
    return client_for(payer)


@pytest.fixture
def outsider_client(outsider):
    return client_for(outsider)
