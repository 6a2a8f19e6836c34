"""
Payment request creation and queries.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db.models import Q, QuerySet

from apps.accounts.models import User
from apps.contacts.services import is_contact
from apps.payments.models import PaymentRequest, PaymentRequestStatus, MAX_AMOUNT_CENTS

from .exceptions import (
    InvalidAmountError,
    NotAContactError,
    SelfRequestError,
)

logger = logging.getLogger(__name__)

ROLE_SENT = 'sent'
ROLE_RECEIVED = 'received'


def create_payment_request(
    *,
    from_user: User,
    to_user_id: UUID,
    amount_cents: int,
    memo: Optional[str] = None
) -> PaymentRequest:
    """
    Request payment from one of the caller's contacts.

    Args:
        from_user: Requester
        to_user_id: UUID of the payer, who must be a contact of the requester
        amount_cents: Amount in minor units, 1..MAX_AMOUNT_CENTS
        memo: Optional note; blank becomes None

    Returns:
        Created PaymentRequest in pending status

    Raises:
        InvalidAmountError: If amount_cents is not in 1..MAX_AMOUNT_CENTS
        SelfRequestError: If to_user_id is the requester
        NotAContactError: If the payer is not in the requester's contacts
    """
    if amount_cents is None or not 0 < amount_cents <= MAX_AMOUNT_CENTS:
        raise InvalidAmountError("Please enter a valid amount")

    if str(to_user_id) == str(from_user.id):
        raise SelfRequestError("You cannot request payment from yourself")

    if not is_contact(owner=from_user, user_id=to_user_id):
        raise NotAContactError("You can only request payment from your contacts")

    payment_request = PaymentRequest.objects.create(
        from_user=from_user,
        to_user_id=to_user_id,
        amount_cents=amount_cents,
        memo=memo or None,
        status=PaymentRequestStatus.PENDING,
    )

    logger.info(
        "Payment request %s created: %s -> %s, %d %s",
        payment_request.id,
        from_user.id,
        to_user_id,
        amount_cents,
        payment_request.currency,
    )
    return payment_request


def get_payment_requests(
    *,
    user: User,
    status: Optional[str] = None,
    role: Optional[str] = None
) -> QuerySet[PaymentRequest]:
    """
    Payment requests the user is a party to, newest first.

    Args:
        user: Requester or payer
        status: Optional status filter
        role: 'sent' (user is requester) or 'received' (user is payer)
    """
    if role == ROLE_SENT:
        parties = Q(from_user=user)
    elif role == ROLE_RECEIVED:
        parties = Q(to_user=user)
    else:
        parties = Q(from_user=user) | Q(to_user=user)

    queryset = (
        PaymentRequest.objects
        .filter(parties)
        .select_related('from_user', 'to_user')
        .order_by('-created_at')
    )
    if status:
        queryset = queryset.filter(status=status)
    return queryset
