"""
Payment request lifecycle.

    pending -> settled     (payer only)
    pending -> cancelled   (payer or requester)

``settled`` and ``cancelled`` are terminal. Repeating a transition is
refused, not silently accepted.
"""

import logging
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction

from apps.accounts.models import User
from apps.payments.models import PaymentRequest, PaymentRequestStatus, TERMINAL_STATUSES

from .exceptions import (
    PaymentRequestNotFoundError,
    InvalidStatusError,
    PaymentRequestFinalizedError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)


def check_transition_allowed(
    payment_request: PaymentRequest,
    user: User,
    new_status: str
) -> None:
    """
    Validate a transition against current state and the caller's role.

    Raises:
        PaymentRequestFinalizedError: If the request is no longer pending
        InsufficientPermissionsError: If the caller is not a party, or the
            requester tries to settle
    """
    if payment_request.is_final:
        raise PaymentRequestFinalizedError("Payment request is already in a final state")

    if not payment_request.involves(user):
        raise InsufficientPermissionsError(
            "You don't have permission to update this payment request"
        )

    if new_status == PaymentRequestStatus.SETTLED and payment_request.to_user_id != user.id:
        raise InsufficientPermissionsError("Only the recipient can mark a payment as settled")


@transaction.atomic
def transition_payment_request(
    *,
    request_id: UUID,
    user: User,
    new_status: str
) -> PaymentRequest:
    """
    Move a pending payment request to a terminal status.

    The row is locked for the check, and the write is conditional on the
    status still being pending, so two racing transitions cannot both land.

    Args:
        request_id: UUID of the payment request
        user: Authenticated caller
        new_status: 'settled' or 'cancelled'

    Returns:
        The PaymentRequest with its new status

    Raises:
        InvalidStatusError: If new_status is not a terminal status
        PaymentRequestNotFoundError: If the request doesn't exist
        PaymentRequestFinalizedError: If the request is not pending
        InsufficientPermissionsError: If the caller may not apply new_status
    """
    if new_status not in TERMINAL_STATUSES:
        raise InvalidStatusError("Valid status is required (settled or cancelled)")

    try:
        payment_request = (
            PaymentRequest.objects
            .select_for_update()
            .get(id=request_id)
        )
    except (PaymentRequest.DoesNotExist, ValidationError):
        raise PaymentRequestNotFoundError("Payment request not found")

    check_transition_allowed(payment_request, user, new_status)

    updated = (
        PaymentRequest.objects
        .filter(id=payment_request.id, status=PaymentRequestStatus.PENDING)
        .update(status=new_status)
    )
    if updated == 0:
        logger.warning("Payment request %s changed status concurrently", payment_request.id)
        raise PaymentRequestFinalizedError("Payment request is already in a final state")

    payment_request.status = new_status
    logger.info(
        "Payment request %s moved to %s by %s",
        payment_request.id,
        new_status,
        user.id,
    )
    return payment_request
