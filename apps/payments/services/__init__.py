"""
Payments app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    PaymentsServiceError,
    PaymentRequestNotFoundError,
    InvalidStatusError,
    PaymentRequestFinalizedError,
    InsufficientPermissionsError,
    InvalidAmountError,
    NotAContactError,
    SelfRequestError,
)

from .request_management import (
    create_payment_request,
    get_payment_requests,
)

from .status_transition import (
    check_transition_allowed,
    transition_payment_request,
)


__all__ = [
    # Exceptions
    'PaymentsServiceError',
    'PaymentRequestNotFoundError',
    'InvalidStatusError',
    'PaymentRequestFinalizedError',
    'InsufficientPermissionsError',
    'InvalidAmountError',
    'NotAContactError',
    'SelfRequestError',

    # Requests
    'create_payment_request',
    'get_payment_requests',

    # Lifecycle
    'check_transition_allowed',
    'transition_payment_request',
]
