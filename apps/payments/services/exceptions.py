"""
Domain-specific exceptions for payments app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class PaymentsServiceError(Exception):
    """Base exception for all payments service errors."""
    pass


class PaymentRequestNotFoundError(PaymentsServiceError):
    """Raised when a payment request does not exist."""
    pass


class InvalidStatusError(PaymentsServiceError):
    """Raised when the requested target status is not settled or cancelled."""
    pass


class PaymentRequestFinalizedError(PaymentsServiceError):
    """Raised when a payment request has already left the pending state."""
    pass


class InsufficientPermissionsError(PaymentsServiceError):
    """Raised when the caller may not perform the transition."""
    pass


class InvalidAmountError(PaymentsServiceError):
    """Raised when a requested amount is not strictly positive."""
    pass


class NotAContactError(PaymentsServiceError):
    """Raised when requesting payment from someone outside the contact list."""
    pass


class SelfRequestError(PaymentsServiceError):
    """Raised when a user requests payment from themselves."""
    pass
