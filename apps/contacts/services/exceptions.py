"""
Domain-specific exceptions for contacts app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class ContactsServiceError(Exception):
    """Base exception for all contacts service errors."""
    pass


class InvalidEmailError(ContactsServiceError):
    """Raised when an invitee email is missing or malformed."""
    pass


class CannotInviteSelfError(ContactsServiceError):
    """Raised when a user tries to invite their own email."""
    pass


class InviteeNotFoundError(ContactsServiceError):
    """Raised when the invited email does not belong to a registered user."""
    pass


class AlreadyContactError(ContactsServiceError):
    """Raised when the invitee is already in the inviter's contacts."""
    pass


class DuplicateInvitationError(ContactsServiceError):
    """Raised when a pending invitation to the same email already exists."""
    pass


class InvitationNotFoundError(ContactsServiceError):
    """Raised when an invitation does not exist."""
    pass


class InvitationAlreadyAcceptedError(ContactsServiceError):
    """Raised when accepting an invitation that is no longer pending."""
    pass


class InsufficientPermissionsError(ContactsServiceError):
    """Raised when a user acts on an invitation addressed to someone else."""
    pass
