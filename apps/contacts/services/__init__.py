"""
Contacts app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    ContactsServiceError,
    InvalidEmailError,
    CannotInviteSelfError,
    InviteeNotFoundError,
    AlreadyContactError,
    DuplicateInvitationError,
    InvitationNotFoundError,
    InvitationAlreadyAcceptedError,
    InsufficientPermissionsError,
)

from .user_lookup import (
    UserLookupResult,
    check_user_exists_by_email,
)

from .invitation_management import (
    invite_contact,
    accept_contact_invitation,
    get_sent_invitations,
    get_received_invitations,
)

from .contact_management import (
    get_contacts,
    is_contact,
)


__all__ = [
    # Exceptions
    'ContactsServiceError',
    'InvalidEmailError',
    'CannotInviteSelfError',
    'InviteeNotFoundError',
    'AlreadyContactError',
    'DuplicateInvitationError',
    'InvitationNotFoundError',
    'InvitationAlreadyAcceptedError',
    'InsufficientPermissionsError',

    # User Lookup
    'UserLookupResult',
    'check_user_exists_by_email',

    # Invitations
    'invite_contact',
    'accept_contact_invitation',
    'get_sent_invitations',
    'get_received_invitations',

    # Contacts
    'get_contacts',
    'is_contact',
]
