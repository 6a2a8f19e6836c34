"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidTokenError,
    ProfileUpdateError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user, issue_tokens, sign_out
from .profile_management import update_display_name

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'InvalidTokenError',
    'ProfileUpdateError',
    # Services
    'register_user',
    'authenticate_user',
    'issue_tokens',
    'sign_out',
    'update_display_name',
]
