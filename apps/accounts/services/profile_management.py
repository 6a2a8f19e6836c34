"""Profile updates for the current user."""

import logging

from django.contrib.auth import get_user_model

from .exceptions import ProfileUpdateError

User = get_user_model()
logger = logging.getLogger(__name__)


def update_display_name(*, user: User, display_name: str) -> User:
    """
    Change the name other users see in contact lists and payment requests.

    Contact rows read the name through the user, so the change shows up
    everywhere without touching them.

    Raises:
        ProfileUpdateError: If the name is blank after trimming
    """
    display_name = (display_name or '').strip()
    if not display_name:
        raise ProfileUpdateError("Display name cannot be blank")

    user.display_name = display_name
    user.save(update_fields=['display_name'])

    logger.info("User %s changed display name", user.id)
    return user
