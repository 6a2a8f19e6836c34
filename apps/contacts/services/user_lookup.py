"""
Invite-time identity lookup.

Decides whether an email belongs to a registered user. The primary lookup
reads the user table; if that read fails, an accepted invitation to the
same email counts as proof that the user exists. Under a double failure the
answer is a conservative "not found".
"""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from django.contrib.auth import get_user_model
from django.db import DatabaseError

from apps.contacts.models import ContactInvitation

User = get_user_model()
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserLookupResult:
    exists: bool
    user_id: Optional[UUID] = None


NOT_FOUND = UserLookupResult(exists=False)


def normalize_email(email: str) -> str:
    return (email or '').strip().lower()


def _lookup_registered_user(email: str) -> Optional[UUID]:
    return (
        User.objects
        .filter(email__iexact=email, is_active=True)
        .values_list('id', flat=True)
        .first()
    )


def _lookup_accepted_invitee(email: str) -> Optional[UUID]:
    return (
        ContactInvitation.objects
        .filter(invitee_email=email, invitee_user__isnull=False)
        .values_list('invitee_user_id', flat=True)
        .first()
    )


def check_user_exists_by_email(*, email: str) -> UserLookupResult:
    """
    Check whether a registered user owns the given email.

    Args:
        email: Email to look up (case-insensitive)

    Returns:
        UserLookupResult with the user's id when found
    """
    email = normalize_email(email)
    if not email:
        return NOT_FOUND

    try:
        user_id = _lookup_registered_user(email)
    except DatabaseError:
        logger.warning(
            "User lookup failed, falling back to accepted invitations",
            exc_info=True,
        )
    else:
        if user_id is None:
            return NOT_FOUND
        return UserLookupResult(exists=True, user_id=user_id)

    try:
        user_id = _lookup_accepted_invitee(email)
    except DatabaseError:
        logger.warning("Invitation fallback lookup failed", exc_info=True)
        user_id = None

    if user_id is None:
        # May under-report: the user can exist without an accepted invitation
        logger.warning("Existence of invitee could not be confirmed; reporting not found")
        return NOT_FOUND

    return UserLookupResult(exists=True, user_id=user_id)
