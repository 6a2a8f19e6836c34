"""
Invitation management service.

Handles sending and accepting contact invitations. Acceptance materialises
a contact row on both sides and is serialised by a row lock on the
invitation.
"""

import logging
from uuid import UUID

from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.db import transaction, IntegrityError
from django.db.models import Q, QuerySet

from apps.accounts.models import User
from apps.contacts.models import Contact, ContactInvitation, InvitationStatus

from .exceptions import (
    InvalidEmailError,
    CannotInviteSelfError,
    InviteeNotFoundError,
    AlreadyContactError,
    DuplicateInvitationError,
    InvitationNotFoundError,
    InvitationAlreadyAcceptedError,
    InsufficientPermissionsError,
)
from .user_lookup import check_user_exists_by_email, normalize_email

logger = logging.getLogger(__name__)


def invite_contact(*, inviter: User, email: str) -> ContactInvitation:
    """
    Invite a registered user to become a contact.

    Only emails that belong to an existing user can be invited.

    Args:
        inviter: User sending the invitation
        email: Invitee email (case-insensitive)

    Returns:
        Created ContactInvitation instance

    Raises:
        InvalidEmailError: If the email is missing or malformed
        CannotInviteSelfError: If the email is the inviter's own
        InviteeNotFoundError: If no user owns the email
        AlreadyContactError: If the invitee is already a contact
        DuplicateInvitationError: If a pending invitation already exists
    """
    email = normalize_email(email)
    try:
        validate_email(email)
    except ValidationError:
        raise InvalidEmailError("Please enter a valid email address")

    if email == inviter.email.lower():
        raise CannotInviteSelfError("You cannot invite yourself")

    lookup = check_user_exists_by_email(email=email)
    if not lookup.exists:
        raise InviteeNotFoundError(
            "This user does not exist. You can only invite users who already have an account."
        )

    if Contact.objects.filter(owner=inviter, contact_user_id=lookup.user_id).exists():
        raise AlreadyContactError("This user is already in your contacts")

    if ContactInvitation.objects.filter(
        inviter=inviter,
        invitee_email=email,
        status=InvitationStatus.PENDING,
    ).exists():
        raise DuplicateInvitationError("You have already sent an invitation to this email")

    try:
        with transaction.atomic():
            invitation = ContactInvitation.objects.create(
                inviter=inviter,
                invitee_email=email,
                invitee_user_id=lookup.user_id,
                status=InvitationStatus.PENDING,
            )
    except IntegrityError:
        # Unique constraint caught a concurrent duplicate
        raise DuplicateInvitationError("You have already sent an invitation to this email")

    logger.info("Invitation %s sent by %s", invitation.id, inviter.id)
    return invitation


@transaction.atomic
def accept_contact_invitation(*, invitation_id: UUID, user: User) -> ContactInvitation:
    """
    Accept a pending invitation addressed to the user.

    Creates the reciprocal contact rows (inviter -> invitee and
    invitee -> inviter) if they are missing and marks the invitation accepted.

    Args:
        invitation_id: UUID of the invitation
        user: User accepting (must be the invitee)

    Returns:
        Updated ContactInvitation instance

    Raises:
        InvitationNotFoundError: If invitation doesn't exist
        InsufficientPermissionsError: If user is not the invitee
        InvitationAlreadyAcceptedError: If invitation is not pending
    """
    try:
        invitation = (
            ContactInvitation.objects
            .select_for_update()
            .select_related('inviter')
            .get(id=invitation_id)
        )
    except (ContactInvitation.DoesNotExist, ValidationError):
        raise InvitationNotFoundError(f"Invitation with ID {invitation_id} not found")

    if not invitation.is_addressed_to(user):
        raise InsufficientPermissionsError("This invitation is not addressed to you")

    if invitation.status != InvitationStatus.PENDING:
        raise InvitationAlreadyAcceptedError("This invitation has already been accepted")

    inviter = invitation.inviter
    Contact.objects.get_or_create(
        owner=inviter,
        contact_user=user,
        defaults={'name': user.get_display_name()},
    )
    Contact.objects.get_or_create(
        owner=user,
        contact_user=inviter,
        defaults={'name': inviter.get_display_name()},
    )

    invitation.invitee_user = user
    invitation.status = InvitationStatus.ACCEPTED
    invitation.save(update_fields=['invitee_user', 'status'])

    logger.info("Invitation %s accepted by %s", invitation.id, user.id)
    return invitation


def get_sent_invitations(*, user: User) -> QuerySet[ContactInvitation]:
    """Pending invitations sent by the user, newest first."""
    return (
        ContactInvitation.objects
        .filter(inviter=user, status=InvitationStatus.PENDING)
        .select_related('invitee_user')
        .order_by('-created_at')
    )


def get_received_invitations(*, user: User) -> QuerySet[ContactInvitation]:
    """Pending invitations addressed to the user by id or by email, newest first."""
    return (
        ContactInvitation.objects
        .filter(
            Q(invitee_user=user) | Q(invitee_email=user.email.lower()),
            status=InvitationStatus.PENDING,
        )
        .select_related('inviter')
        .order_by('-created_at')
    )
