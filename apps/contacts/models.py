# ==========================================
# apps/contacts/models.py
# ==========================================

from django.db import models
import uuid


class InvitationStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    ACCEPTED = 'accepted', 'Accepted'


class Contact(models.Model):
    """A user in someone's contact list."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='contacts')
    # Null until the contact is resolved to a registered user
    contact_user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='listed_as_contact',
    )
    name = models.CharField(max_length=200, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'contacts'
        constraints = [
            models.UniqueConstraint(
                fields=['owner', 'contact_user'],
                name='unique_contact_per_owner',
            ),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.owner} -> {self.get_display_name()}"

    def get_display_name(self):
        """Profile name of the contact user, falling back to the stored label."""
        if self.contact_user_id is not None:
            return self.contact_user.get_display_name()
        return self.name


class ContactInvitation(models.Model):
    """Invitation from one user to add another (by email) as a contact."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    inviter = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='sent_invitations',
    )
    invitee_email = models.EmailField(max_length=255, db_index=True)
    invitee_user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='received_invitations',
    )
    status = models.CharField(
        max_length=20,
        choices=InvitationStatus.choices,
        default=InvitationStatus.PENDING,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'contact_invitations'
        constraints = [
            models.UniqueConstraint(
                fields=['inviter', 'invitee_email'],
                condition=models.Q(status='pending'),
                name='unique_pending_invitation',
            ),
        ]
        indexes = [
            models.Index(fields=['invitee_user', 'status'], name='invitation_invitee_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.inviter} invited {self.invitee_email} ({self.status})"

    def save(self, *args, **kwargs):
        self.invitee_email = self.invitee_email.strip().lower()
        super().save(*args, **kwargs)

    def is_addressed_to(self, user):
        """True if the user is the invitee, by resolved identity or by email."""
        if self.invitee_user_id is not None:
            return self.invitee_user_id == user.id
        return self.invitee_email == user.email.lower()
