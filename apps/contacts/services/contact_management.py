"""Contact list queries."""

from typing import List

from apps.accounts.models import User
from apps.contacts.models import Contact


def get_contacts(*, owner: User) -> List[Contact]:
    """
    Resolved contacts of a user, sorted by name.

    Rows whose contact user is not yet resolved are skipped. Sorting uses the
    contact user's display name, falling back to the stored label.
    """
    contacts = (
        Contact.objects
        .filter(owner=owner, contact_user__isnull=False)
        .select_related('contact_user')
    )
    return sorted(contacts, key=lambda c: (c.get_display_name() or '').casefold())


def is_contact(*, owner: User, user_id) -> bool:
    """True if user_id is a resolved contact of owner."""
    return Contact.objects.filter(owner=owner, contact_user_id=user_id).exists()
