# ==========================================
# apps/contacts/admin.py
# ==========================================

from django.contrib import admin
from apps.contacts.models import Contact, ContactInvitation


@admin.register(Contact)
class ContactAdmin(admin.ModelAdmin):
    """Admin interface for Contacts."""

    list_display = ['owner', 'contact_user', 'name', 'created_at']
    search_fields = ['owner__email', 'contact_user__email', 'name']
    readonly_fields = ['created_at']
    ordering = ['-created_at']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('owner', 'contact_user')


@admin.register(ContactInvitation)
class ContactInvitationAdmin(admin.ModelAdmin):
    """Admin interface for Contact Invitations."""

    list_display = ['inviter', 'invitee_email', 'invitee_user', 'status', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['inviter__email', 'invitee_email']
    readonly_fields = ['created_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('inviter', 'invitee_user')
