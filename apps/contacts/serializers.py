from rest_framework import serializers
from .models import Contact, ContactInvitation
from apps.accounts.serializers import UserPublicSerializer


class ContactSerializer(serializers.ModelSerializer):
    """Contact list entry."""

    contact_user = UserPublicSerializer(read_only=True)
    display_name = serializers.SerializerMethodField()

    class Meta:
        model = Contact
        fields = ['id', 'contact_user', 'name', 'display_name', 'created_at']
        read_only_fields = fields

    def get_display_name(self, obj):
        return obj.get_display_name() or 'Unknown'


class ContactInvitationSerializer(serializers.ModelSerializer):
    """Serializer for contact invitations."""

    inviter = UserPublicSerializer(read_only=True)
    invitee_user = UserPublicSerializer(read_only=True)

    class Meta:
        model = ContactInvitation
        fields = [
            'id',
            'inviter',
            'invitee_email',
            'invitee_user',
            'status',
            'created_at',
        ]
        read_only_fields = fields


class InviteContactSerializer(serializers.Serializer):
    """Input for sending an invitation."""

    email = serializers.EmailField(max_length=255, required=True)


class CheckUserExistsSerializer(serializers.Serializer):
    """Input for the invite-time existence check."""

    email = serializers.CharField(max_length=255, required=True)


class CheckUserExistsResponseSerializer(serializers.Serializer):
    exists = serializers.BooleanField()
    userId = serializers.UUIDField(allow_null=True)
