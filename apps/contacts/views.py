from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    ContactSerializer,
    ContactInvitationSerializer,
    InviteContactSerializer,
    CheckUserExistsSerializer,
    CheckUserExistsResponseSerializer,
)

from apps.contacts.services import (
    check_user_exists_by_email,
    invite_contact,
    accept_contact_invitation,
    get_sent_invitations,
    get_received_invitations,
    get_contacts,
    # Exceptions
    InvalidEmailError,
    CannotInviteSelfError,
    InviteeNotFoundError,
    AlreadyContactError,
    DuplicateInvitationError,
    InvitationNotFoundError,
    InvitationAlreadyAcceptedError,
    InsufficientPermissionsError,
)


@extend_schema(
    request=CheckUserExistsSerializer,
    responses={200: CheckUserExistsResponseSerializer},
    description="Check whether an email belongs to a registered user.",
    tags=['contacts'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def check_user_exists(request):
    """Check whether an invitee email belongs to a registered user."""
    serializer = CheckUserExistsSerializer(data=request.data)
    if not serializer.is_valid():
        return Response({'error': 'Email is required'}, status=status.HTTP_400_BAD_REQUEST)

    result = check_user_exists_by_email(email=serializer.validated_data['email'])
    return Response({
        'exists': result.exists,
        'userId': str(result.user_id) if result.user_id else None,
    })


@extend_schema(
    responses={200: ContactSerializer(many=True)},
    description="Get the current user's contacts, sorted by name.",
    tags=['contacts'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def contact_list(request):
    """List the caller's contacts."""
    contacts = get_contacts(owner=request.user)
    serializer = ContactSerializer(contacts, many=True)
    return Response(serializer.data)


class ContactInvitationViewSet(viewsets.GenericViewSet):
    """
    Contact invitations.

    Views are thin HTTP handlers; rules live in services.

    create: Invite a registered user by email
    sent: Pending invitations the caller has sent
    received: Pending invitations addressed to the caller
    accept: Accept an invitation addressed to the caller
    """

    serializer_class = ContactInvitationSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r'[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'

    @extend_schema(request=InviteContactSerializer, responses={201: ContactInvitationSerializer})
    def create(self, request, *args, **kwargs):
        """Send an invitation."""
        serializer = InviteContactSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            invitation = invite_contact(
                inviter=request.user,
                email=serializer.validated_data['email'],
            )
        except (
            InvalidEmailError,
            CannotInviteSelfError,
            InviteeNotFoundError,
            AlreadyContactError,
            DuplicateInvitationError,
        ) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        output_serializer = ContactInvitationSerializer(invitation)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['get'])
    def sent(self, request):
        """Pending invitations sent by the caller."""
        invitations = get_sent_invitations(user=request.user)
        serializer = ContactInvitationSerializer(invitations, many=True)
        return Response(serializer.data)

    @action(detail=False, methods=['get'])
    def received(self, request):
        """Pending invitations addressed to the caller."""
        invitations = get_received_invitations(user=request.user)
        serializer = ContactInvitationSerializer(invitations, many=True)
        return Response(serializer.data)

    @extend_schema(request=None, responses={200: ContactInvitationSerializer})
    @action(detail=True, methods=['post'])
    def accept(self, request, pk=None):
        """Accept an invitation and add both parties to each other's contacts."""
        try:
            invitation = accept_contact_invitation(invitation_id=pk, user=request.user)
        except InvitationNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except InvitationAlreadyAcceptedError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        serializer = ContactInvitationSerializer(invitation)
        return Response(serializer.data)
