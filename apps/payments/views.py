import logging

from django.db import DatabaseError
from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .models import PaymentRequest
from .serializers import (
    PaymentRequestSerializer,
    PaymentRequestCreateSerializer,
    UpdateStatusSerializer,
    PaymentRequestFilterSerializer,
)

from apps.payments.services import (
    create_payment_request,
    get_payment_requests,
    transition_payment_request,
    # Exceptions
    PaymentRequestNotFoundError,
    InvalidStatusError,
    PaymentRequestFinalizedError,
    InsufficientPermissionsError,
    InvalidAmountError,
    NotAContactError,
    SelfRequestError,
)

logger = logging.getLogger(__name__)


class PaymentRequestPagination(PageNumberPagination):
    """Custom pagination for payment requests."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class PaymentRequestViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet
):
    """
    ViewSet for payment requests.

    Only the two parties to a request can see it; everyone else gets 404.

    list: Requests the caller sent or received (filter by status, role)
    create: Request payment from a contact
    retrieve: Get a specific request
    update_status: Settle or cancel a pending request
    """

    serializer_class = PaymentRequestSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = PaymentRequestPagination
    lookup_value_regex = r'[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'

    def get_queryset(self):
        """Return only requests the caller is a party to."""
        if self.action == 'list':
            filter_serializer = PaymentRequestFilterSerializer(data=self.request.query_params)
            filter_serializer.is_valid(raise_exception=True)
            return get_payment_requests(user=self.request.user, **filter_serializer.validated_data)
        return get_payment_requests(user=self.request.user)

    @extend_schema(
        parameters=[
            OpenApiParameter('status', str, enum=['pending', 'settled', 'cancelled']),
            OpenApiParameter('role', str, enum=['sent', 'received']),
        ],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=PaymentRequestCreateSerializer, responses={201: PaymentRequestSerializer})
    def create(self, request, *args, **kwargs):
        """Create a payment request."""
        serializer = PaymentRequestCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            payment_request = create_payment_request(
                from_user=request.user,
                to_user_id=serializer.validated_data['to_user'],
                amount_cents=serializer.validated_data['amount_cents'],
                memo=serializer.validated_data.get('memo'),
            )
        except (InvalidAmountError, NotAContactError, SelfRequestError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        output_serializer = PaymentRequestSerializer(payment_request, context={'request': request})
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    @extend_schema(request=UpdateStatusSerializer)
    @action(detail=True, methods=['patch'], url_path='update-status')
    def update_status(self, request, pk=None):
        """
        Settle or cancel a pending payment request.

        PATCH /api/payment-requests/{id}/update-status/
        Body: {"status": "settled" | "cancelled"}
        """
        serializer = UpdateStatusSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {'error': 'Valid status is required (settled or cancelled)'},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            payment_request = transition_payment_request(
                request_id=pk,
                user=request.user,
                new_status=serializer.validated_data['status'],
            )
        except (InvalidStatusError, PaymentRequestFinalizedError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except PaymentRequestNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except DatabaseError:
            logger.exception("Failed to update payment request %s", pk)
            return Response(
                {'error': 'Failed to update payment request'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response({
            'success': True,
            'status': payment_request.status,
        })
