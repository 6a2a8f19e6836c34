from decimal import Decimal, ROUND_HALF_UP

from rest_framework import serializers

from .models import PaymentRequest, PaymentRequestStatus, MAX_AMOUNT_CENTS
from apps.accounts.serializers import UserPublicSerializer


class PaymentRequestSerializer(serializers.ModelSerializer):
    """Main serializer for payment requests."""

    from_user = UserPublicSerializer(read_only=True)
    to_user = UserPublicSerializer(read_only=True)
    amount = serializers.SerializerMethodField()
    allowed_statuses = serializers.SerializerMethodField()

    class Meta:
        model = PaymentRequest
        fields = [
            'id',
            'from_user',
            'to_user',
            'amount_cents',
            'amount',
            'currency',
            'memo',
            'status',
            'allowed_statuses',
            'created_at',
        ]
        read_only_fields = fields

    def get_amount(self, obj):
        """Amount in major units, as a string with two decimals."""
        return str((Decimal(obj.amount_cents) / 100).quantize(Decimal('0.01')))

    def get_allowed_statuses(self, obj):
        """Statuses the current user may move this request to."""
        request = self.context.get('request')
        if not request or obj.is_final:
            return []
        if obj.to_user_id == request.user.id:
            return [PaymentRequestStatus.SETTLED, PaymentRequestStatus.CANCELLED]
        if obj.from_user_id == request.user.id:
            return [PaymentRequestStatus.CANCELLED]
        return []


class PaymentRequestCreateSerializer(serializers.Serializer):
    """
    Input for creating a payment request.

    Accepts the amount either in minor units (``amount_cents``) or in major
    units (``amount``, up to two decimals), but not both.
    """

    to_user = serializers.UUIDField(required=True)
    amount_cents = serializers.IntegerField(min_value=1, max_value=MAX_AMOUNT_CENTS, required=False)
    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01'),
        required=False
    )
    memo = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate(self, attrs):
        has_cents = 'amount_cents' in attrs
        has_amount = 'amount' in attrs
        if has_cents == has_amount:
            raise serializers.ValidationError({
                'amount': 'Provide exactly one of amount or amount_cents'
            })
        if has_amount:
            cents = (attrs.pop('amount') * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
            if cents > MAX_AMOUNT_CENTS:
                raise serializers.ValidationError({'amount': 'Amount is too large'})
            attrs['amount_cents'] = int(cents)
        return attrs


class UpdateStatusSerializer(serializers.Serializer):
    """Input for a status transition; the value itself is checked by the service."""

    status = serializers.CharField(required=True)


class PaymentRequestFilterSerializer(serializers.Serializer):
    """Query parameters for listing payment requests."""

    status = serializers.ChoiceField(choices=PaymentRequestStatus.choices, required=False)
    role = serializers.ChoiceField(choices=['sent', 'received'], required=False)
