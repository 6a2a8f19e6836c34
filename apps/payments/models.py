from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
import uuid


class PaymentRequestStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    SETTLED = 'settled', 'Settled'
    CANCELLED = 'cancelled', 'Cancelled'


TERMINAL_STATUSES = (PaymentRequestStatus.SETTLED.value, PaymentRequestStatus.CANCELLED.value)

# Upper bound of the PositiveIntegerField column on every supported backend
MAX_AMOUNT_CENTS = 2147483647


def default_currency():
    return settings.PAYMENT_REQUEST_CURRENCY


class PaymentRequest(models.Model):
    """
    A request from one user (requester) to another (payer) for an amount.

    The record tracks status only; no money moves. It leaves ``pending``
    exactly once, into ``settled`` or ``cancelled``.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    from_user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='payment_requests_sent'
    )
    to_user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='payment_requests_received'
    )

    # Minor currency units (pence)
    amount_cents = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    currency = models.CharField(max_length=3, default=default_currency)
    memo = models.TextField(null=True, blank=True)

    status = models.CharField(
        max_length=20,
        choices=PaymentRequestStatus.choices,
        default=PaymentRequestStatus.PENDING
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'payment_requests'
        constraints = [
            models.CheckConstraint(
                condition=models.Q(amount_cents__gt=0),
                name='payment_request_amount_positive',
            ),
        ]
        indexes = [
            models.Index(fields=['from_user', 'created_at'], name='payreq_from_user_idx'),
            models.Index(fields=['to_user', 'created_at'], name='payreq_to_user_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.from_user} requests {self.amount_cents} {self.currency} from {self.to_user} ({self.status})"

    @property
    def is_final(self):
        return self.status in TERMINAL_STATUSES

    def involves(self, user):
        return user.id in (self.from_user_id, self.to_user_id)
