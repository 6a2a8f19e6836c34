# ==========================================
# apps/payments/admin.py
# ==========================================

from django.contrib import admin
from apps.payments.models import PaymentRequest


@admin.register(PaymentRequest)
class PaymentRequestAdmin(admin.ModelAdmin):
    """Admin interface for Payment Requests."""

    list_display = [
        'id',
        'from_user',
        'to_user',
        'amount_cents',
        'currency',
        'status',
        'created_at',
    ]
    list_filter = ['status', 'currency', 'created_at']
    search_fields = ['from_user__email', 'to_user__email', 'memo']
    readonly_fields = ['created_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('from_user', 'to_user')
