from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'payments'

router = SimpleRouter()
router.register(r'', views.PaymentRequestViewSet, basename='payment-request')

urlpatterns = [
    # GET    /api/payment-requests/                      - List caller's requests
    # POST   /api/payment-requests/                      - Request payment from a contact
    # GET    /api/payment-requests/{id}/                 - Get request details
    # PATCH  /api/payment-requests/{id}/update-status/   - Settle or cancel
    path('', include(router.urls)),
]
