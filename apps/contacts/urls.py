from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'contacts'

router = SimpleRouter()
router.register(r'invitations', views.ContactInvitationViewSet, basename='invitation')

urlpatterns = [
    # GET    /api/contacts/                              - List contacts
    # POST   /api/contacts/invitations/                  - Invite by email
    # GET    /api/contacts/invitations/sent/             - Pending sent invitations
    # GET    /api/contacts/invitations/received/         - Pending received invitations
    # POST   /api/contacts/invitations/{id}/accept/      - Accept invitation
    path('', views.contact_list, name='contact-list'),

    path('', include(router.urls)),
]
