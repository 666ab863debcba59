from django.urls import path, re_path, include
from rest_framework.routers import DefaultRouter

from apps.core.identifiers import PUBLIC_ID_LENGTH
from . import views

app_name = 'settlements'

router = DefaultRouter()
router.register(r'payments', views.PaymentViewSet, basename='payment')

EVENT_ID = rf'(?P<event_id>[0-9A-Za-z]{{{PUBLIC_ID_LENGTH}}})'

urlpatterns = [
    # GET /api/events/{eventId}/summary/?strategy=  - Balances and transfers
    re_path(rf'^events/{EVENT_ID}/summary/$', views.event_summary, name='event-summary'),
    # GET /api/events/{eventId}/report/             - Chart data
    re_path(rf'^events/{EVENT_ID}/report/$', views.event_report, name='event-report'),

    # GET    /api/payments/?eventId=  - Payments of an event
    # POST   /api/payments/           - Record payment (upsert)
    # DELETE /api/payments/{id}/      - Undo payment
    path('', include(router.urls)),
]
