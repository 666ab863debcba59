from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'events'

router = DefaultRouter()
router.register(r'events', views.EventViewSet, basename='event')

urlpatterns = [
    # POST   /api/events/                    - Create event
    # GET    /api/events/{eventId}/          - Event with attendees and total
    # PATCH  /api/events/{eventId}/          - Edit settings / cancel
    # DELETE /api/events/{eventId}/          - Hard delete

    # Custom event actions
    # POST   /api/events/{eventId}/cancel/   - Soft delete
    # POST   /api/events/{eventId}/restore/  - Undo cancellation
    path('', include(router.urls)),
]
