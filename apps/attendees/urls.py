from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'attendees'

router = DefaultRouter()
router.register(r'attendees', views.AttendeeViewSet, basename='attendee')
router.register(r'bank-info', views.BankInfoViewSet, basename='bank-info')

urlpatterns = [
    # GET    /api/attendees/?eventId=     - List attendees of an event
    # POST   /api/attendees/              - Add attendee
    # GET    /api/attendees/{id}/         - Get attendee
    # PATCH  /api/attendees/{id}/         - Rename / toggle exclusion
    # DELETE /api/attendees/{id}/         - Remove attendee

    # GET    /api/bank-info/?attendeeId=  - Bank info of an attendee
    # POST   /api/bank-info/              - Store bank info
    # PUT    /api/bank-info/{id}/         - Replace bank info
    # PATCH  /api/bank-info/{id}/         - Partial update
    # DELETE /api/bank-info/{id}/         - Delete bank info
    path('', include(router.urls)),
]
