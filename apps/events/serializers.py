from django.utils import timezone
from rest_framework import serializers

from apps.attendees.serializers import AttendeeSerializer
from .countdown import calculate_countdown
from .models import Event


TITLE_ERRORS = {
    'required': 'Title is required',
    'blank': 'Title is required',
    'null': 'Title is required',
    'max_length': 'Title is too long',
}

DATE_ERRORS = {
    'required': 'Date is required',
    'null': 'Date is required',
    'invalid': 'Invalid date',
}


# =============================================================================
# Input Serializers
# =============================================================================

class EventCreateSerializer(serializers.Serializer):
    """
    Validate input for creating an event.

    Fields:
        title (str): 1-255 characters
        eventDate (datetime): Must be in the future
        location (str): Optional, up to 255 characters
        mapsUrl (url): Optional maps link
        description (str): Optional
        peopleCount (int): Optional planned headcount
    """

    title = serializers.CharField(max_length=255, error_messages=TITLE_ERRORS)
    eventDate = serializers.DateTimeField(source='event_date', error_messages=DATE_ERRORS)
    location = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    mapsUrl = serializers.URLField(
        source='maps_url',
        max_length=500,
        required=False,
        allow_null=True,
        error_messages={'invalid': 'Invalid maps link'}
    )
    description = serializers.CharField(required=False, allow_blank=True, default='')
    peopleCount = serializers.IntegerField(source='people_count', min_value=0, required=False, default=0)

    def validate_eventDate(self, value):
        if value <= timezone.now():
            raise serializers.ValidationError('The date must be in the future')
        return value


class EventUpdateSerializer(serializers.Serializer):
    """
    Validate a partial event update.

    ``cancel: true`` turns the request into a cancellation and every
    other field is ignored.
    """

    title = serializers.CharField(max_length=255, required=False, error_messages=TITLE_ERRORS)
    eventDate = serializers.DateTimeField(source='event_date', required=False, error_messages=DATE_ERRORS)
    location = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    mapsUrl = serializers.URLField(
        source='maps_url',
        max_length=500,
        required=False,
        allow_null=True,
        error_messages={'invalid': 'Invalid maps link'}
    )
    description = serializers.CharField(required=False, allow_blank=True)
    peopleCount = serializers.IntegerField(source='people_count', min_value=0, required=False)
    cancel = serializers.BooleanField(required=False, default=False)


# =============================================================================
# Output Serializers
# =============================================================================

class EventSerializer(serializers.ModelSerializer):
    """Event fields as the client sees them."""

    nanoId = serializers.CharField(source='nano_id', read_only=True)
    eventDate = serializers.DateTimeField(source='event_date', read_only=True)
    mapsUrl = serializers.URLField(source='maps_url', read_only=True)
    peopleCount = serializers.IntegerField(source='people_count', read_only=True)
    cancelledAt = serializers.DateTimeField(source='cancelled_at', read_only=True)
    isCancelled = serializers.BooleanField(source='is_cancelled', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Event
        fields = [
            'id',
            'nanoId',
            'title',
            'eventDate',
            'location',
            'mapsUrl',
            'description',
            'peopleCount',
            'cancelledAt',
            'isCancelled',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields


class EventDetailSerializer(EventSerializer):
    """Event with attendees, expense total and countdown."""

    attendees = AttendeeSerializer(many=True, read_only=True)
    totalExpenses = serializers.DecimalField(
        source='total_expenses',
        max_digits=12,
        decimal_places=2,
        read_only=True
    )
    countdown = serializers.SerializerMethodField()

    class Meta(EventSerializer.Meta):
        fields = EventSerializer.Meta.fields + ['attendees', 'totalExpenses', 'countdown']
        read_only_fields = fields

    def get_countdown(self, obj):
        countdown = calculate_countdown(obj.event_date)
        return {
            'days': countdown['days'],
            'hours': countdown['hours'],
            'minutes': countdown['minutes'],
            'seconds': countdown['seconds'],
            'isExpired': countdown['is_expired'],
        }
