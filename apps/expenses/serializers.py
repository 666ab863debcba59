from decimal import Decimal
from urllib.parse import urlsplit

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import URLValidator
from rest_framework import serializers

from apps.attendees.serializers import AttendeeSerializer
from apps.core.serializers import LeadingFieldsMixin, PublicIdField
from .models import Expense, ExpenseReceipt
from .services import parse_receipt_urls


_url_validator = URLValidator(schemes=['http', 'https'])


def _check_receipt_url(value):
    # Files stored by us come back as /media/... paths or absolute URLs to them
    if value.startswith('/'):
        return
    parts = urlsplit(value)
    media_prefix = urlsplit(settings.MEDIA_URL).path
    if parts.scheme in ('http', 'https') and parts.netloc and parts.path.startswith(media_prefix):
        return
    try:
        _url_validator(value)
    except DjangoValidationError:
        raise serializers.ValidationError('Invalid receipt URL')


class ReceiptUrlField(serializers.CharField):
    """Absolute http(s) URL or a path on this server."""

    def __init__(self, **kwargs):
        kwargs.setdefault('max_length', 500)
        super().__init__(**kwargs)
        self.validators.append(_check_receipt_url)


def _amount_field(**kwargs):
    return serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        error_messages={
            'required': 'Amount is required',
            'null': 'Amount is required',
            'invalid': 'Amount must be a number',
            'max_digits': 'Amount is too large',
            'max_whole_digits': 'Amount is too large',
            'max_decimal_places': 'Amount can have at most 2 decimal places',
        },
        **kwargs
    )


def _description_field(**kwargs):
    return serializers.CharField(
        max_length=255,
        error_messages={
            'required': 'Description is required',
            'blank': 'Description is required',
            'null': 'Description is required',
            'max_length': 'Description is too long',
        },
        **kwargs
    )


# =============================================================================
# Input Serializers
# =============================================================================

class ExpenseInputSerializer(serializers.Serializer):
    """
    Validate an expense body.

    Fields:
        attendeeId (uuid): Payer, optional and nullable
        description (str): 1-255 characters
        amount (decimal): Positive, 2 decimal places
        receiptUrls (list[str]): Receipt URLs to attach
        receiptUrl (str): Legacy single string, bare URL or JSON array
        excludedAttendees (list[uuid]): Attendees not sharing this expense

    ``receiptUrl`` is folded into ``receiptUrls`` during validation.
    """

    attendeeId = serializers.UUIDField(
        required=False,
        allow_null=True,
        error_messages={'invalid': 'Invalid attendee ID'}
    )
    description = _description_field()
    amount = _amount_field()
    receiptUrls = serializers.ListField(child=ReceiptUrlField(), required=False)
    receiptUrl = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    excludedAttendees = serializers.ListField(
        child=serializers.UUIDField(error_messages={'invalid': 'Invalid attendee ID'}),
        required=False
    )

    def validate_amount(self, value):
        if value <= Decimal('0'):
            raise serializers.ValidationError('Amount must be positive')
        return value

    def validate(self, attrs):
        if 'receiptUrl' in attrs:
            legacy = parse_receipt_urls(attrs.pop('receiptUrl'))
            for url in legacy:
                try:
                    _check_receipt_url(url)
                except serializers.ValidationError:
                    raise serializers.ValidationError({'receiptUrl': 'Invalid receipt URL'})
            if 'receiptUrls' not in attrs:
                attrs['receiptUrls'] = legacy
        return attrs

    def to_service_kwargs(self):
        """Map validated camelCase input to service keyword arguments."""
        mapping = {
            'attendeeId': 'attendee_id',
            'description': 'description',
            'amount': 'amount',
            'receiptUrls': 'receipt_urls',
            'excludedAttendees': 'excluded_attendee_ids',
        }
        return {
            mapping[key]: value
            for key, value in self.validated_data.items()
            if key in mapping
        }


class ExpenseCreateSerializer(LeadingFieldsMixin, ExpenseInputSerializer):
    """Expense creation also names the event."""

    eventId = PublicIdField()


class ReceiptUploadSerializer(serializers.Serializer):
    """Multipart receipt file."""

    file = serializers.FileField(error_messages={
        'required': 'No file provided',
        'invalid': 'No file provided',
        'empty': 'The file is empty',
    })


class StandaloneUploadSerializer(ReceiptUploadSerializer):
    """Upload not yet tied to an expense."""

    eventId = PublicIdField()


# =============================================================================
# Output Serializers
# =============================================================================

def _absolute_url(request, url):
    if request is not None and url.startswith('/'):
        return request.build_absolute_uri(url)
    return url


class ReceiptSerializer(serializers.ModelSerializer):
    """Serializer for receipts."""

    url = serializers.SerializerMethodField()
    contentType = serializers.CharField(source='content_type', read_only=True)
    sizeBytes = serializers.IntegerField(source='size_bytes', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = ExpenseReceipt
        fields = ['id', 'url', 'contentType', 'sizeBytes', 'createdAt']
        read_only_fields = fields

    def get_url(self, obj):
        return _absolute_url(self.context.get('request'), obj.url)


class ExpenseSerializer(serializers.ModelSerializer):
    """
    Expense with payer, receipts and exclusions.

    ``receiptUrls`` repeats the receipt URLs as a flat list for clients
    that only render links.
    """

    attendeeId = serializers.UUIDField(source='attendee_id', read_only=True)
    attendee = AttendeeSerializer(read_only=True)
    receipts = ReceiptSerializer(many=True, read_only=True)
    receiptUrls = serializers.SerializerMethodField()
    excludedAttendees = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Expense
        fields = [
            'id',
            'attendeeId',
            'attendee',
            'description',
            'amount',
            'receipts',
            'receiptUrls',
            'excludedAttendees',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields

    def get_receiptUrls(self, obj):
        request = self.context.get('request')
        return [_absolute_url(request, receipt.url) for receipt in obj.receipts.all()]

    def get_excludedAttendees(self, obj):
        return [str(exclusion.attendee_id) for exclusion in obj.exclusions.all()]
