from rest_framework import serializers

from apps.core.serializers import LeadingFieldsMixin, PublicIdField
from .models import Attendee, BankInfo


def _name_field(**kwargs):
    return serializers.CharField(
        max_length=100,
        error_messages={
            'required': 'Name is required',
            'blank': 'Name is required',
            'null': 'Name is required',
            'max_length': 'Name is too long',
        },
        **kwargs
    )


# =============================================================================
# Input Serializers
# =============================================================================

class AttendeeCreateSerializer(serializers.Serializer):
    """
    Validate input for adding an attendee.

    Fields:
        eventId (str): Public event id
        name (str): 1-100 characters
        excludeFromSplit (bool): Optional, defaults to False
    """

    eventId = PublicIdField()
    name = _name_field()
    excludeFromSplit = serializers.BooleanField(required=False, default=False)


class AttendeeUpdateSerializer(serializers.Serializer):
    """Validate a partial attendee update."""

    name = _name_field(required=False)
    excludeFromSplit = serializers.BooleanField(required=False)


class BankInfoQuerySerializer(serializers.Serializer):
    """Validate ``?attendeeId=`` for bank info lookups."""

    attendeeId = serializers.UUIDField(error_messages={
        'required': 'attendeeId is required',
        'invalid': 'Invalid attendee ID',
    })


class BankInfoInputSerializer(serializers.Serializer):
    """
    Validate bank info fields.

    Used with ``partial=True`` for PATCH.
    """

    holderName = serializers.CharField(max_length=100, error_messages={
        'required': 'Holder name is required',
        'blank': 'Holder name is required',
        'max_length': 'Holder name is too long',
    })
    bankName = serializers.CharField(max_length=100, error_messages={
        'required': 'Bank name is required',
        'blank': 'Bank name is required',
        'max_length': 'Bank name is too long',
    })
    clabe = serializers.RegexField(r'^\d{18}$', error_messages={
        'required': 'CLABE is required',
        'blank': 'CLABE is required',
        'invalid': 'CLABE must be exactly 18 digits',
    })
    accountNumber = serializers.RegexField(
        r'^\d{1,20}$',
        required=False,
        allow_blank=True,
        allow_null=True,
        error_messages={'invalid': 'Account number must be up to 20 digits'}
    )

    def to_service_kwargs(self):
        """Map validated camelCase input to service keyword arguments."""
        mapping = {
            'holderName': 'holder_name',
            'bankName': 'bank_name',
            'clabe': 'clabe',
            'accountNumber': 'account_number',
        }
        return {
            mapping[key]: value
            for key, value in self.validated_data.items()
            if key in mapping
        }


class BankInfoCreateSerializer(LeadingFieldsMixin, BankInfoInputSerializer):
    """Bank info creation also names the attendee."""

    leading_fields = ('attendeeId',)

    attendeeId = serializers.UUIDField(error_messages={
        'required': 'attendeeId is required',
        'invalid': 'Invalid attendee ID',
    })


# =============================================================================
# Output Serializers
# =============================================================================

class AttendeeSerializer(serializers.ModelSerializer):
    """Attendee as the client sees it."""

    excludeFromSplit = serializers.BooleanField(source='exclude_from_split', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Attendee
        fields = ['id', 'name', 'excludeFromSplit', 'createdAt']
        read_only_fields = fields


class BankInfoSerializer(serializers.ModelSerializer):
    """Serializer for bank info."""

    attendeeId = serializers.UUIDField(source='attendee_id', read_only=True)
    holderName = serializers.CharField(source='holder_name', read_only=True)
    bankName = serializers.CharField(source='bank_name', read_only=True)
    accountNumber = serializers.CharField(source='account_number', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = BankInfo
        fields = [
            'id',
            'attendeeId',
            'holderName',
            'bankName',
            'clabe',
            'accountNumber',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields
