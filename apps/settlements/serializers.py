from decimal import Decimal

from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers

from apps.attendees.serializers import AttendeeSerializer
from apps.core.serializers import PublicIdField
from .balances import STRATEGIES, PAIRWISE
from .models import Payment, PaymentStatus


def _money_field(**kwargs):
    return serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True, **kwargs)


# =============================================================================
# Input Serializers
# =============================================================================

class PaymentCreateSerializer(serializers.Serializer):
    """
    Validate a payment to record.

    Fields:
        eventId (str): Public event id
        fromAttendeeId (uuid): Who pays
        toAttendeeId (uuid): Who receives
        amount (decimal): Positive
        status (str): 'pending' or 'completed', defaults to 'completed'
    """

    eventId = PublicIdField()
    fromAttendeeId = serializers.UUIDField(error_messages={
        'required': 'fromAttendeeId is required',
        'null': 'fromAttendeeId is required',
        'invalid': 'Invalid attendee ID',
    })
    toAttendeeId = serializers.UUIDField(error_messages={
        'required': 'toAttendeeId is required',
        'null': 'toAttendeeId is required',
        'invalid': 'Invalid attendee ID',
    })
    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        error_messages={
            'required': 'Amount is required',
            'null': 'Amount is required',
            'invalid': 'Amount must be a number',
            'max_digits': 'Amount is too large',
            'max_whole_digits': 'Amount is too large',
            'max_decimal_places': 'Amount can have at most 2 decimal places',
        }
    )
    status = serializers.ChoiceField(
        choices=PaymentStatus.choices,
        required=False,
        default=PaymentStatus.COMPLETED,
        error_messages={'invalid_choice': 'Invalid payment status'}
    )

    def validate_amount(self, value):
        if value <= Decimal('0'):
            raise serializers.ValidationError('Amount must be positive')
        return value

    def validate(self, attrs):
        if attrs['fromAttendeeId'] == attrs['toAttendeeId']:
            raise serializers.ValidationError('An attendee cannot pay themselves.')
        return attrs


class SummaryQuerySerializer(serializers.Serializer):
    strategy = serializers.ChoiceField(
        choices=STRATEGIES,
        required=False,
        default=PAIRWISE,
        error_messages={'invalid_choice': 'Unknown strategy. Use pairwise or minimal'}
    )


# =============================================================================
# Output Serializers
# =============================================================================

class PaymentSerializer(serializers.ModelSerializer):
    """Serializer for payments."""

    eventId = serializers.CharField(source='event.nano_id', read_only=True)
    fromAttendeeId = serializers.UUIDField(source='from_attendee_id', read_only=True)
    toAttendeeId = serializers.UUIDField(source='to_attendee_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Payment
        fields = [
            'id',
            'eventId',
            'fromAttendeeId',
            'toAttendeeId',
            'amount',
            'status',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields


@extend_schema_field(AttendeeSerializer)
class ParticipantField(serializers.Field):
    """Render a calculator participant as the attendee it came from."""

    def __init__(self, **kwargs):
        kwargs['read_only'] = True
        super().__init__(**kwargs)

    def to_representation(self, participant):
        return AttendeeSerializer(participant.source).data


class PersonBalanceSerializer(serializers.Serializer):
    attendee = ParticipantField(source='participant')
    amountPaid = _money_field(source='amount_paid')
    amountOwed = _money_field(source='amount_owed')
    balance = _money_field()


class TransferSerializer(serializers.Serializer):
    creditor = ParticipantField()
    amount = _money_field()
    isPaid = serializers.BooleanField(source='is_paid', read_only=True)
    paymentId = serializers.UUIDField(source='payment_id', read_only=True, allow_null=True)
    transferId = serializers.CharField(source='transfer_id', read_only=True)


class DebtorTransfersSerializer(serializers.Serializer):
    debtor = ParticipantField()
    owes = _money_field()
    transfers = TransferSerializer(many=True, read_only=True)


class BalanceSummarySerializer(serializers.Serializer):
    """Output of the balance computation for one event."""

    strategy = serializers.CharField(read_only=True)
    totalExpenses = _money_field(source='total_expenses')
    perPerson = _money_field(source='per_person')
    activeCount = serializers.IntegerField(source='active_count', read_only=True)
    excludedAttendees = serializers.ListField(
        source='excluded',
        child=ParticipantField(),
        read_only=True
    )
    balances = PersonBalanceSerializer(many=True, read_only=True)
    transfers = DebtorTransfersSerializer(many=True, read_only=True)


class PersonTotalSerializer(serializers.Serializer):
    attendeeId = serializers.UUIDField(source='participant.id', read_only=True)
    name = serializers.CharField(source='participant.name', read_only=True)
    total = _money_field()


class PaymentStatusSerializer(serializers.Serializer):
    attendeeId = serializers.UUIDField(source='participant.id', read_only=True)
    name = serializers.CharField(source='participant.name', read_only=True)
    paid = _money_field()
    balance = _money_field()
    status = serializers.CharField(read_only=True)


class ShoppingProgressSerializer(serializers.Serializer):
    total = serializers.IntegerField(read_only=True)
    purchased = serializers.IntegerField(read_only=True)


class ReportTotalsSerializer(serializers.Serializer):
    totalExpenses = _money_field(source='total_expenses')
    perPerson = _money_field(source='per_person')
    activeCount = serializers.IntegerField(source='active_count', read_only=True)
    attendeeCount = serializers.IntegerField(source='attendee_count', read_only=True)
    expenseCount = serializers.IntegerField(source='expense_count', read_only=True)
    unassignedTotal = _money_field(source='unassigned_total')


class EventReportSerializer(serializers.Serializer):
    """Chart data: who paid what, who is settled, shopping progress."""

    expensesByPerson = PersonTotalSerializer(source='expenses_by_person', many=True, read_only=True)
    paymentStatus = PaymentStatusSerializer(source='payment_status', many=True, read_only=True)
    shopping = ShoppingProgressSerializer(read_only=True)
    totals = ReportTotalsSerializer(read_only=True)
