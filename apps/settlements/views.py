from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from rest_framework import viewsets, status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from .serializers import (
    PaymentSerializer,
    PaymentCreateSerializer,
    SummaryQuerySerializer,
    BalanceSummarySerializer,
    EventReportSerializer,
)
from apps.core.serializers import EventQuerySerializer, ErrorSerializer
from apps.settlements.services import (
    list_payments,
    record_payment,
    delete_payment,
    get_event_summary,
    get_event_report,
)


class PaymentViewSet(viewsets.ViewSet):
    """
    Payments recorded between attendees.

    list: Payments of ?eventId=
    create: Record a payment (upsert on event + from + to)
    destroy: Undo a payment
    """

    lookup_value_regex = '[0-9a-fA-F-]{36}'

    @extend_schema(
        parameters=[OpenApiParameter('eventId', str, required=True)],
        responses={200: PaymentSerializer(many=True)},
    )
    def list(self, request):
        query = EventQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        payments = list_payments(event_id=query.validated_data['eventId']).select_related('event')
        return Response(PaymentSerializer(payments, many=True).data)

    @extend_schema(
        request=PaymentCreateSerializer,
        responses={201: PaymentSerializer, 200: PaymentSerializer, 400: ErrorSerializer},
        description="Create the payment for a (from, to) pair, or update it if one exists.",
    )
    def create(self, request):
        serializer = PaymentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        payment, created = record_payment(
            event_id=data['eventId'],
            from_attendee_id=data['fromAttendeeId'],
            to_attendee_id=data['toAttendeeId'],
            amount=data['amount'],
            status=data['status'],
        )
        return Response(
            PaymentSerializer(payment).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
        )

    def destroy(self, request, pk=None):
        delete_payment(payment_id=pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    parameters=[
        OpenApiParameter(
            'strategy', OpenApiTypes.STR,
            enum=['pairwise', 'minimal'],
            description='pairwise (default): one line per debtor/creditor pair; minimal: fewest transfers',
        ),
    ],
    responses={200: BalanceSummarySerializer, 404: ErrorSerializer},
    description="Balances of every participant and the transfers that settle them.",
    tags=['settlements'],
)
@api_view(['GET'])
def event_summary(request, event_id):
    """Balance summary - thin HTTP handler."""
    query = SummaryQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    summary = get_event_summary(event_id=event_id, strategy=query.validated_data['strategy'])
    return Response(BalanceSummarySerializer(summary).data)


@extend_schema(
    responses={200: EventReportSerializer, 404: ErrorSerializer},
    description="Totals per person, settlement status and shopping progress for charts.",
    tags=['settlements'],
)
@api_view(['GET'])
def event_report(request, event_id):
    """Report data - thin HTTP handler."""
    report = get_event_report(event_id=event_id)
    return Response(EventReportSerializer(report).data)
