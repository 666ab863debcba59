from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, parser_classes
from rest_framework.parsers import MultiPartParser, FormParser
from rest_framework.response import Response

from .serializers import (
    ExpenseSerializer,
    ExpenseCreateSerializer,
    ExpenseInputSerializer,
    ReceiptSerializer,
    ReceiptUploadSerializer,
    StandaloneUploadSerializer,
)
from apps.core.serializers import EventQuerySerializer
from apps.expenses.services import (
    list_expenses,
    get_expense,
    create_expense,
    update_expense,
    delete_expense,
    upload_receipt as store_upload,
    add_receipt,
    remove_receipt as detach_receipt,
)

UUID_LOOKUP_REGEX = '[0-9a-fA-F-]{36}'


class ExpenseViewSet(viewsets.ViewSet):
    """
    Expenses of an event.

    list: Expenses of ?eventId=, newest first
    create: Record an expense
    retrieve: Get one expense
    partial_update: Edit payer, description, amount, receipts or exclusions
    destroy: Delete an expense and its stored receipts
    receipts: Attach an uploaded receipt photo
    remove_receipt: Detach a receipt
    """

    lookup_value_regex = UUID_LOOKUP_REGEX

    @extend_schema(
        parameters=[OpenApiParameter('eventId', str, required=True)],
        responses={200: ExpenseSerializer(many=True)},
    )
    def list(self, request):
        query = EventQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        expenses = list_expenses(event_id=query.validated_data['eventId'])
        serializer = ExpenseSerializer(expenses, many=True, context={'request': request})
        return Response(serializer.data)

    @extend_schema(request=ExpenseCreateSerializer, responses={201: ExpenseSerializer})
    def create(self, request):
        serializer = ExpenseCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        expense = create_expense(
            event_id=serializer.validated_data['eventId'],
            **serializer.to_service_kwargs()
        )
        return Response(
            ExpenseSerializer(expense, context={'request': request}).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(responses={200: ExpenseSerializer})
    def retrieve(self, request, pk=None):
        expense = get_expense(expense_id=pk)
        return Response(ExpenseSerializer(expense, context={'request': request}).data)

    @extend_schema(request=ExpenseInputSerializer, responses={200: ExpenseSerializer})
    def partial_update(self, request, pk=None):
        serializer = ExpenseInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        expense = update_expense(expense_id=pk, **serializer.to_service_kwargs())
        return Response(ExpenseSerializer(expense, context={'request': request}).data)

    def destroy(self, request, pk=None):
        delete_expense(expense_id=pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=ReceiptUploadSerializer, responses={201: ReceiptSerializer})
    @action(detail=True, methods=['post'], parser_classes=[MultiPartParser, FormParser])
    def receipts(self, request, pk=None):
        """
        Attach a receipt photo.

        POST /api/expenses/{id}/receipts/ (multipart, field ``file``)
        """
        serializer = ReceiptUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        receipt = add_receipt(expense_id=pk, file=serializer.validated_data['file'])
        return Response(
            ReceiptSerializer(receipt, context={'request': request}).data,
            status=status.HTTP_201_CREATED
        )

    @action(
        detail=True,
        methods=['delete'],
        url_path=f'receipts/(?P<receipt_id>{UUID_LOOKUP_REGEX})',
        url_name='remove-receipt',
    )
    def remove_receipt(self, request, pk=None, receipt_id=None):
        """DELETE /api/expenses/{id}/receipts/{receiptId}/"""
        detach_receipt(expense_id=pk, receipt_id=receipt_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(request=StandaloneUploadSerializer, responses={201: OpenApiTypes.OBJECT})
@api_view(['POST'])
@parser_classes([MultiPartParser, FormParser])
def upload_receipt(request):
    """
    Store a receipt photo and return its URL.

    The URL is later passed in ``receiptUrls`` when saving an expense.
    """
    serializer = StandaloneUploadSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    url = store_upload(
        event_id=serializer.validated_data['eventId'],
        file=serializer.validated_data['file'],
    )
    return Response({'url': request.build_absolute_uri(url)}, status=status.HTTP_201_CREATED)
