from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import viewsets, status
from rest_framework.response import Response

from .serializers import (
    AttendeeSerializer,
    AttendeeCreateSerializer,
    AttendeeUpdateSerializer,
    BankInfoSerializer,
    BankInfoQuerySerializer,
    BankInfoInputSerializer,
    BankInfoCreateSerializer,
)
from apps.core.serializers import EventQuerySerializer
from apps.attendees.services import (
    list_attendees,
    create_attendee,
    get_attendee,
    update_attendee,
    delete_attendee,
    get_bank_info_for_attendee,
    create_bank_info,
    update_bank_info,
    delete_bank_info,
)

UUID_LOOKUP_REGEX = '[0-9a-fA-F-]{36}'


class AttendeeViewSet(viewsets.ViewSet):
    """
    Attendees of an event.

    Views are thin HTTP handlers; services do the work.

    list: Attendees of ?eventId=
    create: Add an attendee
    retrieve: Get one attendee
    partial_update: Rename / toggle exclusion
    destroy: Remove an attendee
    """

    lookup_value_regex = UUID_LOOKUP_REGEX

    @extend_schema(
        parameters=[OpenApiParameter('eventId', str, required=True)],
        responses={200: AttendeeSerializer(many=True)},
    )
    def list(self, request):
        query = EventQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        attendees = list_attendees(event_id=query.validated_data['eventId'])
        return Response(AttendeeSerializer(attendees, many=True).data)

    @extend_schema(request=AttendeeCreateSerializer, responses={201: AttendeeSerializer})
    def create(self, request):
        serializer = AttendeeCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        attendee = create_attendee(
            event_id=data['eventId'],
            name=data['name'],
            exclude_from_split=data['excludeFromSplit'],
        )
        return Response(AttendeeSerializer(attendee).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: AttendeeSerializer})
    def retrieve(self, request, pk=None):
        attendee = get_attendee(attendee_id=pk)
        return Response(AttendeeSerializer(attendee).data)

    @extend_schema(request=AttendeeUpdateSerializer, responses={200: AttendeeSerializer})
    def partial_update(self, request, pk=None):
        serializer = AttendeeUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        attendee = update_attendee(
            attendee_id=pk,
            name=data.get('name'),
            exclude_from_split=data.get('excludeFromSplit'),
        )
        return Response(AttendeeSerializer(attendee).data)

    def destroy(self, request, pk=None):
        delete_attendee(attendee_id=pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


class BankInfoViewSet(viewsets.ViewSet):
    """
    Bank info of an attendee.

    list: Bank info of ?attendeeId= (null body when none on file)
    create: Store bank info
    update / partial_update: Change bank info
    destroy: Delete bank info
    """

    lookup_value_regex = UUID_LOOKUP_REGEX

    @extend_schema(
        parameters=[OpenApiParameter('attendeeId', str, required=True)],
        responses={200: BankInfoSerializer},
    )
    def list(self, request):
        query = BankInfoQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        bank_info = get_bank_info_for_attendee(attendee_id=query.validated_data['attendeeId'])
        if bank_info is None:
            return Response(None)
        return Response(BankInfoSerializer(bank_info).data)

    @extend_schema(request=BankInfoCreateSerializer, responses={201: BankInfoSerializer})
    def create(self, request):
        serializer = BankInfoCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        bank_info = create_bank_info(
            attendee_id=serializer.validated_data['attendeeId'],
            **serializer.to_service_kwargs()
        )
        return Response(BankInfoSerializer(bank_info).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=BankInfoInputSerializer, responses={200: BankInfoSerializer})
    def update(self, request, pk=None):
        return self._update(request, pk, partial=False)

    @extend_schema(request=BankInfoInputSerializer, responses={200: BankInfoSerializer})
    def partial_update(self, request, pk=None):
        return self._update(request, pk, partial=True)

    def destroy(self, request, pk=None):
        delete_bank_info(bank_info_id=pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _update(self, request, pk, partial):
        serializer = BankInfoInputSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        bank_info = update_bank_info(bank_info_id=pk, **serializer.to_service_kwargs())
        return Response(BankInfoSerializer(bank_info).data)
