from drf_spectacular.utils import extend_schema
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.identifiers import PUBLIC_ID_LENGTH
from .serializers import (
    EventSerializer,
    EventDetailSerializer,
    EventCreateSerializer,
    EventUpdateSerializer,
)
from apps.events.services import (
    create_event,
    get_event_detail,
    update_event,
    cancel_event,
    restore_event,
    delete_event,
)


class EventViewSet(viewsets.ViewSet):
    """
    Events addressed by their public id.

    create: Create an event
    retrieve: Event with attendees, expense total and countdown
    partial_update: Edit settings (or cancel with ``{"cancel": true}``)
    destroy: Hard delete
    cancel: Soft delete
    restore: Undo a cancellation
    """

    lookup_value_regex = f'[0-9A-Za-z]{{{PUBLIC_ID_LENGTH}}}'

    @extend_schema(request=EventCreateSerializer, responses={201: EventSerializer})
    def create(self, request):
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        event = create_event(**serializer.validated_data)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: EventDetailSerializer})
    def retrieve(self, request, pk=None):
        event = get_event_detail(event_id=pk)
        return Response(EventDetailSerializer(event).data)

    @extend_schema(request=EventUpdateSerializer, responses={200: EventSerializer})
    def partial_update(self, request, pk=None):
        serializer = EventUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        changes = dict(serializer.validated_data)

        if changes.pop('cancel', False):
            event = cancel_event(event_id=pk)
        else:
            event = update_event(event_id=pk, **changes)

        return Response(EventSerializer(event).data)

    def destroy(self, request, pk=None):
        delete_event(event_id=pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={200: EventSerializer})
    @action(detail=True, methods=['post'])
    def cancel(self, request, pk=None):
        """
        Cancel the event, keeping attendees and expenses.

        POST /api/events/{eventId}/cancel/
        """
        event = cancel_event(event_id=pk)
        return Response(EventSerializer(event).data)

    @extend_schema(request=None, responses={200: EventSerializer})
    @action(detail=True, methods=['post'])
    def restore(self, request, pk=None):
        """
        Undo a cancellation.

        POST /api/events/{eventId}/restore/
        """
        event = restore_event(event_id=pk)
        return Response(EventSerializer(event).data)
