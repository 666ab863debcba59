"""Attendee management service - CRUD for event attendees."""

import logging
from typing import Optional
from uuid import UUID

from django.db.models import QuerySet

from apps.attendees.models import Attendee
from apps.events.services import get_event_by_public_id

from .exceptions import AttendeeNotFoundError

logger = logging.getLogger(__name__)


def list_attendees(*, event_id: str) -> QuerySet:
    """Attendees of an event in the order they were added."""
    event = get_event_by_public_id(event_id=event_id)
    return Attendee.objects.filter(event=event).order_by('created_at')


def create_attendee(
    *,
    event_id: str,
    name: str,
    exclude_from_split: bool = False
) -> Attendee:
    """
    Add an attendee to an event.

    Raises:
        EventNotFoundError: If the event doesn't exist
    """
    event = get_event_by_public_id(event_id=event_id)
    attendee = Attendee.objects.create(
        event=event,
        name=name,
        exclude_from_split=exclude_from_split,
    )
    logger.info("Added attendee %s to event %s", attendee.id, event.nano_id)
    return attendee


def get_attendee(*, attendee_id: UUID) -> Attendee:
    try:
        return Attendee.objects.select_related('event').get(id=attendee_id)
    except Attendee.DoesNotExist:
        raise AttendeeNotFoundError()


def update_attendee(
    *,
    attendee_id: UUID,
    name: Optional[str] = None,
    exclude_from_split: Optional[bool] = None
) -> Attendee:
    """
    Rename an attendee and/or toggle their exclusion from the split.

    Toggling the flag only changes the split denominator the next time
    balances are computed; their expenses stay attributed to them.
    """
    attendee = get_attendee(attendee_id=attendee_id)

    update_fields = []
    if name:
        attendee.name = name
        update_fields.append('name')
    if exclude_from_split is not None:
        attendee.exclude_from_split = exclude_from_split
        update_fields.append('exclude_from_split')

    if update_fields:
        attendee.save(update_fields=update_fields)

    return attendee


def delete_attendee(*, attendee_id: UUID) -> None:
    """
    Remove an attendee.

    Expenses they paid stay on the event with no payer.
    """
    attendee = get_attendee(attendee_id=attendee_id)
    attendee.delete()
    logger.info("Removed attendee %s", attendee_id)
