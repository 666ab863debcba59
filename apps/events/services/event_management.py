"""
Event management service.

Handles event CRUD plus the cancel/restore soft delete.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from django.db import transaction, IntegrityError
from django.db.models import Sum

from apps.core.identifiers import generate_public_id, is_valid_public_id
from apps.events.models import Event

from .exceptions import EventNotFoundError, PublicIdGenerationError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    'title',
    'event_date',
    'location',
    'maps_url',
    'description',
    'people_count',
)


def create_event(
    *,
    title: str,
    event_date: datetime,
    location: Optional[str] = None,
    maps_url: Optional[str] = None,
    description: str = '',
    people_count: int = 0,
    max_retries: int = 5
) -> Event:
    """
    Create a new event with a unique public id.

    Args:
        title: Event title
        event_date: When the gathering starts
        location: Optional free-text location
        maps_url: Optional maps link
        description: Optional description
        people_count: Planned headcount
        max_retries: Maximum attempts to generate a unique public id

    Returns:
        Created Event instance

    Raises:
        PublicIdGenerationError: If no unique id could be generated
    """
    for attempt in range(max_retries):
        nano_id = generate_public_id()

        try:
            with transaction.atomic():
                event = Event.objects.create(
                    nano_id=nano_id,
                    title=title,
                    event_date=event_date,
                    location=location,
                    maps_url=maps_url,
                    description=description,
                    people_count=people_count,
                )
        except IntegrityError:
            # Public id collision (62^10 space, should be vanishingly rare)
            logger.warning("Public id collision on attempt %d", attempt + 1)
            continue

        logger.info("Created event %s", event.nano_id)
        return event

    raise PublicIdGenerationError(
        f"Failed to generate unique event id after {max_retries} attempts"
    )


def get_event_by_public_id(*, event_id: str) -> Event:
    """
    Resolve a public id to the event row.

    Raises:
        EventNotFoundError: If the id is malformed or no event has it
    """
    if not is_valid_public_id(event_id):
        raise EventNotFoundError()
    try:
        return Event.objects.get(nano_id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError()


def get_event_detail(*, event_id: str) -> Event:
    """
    Load an event with its attendees and expense total.

    The returned instance carries ``total_expenses`` (Decimal).
    """
    try:
        event = Event.objects.prefetch_related('attendees').get(nano_id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError()

    event.total_expenses = get_total_expenses(event=event)
    return event


def get_total_expenses(*, event: Event) -> Decimal:
    """Sum of the event's expense rows."""
    total = event.expenses.aggregate(total=Sum('amount'))['total']
    return total if total is not None else Decimal('0.00')


@transaction.atomic
def update_event(*, event_id: str, **changes) -> Event:
    """
    Apply a partial update to an event.

    Only keys in ``UPDATABLE_FIELDS`` are honoured; others are ignored.
    Last write wins, there is no version check.
    """
    event = get_event_by_public_id(event_id=event_id)

    update_fields = []
    for field in UPDATABLE_FIELDS:
        if field in changes:
            setattr(event, field, changes[field])
            update_fields.append(field)

    if update_fields:
        update_fields.append('updated_at')
        event.save(update_fields=update_fields)
        logger.info("Updated event %s: %s", event.nano_id, ', '.join(update_fields[:-1]))

    return event


def cancel_event(*, event_id: str) -> Event:
    """Soft delete: stamp ``cancelled_at`` and keep every child row."""
    event = get_event_by_public_id(event_id=event_id)
    event.cancel()
    logger.info("Cancelled event %s", event.nano_id)
    return event


def restore_event(*, event_id: str) -> Event:
    """Undo a cancellation."""
    event = get_event_by_public_id(event_id=event_id)
    event.restore()
    logger.info("Restored event %s", event.nano_id)
    return event


def delete_event(*, event_id: str) -> None:
    """Hard delete; attendees, expenses and the rest cascade."""
    event = get_event_by_public_id(event_id=event_id)
    event.delete()
    logger.info("Deleted event %s", event_id)
