"""
Payment service - record and undo transfers between attendees.
"""

import logging
from decimal import Decimal
from uuid import UUID

from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from apps.attendees.models import Attendee
from apps.events.services import get_event_by_public_id
from apps.settlements.models import Payment, PaymentStatus

from .exceptions import PaymentNotFoundError, InvalidPaymentError

logger = logging.getLogger(__name__)


def list_payments(*, event_id: str) -> QuerySet:
    event = get_event_by_public_id(event_id=event_id)
    return Payment.objects.filter(event=event).order_by('created_at')


def record_payment(
    *,
    event_id: str,
    from_attendee_id: UUID,
    to_attendee_id: UUID,
    amount: Decimal,
    status: str = PaymentStatus.COMPLETED,
    max_retries: int = 2
) -> tuple[Payment, bool]:
    """
    Create or update the payment for a (from, to) pair of an event.

    A single upsert keyed on (event, from, to). When two requests race to
    create the same row, the loser's insert hits the unique constraint and
    the attempt is retried as an update.

    Args:
        event_id: Public event id
        from_attendee_id: Attendee who pays
        to_attendee_id: Attendee who receives
        amount: Positive amount in pesos
        status: 'pending' or 'completed' (default)
        max_retries: Attempts after a unique-constraint collision

    Returns:
        Tuple of (Payment, created)

    Raises:
        EventNotFoundError: If the event doesn't exist
        InvalidPaymentError: Same attendee on both sides, or attendee from
            another event
    """
    event = get_event_by_public_id(event_id=event_id)

    if from_attendee_id == to_attendee_id:
        raise InvalidPaymentError('An attendee cannot pay themselves.')

    found = Attendee.objects.filter(
        event=event,
        id__in=[from_attendee_id, to_attendee_id],
    ).count()
    if found != 2:
        raise InvalidPaymentError('Attendee does not belong to this event.')

    for attempt in range(max_retries + 1):
        try:
            with transaction.atomic():
                payment, created = Payment.objects.update_or_create(
                    event=event,
                    from_attendee_id=from_attendee_id,
                    to_attendee_id=to_attendee_id,
                    defaults={'amount': amount, 'status': status},
                )
            break
        except IntegrityError:
            if attempt == max_retries:
                raise
            logger.warning(
                "Payment upsert collided for %s -> %s on event %s, retrying",
                from_attendee_id, to_attendee_id, event.nano_id,
            )

    logger.info(
        "%s payment %s (%s) on event %s",
        'Created' if created else 'Updated', payment.id, amount, event.nano_id,
    )
    return payment, created


def delete_payment(*, payment_id: UUID) -> None:
    try:
        payment = Payment.objects.get(id=payment_id)
    except Payment.DoesNotExist:
        raise PaymentNotFoundError()

    payment.delete()
    logger.info("Deleted payment %s", payment_id)
