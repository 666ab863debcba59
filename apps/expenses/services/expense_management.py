"""
Expense management service - CRUD for expenses, their receipts and exclusions.
"""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.attendees.models import Attendee
from apps.events.models import Event
from apps.events.services import get_event_by_public_id
from apps.expenses.models import Expense, ExpenseReceipt, ExpenseExclusion

from .exceptions import ExpenseNotFoundError, AttendeeNotInEventError
from .receipt_storage import find_stored_receipt, delete_receipt_file_on_commit

logger = logging.getLogger(__name__)


def _expense_queryset() -> QuerySet:
    return (
        Expense.objects
        .select_related('event', 'attendee')
        .prefetch_related('receipts', 'exclusions')
    )


def list_expenses(*, event_id: str) -> QuerySet:
    """Expenses of an event, newest first."""
    event = get_event_by_public_id(event_id=event_id)
    return _expense_queryset().filter(event=event).order_by('-created_at')


def get_expense(*, expense_id: UUID) -> Expense:
    try:
        return _expense_queryset().get(id=expense_id)
    except Expense.DoesNotExist:
        raise ExpenseNotFoundError()


@transaction.atomic
def create_expense(
    *,
    event_id: str,
    description: str,
    amount: Decimal,
    attendee_id: Optional[UUID] = None,
    receipt_urls: Optional[list[str]] = None,
    excluded_attendee_ids: Optional[list[UUID]] = None
) -> Expense:
    """
    Record an expense for an event.

    Args:
        event_id: Public event id
        description: What was bought
        amount: Positive amount in pesos
        attendee_id: Payer, if known
        receipt_urls: Already-uploaded receipt URLs to attach
        excluded_attendee_ids: Attendees marked as not sharing this expense

    Returns:
        Created Expense instance

    Raises:
        EventNotFoundError: If the event doesn't exist
        AttendeeNotInEventError: If payer or excluded attendee is foreign
    """
    event = get_event_by_public_id(event_id=event_id)
    payer = _resolve_attendee(event, attendee_id)

    expense = Expense.objects.create(
        event=event,
        attendee=payer,
        description=description,
        amount=amount,
    )

    if receipt_urls:
        _replace_receipt_urls(expense, receipt_urls)
    if excluded_attendee_ids:
        _replace_exclusions(expense, excluded_attendee_ids)

    logger.info("Created expense %s (%s) on event %s", expense.id, amount, event.nano_id)
    return get_expense(expense_id=expense.id)


@transaction.atomic
def update_expense(*, expense_id: UUID, **changes) -> Expense:
    """
    Partially update an expense.

    Recognised keys: ``description``, ``amount``, ``attendee_id`` (None
    clears the payer), ``receipt_urls`` and ``excluded_attendee_ids`` (both
    replace the current set).
    """
    expense = get_expense(expense_id=expense_id)

    update_fields = []
    if 'attendee_id' in changes:
        expense.attendee = _resolve_attendee(expense.event, changes['attendee_id'])
        update_fields.append('attendee')
    if changes.get('description'):
        expense.description = changes['description']
        update_fields.append('description')
    if changes.get('amount') is not None:
        expense.amount = changes['amount']
        update_fields.append('amount')

    if update_fields:
        update_fields.append('updated_at')
        expense.save(update_fields=update_fields)

    if 'receipt_urls' in changes:
        _replace_receipt_urls(expense, changes['receipt_urls'] or [])
    if 'excluded_attendee_ids' in changes:
        _replace_exclusions(expense, changes['excluded_attendee_ids'] or [])

    return get_expense(expense_id=expense.id)


@transaction.atomic
def delete_expense(*, expense_id: UUID) -> None:
    """Hard delete an expense and any receipt files we stored for it."""
    expense = get_expense(expense_id=expense_id)
    storage_paths = [r.storage_path for r in expense.receipts.all() if r.storage_path]

    expense.delete()
    for path in storage_paths:
        delete_receipt_file_on_commit(path)

    logger.info("Deleted expense %s", expense_id)


def _resolve_attendee(event: Event, attendee_id: Optional[UUID]) -> Optional[Attendee]:
    if attendee_id is None:
        return None
    try:
        return Attendee.objects.get(id=attendee_id, event=event)
    except Attendee.DoesNotExist:
        raise AttendeeNotInEventError()


def _replace_receipt_urls(expense: Expense, urls: list[str]) -> None:
    """
    Make ``urls`` the expense's receipt list.

    Rows whose URL is kept survive (with their stored file); the rest go,
    and their files are removed once the transaction commits. URLs of files
    uploaded for this event are tied back to the stored file.
    """
    wanted = {}
    for url in urls:
        stored = find_stored_receipt(url, event_id=expense.event.nano_id)
        wanted.setdefault(stored.url if stored else url, stored)

    existing = list(expense.receipts.all())
    for receipt in existing:
        if receipt.url not in wanted:
            receipt.delete()
            delete_receipt_file_on_commit(receipt.storage_path)

    present = {r.url for r in existing if r.url in wanted}
    ExpenseReceipt.objects.bulk_create([
        ExpenseReceipt(
            expense=expense,
            url=url,
            storage_path=stored.storage_path if stored else '',
            content_type=stored.content_type if stored else '',
            size_bytes=stored.size_bytes if stored else None,
        )
        for url, stored in wanted.items()
        if url not in present
    ])


def _replace_exclusions(expense: Expense, attendee_ids: list[UUID]) -> None:
    attendee_ids = list(dict.fromkeys(attendee_ids))
    attendees = list(Attendee.objects.filter(id__in=attendee_ids, event_id=expense.event_id))
    if len(attendees) != len(attendee_ids):
        raise AttendeeNotInEventError()

    ExpenseExclusion.objects.filter(expense=expense).delete()
    ExpenseExclusion.objects.bulk_create([
        ExpenseExclusion(expense=expense, attendee=attendee)
        for attendee in attendees
    ])
