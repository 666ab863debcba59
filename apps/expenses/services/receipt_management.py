"""Receipt management service - attach and detach receipt photos."""

import logging
from uuid import UUID

from django.db import transaction

from apps.events.services import get_event_by_public_id
from apps.expenses.models import ExpenseReceipt

from .exceptions import ReceiptNotFoundError
from .expense_management import get_expense
from .receipt_storage import store_receipt_file, delete_receipt_file, delete_receipt_file_on_commit

logger = logging.getLogger(__name__)


def upload_receipt(*, event_id: str, file) -> str:
    """
    Store a receipt file for an event without attaching it.

    Returns the public URL; clients pass it back in ``receiptUrls``.
    """
    event = get_event_by_public_id(event_id=event_id)
    stored = store_receipt_file(event_id=event.nano_id, file=file)
    return stored.url


def add_receipt(*, expense_id: UUID, file) -> ExpenseReceipt:
    """
    Store a file and attach it to an expense.

    Each upload is its own request; a failed upload leaves the receipts
    already attached in place.
    """
    expense = get_expense(expense_id=expense_id)
    stored = store_receipt_file(event_id=expense.event.nano_id, file=file)

    try:
        receipt = ExpenseReceipt.objects.create(
            expense=expense,
            url=stored.url,
            storage_path=stored.storage_path,
            content_type=stored.content_type,
            size_bytes=stored.size_bytes,
        )
    except Exception:
        delete_receipt_file(stored.storage_path)
        raise

    logger.info("Attached receipt %s to expense %s", receipt.id, expense.id)
    return receipt


@transaction.atomic
def remove_receipt(*, expense_id: UUID, receipt_id: UUID) -> None:
    try:
        receipt = ExpenseReceipt.objects.get(id=receipt_id, expense_id=expense_id)
    except ExpenseReceipt.DoesNotExist:
        raise ReceiptNotFoundError()

    storage_path = receipt.storage_path
    receipt.delete()
    delete_receipt_file_on_commit(storage_path)
