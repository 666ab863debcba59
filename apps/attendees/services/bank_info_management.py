"""Bank info service - transfer details per attendee."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError

from apps.attendees.models import BankInfo

from .attendee_management import get_attendee
from .exceptions import BankInfoNotFoundError, BankInfoAlreadyExistsError

logger = logging.getLogger(__name__)


def get_bank_info_for_attendee(*, attendee_id: UUID) -> Optional[BankInfo]:
    """Return the attendee's bank info, or None if they haven't shared any."""
    return BankInfo.objects.filter(attendee_id=attendee_id).first()


def get_bank_info(*, bank_info_id: UUID) -> BankInfo:
    try:
        return BankInfo.objects.get(id=bank_info_id)
    except BankInfo.DoesNotExist:
        raise BankInfoNotFoundError()


def create_bank_info(
    *,
    attendee_id: UUID,
    holder_name: str,
    bank_name: str,
    clabe: str,
    account_number: Optional[str] = None
) -> BankInfo:
    """
    Store bank info for an attendee (one record per attendee).

    Raises:
        AttendeeNotFoundError: If the attendee doesn't exist
        BankInfoAlreadyExistsError: If the attendee already has a record
    """
    attendee = get_attendee(attendee_id=attendee_id)

    try:
        with transaction.atomic():
            bank_info = BankInfo.objects.create(
                attendee=attendee,
                holder_name=holder_name,
                bank_name=bank_name,
                clabe=clabe,
                account_number=account_number or None,
            )
    except IntegrityError:
        raise BankInfoAlreadyExistsError()

    logger.info("Stored bank info for attendee %s", attendee.id)
    return bank_info


def update_bank_info(*, bank_info_id: UUID, **changes) -> BankInfo:
    """Update holder/bank/CLABE/account number; omitted keys are kept."""
    bank_info = get_bank_info(bank_info_id=bank_info_id)

    update_fields = []
    for field in ('holder_name', 'bank_name', 'clabe', 'account_number'):
        if field in changes:
            value = changes[field]
            if field == 'account_number':
                value = value or None
            setattr(bank_info, field, value)
            update_fields.append(field)

    if update_fields:
        update_fields.append('updated_at')
        bank_info.save(update_fields=update_fields)

    return bank_info


def delete_bank_info(*, bank_info_id: UUID) -> None:
    bank_info = get_bank_info(bank_info_id=bank_info_id)
    bank_info.delete()
