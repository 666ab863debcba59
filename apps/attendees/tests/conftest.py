import pytest

from apps.attendees.models import BankInfo


@pytest.fixture
def bank_info_payload():
    """Valid bank info body (without attendeeId)."""
    return {
        'holderName': 'Ana López',
        'bankName': 'BBVA',
        'clabe': '012180001234567891',
        'accountNumber': '1234567890',
    }


@pytest.fixture
def ana_bank_info(ana):
    """Bank info stored for Ana."""
    return BankInfo.objects.create(
        attendee=ana,
        holder_name='Ana López',
        bank_name='BBVA',
        clabe='012180001234567891',
    )
