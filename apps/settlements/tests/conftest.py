import pytest
from decimal import Decimal

from apps.expenses.models import Expense
from apps.settlements.models import Payment


@pytest.fixture
def ana_paid_300(event, ana, beto, caro):
    """Ana pays 300; Beto shares it, Caro is excluded."""
    return Expense.objects.create(
        event=event,
        attendee=ana,
        description='Carne y cerveza',
        amount=Decimal('300.00'),
    )


@pytest.fixture
def beto_paid_ana(event, ana, beto):
    """Beto already paid Ana 150."""
    return Payment.objects.create(
        event=event,
        from_attendee=beto,
        to_attendee=ana,
        amount=Decimal('150.00'),
    )
