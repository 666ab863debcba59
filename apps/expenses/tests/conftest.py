import pytest
from decimal import Decimal
from django.core.files.uploadedfile import SimpleUploadedFile

from apps.expenses.models import Expense


@pytest.fixture
def make_image():
    """Factory for small uploaded image files."""
    def _make(name='ticket.jpg', content_type='image/jpeg', size=1024):
        return SimpleUploadedFile(name, b'\xff\xd8\xff' + b'0' * (size - 3), content_type=content_type)
    return _make


@pytest.fixture
def expense(event, ana):
    """A 300 peso expense paid by Ana."""
    return Expense.objects.create(
        event=event,
        attendee=ana,
        description='Arrachera',
        amount=Decimal('300.00'),
    )
