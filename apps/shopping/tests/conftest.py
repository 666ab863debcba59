import pytest
from decimal import Decimal

from apps.shopping.models import Category, ShoppingItem
from apps.shopping.services import seed_default_categories


@pytest.fixture
def categories(db):
    """Default categories keyed by name."""
    seed_default_categories()
    return {c.name: c for c in Category.objects.all()}


@pytest.fixture
def item(event, categories):
    return ShoppingItem.objects.create(
        event=event,
        category=categories['Carnes'],
        name='Arrachera',
        quantity=Decimal('2'),
        unit='kg',
    )
