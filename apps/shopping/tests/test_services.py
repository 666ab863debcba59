"""
Service layer unit tests for shopping app.
"""

import pytest
from decimal import Decimal
from django.core.management import call_command

from apps.shopping.catalog import DEFAULT_CATEGORIES, TEMPLATES_BY_ID
from apps.shopping.models import Category, SuggestedItem, ShoppingItem
from apps.shopping.services import (
    seed_default_categories,
    apply_template,
    update_item,
)


@pytest.mark.django_db
class TestSeedCategories:
    """Tests for the default category seed."""

    def test_seed_is_idempotent(self):
        first = seed_default_categories()
        second = seed_default_categories()

        assert first[0] == len(DEFAULT_CATEGORIES)
        assert second == (0, 0)
        assert Category.objects.count() == len(DEFAULT_CATEGORIES)

    def test_command(self, capsys):
        call_command('seed_categories')

        assert Category.objects.filter(name='Bebidas', is_default=True).exists()
        assert SuggestedItem.objects.filter(name='Hielo', default_unit='bolsas').exists()
        assert 'Created' in capsys.readouterr().out

    def test_command_dry_run(self):
        call_command('seed_categories', '--dry-run')

        assert not Category.objects.exists()


@pytest.mark.django_db
class TestApplyTemplate:
    """Tests for template_management.py."""

    def test_category_match_is_case_insensitive(self, event):
        Category.objects.create(name='CARNES', sort_order=1)

        items = apply_template(template_id='carnita-basica', event_id=event.nano_id)

        meats = [i for i in items if i.name == 'Arrachera']
        assert meats[0].category.name == 'CARNES'

    def test_unmatched_category_left_empty(self, event):
        items = apply_template(template_id='carnita-express', event_id=event.nano_id)

        assert all(i.category is None for i in items)
        assert len(items) == len(TEMPLATES_BY_ID['carnita-express'].items)

    def test_quantities_kept(self, event):
        apply_template(template_id='carnita-basica', event_id=event.nano_id)

        chorizo = ShoppingItem.objects.get(event=event, name='Chorizo')
        assert chorizo.quantity == Decimal('500')
        assert chorizo.unit == 'g'


@pytest.mark.django_db
class TestItemManagement:
    """Tests for item_management.py."""

    def test_clear_category(self, item):
        updated = update_item(item_id=item.id, category_id=None)

        assert updated.category is None
        item.refresh_from_db()
        assert item.category_id is None
