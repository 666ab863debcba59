"""Category service - listing and seeding the shopping categories."""

import logging

from django.db import transaction
from django.db.models import QuerySet

from apps.shopping.catalog import DEFAULT_CATEGORIES
from apps.shopping.models import Category, SuggestedItem

logger = logging.getLogger(__name__)


def list_categories() -> QuerySet:
    """Categories by sort order with their suggested items."""
    return Category.objects.prefetch_related('suggested_items').order_by('sort_order', 'name')


@transaction.atomic
def seed_default_categories() -> tuple[int, int]:
    """
    Create the default categories and suggested items.

    Safe to run repeatedly: existing rows (matched by name) are left alone,
    only missing ones are added.

    Returns:
        Tuple of (categories created, suggested items created)
    """
    categories_created = 0
    items_created = 0

    for entry in DEFAULT_CATEGORIES:
        category, created = Category.objects.get_or_create(
            name=entry.name,
            defaults={
                'icon': entry.icon,
                'sort_order': entry.sort_order,
                'is_default': True,
            }
        )
        categories_created += int(created)

        for suggestion in entry.suggested_items:
            _, created = SuggestedItem.objects.get_or_create(
                category=category,
                name=suggestion.name,
                defaults={'default_unit': suggestion.unit},
            )
            items_created += int(created)

    logger.info(
        "Seeded categories: %d categories, %d suggested items created",
        categories_created, items_created,
    )
    return categories_created, items_created
