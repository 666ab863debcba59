"""
Shopping list service - CRUD for an event's shopping items.
"""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db.models import QuerySet

from apps.events.services import get_event_by_public_id
from apps.shopping.models import Category, ShoppingItem, DEFAULT_UNIT

from .exceptions import ShoppingItemNotFoundError, CategoryNotFoundError

logger = logging.getLogger(__name__)


def list_items(*, event_id: str) -> QuerySet:
    """Shopping items of an event in the order they were added."""
    event = get_event_by_public_id(event_id=event_id)
    return (
        ShoppingItem.objects
        .filter(event=event)
        .select_related('category')
        .order_by('created_at')
    )


def get_item(*, item_id: UUID) -> ShoppingItem:
    try:
        return ShoppingItem.objects.select_related('category').get(id=item_id)
    except ShoppingItem.DoesNotExist:
        raise ShoppingItemNotFoundError()


def create_item(
    *,
    event_id: str,
    name: str,
    category_id: Optional[UUID] = None,
    quantity: Decimal = Decimal('1'),
    unit: str = DEFAULT_UNIT
) -> ShoppingItem:
    """
    Add an item to an event's shopping list.

    Raises:
        EventNotFoundError: If the event doesn't exist
        CategoryNotFoundError: If category_id is given but unknown
    """
    event = get_event_by_public_id(event_id=event_id)

    item = ShoppingItem.objects.create(
        event=event,
        category=_resolve_category(category_id),
        name=name,
        quantity=quantity,
        unit=unit or DEFAULT_UNIT,
    )
    logger.info("Added shopping item %s to event %s", item.id, event.nano_id)
    return item


def update_item(*, item_id: UUID, **changes) -> ShoppingItem:
    """
    Partially update a shopping item.

    Recognised keys: ``name``, ``quantity``, ``unit``, ``is_purchased`` and
    ``category_id`` (None clears the category).
    """
    item = get_item(item_id=item_id)

    update_fields = []
    if changes.get('name'):
        item.name = changes['name']
        update_fields.append('name')
    if changes.get('quantity') is not None:
        item.quantity = changes['quantity']
        update_fields.append('quantity')
    if changes.get('unit'):
        item.unit = changes['unit']
        update_fields.append('unit')
    if changes.get('is_purchased') is not None:
        item.is_purchased = changes['is_purchased']
        update_fields.append('is_purchased')
    if 'category_id' in changes:
        item.category = _resolve_category(changes['category_id'])
        update_fields.append('category')

    if update_fields:
        item.save(update_fields=update_fields)
    return item


def delete_item(*, item_id: UUID) -> None:
    item = get_item(item_id=item_id)
    item.delete()


def _resolve_category(category_id: Optional[UUID]) -> Optional[Category]:
    if category_id is None:
        return None
    try:
        return Category.objects.get(id=category_id)
    except Category.DoesNotExist:
        raise CategoryNotFoundError()
