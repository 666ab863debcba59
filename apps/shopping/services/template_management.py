"""Shopping templates - ready-made lists copied onto an event."""

import logging

from django.db import transaction

from apps.events.services import get_event_by_public_id
from apps.shopping.catalog import SHOPPING_TEMPLATES, TEMPLATES_BY_ID, ShoppingTemplate
from apps.shopping.models import Category, ShoppingItem

from .exceptions import TemplateNotFoundError

logger = logging.getLogger(__name__)


def list_templates() -> tuple[ShoppingTemplate, ...]:
    return SHOPPING_TEMPLATES


def get_template(*, template_id: str) -> ShoppingTemplate:
    try:
        return TEMPLATES_BY_ID[template_id]
    except KeyError:
        raise TemplateNotFoundError()


@transaction.atomic
def apply_template(*, template_id: str, event_id: str) -> list[ShoppingItem]:
    """
    Add every item of a template to an event's shopping list.

    Each item's category name is matched case-insensitively against the
    stored categories; unmatched items are created without a category.
    Items already on the list are not deduplicated.

    Returns:
        The created shopping items, in template order
    """
    template = get_template(template_id=template_id)
    event = get_event_by_public_id(event_id=event_id)

    categories = {c.name.lower(): c for c in Category.objects.all()}

    items = ShoppingItem.objects.bulk_create([
        ShoppingItem(
            event=event,
            category=categories.get(entry.category_name.lower()),
            name=entry.name,
            quantity=entry.quantity,
            unit=entry.unit,
        )
        for entry in template.items
    ])

    logger.info(
        "Applied template %s to event %s (%d items)",
        template.id, event.nano_id, len(items),
    )
    return items
