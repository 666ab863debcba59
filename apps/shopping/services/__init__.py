"""
Shopping app services layer.
"""

from .exceptions import (
    ShoppingItemNotFoundError,
    CategoryNotFoundError,
    TemplateNotFoundError,
)

from .category_management import (
    list_categories,
    seed_default_categories,
)

from .item_management import (
    list_items,
    get_item,
    create_item,
    update_item,
    delete_item,
)

from .template_management import (
    list_templates,
    get_template,
    apply_template,
)


__all__ = [
    # Exceptions
    'ShoppingItemNotFoundError',
    'CategoryNotFoundError',
    'TemplateNotFoundError',

    # Categories
    'list_categories',
    'seed_default_categories',

    # Shopping Items
    'list_items',
    'get_item',
    'create_item',
    'update_item',
    'delete_item',

    # Templates
    'list_templates',
    'get_template',
    'apply_template',
]
