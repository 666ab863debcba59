"""
Domain-specific exceptions for shopping app.
"""

from apps.core.exceptions import NotFoundError


class ShoppingItemNotFoundError(NotFoundError):
    """Raised when a shopping item does not exist."""
    default_detail = 'Shopping item not found.'
    default_code = 'shopping_item_not_found'


class CategoryNotFoundError(NotFoundError):
    """Raised when a category id does not exist."""
    default_detail = 'Category not found.'
    default_code = 'category_not_found'


class TemplateNotFoundError(NotFoundError):
    """Raised when a shopping template id is unknown."""
    default_detail = 'Template not found.'
    default_code = 'template_not_found'
