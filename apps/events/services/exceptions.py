"""
Domain-specific exceptions for events app.

These exceptions carry their HTTP status, so views can let them propagate
to the project exception handler.
"""

from apps.core.exceptions import NotFoundError


class EventNotFoundError(NotFoundError):
    """Raised when no event has the given public id."""
    default_detail = 'Event not found.'
    default_code = 'event_not_found'


class PublicIdGenerationError(RuntimeError):
    """Raised when a unique public id could not be generated."""
    pass
