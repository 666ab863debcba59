"""
Events app services layer.

Services contain business logic; views stay thin HTTP handlers.
"""

from .exceptions import (
    EventNotFoundError,
    PublicIdGenerationError,
)

from .event_management import (
    create_event,
    get_event_by_public_id,
    get_event_detail,
    get_total_expenses,
    update_event,
    cancel_event,
    restore_event,
    delete_event,
)


__all__ = [
    # Exceptions
    'EventNotFoundError',
    'PublicIdGenerationError',

    # Event Management
    'create_event',
    'get_event_by_public_id',
    'get_event_detail',
    'get_total_expenses',
    'update_event',
    'cancel_event',
    'restore_event',
    'delete_event',
]
