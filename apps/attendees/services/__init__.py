"""
Attendees app services layer.
"""

from .exceptions import (
    AttendeeNotFoundError,
    BankInfoNotFoundError,
    BankInfoAlreadyExistsError,
)

from .attendee_management import (
    list_attendees,
    create_attendee,
    get_attendee,
    update_attendee,
    delete_attendee,
)

from .bank_info_management import (
    get_bank_info_for_attendee,
    get_bank_info,
    create_bank_info,
    update_bank_info,
    delete_bank_info,
)


__all__ = [
    # Exceptions
    'AttendeeNotFoundError',
    'BankInfoNotFoundError',
    'BankInfoAlreadyExistsError',

    # Attendee Management
    'list_attendees',
    'create_attendee',
    'get_attendee',
    'update_attendee',
    'delete_attendee',

    # Bank Info
    'get_bank_info_for_attendee',
    'get_bank_info',
    'create_bank_info',
    'update_bank_info',
    'delete_bank_info',
]
