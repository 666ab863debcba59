"""
Domain-specific exceptions for attendees app.
"""

from apps.core.exceptions import NotFoundError, DomainValidationError


class AttendeeNotFoundError(NotFoundError):
    """Raised when an attendee does not exist."""
    default_detail = 'Attendee not found.'
    default_code = 'attendee_not_found'


class BankInfoNotFoundError(NotFoundError):
    """Raised when a bank info record does not exist."""
    default_detail = 'Bank info not found.'
    default_code = 'bank_info_not_found'


class BankInfoAlreadyExistsError(DomainValidationError):
    """Raised when an attendee already has bank info on file."""
    default_detail = 'This attendee already has bank info.'
    default_code = 'bank_info_exists'
