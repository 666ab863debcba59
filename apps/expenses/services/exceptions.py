"""
Domain-specific exceptions for expenses app.
"""

from apps.core.exceptions import NotFoundError, DomainValidationError


class ExpenseNotFoundError(NotFoundError):
    """Raised when an expense does not exist."""
    default_detail = 'Expense not found.'
    default_code = 'expense_not_found'


class ReceiptNotFoundError(NotFoundError):
    """Raised when a receipt does not exist on the given expense."""
    default_detail = 'Receipt not found.'
    default_code = 'receipt_not_found'


class AttendeeNotInEventError(DomainValidationError):
    """Raised when a payer or excluded attendee belongs to another event."""
    default_detail = 'Attendee does not belong to this event.'
    default_code = 'attendee_not_in_event'


class InvalidReceiptFileError(DomainValidationError):
    """Raised when an uploaded receipt has the wrong type or size."""
    default_detail = 'Invalid receipt file.'
    default_code = 'invalid_receipt_file'
