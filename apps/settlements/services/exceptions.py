"""
Domain-specific exceptions for settlements app.
"""

from apps.core.exceptions import NotFoundError, DomainValidationError


class PaymentNotFoundError(NotFoundError):
    """Raised when a payment does not exist."""
    default_detail = 'Payment not found.'
    default_code = 'payment_not_found'


class InvalidPaymentError(DomainValidationError):
    """Raised when payment parties are invalid for the event."""
    default_detail = 'Invalid payment.'
    default_code = 'invalid_payment'
