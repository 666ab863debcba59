"""
Settlements app services layer.
"""

from .exceptions import (
    PaymentNotFoundError,
    InvalidPaymentError,
)

from .payment_management import (
    list_payments,
    record_payment,
    delete_payment,
)

from .summary import (
    get_event_summary,
    get_event_report,
)


__all__ = [
    # Exceptions
    'PaymentNotFoundError',
    'InvalidPaymentError',

    # Payments
    'list_payments',
    'record_payment',
    'delete_payment',

    # Summary
    'get_event_summary',
    'get_event_report',
]
