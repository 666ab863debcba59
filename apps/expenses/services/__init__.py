"""
Expenses app services layer.
"""

from .exceptions import (
    ExpenseNotFoundError,
    ReceiptNotFoundError,
    AttendeeNotInEventError,
    InvalidReceiptFileError,
)

from .receipt_storage import (
    parse_receipt_urls,
    validate_receipt_file,
    store_receipt_file,
    find_stored_receipt,
    delete_receipt_file,
    delete_receipt_file_on_commit,
)

from .expense_management import (
    list_expenses,
    get_expense,
    create_expense,
    update_expense,
    delete_expense,
)

from .receipt_management import (
    upload_receipt,
    add_receipt,
    remove_receipt,
)


__all__ = [
    # Exceptions
    'ExpenseNotFoundError',
    'ReceiptNotFoundError',
    'AttendeeNotInEventError',
    'InvalidReceiptFileError',

    # Receipt storage
    'parse_receipt_urls',
    'validate_receipt_file',
    'store_receipt_file',
    'find_stored_receipt',
    'delete_receipt_file',
    'delete_receipt_file_on_commit',

    # Expense Management
    'list_expenses',
    'get_expense',
    'create_expense',
    'update_expense',
    'delete_expense',

    # Receipt Management
    'upload_receipt',
    'add_receipt',
    'remove_receipt',
]
