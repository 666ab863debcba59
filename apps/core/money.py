"""
Money helpers.

Amounts are stored as ``DECIMAL(12, 2)`` pesos and summed as integer
centavos so totals never drift. 1 MXN = 100 centavos.
"""

from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal('0.01')


def to_cents(amount) -> int:
    """Convert a peso amount (Decimal, str, int or float) to integer centavos."""
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return int((amount * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def from_cents(cents: int) -> Decimal:
    """Convert integer centavos back to a two-decimal peso amount."""
    return (Decimal(cents) / Decimal(100)).quantize(CENTS)


def divide_cents(total_cents: int, parts: int) -> int:
    """
    Split ``total_cents`` into ``parts`` equal shares, rounded half-up.

    Returns 0 when there is nobody to split between.
    """
    if parts <= 0:
        return 0
    share = (Decimal(total_cents) / Decimal(parts)).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    return int(share)


def format_currency(amount, compact: bool = False) -> str:
    """
    Format a peso amount for display, e.g. ``$1,234.50``.

    ``compact`` drops the centavos (``$1,235``).
    """
    value = from_cents(to_cents(amount))
    sign = '-' if value < 0 else ''
    if compact:
        return f"{sign}${abs(value):,.0f}"
    return f"{sign}${abs(value):,.2f}"
