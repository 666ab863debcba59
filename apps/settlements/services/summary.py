"""
Event summary and report - gather rows, hand them to the calculator.
"""

from decimal import Decimal

from django.db.models import Count, Q

from apps.events.services import get_event_by_public_id
from apps.settlements.balances import (
    SettlementCalculator,
    Participant,
    ExpenseEntry,
    PaymentEntry,
    BalanceSummary,
    PAIRWISE,
)


def _participants(event):
    return [
        Participant(id=a.id, name=a.name, excluded=a.exclude_from_split, source=a)
        for a in event.attendees.order_by('created_at')
    ]


def _expense_entries(event):
    return [
        ExpenseEntry(amount=amount, payer_id=payer_id)
        for amount, payer_id in event.expenses.values_list('amount', 'attendee_id')
    ]


def get_event_summary(*, event_id: str, strategy: str = PAIRWISE) -> BalanceSummary:
    """
    Balances and suggested transfers for an event.

    Raises:
        EventNotFoundError: If the event doesn't exist
    """
    event = get_event_by_public_id(event_id=event_id)

    payments = [
        PaymentEntry(
            id=p.id,
            from_id=p.from_attendee_id,
            to_id=p.to_attendee_id,
            completed=p.is_completed,
        )
        for p in event.payments.all()
    ]

    return SettlementCalculator.summarize(
        participants=_participants(event),
        expenses=_expense_entries(event),
        payments=payments,
        strategy=strategy,
    )


def get_event_report(*, event_id: str) -> dict:
    """
    Chart data for an event.

    Returns:
        dict with:
            - expenses_by_person: attendees (excluded too) who paid anything
            - payment_status: per participant paid/balance/status
            - shopping: {'total', 'purchased'} item counts
            - totals: event totals, including expenses with no payer
    """
    event = get_event_by_public_id(event_id=event_id)
    participants = _participants(event)
    expenses = _expense_entries(event)

    summary = SettlementCalculator.summarize(participants=participants, expenses=expenses)

    paid_by = {}
    unassigned = Decimal('0')
    for expense in expenses:
        if expense.payer_id is None:
            unassigned += expense.amount
        else:
            paid_by[expense.payer_id] = paid_by.get(expense.payer_id, Decimal('0')) + expense.amount

    expenses_by_person = [
        {'participant': p, 'total': paid_by[p.id]}
        for p in participants
        if paid_by.get(p.id, Decimal('0')) > 0
    ]

    payment_status = [
        {
            'participant': b.participant,
            'paid': b.amount_paid,
            'balance': b.balance,
            'status': 'paid' if b.balance >= 0 else 'pending',
        }
        for b in summary.balances
    ]

    shopping = event.shopping_items.aggregate(
        total=Count('id'),
        purchased=Count('id', filter=Q(is_purchased=True)),
    )

    return {
        'expenses_by_person': expenses_by_person,
        'payment_status': payment_status,
        'shopping': shopping,
        'totals': {
            'total_expenses': summary.total_expenses,
            'per_person': summary.per_person,
            'active_count': summary.active_count,
            'attendee_count': len(participants),
            'expense_count': len(expenses),
            'unassigned_total': unassigned,
        },
    }
