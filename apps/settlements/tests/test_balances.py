"""
Unit tests for the pure balance computation (no database).
"""

import pytest
from decimal import Decimal

from apps.settlements.balances import (
    SettlementCalculator,
    Participant,
    ExpenseEntry,
    PaymentEntry,
    MINIMAL,
)


def _people(*names, excluded=()):
    return [Participant(id=name, name=name, excluded=name in excluded) for name in names]


def _balances(summary):
    return {b.participant.id: b.balance for b in summary.balances}


class TestSummarize:
    """Tests for SettlementCalculator.summarize."""

    def test_excluded_attendee_scenario(self):
        """A, B, C with C excluded; A pays 300."""
        summary = SettlementCalculator.summarize(
            participants=_people('A', 'B', 'C', excluded=('C',)),
            expenses=[ExpenseEntry(amount=Decimal('300'), payer_id='A')],
        )

        assert summary.total_expenses == Decimal('300.00')
        assert summary.per_person == Decimal('150.00')
        assert summary.active_count == 2
        assert _balances(summary) == {'A': Decimal('150.00'), 'B': Decimal('-150.00')}
        assert [p.id for p in summary.excluded] == ['C']

        [group] = summary.transfers
        assert group.debtor.id == 'B'
        assert group.owes == Decimal('150.00')
        assert [(t.creditor.id, t.amount) for t in group.transfers] == [('A', Decimal('150.00'))]
        assert group.transfers[0].transfer_id == 'B-A'

    def test_no_participants(self):
        summary = SettlementCalculator.summarize(
            participants=_people('A', excluded=('A',)),
            expenses=[ExpenseEntry(amount=Decimal('100'), payer_id='A')],
        )

        assert summary.per_person == Decimal('0.00')
        assert summary.total_expenses == Decimal('100.00')
        assert summary.balances == []
        assert summary.transfers == []

    def test_unassigned_expense_counts_toward_total_only(self):
        summary = SettlementCalculator.summarize(
            participants=_people('A', 'B'),
            expenses=[
                ExpenseEntry(amount=Decimal('100'), payer_id='A'),
                ExpenseEntry(amount=Decimal('100'), payer_id=None),
            ],
        )

        assert summary.total_expenses == Decimal('200.00')
        paid = {b.participant.id: b.amount_paid for b in summary.balances}
        assert paid == {'A': Decimal('100.00'), 'B': Decimal('0.00')}
        assert _balances(summary) == {'A': Decimal('0.00'), 'B': Decimal('-100.00')}

    def test_paid_sums_to_total_and_owed_within_rounding(self):
        people = _people('A', 'B', 'C')
        expenses = [
            ExpenseEntry(amount=Decimal('100.00'), payer_id='A'),
            ExpenseEntry(amount=Decimal('0.01'), payer_id='B'),
        ]
        summary = SettlementCalculator.summarize(participants=people, expenses=expenses)

        assert sum(b.amount_paid for b in summary.balances) == summary.total_expenses
        owed = sum(b.amount_owed for b in summary.balances)
        assert abs(owed - summary.total_expenses) <= Decimal('0.005') * len(people)
        assert len({b.amount_owed for b in summary.balances}) == 1

    def test_toggling_exclusion_changes_denominator_only(self):
        expenses = [
            ExpenseEntry(amount=Decimal('90'), payer_id='A'),
            ExpenseEntry(amount=Decimal('30'), payer_id='B'),
        ]
        before = SettlementCalculator.summarize(participants=_people('A', 'B', 'C'), expenses=expenses)
        after = SettlementCalculator.summarize(
            participants=_people('A', 'B', 'C', excluded=('C',)),
            expenses=expenses,
        )

        assert before.per_person == Decimal('40.00')
        assert after.per_person == Decimal('60.00')
        paid_before = {b.participant.id: b.amount_paid for b in before.balances}
        paid_after = {b.participant.id: b.amount_paid for b in after.balances}
        assert paid_after['A'] == paid_before['A']
        assert paid_after['B'] == paid_before['B']

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            SettlementCalculator.summarize(participants=[], expenses=[], strategy='fair')


class TestTransfers:
    """Tests for transfer strategies."""

    def _two_creditors(self, strategy):
        return SettlementCalculator.summarize(
            participants=_people('A', 'B', 'C'),
            expenses=[
                ExpenseEntry(amount=Decimal('200'), payer_id='A'),
                ExpenseEntry(amount=Decimal('150'), payer_id='B'),
                ExpenseEntry(amount=Decimal('10'), payer_id='C'),
            ],
            strategy=strategy,
        )

    def test_pairwise_lists_every_creditor(self):
        summary = self._two_creditors('pairwise')
        # Per person 120: A +80, B +30, C -110
        [group] = summary.transfers
        assert group.debtor.id == 'C'
        assert [(t.creditor.id, t.amount) for t in group.transfers] == [
            ('A', Decimal('80.00')),
            ('B', Decimal('30.00')),
        ]

    def test_minimal_settles_exactly(self):
        summary = self._two_creditors(MINIMAL)

        [group] = summary.transfers
        assert sum(t.amount for t in group.transfers) == Decimal('110.00')
        assert [t.creditor.id for t in group.transfers] == ['A', 'B']

    def test_minimal_fewer_transfers(self):
        summary = SettlementCalculator.summarize(
            participants=_people('A', 'B', 'C', 'D'),
            expenses=[ExpenseEntry(amount=Decimal('400'), payer_id='A')],
            strategy=MINIMAL,
        )

        lines = [t for g in summary.transfers for t in g.transfers]
        assert len(lines) == 3
        assert all(t.creditor.id == 'A' and t.amount == Decimal('100.00') for t in lines)

    def test_mark_paid(self):
        summary = SettlementCalculator.summarize(
            participants=_people('A', 'B', 'C'),
            expenses=[ExpenseEntry(amount=Decimal('300'), payer_id='A')],
            payments=[
                PaymentEntry(id='p1', from_id='B', to_id='A', completed=True),
                PaymentEntry(id='p2', from_id='C', to_id='A', completed=False),
            ],
        )

        transfers = {g.debtor.id: g.transfers[0] for g in summary.transfers}
        assert transfers['B'].is_paid is True
        assert transfers['B'].payment_id == 'p1'
        assert transfers['C'].is_paid is False
        assert transfers['C'].payment_id == 'p2'
