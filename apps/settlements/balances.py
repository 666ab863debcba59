"""
Balance Computation Module
==========================

Pure settlement arithmetic over already-fetched rows. Nothing in here
touches the database, so the rules can be tested with plain objects.

All sums run on integer centavos (1 MXN = 100 centavos) and are converted
back to ``Decimal`` pesos only when a result is built.

Rules:
    - Event total is the sum of every expense, with or without a payer.
    - Only attendees not excluded from the split take part.
    - Each participant owes the same share: total / participants, rounded
      half-up to the centavo. With no participants the share is 0.
    - balance = paid - owed. Positive balances are owed money (creditors),
      negative balances owe money (debtors).

Classes:
    SettlementCalculator: Balances and suggested transfers.

Example:
    Three friends, one sits out, Ana pays 300::

        from decimal import Decimal
        from apps.settlements.balances import (
            SettlementCalculator, Participant, ExpenseEntry,
        )

        summary = SettlementCalculator.summarize(
            participants=[
                Participant(id=ana_id, name='Ana'),
                Participant(id=beto_id, name='Beto'),
                Participant(id=caro_id, name='Caro', excluded=True),
            ],
            expenses=[ExpenseEntry(amount=Decimal('300'), payer_id=ana_id)],
        )
        # summary.per_person == Decimal('150.00')
        # Ana +150.00, Beto -150.00; Beto owes Ana 150.00
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Hashable, Mapping, Optional, Sequence

from apps.core.money import to_cents, from_cents, divide_cents


PAIRWISE = 'pairwise'
MINIMAL = 'minimal'
STRATEGIES = (PAIRWISE, MINIMAL)


@dataclass(frozen=True)
class Participant:
    id: Hashable
    name: str = ''
    excluded: bool = False
    # Whatever the caller wants echoed back (usually the Attendee row)
    source: Any = None


@dataclass(frozen=True)
class ExpenseEntry:
    amount: Decimal
    payer_id: Optional[Hashable] = None


@dataclass(frozen=True)
class PaymentEntry:
    id: Hashable
    from_id: Hashable
    to_id: Hashable
    completed: bool = True


@dataclass
class PersonBalance:
    participant: Participant
    amount_paid: Decimal
    amount_owed: Decimal
    balance: Decimal


@dataclass
class Transfer:
    creditor: Participant
    amount: Decimal
    is_paid: bool = False
    payment_id: Optional[Hashable] = None
    transfer_id: str = ''


@dataclass
class DebtorTransfers:
    debtor: Participant
    owes: Decimal
    transfers: list = field(default_factory=list)


@dataclass
class BalanceSummary:
    total_expenses: Decimal
    per_person: Decimal
    active_count: int
    excluded: list
    balances: list
    transfers: list
    strategy: str = PAIRWISE


class SettlementCalculator:
    """
    Balances and suggested transfers for one event.

    Two transfer strategies are available:

        pairwise: every debtor gets one line per creditor, amount
            min(|debt|, credit). Mirrors what the summary screen has always
            shown; lines can overlap when there are several creditors.
        minimal: greedy matching of the largest debtor with the largest
            creditor until one side runs out. Fewer transfers that add up
            to the balances.
    """

    @staticmethod
    def summarize(
        participants: Sequence[Participant],
        expenses: Sequence[ExpenseEntry],
        payments: Sequence[PaymentEntry] = (),
        strategy: str = PAIRWISE,
    ) -> BalanceSummary:
        """
        Compute totals, balances and transfers.

        Args:
            participants: Every attendee of the event, excluded ones included.
            expenses: Every expense of the event.
            payments: Recorded payments; used to flag transfers as paid.
            strategy: ``'pairwise'`` (default) or ``'minimal'``.

        Returns:
            BalanceSummary

        Raises:
            ValueError: If the strategy is unknown.
        """
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown transfer strategy: {strategy}")

        total_cents = sum(to_cents(e.amount) for e in expenses)
        active = [p for p in participants if not p.excluded]
        per_person_cents = divide_cents(total_cents, len(active))

        paid_cents = {}
        for expense in expenses:
            if expense.payer_id is None:
                continue
            paid_cents[expense.payer_id] = paid_cents.get(expense.payer_id, 0) + to_cents(expense.amount)

        cents_by_id = {}
        balances = []
        for participant in active:
            paid = paid_cents.get(participant.id, 0)
            cents_by_id[participant.id] = paid - per_person_cents
            balances.append(PersonBalance(
                participant=participant,
                amount_paid=from_cents(paid),
                amount_owed=from_cents(per_person_cents),
                balance=from_cents(paid - per_person_cents),
            ))

        if strategy == MINIMAL:
            transfers = SettlementCalculator.minimal_transfers(active, cents_by_id)
        else:
            transfers = SettlementCalculator.pairwise_transfers(active, cents_by_id)

        SettlementCalculator.mark_paid(transfers, payments)

        return BalanceSummary(
            total_expenses=from_cents(total_cents),
            per_person=from_cents(per_person_cents),
            active_count=len(active),
            excluded=[p for p in participants if p.excluded],
            balances=balances,
            transfers=transfers,
            strategy=strategy,
        )

    @staticmethod
    def pairwise_transfers(
        participants: Sequence[Participant],
        cents_by_id: Mapping[Hashable, int],
    ) -> list[DebtorTransfers]:
        """One line per (debtor, creditor) pair, amount min(|debt|, credit)."""
        debtors = [p for p in participants if cents_by_id[p.id] < 0]
        creditors = [p for p in participants if cents_by_id[p.id] > 0]

        groups = []
        for debtor in debtors:
            debt = -cents_by_id[debtor.id]
            group = DebtorTransfers(debtor=debtor, owes=from_cents(debt))
            for creditor in creditors:
                group.transfers.append(Transfer(
                    creditor=creditor,
                    amount=from_cents(min(debt, cents_by_id[creditor.id])),
                    transfer_id=_transfer_id(debtor, creditor),
                ))
            groups.append(group)
        return groups

    @staticmethod
    def minimal_transfers(
        participants: Sequence[Participant],
        cents_by_id: Mapping[Hashable, int],
    ) -> list[DebtorTransfers]:
        """
        Greedy settlement: largest debt against largest credit.

        Debtors whose share is fully absorbed by rounding end up with no
        transfers and are left out.
        """
        debtors = sorted(
            ([p, -cents_by_id[p.id]] for p in participants if cents_by_id[p.id] < 0),
            key=lambda pair: pair[1],
            reverse=True,
        )
        creditors = sorted(
            ([p, cents_by_id[p.id]] for p in participants if cents_by_id[p.id] > 0),
            key=lambda pair: pair[1],
            reverse=True,
        )

        groups = {}
        i = j = 0
        while i < len(debtors) and j < len(creditors):
            debtor, debt = debtors[i]
            creditor, credit = creditors[j]
            amount = min(debt, credit)

            if debtor.id not in groups:
                groups[debtor.id] = DebtorTransfers(
                    debtor=debtor,
                    owes=from_cents(-cents_by_id[debtor.id]),
                )
            groups[debtor.id].transfers.append(Transfer(
                creditor=creditor,
                amount=from_cents(amount),
                transfer_id=_transfer_id(debtor, creditor),
            ))

            debtors[i][1] -= amount
            creditors[j][1] -= amount
            if debtors[i][1] == 0:
                i += 1
            if creditors[j][1] == 0:
                j += 1

        return list(groups.values())

    @staticmethod
    def mark_paid(groups: Sequence[DebtorTransfers], payments: Sequence[PaymentEntry]) -> None:
        """
        Attach recorded payments to transfers.

        A transfer is paid when a completed payment exists for the same
        (debtor, creditor) pair. ``payment_id`` is set for any recorded
        payment so clients can undo it.
        """
        by_pair = {(p.from_id, p.to_id): p for p in payments}
        for group in groups:
            for transfer in group.transfers:
                payment = by_pair.get((group.debtor.id, transfer.creditor.id))
                if payment is None:
                    continue
                transfer.payment_id = payment.id
                transfer.is_paid = payment.completed


def _transfer_id(debtor: Participant, creditor: Participant) -> str:
    return f"{debtor.id}-{creditor.id}"
