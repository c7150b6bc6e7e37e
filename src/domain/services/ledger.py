"""Running-balance fold and period summaries for the local ledger.

Balances are always recomputed from the full event history. Nothing here
keeps state between calls, so a deleted event simply disappears from the
next fold.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime
from decimal import Decimal

from src.domain.exceptions import ValidationError
from src.domain.models.ledger import (
    BalanceAnnotatedEvent,
    LedgerEvent,
    LedgerEventKind,
    StatementSummary,
)
from src.utils.datetime_utils import ensure_utc


def _chronological_key(event: LedgerEvent) -> tuple[datetime, datetime, str]:
    occurred_at = ensure_utc(event.occurred_at)
    created_at = (
        ensure_utc(event.created_at) if event.created_at else occurred_at
    )
    return (occurred_at, created_at, event.id)


def _checked_amount(event: LedgerEvent) -> Decimal:
    amount = event.amount
    if not isinstance(amount, Decimal) or not amount.is_finite():
        raise ValidationError(
            f"Transaction {event.id} has a non-numeric amount: {amount!r}",
            field="amount",
        )
    if amount < 0:
        raise ValidationError(
            f"Transaction {event.id} has a negative amount: {amount}",
            field="amount",
        )
    return amount


def signed_amount(event: LedgerEvent | BalanceAnnotatedEvent) -> Decimal:
    """Return the amount with the sign implied by the event kind."""
    kind = LedgerEventKind(event.kind)
    return event.amount if kind.is_inflow else -event.amount


def compute_running_balances(
    events: Iterable[LedgerEvent],
    opening_balance: Decimal = Decimal("0"),
) -> list[BalanceAnnotatedEvent]:
    """Annotate every event with the balance right after it.

    Events are sorted by ``occurred_at``, then by ``created_at`` and ``id``
    so that same-day events fold in a deterministic order. The result is in
    chronological order; callers that present newest first must re-sort.

    Args:
        events: All surviving ledger events, in any order.
        opening_balance: Balance before the earliest known event. Defaults
            to 0, which assumes the history is complete since inception.

    Returns:
        list[BalanceAnnotatedEvent]: Annotated events, oldest first.

    Raises:
        ValidationError: If an event carries a non-numeric or negative
            amount. Such events are never skipped.
    """
    ordered = sorted(events, key=_chronological_key)
    balance = opening_balance
    annotated: list[BalanceAnnotatedEvent] = []
    for event in ordered:
        amount = _checked_amount(event)
        if LedgerEventKind(event.kind).is_inflow:
            balance += amount
        else:
            balance -= amount
        annotated.append(
            BalanceAnnotatedEvent(event=event, running_balance=balance)
        )
    return annotated


def current_balance(
    events: Iterable[LedgerEvent],
    opening_balance: Decimal = Decimal("0"),
) -> Decimal:
    """Return the balance after the latest event."""
    annotated = compute_running_balances(events, opening_balance)
    if not annotated:
        return opening_balance
    return annotated[-1].running_balance


def summarize(
    events: Iterable[LedgerEvent | BalanceAnnotatedEvent],
) -> StatementSummary:
    """Total income and expenses over an already period-scoped set.

    Args:
        events: Events of one reporting period.

    Returns:
        StatementSummary: Income (Income + Deposit) and expenses
        (Expense + Withdrawal).
    """
    total_income = Decimal("0")
    total_expenses = Decimal("0")
    for event in events:
        if LedgerEventKind(event.kind).is_inflow:
            total_income += event.amount
        else:
            total_expenses += event.amount
    return StatementSummary(
        total_income=total_income,
        total_expenses=total_expenses,
    )


def sort_newest_first(
    events: Sequence[BalanceAnnotatedEvent],
) -> list[BalanceAnnotatedEvent]:
    """Reverse-chronological copy; running balances are left untouched."""
    return sorted(
        events,
        key=lambda item: _chronological_key(item.event),
        reverse=True,
    )


__all__ = [
    "compute_running_balances",
    "current_balance",
    "signed_amount",
    "summarize",
    "sort_newest_first",
]
