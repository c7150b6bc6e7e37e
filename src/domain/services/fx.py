"""Foreign-currency wallet reconciliation."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import AMOUNT_PLACES
from src.domain.exceptions import ValidationError
from src.domain.models.ledger import (
    FxEventKind,
    FxLedgerEvent,
    FxLedgerEventDraft,
)
from src.utils.datetime_utils import ensure_utc
from src.utils.decimal_utils import quantize_to


def compute_local_equivalent(amount: Decimal, exchange_rate: Decimal) -> Decimal:
    """Return the local-currency value of an FX amount at a given rate.

    Only called when an event is written. Stored events keep the value
    computed here even when the rate moves later. The result is rounded
    half-up to the stored amount scale so the returned value is the
    persisted one.
    """
    return quantize_to(amount * exchange_rate, AMOUNT_PLACES)


def fx_balance(events: Iterable[FxLedgerEvent]) -> Decimal:
    """Return total loaded minus total spent over every surviving event."""
    loaded = Decimal("0")
    spent = Decimal("0")
    for event in events:
        if event.kind == FxEventKind.LOAD:
            loaded += event.amount
        else:
            spent += event.amount
    return loaded - spent


def total_local_spend(events: Iterable[FxLedgerEvent]) -> Decimal:
    """Return the persisted local equivalent of every Spend."""
    return sum(
        (
            event.local_equivalent
            for event in events
            if event.kind == FxEventKind.SPEND
        ),
        Decimal("0"),
    )


def check_overdraft(
    events: Iterable[FxLedgerEvent],
    draft: FxLedgerEventDraft,
    allow_overdraft: bool,
) -> None:
    """Reject a Spend that exceeds the wallet when overdraft is disabled.

    Raises:
        ValidationError: If ``allow_overdraft`` is False and the draft
            would make the FX balance negative.
    """
    if allow_overdraft or draft.kind != FxEventKind.SPEND:
        return
    available = fx_balance(events)
    if draft.amount > available:
        raise ValidationError(
            f"Spend of {draft.amount} exceeds the available FX balance "
            f"of {available}.",
            field="amount",
        )


def search_fx_events(
    events: Iterable[FxLedgerEvent],
    query: str,
) -> list[FxLedgerEvent]:
    """Case-insensitive match on company name or platform."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(events)
    return [
        event
        for event in events
        if needle in (event.company_name or "").lower()
        or needle in (event.platform or "").lower()
    ]


def sort_fx_newest_first(events: Iterable[FxLedgerEvent]) -> list[FxLedgerEvent]:
    """Return FX events ordered by date, newest first."""
    return sorted(
        events,
        key=lambda event: (
            ensure_utc(event.occurred_at),
            ensure_utc(event.created_at or event.occurred_at),
            event.id,
        ),
        reverse=True,
    )


__all__ = [
    "compute_local_equivalent",
    "fx_balance",
    "total_local_spend",
    "check_overdraft",
    "search_fx_events",
    "sort_fx_newest_first",
]
