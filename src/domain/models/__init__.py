"""Domain models package."""

from .ledger import (
    BalanceAnnotatedEvent,
    Document,
    FxEventKind,
    FxLedgerEvent,
    FxLedgerEventDraft,
    LedgerEvent,
    LedgerEventDraft,
    LedgerEventKind,
    PeriodMode,
    PeriodSelector,
    StatementSummary,
)

__all__ = [
    "BalanceAnnotatedEvent",
    "Document",
    "FxEventKind",
    "FxLedgerEvent",
    "FxLedgerEventDraft",
    "LedgerEvent",
    "LedgerEventDraft",
    "LedgerEventKind",
    "PeriodMode",
    "PeriodSelector",
    "StatementSummary",
]
