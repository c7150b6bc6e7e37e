"""Domain package for ledger rules and core models."""

from .constants import (
    DEFAULT_CATEGORY,
    MANUAL_LOAD_COMPANY,
    MANUAL_LOAD_PLATFORM,
)
from .exceptions import (
    EmptyPeriodError,
    LedgerError,
    NotFoundError,
    ValidationError,
)
from .models import (
    BalanceAnnotatedEvent,
    Document,
    FxEventKind,
    FxLedgerEvent,
    LedgerEvent,
    LedgerEventKind,
    PeriodMode,
    PeriodSelector,
    StatementSummary,
)
from .services import (
    build_period_selector,
    build_statement,
    compute_running_balances,
    filter_by_period,
    fx_balance,
    summarize,
)

__all__ = [
    "DEFAULT_CATEGORY",
    "MANUAL_LOAD_COMPANY",
    "MANUAL_LOAD_PLATFORM",
    "EmptyPeriodError",
    "LedgerError",
    "NotFoundError",
    "ValidationError",
    "BalanceAnnotatedEvent",
    "Document",
    "FxEventKind",
    "FxLedgerEvent",
    "LedgerEvent",
    "LedgerEventKind",
    "PeriodMode",
    "PeriodSelector",
    "StatementSummary",
    "build_period_selector",
    "build_statement",
    "compute_running_balances",
    "filter_by_period",
    "fx_balance",
    "summarize",
]
