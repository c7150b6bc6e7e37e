"""Domain services package."""

from .fx import (
    check_overdraft,
    compute_local_equivalent,
    fx_balance,
    search_fx_events,
    sort_fx_newest_first,
    total_local_spend,
)
from .ledger import (
    compute_running_balances,
    current_balance,
    signed_amount,
    sort_newest_first,
    summarize,
)
from .periods import build_period_selector, filter_by_period
from .statements import build_fx_history_document, build_statement
from .validation import (
    parse_amount,
    validate_fx_draft,
    validate_ledger_draft,
)

__all__ = [
    "check_overdraft",
    "compute_local_equivalent",
    "fx_balance",
    "search_fx_events",
    "sort_fx_newest_first",
    "total_local_spend",
    "compute_running_balances",
    "current_balance",
    "signed_amount",
    "sort_newest_first",
    "summarize",
    "build_period_selector",
    "filter_by_period",
    "build_fx_history_document",
    "build_statement",
    "parse_amount",
    "validate_fx_draft",
    "validate_ledger_draft",
]
