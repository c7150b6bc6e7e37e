"""Statement and history documents.

Builders here only lay out data that was already folded, filtered and
summarized upstream. They never sort by anything but presentation order and
never recompute balances.
"""

import csv
import io
from collections.abc import Sequence
from datetime import date

from src.domain.exceptions import EmptyPeriodError
from src.domain.models.ledger import (
    BalanceAnnotatedEvent,
    Document,
    FxLedgerEvent,
    PeriodSelector,
    StatementSummary,
)
from src.domain.services.ledger import sort_newest_first
from src.utils.datetime_utils import ensure_utc
from src.utils.decimal_utils import quantize_money

CSV_CONTENT_TYPE = "text/csv"

STATEMENT_COLUMNS = (
    "Date",
    "Title",
    "Category",
    "Type",
    "Amount",
    "Running Balance",
)

FX_HISTORY_COLUMNS = (
    "Date",
    "Type",
    "Company/Source",
    "Platform",
    "Campaign",
    "Amount",
    "Rate",
    "Local Equivalent",
)


def _slug(text: str) -> str:
    return "_".join(text.lower().split())


def _to_bytes(buffer: io.StringIO) -> bytes:
    return buffer.getvalue().encode("utf-8")


def build_statement(
    events: Sequence[BalanceAnnotatedEvent],
    summary: StatementSummary,
    period: PeriodSelector,
    account_holder: str,
    currency_code: str = "NPR",
) -> Document:
    """Lay out a period statement as a CSV document.

    Args:
        events: Period-filtered events annotated over the full history.
        summary: Totals for the same period.
        period: The reporting window the events were filtered with.
        account_holder: Name printed in the statement header.
        currency_code: Local currency code printed in the header.

    Returns:
        Document: CSV statement, newest transaction first.

    Raises:
        EmptyPeriodError: If ``events`` is empty.
    """
    if not events:
        raise EmptyPeriodError(period.label)

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["Account Holder", account_holder])
    writer.writerow(["Period", period.label])
    writer.writerow(["Currency", currency_code])
    writer.writerow(["Total Income", quantize_money(summary.total_income)])
    writer.writerow(["Total Expenses", quantize_money(summary.total_expenses)])
    writer.writerow(["Net Profit", quantize_money(summary.net_profit)])
    writer.writerow(["Profit Margin (%)", quantize_money(summary.profit_margin)])
    writer.writerow([])
    writer.writerow(STATEMENT_COLUMNS)
    for item in sort_newest_first(events):
        event = item.event
        writer.writerow(
            [
                ensure_utc(event.occurred_at).date().isoformat(),
                event.title,
                event.category,
                event.kind.value,
                quantize_money(event.amount),
                quantize_money(item.running_balance),
            ]
        )

    return Document(
        filename=f"statement_{_slug(period.label)}.csv",
        content_type=CSV_CONTENT_TYPE,
        content=_to_bytes(buffer),
    )


def build_fx_history_document(
    events: Sequence[FxLedgerEvent],
    generated_on: date,
) -> Document:
    """Lay out FX wallet history as a CSV document, in the given order."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(FX_HISTORY_COLUMNS)
    for event in events:
        occurred_at = ensure_utc(event.occurred_at)
        writer.writerow(
            [
                occurred_at.isoformat(timespec="minutes"),
                event.kind.value,
                event.company_name,
                event.platform,
                event.campaign_name or "-",
                event.amount,
                event.exchange_rate,
                quantize_money(event.local_equivalent),
            ]
        )
    return Document(
        filename=f"fx_history_{generated_on.isoformat()}.csv",
        content_type=CSV_CONTENT_TYPE,
        content=_to_bytes(buffer),
    )


__all__ = [
    "CSV_CONTENT_TYPE",
    "STATEMENT_COLUMNS",
    "FX_HISTORY_COLUMNS",
    "build_statement",
    "build_fx_history_document",
]
