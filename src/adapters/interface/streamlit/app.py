"""Streamlit finance dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from src.application.use_cases.get_fx_wallet import FxWalletView
from src.application.use_cases.get_ledger_dashboard import LedgerDashboard
from src.domain.constants import MONTH_NAMES
from src.domain.exceptions import LedgerError
from src.domain.models.ledger import (
    BalanceAnnotatedEvent,
    Document,
    FxEventKind,
    LedgerEventKind,
    PeriodMode,
)
from src.domain.services.ledger import signed_amount
from src.infrastructure.container import (
    build_delete_fx_event,
    build_delete_ledger_event,
    build_export_fx_history,
    build_fx_wallet,
    build_generate_statement,
    build_ledger_dashboard,
    build_record_fx_event,
    build_record_ledger_event,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import LedgerSettings
from src.utils.datetime_utils import ensure_utc


DEFAULT_CATEGORIES = {
    LedgerEventKind.INCOME: "Client Payment",
    LedgerEventKind.EXPENSE: "Office Supplies",
    LedgerEventKind.DEPOSIT: "Bank Transfer",
    LedgerEventKind.WITHDRAWAL: "Bank Transfer",
}

NO_SELECTION = "(none)"


def _fetch_dashboard() -> LedgerDashboard:
    """Recompute the ledger dashboard from the store."""
    return build_ledger_dashboard().execute()


def _fetch_fx_wallet(search: str) -> FxWalletView:
    """Reconcile the FX wallet from the store."""
    return build_fx_wallet().execute(search=search)


def _fetch_statement(
    mode: PeriodMode,
    year: int,
    month: int | None,
    account_holder: str,
) -> Document:
    """Build the statement document for the selected period."""
    return build_generate_statement().execute(
        mode,
        year,
        month=month,
        account_holder=account_holder,
    )


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = "$" if currency_code == "USD" else currency_code
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol} {abs(value):,.2f}"


def _format_signed(event: BalanceAnnotatedEvent, currency_code: str) -> str:
    """Format an event amount with the sign implied by its kind."""
    amount = signed_amount(event)
    prefix = "-" if amount.is_signed() else "+"
    return f"{prefix}{_format_currency(abs(amount), currency_code)}"


def _format_margin(value: Decimal) -> str:
    """Format a profit margin percentage."""
    return f"{value:.1f}%"


def _prepare_balance_chart_data(
    events: Sequence[BalanceAnnotatedEvent],
) -> list[dict[str, str | float]]:
    """Return Altair-ready points of the balance trajectory, oldest first.

    Args:
        events: Annotated events in any order.

    Returns:
        list of dicts with ``date`` and ``balance`` keys.
    """
    ordered = sorted(
        events,
        key=lambda item: (
            ensure_utc(item.occurred_at),
            ensure_utc(item.created_at or item.occurred_at),
            item.id,
        ),
    )
    return [
        {
            "date": ensure_utc(item.occurred_at).date().isoformat(),
            "balance": float(item.running_balance),
        }
        for item in ordered
    ]


def _prepare_transaction_rows(
    events: Sequence[BalanceAnnotatedEvent],
    currency_code: str,
) -> list[dict[str, str]]:
    """Return table rows for annotated events, in the given order."""
    return [
        {
            "Date": ensure_utc(item.occurred_at).date().isoformat(),
            "Title": item.event.title,
            "Category": item.event.category,
            "Type": item.kind.value,
            "Amount": _format_signed(item, currency_code),
            "Balance": _format_currency(item.running_balance, currency_code),
        }
        for item in events
    ]


def _render_balance_chart(events: Sequence[BalanceAnnotatedEvent]) -> None:
    """Render the running balance as a step line."""
    data = _prepare_balance_chart_data(events)
    if not data:
        return
    chart = (
        alt.Chart(alt.Data(values=data))
        .mark_line(interpolate="step-after", point=True)
        .encode(
            x=alt.X("date:T", title=None),
            y=alt.Y("balance:Q", title="Balance"),
            tooltip=[alt.Tooltip("date:T"), alt.Tooltip("balance:Q")],
        )
        .properties(height=260)
    )
    st.altair_chart(chart, width="stretch")


def _render_transaction_form(kind: LedgerEventKind) -> None:
    """Render the entry form for one transaction kind."""
    with st.form(f"add_{kind.value.lower()}", clear_on_submit=True):
        title = st.text_input("Title")
        amount = st.text_input("Amount")
        occurred_on = st.date_input("Date", value=date.today())
        category = st.text_input("Category", value=DEFAULT_CATEGORIES[kind])
        description = st.text_area("Description")
        submitted = st.form_submit_button(f"Save {kind.value}")
    if not submitted:
        return
    try:
        event = build_record_ledger_event().execute(
            kind=kind,
            amount=amount,
            title=title,
            occurred_at=occurred_on,
            category=category,
            description=description,
        )
    except LedgerError as exc:
        st.error(exc.message)
        return
    get_usage_logger().info(f"Recorded {kind.value} {event.id}")
    st.success("Transaction logged successfully!")


def _render_dashboard(settings: LedgerSettings) -> None:
    """Render balance, totals, entry forms, and recent transactions."""
    dashboard = _fetch_dashboard()
    currency = settings.local_currency
    summary = dashboard.summary

    income_col, expenses_col, profit_col, balance_col = st.columns(4)
    income_col.metric(
        "Total Income",
        _format_currency(summary.total_income, currency),
    )
    expenses_col.metric(
        "Total Expenses",
        _format_currency(summary.total_expenses, currency),
    )
    profit_col.metric(
        "Net Profit / Loss",
        _format_currency(summary.net_profit, currency),
        _format_margin(summary.profit_margin),
    )
    balance_col.metric(
        "Bank Balance",
        _format_currency(dashboard.current_balance, currency),
    )

    _render_balance_chart(dashboard.history)

    st.subheader("Quick Actions")
    tabs = st.tabs([kind.value for kind in LedgerEventKind])
    for tab, kind in zip(tabs, LedgerEventKind):
        with tab:
            _render_transaction_form(kind)

    st.subheader("Recent Transactions")
    if not dashboard.recent_events:
        st.info("No transactions yet.")
        return
    st.dataframe(
        _prepare_transaction_rows(dashboard.recent_events, currency),
        width="stretch",
        hide_index=True,
    )
    labels = {
        item.id: f"{ensure_utc(item.occurred_at).date()} | "
        f"{item.event.title} | {_format_signed(item, currency)}"
        for item in dashboard.recent_events
    }
    choice = st.selectbox(
        "Delete transaction",
        [NO_SELECTION, *labels],
        format_func=lambda key: labels.get(key, key),
    )
    if choice != NO_SELECTION and st.button("Delete"):
        try:
            build_delete_ledger_event().execute(choice)
        except LedgerError as exc:
            st.error(exc.message)
            return
        get_usage_logger().info(f"Deleted transaction {choice}")
        st.success("Transaction deleted")


def _render_statements(settings: LedgerSettings) -> None:
    """Render the statement download form."""
    st.subheader("Statements")
    mode_label = st.radio("Report type", ["Monthly", "Yearly"], horizontal=True)
    today = date.today()
    year = st.number_input(
        "Year",
        min_value=1970,
        max_value=2100,
        value=today.year,
        step=1,
    )
    month = None
    mode = PeriodMode.YEARLY
    if mode_label == "Monthly":
        mode = PeriodMode.MONTHLY
        month = st.selectbox(
            "Month",
            options=list(range(12)),
            index=today.month - 1,
            format_func=lambda index: MONTH_NAMES[index],
        )
    if not st.button("Generate statement"):
        return
    try:
        document = _fetch_statement(
            mode,
            int(year),
            month,
            settings.account_holder,
        )
    except LedgerError as exc:
        st.warning(exc.message)
        return
    get_usage_logger().info(f"Generated statement {document.filename}")
    st.download_button(
        "Download statement",
        data=document.content,
        file_name=document.filename,
        mime=document.content_type,
    )


def _render_fx_form() -> None:
    """Render the FX Load/Spend entry form."""
    with st.form("add_fx", clear_on_submit=True):
        kind = st.selectbox("Type", [kind.value for kind in FxEventKind])
        amount = st.text_input("Amount ($)")
        exchange_rate = st.text_input("Exchange rate")
        company_name = st.text_input("Company")
        platform = st.text_input("Platform")
        campaign_name = st.text_input("Campaign")
        submitted = st.form_submit_button("Save")
    if not submitted:
        return
    try:
        event = build_record_fx_event().execute(
            kind=kind,
            amount=amount,
            exchange_rate=exchange_rate,
            company_name=company_name,
            platform=platform,
            campaign_name=campaign_name,
        )
    except LedgerError as exc:
        st.error(exc.message)
        return
    get_usage_logger().info(f"Recorded FX {event.kind.value} {event.id}")
    st.success("Success!")


def _render_fx_wallet(settings: LedgerSettings) -> None:
    """Render FX wallet balance, history, and export."""
    search = st.text_input("Search company or platform")
    wallet = _fetch_fx_wallet(search)
    balance_col, spend_col = st.columns(2)
    balance_col.metric(
        "Wallet Balance",
        _format_currency(wallet.balance, settings.fx_currency),
    )
    spend_col.metric(
        "Total Spend",
        _format_currency(wallet.total_local_spend, settings.local_currency),
    )
    _render_fx_form()

    if not wallet.events:
        st.info("No records found.")
        return
    st.dataframe(
        [
            {
                "Date": ensure_utc(event.occurred_at).strftime("%Y-%m-%d %H:%M"),
                "Type": event.kind.value,
                "Company/Source": event.company_name,
                "Platform": event.platform,
                "Campaign": event.campaign_name or "-",
                "Amount": _format_currency(event.amount, settings.fx_currency),
                "Rate": str(event.exchange_rate),
                "Equivalent": _format_currency(
                    event.local_equivalent,
                    settings.local_currency,
                ),
            }
            for event in wallet.events
        ],
        width="stretch",
        hide_index=True,
    )
    document = build_export_fx_history().execute(search=search)
    st.download_button(
        "Download CSV",
        data=document.content,
        file_name=document.filename,
        mime=document.content_type,
    )
    labels = {
        event.id: f"{ensure_utc(event.occurred_at).date()} | "
        f"{event.kind.value} | {event.company_name} | {event.amount}"
        for event in wallet.events
    }
    choice = st.selectbox(
        "Delete record",
        [NO_SELECTION, *labels],
        format_func=lambda key: labels.get(key, key),
    )
    if choice != NO_SELECTION and st.button("Delete record"):
        try:
            build_delete_fx_event().execute(choice)
        except LedgerError as exc:
            st.error(exc.message)
            return
        get_usage_logger().info(f"Deleted FX record {choice}")
        st.success("Record deleted successfully")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Dashboard", layout="wide")
    st.title("Finance Dashboard")
    settings = LedgerSettings.from_env()

    page = st.sidebar.selectbox("Page", ["Dashboard", "Statements", "FX Wallet"])
    if page == "Dashboard":
        _render_dashboard(settings)
    elif page == "Statements":
        _render_statements(settings)
    else:
        _render_fx_wallet(settings)


if __name__ == "__main__":  # pragma: no cover
    main()
