"""Domain models for the local-currency ledger and the FX sub-ledger."""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from src.domain.constants import DEFAULT_CATEGORY, MONTH_NAMES
from src.utils.datetime_utils import ensure_utc


class LedgerEventKind(str, Enum):
    """Kind of a local-currency ledger movement."""

    INCOME = "Income"
    EXPENSE = "Expense"
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"

    @property
    def is_inflow(self) -> bool:
        """Return True when the kind increases the balance."""
        return self in (LedgerEventKind.INCOME, LedgerEventKind.DEPOSIT)


class FxEventKind(str, Enum):
    """Kind of a foreign-currency wallet movement."""

    LOAD = "Load"
    SPEND = "Spend"


class PeriodMode(str, Enum):
    """Reporting window granularity."""

    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class LedgerEventDraft:
    """Validated user input for a ledger event not yet stored."""

    kind: LedgerEventKind
    amount: Decimal
    occurred_at: datetime
    title: str
    category: str = DEFAULT_CATEGORY
    description: str = ""
    logged_by: str | None = None


@dataclass(frozen=True)
class LedgerEvent:
    """One posted local-currency movement.

    Attributes:
        id: Opaque identifier assigned by the store.
        kind: Income/Deposit add to the balance, Expense/Withdrawal subtract.
        amount: Non-negative amount in local currency.
        occurred_at: UTC timestamp deciding period membership.
        title: Short label shown in lists and statements.
        category: Free-text category.
        description: Free-text notes.
        logged_by: Identifier of the user who recorded the event.
        created_at: Insertion timestamp, used to break ties.
    """

    id: str
    kind: LedgerEventKind
    amount: Decimal
    occurred_at: datetime
    title: str
    category: str = DEFAULT_CATEGORY
    description: str = ""
    logged_by: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class BalanceAnnotatedEvent:
    """Ledger event with the balance right after it was applied."""

    event: LedgerEvent
    running_balance: Decimal

    @property
    def id(self) -> str:
        return self.event.id

    @property
    def kind(self) -> LedgerEventKind:
        return self.event.kind

    @property
    def amount(self) -> Decimal:
        return self.event.amount

    @property
    def occurred_at(self) -> datetime:
        return self.event.occurred_at

    @property
    def created_at(self) -> datetime | None:
        return self.event.created_at


@dataclass(frozen=True)
class FxLedgerEventDraft:
    """Validated user input for an FX event not yet stored.

    ``local_equivalent`` is fixed here, at write time, from the rate the
    user entered.
    """

    kind: FxEventKind
    amount: Decimal
    exchange_rate: Decimal
    local_equivalent: Decimal
    occurred_at: datetime
    company_name: str
    platform: str
    campaign_name: str = ""
    added_by: str | None = None


@dataclass(frozen=True)
class FxLedgerEvent:
    """One foreign-currency Load or Spend.

    Attributes:
        id: Opaque identifier assigned by the store.
        kind: Load tops up the wallet, Spend draws it down.
        amount: Non-negative amount in foreign currency.
        exchange_rate: Local units per foreign unit when recorded.
        local_equivalent: Persisted ``amount * exchange_rate``.
        occurred_at: UTC timestamp of the movement.
        company_name: Client the spend was made for.
        platform: Ad platform, or the manual-entry sentinel for loads.
        campaign_name: Optional ad campaign label.
        added_by: Identifier of the user who recorded the event.
        created_at: Insertion timestamp.
    """

    id: str
    kind: FxEventKind
    amount: Decimal
    exchange_rate: Decimal
    local_equivalent: Decimal
    occurred_at: datetime
    company_name: str
    platform: str
    campaign_name: str = ""
    added_by: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class PeriodSelector:
    """Reporting window.

    Attributes:
        mode: Monthly or yearly window.
        year: Calendar year.
        month: Zero-based month (0 is January), set only for monthly mode.
    """

    mode: PeriodMode
    year: int
    month: int | None = None

    @property
    def label(self) -> str:
        """Human readable period name."""
        if self.mode == PeriodMode.MONTHLY and self.month is not None:
            return f"{MONTH_NAMES[self.month]} {self.year}"
        return str(self.year)

    def bounds(self) -> tuple[datetime, datetime]:
        """Return the half-open UTC window ``[start, end)``."""
        if self.mode == PeriodMode.MONTHLY and self.month is not None:
            start = datetime(self.year, self.month + 1, 1, tzinfo=timezone.utc)
            if self.month == 11:
                end = datetime(self.year + 1, 1, 1, tzinfo=timezone.utc)
            else:
                end = datetime(
                    self.year, self.month + 2, 1, tzinfo=timezone.utc
                )
            return start, end
        start = datetime(self.year, 1, 1, tzinfo=timezone.utc)
        return start, datetime(self.year + 1, 1, 1, tzinfo=timezone.utc)

    def contains(self, moment: datetime) -> bool:
        """Return True when ``moment`` falls in the window.

        Naive datetimes are read as UTC, never as host local time.
        """
        start, end = self.bounds()
        return start <= ensure_utc(moment) < end


@dataclass(frozen=True)
class StatementSummary:
    """Period-local totals.

    Attributes:
        total_income: Sum of Income and Deposit amounts.
        total_expenses: Sum of Expense and Withdrawal amounts.
    """

    total_income: Decimal
    total_expenses: Decimal

    @property
    def net_profit(self) -> Decimal:
        """Return total_income minus total_expenses."""
        return self.total_income - self.total_expenses

    @property
    def profit_margin(self) -> Decimal:
        """Net profit as a percentage of income, 0 when there is no income."""
        if self.total_income == 0:
            return Decimal("0")
        return (self.net_profit / self.total_income) * Decimal("100")


@dataclass(frozen=True)
class Document:
    """Opaque downloadable artifact."""

    filename: str
    content_type: str
    content: bytes


__all__ = [
    "LedgerEventKind",
    "FxEventKind",
    "PeriodMode",
    "LedgerEventDraft",
    "LedgerEvent",
    "BalanceAnnotatedEvent",
    "FxLedgerEventDraft",
    "FxLedgerEvent",
    "PeriodSelector",
    "StatementSummary",
    "Document",
]
