"""Use case to compute the finance dashboard figures."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.ports.transaction_store import TransactionStorePort
from src.domain.models.ledger import BalanceAnnotatedEvent, StatementSummary
from src.domain.services.ledger import (
    compute_running_balances,
    sort_newest_first,
    summarize,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerDashboard:
    """Dashboard figures for the local ledger.

    Attributes:
        current_balance: Balance after the latest event.
        summary: Income and expense totals over the whole history.
        recent_events: Latest annotated events, newest first.
        history: Every annotated event, oldest first, for the balance chart.
    """

    current_balance: Decimal
    summary: StatementSummary
    recent_events: list[BalanceAnnotatedEvent]
    history: list[BalanceAnnotatedEvent]


class GetLedgerDashboardUseCase:
    """Recompute balance and totals from the full transaction history."""

    def __init__(
        self,
        transaction_store: TransactionStorePort,
        logger=None,
        opening_balance: Decimal = Decimal("0"),
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_store: Port providing ledger events.
            logger: Optional logger compatible with logging.Logger-like API.
            opening_balance: Balance before the earliest recorded event.
        """
        self._transaction_store = transaction_store
        self._logger = logger or get_app_logger()
        self._opening_balance = opening_balance

    def execute(self, recent_limit: int = 200) -> LedgerDashboard:
        """Return the dashboard figures.

        Args:
            recent_limit: Maximum number of events returned for display.

        Returns:
            LedgerDashboard: Balance, totals and the latest events.
        """
        events = self._transaction_store.list_all()
        self._logger.info(f"Fetched {len(events)} ledger events")

        annotated = compute_running_balances(events, self._opening_balance)
        balance = (
            annotated[-1].running_balance
            if annotated
            else self._opening_balance
        )
        summary = summarize(events)
        self._logger.info(
            f"Dashboard computed: balance={balance}, "
            f"income={summary.total_income}, "
            f"expenses={summary.total_expenses}"
        )
        return LedgerDashboard(
            current_balance=balance,
            summary=summary,
            recent_events=sort_newest_first(annotated)[:recent_limit],
            history=annotated,
        )


__all__ = ["GetLedgerDashboardUseCase", "LedgerDashboard"]
