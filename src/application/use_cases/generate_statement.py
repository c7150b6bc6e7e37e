"""Use cases to generate and export period statements.

The pipeline is fetch, fold, filter, summarize, then lay out. The fold runs
over the full history so that a March statement shows the real balance
trajectory rather than one that restarts at zero on March 1st.
"""

from decimal import Decimal

from src.application.ports.export_sink import ExportSinkPort
from src.application.ports.transaction_store import TransactionStorePort
from src.domain.models.ledger import Document
from src.domain.services.ledger import compute_running_balances, summarize
from src.domain.services.periods import build_period_selector, filter_by_period
from src.domain.services.statements import build_statement
from src.infrastructure.logging.logger import get_app_logger


class GenerateStatementUseCase:
    """Build a statement document for one reporting period."""

    def __init__(
        self,
        transaction_store: TransactionStorePort,
        logger=None,
        opening_balance: Decimal = Decimal("0"),
        currency_code: str = "NPR",
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_store: Port providing ledger events.
            logger: Optional logger compatible with logging.Logger-like API.
            opening_balance: Balance before the earliest recorded event.
            currency_code: Local currency printed on the statement.
        """
        self._transaction_store = transaction_store
        self._logger = logger or get_app_logger()
        self._opening_balance = opening_balance
        self._currency_code = currency_code

    def execute(
        self,
        mode,
        year,
        month=None,
        account_holder: str = "Main Account",
    ) -> Document:
        """Return the statement for the requested period.

        Args:
            mode: ``monthly`` or ``yearly``.
            year: Calendar year.
            month: Zero-based month for monthly statements.
            account_holder: Name printed in the statement header.

        Returns:
            Document: The statement, newest transaction first.

        Raises:
            ValidationError: If the period parameters are invalid. The store
                is not read in that case.
            EmptyPeriodError: If the period has no transactions.
        """
        period = build_period_selector(mode, year, month)
        events = self._transaction_store.list_all()
        self._logger.info(
            f"Fetched {len(events)} ledger events for {period.label} statement"
        )

        annotated = compute_running_balances(events, self._opening_balance)
        in_period = filter_by_period(annotated, period)
        summary = summarize(in_period)
        self._logger.info(
            f"Statement totals for {period.label}: "
            f"income={summary.total_income}, "
            f"expenses={summary.total_expenses}, "
            f"events={len(in_period)}"
        )
        return build_statement(
            in_period,
            summary,
            period,
            account_holder,
            currency_code=self._currency_code,
        )


class ExportStatementUseCase:
    """Generate a statement and hand it to an export sink."""

    def __init__(
        self,
        generate_statement: GenerateStatementUseCase,
        export_sink: ExportSinkPort,
        logger=None,
    ) -> None:
        self._generate_statement = generate_statement
        self._export_sink = export_sink
        self._logger = logger or get_app_logger()

    def execute(
        self,
        mode,
        year,
        month=None,
        account_holder: str = "Main Account",
    ) -> str:
        """Export the statement and return where it was delivered."""
        document = self._generate_statement.execute(
            mode,
            year,
            month=month,
            account_holder=account_holder,
        )
        location = self._export_sink.deliver(document)
        self._logger.info(f"Statement {document.filename} delivered to {location}")
        return location


__all__ = ["GenerateStatementUseCase", "ExportStatementUseCase"]
