"""Use cases to read and export the FX wallet."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.ports.fx_store import FxStorePort
from src.domain.models.ledger import Document, FxLedgerEvent
from src.domain.services.fx import (
    fx_balance,
    search_fx_events,
    sort_fx_newest_first,
    total_local_spend,
)
from src.domain.services.statements import build_fx_history_document
from src.infrastructure.logging.logger import get_app_logger
from src.utils.datetime_utils import utc_now


@dataclass(frozen=True)
class FxWalletView:
    """FX wallet balance and history.

    Attributes:
        balance: Loaded minus spent over every event, whatever the search.
        total_local_spend: Persisted local equivalent of every Spend.
        events: Events matching the search, newest first.
    """

    balance: Decimal
    total_local_spend: Decimal
    events: list[FxLedgerEvent]


class GetFxWalletUseCase:
    """Reconcile the FX wallet from every stored event."""

    def __init__(self, fx_store: FxStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            fx_store: Port providing FX events.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._fx_store = fx_store
        self._logger = logger or get_app_logger()

    def execute(self, search: str = "") -> FxWalletView:
        """Return the wallet balance and the matching history.

        Args:
            search: Optional company or platform filter for the history.

        Returns:
            FxWalletView: Global balance plus the filtered history.
        """
        events = self._fx_store.list_all()
        self._logger.info(f"Fetched {len(events)} FX events")
        balance = fx_balance(events)
        matching = search_fx_events(sort_fx_newest_first(events), search)
        return FxWalletView(
            balance=balance,
            total_local_spend=total_local_spend(events),
            events=matching,
        )


class ExportFxHistoryUseCase:
    """Export the FX history shown on the wallet page."""

    def __init__(self, fx_store: FxStorePort, logger=None) -> None:
        self._wallet = GetFxWalletUseCase(fx_store, logger=logger)
        self._logger = logger or get_app_logger()

    def execute(self, search: str = "") -> Document:
        """Return the matching FX history as a CSV document."""
        view = self._wallet.execute(search=search)
        document = build_fx_history_document(
            view.events,
            generated_on=utc_now().date(),
        )
        self._logger.info(
            f"Exported {len(view.events)} FX records to {document.filename}"
        )
        return document


__all__ = ["GetFxWalletUseCase", "ExportFxHistoryUseCase", "FxWalletView"]
