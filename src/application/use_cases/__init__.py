"""Application use cases package."""

from .generate_statement import ExportStatementUseCase, GenerateStatementUseCase
from .get_fx_wallet import ExportFxHistoryUseCase, FxWalletView, GetFxWalletUseCase
from .get_ledger_dashboard import GetLedgerDashboardUseCase, LedgerDashboard
from .record_fx_event import DeleteFxEventUseCase, RecordFxEventUseCase
from .record_ledger_event import (
    DeleteLedgerEventUseCase,
    RecordLedgerEventUseCase,
)

__all__ = [
    "ExportStatementUseCase",
    "GenerateStatementUseCase",
    "ExportFxHistoryUseCase",
    "FxWalletView",
    "GetFxWalletUseCase",
    "GetLedgerDashboardUseCase",
    "LedgerDashboard",
    "DeleteFxEventUseCase",
    "RecordFxEventUseCase",
    "DeleteLedgerEventUseCase",
    "RecordLedgerEventUseCase",
]
