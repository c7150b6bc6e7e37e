"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.export_sink import ExportSinkPort
from src.application.ports.fx_store import FxStorePort
from src.application.ports.transaction_store import TransactionStorePort
from src.application.use_cases.generate_statement import (
    ExportStatementUseCase,
    GenerateStatementUseCase,
)
from src.application.use_cases.get_fx_wallet import (
    ExportFxHistoryUseCase,
    GetFxWalletUseCase,
)
from src.application.use_cases.get_ledger_dashboard import (
    GetLedgerDashboardUseCase,
)
from src.application.use_cases.record_fx_event import (
    DeleteFxEventUseCase,
    RecordFxEventUseCase,
)
from src.application.use_cases.record_ledger_event import (
    DeleteLedgerEventUseCase,
    RecordLedgerEventUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.export_sink import FileExportSink
from src.infrastructure.fx_store import SqlAlchemyFxStore
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.transaction_store import SqlAlchemyTransactionStore
from src.utils.utils import get_project_root


def build_database_adapter(
    settings: LedgerSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter for the configured ledger URL."""
    resolved = settings or LedgerSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(db_url=resolved.db_url)


def build_transaction_store(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> TransactionStorePort:
    """Return the ledger transaction store."""
    resolved_db = db_port or build_database_adapter(settings)
    return SqlAlchemyTransactionStore(resolved_db)


def build_fx_store(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> FxStorePort:
    """Return the FX wallet store."""
    resolved_db = db_port or build_database_adapter(settings)
    return SqlAlchemyFxStore(resolved_db)


def build_export_sink(
    settings: LedgerSettings | None = None,
) -> ExportSinkPort:
    """Return the file export sink."""
    resolved = settings or LedgerSettings.from_env()
    directory = resolved.export_dir or get_project_root() / "exports"
    return FileExportSink(directory, logger=get_app_logger())


def build_record_ledger_event(
    db_port: DatabaseEnginePort | None = None,
) -> RecordLedgerEventUseCase:
    """Return the use case recording ledger events."""
    return RecordLedgerEventUseCase(
        build_transaction_store(db_port),
        logger=get_app_logger(),
    )


def build_delete_ledger_event(
    db_port: DatabaseEnginePort | None = None,
) -> DeleteLedgerEventUseCase:
    """Return the use case deleting ledger events."""
    return DeleteLedgerEventUseCase(
        build_transaction_store(db_port),
        logger=get_app_logger(),
    )


def build_record_fx_event(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> RecordFxEventUseCase:
    """Return the use case recording FX events with the overdraft policy."""
    resolved = settings or LedgerSettings.from_env()
    return RecordFxEventUseCase(
        build_fx_store(db_port, resolved),
        logger=get_app_logger(),
        allow_overdraft=resolved.allow_fx_overdraft,
    )


def build_delete_fx_event(
    db_port: DatabaseEnginePort | None = None,
) -> DeleteFxEventUseCase:
    """Return the use case deleting FX events."""
    return DeleteFxEventUseCase(build_fx_store(db_port), logger=get_app_logger())


def build_ledger_dashboard(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> GetLedgerDashboardUseCase:
    """Return the dashboard use case."""
    resolved = settings or LedgerSettings.from_env()
    return GetLedgerDashboardUseCase(
        build_transaction_store(db_port, resolved),
        logger=get_app_logger(),
        opening_balance=resolved.opening_balance,
    )


def build_fx_wallet(
    db_port: DatabaseEnginePort | None = None,
) -> GetFxWalletUseCase:
    """Return the FX wallet use case."""
    return GetFxWalletUseCase(build_fx_store(db_port), logger=get_app_logger())


def build_export_fx_history(
    db_port: DatabaseEnginePort | None = None,
) -> ExportFxHistoryUseCase:
    """Return the FX history export use case."""
    return ExportFxHistoryUseCase(
        build_fx_store(db_port),
        logger=get_app_logger(),
    )


def build_generate_statement(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> GenerateStatementUseCase:
    """Return the statement use case."""
    resolved = settings or LedgerSettings.from_env()
    return GenerateStatementUseCase(
        build_transaction_store(db_port, resolved),
        logger=get_app_logger(),
        opening_balance=resolved.opening_balance,
        currency_code=resolved.local_currency,
    )


def build_export_statement(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> ExportStatementUseCase:
    """Return the statement export use case wired to the file sink."""
    resolved = settings or LedgerSettings.from_env()
    return ExportStatementUseCase(
        build_generate_statement(db_port, settings=resolved),
        build_export_sink(resolved),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_transaction_store",
    "build_fx_store",
    "build_export_sink",
    "build_record_ledger_event",
    "build_delete_ledger_event",
    "build_record_fx_event",
    "build_delete_fx_event",
    "build_ledger_dashboard",
    "build_fx_wallet",
    "build_export_fx_history",
    "build_generate_statement",
    "build_export_statement",
]
