"""Tests for the composition root."""

from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock

from src.application.use_cases.record_fx_event import RecordFxEventUseCase
from src.infrastructure import container
from src.infrastructure.export_sink import FileExportSink
from src.infrastructure.fx_store import SqlAlchemyFxStore
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.transaction_store import SqlAlchemyTransactionStore


def _settings(tmp_path: Path) -> LedgerSettings:
    return LedgerSettings(
        local_currency="INR",
        opening_balance=Decimal("40"),
        allow_fx_overdraft=False,
        account_holder="Studio",
        export_dir=tmp_path,
    )


def test_stores_share_injected_db_port() -> None:
    """Stores should be wired to the given database port."""
    db_port = MagicMock()

    transaction_store = container.build_transaction_store(db_port)
    fx_store = container.build_fx_store(db_port)

    assert isinstance(transaction_store, SqlAlchemyTransactionStore)
    assert isinstance(fx_store, SqlAlchemyFxStore)
    assert transaction_store._db_port is db_port
    assert fx_store._db_port is db_port


def test_record_fx_event_honors_overdraft_setting(tmp_path) -> None:
    """The overdraft policy should come from settings."""
    use_case = container.build_record_fx_event(
        MagicMock(),
        settings=_settings(tmp_path),
    )

    assert isinstance(use_case, RecordFxEventUseCase)
    assert use_case._allow_overdraft is False


def test_report_use_cases_receive_opening_balance(tmp_path) -> None:
    """Dashboard and statements should start from the configured balance."""
    settings = _settings(tmp_path)

    dashboard = container.build_ledger_dashboard(MagicMock(), settings)
    statement = container.build_generate_statement(MagicMock(), settings)

    assert dashboard._opening_balance == Decimal("40")
    assert statement._opening_balance == Decimal("40")
    assert statement._currency_code == "INR"


def test_export_statement_uses_settings_directory(tmp_path) -> None:
    """The statement export should write to the configured directory."""
    settings = _settings(tmp_path)

    sink = container.build_export_sink(settings)
    export = container.build_export_statement(MagicMock(), settings)

    assert isinstance(sink, FileExportSink)
    assert sink._directory == tmp_path
    assert export._export_sink._directory == tmp_path


def test_database_adapter_uses_configured_url(tmp_path) -> None:
    """The database URL from settings should reach the engine adapter."""
    settings = LedgerSettings(db_url="sqlite://", export_dir=tmp_path)

    adapter = container.build_database_adapter(settings)

    assert adapter._db_url == "sqlite://"
    assert adapter._engine is None
