"""Tests for statement generation and export."""

import csv
import io
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.generate_statement import (
    ExportStatementUseCase,
    GenerateStatementUseCase,
)
from src.domain.exceptions import EmptyPeriodError, ValidationError
from src.domain.models.ledger import Document, LedgerEvent, LedgerEventKind


def _events() -> list[LedgerEvent]:
    return [
        LedgerEvent(
            id="a",
            kind=LedgerEventKind.INCOME,
            amount=Decimal("1000"),
            occurred_at=datetime(2024, 1, 5, tzinfo=timezone.utc),
            title="Retainer",
        ),
        LedgerEvent(
            id="b",
            kind=LedgerEventKind.EXPENSE,
            amount=Decimal("300"),
            occurred_at=datetime(2024, 1, 10, tzinfo=timezone.utc),
            title="Printer",
        ),
        LedgerEvent(
            id="c",
            kind=LedgerEventKind.DEPOSIT,
            amount=Decimal("200"),
            occurred_at=datetime(2024, 2, 1, tzinfo=timezone.utc),
            title="Top up",
        ),
    ]


def _rows(document: Document) -> list[list[str]]:
    return list(csv.reader(io.StringIO(document.content.decode("utf-8"))))


def test_february_statement_keeps_full_history_balance() -> None:
    """Balances should carry over from events before the period."""
    store = MagicMock()
    store.list_all.return_value = _events()
    use_case = GenerateStatementUseCase(store, logger=MagicMock())

    document = use_case.execute("monthly", 2024, 1)
    rows = _rows(document)

    assert document.filename == "statement_february_2024.csv"
    assert rows[3] == ["Total Income", "200.00"]
    assert rows[4] == ["Total Expenses", "0.00"]
    assert rows[9] == [
        "2024-02-01",
        "Top up",
        "General",
        "Deposit",
        "200.00",
        "900.00",
    ]


def test_statement_uses_configured_currency_and_holder() -> None:
    """Header values should come from the configured settings."""
    store = MagicMock()
    store.list_all.return_value = _events()
    use_case = GenerateStatementUseCase(
        store,
        logger=MagicMock(),
        opening_balance=Decimal("100"),
        currency_code="USD",
    )

    rows = _rows(use_case.execute("yearly", "2024", account_holder="Office"))

    assert rows[0] == ["Account Holder", "Office"]
    assert rows[2] == ["Currency", "USD"]
    assert rows[9][-1] == "1000.00"


def test_invalid_period_does_not_read_store() -> None:
    """A bad period should fail before any data is fetched."""
    store = MagicMock()
    use_case = GenerateStatementUseCase(store, logger=MagicMock())

    with pytest.raises(ValidationError):
        use_case.execute("monthly", 2024, 12)

    store.list_all.assert_not_called()


def test_empty_period_raises() -> None:
    """A period without events should raise EmptyPeriodError."""
    store = MagicMock()
    store.list_all.return_value = _events()
    use_case = GenerateStatementUseCase(store, logger=MagicMock())

    with pytest.raises(EmptyPeriodError):
        use_case.execute("monthly", 2024, 6)


def test_export_statement_delivers_document() -> None:
    """Exports should hand the generated document to the sink."""
    generate = MagicMock()
    document = Document("statement_2024.csv", "text/csv", b"x")
    generate.execute.return_value = document
    sink = MagicMock()
    sink.deliver.return_value = "/tmp/statement_2024.csv"
    use_case = ExportStatementUseCase(generate, sink, logger=MagicMock())

    location = use_case.execute("yearly", 2024, account_holder="Office")

    assert location == "/tmp/statement_2024.csv"
    generate.execute.assert_called_once_with(
        "yearly",
        2024,
        month=None,
        account_holder="Office",
    )
    sink.deliver.assert_called_once_with(document)
