"""Tests for recording and deleting ledger events."""

from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.record_ledger_event import (
    DeleteLedgerEventUseCase,
    RecordLedgerEventUseCase,
)
from src.domain.exceptions import NotFoundError, ValidationError
from src.domain.models.ledger import LedgerEvent, LedgerEventKind


def _stored(draft) -> LedgerEvent:
    return LedgerEvent(
        id="new-id",
        kind=draft.kind,
        amount=draft.amount,
        occurred_at=draft.occurred_at,
        title=draft.title,
        category=draft.category,
        description=draft.description,
        logged_by=draft.logged_by,
        created_at=datetime(2024, 1, 10, 9, tzinfo=timezone.utc),
    )


def test_execute_validates_and_stores_draft() -> None:
    """Valid input should be turned into a draft and stored once."""
    store = MagicMock()
    store.create.side_effect = _stored
    logger = MagicMock()
    use_case = RecordLedgerEventUseCase(store, logger=logger)

    event = use_case.execute(
        kind="Expense",
        amount="300",
        title="Printer",
        occurred_at=date(2024, 1, 10),
        category="Office Supplies",
        logged_by="user-1",
    )

    store.create.assert_called_once()
    draft = store.create.call_args.args[0]
    assert draft.kind == LedgerEventKind.EXPENSE
    assert draft.amount == Decimal("300")
    assert draft.occurred_at == datetime(2024, 1, 10, tzinfo=timezone.utc)
    assert event.id == "new-id"
    logger.info.assert_called_once()


def test_execute_stores_nothing_on_invalid_input() -> None:
    """Malformed input should never reach the store."""
    store = MagicMock()
    use_case = RecordLedgerEventUseCase(store, logger=MagicMock())

    with pytest.raises(ValidationError):
        use_case.execute(kind="Income", amount="", title="Retainer")

    store.create.assert_not_called()


def test_delete_requires_an_id() -> None:
    """An empty id should be rejected before touching the store."""
    store = MagicMock()
    use_case = DeleteLedgerEventUseCase(store, logger=MagicMock())

    with pytest.raises(ValidationError) as exc_info:
        use_case.execute("")

    assert exc_info.value.message == "ID required"
    store.delete_by_id.assert_not_called()


def test_delete_returns_true_when_removed() -> None:
    """Deleting an existing id should report success."""
    store = MagicMock()
    store.delete_by_id.return_value = True
    use_case = DeleteLedgerEventUseCase(store, logger=MagicMock())

    assert use_case.execute("abc") is True
    store.delete_by_id.assert_called_once_with("abc")


def test_delete_unknown_id_raises_not_found() -> None:
    """Deleting an unknown id should raise by default."""
    store = MagicMock()
    store.delete_by_id.return_value = False
    use_case = DeleteLedgerEventUseCase(store, logger=MagicMock())

    with pytest.raises(NotFoundError) as exc_info:
        use_case.execute("missing")

    assert exc_info.value.record_id == "missing"


def test_delete_unknown_id_is_noop_when_allowed() -> None:
    """missing_ok should turn an unknown id into a logged no-op."""
    store = MagicMock()
    store.delete_by_id.return_value = False
    logger = MagicMock()
    use_case = DeleteLedgerEventUseCase(store, logger=logger)

    assert use_case.execute("missing", missing_ok=True) is False
    logger.warning.assert_called_once()
