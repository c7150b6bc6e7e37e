"""SQLAlchemy-backed store for local-currency ledger events."""

import uuid

from sqlalchemy import delete, insert, select

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transaction_store import TransactionStorePort
from src.domain.constants import AMOUNT_PLACES
from src.domain.models.ledger import (
    LedgerEvent,
    LedgerEventDraft,
    LedgerEventKind,
)
from src.infrastructure.tables import ledger_events
from src.utils.datetime_utils import ensure_utc, utc_now
from src.utils.decimal_utils import coerce_decimal, quantize_to


class SqlAlchemyTransactionStore(TransactionStorePort):
    """Transaction store backed by the ledger database."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def list_all(self) -> list[LedgerEvent]:
        """Return every stored event.

        Returns:
            list[LedgerEvent]: Events in storage order.
        """
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(select(ledger_events)).all()
        return [self._to_event(row) for row in rows]

    def create(self, draft: LedgerEventDraft) -> LedgerEvent:
        """Insert a new event in its own transaction.

        Args:
            draft: Validated event data.

        Returns:
            LedgerEvent: The stored event.
        """
        event = LedgerEvent(
            id=uuid.uuid4().hex,
            kind=draft.kind,
            amount=quantize_to(draft.amount, AMOUNT_PLACES),
            occurred_at=ensure_utc(draft.occurred_at),
            title=draft.title,
            category=draft.category,
            description=draft.description,
            logged_by=draft.logged_by,
            created_at=utc_now(),
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(
                insert(ledger_events).values(
                    id=event.id,
                    kind=event.kind.value,
                    amount=event.amount,
                    occurred_at=event.occurred_at,
                    title=event.title,
                    category=event.category,
                    description=event.description,
                    logged_by=event.logged_by,
                    created_at=event.created_at,
                )
            )
        return event

    def delete_by_id(self, event_id: str) -> bool:
        """Delete an event.

        Args:
            event_id: Identifier of the event.

        Returns:
            bool: False when no row matched.
        """
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            result = conn.execute(
                delete(ledger_events).where(ledger_events.c.id == event_id)
            )
        return result.rowcount > 0

    @staticmethod
    def _to_event(row) -> LedgerEvent:
        return LedgerEvent(
            id=row.id,
            kind=LedgerEventKind(row.kind),
            amount=coerce_decimal(row.amount),
            occurred_at=ensure_utc(row.occurred_at),
            title=row.title,
            category=row.category,
            description=row.description or "",
            logged_by=row.logged_by,
            created_at=ensure_utc(row.created_at) if row.created_at else None,
        )


__all__ = ["SqlAlchemyTransactionStore"]
