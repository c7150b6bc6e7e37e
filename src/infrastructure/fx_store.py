"""SQLAlchemy-backed store for FX wallet events."""

import uuid

from sqlalchemy import delete, insert, select

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.fx_store import FxStorePort
from src.domain.constants import AMOUNT_PLACES, RATE_PLACES
from src.domain.models.ledger import (
    FxEventKind,
    FxLedgerEvent,
    FxLedgerEventDraft,
)
from src.infrastructure.tables import fx_ledger_events
from src.utils.datetime_utils import ensure_utc, utc_now
from src.utils.decimal_utils import coerce_decimal, quantize_to


class SqlAlchemyFxStore(FxStorePort):
    """FX store backed by the ledger database.

    ``local_equivalent`` is written once from the draft and read back as
    stored; it is never derived from ``exchange_rate`` on read.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def list_all(self) -> list[FxLedgerEvent]:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(select(fx_ledger_events)).all()
        return [self._to_event(row) for row in rows]

    def create(self, draft: FxLedgerEventDraft) -> FxLedgerEvent:
        event = FxLedgerEvent(
            id=uuid.uuid4().hex,
            kind=draft.kind,
            amount=quantize_to(draft.amount, AMOUNT_PLACES),
            exchange_rate=quantize_to(draft.exchange_rate, RATE_PLACES),
            local_equivalent=quantize_to(
                draft.local_equivalent,
                AMOUNT_PLACES,
            ),
            occurred_at=ensure_utc(draft.occurred_at),
            company_name=draft.company_name,
            platform=draft.platform,
            campaign_name=draft.campaign_name,
            added_by=draft.added_by,
            created_at=utc_now(),
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(
                insert(fx_ledger_events).values(
                    id=event.id,
                    kind=event.kind.value,
                    amount=event.amount,
                    exchange_rate=event.exchange_rate,
                    local_equivalent=event.local_equivalent,
                    occurred_at=event.occurred_at,
                    company_name=event.company_name,
                    platform=event.platform,
                    campaign_name=event.campaign_name,
                    added_by=event.added_by,
                    created_at=event.created_at,
                )
            )
        return event

    def delete_by_id(self, event_id: str) -> bool:
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            result = conn.execute(
                delete(fx_ledger_events).where(
                    fx_ledger_events.c.id == event_id
                )
            )
        return result.rowcount > 0

    @staticmethod
    def _to_event(row) -> FxLedgerEvent:
        return FxLedgerEvent(
            id=row.id,
            kind=FxEventKind(row.kind),
            amount=coerce_decimal(row.amount),
            exchange_rate=coerce_decimal(row.exchange_rate),
            local_equivalent=coerce_decimal(row.local_equivalent),
            occurred_at=ensure_utc(row.occurred_at),
            company_name=row.company_name,
            platform=row.platform,
            campaign_name=row.campaign_name or "",
            added_by=row.added_by,
            created_at=ensure_utc(row.created_at) if row.created_at else None,
        )


__all__ = ["SqlAlchemyFxStore"]
