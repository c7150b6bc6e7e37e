"""SQLAlchemy table definitions for the ledger store."""

from sqlalchemy import (
    Column,
    DateTime,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)
from sqlalchemy.engine import Engine

from src.domain.constants import AMOUNT_PLACES, RATE_PLACES


metadata = MetaData()

ledger_events = Table(
    "ledger_events",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("kind", String(16), nullable=False),
    Column("amount", Numeric(18, AMOUNT_PLACES), nullable=False),
    Column("occurred_at", DateTime(timezone=True), nullable=False, index=True),
    Column("title", Text, nullable=False),
    Column("category", Text, nullable=False),
    Column("description", Text, nullable=False, default=""),
    Column("logged_by", String(64)),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

fx_ledger_events = Table(
    "fx_ledger_events",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("kind", String(16), nullable=False),
    Column("amount", Numeric(18, AMOUNT_PLACES), nullable=False),
    Column("exchange_rate", Numeric(18, RATE_PLACES), nullable=False),
    Column("local_equivalent", Numeric(20, AMOUNT_PLACES), nullable=False),
    Column("occurred_at", DateTime(timezone=True), nullable=False, index=True),
    Column("company_name", Text, nullable=False),
    Column("platform", Text, nullable=False),
    Column("campaign_name", Text, nullable=False, default=""),
    Column("added_by", String(64)),
    Column("created_at", DateTime(timezone=True), nullable=False),
)


def create_schema(engine: Engine) -> None:
    """Create the ledger tables when they do not exist yet."""
    metadata.create_all(engine)


__all__ = ["metadata", "ledger_events", "fx_ledger_events", "create_schema"]
