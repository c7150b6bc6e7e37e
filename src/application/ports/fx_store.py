"""Port for the foreign-currency wallet store."""

from typing import Protocol

from src.domain.models.ledger import FxLedgerEvent, FxLedgerEventDraft


class FxStorePort(Protocol):
    """Port exposing CRUD access to FX wallet events."""

    def list_all(self) -> list[FxLedgerEvent]:
        """Return every surviving FX event, in no particular order."""

    def create(self, draft: FxLedgerEventDraft) -> FxLedgerEvent:
        """Persist a new FX event and return it with its assigned id."""

    def delete_by_id(self, event_id: str) -> bool:
        """Delete an FX event. Return False when the id does not exist."""


__all__ = ["FxStorePort"]
