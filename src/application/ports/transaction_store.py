"""Port for the local-currency transaction store."""

from typing import Protocol

from src.domain.models.ledger import LedgerEvent, LedgerEventDraft


class TransactionStorePort(Protocol):
    """Port exposing CRUD access to ledger events.

    Records are created and deleted, never updated in place.
    """

    def list_all(self) -> list[LedgerEvent]:
        """Return every surviving ledger event, in no particular order."""

    def create(self, draft: LedgerEventDraft) -> LedgerEvent:
        """Persist a new event and return it with its assigned id."""

    def delete_by_id(self, event_id: str) -> bool:
        """Delete an event. Return False when the id does not exist."""


__all__ = ["TransactionStorePort"]
