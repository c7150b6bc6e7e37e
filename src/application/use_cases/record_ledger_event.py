"""Use cases to record and delete local-currency ledger events."""

from datetime import date, datetime

from src.application.ports.transaction_store import TransactionStorePort
from src.domain.exceptions import NotFoundError, ValidationError
from src.domain.models.ledger import LedgerEvent
from src.domain.services.validation import validate_ledger_draft
from src.infrastructure.logging.logger import get_app_logger


class RecordLedgerEventUseCase:
    """Validate user input and store a new ledger event."""

    def __init__(
        self,
        transaction_store: TransactionStorePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_store: Port persisting ledger events.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transaction_store = transaction_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        *,
        kind,
        amount,
        title: str | None,
        occurred_at: datetime | date | str | None = None,
        category: str | None = None,
        description: str | None = None,
        logged_by: str | None = None,
    ) -> LedgerEvent:
        """Record one event.

        Returns:
            LedgerEvent: The stored event with its id.

        Raises:
            ValidationError: If the input is malformed. Nothing is stored.
        """
        draft = validate_ledger_draft(
            kind=kind,
            amount=amount,
            title=title,
            occurred_at=occurred_at,
            category=category,
            description=description,
            logged_by=logged_by,
        )
        event = self._transaction_store.create(draft)
        self._logger.info(
            f"Recorded {event.kind.value} {event.id}: amount={event.amount}, "
            f"date={event.occurred_at.date()}"
        )
        return event


class DeleteLedgerEventUseCase:
    """Delete a ledger event by id."""

    def __init__(
        self,
        transaction_store: TransactionStorePort,
        logger=None,
    ) -> None:
        self._transaction_store = transaction_store
        self._logger = logger or get_app_logger()

    def execute(self, event_id: str, missing_ok: bool = False) -> bool:
        """Delete the event.

        Args:
            event_id: Identifier of the event to delete.
            missing_ok: Treat an unknown id as a successful no-op.

        Returns:
            bool: True when a record was deleted.

        Raises:
            ValidationError: If no id is given.
            NotFoundError: If the id is unknown and ``missing_ok`` is False.
        """
        if not event_id:
            raise ValidationError("ID required", field="id")
        deleted = self._transaction_store.delete_by_id(event_id)
        if not deleted:
            if not missing_ok:
                raise NotFoundError("Transaction", event_id)
            self._logger.warning(f"Transaction {event_id} already absent")
            return False
        self._logger.info(f"Deleted transaction {event_id}")
        return True


__all__ = ["RecordLedgerEventUseCase", "DeleteLedgerEventUseCase"]
