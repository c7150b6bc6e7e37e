"""Use cases to record and delete FX wallet events."""

from datetime import date, datetime

from src.application.ports.fx_store import FxStorePort
from src.domain.constants import MANUAL_LOAD_COMPANY, MANUAL_LOAD_PLATFORM
from src.domain.exceptions import NotFoundError, ValidationError
from src.domain.models.ledger import FxEventKind, FxLedgerEvent
from src.domain.services.fx import check_overdraft
from src.domain.services.validation import parse_fx_kind, validate_fx_draft
from src.infrastructure.logging.logger import get_app_logger


class RecordFxEventUseCase:
    """Store a Load or Spend against the FX wallet."""

    def __init__(
        self,
        fx_store: FxStorePort,
        logger=None,
        allow_overdraft: bool = True,
    ) -> None:
        """Initialize the use case.

        Args:
            fx_store: Port persisting FX events.
            logger: Optional logger compatible with logging.Logger-like API.
            allow_overdraft: Whether a Spend may exceed the wallet balance.
        """
        self._fx_store = fx_store
        self._logger = logger or get_app_logger()
        self._allow_overdraft = allow_overdraft

    def execute(
        self,
        *,
        amount,
        exchange_rate,
        kind=FxEventKind.SPEND,
        occurred_at: datetime | date | str | None = None,
        company_name: str | None = None,
        platform: str | None = None,
        campaign_name: str | None = None,
        added_by: str | None = None,
    ) -> FxLedgerEvent:
        """Record one FX event.

        Loads are booked against the manual-entry company and platform
        whatever the form sent.

        Returns:
            FxLedgerEvent: The stored event with its fixed local equivalent.

        Raises:
            ValidationError: If the input is malformed, or the Spend would
                overdraw the wallet while overdraft is disabled.
        """
        parsed_kind = parse_fx_kind(kind)
        if parsed_kind == FxEventKind.LOAD:
            company_name = MANUAL_LOAD_COMPANY
            platform = MANUAL_LOAD_PLATFORM
        else:
            company_name = company_name or MANUAL_LOAD_COMPANY
            platform = platform or MANUAL_LOAD_PLATFORM
        draft = validate_fx_draft(
            kind=parsed_kind,
            amount=amount,
            exchange_rate=exchange_rate,
            occurred_at=occurred_at,
            company_name=company_name,
            platform=platform,
            campaign_name=campaign_name,
            added_by=added_by,
        )
        if not self._allow_overdraft:
            check_overdraft(self._fx_store.list_all(), draft, allow_overdraft=False)
        event = self._fx_store.create(draft)
        self._logger.info(
            f"Recorded FX {event.kind.value} {event.id}: amount={event.amount}, "
            f"rate={event.exchange_rate}, local={event.local_equivalent}"
        )
        return event


class DeleteFxEventUseCase:
    """Delete an FX event by id."""

    def __init__(self, fx_store: FxStorePort, logger=None) -> None:
        self._fx_store = fx_store
        self._logger = logger or get_app_logger()

    def execute(self, event_id: str, missing_ok: bool = False) -> bool:
        """Delete the event.

        Raises:
            ValidationError: If no id is given.
            NotFoundError: If the id is unknown and ``missing_ok`` is False.
        """
        if not event_id:
            raise ValidationError("ID required", field="id")
        deleted = self._fx_store.delete_by_id(event_id)
        if not deleted:
            if not missing_ok:
                raise NotFoundError("FX record", event_id)
            self._logger.warning(f"FX record {event_id} already absent")
            return False
        self._logger.info(f"Deleted FX record {event_id}")
        return True


__all__ = ["RecordFxEventUseCase", "DeleteFxEventUseCase"]
