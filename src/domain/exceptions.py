"""Typed errors raised by the ledger engine.

Every error carries a machine-readable ``code`` so adapters can map it to a
user-facing message (or an HTTP-like status) without parsing the text.
"""


class LedgerError(Exception):
    """Base class for ledger errors."""

    code: str = "LEDGER_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(LedgerError):
    """Malformed input: missing amount, invalid period, bad kind."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class EmptyPeriodError(LedgerError):
    """A statement was requested for a period without events."""

    code = "EMPTY_PERIOD"

    def __init__(self, period_label: str) -> None:
        super().__init__(f"No transactions found for {period_label}")
        self.period_label = period_label


class NotFoundError(LedgerError):
    """A record id does not exist in the store."""

    code = "NOT_FOUND"

    def __init__(self, record_type: str, record_id: str) -> None:
        super().__init__(f"{record_type} not found: {record_id}")
        self.record_type = record_type
        self.record_id = record_id


__all__ = [
    "LedgerError",
    "ValidationError",
    "EmptyPeriodError",
    "NotFoundError",
]
