"""Reporting-period parsing and filtering."""

from collections.abc import Iterable

from src.domain.constants import MAX_REPORT_YEAR, MIN_REPORT_YEAR
from src.domain.exceptions import ValidationError
from src.domain.models.ledger import (
    BalanceAnnotatedEvent,
    PeriodMode,
    PeriodSelector,
)


def _parse_int(value, field: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an integer.", field=field)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"{field} must be an integer: {value!r}", field=field
        ) from exc


def build_period_selector(mode, year, month=None) -> PeriodSelector:
    """Validate caller-supplied period parameters.

    Args:
        mode: ``monthly`` or ``yearly`` (case-insensitive) or a PeriodMode.
        year: Calendar year, as int or string.
        month: Zero-based month, required for monthly mode. Ignored for
            yearly mode.

    Returns:
        PeriodSelector: A selector safe to pass to ``filter_by_period``.

    Raises:
        ValidationError: If the mode is unknown, the year is outside the
            supported range, or the month is missing or out of [0, 11].
    """
    if mode is None or year is None or year == "":
        raise ValidationError("Report type and year are required.")
    try:
        parsed_mode = PeriodMode(str(getattr(mode, "value", mode)).lower())
    except ValueError as exc:
        raise ValidationError(
            f"Invalid report type: {mode!r}", field="mode"
        ) from exc
    parsed_year = _parse_int(year, "year")
    if not MIN_REPORT_YEAR <= parsed_year <= MAX_REPORT_YEAR:
        raise ValidationError(
            f"year must be between {MIN_REPORT_YEAR} and {MAX_REPORT_YEAR}: "
            f"{parsed_year}",
            field="year",
        )
    if parsed_mode == PeriodMode.YEARLY:
        return PeriodSelector(mode=parsed_mode, year=parsed_year)
    if month is None or month == "":
        raise ValidationError(
            "month is required for monthly reports.", field="month"
        )
    parsed_month = _parse_int(month, "month")
    if not 0 <= parsed_month <= 11:
        raise ValidationError(
            f"month must be between 0 and 11: {parsed_month}", field="month"
        )
    return PeriodSelector(
        mode=parsed_mode,
        year=parsed_year,
        month=parsed_month,
    )


def filter_by_period(
    events: Iterable[BalanceAnnotatedEvent],
    selector: PeriodSelector,
) -> list[BalanceAnnotatedEvent]:
    """Keep the events whose UTC date falls inside the selector window.

    The input order is preserved and running balances are not touched.
    """
    return [event for event in events if selector.contains(event.occurred_at)]


__all__ = ["build_period_selector", "filter_by_period"]
