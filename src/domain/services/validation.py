"""Domain validation helpers."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from src.domain.constants import (
    AMOUNT_PLACES,
    DEFAULT_CATEGORY,
    DEFAULT_COMPANY_NAME,
    RATE_PLACES,
)
from src.domain.exceptions import ValidationError
from src.domain.models.ledger import (
    FxEventKind,
    FxLedgerEventDraft,
    LedgerEventDraft,
    LedgerEventKind,
)
from src.domain.services.fx import compute_local_equivalent
from src.utils.datetime_utils import ensure_utc, utc_now


def parse_amount(
    value,
    field: str = "amount",
    places: int = AMOUNT_PLACES,
) -> Decimal:
    """Parse a non-negative decimal amount.

    Args:
        value: Raw value from a form, a query string, or a store row.
        field: Field name reported in the error.
        places: Maximum number of decimal places the store keeps.

    Returns:
        Decimal: The parsed amount.

    Raises:
        ValidationError: If the value is missing, malformed, negative, or has
            more decimal places than ``places``.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field} is required.", field=field)
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be numeric: {value!r}", field=field)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(
            f"{field} must be numeric: {value!r}", field=field
        ) from exc
    if not amount.is_finite():
        raise ValidationError(f"{field} must be finite: {value!r}", field=field)
    if amount < 0:
        raise ValidationError(
            f"{field} must not be negative: {amount}", field=field
        )
    if amount.normalize().as_tuple().exponent < -places:
        raise ValidationError(
            f"{field} supports at most {places} decimal places: {amount}",
            field=field,
        )
    return amount


def parse_ledger_kind(value) -> LedgerEventKind:
    """Parse a ledger event kind from its display value."""
    try:
        return LedgerEventKind(value)
    except ValueError as exc:
        raise ValidationError(
            f"Unknown transaction type: {value!r}", field="kind"
        ) from exc


def parse_fx_kind(value) -> FxEventKind:
    """Parse an FX event kind, defaulting to Spend like the entry form."""
    if value is None or value == "":
        return FxEventKind.SPEND
    try:
        return FxEventKind(value)
    except ValueError as exc:
        raise ValidationError(
            f"Unknown FX record type: {value!r}", field="kind"
        ) from exc


def _parse_moment(value: datetime | date | str | None) -> datetime:
    if value is None or value == "":
        return utc_now()
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise ValidationError(
                f"Invalid date '{value}'. Expected ISO format.",
                field="occurred_at",
            ) from exc
    return ensure_utc(value)


def validate_ledger_draft(
    *,
    kind,
    amount,
    title: str | None,
    occurred_at: datetime | date | str | None = None,
    category: str | None = None,
    description: str | None = None,
    logged_by: str | None = None,
) -> LedgerEventDraft:
    """Validate raw ledger input and build a draft.

    Raises:
        ValidationError: If a required field is missing or malformed.
    """
    cleaned_title = (title or "").strip()
    if not cleaned_title:
        raise ValidationError(
            "Please provide a title for this transaction.", field="title"
        )
    return LedgerEventDraft(
        kind=parse_ledger_kind(kind),
        amount=parse_amount(amount),
        occurred_at=_parse_moment(occurred_at),
        title=cleaned_title,
        category=(category or "").strip() or DEFAULT_CATEGORY,
        description=(description or "").strip(),
        logged_by=logged_by,
    )


def validate_fx_draft(
    *,
    kind,
    amount,
    exchange_rate,
    occurred_at: datetime | date | str | None = None,
    company_name: str | None = None,
    platform: str | None = None,
    campaign_name: str | None = None,
    added_by: str | None = None,
) -> FxLedgerEventDraft:
    """Validate raw FX input and build a draft.

    The local equivalent is computed here, once, from the rate entered by
    the user.

    Raises:
        ValidationError: If amount, exchange rate, or platform is missing
            or malformed.
    """
    parsed_kind = parse_fx_kind(kind)
    parsed_amount = parse_amount(amount)
    rate = parse_amount(
        exchange_rate if exchange_rate not in (None, "") else "0",
        field="exchange_rate",
        places=RATE_PLACES,
    )
    chosen_platform = (platform or "").strip()
    if not chosen_platform:
        raise ValidationError("platform is required.", field="platform")
    return FxLedgerEventDraft(
        kind=parsed_kind,
        amount=parsed_amount,
        exchange_rate=rate,
        local_equivalent=compute_local_equivalent(parsed_amount, rate),
        occurred_at=_parse_moment(occurred_at),
        company_name=(company_name or "").strip() or DEFAULT_COMPANY_NAME,
        platform=chosen_platform,
        campaign_name=(campaign_name or "").strip(),
        added_by=added_by,
    )


__all__ = [
    "parse_amount",
    "parse_ledger_kind",
    "parse_fx_kind",
    "validate_ledger_draft",
    "validate_fx_draft",
]
