"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os
from pathlib import Path

import dotenv

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger engine and its adapters.

    Attributes:
        db_url: SQLAlchemy URL of the ledger database.
        local_currency: Code of the primary ledger currency.
        fx_currency: Code of the foreign wallet currency.
        opening_balance: Balance before the earliest recorded event.
        allow_fx_overdraft: Whether a Spend may exceed the FX balance.
        account_holder: Name printed on statements.
        export_dir: Directory used by the file export sink.
    """

    db_url: str | None = None
    local_currency: str = "NPR"
    fx_currency: str = "USD"
    opening_balance: Decimal = Decimal("0")
    allow_fx_overdraft: bool = True
    account_holder: str = "Main Account"
    export_dir: Path | None = None

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Values from a local ``.env`` file are loaded first and never
        override variables already set.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        raw_export_dir = os.getenv("LEDGER_EXPORT_DIR")
        export_dir = (
            Path(raw_export_dir).expanduser().resolve()
            if raw_export_dir
            else get_project_root() / "exports"
        )
        return cls(
            db_url=os.getenv("LEDGER_DB_URL") or None,
            local_currency=os.getenv("LEDGER_LOCAL_CURRENCY", "NPR")
            .strip()
            .upper(),
            fx_currency=os.getenv("LEDGER_FX_CURRENCY", "USD").strip().upper(),
            opening_balance=cls._parse_decimal(
                os.getenv("LEDGER_OPENING_BALANCE"),
                logger=logger,
            ),
            allow_fx_overdraft=cls._parse_bool(
                os.getenv("LEDGER_ALLOW_FX_OVERDRAFT"),
                default=True,
                logger=logger,
            ),
            account_holder=os.getenv(
                "LEDGER_ACCOUNT_HOLDER", "Main Account"
            ).strip()
            or "Main Account",
            export_dir=export_dir,
        )

    @staticmethod
    def _parse_decimal(raw_value: str | None, logger) -> Decimal:
        """Parse the opening balance, falling back to zero.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            Decimal: Parsed value, or 0 when missing or invalid.
        """
        if not raw_value:
            return Decimal("0")
        try:
            value = Decimal(raw_value.strip())
        except InvalidOperation:
            logger.warning(
                f"Invalid LEDGER_OPENING_BALANCE '{raw_value}'. Using 0."
            )
            return Decimal("0")
        if not value.is_finite():
            logger.warning(
                f"Invalid LEDGER_OPENING_BALANCE '{raw_value}'. Using 0."
            )
            return Decimal("0")
        return value

    @staticmethod
    def _parse_bool(raw_value: str | None, default: bool, logger) -> bool:
        if raw_value is None or not raw_value.strip():
            return default
        cleaned = raw_value.strip().lower()
        if cleaned in _TRUE_VALUES:
            return True
        if cleaned in _FALSE_VALUES:
            return False
        logger.warning(
            f"Invalid boolean value '{raw_value}'. Using {default}."
        )
        return default


__all__ = ["LedgerSettings"]
