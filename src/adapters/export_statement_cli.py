"""CLI adapter to export a period statement to the export directory.

The period is read from environment variables:

* ``STATEMENT_MODE``: ``monthly`` (default) or ``yearly``;
* ``STATEMENT_YEAR``: calendar year, defaults to the current UTC year;
* ``STATEMENT_MONTH``: zero-based month for monthly statements, defaults to
  the current UTC month.
"""

import os

from src.domain.exceptions import LedgerError
from src.infrastructure.container import build_export_statement
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings
from src.utils.datetime_utils import utc_now


def main() -> None:
    """Export the requested statement and print where it was written."""
    logger = get_app_logger()
    settings = LedgerSettings.from_env()
    today = utc_now()

    mode = os.getenv("STATEMENT_MODE", "monthly")
    year = os.getenv("STATEMENT_YEAR") or str(today.year)
    month = os.getenv("STATEMENT_MONTH")
    if month is None and mode.strip().lower() == "monthly":
        month = str(today.month - 1)

    use_case = build_export_statement(settings=settings)
    try:
        location = use_case.execute(
            mode,
            year,
            month=month,
            account_holder=settings.account_holder,
        )
    except LedgerError as exc:
        logger.warning(f"Statement not exported: {exc.message}")
        print(f"Statement not exported: {exc.message}")
        return

    print(f"Statement written to {location}")


if __name__ == "__main__":  # pragma: no cover
    main()
