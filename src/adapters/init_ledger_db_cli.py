"""CLI to check the ledger database connection and create its tables.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer, runs a basic health check,
and creates the ledger tables when they are missing.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.tables import create_schema


def main() -> None:
    """Check connectivity and create the ledger schema."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_ledger_engine()
    logger.info(f"Ledger DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    create_schema(engine)
    logger.info("Ledger tables are ready.")


if __name__ == "__main__":  # pragma: no cover
    main()
