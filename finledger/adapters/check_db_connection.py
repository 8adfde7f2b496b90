"""Simple CLI to validate the ledger database connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer and runs a basic health
check against the ledger database.
"""

from finledger.infrastructure.db import (
    SqlAlchemyDatabaseEngineAdapter,
    dispose_ledger_engine,
)
from finledger.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a basic connectivity check against the ledger database."""
    adapter = SqlAlchemyDatabaseEngineAdapter()
    logger = get_app_logger()

    try:
        ledger_engine = adapter.get_ledger_engine()
        logger.info(f"Ledger DB: {ledger_engine.url}")
        with ledger_engine.connect() as conn:
            conn.exec_driver_sql("SELECT 1")
    finally:
        dispose_ledger_engine()

    logger.info("Ledger connection is working.")


if __name__ == "__main__":  # pragma: no cover
    main()
