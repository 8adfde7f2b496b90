"""CLI adapter to create the ledger tables in the configured database."""

from finledger.infrastructure.db import (
    SqlAlchemyDatabaseEngineAdapter,
    dispose_ledger_engine,
)
from finledger.infrastructure.logging.logger import get_app_logger
from finledger.infrastructure.schema import create_ledger_schema


def main() -> None:
    """Create the accounts, transactions and budgets tables."""
    logger = get_app_logger()
    adapter = SqlAlchemyDatabaseEngineAdapter()
    try:
        engine = adapter.get_ledger_engine()
        create_ledger_schema(engine)
        logger.info(f"Ledger schema ready on {engine.url}")
    finally:
        dispose_ledger_engine()
    print("Ledger schema created.")


if __name__ == "__main__":  # pragma: no cover
    main()
