"""Table definitions for the ledger store.

``accounts.balance`` is a cached aggregate of ``transactions``; the partial
unique index lets the database itself reject a second default account for
the same user.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    MetaData,
    Numeric,
    String,
    Table,
)
from sqlalchemy.engine import Engine

AMOUNT_TYPE = Numeric(18, 2)

metadata = MetaData()

accounts_table = Table(
    "accounts",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("user_id", String(64), nullable=False, index=True),
    Column("name", String(255), nullable=False),
    Column("kind", String(16), nullable=False),
    Column("balance", AMOUNT_TYPE, nullable=False),
    Column("opening_balance", AMOUNT_TYPE, nullable=False),
    Column("is_default", Boolean, nullable=False, default=False),
    Column("created_at", DateTime, nullable=False),
    Column("updated_at", DateTime, nullable=False),
)

Index(
    "uq_accounts_one_default_per_user",
    accounts_table.c.user_id,
    unique=True,
    postgresql_where=accounts_table.c.is_default,
    sqlite_where=accounts_table.c.is_default,
)

transactions_table = Table(
    "transactions",
    metadata,
    Column("id", String(36), primary_key=True),
    Column(
        "account_id",
        String(36),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", String(64), nullable=False),
    Column("kind", String(16), nullable=False),
    Column("amount", AMOUNT_TYPE, nullable=False),
    Column("description", String(255), nullable=True),
    Column("date", DateTime, nullable=False),
    Column("category", String(64), nullable=False),
    Column("status", String(16), nullable=False),
    Column("created_at", DateTime, nullable=False),
)

Index(
    "ix_transactions_user_date",
    transactions_table.c.user_id,
    transactions_table.c.date,
)
Index(
    "ix_transactions_account_date",
    transactions_table.c.account_id,
    transactions_table.c.date,
)

budgets_table = Table(
    "budgets",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("user_id", String(64), nullable=False, unique=True),
    Column("amount", AMOUNT_TYPE, nullable=False),
    Column("updated_at", DateTime, nullable=False),
)


def create_ledger_schema(engine: Engine) -> None:
    """Create the ledger tables and indexes when they do not exist.

    Args:
        engine: SQLAlchemy engine connected to the ledger database.
    """
    metadata.create_all(engine)


__all__ = [
    "AMOUNT_TYPE",
    "metadata",
    "accounts_table",
    "transactions_table",
    "budgets_table",
    "create_ledger_schema",
]
