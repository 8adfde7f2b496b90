"""SQLAlchemy-backed ledger store.

Reads open a short-lived connection. Writes go through ``atomic``, which
holds a per-owner lock and one ``engine.begin()`` transaction for the whole
unit, so the write primitives of ``SqlAlchemyLedgerUnit`` commit together or
not at all.
"""

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from decimal import Decimal
import functools
import threading
import uuid
import weakref

from sqlalchemy import delete, func, insert, select, text, update
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from finledger.application.ports.database import DatabaseEnginePort
from finledger.application.ports.ledger_store import (
    LedgerStoreError,
    LedgerStorePort,
    LedgerUnitPort,
)
from finledger.domain.models import (
    Account,
    AccountWithTransactions,
    Budget,
    NewAccount,
    NewTransaction,
    Transaction,
    TransactionKind,
)
from finledger.infrastructure.schema import (
    accounts_table,
    budgets_table,
    transactions_table,
)
from finledger.utils.decimal_utils import coerce_decimal

ADVISORY_LOCK_SQL = text("SELECT pg_advisory_xact_lock(hashtext(:owner_id))")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _new_id() -> str:
    return str(uuid.uuid4())


class _OwnerLocks:
    """Registry of in-process mutation locks keyed by owner id.

    Entries are weakly held: a lock disappears once no unit holds or waits
    on it, so the registry only tracks owners with writes in flight.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: weakref.WeakValueDictionary[str, threading.Lock] = (
            weakref.WeakValueDictionary()
        )

    def get(self, owner_id: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(owner_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[owner_id] = lock
            return lock

    def __len__(self) -> int:
        return len(self._locks)


_OWNER_LOCKS = _OwnerLocks()


def _translate_store_errors(method):
    """Re-raise SQLAlchemy errors as LedgerStoreError."""

    @functools.wraps(method)
    def wrapper(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except SQLAlchemyError as exc:
            raise LedgerStoreError(
                f"Ledger store failed in {method.__name__}: {exc}"
            ) from exc

    return wrapper


def _accounts_query():
    transaction_count = (
        select(func.count(transactions_table.c.id))
        .where(transactions_table.c.account_id == accounts_table.c.id)
        .scalar_subquery()
    )
    return select(
        accounts_table,
        transaction_count.label("transaction_count"),
    )


def _account_from_row(row) -> Account:
    return Account(
        id=row.id,
        user_id=row.user_id,
        name=row.name,
        kind=row.kind,
        balance=coerce_decimal(row.balance),
        is_default=bool(row.is_default),
        created_at=row.created_at,
        opening_balance=coerce_decimal(row.opening_balance),
        transaction_count=int(row.transaction_count or 0),
    )


def _transaction_from_row(row) -> Transaction:
    return Transaction(
        id=row.id,
        account_id=row.account_id,
        user_id=row.user_id,
        kind=TransactionKind(row.kind),
        amount=coerce_decimal(row.amount),
        date=row.date,
        category=row.category,
        status=row.status,
        description=row.description,
    )


def _newest_first(query):
    return query.order_by(
        transactions_table.c.date.desc(),
        transactions_table.c.created_at.desc(),
    )


class SqlAlchemyLedgerUnit(LedgerUnitPort):
    """Write primitives sharing one connection and one transaction."""

    def __init__(
        self,
        conn: Connection,
        owner_id: str,
        clock: Callable[[], datetime],
        id_factory: Callable[[], str],
    ) -> None:
        """Initialize the unit.

        Args:
            conn: Connection with an open transaction.
            owner_id: User every primitive is scoped to.
            clock: Source of naive UTC timestamps.
            id_factory: Source of new row ids.
        """
        self._conn = conn
        self._owner_id = owner_id
        self._clock = clock
        self._id_factory = id_factory

    def count_accounts(self) -> int:
        query = (
            select(func.count())
            .select_from(accounts_table)
            .where(accounts_table.c.user_id == self._owner_id)
        )
        return int(self._conn.execute(query).scalar_one())

    def fetch_account(self, account_id: str) -> Account | None:
        query = _accounts_query().where(
            accounts_table.c.id == account_id,
            accounts_table.c.user_id == self._owner_id,
        )
        row = self._conn.execute(query).first()
        if row is None:
            return None
        return _account_from_row(row)

    def clear_default_accounts(self) -> int:
        statement = (
            update(accounts_table)
            .where(
                accounts_table.c.user_id == self._owner_id,
                accounts_table.c.is_default.is_(True),
            )
            .values(is_default=False, updated_at=self._clock())
        )
        return self._conn.execute(statement).rowcount

    def insert_account(self, account: NewAccount, is_default: bool) -> Account:
        account_id = self._id_factory()
        now = self._clock()
        self._conn.execute(
            insert(accounts_table).values(
                id=account_id,
                user_id=self._owner_id,
                name=account.name,
                kind=account.kind,
                balance=account.balance,
                opening_balance=account.balance,
                is_default=is_default,
                created_at=now,
                updated_at=now,
            )
        )
        return Account(
            id=account_id,
            user_id=self._owner_id,
            name=account.name,
            kind=account.kind,
            balance=account.balance,
            is_default=is_default,
            created_at=now,
            opening_balance=account.balance,
        )

    def mark_default(self, account_id: str) -> Account | None:
        statement = (
            update(accounts_table)
            .where(
                accounts_table.c.id == account_id,
                accounts_table.c.user_id == self._owner_id,
            )
            .values(is_default=True, updated_at=self._clock())
        )
        if self._conn.execute(statement).rowcount == 0:
            return None
        return self.fetch_account(account_id)

    def fetch_transactions_by_ids(
        self,
        transaction_ids: Iterable[str],
    ) -> list[Transaction]:
        ids = list(dict.fromkeys(transaction_ids))
        if not ids:
            return []
        query = _newest_first(
            select(transactions_table).where(
                transactions_table.c.id.in_(ids),
                transactions_table.c.user_id == self._owner_id,
            )
        )
        rows = self._conn.execute(query).all()
        return [_transaction_from_row(row) for row in rows]

    def fetch_account_transactions(self, account_id: str) -> list[Transaction]:
        query = _newest_first(
            select(transactions_table).where(
                transactions_table.c.account_id == account_id,
                transactions_table.c.user_id == self._owner_id,
            )
        )
        rows = self._conn.execute(query).all()
        return [_transaction_from_row(row) for row in rows]

    def delete_transactions(self, transaction_ids: Iterable[str]) -> int:
        ids = list(dict.fromkeys(transaction_ids))
        if not ids:
            return 0
        statement = delete(transactions_table).where(
            transactions_table.c.id.in_(ids),
            transactions_table.c.user_id == self._owner_id,
        )
        return self._conn.execute(statement).rowcount

    def increment_balance(self, account_id: str, delta: Decimal) -> None:
        statement = (
            update(accounts_table)
            .where(
                accounts_table.c.id == account_id,
                accounts_table.c.user_id == self._owner_id,
            )
            .values(
                balance=accounts_table.c.balance + delta,
                updated_at=self._clock(),
            )
        )
        if self._conn.execute(statement).rowcount != 1:
            raise LedgerStoreError(
                f"Account {account_id} is missing for owner {self._owner_id}"
            )

    def insert_transaction(self, transaction: NewTransaction) -> Transaction:
        transaction_id = self._id_factory()
        self._conn.execute(
            insert(transactions_table).values(
                id=transaction_id,
                account_id=transaction.account_id,
                user_id=self._owner_id,
                kind=TransactionKind(transaction.kind).value,
                amount=transaction.amount,
                description=transaction.description,
                date=transaction.date,
                category=transaction.category,
                status=transaction.status,
                created_at=self._clock(),
            )
        )
        return Transaction(
            id=transaction_id,
            account_id=transaction.account_id,
            user_id=self._owner_id,
            kind=TransactionKind(transaction.kind),
            amount=transaction.amount,
            date=transaction.date,
            category=transaction.category,
            status=transaction.status,
            description=transaction.description,
        )

    def set_balance(self, account_id: str, balance: Decimal) -> Account:
        statement = (
            update(accounts_table)
            .where(
                accounts_table.c.id == account_id,
                accounts_table.c.user_id == self._owner_id,
            )
            .values(balance=balance, updated_at=self._clock())
        )
        if self._conn.execute(statement).rowcount != 1:
            raise LedgerStoreError(
                f"Account {account_id} is missing for owner {self._owner_id}"
            )
        account = self.fetch_account(account_id)
        if account is None:
            raise LedgerStoreError(
                f"Account {account_id} vanished after its balance was set"
            )
        return account


class SqlAlchemyLedgerStore(LedgerStorePort):
    """Ledger store backed by the SQLAlchemy ledger engine."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the ledger engine.
            clock: Optional source of naive UTC timestamps.
            id_factory: Optional source of new row ids.
        """
        self._db_port = db_port
        self._clock = clock or _utcnow
        self._id_factory = id_factory or _new_id

    @contextmanager
    def atomic(self, owner_id: str) -> Iterator[SqlAlchemyLedgerUnit]:
        """Open one transaction serialized against the owner's writers.

        Any exception raised inside the block rolls the whole unit back.
        The owner lock and the connection are released on every exit path.

        Args:
            owner_id: User whose rows the unit may touch.

        Yields:
            SqlAlchemyLedgerUnit: Write primitives bound to the transaction.

        Raises:
            LedgerStoreError: If the database rejects any statement.
        """
        engine = self._db_port.get_ledger_engine()
        with _OWNER_LOCKS.get(owner_id):
            try:
                with engine.begin() as conn:
                    self._lock_owner(conn, owner_id)
                    yield SqlAlchemyLedgerUnit(
                        conn,
                        owner_id,
                        clock=self._clock,
                        id_factory=self._id_factory,
                    )
            except SQLAlchemyError as exc:
                raise LedgerStoreError(
                    f"Atomic unit aborted for owner {owner_id}: {exc}"
                ) from exc

    @staticmethod
    def _lock_owner(conn: Connection, owner_id: str) -> None:
        # Other processes sharing a PostgreSQL database serialize here.
        if conn.dialect.name == "postgresql":
            conn.execute(ADVISORY_LOCK_SQL, {"owner_id": owner_id})

    @_translate_store_errors
    def fetch_accounts(self, owner_id: str) -> list[Account]:
        query = (
            _accounts_query()
            .where(accounts_table.c.user_id == owner_id)
            .order_by(
                accounts_table.c.created_at.desc(),
                accounts_table.c.id.desc(),
            )
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [_account_from_row(row) for row in rows]

    @_translate_store_errors
    def fetch_transactions(self, owner_id: str) -> list[Transaction]:
        query = _newest_first(
            select(transactions_table).where(
                transactions_table.c.user_id == owner_id
            )
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [_transaction_from_row(row) for row in rows]

    @_translate_store_errors
    def fetch_account_with_transactions(
        self,
        owner_id: str,
        account_id: str,
    ) -> AccountWithTransactions | None:
        account_query = _accounts_query().where(
            accounts_table.c.id == account_id,
            accounts_table.c.user_id == owner_id,
        )
        history_query = _newest_first(
            select(transactions_table).where(
                transactions_table.c.account_id == account_id,
                transactions_table.c.user_id == owner_id,
            )
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            account_row = conn.execute(account_query).first()
            if account_row is None:
                return None
            history_rows = conn.execute(history_query).all()
        return AccountWithTransactions(
            account=_account_from_row(account_row),
            transactions=[_transaction_from_row(row) for row in history_rows],
        )

    @_translate_store_errors
    def fetch_budget(self, owner_id: str) -> Budget | None:
        query = select(budgets_table).where(budgets_table.c.user_id == owner_id)
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(query).first()
        if row is None:
            return None
        return Budget(
            id=row.id,
            user_id=row.user_id,
            amount=coerce_decimal(row.amount),
        )

    @_translate_store_errors
    def sum_expenses(
        self,
        owner_id: str,
        account_id: str,
        start: datetime,
        end: datetime,
    ) -> Decimal:
        query = select(func.sum(transactions_table.c.amount)).where(
            transactions_table.c.user_id == owner_id,
            transactions_table.c.account_id == account_id,
            transactions_table.c.kind == TransactionKind.EXPENSE.value,
            transactions_table.c.date >= start,
            transactions_table.c.date < end,
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            total = conn.execute(query).scalar()
        return coerce_decimal(total)


__all__ = [
    "SqlAlchemyLedgerStore",
    "SqlAlchemyLedgerUnit",
    "ADVISORY_LOCK_SQL",
]
