"""Port for the durable ledger: accounts, transactions and budgets.

Reads are owner-scoped and run outside any atomic unit. Every multi-row
mutation goes through ``atomic(owner_id)``, which yields a
``LedgerUnitPort`` whose primitives share one database transaction: either
all of them commit or none of them do.
"""

from contextlib import AbstractContextManager
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Protocol

from finledger.domain.models import (
    Account,
    AccountWithTransactions,
    Budget,
    NewAccount,
    NewTransaction,
    Transaction,
)


class LedgerStoreError(RuntimeError):
    """Raised when the underlying store aborts an operation."""


class LedgerUnitPort(Protocol):
    """Write primitives bound to one owner and one atomic unit."""

    def count_accounts(self) -> int:
        """Return how many accounts the owner has."""

    def fetch_account(self, account_id: str) -> Account | None:
        """Return the owner's account, or None when absent or foreign."""

    def clear_default_accounts(self) -> int:
        """Unset the default flag on every owner account flagged default."""

    def insert_account(self, account: NewAccount, is_default: bool) -> Account:
        """Insert a new account for the owner."""

    def mark_default(self, account_id: str) -> Account | None:
        """Flag an owner account as default and return it."""

    def fetch_transactions_by_ids(
        self,
        transaction_ids: Iterable[str],
    ) -> list[Transaction]:
        """Resolve ids to the owner's transactions, dropping the rest."""

    def fetch_account_transactions(self, account_id: str) -> list[Transaction]:
        """Return every transaction referencing an owner account."""

    def delete_transactions(self, transaction_ids: Iterable[str]) -> int:
        """Delete the owner's transactions with the given ids."""

    def increment_balance(self, account_id: str, delta: Decimal) -> None:
        """Apply ``balance += delta`` at the store level."""

    def insert_transaction(self, transaction: NewTransaction) -> Transaction:
        """Append a transaction row for the owner."""

    def set_balance(self, account_id: str, balance: Decimal) -> Account:
        """Overwrite the cached balance of an owner account."""


class LedgerStorePort(Protocol):
    """Port exposing owner-scoped reads and atomic write units."""

    def atomic(self, owner_id: str) -> AbstractContextManager[LedgerUnitPort]:
        """Open an atomic unit serialized against the owner's other writers."""

    def fetch_accounts(self, owner_id: str) -> list[Account]:
        """Return the owner's accounts, newest first."""

    def fetch_transactions(self, owner_id: str) -> list[Transaction]:
        """Return the owner's transactions, most recent date first."""

    def fetch_account_with_transactions(
        self,
        owner_id: str,
        account_id: str,
    ) -> AccountWithTransactions | None:
        """Return an owned account with its history, or None."""

    def fetch_budget(self, owner_id: str) -> Budget | None:
        """Return the owner's budget when one is configured."""

    def sum_expenses(
        self,
        owner_id: str,
        account_id: str,
        start: datetime,
        end: datetime,
    ) -> Decimal:
        """Sum EXPENSE amounts dated in ``[start, end)`` for an account."""


__all__ = ["LedgerStoreError", "LedgerUnitPort", "LedgerStorePort"]
