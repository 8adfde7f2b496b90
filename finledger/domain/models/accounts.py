"""Domain models for ledger accounts."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from .transactions import Transaction


@dataclass(frozen=True)
class Account:
    """Account with its cached balance.

    Attributes:
        balance: Materialized ``opening_balance`` plus the signed sum of the
            account's transactions.
        opening_balance: Balance supplied when the account was created.
        transaction_count: Number of transactions referencing the account.
    """

    id: str
    user_id: str
    name: str
    kind: str
    balance: Decimal
    is_default: bool
    created_at: datetime
    opening_balance: Decimal = Decimal("0")
    transaction_count: int = 0


@dataclass(frozen=True)
class NewAccount:
    """Validated input for creating an account."""

    name: str
    kind: str
    balance: Decimal
    is_default: bool


@dataclass(frozen=True)
class AccountWithTransactions:
    """Read-only view of an account and its history, newest first."""

    account: Account
    transactions: list[Transaction] = field(default_factory=list)

    @property
    def transaction_count(self) -> int:
        """Return how many transactions the view holds."""
        return len(self.transactions)


@dataclass(frozen=True)
class BalanceRepair:
    """Outcome of recomputing an account balance from its transactions."""

    account: Account
    previous_balance: Decimal

    @property
    def drift(self) -> Decimal:
        """Return the correction that was applied to the cached balance."""
        return self.account.balance - self.previous_balance


__all__ = [
    "Account",
    "NewAccount",
    "AccountWithTransactions",
    "BalanceRepair",
]
