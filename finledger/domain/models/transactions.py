"""Domain models for ledger transactions."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TransactionKind(str, Enum):
    """Direction of a transaction relative to its account."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


@dataclass(frozen=True)
class Transaction:
    """Immutable ledger entry.

    Attributes:
        amount: Unsigned magnitude; the sign is derived from ``kind``.
    """

    id: str
    account_id: str
    user_id: str
    kind: TransactionKind
    amount: Decimal
    date: datetime
    category: str
    status: str
    description: str | None = None


@dataclass(frozen=True)
class NewTransaction:
    """Validated input for recording a transaction."""

    account_id: str
    kind: TransactionKind
    amount: Decimal
    date: datetime
    category: str
    status: str
    description: str | None = None


__all__ = ["TransactionKind", "Transaction", "NewTransaction"]
