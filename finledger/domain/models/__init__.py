"""Domain models package."""

from .accounts import (
    Account,
    AccountWithTransactions,
    BalanceRepair,
    NewAccount,
)
from .budgets import Budget, BudgetStatus
from .dashboard import DashboardView
from .results import ErrorKind, OperationResult
from .transactions import NewTransaction, Transaction, TransactionKind

__all__ = [
    "Account",
    "AccountWithTransactions",
    "BalanceRepair",
    "NewAccount",
    "Budget",
    "BudgetStatus",
    "DashboardView",
    "ErrorKind",
    "OperationResult",
    "NewTransaction",
    "Transaction",
    "TransactionKind",
]
