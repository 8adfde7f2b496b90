"""Domain package for ledger rules and core models."""

from .constants import (
    ACCOUNT_KINDS,
    DEFAULT_TRANSACTION_STATUS,
    TRANSACTION_STATUSES,
)
from .models import (
    Account,
    AccountWithTransactions,
    BalanceRepair,
    Budget,
    BudgetStatus,
    DashboardView,
    ErrorKind,
    NewAccount,
    NewTransaction,
    OperationResult,
    Transaction,
    TransactionKind,
)
from .policies import resolve_default_flag
from .services import (
    compute_ledger_balance,
    compute_reversal_deltas,
    month_bounds,
    signed_amount,
)

__all__ = [
    "ACCOUNT_KINDS",
    "DEFAULT_TRANSACTION_STATUS",
    "TRANSACTION_STATUSES",
    "Account",
    "AccountWithTransactions",
    "BalanceRepair",
    "Budget",
    "BudgetStatus",
    "DashboardView",
    "ErrorKind",
    "NewAccount",
    "NewTransaction",
    "OperationResult",
    "Transaction",
    "TransactionKind",
    "resolve_default_flag",
    "compute_ledger_balance",
    "compute_reversal_deltas",
    "month_bounds",
    "signed_amount",
]
