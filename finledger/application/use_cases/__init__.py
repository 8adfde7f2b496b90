"""Application use cases package."""

from .create_account import CreateAccountUseCase
from .delete_transactions import DeleteTransactionsUseCase
from .get_account_with_transactions import GetAccountWithTransactionsUseCase
from .get_accounts import GetAccountsUseCase
from .get_budget_status import GetBudgetStatusUseCase
from .get_dashboard import GetDashboardUseCase
from .get_transactions import GetTransactionsUseCase
from .recompute_balance import RecomputeBalanceUseCase
from .record_transaction import RecordTransactionUseCase
from .set_default_account import SetDefaultAccountUseCase

__all__ = [
    "CreateAccountUseCase",
    "DeleteTransactionsUseCase",
    "GetAccountWithTransactionsUseCase",
    "GetAccountsUseCase",
    "GetBudgetStatusUseCase",
    "GetDashboardUseCase",
    "GetTransactionsUseCase",
    "RecomputeBalanceUseCase",
    "RecordTransactionUseCase",
    "SetDefaultAccountUseCase",
]
