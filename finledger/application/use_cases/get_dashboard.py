"""Use case assembling the dashboard snapshot."""

from finledger.application.ports.collaborators import CallerContext
from finledger.application.use_cases.get_accounts import GetAccountsUseCase
from finledger.application.use_cases.get_budget_status import (
    GetBudgetStatusUseCase,
)
from finledger.application.use_cases.get_transactions import (
    GetTransactionsUseCase,
)
from finledger.domain.models import DashboardView


class GetDashboardUseCase:
    """Compose accounts, transactions and the default account budget."""

    def __init__(
        self,
        get_accounts: GetAccountsUseCase,
        get_transactions: GetTransactionsUseCase,
        get_budget_status: GetBudgetStatusUseCase,
    ) -> None:
        self._get_accounts = get_accounts
        self._get_transactions = get_transactions
        self._get_budget_status = get_budget_status

    def execute(self, caller: CallerContext) -> DashboardView:
        """Return the dashboard; the budget is skipped without a default."""
        accounts = self._get_accounts.execute(caller)
        transactions = self._get_transactions.execute(caller)
        view = DashboardView(accounts=accounts, transactions=transactions)
        default_account = view.default_account
        if default_account is None:
            return view
        return DashboardView(
            accounts=accounts,
            transactions=transactions,
            budget_status=self._get_budget_status.execute(
                caller,
                default_account.id,
            ),
        )


__all__ = ["GetDashboardUseCase"]
