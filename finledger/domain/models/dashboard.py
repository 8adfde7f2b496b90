"""Domain model for the dashboard snapshot."""

from dataclasses import dataclass, field

from .accounts import Account
from .budgets import BudgetStatus
from .transactions import Transaction


@dataclass(frozen=True)
class DashboardView:
    """Accounts, recent activity and the default account's budget."""

    accounts: list[Account] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
    budget_status: BudgetStatus | None = None

    @property
    def default_account(self) -> Account | None:
        """Return the account flagged default, if any."""
        return next(
            (account for account in self.accounts if account.is_default),
            None,
        )


__all__ = ["DashboardView"]
