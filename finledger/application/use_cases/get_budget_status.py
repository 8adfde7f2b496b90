"""Use case to compare the current month's expenses with the budget."""

from collections.abc import Callable
from datetime import datetime, timezone

from finledger.application.ports.collaborators import (
    CallerContext,
    IdentityResolverPort,
)
from finledger.application.ports.ledger_store import (
    LedgerStoreError,
    LedgerStorePort,
)
from finledger.domain.models import BudgetStatus
from finledger.domain.services import month_bounds
from finledger.infrastructure.logging.logger import get_app_logger


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class GetBudgetStatusUseCase:
    """Sum an account's expenses of the current calendar month."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        identity_resolver: IdentityResolverPort,
        clock: Callable[[], datetime] | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port providing ledger reads.
            identity_resolver: Port mapping credentials to user ids.
            clock: Optional source of the current naive UTC time.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_store = ledger_store
        self._identity_resolver = identity_resolver
        self._clock = clock or _utcnow
        self._logger = logger or get_app_logger()

    def execute(
        self,
        caller: CallerContext,
        account_id: str,
    ) -> BudgetStatus | None:
        """Return the budget limit and the month-to-date expenses.

        A missing budget is not an error: ``budget_amount`` is None and the
        expenses are still reported.

        Args:
            caller: Explicit caller identity.
            account_id: Account whose expenses are summed.

        Returns:
            BudgetStatus | None: Status, or None when the caller is unknown
            or the store is unavailable.
        """
        resolution = self._identity_resolver.resolve(caller.credential)
        if not resolution.resolved:
            return None
        owner_id = resolution.user_id
        start, end = month_bounds(self._clock().date())
        try:
            budget = self._ledger_store.fetch_budget(owner_id)
            expenses = self._ledger_store.sum_expenses(
                owner_id,
                account_id,
                start,
                end,
            )
        except LedgerStoreError as exc:
            self._logger.error(f"Error fetching budget status: {exc}")
            return None
        if budget is None:
            self._logger.info(f"No budget configured for {owner_id}")
        return BudgetStatus(
            budget_amount=budget.amount if budget is not None else None,
            current_expenses=expenses,
        )


__all__ = ["GetBudgetStatusUseCase"]
