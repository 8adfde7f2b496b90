"""Use case to repair a drifted cached balance.

The cached ``balance`` is rebuilt from the opening balance and the full
transaction log inside one atomic unit. This is a maintenance path, not
part of the regular write flow.
"""

from finledger.application.ports.collaborators import (
    CallerContext,
    IdentityResolverPort,
    ViewInvalidatorPort,
)
from finledger.application.ports.ledger_store import (
    LedgerStoreError,
    LedgerStorePort,
)
from finledger.application.use_cases.constants import (
    ACCOUNT_NOT_FOUND_MESSAGE,
    DASHBOARD_PATH,
    RECOMPUTE_BALANCE_FAILED,
    account_path,
)
from finledger.application.use_cases.ledger_utils import (
    identity_failure,
    notify_views,
)
from finledger.domain.models import BalanceRepair, ErrorKind, OperationResult
from finledger.domain.services import compute_ledger_balance
from finledger.infrastructure.logging.logger import get_app_logger


class RecomputeBalanceUseCase:
    """Recompute one account balance from its transaction log."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        identity_resolver: IdentityResolverPort,
        view_invalidator: ViewInvalidatorPort | None = None,
        logger=None,
    ) -> None:
        self._ledger_store = ledger_store
        self._identity_resolver = identity_resolver
        self._view_invalidator = view_invalidator
        self._logger = logger or get_app_logger()

    def execute(self, caller: CallerContext, account_id: str) -> OperationResult:
        """Rebuild the cached balance of an owned account.

        Returns:
            OperationResult: A BalanceRepair describing the correction.
        """
        resolution = self._identity_resolver.resolve(caller.credential)
        if not resolution.resolved:
            return identity_failure(resolution)
        owner_id = resolution.user_id

        try:
            with self._ledger_store.atomic(owner_id) as unit:
                account = unit.fetch_account(account_id)
                if account is None:
                    return OperationResult.failure(
                        ErrorKind.NOT_FOUND,
                        ACCOUNT_NOT_FOUND_MESSAGE,
                    )
                expected = compute_ledger_balance(
                    account.opening_balance,
                    unit.fetch_account_transactions(account_id),
                )
                repaired = account
                if expected != account.balance:
                    repaired = unit.set_balance(account_id, expected)
        except LedgerStoreError as exc:
            self._logger.error(f"Error recomputing balance: {exc}")
            return OperationResult.failure(
                ErrorKind.STORE_FAILURE,
                RECOMPUTE_BALANCE_FAILED,
            )

        repair = BalanceRepair(account=repaired, previous_balance=account.balance)
        if repair.drift:
            self._logger.warning(
                f"Balance drift of {repair.drift} repaired on account "
                f"{account_id}"
            )
            notify_views(
                self._view_invalidator,
                [DASHBOARD_PATH, account_path(account_id)],
                self._logger,
            )
        return OperationResult.ok(repair)


__all__ = ["RecomputeBalanceUseCase"]
