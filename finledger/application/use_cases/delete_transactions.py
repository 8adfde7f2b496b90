"""Use case to delete transactions in bulk while reconciling balances.

Requested ids are resolved against the caller's own rows; ids that belong to
someone else or no longer exist are dropped. The deletion and the balance
corrections of every touched account share one atomic unit.
"""

from collections.abc import Iterable

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
    DASHBOARD_PATH,
    DELETE_TRANSACTIONS_FAILED,
    EMPTY_SELECTION_MESSAGE,
    account_path,
)
from finledger.application.use_cases.ledger_utils import (
    identity_failure,
    notify_views,
)
from finledger.domain.models import ErrorKind, OperationResult
from finledger.domain.services import compute_reversal_deltas
from finledger.infrastructure.logging.logger import get_app_logger


class DeleteTransactionsUseCase:
    """Delete the caller's transactions and undo their balance effect."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        identity_resolver: IdentityResolverPort,
        view_invalidator: ViewInvalidatorPort | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port providing atomic ledger writes.
            identity_resolver: Port mapping credentials to user ids.
            view_invalidator: Optional refresh signal for downstream views.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_store = ledger_store
        self._identity_resolver = identity_resolver
        self._view_invalidator = view_invalidator
        self._logger = logger or get_app_logger()

    def execute(
        self,
        caller: CallerContext,
        transaction_ids: Iterable[str],
    ) -> OperationResult:
        """Delete the selected transactions.

        Args:
            caller: Explicit caller identity.
            transaction_ids: Ids picked by the caller.

        Returns:
            OperationResult: Success, or EMPTY_SELECTION when no id resolves
            to one of the caller's transactions.
        """
        resolution = self._identity_resolver.resolve(caller.credential)
        if not resolution.resolved:
            return identity_failure(resolution)
        owner_id = resolution.user_id
        requested = list(dict.fromkeys(transaction_ids))

        try:
            with self._ledger_store.atomic(owner_id) as unit:
                transactions = unit.fetch_transactions_by_ids(requested)
                if not transactions:
                    self._logger.warning(
                        f"No deletable transactions among {len(requested)} "
                        f"ids for {owner_id}"
                    )
                    return OperationResult.failure(
                        ErrorKind.EMPTY_SELECTION,
                        EMPTY_SELECTION_MESSAGE,
                    )
                deltas = compute_reversal_deltas(transactions)
                deleted = unit.delete_transactions(
                    [transaction.id for transaction in transactions]
                )
                if deleted != len(transactions):
                    raise LedgerStoreError(
                        f"Expected to delete {len(transactions)} "
                        f"transactions, deleted {deleted}"
                    )
                for account_id, delta in deltas.items():
                    unit.increment_balance(account_id, delta)
        except LedgerStoreError as exc:
            self._logger.error(f"Error deleting transactions: {exc}")
            return OperationResult.failure(
                ErrorKind.STORE_FAILURE,
                DELETE_TRANSACTIONS_FAILED,
            )

        self._logger.info(
            f"Deleted {len(transactions)} transactions across "
            f"{len(deltas)} accounts for {owner_id}"
        )
        paths = [DASHBOARD_PATH]
        paths.extend(account_path(account_id) for account_id in deltas)
        notify_views(self._view_invalidator, paths, self._logger)
        return OperationResult.ok()


__all__ = ["DeleteTransactionsUseCase"]
