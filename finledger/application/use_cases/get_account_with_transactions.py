"""Use case composing an account with its transaction history."""

from finledger.application.ports.collaborators import (
    CallerContext,
    IdentityResolverPort,
)
from finledger.application.ports.ledger_store import (
    LedgerStoreError,
    LedgerStorePort,
)
from finledger.domain.models import AccountWithTransactions
from finledger.infrastructure.logging.logger import get_app_logger


class GetAccountWithTransactionsUseCase:
    """Read-only view of one account scoped to its owner.

    A missing account and another user's account both yield None, so the
    existence of foreign accounts is never observable.
    """

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        identity_resolver: IdentityResolverPort,
        logger=None,
    ) -> None:
        self._ledger_store = ledger_store
        self._identity_resolver = identity_resolver
        self._logger = logger or get_app_logger()

    def execute(
        self,
        caller: CallerContext,
        account_id: str,
    ) -> AccountWithTransactions | None:
        """Return the account with its transactions, newest first.

        Args:
            caller: Explicit caller identity.
            account_id: Account to display.

        Returns:
            AccountWithTransactions | None: The view, or None when the caller
            cannot see the account.
        """
        resolution = self._identity_resolver.resolve(caller.credential)
        if not resolution.resolved:
            return None
        try:
            return self._ledger_store.fetch_account_with_transactions(
                resolution.user_id,
                account_id,
            )
        except LedgerStoreError as exc:
            self._logger.error(
                f"Error fetching account with transactions: {exc}"
            )
            return None


__all__ = ["GetAccountWithTransactionsUseCase"]
