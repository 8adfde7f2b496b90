"""Use case to list the caller's accounts."""

from finledger.application.ports.collaborators import (
    CallerContext,
    IdentityResolverPort,
)
from finledger.application.ports.ledger_store import (
    LedgerStoreError,
    LedgerStorePort,
)
from finledger.domain.models import Account
from finledger.infrastructure.logging.logger import get_app_logger


class GetAccountsUseCase:
    """Fetch the caller's accounts, newest first."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        identity_resolver: IdentityResolverPort,
        logger=None,
    ) -> None:
        """Initialize the use case with its required dependencies."""
        self._ledger_store = ledger_store
        self._identity_resolver = identity_resolver
        self._logger = logger or get_app_logger()

    def execute(self, caller: CallerContext) -> list[Account]:
        """Return the caller's accounts; an empty list when there are none."""
        resolution = self._identity_resolver.resolve(caller.credential)
        if not resolution.resolved:
            return []
        try:
            accounts = self._ledger_store.fetch_accounts(resolution.user_id)
        except LedgerStoreError as exc:
            self._logger.error(f"Error fetching accounts: {exc}")
            return []
        self._logger.info(
            f"Fetched {len(accounts)} accounts for {resolution.user_id}"
        )
        return accounts


__all__ = ["GetAccountsUseCase"]
