"""Use case to list the caller's transactions."""

from finledger.application.ports.collaborators import (
    CallerContext,
    IdentityResolverPort,
)
from finledger.application.ports.ledger_store import (
    LedgerStoreError,
    LedgerStorePort,
)
from finledger.domain.models import Transaction
from finledger.infrastructure.logging.logger import get_app_logger


class GetTransactionsUseCase:
    """Fetch every transaction of the caller, most recent date first."""

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

    def execute(self, caller: CallerContext) -> list[Transaction]:
        resolution = self._identity_resolver.resolve(caller.credential)
        if not resolution.resolved:
            return []
        try:
            return self._ledger_store.fetch_transactions(resolution.user_id)
        except LedgerStoreError as exc:
            self._logger.error(f"Error fetching transactions: {exc}")
            return []


__all__ = ["GetTransactionsUseCase"]
