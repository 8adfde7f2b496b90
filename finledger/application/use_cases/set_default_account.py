"""Use case to switch the caller's default account."""

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
    HOME_PATH,
    SET_DEFAULT_FAILED,
    account_path,
)
from finledger.application.use_cases.ledger_utils import (
    identity_failure,
    notify_views,
)
from finledger.domain.models import ErrorKind, OperationResult
from finledger.infrastructure.logging.logger import get_app_logger


class SetDefaultAccountUseCase:
    """Make one owned account the single default account."""

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
        """Switch the default account.

        The ownership check, the clearing of the old default and the
        flagging of the new one happen in the same atomic unit.

        Args:
            caller: Explicit caller identity.
            account_id: Account that becomes the default.

        Returns:
            OperationResult: The updated Account, or NOT_FOUND when the
            account does not belong to the caller.
        """
        resolution = self._identity_resolver.resolve(caller.credential)
        if not resolution.resolved:
            return identity_failure(resolution)
        owner_id = resolution.user_id

        try:
            with self._ledger_store.atomic(owner_id) as unit:
                if unit.fetch_account(account_id) is None:
                    return OperationResult.failure(
                        ErrorKind.NOT_FOUND,
                        ACCOUNT_NOT_FOUND_MESSAGE,
                    )
                unit.clear_default_accounts()
                account = unit.mark_default(account_id)
                if account is None:
                    raise LedgerStoreError(
                        f"Account {account_id} vanished while switching default"
                    )
        except LedgerStoreError as exc:
            self._logger.error(f"Error updating default account: {exc}")
            return OperationResult.failure(
                ErrorKind.STORE_FAILURE,
                SET_DEFAULT_FAILED,
            )

        self._logger.info(f"Default account of {owner_id} is now {account_id}")
        notify_views(
            self._view_invalidator,
            [HOME_PATH, account_path(account_id)],
            self._logger,
        )
        return OperationResult.ok(account)


__all__ = ["SetDefaultAccountUseCase"]
