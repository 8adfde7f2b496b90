"""Use case to open a new account for the caller.

The account insertion, the bootstrap rule for a user's first account and
the clearing of the previous default all run in one atomic unit, so no
concurrent reader ever sees zero or two default accounts.
"""

from finledger.application.ports.collaborators import (
    AbuseGuardPort,
    CallerContext,
    IdentityResolverPort,
    ViewInvalidatorPort,
)
from finledger.application.ports.ledger_store import (
    LedgerStoreError,
    LedgerStorePort,
)
from finledger.application.use_cases.constants import (
    CREATE_ACCOUNT_FAILED,
    DASHBOARD_PATH,
    INVALID_ACCOUNT_KIND_MESSAGE,
    INVALID_ACCOUNT_NAME_MESSAGE,
    INVALID_BALANCE_MESSAGE,
)
from finledger.application.use_cases.ledger_utils import (
    abuse_failure,
    identity_failure,
    notify_views,
)
from finledger.domain.constants import ACCOUNT_KINDS
from finledger.domain.models import ErrorKind, NewAccount, OperationResult
from finledger.domain.policies import resolve_default_flag
from finledger.infrastructure.logging.logger import get_app_logger
from finledger.utils.decimal_utils import parse_non_negative_decimal


class CreateAccountUseCase:
    """Create an account and keep exactly one default per user."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        identity_resolver: IdentityResolverPort,
        abuse_guard: AbuseGuardPort | None = None,
        view_invalidator: ViewInvalidatorPort | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port providing atomic ledger writes.
            identity_resolver: Port mapping credentials to user ids.
            abuse_guard: Optional pre-mutation rate-limit/bot check.
            view_invalidator: Optional refresh signal for downstream views.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_store = ledger_store
        self._identity_resolver = identity_resolver
        self._abuse_guard = abuse_guard
        self._view_invalidator = view_invalidator
        self._logger = logger or get_app_logger()

    def execute(
        self,
        caller: CallerContext,
        name: str,
        kind: str,
        balance: str,
        is_default: bool = False,
    ) -> OperationResult:
        """Create the account.

        Args:
            caller: Explicit caller identity.
            name: Display name of the account.
            kind: Account kind, one of ``ACCOUNT_KINDS``.
            balance: Opening balance as typed by the user.
            is_default: Whether the caller asks for the new default.

        Returns:
            OperationResult: The created Account on success.
        """
        resolution = self._identity_resolver.resolve(caller.credential)
        if not resolution.resolved:
            return identity_failure(resolution)
        owner_id = resolution.user_id

        if self._abuse_guard is not None:
            decision = self._abuse_guard.check(owner_id)
            if not decision.allowed:
                self._logger.warning(
                    f"Account creation denied for {owner_id}: {decision.reason}"
                )
                return abuse_failure(decision)

        validated = self._validate(name, kind, balance, is_default)
        if isinstance(validated, OperationResult):
            return validated

        try:
            with self._ledger_store.atomic(owner_id) as unit:
                make_default = resolve_default_flag(
                    unit.count_accounts(),
                    validated.is_default,
                )
                if make_default:
                    unit.clear_default_accounts()
                account = unit.insert_account(validated, is_default=make_default)
        except LedgerStoreError as exc:
            self._logger.error(f"Error creating account: {exc}")
            return OperationResult.failure(
                ErrorKind.STORE_FAILURE,
                CREATE_ACCOUNT_FAILED,
            )

        self._logger.info(
            f"Created account {account.id} for {owner_id} "
            f"(default={account.is_default})"
        )
        notify_views(self._view_invalidator, [DASHBOARD_PATH], self._logger)
        return OperationResult.ok(account)

    @staticmethod
    def _validate(
        name: str,
        kind: str,
        balance: str,
        is_default: bool,
    ) -> NewAccount | OperationResult:
        clean_name = name.strip() if isinstance(name, str) else ""
        if not clean_name:
            return OperationResult.failure(
                ErrorKind.VALIDATION_ERROR,
                INVALID_ACCOUNT_NAME_MESSAGE,
            )
        clean_kind = kind.strip().upper() if isinstance(kind, str) else ""
        if clean_kind not in ACCOUNT_KINDS:
            return OperationResult.failure(
                ErrorKind.VALIDATION_ERROR,
                INVALID_ACCOUNT_KIND_MESSAGE,
            )
        amount = parse_non_negative_decimal(balance)
        if amount is None:
            return OperationResult.failure(
                ErrorKind.VALIDATION_ERROR,
                INVALID_BALANCE_MESSAGE,
            )
        return NewAccount(
            name=clean_name,
            kind=clean_kind,
            balance=amount,
            is_default=bool(is_default),
        )


__all__ = ["CreateAccountUseCase"]
