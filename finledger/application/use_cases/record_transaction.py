"""Use case to append a transaction and move its account balance."""

from datetime import datetime

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
    INVALID_AMOUNT_MESSAGE,
    INVALID_CATEGORY_MESSAGE,
    INVALID_STATUS_MESSAGE,
    INVALID_TRANSACTION_KIND_MESSAGE,
    RECORD_TRANSACTION_FAILED,
    account_path,
)
from finledger.application.use_cases.ledger_utils import (
    identity_failure,
    notify_views,
)
from finledger.domain.constants import (
    DEFAULT_TRANSACTION_STATUS,
    TRANSACTION_STATUSES,
)
from finledger.domain.models import (
    ErrorKind,
    NewTransaction,
    OperationResult,
    TransactionKind,
)
from finledger.domain.services import signed_amount
from finledger.infrastructure.logging.logger import get_app_logger
from finledger.utils.decimal_utils import parse_non_negative_decimal


class RecordTransactionUseCase:
    """Record an INCOME or EXPENSE against one of the caller's accounts.

    The insertion and the balance increment share one atomic unit; INCOME
    raises the balance and EXPENSE lowers it.
    """

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

    def execute(
        self,
        caller: CallerContext,
        account_id: str,
        kind: str,
        amount: str,
        date: datetime,
        category: str,
        description: str | None = None,
        status: str = DEFAULT_TRANSACTION_STATUS,
    ) -> OperationResult:
        """Record the transaction.

        Args:
            caller: Explicit caller identity.
            account_id: Owned account the transaction belongs to.
            kind: ``INCOME`` or ``EXPENSE``.
            amount: Unsigned magnitude as typed by the user.
            date: When the transaction happened (naive UTC).
            category: Free-form spending category.
            description: Optional note.
            status: One of ``TRANSACTION_STATUSES``.

        Returns:
            OperationResult: The stored Transaction on success.
        """
        resolution = self._identity_resolver.resolve(caller.credential)
        if not resolution.resolved:
            return identity_failure(resolution)
        owner_id = resolution.user_id

        validated = self._validate(
            account_id,
            kind,
            amount,
            date,
            category,
            description,
            status,
        )
        if isinstance(validated, OperationResult):
            return validated

        try:
            with self._ledger_store.atomic(owner_id) as unit:
                if unit.fetch_account(account_id) is None:
                    return OperationResult.failure(
                        ErrorKind.NOT_FOUND,
                        ACCOUNT_NOT_FOUND_MESSAGE,
                    )
                transaction = unit.insert_transaction(validated)
                unit.increment_balance(
                    account_id,
                    signed_amount(transaction.kind, transaction.amount),
                )
        except LedgerStoreError as exc:
            self._logger.error(f"Error recording transaction: {exc}")
            return OperationResult.failure(
                ErrorKind.STORE_FAILURE,
                RECORD_TRANSACTION_FAILED,
            )

        self._logger.info(
            f"Recorded {transaction.kind.value} {transaction.amount} "
            f"on account {account_id}"
        )
        notify_views(
            self._view_invalidator,
            [DASHBOARD_PATH, account_path(account_id)],
            self._logger,
        )
        return OperationResult.ok(transaction)

    @staticmethod
    def _validate(
        account_id: str,
        kind: str,
        amount: str,
        date: datetime,
        category: str,
        description: str | None,
        status: str,
    ) -> NewTransaction | OperationResult:
        try:
            parsed_kind = TransactionKind(str(kind).strip().upper())
        except ValueError:
            return OperationResult.failure(
                ErrorKind.VALIDATION_ERROR,
                INVALID_TRANSACTION_KIND_MESSAGE,
            )
        parsed_amount = parse_non_negative_decimal(amount)
        if parsed_amount is None:
            return OperationResult.failure(
                ErrorKind.VALIDATION_ERROR,
                INVALID_AMOUNT_MESSAGE,
            )
        clean_status = str(status).strip().upper()
        if clean_status not in TRANSACTION_STATUSES:
            return OperationResult.failure(
                ErrorKind.VALIDATION_ERROR,
                INVALID_STATUS_MESSAGE,
            )
        clean_category = category.strip() if isinstance(category, str) else ""
        if not clean_category:
            return OperationResult.failure(
                ErrorKind.VALIDATION_ERROR,
                INVALID_CATEGORY_MESSAGE,
            )
        return NewTransaction(
            account_id=account_id,
            kind=parsed_kind,
            amount=parsed_amount,
            date=date,
            category=clean_category,
            status=clean_status,
            description=description,
        )


__all__ = ["RecordTransactionUseCase"]
