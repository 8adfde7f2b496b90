"""Composition root for wiring infrastructure adapters."""

from dataclasses import dataclass

from finledger.application.ports.collaborators import (
    AbuseGuardPort,
    IdentityResolverPort,
    ViewInvalidatorPort,
)
from finledger.application.ports.database import DatabaseEnginePort
from finledger.application.ports.ledger_store import LedgerStorePort
from finledger.application.use_cases import (
    CreateAccountUseCase,
    DeleteTransactionsUseCase,
    GetAccountWithTransactionsUseCase,
    GetAccountsUseCase,
    GetBudgetStatusUseCase,
    GetDashboardUseCase,
    GetTransactionsUseCase,
    RecomputeBalanceUseCase,
    RecordTransactionUseCase,
    SetDefaultAccountUseCase,
)
from finledger.infrastructure.collaborators import (
    AllowAllAbuseGuard,
    LoggingViewInvalidator,
)
from finledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finledger.infrastructure.ledger_store import SqlAlchemyLedgerStore
from finledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerUseCases:
    """Every ledger operation, wired to the same store and collaborators."""

    create_account: CreateAccountUseCase
    delete_transactions: DeleteTransactionsUseCase
    set_default_account: SetDefaultAccountUseCase
    get_account_with_transactions: GetAccountWithTransactionsUseCase
    get_accounts: GetAccountsUseCase
    get_transactions: GetTransactionsUseCase
    get_budget_status: GetBudgetStatusUseCase
    record_transaction: RecordTransactionUseCase
    recompute_balance: RecomputeBalanceUseCase
    get_dashboard: GetDashboardUseCase


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_store(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerStorePort:
    """Return the SQLAlchemy ledger store."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerStore(resolved_db)


def build_use_cases(
    identity_resolver: IdentityResolverPort,
    abuse_guard: AbuseGuardPort | None = None,
    view_invalidator: ViewInvalidatorPort | None = None,
    ledger_store: LedgerStorePort | None = None,
) -> LedgerUseCases:
    """Wire every use case to one store and the hosting collaborators.

    Args:
        identity_resolver: Resolver supplied by the hosting application.
        abuse_guard: Optional guard; defaults to allowing every request.
        view_invalidator: Optional invalidator; defaults to logging only.
        ledger_store: Optional store; defaults to the SQLAlchemy store.

    Returns:
        LedgerUseCases: Ready-to-use operations.
    """
    logger = get_app_logger()
    store = ledger_store or build_ledger_store()
    guard = abuse_guard or AllowAllAbuseGuard()
    invalidator = view_invalidator or LoggingViewInvalidator(logger=logger)

    get_accounts = GetAccountsUseCase(store, identity_resolver, logger=logger)
    get_transactions = GetTransactionsUseCase(
        store,
        identity_resolver,
        logger=logger,
    )
    get_budget_status = GetBudgetStatusUseCase(
        store,
        identity_resolver,
        logger=logger,
    )
    return LedgerUseCases(
        create_account=CreateAccountUseCase(
            store,
            identity_resolver,
            abuse_guard=guard,
            view_invalidator=invalidator,
            logger=logger,
        ),
        delete_transactions=DeleteTransactionsUseCase(
            store,
            identity_resolver,
            view_invalidator=invalidator,
            logger=logger,
        ),
        set_default_account=SetDefaultAccountUseCase(
            store,
            identity_resolver,
            view_invalidator=invalidator,
            logger=logger,
        ),
        get_account_with_transactions=GetAccountWithTransactionsUseCase(
            store,
            identity_resolver,
            logger=logger,
        ),
        get_accounts=get_accounts,
        get_transactions=get_transactions,
        get_budget_status=get_budget_status,
        record_transaction=RecordTransactionUseCase(
            store,
            identity_resolver,
            view_invalidator=invalidator,
            logger=logger,
        ),
        recompute_balance=RecomputeBalanceUseCase(
            store,
            identity_resolver,
            view_invalidator=invalidator,
            logger=logger,
        ),
        get_dashboard=GetDashboardUseCase(
            get_accounts,
            get_transactions,
            get_budget_status,
        ),
    )


__all__ = [
    "LedgerUseCases",
    "build_database_adapter",
    "build_ledger_store",
    "build_use_cases",
]
