"""Tests for GetAccountWithTransactionsUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from finledger.application.ports.collaborators import CallerContext
from finledger.application.ports.ledger_store import LedgerStoreError
from finledger.application.use_cases import (
    CreateAccountUseCase,
    GetAccountWithTransactionsUseCase,
    RecordTransactionUseCase,
)


def _seed(store, identity, caller, logger):
    create = CreateAccountUseCase(store, identity, logger=logger)
    record = RecordTransactionUseCase(store, identity, logger=logger)
    account = create.execute(caller, "Checking", "CURRENT", "100").data
    older = record.execute(
        caller, account.id, "EXPENSE", "5", datetime(2024, 4, 1), "food"
    ).data
    newer = record.execute(
        caller, account.id, "INCOME", "15", datetime(2024, 4, 20), "pay"
    ).data
    return account, older, newer


def test_view_returns_history_newest_first(
    store, identity, alice, logger
) -> None:
    account, older, newer = _seed(store, identity, alice, logger)
    use_case = GetAccountWithTransactionsUseCase(store, identity, logger=logger)

    view = use_case.execute(alice, account.id)

    assert view.account.id == account.id
    assert view.account.balance == Decimal("110")
    assert view.account.transaction_count == 2
    assert view.transaction_count == 2
    assert [tx.id for tx in view.transactions] == [newer.id, older.id]


def test_foreign_and_missing_accounts_look_the_same(
    store, identity, alice, bob, logger
) -> None:
    """Another user's account must be indistinguishable from no account."""
    account, _, _ = _seed(store, identity, alice, logger)
    use_case = GetAccountWithTransactionsUseCase(store, identity, logger=logger)

    assert use_case.execute(bob, account.id) is None
    assert use_case.execute(bob, "does-not-exist") is None


def test_unresolved_identity_returns_none(store, identity, logger) -> None:
    use_case = GetAccountWithTransactionsUseCase(store, identity, logger=logger)

    assert use_case.execute(CallerContext(None), "any") is None


def test_store_failure_returns_none(identity, alice, logger) -> None:
    store = MagicMock()
    store.fetch_account_with_transactions.side_effect = LedgerStoreError("x")
    use_case = GetAccountWithTransactionsUseCase(store, identity, logger=logger)

    assert use_case.execute(alice, "any") is None
    logger.error.assert_called_once()
