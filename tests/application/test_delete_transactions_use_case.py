"""Tests for the DeleteTransactionsUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finledger.application.ports.collaborators import CallerContext
from finledger.application.ports.ledger_store import LedgerStoreError
from finledger.application.use_cases import (
    CreateAccountUseCase,
    DeleteTransactionsUseCase,
    RecordTransactionUseCase,
)
from finledger.domain.models import ErrorKind
from finledger.infrastructure.ledger_store import SqlAlchemyLedgerUnit


@pytest.fixture
def ledger(store, identity, alice, bob, logger):
    """Account A (200) with EXPENSE 30 and INCOME 50; B (50) with EXPENSE 20.

    Bob owns one account with a single transaction.
    """
    create = CreateAccountUseCase(store, identity, logger=logger)
    record = RecordTransactionUseCase(store, identity, logger=logger)
    when = datetime(2024, 5, 3, 12, 0)

    account_a = create.execute(alice, "A", "CURRENT", "180", True).data
    account_b = create.execute(alice, "B", "SAVINGS", "70", False).data
    t1 = record.execute(alice, account_a.id, "EXPENSE", "30", when, "food").data
    t2 = record.execute(alice, account_a.id, "INCOME", "50", when, "pay").data
    t3 = record.execute(alice, account_b.id, "EXPENSE", "20", when, "fees").data

    bob_account = create.execute(bob, "Bob", "CURRENT", "100", True).data
    t4 = record.execute(bob, bob_account.id, "EXPENSE", "10", when, "food").data

    return {
        "A": account_a.id,
        "B": account_b.id,
        "BOB": bob_account.id,
        "t1": t1.id,
        "t2": t2.id,
        "t3": t3.id,
        "t4": t4.id,
    }


def _balances(store, owner_id: str) -> dict[str, Decimal]:
    return {
        account.id: account.balance
        for account in store.fetch_accounts(owner_id)
    }


def test_seeded_balances(store, ledger) -> None:
    balances = _balances(store, "alice")

    assert balances[ledger["A"]] == Decimal("200")
    assert balances[ledger["B"]] == Decimal("50")


def test_cross_account_bulk_delete_reverses_each_account(
    store, identity, alice, logger, ledger
) -> None:
    invalidator = MagicMock()
    use_case = DeleteTransactionsUseCase(
        store, identity, view_invalidator=invalidator, logger=logger
    )

    result = use_case.execute(alice, {ledger["t1"], ledger["t2"], ledger["t3"]})

    assert result.success is True
    assert result.error is None
    balances = _balances(store, "alice")
    assert balances[ledger["A"]] == Decimal("180")
    assert balances[ledger["B"]] == Decimal("70")
    assert store.fetch_transactions("alice") == []
    paths = invalidator.invalidate.call_args.args[0]
    assert paths[0] == "/dashboard"
    assert set(paths[1:]) == {f"/account/{ledger['A']}", f"/account/{ledger['B']}"}


def test_second_delete_of_same_ids_is_empty_selection(
    store, identity, alice, logger, ledger
) -> None:
    use_case = DeleteTransactionsUseCase(store, identity, logger=logger)
    selection = [ledger["t1"], ledger["t3"]]

    first = use_case.execute(alice, selection)
    balances_after_first = _balances(store, "alice")
    second = use_case.execute(alice, selection)

    assert first.success is True
    assert second.success is False
    assert second.error_kind is ErrorKind.EMPTY_SELECTION
    assert second.error == "No transactions found to delete"
    assert _balances(store, "alice") == balances_after_first


def test_empty_selection_has_no_effect(
    store, identity, alice, logger, ledger
) -> None:
    use_case = DeleteTransactionsUseCase(store, identity, logger=logger)

    result = use_case.execute(alice, set())

    assert result.success is False
    assert result.error == "No transactions found to delete"
    assert len(store.fetch_transactions("alice")) == 3


def test_foreign_ids_resolve_to_empty_selection(
    store, identity, alice, logger, ledger
) -> None:
    """Bob's transaction cannot be deleted by Alice."""
    use_case = DeleteTransactionsUseCase(store, identity, logger=logger)

    result = use_case.execute(alice, [ledger["t4"], "missing-id"])

    assert result.error_kind is ErrorKind.EMPTY_SELECTION
    assert [tx.id for tx in store.fetch_transactions("bob")] == [ledger["t4"]]
    assert _balances(store, "bob")[ledger["BOB"]] == Decimal("90")


def test_unresolvable_ids_are_dropped_when_others_resolve(
    store, identity, alice, logger, ledger
) -> None:
    use_case = DeleteTransactionsUseCase(store, identity, logger=logger)

    result = use_case.execute(alice, [ledger["t1"], ledger["t4"], "missing-id"])

    assert result.success is True
    assert _balances(store, "alice")[ledger["A"]] == Decimal("230")
    assert [tx.id for tx in store.fetch_transactions("bob")] == [ledger["t4"]]
    assert _balances(store, "bob")[ledger["BOB"]] == Decimal("90")


def test_failure_mid_unit_keeps_rows_and_balances(
    store, identity, alice, logger, ledger, monkeypatch
) -> None:
    """A failed balance update must not leave deleted rows behind."""
    calls = []

    def _fail_on_second(self, account_id, delta):
        calls.append(account_id)
        if len(calls) == 2:
            raise LedgerStoreError("connection reset")
        return original(self, account_id, delta)

    original = SqlAlchemyLedgerUnit.increment_balance
    monkeypatch.setattr(
        SqlAlchemyLedgerUnit,
        "increment_balance",
        _fail_on_second,
    )
    use_case = DeleteTransactionsUseCase(store, identity, logger=logger)

    result = use_case.execute(alice, [ledger["t1"], ledger["t2"], ledger["t3"]])

    assert result.success is False
    assert result.error_kind is ErrorKind.STORE_FAILURE
    assert result.error == "Failed to delete transactions"
    assert len(store.fetch_transactions("alice")) == 3
    balances = _balances(store, "alice")
    assert balances[ledger["A"]] == Decimal("200")
    assert balances[ledger["B"]] == Decimal("50")


def test_unknown_user_is_rejected_before_store(identity, logger) -> None:
    store = MagicMock()
    use_case = DeleteTransactionsUseCase(store, identity, logger=logger)

    result = use_case.execute(CallerContext("stranger"), ["t1"])

    assert result.error_kind is ErrorKind.NOT_FOUND
    assert result.error == "User not found"
    store.atomic.assert_not_called()
