"""Tests for the SetDefaultAccountUseCase."""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

from finledger.application.ports.collaborators import CallerContext
from finledger.application.ports.ledger_store import LedgerStoreError
from finledger.application.use_cases import (
    CreateAccountUseCase,
    SetDefaultAccountUseCase,
)
from finledger.domain.models import ErrorKind


def _create_accounts(store, identity, caller, logger, count: int) -> list[str]:
    use_case = CreateAccountUseCase(store, identity, logger=logger)
    return [
        use_case.execute(caller, f"Account {index}", "CURRENT", "0").data.id
        for index in range(count)
    ]


def _defaults(store, owner_id: str) -> list[str]:
    return [
        account.id
        for account in store.fetch_accounts(owner_id)
        if account.is_default
    ]


def test_switch_moves_the_single_default(
    store, identity, alice, logger
) -> None:
    first, second = _create_accounts(store, identity, alice, logger, 2)
    assert _defaults(store, "alice") == [first]
    invalidator = MagicMock()
    use_case = SetDefaultAccountUseCase(
        store, identity, view_invalidator=invalidator, logger=logger
    )

    result = use_case.execute(alice, second)

    assert result.success is True
    assert result.data.id == second
    assert result.data.is_default is True
    assert _defaults(store, "alice") == [second]
    invalidator.invalidate.assert_called_once_with(["/", f"/account/{second}"])


def test_switch_to_current_default_is_a_no_op(
    store, identity, alice, logger
) -> None:
    (only,) = _create_accounts(store, identity, alice, logger, 1)
    use_case = SetDefaultAccountUseCase(store, identity, logger=logger)

    result = use_case.execute(alice, only)

    assert result.success is True
    assert _defaults(store, "alice") == [only]


def test_foreign_account_is_not_found_and_nothing_changes(
    store, identity, alice, bob, logger
) -> None:
    """A failed switch must not leave the caller without a default."""
    (alice_account,) = _create_accounts(store, identity, alice, logger, 1)
    (bob_account,) = _create_accounts(store, identity, bob, logger, 1)
    use_case = SetDefaultAccountUseCase(store, identity, logger=logger)

    foreign = use_case.execute(alice, bob_account)
    missing = use_case.execute(alice, "does-not-exist")

    for result in (foreign, missing):
        assert result.success is False
        assert result.error_kind is ErrorKind.NOT_FOUND
        assert result.error == "Account not found"
    assert _defaults(store, "alice") == [alice_account]
    assert _defaults(store, "bob") == [bob_account]


def test_failure_after_clearing_rolls_back(
    store, identity, alice, logger, monkeypatch
) -> None:
    first, second = _create_accounts(store, identity, alice, logger, 2)

    def _fail(self, account_id):
        raise LedgerStoreError("disk full")

    monkeypatch.setattr(
        "finledger.infrastructure.ledger_store.SqlAlchemyLedgerUnit.mark_default",
        _fail,
    )
    use_case = SetDefaultAccountUseCase(store, identity, logger=logger)

    result = use_case.execute(alice, second)

    assert result.error_kind is ErrorKind.STORE_FAILURE
    assert result.error == "Failed to update default account"
    assert _defaults(store, "alice") == [first]


def test_concurrent_switches_leave_exactly_one_default(
    store, identity, alice, logger
) -> None:
    account_ids = _create_accounts(store, identity, alice, logger, 4)
    use_case = SetDefaultAccountUseCase(store, identity, logger=logger)

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(
            pool.map(
                lambda account_id: use_case.execute(alice, account_id),
                account_ids * 3,
            )
        )

    assert all(result.success for result in results)
    assert len(_defaults(store, "alice")) == 1


def test_unauthorized_caller_never_reaches_store(identity, logger) -> None:
    store = MagicMock()
    use_case = SetDefaultAccountUseCase(store, identity, logger=logger)

    result = use_case.execute(CallerContext(""), "any")

    assert result.error_kind is ErrorKind.UNAUTHORIZED
    store.atomic.assert_not_called()
