"""Tests for domain model helpers."""

from datetime import datetime
from decimal import Decimal

from finledger.domain.models import (
    Account,
    BalanceRepair,
    DashboardView,
    ErrorKind,
    OperationResult,
)


def _account(account_id: str, balance: str, is_default: bool) -> Account:
    return Account(
        id=account_id,
        user_id="alice",
        name=account_id,
        kind="CURRENT",
        balance=Decimal(balance),
        is_default=is_default,
        created_at=datetime(2024, 5, 1),
    )


def test_operation_result_constructors() -> None:
    ok = OperationResult.ok("payload")
    failed = OperationResult.failure(ErrorKind.NOT_FOUND, "Account not found")

    assert ok.success is True
    assert ok.data == "payload"
    assert ok.error is None
    assert failed.success is False
    assert failed.error == "Account not found"
    assert failed.error_kind is ErrorKind.NOT_FOUND


def test_balance_repair_reports_drift() -> None:
    repair = BalanceRepair(
        account=_account("a", "180", True),
        previous_balance=Decimal("175.50"),
    )

    assert repair.drift == Decimal("4.50")


def test_dashboard_default_account() -> None:
    view = DashboardView(
        accounts=[_account("a", "1", False), _account("b", "2", True)]
    )

    assert view.default_account.id == "b"
    assert DashboardView().default_account is None
