"""Shared fixtures for ledger tests."""

from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine

from finledger.application.ports.collaborators import CallerContext
from finledger.application.ports.database import DatabaseEnginePort
from finledger.infrastructure.collaborators import MappingIdentityResolver
from finledger.infrastructure.ledger_store import SqlAlchemyLedgerStore
from finledger.infrastructure.schema import create_ledger_schema


class FakeDatabasePort(DatabaseEnginePort):
    """Database port bound to a throwaway SQLite file."""

    def __init__(self, url: str) -> None:
        self._engine = create_engine(url)

    def get_ledger_engine(self):
        return self._engine


class StepClock:
    """Clock advancing one second per call."""

    def __init__(self, start: datetime) -> None:
        self._current = start

    def __call__(self) -> datetime:
        value = self._current
        self._current += timedelta(seconds=1)
        return value


@pytest.fixture
def db_port(tmp_path):
    port = FakeDatabasePort(f"sqlite:///{tmp_path / 'ledger.db'}")
    create_ledger_schema(port.get_ledger_engine())
    yield port
    port.get_ledger_engine().dispose()


@pytest.fixture
def store(db_port):
    return SqlAlchemyLedgerStore(
        db_port,
        clock=StepClock(datetime(2024, 5, 1, 9, 0, 0)),
    )


@pytest.fixture
def identity():
    return MappingIdentityResolver(
        {"alice-token": "alice", "bob-token": "bob"}
    )


@pytest.fixture
def alice():
    return CallerContext(credential="alice-token")


@pytest.fixture
def bob():
    return CallerContext(credential="bob-token")


@pytest.fixture
def logger():
    return MagicMock()
