"""Application ports package."""

from .collaborators import (
    BLOCKED,
    RATE_LIMITED,
    AbuseDecision,
    AbuseGuardPort,
    CallerContext,
    IdentityResolution,
    IdentityResolverPort,
    ViewInvalidatorPort,
)
from .database import DatabaseEnginePort
from .ledger_store import LedgerStoreError, LedgerStorePort, LedgerUnitPort

__all__ = [
    "BLOCKED",
    "RATE_LIMITED",
    "AbuseDecision",
    "AbuseGuardPort",
    "CallerContext",
    "IdentityResolution",
    "IdentityResolverPort",
    "ViewInvalidatorPort",
    "DatabaseEnginePort",
    "LedgerStoreError",
    "LedgerStorePort",
    "LedgerUnitPort",
]
