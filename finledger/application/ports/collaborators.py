"""Ports for collaborators owned by the hosting application."""

from dataclasses import dataclass
from typing import Protocol

from finledger.domain.models import ErrorKind

RATE_LIMITED = "rate-limited"
BLOCKED = "blocked"


@dataclass(frozen=True)
class CallerContext:
    """Explicit caller identity threaded into every operation.

    Attributes:
        credential: Opaque credential issued by the identity provider.
    """

    credential: str | None


@dataclass(frozen=True)
class IdentityResolution:
    """Outcome of resolving a credential to an internal user id."""

    user_id: str | None = None
    error_kind: ErrorKind | None = None

    @property
    def resolved(self) -> bool:
        return self.user_id is not None


@dataclass(frozen=True)
class AbuseDecision:
    """Allow/deny verdict with the denial reason."""

    allowed: bool
    reason: str | None = None


class IdentityResolverPort(Protocol):
    """Maps caller credentials to user ids."""

    def resolve(self, credential: str | None) -> IdentityResolution:
        """Return the user id, UNAUTHORIZED or NOT_FOUND."""


class AbuseGuardPort(Protocol):
    """Pre-mutation rate-limit and bot check."""

    def check(self, user_id: str) -> AbuseDecision:
        """Return whether the user may perform a mutation now."""


class ViewInvalidatorPort(Protocol):
    """Fire-and-forget refresh signal for downstream views."""

    def invalidate(self, paths: list[str]) -> None:
        """Tell downstream views under ``paths`` to refresh."""


__all__ = [
    "RATE_LIMITED",
    "BLOCKED",
    "CallerContext",
    "IdentityResolution",
    "AbuseDecision",
    "IdentityResolverPort",
    "AbuseGuardPort",
    "ViewInvalidatorPort",
]
