"""In-process implementations of the hosting-application collaborators.

Production deployments plug their own identity provider, bot protection and
cache layer in through the same ports; these adapters back the CLI entry
points and local development.
"""

from collections.abc import Callable, Iterable, Mapping
import threading
import time

from finledger.application.ports.collaborators import (
    BLOCKED,
    RATE_LIMITED,
    AbuseDecision,
    AbuseGuardPort,
    IdentityResolution,
    IdentityResolverPort,
    ViewInvalidatorPort,
)
from finledger.domain.models import ErrorKind
from finledger.infrastructure.logging.logger import get_app_logger


class MappingIdentityResolver(IdentityResolverPort):
    """Resolve credentials through a static credential -> user id mapping."""

    def __init__(self, users: Mapping[str, str]) -> None:
        self._users = dict(users)

    def resolve(self, credential: str | None) -> IdentityResolution:
        if not credential:
            return IdentityResolution(error_kind=ErrorKind.UNAUTHORIZED)
        user_id = self._users.get(credential)
        if user_id is None:
            return IdentityResolution(error_kind=ErrorKind.NOT_FOUND)
        return IdentityResolution(user_id=user_id)


class AllowAllAbuseGuard(AbuseGuardPort):
    """Guard that never denies."""

    def check(self, user_id: str) -> AbuseDecision:
        return AbuseDecision(allowed=True)


class TokenBucketAbuseGuard(AbuseGuardPort):
    """Per-user token bucket with an explicit block list.

    Each user starts with ``capacity`` tokens; one token is spent per check
    and tokens refill continuously at ``refill_per_second``.
    """

    def __init__(
        self,
        capacity: int,
        refill_per_second: float,
        blocked_users: Iterable[str] = (),
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = float(capacity)
        self._refill_per_second = refill_per_second
        self._blocked = frozenset(blocked_users)
        self._clock = clock
        self._lock = threading.Lock()
        self._buckets: dict[str, tuple[float, float]] = {}

    def check(self, user_id: str) -> AbuseDecision:
        if user_id in self._blocked:
            return AbuseDecision(allowed=False, reason=BLOCKED)
        now = self._clock()
        with self._lock:
            tokens, last_seen = self._buckets.get(
                user_id,
                (self._capacity, now),
            )
            tokens = min(
                self._capacity,
                tokens + (now - last_seen) * self._refill_per_second,
            )
            if tokens < 1:
                self._buckets[user_id] = (tokens, now)
                return AbuseDecision(allowed=False, reason=RATE_LIMITED)
            self._buckets[user_id] = (tokens - 1, now)
        return AbuseDecision(allowed=True)


class LoggingViewInvalidator(ViewInvalidatorPort):
    """Invalidator that only records which views went stale."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def invalidate(self, paths: list[str]) -> None:
        self._logger.debug(f"Views invalidated: {', '.join(paths)}")


__all__ = [
    "MappingIdentityResolver",
    "AllowAllAbuseGuard",
    "TokenBucketAbuseGuard",
    "LoggingViewInvalidator",
]
