"""Shared helpers for ledger use cases."""

from finledger.application.ports.collaborators import (
    RATE_LIMITED,
    AbuseDecision,
    IdentityResolution,
    ViewInvalidatorPort,
)
from finledger.application.use_cases.constants import (
    BLOCKED_MESSAGE,
    RATE_LIMITED_MESSAGE,
    UNAUTHORIZED_MESSAGE,
    USER_NOT_FOUND_MESSAGE,
)
from finledger.domain.models import ErrorKind, OperationResult


def identity_failure(resolution: IdentityResolution) -> OperationResult:
    """Convert an unresolved identity into a failure result.

    Args:
        resolution: Outcome returned by the identity resolver.

    Returns:
        OperationResult: UNAUTHORIZED or NOT_FOUND failure.
    """
    if resolution.error_kind is ErrorKind.NOT_FOUND:
        return OperationResult.failure(
            ErrorKind.NOT_FOUND,
            USER_NOT_FOUND_MESSAGE,
        )
    return OperationResult.failure(ErrorKind.UNAUTHORIZED, UNAUTHORIZED_MESSAGE)


def abuse_failure(decision: AbuseDecision) -> OperationResult:
    """Convert an abuse-guard denial into a failure result."""
    if decision.reason == RATE_LIMITED:
        return OperationResult.failure(
            ErrorKind.RATE_LIMITED,
            RATE_LIMITED_MESSAGE,
        )
    return OperationResult.failure(ErrorKind.BLOCKED, BLOCKED_MESSAGE)


def notify_views(
    view_invalidator: ViewInvalidatorPort | None,
    paths: list[str],
    logger,
) -> None:
    """Signal stale views after a committed mutation.

    The mutation is already durable, so a failing invalidator is logged and
    otherwise ignored.

    Args:
        view_invalidator: Optional invalidator to notify.
        paths: View paths affected by the mutation.
        logger: Logger used to report invalidation failures.
    """
    if view_invalidator is None or not paths:
        return
    try:
        view_invalidator.invalidate(paths)
    except Exception as exc:
        logger.warning(f"View invalidation failed for {paths}: {exc}")


__all__ = ["identity_failure", "abuse_failure", "notify_views"]
