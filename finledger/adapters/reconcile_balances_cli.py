"""CLI adapter to repair drifted balances for one user.

The owner is read from ``LEDGER_OWNER_ID``; every account of that owner is
recomputed from its transaction log.
"""

import os

from finledger.application.ports.collaborators import CallerContext
from finledger.infrastructure.collaborators import MappingIdentityResolver
from finledger.infrastructure.container import build_use_cases
from finledger.infrastructure.db import dispose_ledger_engine
from finledger.infrastructure.logging.logger import get_app_logger

_OPERATOR_CREDENTIAL = "reconcile-balances-cli"


def main() -> None:
    """Recompute every balance of the configured owner."""
    logger = get_app_logger()
    owner_id = os.getenv("LEDGER_OWNER_ID", "").strip()
    if not owner_id:
        logger.warning("LEDGER_OWNER_ID is required to reconcile balances.")
        return

    use_cases = build_use_cases(
        MappingIdentityResolver({_OPERATOR_CREDENTIAL: owner_id})
    )
    caller = CallerContext(credential=_OPERATOR_CREDENTIAL)
    repaired = 0
    failed = 0
    try:
        accounts = use_cases.get_accounts.execute(caller)
        for account in accounts:
            result = use_cases.recompute_balance.execute(caller, account.id)
            if not result.success:
                failed += 1
                logger.error(
                    f"Could not reconcile account {account.id}: {result.error}"
                )
            elif result.data.drift:
                repaired += 1
    finally:
        dispose_ledger_engine()

    print(
        f"Checked {len(accounts)} accounts: "
        f"{repaired} repaired, {failed} failed."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
