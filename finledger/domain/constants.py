"""Domain constants for the ledger."""

ACCOUNT_KINDS = (
    "CURRENT",
    "SAVINGS",
)

TRANSACTION_STATUSES = (
    "PENDING",
    "COMPLETED",
    "FAILED",
)

DEFAULT_TRANSACTION_STATUS = "COMPLETED"


__all__ = [
    "ACCOUNT_KINDS",
    "TRANSACTION_STATUSES",
    "DEFAULT_TRANSACTION_STATUS",
]
