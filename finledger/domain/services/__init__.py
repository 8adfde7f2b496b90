"""Domain services package."""

from .budgeting import month_bounds
from .reconciliation import (
    compute_ledger_balance,
    compute_reversal_deltas,
    signed_amount,
)

__all__ = [
    "month_bounds",
    "compute_ledger_balance",
    "compute_reversal_deltas",
    "signed_amount",
]
