"""Domain models for budgets."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Budget:
    """Monthly spending limit configured for a user."""

    id: str
    user_id: str
    amount: Decimal


@dataclass(frozen=True)
class BudgetStatus:
    """Budget limit and expenses of the current period.

    ``budget_amount`` is None when no budget is configured. The utilization
    ratio is left to presentation layers.
    """

    budget_amount: Decimal | None
    current_expenses: Decimal


__all__ = ["Budget", "BudgetStatus"]
