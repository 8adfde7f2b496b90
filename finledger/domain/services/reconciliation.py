"""Balance arithmetic for the transaction ledger.

A live transaction moves its account balance by ``signed_amount``: INCOME
adds its amount and EXPENSE subtracts it. Removing a transaction must undo
that effect, so reversal deltas carry the opposite sign.
"""

from collections.abc import Iterable
from decimal import Decimal

from finledger.domain.models.transactions import Transaction, TransactionKind


def signed_amount(kind: TransactionKind, amount: Decimal) -> Decimal:
    """Return the balance effect of a live transaction."""
    if TransactionKind(kind) is TransactionKind.EXPENSE:
        return -amount
    return amount


def compute_reversal_deltas(
    transactions: Iterable[Transaction],
) -> dict[str, Decimal]:
    """Group the balance deltas that undo the given transactions.

    Args:
        transactions: Transactions about to be removed.

    Returns:
        dict[str, Decimal]: Delta per account id, in first-seen order.
    """
    deltas: dict[str, Decimal] = {}
    for transaction in transactions:
        change = -signed_amount(transaction.kind, transaction.amount)
        deltas[transaction.account_id] = (
            deltas.get(transaction.account_id, Decimal("0")) + change
        )
    return deltas


def compute_ledger_balance(
    opening_balance: Decimal,
    transactions: Iterable[Transaction],
) -> Decimal:
    """Return the balance implied by an opening balance and a history."""
    total = opening_balance
    for transaction in transactions:
        total += signed_amount(transaction.kind, transaction.amount)
    return total


__all__ = [
    "signed_amount",
    "compute_reversal_deltas",
    "compute_ledger_balance",
]
