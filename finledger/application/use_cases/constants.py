"""Shared constants for application use cases."""

UNAUTHORIZED_MESSAGE = "Unauthorized"
USER_NOT_FOUND_MESSAGE = "User not found"
ACCOUNT_NOT_FOUND_MESSAGE = "Account not found"
INVALID_BALANCE_MESSAGE = "Invalid balance amount"
INVALID_ACCOUNT_NAME_MESSAGE = "Invalid account name"
INVALID_ACCOUNT_KIND_MESSAGE = "Invalid account kind"
INVALID_AMOUNT_MESSAGE = "Invalid transaction amount"
INVALID_TRANSACTION_KIND_MESSAGE = "Invalid transaction kind"
INVALID_STATUS_MESSAGE = "Invalid transaction status"
INVALID_CATEGORY_MESSAGE = "Invalid transaction category"
EMPTY_SELECTION_MESSAGE = "No transactions found to delete"
RATE_LIMITED_MESSAGE = "Too many requests. Try again later."
BLOCKED_MESSAGE = "Request blocked"
CREATE_ACCOUNT_FAILED = "Failed to create account"
DELETE_TRANSACTIONS_FAILED = "Failed to delete transactions"
SET_DEFAULT_FAILED = "Failed to update default account"
RECORD_TRANSACTION_FAILED = "Failed to record transaction"
RECOMPUTE_BALANCE_FAILED = "Failed to recompute balance"

DASHBOARD_PATH = "/dashboard"
HOME_PATH = "/"


def account_path(account_id: str) -> str:
    """Return the view path of a single account."""
    return f"/account/{account_id}"


__all__ = [
    "UNAUTHORIZED_MESSAGE",
    "USER_NOT_FOUND_MESSAGE",
    "ACCOUNT_NOT_FOUND_MESSAGE",
    "INVALID_BALANCE_MESSAGE",
    "INVALID_ACCOUNT_NAME_MESSAGE",
    "INVALID_ACCOUNT_KIND_MESSAGE",
    "INVALID_AMOUNT_MESSAGE",
    "INVALID_TRANSACTION_KIND_MESSAGE",
    "INVALID_STATUS_MESSAGE",
    "INVALID_CATEGORY_MESSAGE",
    "EMPTY_SELECTION_MESSAGE",
    "RATE_LIMITED_MESSAGE",
    "BLOCKED_MESSAGE",
    "CREATE_ACCOUNT_FAILED",
    "DELETE_TRANSACTIONS_FAILED",
    "SET_DEFAULT_FAILED",
    "RECORD_TRANSACTION_FAILED",
    "RECOMPUTE_BALANCE_FAILED",
    "DASHBOARD_PATH",
    "HOME_PATH",
    "account_path",
]
