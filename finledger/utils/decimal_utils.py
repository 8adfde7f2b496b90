"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation

AMOUNT_PLACES = Decimal("0.01")
MAX_AMOUNT = Decimal("9999999999999999.99")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_non_negative_decimal(raw) -> Decimal | None:
    """Parse user input into a finite, non-negative amount in cents.

    Amounts are stored with ``AMOUNT_PLACES`` fractional digits, so input
    that would be rounded on write is rejected instead.

    Args:
        raw: String (or number) typed by the caller.

    Returns:
        Decimal | None: Parsed value, or None when the input is blank,
        unparsable, not finite, negative, finer than a cent, or larger
        than ``MAX_AMOUNT``.
    """
    if raw is None or isinstance(raw, bool):
        return None
    text = str(raw).strip()
    if not text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite() or value < 0 or value > MAX_AMOUNT:
        return None
    if value != value.quantize(AMOUNT_PLACES):
        return None
    return value


__all__ = [
    "AMOUNT_PLACES",
    "MAX_AMOUNT",
    "coerce_decimal",
    "parse_non_negative_decimal",
]
