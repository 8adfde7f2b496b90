"""Budget period helpers."""

from datetime import date, datetime


def month_bounds(today: date) -> tuple[datetime, datetime]:
    """Return the calendar month containing ``today``.

    Args:
        today: Any day of the period.

    Returns:
        tuple[datetime, datetime]: Inclusive start and exclusive end.
    """
    start = datetime(today.year, today.month, 1)
    if today.month == 12:
        end = datetime(today.year + 1, 1, 1)
    else:
        end = datetime(today.year, today.month + 1, 1)
    return start, end


__all__ = ["month_bounds"]
