"""
Trading calendar utilities.

The stores work with plain calendar dates. A trading day is Monday to
Friday; exchange holidays are deliberately not modelled.
"""

from collections.abc import Iterator
from datetime import date, timedelta
from typing import Optional

MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def is_trading_day(day: date) -> bool:
    """Return True for Monday through Friday."""
    return day.weekday() < 5


def iter_trading_days(start: date, end: date) -> Iterator[date]:
    """
    Yield every trading day in the inclusive window, in increasing order.

    Args:
        start: First calendar day of the window
        end: Last calendar day of the window

    Yields:
        Weekday dates between start and end
    """
    day = start
    while day <= end:
        if is_trading_day(day):
            yield day
        day += timedelta(days=1)


def one_year_before(day: date) -> date:
    """
    Same calendar day one year earlier.

    Feb 29 has no counterpart in the previous year and rolls forward to
    Mar 1, the way a date object with an overflowing day would.
    """
    try:
        return day.replace(year=day.year - 1)
    except ValueError:
        return date(day.year - 1, 3, 1)


def trailing_year_window(today: Optional[date] = None) -> tuple[date, date]:
    """Inclusive window from one year before today through today."""
    if today is None:
        today = date.today()
    return one_year_before(today), today


def month_label(month: int) -> str:
    """Short English month label for a 0-based month number."""
    return MONTH_LABELS[month]
