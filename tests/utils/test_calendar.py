"""
Tests for trading calendar utilities.

Verifies weekday-only iteration, inclusive windows and the leap-day
rollover of the trailing-year window.
"""

from datetime import date
from unittest.mock import patch

import pytest

from finview_app.utils.calendar import (
    MONTH_LABELS, is_trading_day, iter_trading_days, month_label,
    one_year_before, trailing_year_window
)


class TestIsTradingDay:
    """Test weekday detection."""

    @pytest.mark.parametrize("day,expected", [
        (date(2024, 1, 1), True),    # Monday
        (date(2024, 1, 5), True),    # Friday
        (date(2024, 1, 6), False),   # Saturday
        (date(2024, 1, 7), False),   # Sunday
        (date(2024, 12, 25), True),  # Holidays are trading days
    ])
    def test_weekdays_only(self, day, expected):
        assert is_trading_day(day) is expected


class TestIterTradingDays:
    """Test iteration over a window."""

    def test_week_spanning_weekend(self):
        days = list(iter_trading_days(date(2024, 1, 1), date(2024, 1, 7)))
        assert days == [date(2024, 1, d) for d in range(1, 6)]

    def test_window_is_inclusive(self):
        days = list(iter_trading_days(date(2024, 1, 2), date(2024, 1, 2)))
        assert days == [date(2024, 1, 2)]

    def test_empty_when_end_before_start(self):
        assert list(iter_trading_days(date(2024, 1, 5), date(2024, 1, 1))) == []


class TestOneYearBefore:
    """Test trailing-year window start."""

    def test_regular_day(self):
        assert one_year_before(date(2026, 10, 18)) == date(2025, 10, 18)

    def test_leap_day_rolls_to_march(self):
        assert one_year_before(date(2024, 2, 29)) == date(2023, 3, 1)

    def test_default_window_uses_today(self):
        with patch("finview_app.utils.calendar.date") as mock_date:
            mock_date.today.return_value = date(2026, 10, 18)
            mock_date.side_effect = lambda *args, **kwargs: date(*args, **kwargs)

            assert trailing_year_window() == (date(2025, 10, 18), date(2026, 10, 18))


class TestMonthLabels:
    """Test month labels."""

    def test_twelve_labels(self):
        assert len(MONTH_LABELS) == 12
        assert month_label(0) == "Jan"
        assert month_label(11) == "Dec"
