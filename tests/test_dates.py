"""
Unit tests for leap-year and month-length helpers
"""

import pytest

from agecalc.dates import days_in_month, is_leap_year


class TestLeapYear:
    def test_divisible_by_four(self):
        assert is_leap_year(2024) is True
        assert is_leap_year(1996) is True

    def test_century_rule(self):
        assert is_leap_year(1900) is False
        assert is_leap_year(2100) is False
        assert is_leap_year(2000) is True
        assert is_leap_year(1600) is True

    def test_common_years(self):
        assert is_leap_year(2001) is False
        assert is_leap_year(2023) is False


class TestDaysInMonth:
    def test_february(self):
        """February follows the leap-year rule"""
        assert days_in_month(2, 2000) == 29
        assert days_in_month(2, 2001) == 28
        assert days_in_month(2, 1900) == 28

    @pytest.mark.parametrize("year", [1000, 1999, 2000, 2024])
    def test_january_always_31(self, year):
        assert days_in_month(1, year) == 31

    def test_thirty_day_months(self):
        for month in (4, 6, 9, 11):
            assert days_in_month(month, 2023) == 30

    def test_month_out_of_range(self):
        with pytest.raises(ValueError):
            days_in_month(0, 2000)
        with pytest.raises(ValueError):
            days_in_month(13, 2000)
