#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""农历数据表单元测试"""

import pytest

from core.calculators import lunar_table
from core.calculators.calendar_errors import UnsupportedDateRange


class TestTableShape:
    def test_supported_range(self):
        assert lunar_table.MIN_YEAR == 1901
        assert lunar_table.MAX_YEAR == 2050
        assert len(lunar_table.LUNAR_MONTH_DAYS) == 150
        # 两年共用一个字节
        assert len(lunar_table.LUNAR_LEAP_MONTHS) == 75

    def test_month_words_fit_16_bits(self):
        for bits in lunar_table.LUNAR_MONTH_DAYS:
            assert 0 <= bits < 1 << 16

    @pytest.mark.parametrize("year", [1900, 2051, 0, -1])
    def test_check_year_out_of_range(self, year):
        assert lunar_table.is_supported_year(year) is False
        with pytest.raises(UnsupportedDateRange) as exc_info:
            lunar_table.check_year(year)
        assert exc_info.value.year == year
        assert exc_info.value.error_type == "unsupported_date_range"
        assert "1901-2050" in exc_info.value.message

    @pytest.mark.parametrize("year", [1901, 1984, 2050])
    def test_check_year_in_range(self, year):
        assert lunar_table.is_supported_year(year) is True
        lunar_table.check_year(year)


class TestLeapMonth:
    @pytest.mark.parametrize("year, expected", [
        (2017, 6),
        (2020, 4),
        (2023, 2),
        (2024, 0),
        (2025, 6),
        (2033, 11),
    ])
    def test_leap_month(self, year, expected):
        assert lunar_table.leap_month(year) == expected

    def test_leap_month_out_of_range(self):
        with pytest.raises(UnsupportedDateRange):
            lunar_table.leap_month(1900)


class TestMonthDays:
    def test_month_with_leap(self):
        # 2023 年二月 30 天，闰二月 29 天
        assert lunar_table.month_days(2023, 2) == (30, 29)

    def test_month_without_leap(self):
        assert lunar_table.month_days(2023, 1) == (29, 0)

    def test_every_month_is_29_or_30_days(self):
        for year in range(lunar_table.MIN_YEAR, lunar_table.MAX_YEAR + 1):
            leap = lunar_table.leap_month(year)
            for month in range(1, 13):
                days, leap_days = lunar_table.month_days(year, month)
                assert days in (29, 30)
                if month == leap:
                    assert leap_days in (29, 30)
                else:
                    assert leap_days == 0

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month(self, month):
        with pytest.raises(ValueError):
            lunar_table.month_days(2023, month)


class TestYearDays:
    @pytest.mark.parametrize("year, expected", [
        (2020, 384),
        (2023, 384),
        (2024, 354),
    ])
    def test_year_days(self, year, expected):
        assert lunar_table.year_days(year) == expected

    def test_year_lengths_are_plausible(self):
        for year in range(lunar_table.MIN_YEAR, lunar_table.MAX_YEAR + 1):
            days = lunar_table.year_days(year)
            if lunar_table.leap_month(year):
                assert 383 <= days <= 385
            else:
                assert 353 <= days <= 355
