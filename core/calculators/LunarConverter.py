#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
农历转换 - 公历转农历、节气定位

农历部分查 lunar_table 中的压缩表；节气部分用儒略日近似：
以 1900 年小寒（1900-01-06 02:05）为基点，按回归年长度加各节气的分钟偏移。
所有输入都是已经换算好时区的本地时间（CivilInstant），这里不做任何时区推断。
"""

import math
from datetime import date, datetime, timedelta
from typing import List, Tuple

from core.calculators import lunar_table
from core.calculators.calendar_models import CivilInstant, LunarDate
from core.config.calendar_constants import JIE_MONTH_INDEX, JIE_SCAN_DAYS, SOLAR_TERMS

# 阳历 1901-01-01 到农历 1901 年正月初一（1901-02-19）相隔 49 天
_FIRST_NEW_YEAR_OFFSET = 49
# 其中前 19 天属于农历 1900 年十一月（从十一月十一开始）
_LAST_MONTH_OFFSET = 19

# 1900 年小寒的儒略日（1900-01-06 02:05）
SOLAR_TERM_BASE_JD = 2415025.5 + (2 * 60 + 5) / 1440.0
TROPICAL_YEAR_DAYS = 365.2422
# 各节气相对小寒的分钟偏移
SOLAR_TERM_OFFSET_MINUTES = (
    0, 21208, 42467, 63836, 85337, 107014,
    128867, 150921, 173149, 195551, 218072, 240693,
    263343, 285989, 308563, 331033, 353350, 375494,
    397447, 419210, 440795, 462224, 483532, 504758,
)

# 儒略日 2400000.5 对应 1858-11-17 00:00（简化儒略日起点）
_MJD_EPOCH = datetime(1858, 11, 17)


class LunarConverter:
    """农历转换工具类 - 提供统一的公历转农历、节气查询方法"""

    @staticmethod
    def lunar_date(instant: CivilInstant) -> LunarDate:
        """
        公历转农历

        Args:
            instant: 本地时间

        Returns:
            LunarDate

        Raises:
            UnsupportedDateRange: 年份不在农历数据表范围内
        """
        lunar_table.check_year(instant.year)
        span = (instant.to_date() - date(lunar_table.MIN_YEAR, 1, 1)).days

        # 1901 年正月初一之前：落在农历 1900 年的十一月、十二月
        if span < _FIRST_NEW_YEAR_OFFSET:
            if span < _LAST_MONTH_OFFSET:
                return LunarDate(lunar_table.MIN_YEAR - 1, 11, 11 + span)
            return LunarDate(lunar_table.MIN_YEAR - 1, 12, span - 18)

        span -= _FIRST_NEW_YEAR_OFFSET

        # 逐年扣除
        year = lunar_table.MIN_YEAR
        days = lunar_table.year_days(year)
        while span >= days:
            span -= days
            year += 1
            days = lunar_table.year_days(year)

        # 逐月扣除，闰月紧跟在所闰月份之后
        leap = lunar_table.leap_month(year)
        month = 1
        is_leap_month = False
        days, leap_days = lunar_table.month_days(year, month)
        while span >= days:
            span -= days
            if month == leap:
                if span < leap_days:
                    is_leap_month = True
                    break
                span -= leap_days
            month += 1
            days, leap_days = lunar_table.month_days(year, month)

        return LunarDate(year, month, span + 1, is_leap_month)

    @staticmethod
    def julian_day(instant: CivilInstant) -> float:
        """儒略日（含时分秒的小数部分）"""
        year, month = instant.year, instant.month
        if month <= 2:
            year -= 1
            month += 12
        century = year // 100
        correction = 2 - century + century // 4
        fraction = (instant.hour + instant.minute / 60.0 + instant.second / 3600.0) / 24.0
        return (math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1))
                + instant.day + correction - 1524.5 + fraction)

    @staticmethod
    def day_number(instant: CivilInstant) -> int:
        """当天正午的儒略日数（整数）"""
        noon = CivilInstant(instant.year, instant.month, instant.day, 12)
        return int(round(LunarConverter.julian_day(noon)))

    @staticmethod
    def solar_term_boundary(year: int, index: int) -> float:
        """
        某年第 index 个节气（0 = 小寒）交节时刻的儒略日

        Raises:
            UnsupportedDateRange: 年份不在支持范围内
        """
        lunar_table.check_year(year)
        return _term_boundary(year, index)

    @staticmethod
    def solar_term_at(instant: CivilInstant) -> str:
        """
        当天交节的节气名称，当天不交节返回空字符串

        交节时刻落在 [当天 00:00, 次日 00:00) 内即视为当天。
        """
        lunar_table.check_year(instant.year)
        return _term_on_day(instant)

    @staticmethod
    def previous_month_term(instant: CivilInstant, max_days: int = JIE_SCAN_DAYS) -> Tuple[str, int]:
        """
        最近一个“节”（十二个月首节气之一）

        从当天开始逐日向前回溯，最多 max_days 天。

        Returns:
            (节气名称, 回溯天数)，当天即为节时回溯天数为 0
        """
        lunar_table.check_year(instant.year)
        for days_back in range(max_days + 1):
            name = _term_on_day(instant.shift_days(-days_back))
            if name in JIE_MONTH_INDEX:
                return name, days_back
        raise LookupError(f"{instant.isoformat()} 前 {max_days} 天内未找到节")

    @staticmethod
    def solar_terms_of_year(year: int) -> List[Tuple[str, CivilInstant]]:
        """某年二十四节气的交节时刻（精确到分钟）"""
        lunar_table.check_year(year)
        terms = []
        for index, name in enumerate(SOLAR_TERMS):
            moment = _MJD_EPOCH + timedelta(days=_term_boundary(year, index) - 2400000.5)
            moment = (moment + timedelta(seconds=30)).replace(second=0, microsecond=0)
            terms.append((name, CivilInstant.from_datetime(moment)))
        return terms


def _term_boundary(year: int, index: int) -> float:
    return (SOLAR_TERM_BASE_JD
            + TROPICAL_YEAR_DAYS * (year - 1900)
            + SOLAR_TERM_OFFSET_MINUTES[index] / 1440.0)


def _term_on_day(instant: CivilInstant) -> str:
    # 不做范围检查：回溯“节”时可能进入 1900 年 12 月，节气公式本身不依赖农历表
    day_jd = LunarConverter.day_number(instant)
    for index, name in enumerate(SOLAR_TERMS):
        boundary = _term_boundary(instant.year, index)
        if day_jd - 0.5 <= boundary < day_jd + 0.5:
            return name
    return ''
