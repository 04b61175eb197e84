# -*- coding: utf-8 -*-
"""
农历数据表（1901-2050）

LUNAR_MONTH_DAYS：每年一个 16 位整数，当年 12（或 13）个月按顺序占用
第 15、14、13 ... 位，闰月紧跟在它所闰的月份之后；位为 1 表示大月 30 天，
为 0 表示小月 29 天。

LUNAR_LEAP_MONTHS：每字节存两年的闰月月份，高 4 位为偶数偏移年，
低 4 位为奇数偏移年，0 表示当年无闰月。

两张表在进程启动时即为常量，只读共享，无需加锁。
"""

from typing import Tuple

from core.calculators.calendar_errors import UnsupportedDateRange

MIN_YEAR = 1901

LUNAR_MONTH_DAYS = (
    0x4ae0, 0xa570, 0x5268, 0xd260, 0xd950, 0x6aa8, 0x56a0, 0x9ad0, 0x4ae8, 0x4ae0,  # 1901-1910
    0xa4d8, 0xa4d0, 0xd250, 0xd528, 0xb540, 0xd6a0, 0x96d0, 0x95b0, 0x49b8, 0x4970,  # 1911-1920
    0xa4b0, 0xb258, 0x6a50, 0x6d40, 0xada8, 0x2b60, 0x9570, 0x4978, 0x4970, 0x64b0,  # 1921-1930
    0xd4a0, 0xea50, 0x6d48, 0x5ad0, 0x2b60, 0x9370, 0x92e0, 0xc968, 0xc950, 0xd4a0,  # 1931-1940
    0xda50, 0xb550, 0x56a0, 0xaad8, 0x25d0, 0x92d0, 0xc958, 0xa950, 0xb4a8, 0x6ca0,  # 1941-1950
    0xb550, 0x55a8, 0x4da0, 0xa5b0, 0x52b8, 0x52b0, 0xa950, 0xe950, 0x6aa0, 0xad50,  # 1951-1960
    0xab50, 0x4b60, 0xa570, 0xa570, 0x5260, 0xe930, 0xd950, 0x5aa8, 0x56a0, 0x96d0,  # 1961-1970
    0x4ae8, 0x4ad0, 0xa4d0, 0xd268, 0xd250, 0xd528, 0xb540, 0xb6a0, 0x96d0, 0x95b0,  # 1971-1980
    0x49b0, 0xa4b8, 0xa4b0, 0xb258, 0x6a50, 0x6d40, 0xada0, 0xab60, 0x9570, 0x4978,  # 1981-1990
    0x4970, 0x64b0, 0x6a50, 0xea50, 0x6b28, 0x5ac0, 0xab60, 0x9368, 0x92e0, 0xc960,  # 1991-2000
    0xd4a8, 0xd4a0, 0xda50, 0x5aa8, 0x56a0, 0xaad8, 0x25d0, 0x92d0, 0xc958, 0xa950,  # 2001-2010
    0xb4a0, 0xb550, 0xad50, 0x55a8, 0x4ba0, 0xa5b0, 0x52b8, 0x52b0, 0xa930, 0x74a8,  # 2011-2020
    0x6aa0, 0xad50, 0x4da8, 0x4b60, 0xa570, 0xa4e0, 0xd260, 0xe930, 0xd530, 0x5aa0,  # 2021-2030
    0x6b50, 0x96d0, 0x4ae8, 0x4ad0, 0xa4d0, 0xd258, 0xd250, 0xd520, 0xdaa0, 0xb5a0,  # 2031-2040
    0x56d0, 0x4ad8, 0x49b0, 0xa4b8, 0xa4b0, 0xaa50, 0xb528, 0x6d20, 0xada0, 0x55b0,  # 2041-2050
)

LUNAR_LEAP_MONTHS = (
    0x00, 0x50, 0x04, 0x00, 0x20,  # 1901-1910
    0x60, 0x05, 0x00, 0x20, 0x70,  # 1911-1920
    0x05, 0x00, 0x40, 0x02, 0x06,  # 1921-1930
    0x00, 0x50, 0x03, 0x07, 0x00,  # 1931-1940
    0x60, 0x04, 0x00, 0x20, 0x70,  # 1941-1950
    0x05, 0x00, 0x30, 0x80, 0x06,  # 1951-1960
    0x00, 0x40, 0x03, 0x07, 0x00,  # 1961-1970
    0x50, 0x04, 0x08, 0x00, 0x60,  # 1971-1980
    0x04, 0x0a, 0x00, 0x60, 0x05,  # 1981-1990
    0x00, 0x30, 0x80, 0x05, 0x00,  # 1991-2000
    0x40, 0x02, 0x07, 0x00, 0x50,  # 2001-2010
    0x04, 0x09, 0x00, 0x60, 0x04,  # 2011-2020
    0x00, 0x20, 0x60, 0x05, 0x00,  # 2021-2030
    0x30, 0xb0, 0x06, 0x00, 0x50,  # 2031-2040
    0x02, 0x07, 0x00, 0x50, 0x03,  # 2041-2050
)

MAX_YEAR = MIN_YEAR + len(LUNAR_MONTH_DAYS) - 1


def is_supported_year(year: int) -> bool:
    return MIN_YEAR <= year <= MAX_YEAR


def check_year(year: int) -> None:
    """年份不在数据表范围内时抛出 UnsupportedDateRange"""
    if not is_supported_year(year):
        raise UnsupportedDateRange(year, MIN_YEAR, MAX_YEAR)


def leap_month(year: int) -> int:
    """当年闰几月，0 表示无闰月"""
    check_year(year)
    offset = year - MIN_YEAR
    flag = LUNAR_LEAP_MONTHS[offset // 2]
    return flag & 0x0f if offset % 2 else flag >> 4


def month_days(year: int, month: int) -> Tuple[int, int]:
    """
    农历某月天数

    Args:
        year: 农历年
        month: 农历月（1-12）

    Returns:
        (本月天数, 闰月天数)；该月不是闰月所在月份时闰月天数为 0
    """
    check_year(year)
    if not 1 <= month <= 12:
        raise ValueError(f"农历月份必须在 1-12 之间: {month}")

    leap = leap_month(year)
    bits = LUNAR_MONTH_DAYS[year - MIN_YEAR]

    bit = 16 - month
    if leap and month > leap:
        bit -= 1

    days = 30 if bits & (1 << bit) else 29
    leap_days = 0
    if month == leap:
        leap_days = 30 if bits & (1 << (bit - 1)) else 29
    return days, leap_days


def year_days(year: int) -> int:
    """农历一年的总天数（含闰月）"""
    return sum(sum(month_days(year, month)) for month in range(1, 13))
