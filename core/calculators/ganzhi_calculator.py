#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四柱干支计算

- 年柱：按农历年（正月初一换年），甲子年 = 1984
- 月柱：按“节”换月，月支自寅起，月干由年干推（年上起月）
- 日柱：世纪公式
- 时柱：时支按两小时一辰，时干由日干推（日上起时），23 点起用次日日干

年柱、日柱作为显式参数传给月柱、时柱，每次请求只算一次，不在实例上缓存。
"""

from typing import Optional

from core.calculators.bazi_logging import safe_log
from core.calculators.calendar_errors import UnsupportedDateRange
from core.calculators.calendar_models import CivilInstant, FullBaziResult, GanZhiPillar
from core.calculators.LunarConverter import LunarConverter
from core.config.calendar_constants import JIE_MONTH_INDEX


def year_pillar(instant: CivilInstant) -> GanZhiPillar:
    """年柱：农历年减 4 后分别对 10、12 取模"""
    lunar_year = LunarConverter.lunar_date(instant).year - 4
    return GanZhiPillar(lunar_year % 10, lunar_year % 12)


def month_pillar(instant: CivilInstant, year: Optional[GanZhiPillar] = None) -> GanZhiPillar:
    """
    月柱

    当天交节则取该节对应的月序，否则向前回溯最近的节。
    农历已过年但还没到立春（或已立春但农历还在腊月）时，
    年上起月所用的年干要按节气年修正，传入的年柱本身不变。

    Args:
        instant: 本地时间
        year: 同一时刻的年柱，不传则现算
    """
    if year is None:
        year = year_pillar(instant)

    term, _ = LunarConverter.previous_month_term(instant)
    month_index = JIE_MONTH_INDEX[term]
    lunar_month = LunarConverter.lunar_date(instant).month

    year_stem = year.stem_index
    if month_index == 1 and lunar_month == 12:
        # 已立春，农历仍在腊月
        year_stem += 1
    elif month_index == 12 and lunar_month == 1:
        # 农历已过年，尚未立春
        year_stem -= 1

    stem_index = (year_stem * 2 + month_index + 1) % 10
    branch_index = (month_index + 1) % 12
    return GanZhiPillar(stem_index, branch_index)


def day_pillar(instant: CivilInstant) -> GanZhiPillar:
    """
    日柱（世纪公式）

    1、2 月按上一年的 13、14 月计算；两式末尾的 -1 把结果校准为从 0 开始的索引。
    """
    century = instant.year // 100
    year = instant.year % 100
    month = instant.month
    if month <= 2:
        year -= 1
        month += 12
    parity = 6 if month % 2 == 0 else 0

    common = century // 4 + 5 * year + year // 4 + 3 * (month + 1) // 5 + instant.day
    stem_index = (4 * century + common - 3 - 1) % 10
    branch_index = (8 * century + common + 7 + parity - 1) % 12
    return GanZhiPillar(stem_index, branch_index)


def hour_pillar(instant: CivilInstant, day: Optional[GanZhiPillar] = None) -> GanZhiPillar:
    """
    时柱

    子时为 23:00-00:59。23 点属于次日的子时，时干按次日日干推算（五鼠遁），
    日柱仍取当天。

    Args:
        instant: 本地时间
        day: 同一天的日柱，不传则现算
    """
    if day is None:
        day = day_pillar(instant)

    branch_index = int((instant.hour + 1) / 2 + 0.1) % 12

    day_stem = day.stem_index + 1 if instant.hour == 23 else day.stem_index
    day_remainder = (day_stem + 1) % 5 or 5
    stem_number = ((day_remainder * 2 - 1) + (branch_index + 1) - 1) % 10 or 10
    return GanZhiPillar(stem_number - 1, branch_index)


def four_pillars(instant: CivilInstant) -> FullBaziResult:
    """
    四柱八字

    Raises:
        UnsupportedDateRange: 年份不在农历数据表范围内
    """
    try:
        year = year_pillar(instant)
        month = month_pillar(instant, year)
        day = day_pillar(instant)
        hour = hour_pillar(instant, day)
        term = LunarConverter.solar_term_at(instant)
    except UnsupportedDateRange as e:
        safe_log('warning', f"四柱计算失败: {instant.isoformat()} - {e.message}")
        raise

    result = FullBaziResult(year=year, month=month, day=day, hour=hour, solar_term=term)
    safe_log('debug', f"四柱计算: {instant.isoformat()} -> {result.format()}")
    return result


def compute_full_bazi(instant: CivilInstant) -> str:
    """格式化的四柱：'{年}年 {月}月 {日}日 {时}时'"""
    return four_pillars(instant).format()
