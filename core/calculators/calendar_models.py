# -*- coding: utf-8 -*-
"""
历法计算的值对象

全部为不可变 dataclass，一次请求构造一次，计算过程中不会被修改。
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Tuple

from core.config.calendar_constants import (
    EARTHLY_BRANCHES,
    HEAVENLY_STEMS,
    LUNAR_DAY_NAMES,
    LUNAR_MONTH_NAMES,
    ZODIAC_ANIMALS,
)


@dataclass(frozen=True)
class CivilInstant:
    """
    本地民用时间（墙上时钟）

    时区由调用方负责换算，这里只保存已经换算好的年月日时分秒。
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self):
        # 借助 datetime 校验日期合法性（如 2023-02-30 会抛出 ValueError）
        datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)

    @classmethod
    def from_datetime(cls, value: datetime) -> 'CivilInstant':
        """从 datetime 构造，忽略 tzinfo，只取墙上时钟字段"""
        return cls(value.year, value.month, value.day, value.hour, value.minute, value.second)

    @classmethod
    def from_date(cls, value: date, hour: int = 0) -> 'CivilInstant':
        return cls(value.year, value.month, value.day, hour)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_datetime(self) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)

    def shift_days(self, days: int) -> 'CivilInstant':
        """整日平移，时分秒保持不变"""
        return CivilInstant.from_datetime(self.to_datetime() + timedelta(days=days))

    def isoformat(self) -> str:
        return self.to_datetime().isoformat(sep=' ')


@dataclass(frozen=True)
class LunarDate:
    """农历日期"""
    year: int
    month: int
    day: int
    is_leap_month: bool = False

    def chinese_label(self) -> str:
        """中文写法，如 十月廿二、闰二月初一"""
        prefix = '闰' if self.is_leap_month else ''
        return f"{prefix}{LUNAR_MONTH_NAMES[self.month - 1]}月{LUNAR_DAY_NAMES[self.day - 1]}"

    @property
    def zodiac(self) -> str:
        """生肖（按农历年）"""
        return ZODIAC_ANIMALS[(self.year - 4) % 12]

    def to_dict(self) -> dict:
        return {
            'year': self.year,
            'month': self.month,
            'day': self.day,
            'is_leap_month': self.is_leap_month,
            'label': self.chinese_label(),
        }


@dataclass(frozen=True)
class GanZhiPillar:
    """干支一柱，索引构造时即归一到 [0,10) / [0,12)"""
    stem_index: int
    branch_index: int

    def __post_init__(self):
        object.__setattr__(self, 'stem_index', self.stem_index % 10)
        object.__setattr__(self, 'branch_index', self.branch_index % 12)

    @property
    def stem(self) -> str:
        return HEAVENLY_STEMS[self.stem_index]

    @property
    def branch(self) -> str:
        return EARTHLY_BRANCHES[self.branch_index]

    def __str__(self) -> str:
        return self.stem + self.branch

    def to_dict(self) -> dict:
        return {'stem': self.stem, 'branch': self.branch, 'ganzhi': str(self)}


@dataclass(frozen=True)
class FullBaziResult:
    """四柱八字"""
    year: GanZhiPillar
    month: GanZhiPillar
    day: GanZhiPillar
    hour: GanZhiPillar
    solar_term: str = ''

    def format(self) -> str:
        return f"{self.year}年 {self.month}月 {self.day}日 {self.hour}时"

    def to_dict(self) -> dict:
        return {
            'year': self.year.to_dict(),
            'month': self.month.to_dict(),
            'day': self.day.to_dict(),
            'hour': self.hour.to_dict(),
            'solar_term': self.solar_term,
            'text': self.format(),
        }


@dataclass(frozen=True)
class HexagramResult:
    """小六壬起卦结果"""
    numbers: Tuple[int, int, int]
    indices: Tuple[int, int, int]
    words: Tuple[str, str, str]

    @property
    def text(self) -> str:
        return ' '.join(self.words)

    def __str__(self) -> str:
        return self.text
