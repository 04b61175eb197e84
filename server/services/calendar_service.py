#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
万年历服务 - 本地计算

查询指定时刻的农历日期、节气和四柱，以及某年的二十四节气交节时刻。
"""

import logging
from typing import Any, Dict, Optional

from core.calculators.ganzhi_calculator import four_pillars
from core.calculators.LunarConverter import LunarConverter
from server.config.app_config import get_config
from server.utils.client_time import now_in_timezone, parse_local_datetime
from server.utils.exception_handler import ValidationError

logger = logging.getLogger(__name__)


class CalendarService:
    """万年历服务"""

    WEEKDAY_MAP = ['星期一', '星期二', '星期三', '星期四', '星期五', '星期六', '星期日']

    def __init__(self, default_timezone: Optional[str] = None):
        self.default_timezone = default_timezone or get_config().calendar.default_timezone

    def get_calendar(self, datetime_str: Optional[str] = None) -> Dict[str, Any]:
        """
        查询万年历信息

        Args:
            datetime_str: 本地时间 YYYY-MM-DD HH:MM[:SS]，不传则取默认时区的当前时间

        Returns:
            公历时间、星期、农历日期、生肖、节气和四柱

        Raises:
            ValidationError: 时间格式错误
            UnsupportedDateRange: 年份超出支持范围
        """
        if datetime_str:
            try:
                instant = parse_local_datetime(datetime_str)
            except ValueError as e:
                raise ValidationError(str(e), field="datetime")
        else:
            instant = now_in_timezone(self.default_timezone)

        bazi = four_pillars(instant)
        lunar = LunarConverter.lunar_date(instant)

        return {
            'datetime': instant.isoformat(),
            'weekday': self.WEEKDAY_MAP[instant.to_date().weekday()],
            'lunar_date': lunar.to_dict(),
            'zodiac': lunar.zodiac,
            'solar_term': bazi.solar_term,
            'ganzhi': bazi.to_dict(),
            'bazi': bazi.format(),
        }

    @staticmethod
    def get_solar_terms(year: int) -> Dict[str, Any]:
        """
        某年二十四节气（从小寒开始）

        Raises:
            UnsupportedDateRange: 年份超出支持范围
        """
        terms = LunarConverter.solar_terms_of_year(year)
        logger.debug(f"节气查询: {year} 年共 {len(terms)} 个节气")
        return {
            'year': year,
            'terms': [
                {'name': name, 'datetime': moment.isoformat()}
                for name, moment in terms
            ],
        }
