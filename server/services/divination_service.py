#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
小六壬起卦服务

用户报三个数起卦，同时记录起卦时刻的四柱、农历日期和节气，
供前端展示和后续解读使用。
"""

import logging
from typing import Any, Dict, Iterable, Optional

from core.calculators.ganzhi_calculator import four_pillars
from core.calculators.hexagram_generator import generate_hexagram, validate_numbers
from core.calculators.LunarConverter import LunarConverter
from server.config.app_config import get_config
from server.utils.client_time import resolve_client_time
from server.utils.exception_handler import ValidationError

logger = logging.getLogger(__name__)


class DivinationService:
    """起卦服务"""

    @staticmethod
    def divinate(numbers: Iterable, question: str,
                 client_time: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        起卦

        Args:
            numbers: 用户报的三个整数
            question: 所问之事
            client_time: 客户端时间 {"ts", "tz_offset", "timezone"}

        Returns:
            {"question", "hexagram", "time", "lunar_date", "solar_term"}

        Raises:
            ValidationError: 问题为空
            InvalidDivinationInput: 数字不合法
            UnsupportedDateRange: 起卦时刻超出支持的年份
        """
        question = (question or '').strip()
        if not question:
            raise ValidationError("问题不能为空", field="question")

        n1, n2, n3 = validate_numbers(numbers)
        instant = resolve_client_time(client_time, get_config().calendar.default_timezone)

        bazi = four_pillars(instant)
        hexagram = generate_hexagram(n1, n2, n3)
        lunar = LunarConverter.lunar_date(instant)

        logger.info(f"起卦: {instant.isoformat()} 数字={hexagram.numbers} -> {hexagram.text}")
        return {
            'question': question,
            'hexagram': hexagram.text,
            'time': bazi.format(),
            'lunar_date': lunar.to_dict(),
            'solar_term': bazi.solar_term,
        }
