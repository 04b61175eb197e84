#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
小六壬起卦 - 三数起卦

六神依次为 大安、留连、速喜、赤口、小吉、空亡。
第一个数定月上，第二个数从月上起数到日上，第三个数从日上起数到时上；
每次从上一宫起数，所以后两宫各要减去重复计入的一宫。
"""

import math
from numbers import Integral, Real
from typing import Iterable, Tuple

from core.calculators.bazi_logging import safe_log
from core.calculators.calendar_errors import InvalidDivinationInput
from core.calculators.calendar_models import HexagramResult
from core.config.calendar_constants import XIAO_LIU_REN_WORDS


def _palace(value: int) -> int:
    """对 6 取模，0 记为第 6 宫"""
    return value % 6 or 6


def validate_numbers(values: Iterable) -> Tuple[int, int, int]:
    """
    校验起卦数字

    必须恰好 3 个有限整数（0 与负数按对 6 取模落宫）；整数值的浮点数（如 3.0）按整数处理，
    布尔值、字符串、带小数的数、NaN、无穷大一律拒绝。

    Raises:
        InvalidDivinationInput
    """
    if values is None or isinstance(values, (str, bytes)):
        raise InvalidDivinationInput("起卦数字必须是包含 3 个整数的列表")
    try:
        values = list(values)
    except TypeError:
        raise InvalidDivinationInput("起卦数字必须是包含 3 个整数的列表")
    if len(values) != 3:
        raise InvalidDivinationInput(f"起卦需要 3 个数字，实际收到 {len(values)} 个")

    numbers = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidDivinationInput(f"起卦数字必须是整数: {value!r}")
        if not isinstance(value, Integral):
            if not math.isfinite(value) or value != int(value):
                raise InvalidDivinationInput(f"起卦数字必须是有限整数: {value!r}")
        numbers.append(int(value))
    return tuple(numbers)


def generate_hexagram(n1: int, n2: int, n3: int) -> HexagramResult:
    """
    三数起卦

    Args:
        n1, n2, n3: 调用方已校验过的整数

    Returns:
        HexagramResult，indices 为 1 起的宫位
    """
    indices = (
        _palace(n1),
        _palace(n1 + n2 - 1),
        _palace(n1 + n2 + n3 - 2),
    )
    words = tuple(XIAO_LIU_REN_WORDS[index - 1] for index in indices)
    result = HexagramResult(numbers=(n1, n2, n3), indices=indices, words=words)
    safe_log('debug', f"小六壬起卦: {result.numbers} -> {result.text}")
    return result


def compute_hexagram(n1: int, n2: int, n3: int) -> str:
    """
    起卦结果文本，如 compute_hexagram(3, 5, 2) -> '速喜 大安 留连'

    Raises:
        InvalidDivinationInput: 参数不是 3 个整数
    """
    return generate_hexagram(*validate_numbers((n1, n2, n3))).text
