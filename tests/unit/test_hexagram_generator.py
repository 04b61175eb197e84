#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""小六壬起卦单元测试"""

import pytest

from core.calculators.calendar_errors import InvalidDivinationInput
from core.calculators.hexagram_generator import (
    compute_hexagram,
    generate_hexagram,
    validate_numbers,
)
from core.config.calendar_constants import XIAO_LIU_REN_WORDS


class TestComputeHexagram:
    @pytest.mark.parametrize("numbers, expected", [
        ((3, 5, 2), "速喜 大安 留连"),
        ((1, 1, 1), "大安 大安 大安"),
        ((6, 6, 6), "空亡 小吉 赤口"),
        ((12, 1, 1), "空亡 空亡 空亡"),
        ((2, 3, 4), "留连 赤口 大安"),
    ])
    def test_known_results(self, numbers, expected):
        assert compute_hexagram(*numbers) == expected

    def test_periodic_in_six(self):
        """测试：任一数字加 6 结果不变"""
        base = compute_hexagram(3, 5, 2)
        assert compute_hexagram(9, 5, 2) == base
        assert compute_hexagram(3, 11, 2) == base
        assert compute_hexagram(3, 5, 8) == base

    def test_large_numbers(self):
        words = compute_hexagram(10 ** 12, 7, 999999).split(' ')
        assert len(words) == 3
        assert all(word in XIAO_LIU_REN_WORDS for word in words)

    def test_integral_floats_accepted(self):
        assert compute_hexagram(3.0, 5, 2) == "速喜 大安 留连"

    @pytest.mark.parametrize("numbers, expected", [
        ((0, 1, 1), "空亡 空亡 空亡"),
        ((-1, 2, 3), "小吉 空亡 留连"),
        ((0, 0, 0), "空亡 小吉 赤口"),
    ])
    def test_zero_and_negative_accepted(self, numbers, expected):
        """测试：0 与负数按对 6 取模落宫"""
        assert compute_hexagram(*numbers) == expected

    @pytest.mark.parametrize("numbers", [
        (1, 2.5, 3),
        (1, float("nan"), 3),
        (1, float("inf"), 3),
        (1, True, 3),
        (1, "2", 3),
        (1, None, 3),
    ])
    def test_invalid_numbers(self, numbers):
        with pytest.raises(InvalidDivinationInput) as exc_info:
            compute_hexagram(*numbers)
        assert exc_info.value.error_type == "invalid_divination_input"
        assert exc_info.value.code == 400


class TestGenerateHexagram:
    def test_result_fields(self):
        result = generate_hexagram(3, 5, 2)
        assert result.numbers == (3, 5, 2)
        assert result.indices == (3, 1, 2)
        assert result.words == ("速喜", "大安", "留连")
        assert str(result) == "速喜 大安 留连"

    def test_indices_in_range(self):
        for n1 in range(1, 8):
            for n2 in range(1, 8):
                for n3 in range(1, 8):
                    assert all(1 <= index <= 6 for index in generate_hexagram(n1, n2, n3).indices)


class TestValidateNumbers:
    def test_list_input(self):
        assert validate_numbers([3, 5, 2]) == (3, 5, 2)

    @pytest.mark.parametrize("values", [
        None,
        "352",
        [],
        [1, 2],
        [1, 2, 3, 4],
    ])
    def test_wrong_shape(self, values):
        with pytest.raises(InvalidDivinationInput):
            validate_numbers(values)

    @pytest.mark.parametrize("values", [5, 3.5, {"a": 1}])
    def test_not_a_sequence(self, values):
        with pytest.raises(InvalidDivinationInput):
            validate_numbers(values)
