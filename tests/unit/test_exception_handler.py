#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""统一异常处理单元测试"""

import asyncio
import json

import pytest
from fastapi import HTTPException

from core.calculators.calendar_errors import InvalidDivinationInput, UnsupportedDateRange
from server.utils.exception_handler import BusinessError, ValidationError, api_error_handler


def _body(response):
    return json.loads(response.body)


class TestApiErrorHandler:
    def test_passes_result_through(self):
        @api_error_handler
        def ok():
            return {"success": True}

        assert ok() == {"success": True}

    def test_calendar_error(self):
        # Given
        @api_error_handler
        def handler():
            raise UnsupportedDateRange(1900, 1901, 2050)

        # When
        response = handler()

        # Then
        assert response.status_code == 400
        assert _body(response) == {
            "success": False,
            "error": "年份 1900 超出支持范围（1901-2050）",
            "error_type": "unsupported_date_range",
        }

    def test_validation_error_carries_field(self):
        @api_error_handler
        def handler():
            raise ValidationError("问题不能为空", field="question")

        body = _body(handler())
        assert body["error_type"] == "validation_error:question"

    def test_business_error_status(self):
        @api_error_handler
        def handler():
            raise BusinessError("not found", code=404, error_type="not_found")

        assert handler().status_code == 404

    def test_async_handler(self):
        @api_error_handler
        async def handler():
            raise InvalidDivinationInput()

        response = asyncio.run(handler())
        assert response.status_code == 400
        assert _body(response)["error_type"] == "invalid_divination_input"

    def test_unexpected_error_becomes_500(self):
        @api_error_handler(default_error="计算失败")
        def handler():
            raise RuntimeError("boom")

        response = handler()
        assert response.status_code == 500
        assert _body(response)["error_type"] == "internal_error"

    def test_http_exception_reraised(self):
        @api_error_handler
        def handler():
            raise HTTPException(status_code=404, detail="missing")

        with pytest.raises(HTTPException):
            handler()

    def test_preserves_function_name(self):
        @api_error_handler
        async def divination():
            return None

        assert divination.__name__ == "divination"
