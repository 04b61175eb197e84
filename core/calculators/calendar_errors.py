# -*- coding: utf-8 -*-
"""
历法计算异常

两类错误都是确定性的本地错误，重试没有意义，直接抛给调用方处理。
"""


class CalendarError(Exception):
    """
    历法计算异常基类

    与服务层的 BusinessError 结构一致（message / code / error_type），
    便于 API 层统一转换为错误响应。
    """
    def __init__(self, message: str, code: int = 400, error_type: str = "calendar_error"):
        self.message = message
        self.code = code
        self.error_type = error_type
        super().__init__(message)


class UnsupportedDateRange(CalendarError):
    """年份超出农历数据表覆盖范围"""
    def __init__(self, year: int, min_year: int, max_year: int):
        self.year = year
        self.min_year = min_year
        self.max_year = max_year
        super().__init__(
            f"年份 {year} 超出支持范围（{min_year}-{max_year}）",
            code=400,
            error_type="unsupported_date_range",
        )


class InvalidDivinationInput(CalendarError):
    """起卦数字不合法（数量不是 3 个，或不是有限整数）"""
    def __init__(self, message: str = "起卦需要 3 个整数"):
        super().__init__(message, code=400, error_type="invalid_divination_input")
