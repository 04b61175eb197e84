#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一异常处理

- BusinessError：服务层的请求错误（参数缺失等）
- CalendarError：历法计算抛出的确定性错误（年份超范围、起卦数字非法）
两者都带 message / code / error_type，统一转换为
{"success": false, "error": ..., "error_type": ...} 响应。
"""

import asyncio
import functools
import logging
import traceback
from typing import Any, Callable, Tuple, Type

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from core.calculators.calendar_errors import CalendarError
from server.config.env_config import is_production

logger = logging.getLogger(__name__)


# ==================== 自定义业务异常 ====================

class BusinessError(Exception):
    """
    业务异常基类

    用于表示业务逻辑错误，与系统错误区分开来。
    """
    def __init__(self, message: str, code: int = 400, error_type: str = "business_error"):
        self.message = message
        self.code = code
        self.error_type = error_type
        super().__init__(message)


class ValidationError(BusinessError):
    """参数验证错误"""
    def __init__(self, message: str, field: str = None):
        self.field = field
        error_type = f"validation_error:{field}" if field else "validation_error"
        super().__init__(message, code=400, error_type=error_type)


_EXPECTED_ERRORS = (BusinessError, CalendarError)


def _error_response(e) -> JSONResponse:
    return JSONResponse(
        status_code=e.code,
        content={
            "success": False,
            "error": e.message,
            "error_type": e.error_type
        }
    )


def _internal_error_response(e: Exception, default_error: str) -> JSONResponse:
    # 生产环境不暴露详细错误信息
    error_msg = default_error if is_production() else f"错误: {str(e)}"
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": error_msg,
            "error_type": "internal_error"
        }
    )


class ExceptionHandlerMiddleware(BaseHTTPMiddleware):
    """异常处理中间件，兜底路由里没有处理的异常"""

    async def dispatch(self, request: Request, call_next: Callable) -> Any:
        try:
            return await call_next(request)
        except HTTPException:
            raise
        except _EXPECTED_ERRORS as e:
            logger.warning(f"请求失败 [{request.url.path}]: {e.message}")
            return _error_response(e)
        except ValueError as e:
            logger.warning(f"参数验证错误: {str(e)}")
            return JSONResponse(
                status_code=400,
                content={
                    "success": False,
                    "error": str(e),
                    "error_type": "validation_error"
                }
            )
        except Exception as e:
            logger.error(f"未处理的异常: {str(e)}\n{traceback.format_exc()}")
            return _internal_error_response(e, "服务器内部错误，请稍后重试")


# ==================== API 错误处理装饰器 ====================

def api_error_handler(
    func: Callable = None,
    *,
    catch: Tuple[Type[Exception], ...] = (Exception,),
    default_error: str = "服务器内部错误",
    log_errors: bool = True
):
    """
    API 错误处理装饰器

    使用示例：
    ```python
    @router.post("/divination")
    @api_error_handler
    async def divination(request: DivinationRequest):
        ...
    ```
    """
    def decorator(fn):
        @functools.wraps(fn)
        async def async_wrapper(*args, **kwargs):
            try:
                return await fn(*args, **kwargs)
            except _EXPECTED_ERRORS as e:
                if log_errors:
                    logger.warning(f"业务异常 [{fn.__name__}]: {e.message}")
                return _error_response(e)
            except HTTPException:
                raise
            except catch as e:
                if log_errors:
                    logger.error(f"API 错误 [{fn.__name__}]: {e}", exc_info=True)
                return _internal_error_response(e, default_error)

        @functools.wraps(fn)
        def sync_wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except _EXPECTED_ERRORS as e:
                if log_errors:
                    logger.warning(f"业务异常 [{fn.__name__}]: {e.message}")
                return _error_response(e)
            except HTTPException:
                raise
            except catch as e:
                if log_errors:
                    logger.error(f"API 错误 [{fn.__name__}]: {e}", exc_info=True)
                return _internal_error_response(e, default_error)

        if asyncio.iscoroutinefunction(fn):
            return async_wrapper
        return sync_wrapper

    # 支持 @api_error_handler 和 @api_error_handler(...) 两种用法
    if func is not None:
        return decorator(func)
    return decorator
