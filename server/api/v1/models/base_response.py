#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
成功响应外壳：{"success": true, "data": {...}, "error": null}

失败响应由 server/utils/exception_handler.py 直接生成，字段一致。
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class APIResponse(BaseModel):
    success: bool = Field(..., description="请求是否成功")
    data: Optional[Any] = Field(default=None, description="响应数据")
    error: Optional[str] = Field(default=None, description="错误信息")

    @classmethod
    def ok(cls, data: Any = None) -> "APIResponse":
        return cls(success=True, data=data)
