#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
小六壬起卦 API - 报三个数起卦，附带起卦时刻的四柱
"""

import asyncio
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from server.api.v1.models.base_response import APIResponse
from server.services.divination_service import DivinationService
from server.utils.exception_handler import api_error_handler

router = APIRouter()

# 线程池
cpu_count = os.cpu_count() or 4
max_workers = min(cpu_count * 2, 100)
executor = ThreadPoolExecutor(max_workers=max_workers)


class ClientTime(BaseModel):
    """客户端时间"""
    ts: Optional[float] = Field(None, description="毫秒时间戳（Date.now()）", example=1765425600000)
    tz_offset: Optional[float] = Field(None, description="Date#getTimezoneOffset()，单位分钟", example=-480)
    timezone: Optional[str] = Field(None, description="IANA 时区名（可选，优先于 tz_offset）", example="Asia/Shanghai")


class DivinationRequest(BaseModel):
    """起卦请求模型"""
    # 数字合法性交给服务层校验，保证错误格式与其它业务错误一致
    numbers: Any = Field(None, description="三个整数", example=[3, 5, 2])
    question: str = Field("", description="所问之事", example="这次面试能过吗？")
    client_time: Optional[ClientTime] = Field(None, alias="clientTime", description="客户端时间")

    class Config:
        allow_population_by_field_name = True


@router.post("/divination", summary="小六壬起卦")
@api_error_handler
async def divination(request: DivinationRequest):
    """
    小六壬起卦

    - **numbers**: 三个整数
    - **question**: 所问之事
    - **clientTime**: 客户端时间（可选），缺省按服务器默认时区的当前时间

    返回卦象（如 "速喜 大安 留连"）、起卦时刻的四柱、农历日期和节气
    """
    client_time = None
    if request.client_time is not None:
        client_time = request.client_time.dict()

    loop = asyncio.get_event_loop()
    result = await loop.run_in_executor(
        executor,
        DivinationService.divinate,
        request.numbers,
        request.question,
        client_time
    )
    return APIResponse.ok(data=result)
