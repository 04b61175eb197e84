#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
万年历API接口 - 本地计算农历、节气和四柱
"""

import asyncio
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from server.api.v1.models.base_response import APIResponse
from server.services.calendar_service import CalendarService
from server.utils.exception_handler import api_error_handler

router = APIRouter()

cpu_count = os.cpu_count() or 4
max_workers = min(cpu_count * 2, 100)
executor = ThreadPoolExecutor(max_workers=max_workers)


class GanZhiRequest(BaseModel):
    """干支查询请求模型"""
    datetime: Optional[str] = Field(
        None,
        description="本地时间（可选，默认为当前时间），格式：YYYY-MM-DD HH:MM[:SS]",
        example="2025-12-11 12:00"
    )


@router.post("/calendar/ganzhi", summary="查询干支历")
@api_error_handler
async def query_ganzhi(request: GanZhiRequest):
    """
    查询指定时刻的干支历信息，包括：
    - 公历时间与星期
    - 农历日期（含闰月标记）与生肖
    - 当天交节的节气
    - 四柱八字

    - **datetime**: 本地时间（可选），只给日期时按正午计算
    """
    loop = asyncio.get_event_loop()
    result = await loop.run_in_executor(
        executor,
        CalendarService().get_calendar,
        request.datetime
    )
    return APIResponse.ok(data=result)


@router.get("/calendar/solar-terms/{year}", summary="查询全年节气")
@api_error_handler
async def get_solar_terms(year: int):
    """
    查询某年二十四节气的交节时刻（从小寒开始，精确到分钟）
    """
    loop = asyncio.get_event_loop()
    result = await loop.run_in_executor(executor, CalendarService.get_solar_terms, year)
    return APIResponse.ok(data=result)
