#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
客户端时间解析

前端上传 {ts, tz_offset[, timezone]}：
- ts：Date.now() 生成的毫秒时间戳（UTC）
- tz_offset：Date#getTimezoneOffset()，单位分钟，含义为 UTC - 本地
- timezone：可选的 IANA 时区名（如 "Asia/Shanghai"），优先于 tz_offset

服务器可能运行在任意时区，这里统一还原为用户本地的墙上时间（CivilInstant），
历法计算部分不再做任何时区推断。
"""

import logging
import math
from datetime import datetime, timedelta
from numbers import Real
from typing import Any, Dict, Optional

import pytz

from core.calculators.calendar_models import CivilInstant

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "Asia/Shanghai"

_DATETIME_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%d",
)


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def now_in_timezone(timezone_str: str = DEFAULT_TIMEZONE) -> CivilInstant:
    """指定时区的当前墙上时间"""
    return CivilInstant.from_datetime(datetime.now(pytz.timezone(timezone_str)))


def resolve_client_time(client_time: Optional[Dict[str, Any]],
                        default_timezone: str = DEFAULT_TIMEZONE) -> CivilInstant:
    """
    根据客户端上传的时间信息还原用户本地时间

    Args:
        client_time: {"ts": 毫秒时间戳, "tz_offset": 分钟, "timezone": 可选时区名}
        default_timezone: 参数缺失或非法时使用的时区

    Returns:
        CivilInstant（用户本地墙上时间）
    """
    if not client_time or not _is_finite_number(client_time.get("ts")):
        return now_in_timezone(default_timezone)

    try:
        utc_dt = datetime(1970, 1, 1, tzinfo=pytz.UTC) + timedelta(milliseconds=client_time["ts"])
    except OverflowError:
        logger.warning(f"客户端时间戳超出范围: {client_time['ts']!r}，改用服务器当前时间")
        return now_in_timezone(default_timezone)

    timezone_str = client_time.get("timezone")
    if timezone_str:
        try:
            return CivilInstant.from_datetime(utc_dt.astimezone(pytz.timezone(timezone_str)))
        except pytz.UnknownTimeZoneError:
            logger.warning(f"未知时区 {timezone_str!r}，改用 tz_offset")

    tz_offset = client_time.get("tz_offset")
    if _is_finite_number(tz_offset):
        try:
            return CivilInstant.from_datetime(utc_dt - timedelta(minutes=tz_offset))
        except OverflowError:
            logger.warning(f"客户端时区偏移超出范围: {tz_offset!r}，改用服务器当前时间")
            return now_in_timezone(default_timezone)

    logger.info(f"客户端未提供时区信息，按 {default_timezone} 换算")
    return CivilInstant.from_datetime(utc_dt.astimezone(pytz.timezone(default_timezone)))


def parse_local_datetime(text: str) -> CivilInstant:
    """
    解析本地时间字符串

    支持 YYYY-MM-DD、YYYY-MM-DD HH:MM、YYYY-MM-DD HH:MM:SS（日期时间之间可用 T）

    Raises:
        ValueError: 格式不正确
    """
    value = (text or "").strip()
    for fmt in _DATETIME_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        # 只给日期时按正午计算
        if fmt == "%Y-%m-%d":
            parsed = parsed.replace(hour=12)
        return CivilInstant.from_datetime(parsed)
    raise ValueError(f"时间格式错误: {text}，应为 YYYY-MM-DD HH:MM[:SS]")
