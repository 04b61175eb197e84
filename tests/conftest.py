#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 共享 fixtures
- 测试钩子
"""

import os
import sys
from typing import Any, Dict

import pytest

# 添加项目根目录到路径
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)


# ==================== 应用和客户端 Fixtures ====================

@pytest.fixture(scope="session")
def app():
    """
    创建 FastAPI 应用实例（整个测试会话共享）

    Returns:
        FastAPI 应用实例
    """
    from server.main import app
    return app


@pytest.fixture(scope="session")
def client(app):
    """
    创建测试客户端（整个测试会话共享）

    Returns:
        TestClient 实例
    """
    from fastapi.testclient import TestClient
    return TestClient(app)


# ==================== 数据 Fixtures ====================

@pytest.fixture(scope="function")
def sample_datetime() -> str:
    """
    示例本地时间

    Returns:
        时间字符串 YYYY-MM-DD HH:MM
    """
    return "2025-12-11 12:00"


@pytest.fixture(scope="function")
def sample_client_time() -> Dict[str, Any]:
    """
    示例客户端时间：北京时间 2025-12-11 12:00

    Returns:
        {"ts", "tz_offset"}
    """
    # 2025-12-11 04:00:00 UTC
    return {"ts": 1765425600000, "tz_offset": -480}


@pytest.fixture(scope="function")
def sample_divination_request(sample_client_time) -> Dict[str, Any]:
    """
    示例起卦请求

    Returns:
        起卦请求字典
    """
    return {
        "numbers": [3, 5, 2],
        "question": "这次面试能过吗？",
        "clientTime": sample_client_time,
    }


@pytest.fixture(scope="function")
def expected_calendar_data() -> Dict[str, Any]:
    """
    预期干支历数据（2025-12-11 12:00）

    Returns:
        预期数据字典
    """
    return {
        "lunar_label": "十月廿二",
        "zodiac": "蛇",
        "bazi": "乙巳年 戊子月 甲寅日 庚午时",
        "ganzhi": {
            "year": "乙巳",
            "month": "戊子",
            "day": "甲寅",
            "hour": "庚午"
        }
    }


# ==================== Service Fixtures ====================

@pytest.fixture(scope="function")
def calendar_service():
    """
    万年历服务实例

    Returns:
        CalendarService 实例
    """
    from server.services.calendar_service import CalendarService
    return CalendarService(default_timezone="Asia/Shanghai")


# ==================== Pytest Hooks ====================

def pytest_configure(config):
    """
    pytest 配置钩子

    在 pytest 初始化时调用
    """
    config.addinivalue_line("markers", "slow: 标记为慢速测试，可通过 -m 'not slow' 跳过")
    config.addinivalue_line("markers", "baseline: 与 lunar_python 对照的基线测试")
    config.addinivalue_line("markers", "unit: 单元测试")
    config.addinivalue_line("markers", "api: API 测试")


def pytest_collection_modifyitems(config, items):
    """
    修改测试收集

    根据路径自动添加标记
    """
    for item in items:
        if "baseline" in item.nodeid:
            item.add_marker(pytest.mark.baseline)
        elif "unit" in item.nodeid:
            item.add_marker(pytest.mark.unit)
        elif "api" in item.nodeid:
            item.add_marker(pytest.mark.api)
