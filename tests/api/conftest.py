#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
tests/api/ 目录的 conftest：提供 client fixture

注意: 这些测试需要 fastapi 和 httpx (TestClient 依赖) 已安装
"""
import pytest

fastapi = pytest.importorskip("fastapi", reason="fastapi not installed")
pytest.importorskip("httpx", reason="httpx not installed (required for TestClient)")

from fastapi.testclient import TestClient


@pytest.fixture(scope="session")
def client():
    """创建 FastAPI TestClient"""
    from server.main import app
    return TestClient(app)
