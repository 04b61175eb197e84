#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
运行环境与环境变量读取

ENV 优先，其次 APP_ENV，默认 local；环境名会在 /health 中返回。
"""

import os
from typing import List, Literal, Optional

Environment = Literal["local", "staging", "production"]


class EnvConfig:
    """环境检测 + 带类型的环境变量读取"""

    def __init__(self):
        value = os.getenv("ENV", os.getenv("APP_ENV", "local")).lower()
        if value in ("staging", "stage"):
            self._env: Environment = "staging"
        elif value in ("prod", "production"):
            self._env = "production"
        else:
            # dev / development 及未知值按本地处理
            self._env = "local"

    @property
    def env(self) -> Environment:
        return self._env

    @property
    def is_production(self) -> bool:
        return self._env == "production"

    def get_config(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return os.getenv(key, default)

    def get_bool_config(self, key: str, default: bool = False) -> bool:
        """true / 1 / yes / on 视为真"""
        return os.getenv(key, str(default)).lower() in ("true", "1", "yes", "on")

    def get_list_config(self, key: str, default: str = "") -> List[str]:
        """逗号分隔，去掉空项"""
        return [item.strip() for item in os.getenv(key, default).split(",") if item.strip()]


_env_config: Optional[EnvConfig] = None


def get_env_config() -> EnvConfig:
    """进程内只检测一次环境"""
    global _env_config
    if _env_config is None:
        _env_config = EnvConfig()
    return _env_config


def is_production() -> bool:
    return get_env_config().is_production
