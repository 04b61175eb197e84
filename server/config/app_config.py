#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一应用配置管理
所有配置统一从这里读取，避免配置分散
"""

from dataclasses import dataclass, field
from typing import List, Optional

import pytz

from server.config.env_config import get_env_config


@dataclass
class CalendarConfig:
    """历法计算配置"""
    default_timezone: str = 'Asia/Shanghai'

    @classmethod
    def from_env(cls) -> 'CalendarConfig':
        """从环境变量创建配置"""
        env_config = get_env_config()
        timezone_str = env_config.get_config('CALENDAR_DEFAULT_TIMEZONE', default='Asia/Shanghai')
        # 启动时校验时区名，配置错误尽早暴露
        pytz.timezone(timezone_str)
        return cls(default_timezone=timezone_str)


@dataclass
class AppConfig:
    """应用配置"""
    env: str = 'local'
    debug: bool = False
    log_level: str = 'INFO'
    cors_origins: List[str] = field(default_factory=lambda: ['*'])

    # 子配置
    calendar: CalendarConfig = None

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """从环境变量创建完整配置"""
        env_config = get_env_config()
        config = cls(
            env=env_config.env,
            debug=env_config.get_bool_config('DEBUG', default=False),
            log_level=env_config.get_config('LOG_LEVEL', default='INFO').upper(),
            cors_origins=env_config.get_list_config('CORS_ORIGINS', default='*'),
        )
        config.calendar = CalendarConfig.from_env()
        return config


# 全局配置实例（单例模式）
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """获取全局配置实例（单例）"""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config
