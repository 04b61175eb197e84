#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
历法计算模块共享日志工具

提供安全的日志输出函数，捕获 Broken pipe 等异常。
供 LunarConverter / ganzhi_calculator / hexagram_generator 共用。
"""

import logging


class SafeStreamHandler(logging.StreamHandler):
    """安全的 StreamHandler，捕获 Broken pipe 异常"""
    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, OSError):
            pass


logger = logging.getLogger("core.calculators.ganzhi")
if not logger.handlers:
    handler = SafeStreamHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
}


def safe_log(level, message):
    """
    安全的日志输出函数，捕获 Broken pipe 等异常
    在 Web 服务环境中，客户端断开连接时可能触发 Broken pipe 错误
    """
    try:
        logger.log(_LEVELS.get(level, logging.INFO), message)
    except (BrokenPipeError, OSError):
        pass
