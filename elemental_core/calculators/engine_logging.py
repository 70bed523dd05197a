#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
运势引擎共享日志工具

提供安全的日志处理器（捕获 Broken pipe 等异常）与日志初始化函数。
供各计算器、分析器、生成器模块共用。
"""

import logging
from typing import Optional

LOGGER_NAME = "elemental_core"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class SafeStreamHandler(logging.StreamHandler):
    """安全的 StreamHandler，捕获 Broken pipe 异常"""
    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, OSError):
            pass


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    为 elemental_core 根日志器安装 SafeStreamHandler（只安装一次）

    Args:
        level: 日志级别，为 None 时读取 EngineConfig.log_level
    """
    if level is None:
        from elemental_core.config.engine_config import get_config
        level = get_config().log_level

    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, SafeStreamHandler) for h in logger.handlers):
        handler = SafeStreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    return logger
