#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一引擎配置管理
所有配置统一从这里读取，避免配置分散

环境变量：
- FORTUNE_ENV / ENV          运行环境（默认 local）
- FORTUNE_LOG_LEVEL          日志级别（默认 INFO）
- FORTUNE_TABLES_PATH        查找表覆盖文件（JSON，可选）
- FORTUNE_WEEKLY_DAYS        周运势默认天数（默认 7）
- FORTUNE_STABLE_SEED        未注入随机源时是否按生日+日期固定种子（默认 false）
- FORTUNE_PERTURBATION       分类分数随机扰动幅度（0-8，默认 8）
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from elemental_core.config.fortune_tables import MAX_PERTURBATION

logger = logging.getLogger(__name__)


def _get_bool_env(key: str, default: bool = False) -> bool:
    """获取布尔类型环境变量"""
    value = os.getenv(key, str(default)).lower()
    return value in ("true", "1", "yes", "on")


def _get_int_env(key: str, default: int) -> int:
    """获取整数类型环境变量，非法值回退默认值"""
    value = os.getenv(key)
    if value is None or value.strip() == '':
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"⚠️ 环境变量 {key}={value!r} 不是有效整数，使用默认值 {default}")
        return default


@dataclass
class EngineConfig:
    """引擎配置"""
    env: str = 'local'
    log_level: str = 'INFO'
    tables_path: Optional[str] = None
    weekly_days: int = 7
    stable_seed: bool = False
    perturbation: int = MAX_PERTURBATION

    @classmethod
    def from_env(cls) -> 'EngineConfig':
        """从环境变量创建配置"""
        weekly_days = _get_int_env('FORTUNE_WEEKLY_DAYS', 7)
        if weekly_days < 0:
            logger.warning(f"⚠️ FORTUNE_WEEKLY_DAYS={weekly_days} 为负数，使用默认值 7")
            weekly_days = 7

        perturbation = _get_int_env('FORTUNE_PERTURBATION', MAX_PERTURBATION)
        if not 0 <= perturbation <= MAX_PERTURBATION:
            clamped = max(0, min(MAX_PERTURBATION, perturbation))
            logger.warning(f"⚠️ FORTUNE_PERTURBATION={perturbation} 超出范围，已调整为 {clamped}")
            perturbation = clamped

        return cls(
            env=os.getenv('FORTUNE_ENV', os.getenv('ENV', 'local')),
            log_level=os.getenv('FORTUNE_LOG_LEVEL', 'INFO').upper(),
            tables_path=os.getenv('FORTUNE_TABLES_PATH') or None,
            weekly_days=weekly_days,
            stable_seed=_get_bool_env('FORTUNE_STABLE_SEED', default=False),
            perturbation=perturbation,
        )

    @property
    def is_production(self) -> bool:
        return self.env.lower() in ('production', 'prod')


# 全局配置实例（单例模式）
_config: Optional[EngineConfig] = None


def get_config() -> EngineConfig:
    """获取全局配置实例（单例）"""
    global _config
    if _config is None:
        _config = EngineConfig.from_env()
    return _config


def reload_config() -> EngineConfig:
    """重新加载配置（用于热更新）"""
    global _config
    _config = EngineConfig.from_env()
    return _config
