# -*- coding: utf-8 -*-
"""
配置模块：引擎配置与运势查找表
"""

from .fortune_tables import FortuneTables, CategoryAffinity, DEFAULT_TABLES
from .engine_config import EngineConfig, get_config, reload_config
from .table_loader import load_fortune_tables, clear_table_cache

__all__ = [
    'FortuneTables',
    'CategoryAffinity',
    'DEFAULT_TABLES',
    'EngineConfig',
    'get_config',
    'reload_config',
    'load_fortune_tables',
    'clear_table_cache',
]
