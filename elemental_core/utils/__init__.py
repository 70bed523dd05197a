# -*- coding: utf-8 -*-
"""
通用工具：异常与随机源
"""

from .exceptions import (
    EngineError,
    ValidationError,
    InvalidDateError,
    ConfigurationError,
)
from .random_source import RandomSource, seeded_random, default_random

__all__ = [
    'EngineError',
    'ValidationError',
    'InvalidDateError',
    'ConfigurationError',
    'RandomSource',
    'seeded_random',
    'default_random',
]
