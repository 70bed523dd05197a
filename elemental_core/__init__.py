# -*- coding: utf-8 -*-
"""
五行运势与相性引擎

由生日与目标日期推算五行阴阳属性，计算每日运势、分类分数、描述建议、
幸运属性，以及两人相性和团队五行动态。

    from elemental_core import DailyForecastGenerator
    record = DailyForecastGenerator().generate_daily_fortune('1990-03-15', '2024-06-01')
"""

from .models import (
    Element,
    Polarity,
    RelationType,
    FortuneCategory,
    LuckTier,
    FortuneRating,
    CompatibilityLevel,
    TeamBalanceLevel,
    ElementalProfile,
    CategoryScores,
    YinYangBalance,
    DailyFortuneRecord,
    WeeklyForecastEntry,
    CompatibilityResult,
    TeamMember,
    PairScore,
    TeamDynamicsReport,
)
from .utils import (
    EngineError,
    ValidationError,
    InvalidDateError,
    ConfigurationError,
    RandomSource,
    seeded_random,
)
from .config import EngineConfig, FortuneTables, get_config, reload_config, load_fortune_tables
from .calculators import ElementCalculator, setup_logging
from .analyzers import CompatibilityAnalyzer, TeamDynamicsAnalyzer
from .generators import DailyForecastGenerator, WeeklyForecastGenerator

__version__ = '1.0.0'

__all__ = [
    'Element',
    'Polarity',
    'RelationType',
    'FortuneCategory',
    'LuckTier',
    'FortuneRating',
    'CompatibilityLevel',
    'TeamBalanceLevel',
    'ElementalProfile',
    'CategoryScores',
    'YinYangBalance',
    'DailyFortuneRecord',
    'WeeklyForecastEntry',
    'CompatibilityResult',
    'TeamMember',
    'PairScore',
    'TeamDynamicsReport',
    'EngineError',
    'ValidationError',
    'InvalidDateError',
    'ConfigurationError',
    'RandomSource',
    'seeded_random',
    'EngineConfig',
    'FortuneTables',
    'get_config',
    'reload_config',
    'load_fortune_tables',
    'ElementCalculator',
    'setup_logging',
    'CompatibilityAnalyzer',
    'TeamDynamicsAnalyzer',
    'DailyForecastGenerator',
    'WeeklyForecastGenerator',
]
