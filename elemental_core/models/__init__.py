# -*- coding: utf-8 -*-
"""
数据模型与枚举
"""

from .enums import (
    Element,
    Polarity,
    RelationType,
    FortuneCategory,
    LuckTier,
    FortuneRating,
    CompatibilityLevel,
    TeamBalanceLevel,
)
from .fortune_models import (
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
]
