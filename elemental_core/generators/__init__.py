# -*- coding: utf-8 -*-
"""
生成器模块：每日 / 周运势与运势文本
"""

from .fortune_text_builder import luck_tier, build_description, build_advice
from .daily_forecast_generator import DailyForecastGenerator
from .weekly_forecast_generator import WeeklyForecastGenerator

__all__ = [
    'luck_tier',
    'build_description',
    'build_advice',
    'DailyForecastGenerator',
    'WeeklyForecastGenerator',
]
