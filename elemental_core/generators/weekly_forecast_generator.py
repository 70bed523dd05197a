#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
周运势生成器

逐日计算总运势分（只含基础分，不生成分类分数和文本），天与天之间没有状态。
"""

import logging
from datetime import timedelta
from typing import Any, List, Optional

from elemental_core.calculators.element_calculator import ElementCalculator
from elemental_core.config.engine_config import EngineConfig, get_config
from elemental_core.generators.daily_forecast_generator import DailyForecastGenerator
from elemental_core.models.fortune_models import WeeklyForecastEntry
from elemental_core.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)


class WeeklyForecastGenerator:
    """周运势生成器"""

    def __init__(
        self,
        daily_generator: Optional[DailyForecastGenerator] = None,
        config: Optional[EngineConfig] = None
    ):
        self.config = config or get_config()
        self.daily_generator = daily_generator or DailyForecastGenerator(config=self.config)

    def generate_weekly_forecast(
        self,
        birth_date: Any,
        start_date: Any,
        days: Optional[int] = None
    ) -> List[WeeklyForecastEntry]:
        """
        生成连续 days 天的运势简报

        Args:
            birth_date: 生日
            start_date: 起始日期（包含）
            days: 天数，默认 FORTUNE_WEEKLY_DAYS（7）

        Returns:
            List[WeeklyForecastEntry]: 按日期升序

        Raises:
            InvalidDateError: 日期格式错误
            ValidationError: 天数为负数
        """
        if days is None:
            days = self.config.weekly_days
        if isinstance(days, bool) or not isinstance(days, int) or days < 0:
            logger.error(f"周运势天数无效: {days!r}")
            raise ValidationError(f"无效的天数: {days!r}，应为非负整数", field="days")

        birth = ElementCalculator.parse_date(birth_date, field="birth_date")
        start = ElementCalculator.parse_date(start_date, field="start_date")

        entries = []
        for offset in range(days):
            target = start + timedelta(days=offset)
            _, day_element, day_polarity, overall = self.daily_generator.calculate_overall_score(birth, target)
            entries.append(WeeklyForecastEntry(
                date=target.isoformat(),
                daily_element=day_element,
                daily_polarity=day_polarity,
                overall_score=overall,
            ))

        logger.info(f"✓ 周运势生成完成: 生日={birth} 起始={start} 天数={days}")
        return entries
