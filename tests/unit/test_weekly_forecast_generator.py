#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""周运势生成器单元测试"""

from unittest.mock import MagicMock

import pytest

from elemental_core.calculators.element_calculator import ElementCalculator
from elemental_core.config.engine_config import EngineConfig
from elemental_core.generators.daily_forecast_generator import DailyForecastGenerator
from elemental_core.generators.weekly_forecast_generator import WeeklyForecastGenerator
from elemental_core.models import Element, Polarity, WeeklyForecastEntry
from elemental_core.utils.exceptions import InvalidDateError, ValidationError


@pytest.fixture
def weekly(engine_config_default):
    return WeeklyForecastGenerator(config=engine_config_default)


class TestWeeklyForecast:
    def test_default_seven_days(self, weekly, sample_birth_date):
        entries = weekly.generate_weekly_forecast(sample_birth_date, "2024-06-01")
        assert len(entries) == 7
        assert all(isinstance(entry, WeeklyForecastEntry) for entry in entries)
        assert [entry.date for entry in entries] == [f"2024-06-0{d}" for d in range(1, 8)]

    def test_scores_match_base_score(self, weekly, sample_birth_date):
        profile = ElementCalculator.personal_element(sample_birth_date)
        for entry in weekly.generate_weekly_forecast(sample_birth_date, "2024-06-01", days=10):
            day_element, day_polarity = ElementCalculator.day_element(entry.date)
            assert entry.daily_element == day_element
            assert entry.daily_polarity == day_polarity
            assert entry.overall_score == ElementCalculator.base_luck_score(
                profile.main_element, day_element, profile.polarity, day_polarity
            )

    def test_crosses_month_boundary(self, weekly, sample_birth_date):
        entries = weekly.generate_weekly_forecast(sample_birth_date, "2024-06-29", days=4)
        assert [entry.date for entry in entries] == ["2024-06-29", "2024-06-30", "2024-07-01", "2024-07-02"]
        assert [entry.daily_element for entry in entries] == [
            Element.WATER, Element.WOOD, Element.FIRE, Element.EARTH
        ]
        assert [entry.daily_polarity for entry in entries] == [
            Polarity.YANG, Polarity.YIN, Polarity.YANG, Polarity.YIN
        ]

    def test_first_entry_matches_example(self, weekly, sample_birth_date, sample_target_date):
        entries = weekly.generate_weekly_forecast(sample_birth_date, sample_target_date, days=1)
        assert entries[0].overall_score == 37

    def test_zero_days(self, weekly, sample_birth_date):
        assert weekly.generate_weekly_forecast(sample_birth_date, "2024-06-01", days=0) == []

    @pytest.mark.parametrize("days", [-1, 2.5, "7", True])
    def test_invalid_days(self, weekly, sample_birth_date, days):
        with pytest.raises(ValidationError) as exc_info:
            weekly.generate_weekly_forecast(sample_birth_date, "2024-06-01", days=days)
        assert exc_info.value.field == "days"

    def test_configured_default_days(self, sample_birth_date):
        weekly = WeeklyForecastGenerator(config=EngineConfig(weekly_days=5))
        assert len(weekly.generate_weekly_forecast(sample_birth_date, "2024-06-01")) == 5

    def test_invalid_start_date(self, weekly, sample_birth_date):
        with pytest.raises(InvalidDateError):
            weekly.generate_weekly_forecast(sample_birth_date, "2024-6-1")

    def test_does_not_consume_randomness(self, sample_birth_date, engine_config_default):
        rng = MagicMock()
        daily = DailyForecastGenerator(rng=rng, config=engine_config_default)
        weekly = WeeklyForecastGenerator(daily_generator=daily, config=engine_config_default)
        weekly.generate_weekly_forecast(sample_birth_date, "2024-06-01")
        rng.randint.assert_not_called()
        rng.sample.assert_not_called()
