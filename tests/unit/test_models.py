#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""数据模型单元测试"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from elemental_core.models import (
    CategoryScores,
    Element,
    ElementalProfile,
    FortuneCategory,
    Polarity,
    TeamBalanceLevel,
    TeamDynamicsReport,
)
from elemental_core.generators.daily_forecast_generator import DailyForecastGenerator


class TestElementalProfile:
    def test_str(self):
        profile = ElementalProfile(main_element=Element.METAL, secondary_element=Element.WATER, polarity=Polarity.YIN)
        assert str(profile) == '阴金/水'
        assert str(ElementalProfile(main_element=Element.WOOD, polarity=Polarity.YANG)) == '阳木'

    def test_secondary_may_equal_main(self):
        profile = ElementalProfile(main_element=Element.FIRE, secondary_element=Element.FIRE, polarity=Polarity.YANG)
        assert profile.secondary_element == profile.main_element

    def test_accepts_symbolic_values(self):
        profile = ElementalProfile(main_element='土', polarity='阳')
        assert profile.main_element == Element.EARTH
        assert profile.polarity == Polarity.YANG

    def test_frozen(self, wood_yang):
        with pytest.raises(PydanticValidationError):
            wood_yang.main_element = Element.FIRE

    def test_unknown_element(self):
        with pytest.raises(PydanticValidationError):
            ElementalProfile(main_element='风', polarity=Polarity.YIN)


class TestCategoryScores:
    def test_get_and_as_dict(self):
        scores = CategoryScores(career=10, relationship=20, creativity=30, health=40, wealth=50)
        assert scores.get(FortuneCategory.HEALTH) == 40
        assert list(scores.as_dict()) == list(FortuneCategory)

    @pytest.mark.parametrize("value", [0, 101])
    def test_out_of_range(self, value):
        with pytest.raises(PydanticValidationError):
            CategoryScores(career=value, relationship=50, creativity=50, health=50, wealth=50)


class TestDailyFortuneRecord:
    def test_json_dump_uses_symbolic_values(self, zero_rng, engine_config_default, sample_birth_date, sample_target_date):
        record = DailyForecastGenerator(rng=zero_rng, config=engine_config_default).generate_daily_fortune(
            sample_birth_date, sample_target_date
        )
        data = record.model_dump(mode='json')
        assert data['daily_element'] == '火'
        assert data['daily_polarity'] == '阳'
        assert data['highest_category'] == 'relationship'
        assert data['rating'] == 'caution'
        assert data['personal_profile'] == {'main_element': '金', 'secondary_element': '金', 'polarity': '阴'}
        assert data['compatible_elements'] == ['木', '土']

    def test_too_many_lucky_colors(self, zero_rng, engine_config_default, sample_birth_date, sample_target_date):
        record = DailyForecastGenerator(rng=zero_rng, config=engine_config_default).generate_daily_fortune(
            sample_birth_date, sample_target_date
        )
        data = record.model_dump()
        data['lucky_colors'] = ['红色', '橙色', '粉色', '紫色']
        with pytest.raises(PydanticValidationError):
            type(record)(**data)


class TestTeamDynamicsReport:
    def test_distribution_must_be_total(self):
        with pytest.raises(PydanticValidationError):
            TeamDynamicsReport(
                element_distribution={Element.WOOD: 1},
                overall_balance=100.0,
                yin_yang_balance={Polarity.YIN: 0, Polarity.YANG: 1},
                balance_level=TeamBalanceLevel.IMBALANCED,
            )
