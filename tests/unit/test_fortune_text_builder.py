#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""运势文本拼装单元测试"""

import pytest

from elemental_core.config.fortune_tables import (
    ADVICE_TEMPLATES,
    CATEGORY_INTROS,
    CLOSINGS,
    TIER_LABELS,
)
from elemental_core.generators.fortune_text_builder import build_advice, build_description, luck_tier
from elemental_core.models import Element, FortuneCategory, LuckTier, Polarity


class TestLuckTier:
    @pytest.mark.parametrize("score, expected", [
        (100, LuckTier.EXCELLENT), (85, LuckTier.EXCELLENT), (84, LuckTier.GOOD),
        (70, LuckTier.GOOD), (69, LuckTier.NEUTRAL), (45, LuckTier.NEUTRAL),
        (44, LuckTier.CAUTION), (30, LuckTier.CAUTION), (29, LuckTier.POOR), (1, LuckTier.POOR),
    ])
    def test_thresholds(self, score, expected):
        assert luck_tier(score) == expected


class TestDescription:
    def test_good_tier_generating(self):
        text = build_description(Element.WOOD, Element.FIRE, Polarity.YANG, 75)
        assert text.startswith('今天是火之气旺盛的阳日。')
        assert TIER_LABELS[LuckTier.GOOD] in text
        assert '你的木之气滋养着今天的火之气' in text
        assert '阳日动、明的性质会更加明显。' in text

    def test_neutral_tier_traits(self):
        text = build_description(Element.WATER, Element.WATER, Polarity.YIN, 60)
        assert '将是平稳的一天' in text
        assert '同为水之气相互共鸣' in text
        assert '多留意内省、沉稳的一面' in text

    def test_poor_tier(self):
        text = build_description(Element.EARTH, Element.WOOD, Polarity.YANG, 20)
        assert TIER_LABELS[LuckTier.POOR] in text
        assert '今天的木之气对你的土之气形成克制' in text


class TestAdvice:
    @pytest.mark.parametrize("category", list(FortuneCategory), ids=[c.value for c in FortuneCategory])
    @pytest.mark.parametrize("element", list(Element), ids=[e.name for e in Element])
    def test_every_category_element_template(self, category, element):
        advice = build_advice(Element.WOOD, element, 50, category)
        assert CATEGORY_INTROS[category] in advice
        assert ADVICE_TEMPLATES[category][element] in advice
        assert advice.endswith(CLOSINGS[element])

    def test_templates_are_distinct(self):
        texts = [ADVICE_TEMPLATES[c][e] for c in FortuneCategory for e in Element]
        assert len(set(texts)) == 25

    def test_high_tier_uses_two_strengths(self):
        advice = build_advice(Element.WATER, Element.WOOD, 75, FortuneCategory.CAREER)
        assert advice.startswith('今天特别适合发挥适应力和计划性。')

    def test_neutral_tier(self):
        advice = build_advice(Element.WOOD, Element.WOOD, 60, FortuneCategory.CAREER)
        assert advice.startswith('今天在保持适应力的同时，注意避免易怒。')

    def test_tension_only_on_control(self):
        assert '张力' in build_advice(Element.WOOD, Element.EARTH, 50, FortuneCategory.HEALTH)
        assert '张力' in build_advice(Element.EARTH, Element.WOOD, 50, FortuneCategory.HEALTH)
        assert '张力' not in build_advice(Element.WOOD, Element.FIRE, 50, FortuneCategory.HEALTH)
        assert '张力' not in build_advice(Element.WOOD, Element.WOOD, 50, FortuneCategory.HEALTH)
