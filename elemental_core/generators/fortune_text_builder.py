#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
运势文本拼装（模板化）
- 描述：当日五行关键词 + 运势档位 + 生克关系 + 阴阳特质
- 建议：档位建议 + 生克张力提醒 + 最高分类建议（分类 × 当日五行）+ 结束语
文本只由分数档位、五行与分类决定，与随机源无关
"""
from typing import Optional

from elemental_core.calculators.element_relations import get_element_relation, is_controlling
from elemental_core.config.fortune_tables import (
    DEFAULT_TABLES,
    LUCK_TIER_THRESHOLDS,
    TENSION_SENTENCE,
    FortuneTables,
)
from elemental_core.models.enums import Element, FortuneCategory, LuckTier, Polarity


def luck_tier(score: int) -> LuckTier:
    """
    总运势档位：>=85 绝佳，>=70 顺遂，>=45 平稳，>=30 略有波折，其余较为严峻
    """
    for threshold, tier in LUCK_TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return LuckTier.POOR


def build_description(
    personal_element: Element,
    day_element: Element,
    day_polarity: Polarity,
    overall_score: int,
    tables: Optional[FortuneTables] = None
) -> str:
    """
    生成运势描述
    """
    tables = tables or DEFAULT_TABLES
    tier = luck_tier(overall_score)
    day_props = tables.element_properties[day_element]
    polarity_props = tables.polarity_properties[day_polarity]
    names = {'personal': personal_element.value, 'day': day_element.value}

    parts = [
        f"今天是{day_element.value}之气旺盛的{day_polarity.value}日。",
        f"{'、'.join(day_props['keywords'][:3])}等特质正在增强。",
        tables.description_templates[tier].format(label=tables.tier_labels[tier], **names),
        tables.relation_sentences[get_element_relation(personal_element, day_element)].format(**names),
        f"借助{day_polarity.value}的能量，多留意{'、'.join(polarity_props['traits'][:2])}的一面会更好。",
        f"{day_polarity.value}日{'、'.join(polarity_props['nature'][:2])}的性质会更加明显。",
    ]
    return ''.join(parts)


def build_advice(
    personal_element: Element,
    day_element: Element,
    overall_score: int,
    highest_category: FortuneCategory,
    tables: Optional[FortuneTables] = None
) -> str:
    """
    生成建议
    """
    tables = tables or DEFAULT_TABLES
    tier = luck_tier(overall_score)
    day_props = tables.element_properties[day_element]
    strengths, weaknesses = day_props['strengths'], day_props['weaknesses']

    parts = [
        tables.advice_tier_templates[tier].format(
            strengths='和'.join(strengths[:2]),
            strength=strengths[0],
            weaknesses='、'.join(weaknesses[:2]),
            weakness=weaknesses[0],
        )
    ]

    # 生克张力提醒
    if is_controlling(day_element, personal_element) or is_controlling(personal_element, day_element):
        parts.append(TENSION_SENTENCE.format(personal=personal_element.value, day=day_element.value))

    parts.append(tables.category_intros[highest_category])
    parts.append(tables.advice_templates[highest_category][day_element])
    parts.append(tables.closings[day_element])
    return ''.join(parts)
