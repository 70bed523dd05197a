#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
个人相性分析器

功能：
- 两人五行相性分数（0-100，方向敏感：A 生 B +20，B 生 A +15）
- 相性等级、关系类型（相生 / 相克 / 比和）、分析文本与互补领域
"""

import logging
from typing import TYPE_CHECKING, List, Sequence

from elemental_core.calculators.element_calculator import clamp
from elemental_core.calculators.element_relations import is_controlling, is_generating
from elemental_core.config.fortune_tables import (
    COMPATIBILITY_LEVEL_THRESHOLDS,
    CONTROLLING_AREAS,
    CONTROLLING_DESCRIPTIONS,
    ELEMENT_CHARACTERISTICS,
    GENERATING_DESCRIPTIONS,
    POLARITY_CHARACTERISTICS,
    POLARITY_COMPATIBILITY_SENTENCES,
)
from elemental_core.models.enums import CompatibilityLevel
from elemental_core.models.fortune_models import CompatibilityResult, ElementalProfile, TeamDynamicsReport

if TYPE_CHECKING:
    from elemental_core.analyzers.team_dynamics_analyzer import MemberInput

logger = logging.getLogger(__name__)

RELATIONSHIP_GENERATING = '相生'
RELATIONSHIP_CONTROLLING = '相克'
RELATIONSHIP_NEUTRAL = '比和'


class CompatibilityAnalyzer:
    """个人相性分析器（无状态）"""

    BASELINE = 50
    A_GENERATES_B = 20
    B_GENERATES_A = 15
    CONTROLLING_PENALTY = 10
    SAME_POLARITY = -5
    DIFFERENT_POLARITY = 10
    SECONDARY_MATCH = 10

    @staticmethod
    def calculate_personal_compatibility(profile_a: ElementalProfile, profile_b: ElementalProfile) -> int:
        """
        计算两人相性分数

        Args:
            profile_a: 基准一方
            profile_b: 另一方

        Returns:
            int: 0-100，参数顺序影响结果
        """
        cls = CompatibilityAnalyzer
        main_a, main_b = profile_a.main_element, profile_b.main_element
        score = cls.BASELINE

        if is_generating(main_a, main_b):
            score += cls.A_GENERATES_B
        if is_generating(main_b, main_a):
            score += cls.B_GENERATES_A
        if is_controlling(main_a, main_b):
            score -= cls.CONTROLLING_PENALTY
        if is_controlling(main_b, main_a):
            score -= cls.CONTROLLING_PENALTY

        if profile_a.polarity == profile_b.polarity:
            score += cls.SAME_POLARITY
        else:
            score += cls.DIFFERENT_POLARITY

        # 副五行与对方主五行一致（只要任一方满足即可）
        if profile_a.secondary_element == main_b or profile_b.secondary_element == main_a:
            score += cls.SECONDARY_MATCH

        return clamp(score, 0, 100)

    @staticmethod
    def compatibility_level(score: int) -> CompatibilityLevel:
        """相性等级"""
        for threshold, level in COMPATIBILITY_LEVEL_THRESHOLDS:
            if score >= threshold:
                return level
        return CompatibilityLevel.DIFFICULT

    @staticmethod
    def relationship_type(profile_a: ElementalProfile, profile_b: ElementalProfile) -> str:
        """关系类型：相生 / 相克 / 比和"""
        main_a, main_b = profile_a.main_element, profile_b.main_element
        if main_a == main_b:
            return RELATIONSHIP_NEUTRAL
        if is_generating(main_a, main_b) or is_generating(main_b, main_a):
            return RELATIONSHIP_GENERATING
        return RELATIONSHIP_CONTROLLING

    @staticmethod
    def _analysis_text(profile_a: ElementalProfile, profile_b: ElementalProfile) -> str:
        main_a, main_b = profile_a.main_element, profile_b.main_element
        if main_a == main_b:
            sentence = f"双方同为{main_a.value}，价值观相近，容易产生共鸣，但可能缺少互补。"
        elif is_generating(main_a, main_b) or is_generating(main_b, main_a):
            source = main_a if is_generating(main_a, main_b) else main_b
            sentence = f"{GENERATING_DESCRIPTIONS[source]}，双方能够相互扶持、共同成长。"
        else:
            source = main_a if is_controlling(main_a, main_b) else main_b
            sentence = f"{CONTROLLING_DESCRIPTIONS[source]}，相处时需要相互尊重、把握分寸。"

        same_polarity = profile_a.polarity == profile_b.polarity
        polarity_sentence = POLARITY_COMPATIBILITY_SENTENCES[same_polarity].format(
            polarity=profile_a.polarity.value
        )
        return sentence + polarity_sentence

    @staticmethod
    def _complementary_areas(profile_a: ElementalProfile, profile_b: ElementalProfile, relationship: str) -> List[str]:
        if relationship == RELATIONSHIP_GENERATING:
            areas = [
                ELEMENT_CHARACTERISTICS[profile_a.main_element][0],
                ELEMENT_CHARACTERISTICS[profile_b.main_element][0],
            ]
        elif relationship == RELATIONSHIP_CONTROLLING:
            areas = ['相互补充', CONTROLLING_AREAS[profile_a.main_element]]
        else:
            areas = [
                POLARITY_CHARACTERISTICS[profile_a.polarity][0],
                POLARITY_CHARACTERISTICS[profile_b.polarity][0],
            ]
        # 去重，保持顺序
        return list(dict.fromkeys(areas))

    @staticmethod
    def analyze_pair(profile_a: ElementalProfile, profile_b: ElementalProfile) -> CompatibilityResult:
        """
        两人相性完整分析

        Returns:
            CompatibilityResult: 分数、等级、关系类型、分析文本、互补领域
        """
        cls = CompatibilityAnalyzer
        score = cls.calculate_personal_compatibility(profile_a, profile_b)
        relationship = cls.relationship_type(profile_a, profile_b)
        result = CompatibilityResult(
            score=score,
            level=cls.compatibility_level(score),
            relationship_type=relationship,
            analysis=cls._analysis_text(profile_a, profile_b),
            complementary_areas=cls._complementary_areas(profile_a, profile_b, relationship),
        )
        logger.debug(f"相性分析: {profile_a} vs {profile_b} -> {score} ({relationship})")
        return result

    @staticmethod
    def analyze_team_dynamics(members: Sequence["MemberInput"]) -> TeamDynamicsReport:
        """团队五行动态分析（见 TeamDynamicsAnalyzer）"""
        # team_dynamics_analyzer 在模块级依赖本模块
        from elemental_core.analyzers.team_dynamics_analyzer import TeamDynamicsAnalyzer
        return TeamDynamicsAnalyzer.analyze_team_dynamics(members)
