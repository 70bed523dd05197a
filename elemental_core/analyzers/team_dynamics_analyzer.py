#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
团队五行动态分析器

功能：
- 有序成员对相性矩阵（相性方向敏感，不含对角线）
- 五行分布、阴阳分布、缺失五行、主导五行
- 整体平衡分 = 全部成员对相性平均值（不足两人时固定为 100）
- 平衡等级、最佳搭档、优化建议
"""

import logging
from typing import Dict, List, Sequence, Tuple, Union

from elemental_core.analyzers.compatibility_analyzer import CompatibilityAnalyzer
from elemental_core.calculators.element_relations import get_producing_from_element
from elemental_core.config.fortune_tables import ELEMENT_CHARACTERISTICS
from elemental_core.models.enums import Element, Polarity, TeamBalanceLevel
from elemental_core.models.fortune_models import (
    ElementalProfile,
    PairScore,
    TeamDynamicsReport,
    TeamMember,
)
from elemental_core.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)

MemberInput = Union[ElementalProfile, TeamMember]


class TeamDynamicsAnalyzer:
    """团队五行动态分析器"""

    # 成员不足两人时的平衡分
    SENTINEL_BALANCE = 100.0

    # 最佳搭档：双向平均分阈值与数量上限
    BEST_PAIR_THRESHOLD = 65
    BEST_PAIR_LIMIT = 5

    # 主导五行占比阈值、阴阳偏差阈值
    DOMINANT_RATIO = 0.5
    POLARITY_SKEW_RATIO = 0.3

    ELEMENT_WEAKNESSES = {
        Element.WOOD: '具体执行不足',
        Element.FIRE: '缺乏计划性',
        Element.EARTH: '抗拒变化',
        Element.METAL: '共情不足',
        Element.WATER: '执行力偏弱',
    }

    @staticmethod
    def _normalize_members(members: Sequence[MemberInput]) -> List[Tuple[str, ElementalProfile]]:
        """统一为 (成员ID, 五行属性)；裸 ElementalProfile 按位置编号"""
        normalized = []
        seen = set()
        for index, member in enumerate(members):
            if isinstance(member, TeamMember):
                member_id, profile = member.member_id, member.profile
            elif isinstance(member, ElementalProfile):
                member_id, profile = str(index), member
            else:
                raise ValidationError(
                    f"无效的成员类型: {type(member).__name__}", field="members"
                )
            if member_id in seen:
                raise ValidationError(f"成员ID重复: {member_id}", field="members")
            seen.add(member_id)
            normalized.append((member_id, profile))
        return normalized

    @staticmethod
    def _balance_level(missing_count: int, yin: int, yang: int) -> TeamBalanceLevel:
        if missing_count == 0 and abs(yin - yang) <= 1:
            return TeamBalanceLevel.EXCELLENT
        if missing_count <= 1:
            return TeamBalanceLevel.GOOD
        if missing_count <= 2:
            return TeamBalanceLevel.INCOMPLETE
        return TeamBalanceLevel.IMBALANCED

    @staticmethod
    def _best_pairs(ids: List[str], matrix: Dict[str, Dict[str, int]]) -> List[PairScore]:
        cls = TeamDynamicsAnalyzer
        pairs = []
        for i, first in enumerate(ids):
            for second in ids[i + 1:]:
                mean = (matrix[first][second] + matrix[second][first]) / 2
                if mean >= cls.BEST_PAIR_THRESHOLD:
                    pairs.append(PairScore(member1_id=first, member2_id=second, score=mean))
        pairs.sort(key=lambda p: p.score, reverse=True)
        return pairs[:cls.BEST_PAIR_LIMIT]

    @staticmethod
    def _recommendations(
        size: int,
        distribution: Dict[Element, int],
        missing: List[Element],
        dominant: Element,
        yin_yang: Dict[Polarity, int]
    ) -> List[str]:
        cls = TeamDynamicsAnalyzer
        recommendations = []

        for element in missing:
            producer = get_producing_from_element(element)
            recommendations.append(
                f"团队中缺少{element.value}属性成员，{ELEMENT_CHARACTERISTICS[element][0]}可能不足，"
                f"可考虑引入{element.value}属性成员，或由{producer.value}属性成员带动补位。"
            )

        if distribution[dominant] > size * cls.DOMINANT_RATIO:
            recommendations.append(
                f"团队中{dominant.value}属性占比过高（{distribution[dominant]}/{size}），"
                f"注意{cls.ELEMENT_WEAKNESSES[dominant]}的倾向。"
            )

        yin, yang = yin_yang[Polarity.YIN], yin_yang[Polarity.YANG]
        if abs(yin - yang) > size * cls.POLARITY_SKEW_RATIO:
            heavy, light = (Polarity.YIN, Polarity.YANG) if yin > yang else (Polarity.YANG, Polarity.YIN)
            recommendations.append(
                f"团队阴阳偏向{heavy.value}（阴{yin}/阳{yang}），建议在分工中多安排{light.value}性特质的角色以保持平衡。"
            )
        return recommendations

    @staticmethod
    def analyze_team_dynamics(members: Sequence[MemberInput]) -> TeamDynamicsReport:
        """
        分析团队五行动态

        Args:
            members: ElementalProfile 或 TeamMember 列表

        Returns:
            TeamDynamicsReport

        Raises:
            ValidationError: 成员类型错误或成员ID重复
        """
        cls = TeamDynamicsAnalyzer
        normalized = cls._normalize_members(members)
        ids = [member_id for member_id, _ in normalized]
        size = len(normalized)

        # 1. 有序成员对相性矩阵
        matrix: Dict[str, Dict[str, int]] = {}
        for member_id, profile in normalized:
            matrix[member_id] = {
                other_id: CompatibilityAnalyzer.calculate_personal_compatibility(profile, other_profile)
                for other_id, other_profile in normalized
                if other_id != member_id
            }

        # 2. 整体平衡分
        scores = [score for row in matrix.values() for score in row.values()]
        if scores:
            overall_balance = round(sum(scores) / len(scores), 2)
        else:
            overall_balance = cls.SENTINEL_BALANCE

        # 3. 分布
        distribution = {element: 0 for element in Element}
        yin_yang = {polarity: 0 for polarity in Polarity}
        for _, profile in normalized:
            distribution[profile.main_element] += 1
            yin_yang[profile.polarity] += 1

        missing = [element for element in Element if distribution[element] == 0]
        dominant = None
        recommendations: List[str] = []
        if size:
            # 并列时按木火土金水顺序取第一个
            dominant = max(Element, key=lambda element: distribution[element])
            recommendations = cls._recommendations(size, distribution, missing, dominant, yin_yang)

        report = TeamDynamicsReport(
            pairwise_scores=matrix,
            element_distribution=distribution,
            overall_balance=overall_balance,
            yin_yang_balance=yin_yang,
            missing_elements=missing,
            dominant_element=dominant,
            balance_level=cls._balance_level(len(missing), yin_yang[Polarity.YIN], yin_yang[Polarity.YANG]),
            has_generation_cycle=not missing,
            best_pairs=cls._best_pairs(ids, matrix),
            recommendations=recommendations,
        )
        logger.info(f"团队分析完成: 成员{size}人, 平衡分={overall_balance}, 等级={report.balance_level.value}")
        return report
