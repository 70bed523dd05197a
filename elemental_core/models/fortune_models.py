#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行运势引擎数据模型

所有记录在生成后不可变（frozen），身份与持久化由调用方负责。
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from elemental_core.models.enums import (
    CompatibilityLevel,
    Element,
    FortuneCategory,
    FortuneRating,
    Polarity,
    TeamBalanceLevel,
)


class FrozenModel(BaseModel):
    """不可变记录基类"""
    model_config = ConfigDict(frozen=True)


class ElementalProfile(FrozenModel):
    """个人五行属性：主五行 + 可选副五行 + 阴阳"""
    main_element: Element = Field(..., description="主五行")
    secondary_element: Optional[Element] = Field(None, description="副五行（可与主五行相同）")
    polarity: Polarity = Field(..., description="阴阳")

    def __str__(self) -> str:
        secondary = f"/{self.secondary_element.value}" if self.secondary_element else ""
        return f"{self.polarity.value}{self.main_element.value}{secondary}"


class CategoryScores(FrozenModel):
    """五个运势分类的分数（1-100）"""
    career: int = Field(..., ge=1, le=100, description="事业运")
    relationship: int = Field(..., ge=1, le=100, description="人际运")
    creativity: int = Field(..., ge=1, le=100, description="创造运")
    health: int = Field(..., ge=1, le=100, description="健康运")
    wealth: int = Field(..., ge=1, le=100, description="财运")

    def get(self, category: FortuneCategory) -> int:
        return getattr(self, category.value)

    def as_dict(self) -> Dict[FortuneCategory, int]:
        return {category: self.get(category) for category in FortuneCategory}


class YinYangBalance(FrozenModel):
    """阴阳比例（百分比）"""
    yin: int = Field(..., ge=0, le=100)
    yang: int = Field(..., ge=0, le=100)


class DailyFortuneRecord(FrozenModel):
    """单日运势记录"""
    date: str = Field(..., description="目标日期 YYYY-MM-DD")
    birth_date: str = Field(..., description="生日 YYYY-MM-DD")
    personal_profile: ElementalProfile
    daily_element: Element
    daily_polarity: Polarity
    overall_score: int = Field(..., ge=1, le=100)
    category_scores: CategoryScores
    highest_category: FortuneCategory
    rating: FortuneRating
    yin_yang_balance: YinYangBalance
    description: str
    advice: str
    lucky_colors: List[str] = Field(..., max_length=3)
    lucky_directions: List[str] = Field(..., min_length=1, max_length=2)
    compatible_elements: List[Element]
    incompatible_elements: List[Element]


class WeeklyForecastEntry(FrozenModel):
    """周运势中的单日简报（只含总分）"""
    date: str
    daily_element: Element
    daily_polarity: Polarity
    overall_score: int = Field(..., ge=1, le=100)


class CompatibilityResult(FrozenModel):
    """两人相性分析结果"""
    score: int = Field(..., ge=0, le=100)
    level: CompatibilityLevel
    relationship_type: str = Field(..., description="相生 / 相克 / 比和")
    analysis: str
    complementary_areas: List[str] = Field(default_factory=list)


class TeamMember(FrozenModel):
    """团队成员（成员 ID 与五行属性的映射由调用方负责）"""
    member_id: str
    name: Optional[str] = None
    profile: ElementalProfile


class PairScore(FrozenModel):
    """成员对相性（双向平均）"""
    member1_id: str
    member2_id: str
    score: float


class TeamDynamicsReport(FrozenModel):
    """团队五行动态报告"""
    pairwise_scores: Dict[str, Dict[str, int]] = Field(
        default_factory=dict, description="有序成员对相性矩阵（不含对角线）"
    )
    element_distribution: Dict[Element, int]
    overall_balance: float = Field(..., ge=0, le=100, description="全部成员对相性的平均值")
    yin_yang_balance: Dict[Polarity, int]
    missing_elements: List[Element] = Field(default_factory=list)
    dominant_element: Optional[Element] = None
    balance_level: TeamBalanceLevel
    has_generation_cycle: bool = False
    best_pairs: List[PairScore] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

    @model_validator(mode='after')
    def check_distribution_total(self) -> 'TeamDynamicsReport':
        """分布必须覆盖全部五行"""
        missing_keys = [e for e in Element if e not in self.element_distribution]
        if missing_keys:
            raise ValueError(f"五行分布缺少: {missing_keys}")
        return self
