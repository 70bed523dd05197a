#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
运势查找表配置

所有固定查找表集中在这里：
- 分类五行亲和（加分 / 同组惩罚）
- 生克关系加减分（基础分 / 分类分）
- 五行、阴阳特质词表
- 幸运颜色、幸运方位
- 描述与建议模板（5 个分类 × 5 个五行 = 25 条建议 + 5 条结束语）

FortuneTables 可以通过 table_loader 从 JSON 文件覆盖（需保证覆盖后的表完整）。
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from elemental_core.models.enums import (
    Element,
    FortuneCategory,
    FortuneRating,
    CompatibilityLevel,
    LuckTier,
    Polarity,
    RelationType,
)


@dataclass(frozen=True)
class CategoryAffinity:
    """分类五行亲和规则：日五行或本命五行命中即加分，指定组合则扣分"""
    primary: Element
    primary_bonus: int
    secondary: Element
    secondary_bonus: int
    penalty_day: Element
    penalty_personal: Element
    penalty: int


# ==================== 分数规则 ====================

BASELINE_SCORE = 50
SCORE_MIN = 1
SCORE_MAX = 100

# 基础运势：以"本命 → 日"方向计算关系
BASE_RELATION_ADJUSTMENTS: Dict[RelationType, int] = {
    RelationType.ME_PRODUCING: 20,      # 我生日
    RelationType.PRODUCING_ME: 15,      # 日生我
    RelationType.ME_CONTROLLING: -10,   # 我克日
    RelationType.CONTROLLING_ME: -15,   # 日克我
    RelationType.SAME: 5,               # 比和
}

# 阴阳：相同 +5，不同 +2
POLARITY_MATCH_BONUS = 5
POLARITY_DIFFER_BONUS = 2

# 分类运势的生克微调（幅度小于基础分）
CATEGORY_RELATION_ADJUSTMENTS: Dict[RelationType, int] = {
    RelationType.ME_PRODUCING: 3,
    RelationType.PRODUCING_ME: 5,
    RelationType.ME_CONTROLLING: -3,
    RelationType.CONTROLLING_ME: -5,
    RelationType.SAME: 0,
}

# 分类随机扰动上限（±8）
MAX_PERTURBATION = 8

CATEGORY_AFFINITIES: Dict[FortuneCategory, CategoryAffinity] = {
    # 事业：木（成长）、金（确定性）；土土停滞
    FortuneCategory.CAREER: CategoryAffinity(
        Element.WOOD, 10, Element.METAL, 5, Element.EARTH, Element.EARTH, 5
    ),
    # 人际：火（热情）、水（柔韧）；金金过冷
    FortuneCategory.RELATIONSHIP: CategoryAffinity(
        Element.FIRE, 10, Element.WATER, 5, Element.METAL, Element.METAL, 5
    ),
    # 创造：木（创造）、火（表现）；日金遇本命土趋于保守
    FortuneCategory.CREATIVITY: CategoryAffinity(
        Element.WOOD, 10, Element.FIRE, 8, Element.METAL, Element.EARTH, 5
    ),
    # 健康：土（稳定）、水（适应）；火火消耗过大
    FortuneCategory.HEALTH: CategoryAffinity(
        Element.EARTH, 10, Element.WATER, 5, Element.FIRE, Element.FIRE, 5
    ),
    # 财运：金（收获）、土（稳定）；木木易散财
    FortuneCategory.WEALTH: CategoryAffinity(
        Element.METAL, 10, Element.EARTH, 5, Element.WOOD, Element.WOOD, 5
    ),
}

# 档位阈值（从高到低，首个满足者生效）
LUCK_TIER_THRESHOLDS: List[Tuple[int, LuckTier]] = [
    (85, LuckTier.EXCELLENT),
    (70, LuckTier.GOOD),
    (45, LuckTier.NEUTRAL),
    (30, LuckTier.CAUTION),
]

RATING_THRESHOLDS: List[Tuple[int, FortuneRating]] = [
    (80, FortuneRating.EXCELLENT),
    (60, FortuneRating.GOOD),
    (40, FortuneRating.NEUTRAL),
    (20, FortuneRating.CAUTION),
]

COMPATIBILITY_LEVEL_THRESHOLDS: List[Tuple[int, CompatibilityLevel]] = [
    (80, CompatibilityLevel.EXCELLENT),
    (65, CompatibilityLevel.GOOD),
    (50, CompatibilityLevel.NEUTRAL),
    (35, CompatibilityLevel.CHALLENGING),
]

# 当日阴阳占比（阴日：阴70/阳30）
DOMINANT_POLARITY_SHARE = 70


# ==================== 特质词表 ====================

ELEMENT_PROPERTIES: Dict[Element, Dict[str, List[str]]] = {
    Element.WOOD: {
        'keywords': ['成长', '发展', '柔韧', '创造', '决断'],
        'strengths': ['适应力', '计划性', '直觉力', '温和', '宽容'],
        'weaknesses': ['易怒', '固执', '急躁', '自我中心', '挑剔'],
    },
    Element.FIRE: {
        'keywords': ['热情', '变化', '行动力', '表现力', '扩展'],
        'strengths': ['热情', '领导力', '社交能力', '魅力', '直觉'],
        'weaknesses': ['冲动', '急性子', '控制欲', '爱表现', '浮躁'],
    },
    Element.EARTH: {
        'keywords': ['稳定', '中心', '思考力', '调和', '信赖'],
        'strengths': ['可靠', '务实', '踏实', '深思熟虑', '安定感'],
        'weaknesses': ['多虑', '保守', '优柔寡断', '执拗', '固执'],
    },
    Element.METAL: {
        'keywords': ['收获', '确定性', '精确', '决断力', '洁净'],
        'strengths': ['效率', '严谨', '精确', '分析力', '完美主义'],
        'weaknesses': ['挑剔', '冷淡', '独断', '不够变通', '强迫倾向'],
    },
    Element.WATER: {
        'keywords': ['智慧', '柔韧', '持久力', '深度', '宁静'],
        'strengths': ['智慧', '洞察力', '直觉', '灵活', '耐心'],
        'weaknesses': ['畏惧', '优柔寡断', '意志薄弱', '冷漠', '漠不关心'],
    },
}

POLARITY_PROPERTIES: Dict[Polarity, Dict[str, List[str]]] = {
    Polarity.YIN: {
        'nature': ['静', '暗', '寒', '内向', '物质'],
        'traits': ['内省', '沉稳', '喜欢秩序', '被动', '协调'],
    },
    Polarity.YANG: {
        'nature': ['动', '明', '热', '外向', '精神'],
        'traits': ['活跃', '主动', '爱冒险', '精力充沛', '独立'],
    },
}


# ==================== 幸运属性 ====================

LUCKY_COLORS: Dict[Element, List[str]] = {
    Element.WOOD: ['绿色', '青柠色', '橄榄绿', '绿松石色', '青绿色'],
    Element.FIRE: ['红色', '橙色', '粉色', '洋红色', '紫色'],
    Element.EARTH: ['黄色', '米色', '棕色', '赤陶色', '金色'],
    Element.METAL: ['白色', '银色', '灰色', '象牙白', '金属色'],
    Element.WATER: ['蓝色', '藏青色', '浅蓝色', '靛蓝色', '海军蓝'],
}

LUCKY_DIRECTIONS: Dict[Element, List[str]] = {
    Element.WOOD: ['东', '东南'],
    Element.FIRE: ['南', '西南'],
    Element.EARTH: ['中央', '西南', '东北'],
    Element.METAL: ['西', '西北'],
    Element.WATER: ['北', '东北'],
}


# ==================== 描述模板 ====================

TIER_LABELS: Dict[LuckTier, str] = {
    LuckTier.EXCELLENT: '绝佳',
    LuckTier.GOOD: '顺遂',
    LuckTier.NEUTRAL: '平稳',
    LuckTier.CAUTION: '略有波折',
    LuckTier.POOR: '较为严峻',
}

# 占位符：{personal} {day} {label}
DESCRIPTION_TEMPLATES: Dict[LuckTier, str] = {
    LuckTier.EXCELLENT: '你的{personal}属性与今天的{day}之气十分协调，整体运势{label}。',
    LuckTier.GOOD: '你的{personal}属性与今天的{day}之气相处融洽，整体运势{label}。',
    LuckTier.NEUTRAL: '你的{personal}属性与今天的{day}之气没有明显干扰，将是{label}的一天。',
    LuckTier.CAUTION: '你的{personal}属性与今天的{day}之气略有摩擦，整体运势{label}。',
    LuckTier.POOR: '你的{personal}属性与今天的{day}之气摩擦较多，整体运势{label}，宜守不宜攻。',
}

# 占位符：{personal} {day}
RELATION_SENTENCES: Dict[RelationType, str] = {
    RelationType.SAME: '同为{day}之气相互共鸣，你的长处会更容易发挥出来。',
    RelationType.ME_PRODUCING: '你的{personal}之气滋养着今天的{day}之气，付出会带来良好的回响。',
    RelationType.PRODUCING_ME: '今天的{day}之气滋养着你的{personal}之气，会得到有力的支持。',
    RelationType.ME_CONTROLLING: '你的{personal}之气对今天的{day}之气有所压制，注意不要用力过猛。',
    RelationType.CONTROLLING_ME: '今天的{day}之气对你的{personal}之气形成克制，有意识地寻求调和会更顺利。',
}

# 占位符：{strengths} {strength} {weaknesses} {weakness}
ADVICE_TIER_TEMPLATES: Dict[LuckTier, str] = {
    LuckTier.EXCELLENT: '今天特别适合发挥{strengths}。',
    LuckTier.GOOD: '今天特别适合发挥{strengths}。',
    LuckTier.NEUTRAL: '今天在保持{strength}的同时，注意避免{weakness}。',
    LuckTier.CAUTION: '今天注意{weaknesses}的倾向，有意识地保持{strength}。',
    LuckTier.POOR: '今天注意{weaknesses}的倾向，有意识地保持{strength}。',
}

TENSION_SENTENCE = '你的{personal}与今天的{day}之间存在一定张力，请注意保持平衡。'

CATEGORY_INTROS: Dict[FortuneCategory, str] = {
    FortuneCategory.CAREER: '今天尤其适合投入事业相关的事务。',
    FortuneCategory.RELATIONSHIP: '今天在人际关系方面会有好的进展。',
    FortuneCategory.CREATIVITY: '今天创造力格外高涨。',
    FortuneCategory.HEALTH: '今天对健康尤为有利。',
    FortuneCategory.WEALTH: '今天在财务方面有望取得好的进展。',
}

ADVICE_TEMPLATES: Dict[FortuneCategory, Dict[Element, str]] = {
    FortuneCategory.CAREER: {
        Element.WOOD: '适合学习新技能、接受能带来成长的挑战，尤其适合钻研新的造型技术。',
        Element.FIRE: '在需要自我表达和领导力的场合容易发挥实力，适合向顾客提出造型建议或新的企划。',
        Element.EARTH: '适合稳固基础，重新审视基本功、思考如何提高工作效率。',
        Element.METAL: '适合执行计划、关注细节，提升精细修剪技术或严格管理时间。',
        Element.WATER: '能发挥灵活思维与适应力，留意随机应变地满足不同顾客的需求。',
    },
    FortuneCategory.RELATIONSHIP: {
        Element.WOOD: '适合建立新关系、让既有关系成长，是培养团队协作的好机会。',
        Element.FIRE: '积极的沟通容易开花结果，加深店内交流、巩固与顾客的信任吧。',
        Element.EARTH: '适合建立稳定的信任关系，多创造与同事或前辈深入交流的机会。',
        Element.METAL: '公平与诚实尤为重要，适合明确团队内的分工与责任。',
        Element.WATER: '共情与理解加深，站在对方角度灵活应对，关系会有所改善。',
    },
    FortuneCategory.CREATIVITY: {
        Element.WOOD: '最适合创造新的想法和风格，试着开发原创发型或染色方案。',
        Element.FIRE: '热情的表现力高涨，是挑战大胆设计和配色的好机会。',
        Element.EARTH: '适合实用型设计与改良，重新审视并改进现有技法。',
        Element.METAL: '精确与审美得以发挥，讲究细节，提高技术完成度。',
        Element.WATER: '直觉与想象力丰富，最适合构思能突出顾客个性的独创造型。',
    },
    FortuneCategory.HEALTH: {
        Element.WOOD: '拉伸和新鲜饮食效果显著，在长时间站立工作的间隙加入简短运动。',
        Element.FIRE: '提升能量的有氧运动效果好，注意活动与休息的平衡。',
        Element.EARTH: '关注营养均衡与消化，用规律的饮食和休息打好身体基础。',
        Element.METAL: '适合调整呼吸与姿势，留意站姿和正确的呼吸方式。',
        Element.WATER: '注意补水和身体柔软度，充分饮水并保持放松。',
    },
    FortuneCategory.WEALTH: {
        Element.WOOD: '适合开拓新的收入来源或进行有助成长的投资，考虑在技能与学习上投入。',
        Element.FIRE: '适合积极创收，提出新的服务或开发附加项目会很有效。',
        Element.EARTH: '适合打造稳定的经济基础，是重新审视预算与节约策略的好时机。',
        Element.METAL: '最适合财务管理与效率提升，想办法减少浪费、用好每一份资源。',
        Element.WATER: '灵活的理财策略更有效，适合比较多种收益方案、补充财务知识。',
    },
}

CLOSINGS: Dict[Element, str] = {
    Element.WOOD: '作为美发师，今天创造力与成长的能量高涨，适合尝试新的造型技术或向顾客提出新的建议。',
    Element.FIRE: '作为美发师，今天热情与表现力高涨，挑战个性化染色或令人印象深刻的造型会有好结果。',
    Element.EARTH: '作为美发师，今天稳定与信赖感增强，专注于扎实的基础服务和与顾客建立信任吧。',
    Element.METAL: '作为美发师，今天精确与完美主义增强，精准的修剪和对细节的讲究会格外受到好评。',
    Element.WATER: '作为美发师，今天柔韧与直觉增强，深入理解顾客需求并灵活应对能提升满意度。',
}


# ==================== 相性文本 ====================

GENERATING_DESCRIPTIONS: Dict[Element, str] = {
    Element.WOOD: '木燃烧而孕育火',
    Element.FIRE: '火的余烬使土肥沃',
    Element.EARTH: '土中蕴藏金属',
    Element.METAL: '金属冷却凝结水滴',
    Element.WATER: '水滋养木的生长',
}

CONTROLLING_DESCRIPTIONS: Dict[Element, str] = {
    Element.WOOD: '木的根系约束土',
    Element.EARTH: '土筑堤拦截水',
    Element.WATER: '水能熄灭火',
    Element.FIRE: '火能熔化金属',
    Element.METAL: '金属的刀刃能砍伐木',
}

POLARITY_COMPATIBILITY_SENTENCES: Dict[bool, str] = {
    True: '双方同为{polarity}的能量，行为模式与价值观相近，容易相互理解，但可能缺乏多样性。',
    False: '一方为阴、一方为阳，彼此互补，视角多元，但有时需要相互调整。',
}

ELEMENT_CHARACTERISTICS: Dict[Element, List[str]] = {
    Element.WOOD: ['创造力', '成长能力', '灵活性'],
    Element.FIRE: ['热情', '沟通力', '领导力'],
    Element.EARTH: ['稳定性', '可靠性', '实用性'],
    Element.METAL: ['精确度', '分析力', '决断力'],
    Element.WATER: ['智慧', '适应力', '洞察力'],
}

CONTROLLING_AREAS: Dict[Element, str] = {
    Element.WOOD: '具体化能力',
    Element.FIRE: '执行力',
    Element.EARTH: '灵活思维',
    Element.METAL: '发想力',
    Element.WATER: '体系化能力',
}

POLARITY_CHARACTERISTICS: Dict[Polarity, List[str]] = {
    Polarity.YIN: ['内省力', '计划性', '持续力'],
    Polarity.YANG: ['行动力', '主动性', '影响力'],
}


@dataclass(frozen=True)
class FortuneTables:
    """运势查找表集合（默认值即上方常量）"""
    category_affinities: Dict[FortuneCategory, CategoryAffinity] = field(
        default_factory=lambda: dict(CATEGORY_AFFINITIES))
    base_relation_adjustments: Dict[RelationType, int] = field(
        default_factory=lambda: dict(BASE_RELATION_ADJUSTMENTS))
    category_relation_adjustments: Dict[RelationType, int] = field(
        default_factory=lambda: dict(CATEGORY_RELATION_ADJUSTMENTS))
    element_properties: Dict[Element, Dict[str, List[str]]] = field(
        default_factory=lambda: dict(ELEMENT_PROPERTIES))
    polarity_properties: Dict[Polarity, Dict[str, List[str]]] = field(
        default_factory=lambda: dict(POLARITY_PROPERTIES))
    lucky_colors: Dict[Element, List[str]] = field(
        default_factory=lambda: dict(LUCKY_COLORS))
    lucky_directions: Dict[Element, List[str]] = field(
        default_factory=lambda: dict(LUCKY_DIRECTIONS))
    tier_labels: Dict[LuckTier, str] = field(
        default_factory=lambda: dict(TIER_LABELS))
    description_templates: Dict[LuckTier, str] = field(
        default_factory=lambda: dict(DESCRIPTION_TEMPLATES))
    relation_sentences: Dict[RelationType, str] = field(
        default_factory=lambda: dict(RELATION_SENTENCES))
    advice_tier_templates: Dict[LuckTier, str] = field(
        default_factory=lambda: dict(ADVICE_TIER_TEMPLATES))
    category_intros: Dict[FortuneCategory, str] = field(
        default_factory=lambda: dict(CATEGORY_INTROS))
    advice_templates: Dict[FortuneCategory, Dict[Element, str]] = field(
        default_factory=lambda: {c: dict(t) for c, t in ADVICE_TEMPLATES.items()})
    closings: Dict[Element, str] = field(
        default_factory=lambda: dict(CLOSINGS))


DEFAULT_TABLES = FortuneTables()
