#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
每日运势生成器

流程：
1. 计算个人五行属性与当日五行阴阳
2. 基础运势分（确定性）
3. 五个分类分数：基础分 → 分类五行亲和 → 生克微调 → 随机扰动（±8）→ 限制在 [1, 100]
4. 最高分类（并列时按 事业、人际、创造、健康、财运 顺序取先出现者）
5. 描述、建议文本
6. 幸运颜色（3 个）、幸运方位（1-2 个）
7. 相生 / 相克五行列表

随机性全部来自注入的 RandomSource：
- 显式注入 rng：使用注入的随机源
- 未注入且 FORTUNE_STABLE_SEED=true：生日 + 日期 md5 固定种子
- 其他情况：random.Random()
"""

import logging
from datetime import date, timedelta
from typing import Any, List, Optional, Tuple

from elemental_core.calculators.element_calculator import ElementCalculator, clamp
from elemental_core.calculators.element_relations import (
    get_element_relation,
    is_controlling,
    is_generating,
)
from elemental_core.config.engine_config import EngineConfig, get_config
from elemental_core.config.fortune_tables import (
    DEFAULT_TABLES,
    DOMINANT_POLARITY_SHARE,
    RATING_THRESHOLDS,
    FortuneTables,
)
from elemental_core.config.table_loader import load_fortune_tables
from elemental_core.generators.fortune_text_builder import build_advice, build_description
from elemental_core.models.enums import Element, FortuneCategory, FortuneRating, Polarity
from elemental_core.models.fortune_models import (
    CategoryScores,
    DailyFortuneRecord,
    ElementalProfile,
    YinYangBalance,
)
from elemental_core.utils.random_source import RandomSource, default_random, seeded_random

logger = logging.getLogger(__name__)

LUCKY_COLOR_COUNT = 3
LUCKY_DIRECTION_LIMIT = 2


class DailyForecastGenerator:
    """每日运势生成器（除注入的随机源外无状态）"""

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        config: Optional[EngineConfig] = None,
        tables: Optional[FortuneTables] = None
    ):
        """
        Args:
            rng: 随机源（测试时注入固定种子）
            config: 引擎配置，默认 get_config()
            tables: 查找表，默认按 config.tables_path 加载
        """
        self._rng = rng
        self.config = config or get_config()
        if tables is None:
            tables = load_fortune_tables(self.config.tables_path) if self.config.tables_path else DEFAULT_TABLES
        self.tables = tables

    def _resolve_rng(self, birth: date, target: date, rng: Optional[RandomSource]) -> RandomSource:
        if rng is not None:
            return rng
        if self._rng is not None:
            return self._rng
        if self.config.stable_seed:
            return seeded_random(birth, target)
        return default_random()

    # ==================== 分数 ====================

    def calculate_overall_score(self, birth_date: Any, target_date: Any) -> Tuple[ElementalProfile, Element, Polarity, int]:
        """
        步骤 1-2：个人属性、当日五行阴阳、基础运势分

        Returns:
            (个人五行属性, 当日五行, 当日阴阳, 基础运势分)
        """
        profile = ElementCalculator.personal_element(birth_date)
        day_element, day_polarity = ElementCalculator.day_element(target_date)
        overall = ElementCalculator.base_luck_score(
            profile.main_element, day_element, profile.polarity, day_polarity, self.tables
        )
        return profile, day_element, day_polarity, overall

    def calculate_category_scores(
        self,
        personal_element: Element,
        day_element: Element,
        overall_score: int,
        rng: RandomSource
    ) -> CategoryScores:
        """
        计算五个分类分数

        每个分类依次叠加：
        - 亲和加分：当日五行或本命五行命中首选 / 次选五行
        - 同组惩罚：当日五行与本命五行恰为指定组合
        - 生克微调（我生日 +3，日生我 +5，我克日 -3，日克我 -5）
        - 随机扰动 [-perturbation, +perturbation]
        """
        relation_adjustment = self.tables.category_relation_adjustments[
            get_element_relation(personal_element, day_element)
        ]
        perturbation = self.config.perturbation
        elements = (day_element, personal_element)

        scores = {}
        for category in FortuneCategory:
            affinity = self.tables.category_affinities[category]
            score = overall_score
            if affinity.primary in elements:
                score += affinity.primary_bonus
            if affinity.secondary in elements:
                score += affinity.secondary_bonus
            if day_element == affinity.penalty_day and personal_element == affinity.penalty_personal:
                score -= affinity.penalty
            score += relation_adjustment
            if perturbation:
                score += rng.randint(-perturbation, perturbation)
            scores[category.value] = clamp(score)

        return CategoryScores(**scores)

    @staticmethod
    def highest_category(category_scores: CategoryScores) -> FortuneCategory:
        """最高分类（严格大于才替换，并列取先出现者）"""
        best = FortuneCategory.CAREER
        for category in FortuneCategory:
            if category_scores.get(category) > category_scores.get(best):
                best = category
        return best

    @staticmethod
    def rating(score: int) -> FortuneRating:
        """运势评级：>=80 excellent，>=60 good，>=40 neutral，>=20 caution，其余 poor"""
        for threshold, rating in RATING_THRESHOLDS:
            if score >= threshold:
                return rating
        return FortuneRating.POOR

    @staticmethod
    def yin_yang_balance(day_polarity: Polarity) -> YinYangBalance:
        """当日阴阳占比"""
        minor = 100 - DOMINANT_POLARITY_SHARE
        if day_polarity == Polarity.YIN:
            return YinYangBalance(yin=DOMINANT_POLARITY_SHARE, yang=minor)
        return YinYangBalance(yin=minor, yang=DOMINANT_POLARITY_SHARE)

    # ==================== 幸运属性 ====================

    def lucky_colors(self, day_element: Element, rng: RandomSource) -> List[str]:
        """从当日五行的 5 色调色板中不放回抽取 3 个"""
        palette = list(self.tables.lucky_colors[day_element])
        return rng.sample(palette, LUCKY_COLOR_COUNT)

    def lucky_directions(self, personal_element: Element, day_element: Element, rng: RandomSource) -> List[str]:
        """
        幸运方位

        以当日五行方位为基础；本命与当日五行存在相生关系（任一方向）时并入本命五行方位，
        去重后抽取至多 2 个
        """
        directions = list(self.tables.lucky_directions[day_element])
        if is_generating(personal_element, day_element) or is_generating(day_element, personal_element):
            for direction in self.tables.lucky_directions[personal_element]:
                if direction not in directions:
                    directions.append(direction)
        return rng.sample(directions, min(LUCKY_DIRECTION_LIMIT, len(directions)))

    @staticmethod
    def compatible_and_incompatible_elements(day_element: Element) -> Tuple[List[Element], List[Element]]:
        """
        相生 / 相克五行（按木火土金水顺序）

        compatible: 与当日五行存在相生关系（任一方向）
        incompatible: 与当日五行存在相克关系（任一方向）
        """
        compatible = [
            element for element in Element
            if is_generating(element, day_element) or is_generating(day_element, element)
        ]
        incompatible = [
            element for element in Element
            if is_controlling(element, day_element) or is_controlling(day_element, element)
        ]
        return compatible, incompatible

    # ==================== 入口 ====================

    def generate_daily_fortune(
        self,
        birth_date: Any,
        target_date: Any,
        rng: Optional[RandomSource] = None
    ) -> DailyFortuneRecord:
        """
        生成单日运势

        Args:
            birth_date: 生日（date 或 'YYYY-MM-DD'）
            target_date: 目标日期（date 或 'YYYY-MM-DD'）
            rng: 本次调用使用的随机源（优先于构造时注入的随机源）

        Returns:
            DailyFortuneRecord

        Raises:
            InvalidDateError: 日期格式错误
        """
        birth = ElementCalculator.parse_date(birth_date, field="birth_date")
        target = ElementCalculator.parse_date(target_date, field="target_date")
        source = self._resolve_rng(birth, target, rng)

        profile, day_element, day_polarity, overall = self.calculate_overall_score(birth, target)
        personal_element = profile.main_element

        category_scores = self.calculate_category_scores(personal_element, day_element, overall, source)
        highest = self.highest_category(category_scores)
        compatible, incompatible = self.compatible_and_incompatible_elements(day_element)

        record = DailyFortuneRecord(
            date=target.isoformat(),
            birth_date=birth.isoformat(),
            personal_profile=profile,
            daily_element=day_element,
            daily_polarity=day_polarity,
            overall_score=overall,
            category_scores=category_scores,
            highest_category=highest,
            rating=self.rating(overall),
            yin_yang_balance=self.yin_yang_balance(day_polarity),
            description=build_description(personal_element, day_element, day_polarity, overall, self.tables),
            advice=build_advice(personal_element, day_element, overall, highest, self.tables),
            lucky_colors=self.lucky_colors(day_element, source),
            lucky_directions=self.lucky_directions(personal_element, day_element, source),
            compatible_elements=compatible,
            incompatible_elements=incompatible,
        )
        logger.info(
            f"✓ 运势生成完成: 生日={record.birth_date} 日期={record.date} "
            f"当日={day_element.value}{day_polarity.value} 总分={overall} 最高分类={highest.value}"
        )
        return record

    def generate_fortune_range(
        self,
        birth_date: Any,
        start_date: Any,
        end_date: Any,
        rng: Optional[RandomSource] = None
    ) -> List[DailyFortuneRecord]:
        """
        生成日期区间 [start_date, end_date] 内每一天的运势（升序），end < start 时返回空列表
        """
        birth = ElementCalculator.parse_date(birth_date, field="birth_date")
        start = ElementCalculator.parse_date(start_date, field="start_date")
        end = ElementCalculator.parse_date(end_date, field="end_date")

        records = []
        current = start
        while current <= end:
            records.append(self.generate_daily_fortune(birth, current, rng))
            current += timedelta(days=1)
        logger.info(f"✓ 区间运势生成完成: {start} ~ {end}，共{len(records)}天")
        return records
