#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行属性计算器

功能：
- 由生日推算个人五行属性（主五行 / 副五行 / 阴阳）
- 由日期推算当日五行与阴阳
- 月令五行（季节）
- 生克关系判断
- 基础运势分（确定性，无随机项）

位置公式（ELEMENT_ORDER = 木、火、土、金、水）：
- 主五行 = ORDER[(年 + 月) % 5]
- 副五行 = ORDER[(月 + 日) % 5]
- 个人阴阳：年份奇数为阳，偶数为阴
- 当日五行 = ORDER[日 % 5]，日数奇数为阳，偶数为阴
"""

import logging
import re
from datetime import date, datetime
from typing import Any, Optional, Tuple

from elemental_core.calculators.element_relations import (
    element_at,
    get_element_relation,
    is_controlling,
    is_generating,
    polarity_from_parity,
)
from elemental_core.config.fortune_tables import (
    BASELINE_SCORE,
    DEFAULT_TABLES,
    POLARITY_DIFFER_BONUS,
    POLARITY_MATCH_BONUS,
    SCORE_MAX,
    SCORE_MIN,
    FortuneTables,
)
from elemental_core.models.enums import Element, Polarity, RelationType
from elemental_core.models.fortune_models import ElementalProfile
from elemental_core.utils.exceptions import InvalidDateError, ValidationError

logger = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')

# 月令五行：寅卯木、巳午火、申酉金、亥子水，辰未戌丑土（按公历月份近似）
MONTH_ELEMENTS = {
    1: Element.WATER, 2: Element.WATER, 12: Element.WATER,
    3: Element.WOOD, 4: Element.WOOD,
    6: Element.FIRE, 7: Element.FIRE,
    9: Element.METAL, 10: Element.METAL,
    5: Element.EARTH, 8: Element.EARTH, 11: Element.EARTH,
}


def clamp(value: int, lower: int = SCORE_MIN, upper: int = SCORE_MAX) -> int:
    """将分数限制在 [lower, upper]"""
    return max(lower, min(upper, value))


class ElementCalculator:
    """五行属性计算器（无状态）"""

    @staticmethod
    def parse_date(value: Any, field: str = "date") -> date:
        """
        解析日期（前置条件校验）

        Args:
            value: date / datetime / 'YYYY-MM-DD' 字符串
            field: 字段名，用于错误提示

        Returns:
            date

        Raises:
            InvalidDateError: 格式错误或日期不存在（如 2024-02-30）
        """
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str) and DATE_PATTERN.match(value):
            try:
                return datetime.strptime(value, '%Y-%m-%d').date()
            except ValueError as e:
                logger.error(f"日期不存在: {field}={value!r}")
                raise InvalidDateError(value, field=field) from e
        logger.error(f"日期校验失败: {field}={value!r}")
        raise InvalidDateError(value, field=field)

    @staticmethod
    def personal_element(birth_date: Any) -> ElementalProfile:
        """
        由生日推算个人五行属性

        Args:
            birth_date: 生日

        Returns:
            ElementalProfile: 同一生日永远返回同一结果
        """
        birth = ElementCalculator.parse_date(birth_date, field="birth_date")
        return ElementalProfile(
            main_element=element_at(birth.year + birth.month),
            secondary_element=element_at(birth.month + birth.day),
            polarity=polarity_from_parity(birth.year),
        )

    @staticmethod
    def day_element(target_date: Any) -> Tuple[Element, Polarity]:
        """
        推算当日五行与阴阳

        Returns:
            (当日五行, 当日阴阳)
        """
        target = ElementCalculator.parse_date(target_date, field="target_date")
        return element_at(target.day), polarity_from_parity(target.day)

    @staticmethod
    def today_element() -> Tuple[Element, Polarity]:
        """今天的五行与阴阳"""
        return ElementCalculator.day_element(date.today())

    @staticmethod
    def month_element(month: int) -> Element:
        """月令五行"""
        if isinstance(month, bool) or not isinstance(month, int) or month not in MONTH_ELEMENTS:
            raise ValidationError(f"无效的月份: {month!r}，应为 1-12", field="month")
        return MONTH_ELEMENTS[month]

    @staticmethod
    def element_relation(me: Element, other: Element) -> RelationType:
        """以 me 为基准的生克关系"""
        return get_element_relation(me, other)

    @staticmethod
    def is_generating(element_a: Element, element_b: Element) -> bool:
        """A 是否生 B"""
        return is_generating(element_a, element_b)

    @staticmethod
    def is_controlling(element_a: Element, element_b: Element) -> bool:
        """A 是否克 B"""
        return is_controlling(element_a, element_b)

    @staticmethod
    def base_luck_score(
        personal_element: Element,
        day_element: Element,
        personal_polarity: Polarity,
        day_polarity: Polarity,
        tables: Optional[FortuneTables] = None
    ) -> int:
        """
        基础运势分

        从 50 分起：
        - 我生日 +20，日生我 +15（方向不同，加分不同）
        - 我克日 -10，日克我 -15
        - 比和 +5
        - 阴阳相同 +5，不同 +2
        结果限制在 [1, 100]
        """
        tables = tables or DEFAULT_TABLES
        relation = get_element_relation(personal_element, day_element)
        score = BASELINE_SCORE + tables.base_relation_adjustments[relation]
        if personal_polarity == day_polarity:
            score += POLARITY_MATCH_BONUS
        else:
            score += POLARITY_DIFFER_BONUS

        result = clamp(score)
        logger.debug(
            f"基础运势: 本命{personal_element.value}{personal_polarity.value} "
            f"当日{day_element.value}{day_polarity.value} 关系={relation.value} 分数={result}"
        )
        return result
