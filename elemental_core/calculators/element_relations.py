#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行生克关系模块

提供相生、相克两张固定关系表和判断函数。
两张表各自构成一个 5 元环：每个五行恰好生一个、被一个生；克与被克同理。
"""

from typing import Dict, List

from elemental_core.models.enums import Element, Polarity, RelationType

# 位置索引顺序：木、火、土、金、水
ELEMENT_ORDER: List[Element] = list(Element)

# 相生：木生火、火生土、土生金、金生水、水生木
GENERATING_RELATIONS: Dict[Element, Element] = {
    Element.WOOD: Element.FIRE,
    Element.FIRE: Element.EARTH,
    Element.EARTH: Element.METAL,
    Element.METAL: Element.WATER,
    Element.WATER: Element.WOOD,
}

# 相克：木克土、土克水、水克火、火克金、金克木
CONTROLLING_RELATIONS: Dict[Element, Element] = {
    Element.WOOD: Element.EARTH,
    Element.EARTH: Element.WATER,
    Element.WATER: Element.FIRE,
    Element.FIRE: Element.METAL,
    Element.METAL: Element.WOOD,
}

# 五行生克关系定义（派生视图）
ELEMENT_RELATIONS: Dict[Element, Dict[str, Element]] = {
    element: {
        'produces': GENERATING_RELATIONS[element],
        'controls': CONTROLLING_RELATIONS[element],
        'produced_by': next(e for e, t in GENERATING_RELATIONS.items() if t == element),
        'controlled_by': next(e for e, t in CONTROLLING_RELATIONS.items() if t == element),
    }
    for element in ELEMENT_ORDER
}


def element_at(index: int) -> Element:
    """按位置索引取五行（自动取模）"""
    return ELEMENT_ORDER[index % 5]


def is_generating(element_a: Element, element_b: Element) -> bool:
    """A 是否生 B"""
    return GENERATING_RELATIONS[element_a] == element_b


def is_controlling(element_a: Element, element_b: Element) -> bool:
    """A 是否克 B"""
    return CONTROLLING_RELATIONS[element_a] == element_b


def get_element_relation(me: Element, other: Element) -> RelationType:
    """
    判断五行生克关系

    Args:
        me: 基准五行
        other: 目标五行

    Returns:
        RelationType: 关系类型
        - SAME: 同元素
        - ME_PRODUCING: 我生
        - ME_CONTROLLING: 我克
        - PRODUCING_ME: 生我
        - CONTROLLING_ME: 克我
    """
    if me == other:
        return RelationType.SAME

    relations = ELEMENT_RELATIONS[me]
    if other == relations['produces']:
        return RelationType.ME_PRODUCING
    if other == relations['controls']:
        return RelationType.ME_CONTROLLING
    if other == relations['produced_by']:
        return RelationType.PRODUCING_ME
    # 5 元环中两个不同五行之间必有且仅有一种生克关系
    return RelationType.CONTROLLING_ME


def get_producing_element(element: Element) -> Element:
    """获取被生的元素"""
    return ELEMENT_RELATIONS[element]['produces']


def get_controlled_element(element: Element) -> Element:
    """获取被克的元素"""
    return ELEMENT_RELATIONS[element]['controls']


def get_producing_from_element(element: Element) -> Element:
    """获取生我的元素"""
    return ELEMENT_RELATIONS[element]['produced_by']


def get_controlled_by_element(element: Element) -> Element:
    """获取克我的元素"""
    return ELEMENT_RELATIONS[element]['controlled_by']


def polarity_from_parity(value: int) -> Polarity:
    """奇数为阳，偶数为阴"""
    return Polarity.YANG if value % 2 != 0 else Polarity.YIN
