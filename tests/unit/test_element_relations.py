#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""五行生克关系单元测试"""

import pytest

from elemental_core.calculators.element_relations import (
    CONTROLLING_RELATIONS,
    ELEMENT_ORDER,
    GENERATING_RELATIONS,
    element_at,
    get_controlled_by_element,
    get_controlled_element,
    get_element_relation,
    get_producing_element,
    get_producing_from_element,
    is_controlling,
    is_generating,
    polarity_from_parity,
)
from elemental_core.models import Element, Polarity, RelationType


class TestCycleInvariant:
    """生克各自构成 5 元环"""

    @pytest.mark.parametrize("predicate", [is_generating, is_controlling], ids=["generating", "controlling"])
    @pytest.mark.parametrize("element", list(Element), ids=[e.name for e in Element])
    def test_exactly_one_target_and_source(self, predicate, element):
        targets = [other for other in Element if predicate(element, other)]
        sources = [other for other in Element if predicate(other, element)]
        assert len(targets) == 1
        assert len(sources) == 1

    @pytest.mark.parametrize("predicate", [is_generating, is_controlling], ids=["generating", "controlling"])
    def test_no_self_relation(self, predicate):
        for element in Element:
            assert not predicate(element, element)

    @pytest.mark.parametrize("table", [GENERATING_RELATIONS, CONTROLLING_RELATIONS], ids=["generating", "controlling"])
    def test_single_cycle_through_all_elements(self, table):
        visited = []
        current = Element.WOOD
        for _ in range(5):
            visited.append(current)
            current = table[current]
        assert current == Element.WOOD
        assert set(visited) == set(Element)

    def test_generating_order(self):
        assert GENERATING_RELATIONS == {
            Element.WOOD: Element.FIRE,
            Element.FIRE: Element.EARTH,
            Element.EARTH: Element.METAL,
            Element.METAL: Element.WATER,
            Element.WATER: Element.WOOD,
        }

    def test_controlling_order(self):
        assert CONTROLLING_RELATIONS == {
            Element.WOOD: Element.EARTH,
            Element.EARTH: Element.WATER,
            Element.WATER: Element.FIRE,
            Element.FIRE: Element.METAL,
            Element.METAL: Element.WOOD,
        }

    def test_distinct_pairs_have_exactly_one_relation(self):
        for a in Element:
            for b in Element:
                if a == b:
                    continue
                flags = [is_generating(a, b), is_generating(b, a), is_controlling(a, b), is_controlling(b, a)]
                assert sum(flags) == 1, f"{a.value}-{b.value}: {flags}"


class TestGetElementRelation:
    @pytest.mark.parametrize("me, other, expected", [
        (Element.WATER, Element.WATER, RelationType.SAME),
        (Element.WOOD, Element.FIRE, RelationType.ME_PRODUCING),
        (Element.FIRE, Element.WOOD, RelationType.PRODUCING_ME),
        (Element.WOOD, Element.EARTH, RelationType.ME_CONTROLLING),
        (Element.EARTH, Element.WOOD, RelationType.CONTROLLING_ME),
        (Element.METAL, Element.FIRE, RelationType.CONTROLLING_ME),
    ])
    def test_relation(self, me, other, expected):
        assert get_element_relation(me, other) == expected

    def test_helpers(self):
        assert get_producing_element(Element.WOOD) == Element.FIRE
        assert get_controlled_element(Element.WOOD) == Element.EARTH
        assert get_producing_from_element(Element.WOOD) == Element.WATER
        assert get_controlled_by_element(Element.WOOD) == Element.METAL


class TestPositional:
    def test_order(self):
        assert ELEMENT_ORDER == [Element.WOOD, Element.FIRE, Element.EARTH, Element.METAL, Element.WATER]

    @pytest.mark.parametrize("index, expected", [
        (0, Element.WOOD), (2, Element.EARTH), (4, Element.WATER), (7, Element.EARTH), (1993, Element.METAL),
    ])
    def test_element_at(self, index, expected):
        assert element_at(index) == expected

    def test_polarity_from_parity(self):
        assert polarity_from_parity(1991) == Polarity.YANG
        assert polarity_from_parity(1990) == Polarity.YIN
        assert polarity_from_parity(0) == Polarity.YIN
