# -*- coding: utf-8 -*-
"""
计算器模块：五行生克关系与五行属性计算
"""

from .element_relations import (
    ELEMENT_ORDER,
    GENERATING_RELATIONS,
    CONTROLLING_RELATIONS,
    ELEMENT_RELATIONS,
    element_at,
    is_generating,
    is_controlling,
    get_element_relation,
    get_producing_element,
    get_controlled_element,
    get_producing_from_element,
    get_controlled_by_element,
    polarity_from_parity,
)
from .element_calculator import ElementCalculator, clamp
from .engine_logging import SafeStreamHandler, setup_logging

__all__ = [
    'ELEMENT_ORDER',
    'GENERATING_RELATIONS',
    'CONTROLLING_RELATIONS',
    'ELEMENT_RELATIONS',
    'element_at',
    'is_generating',
    'is_controlling',
    'get_element_relation',
    'get_producing_element',
    'get_controlled_element',
    'get_producing_from_element',
    'get_controlled_by_element',
    'polarity_from_parity',
    'ElementCalculator',
    'clamp',
    'SafeStreamHandler',
    'setup_logging',
]
