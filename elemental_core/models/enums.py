#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行运势引擎枚举定义

所有查表位置都以这些封闭枚举为键，增删元素时各张表必须同步补全。
"""

from enum import Enum


class Element(str, Enum):
    """五行（声明顺序即 mod 5 公式使用的位置索引）"""
    WOOD = '木'
    FIRE = '火'
    EARTH = '土'
    METAL = '金'
    WATER = '水'


class Polarity(str, Enum):
    """阴阳"""
    YIN = '阴'
    YANG = '阳'


class RelationType(str, Enum):
    """以"我"为基准的五行关系"""
    SAME = 'same'
    ME_PRODUCING = 'me_producing'
    PRODUCING_ME = 'producing_me'
    ME_CONTROLLING = 'me_controlling'
    CONTROLLING_ME = 'controlling_me'


class FortuneCategory(str, Enum):
    """运势分类（声明顺序即最高分并列时的优先顺序）"""
    CAREER = 'career'
    RELATIONSHIP = 'relationship'
    CREATIVITY = 'creativity'
    HEALTH = 'health'
    WEALTH = 'wealth'


class LuckTier(str, Enum):
    """总运势档位"""
    EXCELLENT = 'excellent'
    GOOD = 'good'
    NEUTRAL = 'neutral'
    CAUTION = 'caution'
    POOR = 'poor'


class FortuneRating(str, Enum):
    """运势评级（供持久化层展示使用）"""
    EXCELLENT = 'excellent'
    GOOD = 'good'
    NEUTRAL = 'neutral'
    CAUTION = 'caution'
    POOR = 'poor'


class CompatibilityLevel(str, Enum):
    """相性等级"""
    EXCELLENT = 'excellent'
    GOOD = 'good'
    NEUTRAL = 'neutral'
    CHALLENGING = 'challenging'
    DIFFICULT = 'difficult'


class TeamBalanceLevel(str, Enum):
    """团队五行平衡等级"""
    EXCELLENT = 'excellent'
    GOOD = 'good'
    INCOMPLETE = 'incomplete'
    IMBALANCED = 'imbalanced'
