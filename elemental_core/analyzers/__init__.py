# -*- coding: utf-8 -*-
"""
分析器模块：个人相性与团队五行动态
"""

from .compatibility_analyzer import CompatibilityAnalyzer
from .team_dynamics_analyzer import TeamDynamicsAnalyzer

__all__ = [
    'CompatibilityAnalyzer',
    'TeamDynamicsAnalyzer',
]
