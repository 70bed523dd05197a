#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 共享 fixtures
- 测试钩子
- 全局配置
"""

import pytest
import random
import sys
import os
from typing import List, Sequence

# 添加项目根目录到路径
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from elemental_core.config import engine_config
from elemental_core.config.engine_config import EngineConfig
from elemental_core.config.table_loader import clear_table_cache
from elemental_core.models import Element, ElementalProfile, Polarity


class ZeroRandom:
    """
    固定随机源：randint 恒返回 0（扰动为零），sample 取前 k 个

    用于精确断言分类分数与幸运属性
    """

    def randint(self, a: int, b: int) -> int:
        return max(a, min(b, 0))

    def sample(self, population: Sequence, k: int) -> List:
        return list(population)[:k]


# ==================== 随机源 Fixtures ====================

@pytest.fixture(scope="function")
def fixed_rng() -> random.Random:
    """
    固定种子随机源（每个测试函数独立）

    Returns:
        random.Random
    """
    return random.Random(20240601)


@pytest.fixture(scope="function")
def zero_rng() -> ZeroRandom:
    """扰动为零的随机源"""
    return ZeroRandom()


# ==================== 配置 Fixtures ====================

@pytest.fixture(scope="function")
def engine_config_default() -> EngineConfig:
    """默认引擎配置（不读取环境变量）"""
    return EngineConfig()


@pytest.fixture(autouse=True)
def reset_engine_state():
    """
    每个测试前后重置全局配置单例与查找表缓存
    """
    engine_config._config = None
    clear_table_cache()
    yield
    engine_config._config = None
    clear_table_cache()


# ==================== 数据 Fixtures ====================

@pytest.fixture(scope="function")
def sample_birth_date() -> str:
    """
    示例生日（金 / 金 / 阴）

    Returns:
        日期字符串 YYYY-MM-DD
    """
    return "1990-03-15"


@pytest.fixture(scope="function")
def sample_target_date() -> str:
    """
    示例目标日期（火 / 阳）

    Returns:
        日期字符串 YYYY-MM-DD
    """
    return "2024-06-01"


@pytest.fixture(scope="function")
def wood_yang() -> ElementalProfile:
    return ElementalProfile(main_element=Element.WOOD, polarity=Polarity.YANG)


@pytest.fixture(scope="function")
def fire_yin() -> ElementalProfile:
    return ElementalProfile(main_element=Element.FIRE, polarity=Polarity.YIN)


@pytest.fixture(scope="function")
def five_element_team() -> List[ElementalProfile]:
    """
    五行齐全的团队（阴阳交替）

    Returns:
        木阳、火阴、土阳、金阴、水阳
    """
    polarities = [Polarity.YANG, Polarity.YIN]
    return [
        ElementalProfile(main_element=element, polarity=polarities[index % 2])
        for index, element in enumerate(Element)
    ]


# ==================== 钩子 ====================

def pytest_configure(config):
    """
    pytest 配置钩子

    在 pytest 初始化时调用
    """
    # 添加自定义标记说明
    config.addinivalue_line("markers", "slow: 标记为慢速测试，可通过 -m 'not slow' 跳过")
    config.addinivalue_line("markers", "unit: 单元测试")


def pytest_collection_modifyitems(config, items):
    """
    修改测试收集

    自动为测试添加标记
    """
    for item in items:
        # 根据路径自动添加标记
        if "unit" in item.nodeid:
            item.add_marker(pytest.mark.unit)
