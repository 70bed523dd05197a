#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
查找表加载器 - 从 JSON 文件覆盖默认运势查找表
支持缓存和热更新

文件格式（任意顶层表均可省略，省略者使用默认值）：

    {
        "lucky_colors": {"木": ["绿色", "青色", "橄榄绿"], "火": [...], ...},
        "closings": {"木": "...", "火": "...", ...},
        "advice_templates": {"career": {"木": "...", ...}, ...},
        "category_affinities": {
            "career": {"primary": "木", "primary_bonus": 10,
                       "secondary": "金", "secondary_bonus": 5,
                       "penalty_day": "土", "penalty_personal": "土", "penalty": 5},
            ...
        }
    }

每张表必须覆盖全部键（五行 / 分类 / 档位 / 关系），不完整的表会被忽略并保留默认值。
模板表只能使用默认表中出现的具名占位符；幸运颜色与方位不能有重复项。
"""

import dataclasses
import json
import logging
import string
import threading
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, FrozenSet, Optional, Type, Union

from elemental_core.config.engine_config import get_config
from elemental_core.config.fortune_tables import (
    DEFAULT_TABLES,
    CategoryAffinity,
    FortuneTables,
)
from elemental_core.models.enums import (
    Element,
    FortuneCategory,
    LuckTier,
    Polarity,
    RelationType,
)
from elemental_core.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_cache: Dict[Optional[str], FortuneTables] = {}
_lock = threading.Lock()


def _parse_enum_map(raw: Any, key_enum: Type[Enum], parse_value: Callable[[Any], Any]) -> Dict[Any, Any]:
    """解析以枚举值为键的映射，必须覆盖枚举的全部成员"""
    if not isinstance(raw, dict):
        raise ValueError(f"应为对象，实际为 {type(raw).__name__}")
    result = {}
    for key, value in raw.items():
        try:
            member = key_enum(key)
        except ValueError:
            raise ValueError(f"未知的键: {key!r}")
        result[member] = parse_value(value)
    missing = [member.value for member in key_enum if member not in result]
    if missing:
        raise ValueError(f"缺少键: {missing}")
    return result


def _parse_str(value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise ValueError(f"应为非空字符串: {value!r}")
    return value


def _parse_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"应为整数: {value!r}")
    return value


def _template(fields: FrozenSet[str]) -> Callable[[Any], str]:
    """模板字符串：只允许使用 fields 中的具名占位符，且不带格式说明"""
    def parse(value: Any) -> str:
        text = _parse_str(value)
        for _, field_name, format_spec, _ in string.Formatter().parse(text):
            if field_name is None:
                continue
            if field_name not in fields:
                raise ValueError(f"模板包含未知占位符 {{{field_name}}}，可用: {sorted(fields)}")
            if format_spec:
                raise ValueError(f"模板占位符不支持格式说明: {{{field_name}:{format_spec}}}")
        return text
    return parse


def _str_list(min_length: int, unique: bool = False) -> Callable[[Any], list]:
    def parse(value: Any) -> list:
        if not isinstance(value, list) or len(value) < min_length:
            raise ValueError(f"应为至少 {min_length} 项的列表: {value!r}")
        items = [_parse_str(item) for item in value]
        if unique and len(set(items)) != len(items):
            raise ValueError(f"列表包含重复项: {value!r}")
        return items
    return parse


DESCRIPTION_FIELDS = frozenset({'personal', 'day', 'label'})
RELATION_SENTENCE_FIELDS = frozenset({'personal', 'day'})
ADVICE_TIER_FIELDS = frozenset({'strengths', 'strength', 'weaknesses', 'weakness'})


def _trait_lists(required: Dict[str, int]) -> Callable[[Any], Dict[str, list]]:
    def parse(value: Any) -> Dict[str, list]:
        if not isinstance(value, dict):
            raise ValueError(f"应为对象: {value!r}")
        return {name: _str_list(min_length)(value.get(name)) for name, min_length in required.items()}
    return parse


def _parse_affinity(value: Any) -> CategoryAffinity:
    if not isinstance(value, dict):
        raise ValueError(f"应为对象: {value!r}")
    try:
        return CategoryAffinity(
            primary=Element(value['primary']),
            primary_bonus=_parse_int(value['primary_bonus']),
            secondary=Element(value['secondary']),
            secondary_bonus=_parse_int(value['secondary_bonus']),
            penalty_day=Element(value['penalty_day']),
            penalty_personal=Element(value['penalty_personal']),
            penalty=_parse_int(value['penalty']),
        )
    except KeyError as e:
        raise ValueError(f"缺少字段: {e}")


# 表名 -> 解析函数
TABLE_PARSERS: Dict[str, Callable[[Any], Any]] = {
    'category_affinities': lambda raw: _parse_enum_map(raw, FortuneCategory, _parse_affinity),
    'base_relation_adjustments': lambda raw: _parse_enum_map(raw, RelationType, _parse_int),
    'category_relation_adjustments': lambda raw: _parse_enum_map(raw, RelationType, _parse_int),
    'element_properties': lambda raw: _parse_enum_map(
        raw, Element, _trait_lists({'keywords': 3, 'strengths': 2, 'weaknesses': 2})),
    'polarity_properties': lambda raw: _parse_enum_map(
        raw, Polarity, _trait_lists({'nature': 2, 'traits': 2})),
    'lucky_colors': lambda raw: _parse_enum_map(raw, Element, _str_list(3, unique=True)),
    'lucky_directions': lambda raw: _parse_enum_map(raw, Element, _str_list(1, unique=True)),
    'tier_labels': lambda raw: _parse_enum_map(raw, LuckTier, _parse_str),
    'description_templates': lambda raw: _parse_enum_map(raw, LuckTier, _template(DESCRIPTION_FIELDS)),
    'relation_sentences': lambda raw: _parse_enum_map(raw, RelationType, _template(RELATION_SENTENCE_FIELDS)),
    'advice_tier_templates': lambda raw: _parse_enum_map(raw, LuckTier, _template(ADVICE_TIER_FIELDS)),
    'category_intros': lambda raw: _parse_enum_map(raw, FortuneCategory, _parse_str),
    'advice_templates': lambda raw: _parse_enum_map(
        raw, FortuneCategory, lambda inner: _parse_enum_map(inner, Element, _parse_str)),
    'closings': lambda raw: _parse_enum_map(raw, Element, _parse_str),
}


def _fallback(message: str, source: str, strict: bool) -> FortuneTables:
    if strict:
        raise ConfigurationError(message, source=source)
    logger.warning(f"⚠️ {message}，使用默认查找表")
    return DEFAULT_TABLES


def _load_from_file(path: Path, strict: bool) -> FortuneTables:
    """读取 JSON 覆盖文件，逐表校验完整性"""
    source = str(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        return _fallback(f"读取查找表文件失败: {source}, 错误: {e}", source, strict)

    if not isinstance(raw, dict):
        return _fallback(f"查找表文件根节点必须是对象: {source}", source, strict)

    overrides: Dict[str, Any] = {}
    for table_name, table_raw in raw.items():
        parser = TABLE_PARSERS.get(table_name)
        if parser is None:
            logger.warning(f"⚠️ 忽略未知查找表: {table_name}")
            continue
        try:
            overrides[table_name] = parser(table_raw)
        except (ValueError, TypeError) as e:
            if strict:
                raise ConfigurationError(f"查找表 {table_name} 不完整: {e}", source=source)
            logger.warning(f"⚠️ 查找表 {table_name} 不完整，保留默认值: {e}")

    logger.info(f"✓ 已加载查找表覆盖（文件）：{source}，{len(overrides)}张表")
    return dataclasses.replace(DEFAULT_TABLES, **overrides)


def load_fortune_tables(path: Union[str, Path, None] = None, strict: bool = False) -> FortuneTables:
    """
    获取运势查找表

    Args:
        path: JSON 覆盖文件路径；为 None 时使用 FORTUNE_TABLES_PATH 配置，未配置则返回默认表
        strict: 为 True 时文件读取失败或表不完整直接抛出 ConfigurationError

    Returns:
        FortuneTables: 查找表（按路径缓存）
    """
    if path is None:
        path = get_config().tables_path
    if path is None:
        return DEFAULT_TABLES

    key = str(Path(path))
    with _lock:
        cached = _cache.get(key)
        if cached is not None:
            return cached
        tables = _load_from_file(Path(path), strict)
        _cache[key] = tables
        return tables


def clear_table_cache() -> None:
    """清空查找表缓存（热更新）"""
    with _lock:
        _cache.clear()
    logger.info("✓ 已清除所有查找表缓存")
