#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行运势引擎异常定义

引擎本身对格式正确的输入没有失败路径，这里的异常只用于前置条件校验：
- 日期格式错误（调用方应在调用前校验，引擎快速失败而不是替换默认值）
- 参数越界（如负数天数、非法月份）
- 配置表加载误用
"""

from typing import Any, Optional


class EngineError(Exception):
    """
    引擎异常基类

    与 Python 系统异常区分开来，便于上层服务统一映射为业务错误码。
    """
    def __init__(self, message: str, code: int = 400, error_type: str = "engine_error"):
        self.message = message
        self.code = code
        self.error_type = error_type
        super().__init__(message)


class ValidationError(EngineError):
    """参数验证错误"""
    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        error_type = f"validation_error:{field}" if field else "validation_error"
        super().__init__(message, code=400, error_type=error_type)


class InvalidDateError(ValidationError):
    """日期格式错误（要求 YYYY-MM-DD）"""
    def __init__(self, value: Any, field: str = "date"):
        self.value = value
        message = f"无效的日期: {value!r}，请使用 YYYY-MM-DD 格式"
        super().__init__(message, field=field)


class ConfigurationError(EngineError):
    """运势配置表错误"""
    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        super().__init__(message, code=500, error_type="configuration_error")
