#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""日志工具与随机源单元测试"""

import logging
import os
import random
from datetime import date
from unittest.mock import patch

import pytest

from elemental_core.calculators.engine_logging import (
    LOGGER_NAME,
    SafeStreamHandler,
    setup_logging,
)
from elemental_core.utils.exceptions import EngineError, InvalidDateError, ValidationError
from elemental_core.utils.random_source import RandomSource, default_random, seeded_random


class BrokenStream:
    def write(self, _):
        raise BrokenPipeError()

    def flush(self):
        raise BrokenPipeError()


@pytest.fixture
def engine_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


class TestLogging:
    def test_safe_handler_swallows_broken_pipe(self):
        handler = SafeStreamHandler(BrokenStream())
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "消息", None, None)
        handler.emit(record)

    def test_setup_logging_installs_once(self, engine_logger):
        setup_logging('DEBUG')
        setup_logging('WARNING')
        safe_handlers = [h for h in engine_logger.handlers if isinstance(h, SafeStreamHandler)]
        assert len(safe_handlers) == 1
        assert engine_logger.level == logging.WARNING

    def test_setup_logging_reads_config(self, engine_logger):
        with patch.dict(os.environ, {'FORTUNE_LOG_LEVEL': 'ERROR'}):
            setup_logging()
        assert engine_logger.level == logging.ERROR


class TestRandomSource:
    def test_random_satisfies_protocol(self):
        rng: RandomSource = random.Random(1)
        assert -8 <= rng.randint(-8, 8) <= 8
        assert len(rng.sample(['a', 'b', 'c'], 2)) == 2

    def test_seeded_random_is_stable(self):
        a = seeded_random(date(1990, 3, 15), date(2024, 6, 1))
        b = seeded_random(date(1990, 3, 15), date(2024, 6, 1))
        assert [a.randint(0, 1000) for _ in range(5)] == [b.randint(0, 1000) for _ in range(5)]

    def test_seeded_random_differs_by_date(self):
        a = seeded_random(date(1990, 3, 15), date(2024, 6, 1))
        b = seeded_random(date(1990, 3, 15), date(2024, 6, 2))
        assert [a.random() for _ in range(3)] != [b.random() for _ in range(3)]

    def test_default_random_with_seed(self):
        assert default_random(3).random() == random.Random(3).random()


class TestExceptions:
    def test_hierarchy(self):
        error = InvalidDateError('2024/06/01', field='target_date')
        assert isinstance(error, ValidationError)
        assert isinstance(error, EngineError)
        assert error.code == 400
        assert error.value == '2024/06/01'
        assert "'2024/06/01'" in str(error)

    def test_validation_error_without_field(self):
        error = ValidationError('参数错误')
        assert error.field is None
        assert error.error_type == 'validation_error'
