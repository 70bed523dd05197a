#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
可注入的随机源

分类分数的随机扰动、幸运颜色/方位的抽样是引擎中仅有的不确定部分，
全部通过 RandomSource 注入：
- 生产环境：random.Random()
- 稳定模式：同一生日 + 同一日期 = 同一结果（md5 种子）
- 测试：固定种子或桩对象
"""

import hashlib
import random
from datetime import date
from typing import List, Optional, Protocol, Sequence, TypeVar

T = TypeVar('T')


class RandomSource(Protocol):
    """随机源协议（random.Random 天然满足）"""

    def randint(self, a: int, b: int) -> int:
        ...

    def sample(self, population: Sequence[T], k: int) -> List[T]:
        ...


def seeded_random(birth_date: date, target_date: date) -> random.Random:
    """根据生日和目标日期生成固定种子的随机源"""
    seed_string = f"{birth_date.isoformat()}_{target_date.strftime('%Y%m%d')}"
    seed = int(hashlib.md5(seed_string.encode()).hexdigest()[:8], 16)
    return random.Random(seed)


def default_random(seed: Optional[int] = None) -> random.Random:
    """生产环境默认随机源"""
    return random.Random(seed)
