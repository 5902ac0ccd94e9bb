# -*- coding: utf-8 -*-
"""
stones/blink.py
眨眼模拟：

  - apply_blinks：保留顺序，完整展开序列（仅适合小步数，长度最多按 2^N 增长）
  - count_stones_after_blinks：只计数，不展开序列

每颗石子的演化彼此独立，所以多重集合的计数等于每颗起始石子计数之和；
单颗计数按 (stone, blinks) 记忆化。记忆表只属于一次调用，调用结束即丢弃。
"""
from __future__ import annotations
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from . import config
from .rules import check_stone, transform

__all__ = [
    "GrowthSeries",
    "check_blinks",
    "apply_blink",
    "apply_blinks",
    "count_stone_descendants",
    "count_stone_descendants_naive",
    "count_by_frequency",
    "count_stones_after_blinks",
    "growth_series",
]

logger = logging.getLogger(__name__)

MemoTable = Dict[Tuple[int, int], int]


def check_blinks(blinks) -> int:
    if isinstance(blinks, bool) or not isinstance(blinks, int):
        raise TypeError(f"blink count must be an int, got {type(blinks).__name__}")
    if blinks < 0:
        raise ValueError(f"blink count must be non-negative, got {blinks}")
    return blinks


def _check_all(stones: Iterable[int]) -> List[int]:
    # 先整体校验，再开始模拟
    return [check_stone(s) for s in stones]


# ---------- 展开模式 ----------
def apply_blink(stones: Sequence[int]) -> List[int]:
    """One blink over the whole row; each stone's replacements stay in place."""
    out: List[int] = []
    for s in stones:
        out.extend(transform(s))
    return out


def apply_blinks(initial_stones: Iterable[int], blinks: int) -> List[int]:
    """
    Apply ``blinks`` blinks and return the full resulting row.

    >>> apply_blinks([125, 17], 1)
    [253000, 1, 7]
    >>> apply_blinks([125, 17], 2)
    [253, 0, 2024, 14168]
    """
    stones = _check_all(initial_stones)
    blinks = check_blinks(blinks)
    for i in range(blinks):
        stones = apply_blink(stones)
        logger.debug("apply: blink %d -> %d stones", i + 1, len(stones))
    return stones


# ---------- 计数模式 ----------
def count_stone_descendants(stone: int, blinks: int, cache: Optional[MemoTable] = None) -> int:
    """
    Number of stones ``stone`` turns into after ``blinks`` blinks (itself included
    when ``blinks == 0``). Results are memoized in ``cache`` keyed by
    ``(stone, blinks)``; pass the same dict to share work across calls.

    Recursion depth grows with ``blinks``; see ``count_by_frequency`` for
    very large blink counts.
    """
    stone = check_stone(stone)
    blinks = check_blinks(blinks)
    return _count(stone, blinks, {} if cache is None else cache)


def _count(stone: int, blinks: int, cache: MemoTable) -> int:
    if blinks == 0:
        return 1
    key = (stone, blinks)
    hit = cache.get(key)
    if hit is not None:
        return hit
    # 显式循环：每层只占一个栈帧
    result = 0
    for s in transform(stone):
        result += _count(s, blinks - 1, cache)
    cache[key] = result
    return result


def count_stone_descendants_naive(stone: int, blinks: int) -> int:
    """Unmemoized reference version (exponential; keep blinks small)."""
    return _count_naive(check_stone(stone), check_blinks(blinks))


def _count_naive(stone: int, blinks: int) -> int:
    if blinks == 0:
        return 1
    return sum(_count_naive(s, blinks - 1) for s in transform(stone))


def _step_frequency(freq: Counter) -> Counter:
    nxt: Counter = Counter()
    for value, mult in freq.items():
        for s in transform(value):
            nxt[s] += mult
    return nxt


def count_by_frequency(stones: Iterable[int], blinks: int) -> int:
    """Iterative count over a value -> multiplicity map; no recursion limit."""
    stones = _check_all(stones)
    blinks = check_blinks(blinks)
    freq = Counter(stones)
    for _ in range(blinks):
        freq = _step_frequency(freq)
    return sum(freq.values())


def _resolve_strategy(strategy: Optional[str], blinks: int) -> str:
    s = config.normalize_strategy(strategy)
    if s == "auto":
        return "memo" if blinks <= config.MEMO_DEPTH_LIMIT else "frequency"
    return s


def count_stones_after_blinks(initial_stones: Iterable[int], blinks: int, strategy: str = "auto") -> int:
    """
    Total number of stones after ``blinks`` blinks, without building the row.

    >>> count_stones_after_blinks([125, 17], 6)
    22
    >>> count_stones_after_blinks([125, 17], 25)
    55312
    """
    stones = _check_all(initial_stones)
    blinks = check_blinks(blinks)
    strategy = _resolve_strategy(strategy, blinks)

    if strategy == "frequency":
        total = count_by_frequency(stones, blinks)
        logger.debug("count[frequency]: %d stones after %d blinks", total, blinks)
        return total

    cache: MemoTable = {}
    total = sum(_count(s, blinks, cache) for s in stones)
    logger.debug("count[memo]: %d stones after %d blinks (memo entries=%d)", total, blinks, len(cache))
    return total


# ---------- 增长曲线 ----------
@dataclass
class GrowthSeries:
    """Per-blink statistics; index ``i`` describes the row after ``i`` blinks."""
    stones: Tuple[int, ...]
    counts: np.ndarray
    distinct: np.ndarray

    @property
    def blinks(self) -> np.ndarray:
        return np.arange(self.counts.size)

    def rows(self) -> List[dict]:
        return [
            {"blink": int(i), "stones": int(c), "distinct": int(d)}
            for i, c, d in zip(self.blinks, self.counts, self.distinct)
        ]


def growth_series(initial_stones: Iterable[int], blinks: int) -> GrowthSeries:
    """
    Stone counts and distinct stone values for every blink ``0..blinks``.

    Counts are kept as exact Python ints (``dtype=object``) since they grow
    past the int64 range for large blink counts.
    """
    stones = tuple(_check_all(initial_stones))
    blinks = check_blinks(blinks)
    counts = np.empty(blinks + 1, dtype=object)
    distinct = np.empty(blinks + 1, dtype=object)
    freq = Counter(stones)
    for i in range(blinks + 1):
        if i:
            freq = _step_frequency(freq)
        counts[i] = sum(freq.values())
        distinct[i] = len(freq)
    return GrowthSeries(stones=stones, counts=counts, distinct=distinct)
