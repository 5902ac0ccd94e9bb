# -*- coding: utf-8 -*-
"""
stones/rules.py
单颗石子的变换规则（AOC 2024 day 11）：

  1. 0            -> 1
  2. 偶数位十进制 -> 从中间拆成左右两颗（各自去掉前导零）
  3. 其余         -> stone * 2024

位数与拆分全部使用整数运算，不使用 log10（避免 10 的幂处差一）。
"""
from __future__ import annotations
from typing import Tuple

__all__ = [
    "MULTIPLIER",
    "check_stone",
    "count_digits",
    "split_number",
    "transform",
]

MULTIPLIER = 2024


def check_stone(stone) -> int:
    # bool 是 int 的子类，这里显式排除
    if isinstance(stone, bool) or not isinstance(stone, int):
        raise TypeError(f"stone must be an int, got {type(stone).__name__}")
    if stone < 0:
        raise ValueError(f"stone must be non-negative, got {stone}")
    return stone


def count_digits(n: int) -> int:
    """Number of decimal digits of ``n``; ``count_digits(0) == 1``."""
    n = check_stone(n)
    digits, bound = 1, 10
    while n >= bound:
        digits += 1
        bound *= 10
    return digits


def split_number(n: int, digits: int) -> Tuple[int, int]:
    """Split ``n`` by digits: 1234 -> (12, 34), 1000 -> (10, 0), 123 -> (12, 3)."""
    pow10 = 10 ** (digits // 2)
    left = n // pow10
    right = n - left * pow10
    return left, right


def transform(stone: int) -> Tuple[int, ...]:
    """Return the one or two stones replacing ``stone`` after a single blink."""
    stone = check_stone(stone)
    if stone == 0:
        return (1,)
    digits = count_digits(stone)
    if digits % 2 == 0:
        return split_number(stone, digits)
    return (stone * MULTIPLIER,)
