# -*- coding: utf-8 -*-
"""
stones/config.py
全局轻量配置：默认石子序列、默认模式与步数、输出目录等。
Every value can be overridden through a ``STONES_*`` environment variable.
"""

from __future__ import annotations
from pathlib import Path
import os
import re

from typing import Iterable, Optional, Tuple

MODES = ("apply", "count")
STRATEGIES = ("auto", "memo", "frequency")

# 默认石子（谜题示例）
DEFAULT_STONES: Tuple[int, ...] = tuple(
    int(tok) for tok in re.split(r"[\s,]+", os.getenv("STONES_DEFAULT_STONES", "125 17").strip()) if tok
)

# 省略 mode 时的默认模式；count 对任意步数都可行
DEFAULT_MODE = os.getenv("STONES_DEFAULT_MODE", "count")

# 省略 steps 时的默认步数（按模式）
DEFAULT_STEPS = {
    "apply": int(os.getenv("STONES_APPLY_STEPS", "25")),
    "count": int(os.getenv("STONES_COUNT_STEPS", "25")),
}

# 记忆化递归的最大深度；超过后 auto 策略改用频次迭代
MEMO_DEPTH_LIMIT = int(os.getenv("STONES_MEMO_DEPTH_LIMIT", "500"))

# 日志级别（CLI 的 -v 会覆盖）
LOG_LEVEL = os.getenv("STONES_LOG_LEVEL", "INFO")

# 图表风格（viz.apply_style 支持的枚举）
DEFAULT_STYLE = os.getenv("STONES_STYLE", "default")

# 结果根目录（各 CLI 可覆盖）
RESULTS_ROOT = Path(os.getenv("STONES_RESULTS_ROOT", "./results")).resolve()
OUT_CSV_DEFAULT = RESULTS_ROOT / "out_csv"
OUT_FIG_DEFAULT = RESULTS_ROOT / "figs"

# -------------------------
# 参数规范化 / 校验
# -------------------------

_INT_RX = re.compile(r"^[+-]?\d+$")


def looks_like_int(token: str) -> bool:
    return bool(_INT_RX.match(str(token).strip()))


def normalize_mode(mode: Optional[str]) -> str:
    m = (mode or DEFAULT_MODE).strip().lower()
    if m not in MODES:
        raise ValueError(f"mode must be one of {list(MODES)}, got '{mode}'")
    return m


def normalize_strategy(strategy: Optional[str]) -> str:
    s = (strategy or "auto").strip().lower()
    if s not in STRATEGIES:
        raise ValueError(f"strategy must be one of {list(STRATEGIES)}, got '{strategy}'")
    return s


def default_steps(mode: Optional[str]) -> int:
    return DEFAULT_STEPS[normalize_mode(mode)]


def parse_steps(token: str) -> int:
    """Parse the blink count; negative values are rejected rather than clamped."""
    if not looks_like_int(token):
        raise ValueError(f"steps must be a non-negative integer, got '{token}'")
    steps = _to_int(token, "steps")
    if steps < 0:
        raise ValueError(f"steps must be a non-negative integer, got {steps}")
    return steps


def _to_int(token: str, what: str) -> int:
    # 超长十进制串会触发解释器的 int/str 位数上限
    try:
        return int(token)
    except ValueError as exc:
        raise ValueError(f"{what} could not be converted to an integer: {exc}") from exc


def parse_stone(token: str, position: int = 0) -> int:
    what = f"stone #{position + 1}"
    if not looks_like_int(token):
        raise ValueError(f"{what} must be a non-negative integer, got '{token}'")
    stone = _to_int(token, what)
    if stone < 0:
        raise ValueError(f"{what} must be a non-negative integer, got '{token}'")
    return stone


def parse_stones(tokens: Optional[Iterable[str]]) -> Tuple[int, ...]:
    """Parse stone tokens; an empty input resolves to ``DEFAULT_STONES``."""
    stones = tuple(parse_stone(tok, i) for i, tok in enumerate(tokens or ()))
    return stones or DEFAULT_STONES


__all__ = [
    "MODES",
    "STRATEGIES",
    "DEFAULT_STONES",
    "DEFAULT_MODE",
    "DEFAULT_STEPS",
    "MEMO_DEPTH_LIMIT",
    "LOG_LEVEL",
    "DEFAULT_STYLE",
    "RESULTS_ROOT",
    "OUT_CSV_DEFAULT",
    "OUT_FIG_DEFAULT",
    "looks_like_int",
    "normalize_mode",
    "normalize_strategy",
    "default_steps",
    "parse_steps",
    "parse_stone",
    "parse_stones",
]
