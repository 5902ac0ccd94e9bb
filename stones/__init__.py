"""Plutonian pebbles: stone transformation rule and blink simulation.

The public surface is re-exported here so callers can write
``from stones import count_stones_after_blinks`` without caring which
module a helper lives in.
"""

from .rules import count_digits, split_number, transform
from .blink import (
    GrowthSeries,
    apply_blink,
    apply_blinks,
    count_stone_descendants,
    count_stones_after_blinks,
    growth_series,
)

__all__ = [
    "count_digits",
    "split_number",
    "transform",
    "GrowthSeries",
    "apply_blink",
    "apply_blinks",
    "count_stone_descendants",
    "count_stones_after_blinks",
    "growth_series",
]
