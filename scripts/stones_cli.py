# -*- coding: utf-8 -*-
"""Command-line entry for the plutonian pebbles simulation.

Usage::

    stones [options] [mode] [steps] [stone ...]

    stones count 25 125 17     # -> 55312
    stones apply 1 125 17      # -> 253000 1 7
    stones 6                   # default mode (count), default stones

Results go to stdout; progress/timing logs go to stderr.
"""
from __future__ import annotations
# --- add project root to sys.path (robust for absolute execution) ---
import sys, pathlib
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
# --------------------------------------------------------------------
import argparse
import time
from typing import Iterable, Optional, Sequence, Tuple

from stones import config as stones_config
from stones import logging_setup
from stones.blink import apply_blinks, count_stones_after_blinks, growth_series
from stones.utils_io import make_run_tag, write_csv

LOGGER = logging_setup.get_logger("stones_cli")


def resolve_invocation(tokens: Sequence[str]) -> Tuple[str, int, Tuple[int, ...]]:
    """
    Split positional tokens into ``(mode, steps, stones)`` and fill defaults.

    The first token is the mode unless it parses as an integer, in which case
    the mode falls back to ``config.DEFAULT_MODE``.

    Raises
    ------
    ValueError
        Unknown mode, malformed steps, or a malformed stone (message names which).
    """
    rest = list(tokens)
    if rest and not stones_config.looks_like_int(rest[0]):
        token = rest.pop(0)
        try:
            mode = stones_config.normalize_mode(token)
        except ValueError as exc:
            raise ValueError(f"first argument '{token}' is not an integer, so it was read as the mode: {exc}") from exc
    else:
        mode = stones_config.normalize_mode(None)
    if rest:
        steps = stones_config.parse_steps(rest.pop(0))
    else:
        steps = stones_config.default_steps(mode)
    stones = stones_config.parse_stones(rest)
    return mode, steps, stones


def lift_int_digit_limit():
    """Stones and counts have no upper bound; drop the int/str digit cap (3.11+)."""
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)


def format_result(mode: str, result) -> str:
    if mode == "apply":
        return " ".join(str(s) for s in result)
    return str(result)


def run(args: argparse.Namespace):
    """Run one simulation; ``args.mode/steps/stones`` must already be resolved."""
    LOGGER.info("Blinking %d times and %sing results for %s", args.steps, args.mode, list(args.stones))
    t0 = time.perf_counter()
    if args.mode == "apply":
        result = apply_blinks(args.stones, args.steps)
        LOGGER.info("Count: %d", len(result))
    else:
        result = count_stones_after_blinks(args.stones, args.steps, strategy=args.strategy)
        LOGGER.info("Count: %d", result)
    LOGGER.info("Finished in %.3f seconds", time.perf_counter() - t0)

    if args.save_growth:
        # 未显式给路径时，按 run_tag 落到默认结果目录
        tag = make_run_tag(args.mode, args.steps, args.stones)
        args.growth_csv = args.growth_csv or str(stones_config.OUT_CSV_DEFAULT / f"growth_{tag}.csv")
        args.plot = args.plot or str(stones_config.OUT_FIG_DEFAULT / f"growth_{tag}.png")

    if args.growth_csv or args.plot:
        series = growth_series(args.stones, args.steps)
        if args.growth_csv:
            path = write_csv(args.growth_csv, series.rows(), fieldnames=["blink", "stones", "distinct"])
            LOGGER.info("growth CSV -> %s", path)
        if args.plot:
            # 延迟导入，避免无图需求时加载 matplotlib
            from stones.viz import plot_growth
            path = plot_growth(series, args.plot, y_log=not args.linear, style=args.style)
            LOGGER.info("growth figure -> %s", path)
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stones",
        description="Plutonian pebbles: blink a row of stones and print the row (apply) or its size (count).",
    )
    parser.add_argument("tokens", nargs="*", metavar="ARG",
                        help=f"mode ({'|'.join(stones_config.MODES)}, default {stones_config.DEFAULT_MODE}), "
                             f"blink count (default {stones_config.DEFAULT_STEPS}), "
                             f"initial stones (default {' '.join(map(str, stones_config.DEFAULT_STONES))})")
    parser.add_argument("-v", "--verbosity", type=int, default=1, choices=[0, 1, 2],
                        help="0=warnings only, 1=info, 2=debug")
    parser.add_argument("--strategy", default="auto", choices=list(stones_config.STRATEGIES),
                        help="count mode: memoized recursion, frequency map, or auto by blink count")
    parser.add_argument("--growth-csv", default=None, help="write per-blink stone counts to this CSV")
    parser.add_argument("--plot", default=None, help="save a growth curve figure (PNG) to this path")
    parser.add_argument("--save-growth", action="store_true",
                        help="write growth CSV and figure under the results root (STONES_RESULTS_ROOT)")
    parser.add_argument("--style", default=stones_config.DEFAULT_STYLE,
                        choices=["default", "ieee", "nature"])
    parser.add_argument("--linear", action="store_true", help="linear y axis for --plot")
    return parser


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(None if argv is None else list(argv))
    try:
        args.mode, args.steps, args.stones = resolve_invocation(args.tokens)
    except ValueError as exc:
        parser.error(str(exc))  # exit 2, nothing simulated yet
    return args


def main(argv: Optional[Iterable[str]] = None) -> int:
    lift_int_digit_limit()
    args = parse_args(argv)
    logging_setup.setup_logging(logging_setup.level_from_verbosity(args.verbosity))
    try:
        result = run(args)
    except OSError:
        LOGGER.exception("[stones] failed to write output")
        return 1
    print(format_result(args.mode, result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
