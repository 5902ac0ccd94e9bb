# -*- coding: utf-8 -*-
from pathlib import Path
import sys

import matplotlib
import numpy as np

matplotlib.use("Agg")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from stones import viz
from stones.blink import growth_series


def test_plot_growth_writes_png(tmp_path: Path):
    series = growth_series([125, 17], 30)
    out = viz.plot_growth(series, str(tmp_path / "nested" / "growth.png"), style="ieee")
    assert Path(out).exists()
    assert Path(out).read_bytes()[:4] == b"\x89PNG"


def test_plot_growth_linear_axis(tmp_path: Path):
    series = growth_series([0], 5)
    out = viz.plot_growth(series, str(tmp_path / "lin.png"), y_log=False, title="zero")
    assert Path(out).exists()


def test_growth_ratio():
    series = growth_series([125, 17], 6)
    ratio = viz.growth_ratio(series)
    assert ratio.shape == (6,)
    assert np.isclose(ratio[0], 3 / 2)
    assert np.isclose(ratio[-1], 22 / 13)
    assert viz.growth_ratio(growth_series([1], 0)).size == 0


def test_unknown_style_falls_back_to_default():
    viz.apply_style("no-such-style")
    assert matplotlib.rcParams["savefig.dpi"] == 170
