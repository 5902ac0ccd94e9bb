# -*- coding: utf-8 -*-
from __future__ import annotations
import os
from typing import Optional

import numpy as np
import matplotlib as mpl
import matplotlib.pyplot as plt

from .blink import GrowthSeries

# ---------------- 样式 ----------------
_STYLES = {
    "default": {"figure.dpi":120,"savefig.dpi":170,"font.size":10,"axes.titlesize":11,"axes.labelsize":10,
                "legend.fontsize":9,"xtick.labelsize":9,"ytick.labelsize":9,"axes.spines.top":False,
                "axes.spines.right":False,"axes.grid":True,"grid.alpha":0.25,"lines.linewidth":1.3,
                "lines.markersize":4.5,"legend.frameon":False},
    "ieee":    {"figure.dpi":120,"savefig.dpi":200,"font.size":9,"axes.titlesize":10,"axes.labelsize":9,
                "legend.fontsize":8,"xtick.labelsize":8,"ytick.labelsize":8,"axes.spines.top":False,
                "axes.spines.right":False,"axes.grid":True,"grid.alpha":0.25,"lines.linewidth":1.2,
                "lines.markersize":4.0,"legend.frameon":False},
    "nature":  {"figure.dpi":120,"savefig.dpi":200,"font.size":11,"axes.titlesize":13,"axes.labelsize":11,
                "legend.fontsize":10,"xtick.labelsize":10,"ytick.labelsize":10,"axes.spines.top":False,
                "axes.spines.right":False,"axes.grid":True,"grid.alpha":0.25,"lines.linewidth":1.2,
                "lines.markersize":4.8,"legend.frameon":False},
}
def apply_style(style:str="default"): mpl.rcParams.update(_STYLES.get(style,_STYLES["default"]))
apply_style("default")


def _as_float(values: np.ndarray) -> np.ndarray:
    # 计数是 object 数组（精确整数），画图前转 float
    return np.asarray([float(v) for v in values], dtype=float)


def growth_ratio(series: GrowthSeries) -> np.ndarray:
    """counts[i+1] / counts[i]; tends to a constant once the values settle."""
    c = _as_float(series.counts)
    if c.size < 2:
        return np.empty(0, dtype=float)
    return c[1:] / c[:-1]


def plot_growth(series: GrowthSeries, out_path: str, y_log: bool = True,
                style: Optional[str] = None, title: Optional[str] = None) -> str:
    """
    Stone count and distinct-value count per blink, saved to ``out_path``.
    Returns the written path.
    """
    if style:
        apply_style(style)
    d = os.path.dirname(os.path.abspath(out_path))
    os.makedirs(d, exist_ok=True)

    xs = series.blinks
    fig, ax = plt.subplots(figsize=(5.2, 3.4))
    ax.plot(xs, _as_float(series.counts), marker="o", label="stones")
    ax.plot(xs, _as_float(series.distinct), marker="s", linestyle="--", label="distinct values")
    if y_log:
        ax.set_yscale("log")
    ax.set_xlabel("blink")
    ax.set_ylabel("count")
    ax.set_title(title or f"growth from {list(series.stones)}")
    ax.legend(loc="upper left")
    fig.tight_layout()
    fig.savefig(out_path)
    plt.close(fig)
    return out_path


__all__ = ["apply_style", "growth_ratio", "plot_growth"]
