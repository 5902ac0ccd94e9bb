# -*- coding: utf-8 -*-
"""
stones/utils_io.py
通用 I/O 工具：目录创建、CSV 写出、run_tag 生成。
"""

from __future__ import annotations
import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence
import csv


def ensure_dir(p: str | Path) -> Path:
    p = Path(p)
    p.mkdir(parents=True, exist_ok=True)
    return p


def write_csv(path: str | Path, rows: List[Dict], fieldnames: Optional[List[str]] = None) -> str:
    path = Path(path)
    ensure_dir(path.parent)
    if not rows:
        # 如果给了表头，写 header；否则写空文件
        with open(path, "w", newline="", encoding="utf-8") as f:
            if fieldnames:
                w = csv.DictWriter(f, fieldnames=fieldnames); w.writeheader()
        return str(path)
    if fieldnames is None:
        # 保持首行的列顺序
        fieldnames = list(rows[0].keys())
        for r in rows[1:]:
            fieldnames.extend(k for k in r.keys() if k not in fieldnames)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader(); w.writerows(rows)
    return str(path)


def make_run_tag(mode: str, blinks: int, stones: Sequence[int], add_timestamp: bool = True, suffix: str = "") -> str:
    """
    run_tag 生成，例如 ``count_b25_s2_2024-12-11_09-30``：
      - add_timestamp=False 时更短，便于图例
      - 石子只记录个数，避免超长文件名
    """
    tag = f"{mode}_b{blinks}_s{len(stones)}"
    if add_timestamp:
        tag += "_" + datetime.datetime.now().strftime("%Y-%m-%d_%H-%M")
    if suffix:
        tag += f"_{suffix}"
    return tag
