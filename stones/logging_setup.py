# -*- coding: utf-8 -*-
"""
stones/logging_setup.py
基础日志配置：在 CLI 入口处调用 setup_logging(level="INFO")
结果写 stdout，日志默认写 stderr。
"""

import logging, sys


def setup_logging(level: str = "INFO", stream=None):
    lvl = getattr(logging, str(level).upper(), logging.INFO)
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=stream or sys.stderr,
        force=True,
    )


def get_logger(name: str = "stones") -> logging.Logger:
    return logging.getLogger(name)


def level_from_verbosity(verbosity: int) -> str:
    if verbosity <= 0:
        return "WARNING"
    return "INFO" if verbosity == 1 else "DEBUG"
