"""Helper package for command-line entry points.

This module makes the `scripts` folder importable so test suites and
installed console scripts can resolve `scripts.stones_cli` and
`scripts.run_bench` without relying on path hacks.
"""
