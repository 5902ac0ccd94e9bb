# -*- coding: utf-8 -*-
import csv
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

from scripts import stones_cli


def _run(capsys, argv):
    code = stones_cli.main(argv)
    out = capsys.readouterr().out
    return code, out.strip()


def test_count_mode_prints_single_integer(capsys):
    assert _run(capsys, ["count", "6", "125", "17"]) == (0, "22")
    assert _run(capsys, ["count", "25"]) == (0, "55312")


def test_apply_mode_prints_row(capsys):
    assert _run(capsys, ["apply", "1", "125", "17"]) == (0, "253000 1 7")
    assert _run(capsys, ["apply", "2"]) == (0, "253 0 2024 14168")
    assert _run(capsys, ["apply", "0", "5"]) == (0, "5")


def test_mode_omitted_defaults_to_count(capsys):
    assert _run(capsys, ["6"]) == (0, "22")
    assert _run(capsys, []) == (0, "55312")


def test_logs_do_not_leak_into_stdout(capsys):
    stones_cli.main(["-v", "2", "count", "3"])
    captured = capsys.readouterr()
    assert captured.out.strip() == "5"


def test_resolve_invocation_defaults():
    assert stones_cli.resolve_invocation([]) == ("count", 25, (125, 17))
    assert stones_cli.resolve_invocation(["apply"]) == ("apply", 25, (125, 17))
    assert stones_cli.resolve_invocation(["apply", "3", "0"]) == ("apply", 3, (0,))


@pytest.mark.parametrize(
    "argv, fragment",
    [
        (["blink", "3"], "mode must be one of"),
        (["count", "x"], "steps"),
        (["count", "-1"], "steps"),
        (["count", "3", "1", "a"], "stone #2"),
        (["apply", "3", "1.5"], "stone #1"),
    ],
)
def test_malformed_arguments_exit_non_zero(capsys, argv, fragment):
    with pytest.raises(SystemExit) as exc:
        stones_cli.main(argv)
    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert fragment in captured.err
    assert captured.out == ""


def test_growth_csv_and_plot(tmp_path: Path, capsys):
    csv_path = tmp_path / "out" / "growth.csv"
    fig_path = tmp_path / "figs" / "growth.png"
    code, out = _run(capsys, ["count", "6", "--growth-csv", str(csv_path), "--plot", str(fig_path)])
    assert (code, out) == (0, "22")
    with open(csv_path, "r", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [int(r["stones"]) for r in rows] == [2, 3, 4, 5, 9, 13, 22]
    assert rows[0].keys() == {"blink", "stones", "distinct"}
    assert fig_path.exists() and fig_path.stat().st_size > 0


def test_save_growth_uses_results_root(tmp_path: Path, monkeypatch, capsys):
    from stones import config

    monkeypatch.setattr(config, "OUT_CSV_DEFAULT", tmp_path / "out_csv")
    monkeypatch.setattr(config, "OUT_FIG_DEFAULT", tmp_path / "figs")
    code, out = _run(capsys, ["apply", "3", "--save-growth"])
    assert (code, out) == (0, "512072 1 20 24 28676032")
    csvs = list((tmp_path / "out_csv").glob("growth_apply_b3_s2_*.csv"))
    pngs = list((tmp_path / "figs").glob("growth_apply_b3_s2_*.png"))
    assert len(csvs) == 1 and len(pngs) == 1


def test_make_run_tag():
    from stones.utils_io import make_run_tag

    assert make_run_tag("count", 75, (125, 17), add_timestamp=False) == "count_b75_s2"
    assert make_run_tag("apply", 3, (0,), add_timestamp=False, suffix="x") == "apply_b3_s1_x"


def test_stones_beyond_default_digit_limit(capsys):
    # 5001 位（奇数）-> 一次眨眼后仍是一颗
    huge = "1" + "0" * 5000
    assert _run(capsys, ["count", "1", huge]) == (0, "1")
    code, out = _run(capsys, ["apply", "1", huge])
    assert code == 0
    assert out == str(int(huge) * 2024)


def test_non_integer_first_token_is_reported_as_mode():
    with pytest.raises(ValueError, match="read as the mode"):
        stones_cli.resolve_invocation(["1.5", "125"])
