import argparse
import csv

import pytest

from pathviz.cli import main, parse_coord


def test_solve_open_grid(capsys):
    assert main(["solve", "--rows", "5", "--cols", "5", "--start", "0,0", "--finish", "4,4"]) == 0
    out = capsys.readouterr().out
    assert "reached=True" in out
    assert "cost=   8" in out


def test_solve_blocked_grid_reports_no_path(capsys):
    args = ["solve", "--rows", "3", "--cols", "3", "--start", "0,0", "--finish", "2,2"]
    for w in ("0,1", "1,1", "2,1"):
        args += ["--wall", w]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert "reached=False" in out
    assert "no path" in out


def test_solve_writes_png(tmp_path, capsys):
    png = tmp_path / "snap.png"
    assert main(["solve", "--rows", "4", "--cols", "6", "--png", str(png)]) == 0
    assert png.exists()
    assert "wrote" in capsys.readouterr().out


def test_bad_layout_exits_with_error(capsys):
    assert main(["solve", "--rows", "3", "--cols", "3", "--start", "1,1", "--finish", "1,1"]) == 2
    assert "error:" in capsys.readouterr().err
    assert main(["solve", "--rows", "3", "--cols", "3", "--wall", "5,5"]) == 2


def test_bench_writes_csv(tmp_path, capsys):
    out = tmp_path / "bench" / "runs.csv"
    assert main(["bench", "--rows", "8", "--cols", "8", "--count", "3", "--seed", "4", "--csv", str(out)]) == 0
    with open(out, newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["grid"] for r in rows] == ["grid_000", "grid_001", "grid_002"]
    assert [r["seed"] for r in rows] == ["4", "5", "6"]
    assert "wrote CSV" in capsys.readouterr().out


def test_parse_coord():
    assert parse_coord("3,7") == (3, 7)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_coord("3;7")


def test_bad_coord_is_a_usage_error():
    with pytest.raises(SystemExit):
        main(["solve", "--start", "x"])
