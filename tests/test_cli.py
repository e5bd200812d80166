"""
Smoke tests for the command line.
"""

import argparse
import csv
from pathlib import Path

import pytest

from gridpath.cli import main, parse_coord


def test_parse_coord() -> None:
    assert parse_coord("3,4") == (3, 4)
    for bad in ("3", "a,b", "1,2,3"):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_coord(bad)


def test_trace(capsys: pytest.CaptureFixture) -> None:
    main(["trace", "--rows", "3", "--cols", "3", "--p", "0", "--alg", "bfs"])
    out = capsys.readouterr().out
    assert "    1 visit (0, 0)" in out
    assert "visit (2, 2)  <- goal" in out
    assert "path (5 cells): 0,0 1,0 2,0 2,1 2,2" in out


def test_trace_no_path(capsys: pytest.CaptureFixture) -> None:
    main(["trace", "--rows", "3", "--cols", "3", "--p", "0", "--end", "9,9"])
    assert "no path" in capsys.readouterr().out


def test_demo_writes_images(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    main(["demo", "--rows", "8", "--cols", "8", "--seed", "2", "--out", str(tmp_path)])
    for name in ("dfs", "bfs", "dijkstra", "a-star"):
        assert (tmp_path / f"grid_2_{name}.png").exists()
    assert capsys.readouterr().out.count("found=") == 4


def test_bench_csv(tmp_path: Path) -> None:
    out = tmp_path / "bench.csv"
    main(["bench", "--rows", "6", "--cols", "6", "--count", "3", "--csv", str(out)])
    with open(out, newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 12
    assert {r["alg"] for r in rows} == {"dfs", "bfs", "dijkstra", "a-star"}


def test_bad_shape() -> None:
    with pytest.raises(SystemExit):
        main(["trace", "--rows", "0"])
