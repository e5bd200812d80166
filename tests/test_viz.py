"""
Tests for the PNG and ASCII renderers.
"""

from pathlib import Path

from PIL import Image

from gridpath import Colors, Grid, draw_grid_png, render_ascii, run_search


def test_render_ascii_after_bfs(open_3x3: Grid) -> None:
    res = run_search(open_3x3, (0, 0), (2, 2), "bfs")
    assert render_ascii(open_3x3, res.path, (0, 0), (2, 2)) == "Soo\n*oo\n**G"


def test_render_ascii_walls(walled: Grid) -> None:
    assert render_ascii(walled, None, (0, 0), (0, 4)) == "S.#.G\n..#..\n..#.."


def test_draw_grid_png(tmp_path: Path, walled: Grid) -> None:
    res = run_search(walled, (0, 0), (2, 1), "bfs")
    out = tmp_path / "nested" / "grid.png"
    draw_grid_png(walled, res.path, (0, 0), (2, 1), str(out), cell=4)

    assert out.exists()
    with Image.open(out) as img:
        assert img.size == (5 * 4, 3 * 4)
        px = img.convert("RGB").load()
        assert px[1, 1] == Colors.START
        assert px[2 * 4 + 1, 1] == Colors.WALL
        assert px[1 * 4 + 1, 2 * 4 + 1] == Colors.GOAL
        assert px[4 * 4 + 1, 1] == Colors.FLOOR
