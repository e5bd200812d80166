# gridpath/viz.py
from __future__ import annotations
import os
from typing import List, Optional
from PIL import Image, ImageDraw

from .config import Colors, DEFAULT_CELL_PX
from .types import Coord
from .grid import Grid

def draw_grid_png(grid: Grid,
                  path: Optional[List[Coord]],
                  start: Coord,
                  goal: Coord,
                  out_png: str,
                  cell: int = DEFAULT_CELL_PX) -> None:
    """Snapshot of the grid as it stands, explored cells in their display color."""
    W, H = grid.cols * cell, grid.rows * cell
    img = Image.new("RGB", (W, H), Colors.FLOOR)
    drw = ImageDraw.Draw(img)

    def fill(pos: Coord, color) -> None:
        r, c = pos
        x0, y0 = c * cell, r * cell
        drw.rectangle((x0, y0, x0 + cell - 1, y0 + cell - 1), fill=color)

    # base grid
    for cur in grid.cells():
        fill(cur.pos, Colors.WALL if cur.blocked else cur.color)

    # path
    if path and len(path) > 1:
        for pos in path:
            fill(pos, Colors.PATH)

    # start/goal
    if grid.in_bounds(start):
        fill(start, Colors.START)
    if grid.in_bounds(goal):
        fill(goal, Colors.GOAL)

    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    img.save(out_png)


def render_ascii(grid: Grid, path: Optional[List[Coord]], start: Coord, goal: Coord) -> str:
    on_path = set(path or ())
    lines = []
    for r in range(grid.rows):
        row = []
        for c in range(grid.cols):
            cur = grid.cell_at((r, c))
            if (r, c) == start:
                ch = "S"
            elif (r, c) == goal:
                ch = "G"
            elif cur.blocked:
                ch = "#"
            elif (r, c) in on_path:
                ch = "*"
            elif cur.color == Colors.EXPLORED:
                ch = "o"
            else:
                ch = "."
            row.append(ch)
        lines.append("".join(row))
    return "\n".join(lines)
