# gridpath/grid.py
from __future__ import annotations
from typing import Iterable, Iterator, List, Optional
import random
from .config import Colors
from .types import Color, Coord

class Cell:
    """
    One square of the grid. Its position (and so its id) is fixed;
    `blocked` and `color` may be changed by callers between searches.
    """
    __slots__ = ("_pos", "blocked", "color")

    def __init__(self, pos: Coord, blocked: bool = False, color: Color = Colors.FLOOR):
        self._pos = (pos[0], pos[1])
        self.blocked = blocked
        self.color = color

    @property
    def pos(self) -> Coord:
        return self._pos

    @property
    def id(self) -> Coord:
        return self._pos

    @property
    def row(self) -> int:
        return self._pos[0]

    @property
    def col(self) -> int:
        return self._pos[1]

    def __repr__(self) -> str:
        return f"Cell({self._pos}, blocked={self.blocked})"


class Grid:
    """
    rows x cols cells, one per coordinate, addressable in O(1).
    The shape never changes after construction.
    """
    def __init__(self, rows: int, cols: int):
        if rows < 1 or cols < 1:
            raise ValueError(f"grid must be at least 1x1, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._cells: List[List[Cell]] = [[Cell((r, c)) for c in range(cols)] for r in range(rows)]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @staticmethod
    def from_strings(lines: Iterable[str]) -> "Grid":
        """'#' is blocked, any other character is free."""
        rows = [line.rstrip("\r\n") for line in lines]
        rows = [row for row in rows if row]
        if not rows:
            raise ValueError("no grid rows given")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("grid rows must all have the same length")
        grid = Grid(len(rows), width)
        for r, row in enumerate(rows):
            for c, ch in enumerate(row):
                grid._cells[r][c].blocked = ch == "#"
        return grid

    @staticmethod
    def random(rows: int, cols: int, p_blocked: float = 0.30, seed: Optional[int] = None,
               keep_free: Iterable[Coord] = ()) -> "Grid":
        rng = random.Random(seed)
        grid = Grid(rows, cols)
        for cell in grid.cells():
            cell.blocked = rng.random() < p_blocked
        for pos in keep_free:
            if grid.in_bounds(pos):
                grid.set_blocked(pos, False)
        return grid

    def in_bounds(self, s: Coord) -> bool:
        r, c = s
        return 0 <= r < self._rows and 0 <= c < self._cols

    def cell_at(self, s: Coord) -> Optional[Cell]:
        if not self.in_bounds(s):
            return None
        return self._cells[s[0]][s[1]]

    def is_blocked(self, s: Coord) -> bool:
        return self._checked(s).blocked

    def set_blocked(self, s: Coord, blocked: bool = True) -> None:
        self._checked(s).blocked = blocked

    def _checked(self, s: Coord) -> Cell:
        cell = self.cell_at(s)
        if cell is None:
            raise IndexError(f"{s} is outside the {self._rows}x{self._cols} grid")
        return cell

    def cells(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    def reset_colors(self) -> None:
        for cell in self.cells():
            cell.color = Colors.FLOOR


def neighbors_of(grid: Grid, cell: Cell) -> List[Cell]:
    # order is up, down, left, right; DFS/BFS tie-breaks depend on it
    r, c = cell.pos
    cand = [(r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)]
    out = []
    for p in cand:
        nb = grid.cell_at(p)
        if nb is not None and not nb.blocked:
            out.append(nb)
    return out
