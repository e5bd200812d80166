"""
Pytest configuration and shared fixtures.
"""

from typing import List, Set

import pytest

from gridpath import Grid
from gridpath.types import Coord


@pytest.fixture
def open_3x3() -> Grid:
    """An empty 3x3 grid."""
    return Grid(3, 3)


@pytest.fixture
def walled() -> Grid:
    """A 3x5 grid split by a full wall in column 2."""
    return Grid.from_strings([
        "..#..",
        "..#..",
        "..#..",
    ])


@pytest.fixture
def corridor() -> Grid:
    """A 3x5 open grid, used for straight-line searches along row 1."""
    return Grid(3, 5)


def component_of(grid: Grid, start: Coord) -> Set[Coord]:
    """Cells reachable from start through unblocked 4-neighbours."""
    seen = {start}
    todo: List[Coord] = [start]
    while todo:
        r, c = todo.pop()
        for nb in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if grid.in_bounds(nb) and not grid.is_blocked(nb) and nb not in seen:
                seen.add(nb)
                todo.append(nb)
    return seen


def assert_valid_path(grid: Grid, path: List[Coord], start: Coord, goal: Coord) -> None:
    assert path[0] == start
    assert path[-1] == goal
    for (r0, c0), (r1, c1) in zip(path, path[1:]):
        assert abs(r0 - r1) + abs(c0 - c1) == 1
        assert not grid.is_blocked((r1, c1))
