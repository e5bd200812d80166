# gridpath/search.py
"""
The four traversal engines.

Each engine is a generator: every next() pops one cell off the frontier and
yields a VisitEvent for it, before its neighbours are expanded. The found path
(start..end as (row, col) tuples) or None is the generator's return value, so
a caller driving it by hand reads it from StopIteration.value; see
gridpath.runner for a wrapper that does this.

Callers may recolour cells between steps. Changing `blocked` while a search is
running is not supported and gives unspecified results.
"""
from __future__ import annotations
from dataclasses import dataclass
from collections import deque
from typing import Callable, Dict, Generator, List, Optional, Set, Tuple
import heapq
import math

from .config import ALGORITHM_NAMES, Colors
from .types import Coord
from .grid import Cell, Grid, neighbors_of
from .heuristics import manhattan

Path = List[Coord]
ParentMap = Dict[Coord, Optional[Coord]]


@dataclass(frozen=True)
class VisitEvent:
    cell: Cell
    is_goal: bool


SearchGen = Generator[VisitEvent, None, Optional[Path]]
Engine = Callable[[Grid, Coord, Coord], SearchGen]


def reconstruct_path(parent: ParentMap, goal: Coord) -> Optional[Path]:
    """Walk parent links back from goal; None if goal was never discovered."""
    if goal not in parent:
        return None
    path: Path = []
    cur: Optional[Coord] = goal
    while cur is not None:
        path.append(cur)
        cur = parent[cur]
    path.reverse()
    return path


def _mark_explored(cell: Cell, start: Cell, end: Cell) -> None:
    if cell is not start and cell is not end:
        cell.color = Colors.EXPLORED


def dfs(grid: Grid, start: Coord, goal: Coord) -> SearchGen:
    start_cell = grid.cell_at(start)
    end_cell = grid.cell_at(goal)
    if start_cell is None or end_cell is None:
        return None

    stack: List[Cell] = [start_cell]
    seen: Set[Coord] = {start_cell.id}
    parent: ParentMap = {start_cell.id: None}

    while stack:
        cur = stack.pop()
        found = cur is end_cell
        yield VisitEvent(cur, found)
        if found:
            return reconstruct_path(parent, end_cell.id)

        _mark_explored(cur, start_cell, end_cell)
        for nb in neighbors_of(grid, cur):
            if nb.id not in seen:
                seen.add(nb.id)
                parent[nb.id] = cur.id
                stack.append(nb)

    return None


def bfs(grid: Grid, start: Coord, goal: Coord) -> SearchGen:
    start_cell = grid.cell_at(start)
    end_cell = grid.cell_at(goal)
    if start_cell is None or end_cell is None:
        return None

    q = deque([start_cell])
    seen: Set[Coord] = {start_cell.id}
    parent: ParentMap = {start_cell.id: None}

    while q:
        cur = q.popleft()
        found = cur is end_cell
        yield VisitEvent(cur, found)
        if found:
            return reconstruct_path(parent, end_cell.id)

        _mark_explored(cur, start_cell, end_cell)
        for nb in neighbors_of(grid, cur):
            if nb.id not in seen:
                seen.add(nb.id)
                parent[nb.id] = cur.id
                q.append(nb)

    return None


def dijkstra(grid: Grid, start: Coord, goal: Coord) -> SearchGen:
    """Uniform-cost search, unit edge cost. Equal distances pop in insertion order."""
    start_cell = grid.cell_at(start)
    end_cell = grid.cell_at(goal)
    if start_cell is None or end_cell is None:
        return None

    dist: Dict[Coord, float] = {start_cell.id: 0}
    parent: ParentMap = {start_cell.id: None}
    closed: Set[Coord] = set()
    openh: List[Tuple[float, int, Cell]] = []
    counter = 0

    heapq.heappush(openh, (0, counter, start_cell))
    counter += 1

    while openh:
        _, _, cur = heapq.heappop(openh)
        if cur.id in closed:
            continue  # stale entry
        closed.add(cur.id)

        found = cur is end_cell
        yield VisitEvent(cur, found)
        if found:
            return reconstruct_path(parent, end_cell.id)

        _mark_explored(cur, start_cell, end_cell)
        for nb in neighbors_of(grid, cur):
            tentative = dist[cur.id] + 1
            if tentative < dist.get(nb.id, math.inf):
                dist[nb.id] = tentative
                parent[nb.id] = cur.id
                heapq.heappush(openh, (tentative, counter, nb))
                counter += 1

    return None


def astar(grid: Grid, start: Coord, goal: Coord) -> SearchGen:
    """
    A* with the Manhattan heuristic and no closed set: a cell that is not
    open is (re)pushed whenever a strictly shorter g is found for it. A cell
    already open only has its g, f and parent updated; its heap entry keeps
    the priority and place it was pushed with. Equal f pops in insertion order.
    """
    start_cell = grid.cell_at(start)
    end_cell = grid.cell_at(goal)
    if start_cell is None or end_cell is None:
        return None

    g: Dict[Coord, float] = {start_cell.id: 0}
    f: Dict[Coord, float] = {start_cell.id: manhattan(start_cell.id, end_cell.id)}
    parent: ParentMap = {start_cell.id: None}
    openh: List[Tuple[float, int, Cell]] = []
    open_ids: Set[Coord] = set()
    counter = 0

    heapq.heappush(openh, (f[start_cell.id], counter, start_cell))
    open_ids.add(start_cell.id)
    counter += 1

    while openh:
        _, _, cur = heapq.heappop(openh)
        open_ids.discard(cur.id)

        found = cur is end_cell
        yield VisitEvent(cur, found)
        if found:
            return reconstruct_path(parent, end_cell.id)

        _mark_explored(cur, start_cell, end_cell)
        for nb in neighbors_of(grid, cur):
            tentative = g[cur.id] + 1
            if tentative < g.get(nb.id, math.inf):
                parent[nb.id] = cur.id
                g[nb.id] = tentative
                f[nb.id] = tentative + manhattan(nb.id, end_cell.id)
                if nb.id not in open_ids:
                    heapq.heappush(openh, (f[nb.id], counter, nb))
                    open_ids.add(nb.id)
                    counter += 1

    return None


ALGORITHMS: Dict[str, Engine] = dict(zip(ALGORITHM_NAMES, (dfs, bfs, dijkstra, astar)))


def get_algorithm(name: str) -> Engine:
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise KeyError(f"unknown algorithm {name!r}; choose from {', '.join(ALGORITHMS)}") from None
