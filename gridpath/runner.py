# gridpath/runner.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Union
import logging
import time

from .types import Coord
from .grid import Grid
from .search import ALGORITHMS, Engine, Path, SearchGen, VisitEvent, get_algorithm

logger = logging.getLogger(__name__)


class SearchStepper:
    """
    Drives one engine a step at a time.

    advance() returns the next VisitEvent, or None once the search has
    finished; `path` is then the result. To cancel, stop calling advance().
    """
    def __init__(self, engine: Engine, grid: Grid, start: Coord, goal: Coord):
        self._gen: SearchGen = engine(grid, start, goal)
        self.done = False
        self.path: Optional[Path] = None
        self.events: List[VisitEvent] = []

    def advance(self) -> Optional[VisitEvent]:
        if self.done:
            return None
        try:
            ev = next(self._gen)
        except StopIteration as stop:
            self.done = True
            self.path = stop.value
            return None
        self.events.append(ev)
        return ev

    def run(self) -> Optional[Path]:
        while self.advance() is not None:
            pass
        return self.path


@dataclass
class SearchResult:
    algorithm: str
    path: Optional[Path]
    visited: List[Coord] = field(default_factory=list)
    elapsed_sec: float = 0.0

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def length(self) -> int:
        return len(self.path) if self.path else 0


def run_search(grid: Grid, start: Coord, goal: Coord, algorithm: Union[str, Engine] = "bfs") -> SearchResult:
    if isinstance(algorithm, str):
        name, engine = algorithm, get_algorithm(algorithm)
    else:
        engine = algorithm
        # report registered engines under their registry name
        name = next((key for key, fn in ALGORITHMS.items() if fn is engine), engine.__name__)

    logger.debug("%s: searching %s -> %s on %dx%d grid", name, start, goal, grid.rows, grid.cols)
    t0 = time.perf_counter()
    stepper = SearchStepper(engine, grid, start, goal)
    path = stepper.run()
    elapsed = time.perf_counter() - t0

    visited = [ev.cell.id for ev in stepper.events]
    if path is None:
        logger.debug("%s: no path after %d visits", name, len(visited))
    else:
        logger.debug("%s: path of %d cells after %d visits", name, len(path), len(visited))
    return SearchResult(name, path, visited, elapsed)
