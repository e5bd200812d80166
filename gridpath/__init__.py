# gridpath/__init__.py
from .types import Coord, Color
from .config import Colors, ALGORITHM_NAMES
from .grid import Cell, Grid, neighbors_of
from .heuristics import manhattan
from .search import VisitEvent, reconstruct_path, dfs, bfs, dijkstra, astar, ALGORITHMS, get_algorithm
from .runner import SearchStepper, SearchResult, run_search
from .viz import draw_grid_png, render_ascii

__all__ = [
    "Coord", "Color", "Colors", "ALGORITHM_NAMES",
    "Cell", "Grid", "neighbors_of", "manhattan",
    "VisitEvent", "reconstruct_path", "dfs", "bfs", "dijkstra", "astar",
    "ALGORITHMS", "get_algorithm",
    "SearchStepper", "SearchResult", "run_search",
    "draw_grid_png", "render_ascii",
]
