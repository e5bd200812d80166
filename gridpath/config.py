# gridpath/config.py
"""
Defaults shared by the grid model, renderers and the command line.
"""
from dataclasses import dataclass


@dataclass
class Colors:
    FLOOR = (255, 255, 255)
    WALL = (35, 35, 44)
    EXPLORED = (102, 102, 255)  # blue at 60% over white
    PATH = (70, 170, 110)
    START = (100, 220, 120)
    GOAL = (255, 170, 80)


ALGORITHM_NAMES = ("dfs", "bfs", "dijkstra", "a-star")

# random grids
DEFAULT_ROWS = 40
DEFAULT_COLS = 40
DEFAULT_P_BLOCKED = 0.30

# output
DEFAULT_CELL_PX = 10
DEFAULT_OUT_DIR = "runs"
