# gridpath/types.py
from typing import Tuple

Coord = Tuple[int, int]  # (row, col)
Color = Tuple[int, int, int]  # RGB
