# gridpath/heuristics.py
from .types import Coord

def manhattan(a: Coord, b: Coord) -> int:
    """
    |drow| + |dcol|. Admissible and consistent only for unit-cost moves in
    the four cardinal directions; diagonal or weighted moves need another
    estimate.
    """
    (r0, c0), (r1, c1) = a, b
    return abs(r0 - r1) + abs(c0 - c1)
