# termpath/heuristics.py
from .types import Algorithm, Coord

STEP_COST = 1  # every orthogonal move, no terrain

def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])

def priority(algorithm: Algorithm, g: int, h: int) -> int:
    """Ordering key f for a queue entry."""
    if algorithm is Algorithm.ASTAR:
        return g + h
    return g
