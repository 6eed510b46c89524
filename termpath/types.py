# termpath/types.py
from __future__ import annotations
from enum import Enum
from typing import Tuple

Coord = Tuple[int, int]  # (x, y)


class Cell(Enum):
    EMPTY = 0
    WALL = 1


class Algorithm(Enum):
    BFS = "bfs"
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"

    @property
    def label(self) -> str:
        return {"bfs": "BFS", "dijkstra": "Dijkstra", "astar": "A*"}[self.value]

    @staticmethod
    def parse(name: str) -> "Algorithm":
        key = name.strip().lower().replace("*", "star").replace("-", "")
        for alg in Algorithm:
            if alg.value == key:
                return alg
        raise ValueError(f"unknown algorithm: {name!r}")


class CellClass(Enum):
    """Render classes, listed in priority order."""
    CURSOR = "cursor"
    START = "start"
    END = "end"
    WALL = "wall"
    PATH = "path"
    FRONTIER = "frontier"
    VISITED = "visited"
    EMPTY = "empty"


class StepOutcome(Enum):
    IDLE = "idle"            # terminal or paused; nothing happened
    STALE = "stale"          # superseded queue entry discarded
    EXPANDED = "expanded"
    FOUND = "found"
    NOT_FOUND = "not_found"

    @property
    def terminal(self) -> bool:
        return self in (StepOutcome.FOUND, StepOutcome.NOT_FOUND)


class SearchPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    FOUND = "path found"
    NOT_FOUND = "no path found"
