# termpath/__init__.py
from .types import Algorithm, Cell, CellClass, Coord, SearchPhase, StepOutcome
from .errors import PathfindingError, InvalidEndpoints, InvariantViolation
from .grid import Grid
from .heuristics import manhattan
from .frontier import Node, FifoFrontier, PriorityFrontier, make_frontier
from .search import SearchState, start_search
from .path import reconstruct_path, path_cells
from .session import Session, classify_cell
from .planners import run_search, run_all_algs, RunStats
from .viz import draw_search_png

__all__ = [
    "Algorithm", "Cell", "CellClass", "Coord", "SearchPhase", "StepOutcome",
    "PathfindingError", "InvalidEndpoints", "InvariantViolation",
    "Grid", "manhattan",
    "Node", "FifoFrontier", "PriorityFrontier", "make_frontier",
    "SearchState", "start_search",
    "reconstruct_path", "path_cells",
    "Session", "classify_cell",
    "run_search", "run_all_algs", "RunStats",
    "draw_search_png",
]
