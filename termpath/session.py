# termpath/session.py
from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, Optional, Union
import logging

from .errors import InvalidEndpoints, InvariantViolation
from .grid import Grid
from .path import path_cells
from .search import SearchState, start_search
from .types import Algorithm, CellClass, Coord, SearchPhase, StepOutcome

logger = logging.getLogger(__name__)

DEFAULT_TICK_MS = 10

HELP = ("Arrows move | Space wall-draw toggle | X toggle wall | S start | E end | "
        "B BFS | D Dijkstra | A A* | P pause | R reset search | C clear | Q quit")

# -------- commands --------

@dataclass(frozen=True)
class ToggleWall:
    index: Optional[int] = None  # None = cell under the cursor

@dataclass(frozen=True)
class SetStart:
    index: Optional[int] = None

@dataclass(frozen=True)
class SetEnd:
    index: Optional[int] = None

@dataclass(frozen=True)
class Resize:
    width: int
    height: int

@dataclass(frozen=True)
class StartSearch:
    algorithm: Algorithm

@dataclass(frozen=True)
class ResetSearch:
    pass

@dataclass(frozen=True)
class Step:
    pass

@dataclass(frozen=True)
class MoveCursor:
    dx: int
    dy: int

@dataclass(frozen=True)
class ToggleDrawMode:
    pass

@dataclass(frozen=True)
class ClearWalls:
    pass

@dataclass(frozen=True)
class TogglePause:
    pass

Command = Union[ToggleWall, SetStart, SetEnd, Resize, StartSearch, ResetSearch, Step,
                MoveCursor, ToggleDrawMode, ClearWalls, TogglePause]

# -------- classification --------

def classify_cell(grid: Grid, search: Optional[SearchState], path: FrozenSet[int],
                  index: int, cursor: Optional[int] = None) -> CellClass:
    """Layer order: cursor, start/end, walls, path, frontier/visited, empty."""
    if index == cursor:
        return CellClass.CURSOR
    if index == grid.start:
        return CellClass.START
    if index == grid.end:
        return CellClass.END
    if grid.is_wall(index):
        return CellClass.WALL
    if index in path:
        return CellClass.PATH
    if search is not None:
        if search.in_frontier[index]:
            return CellClass.FRONTIER
        if search.visited[index]:
            return CellClass.VISITED
    return CellClass.EMPTY


class Session:
    """
    Owns the grid, the endpoints (via the grid), the cursor and at most one search.
    Any edit that changes the grid drops the search, so nothing stale is rendered.
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.search: Optional[SearchState] = None
        self.path: FrozenSet[int] = frozenset()
        self.cursor_x = grid.width // 2
        self.cursor_y = grid.height // 2
        self.draw_walls = False
        self.status = HELP

    # ----------------- helpers -----------------
    @property
    def cursor(self) -> int:
        return self.grid.index(self.cursor_x, self.cursor_y)

    @property
    def cursor_xy(self) -> Coord:
        return self.cursor_x, self.cursor_y

    @property
    def phase(self) -> SearchPhase:
        return SearchPhase.IDLE if self.search is None else self.search.phase

    def set_status(self, s: str) -> None:
        self.status = s

    def invalidate_search(self) -> None:
        if self.search is not None:
            logger.debug("search invalidated (%s, phase=%s)", self.search.algorithm.label, self.search.phase.value)
        self.search = None
        self.path = frozenset()

    def _target(self, index: Optional[int]) -> int:
        return self.cursor if index is None else index

    # ----------------- commands -----------------
    def apply(self, cmd: Command) -> None:
        if isinstance(cmd, ToggleWall):
            self.toggle_wall(cmd.index)
        elif isinstance(cmd, SetStart):
            self.set_start(cmd.index)
        elif isinstance(cmd, SetEnd):
            self.set_end(cmd.index)
        elif isinstance(cmd, Resize):
            self.resize(cmd.width, cmd.height)
        elif isinstance(cmd, StartSearch):
            self.start_search(cmd.algorithm)
        elif isinstance(cmd, ResetSearch):
            self.reset_search()
        elif isinstance(cmd, Step):
            self.tick()
        elif isinstance(cmd, MoveCursor):
            self.move_cursor(cmd.dx, cmd.dy)
        elif isinstance(cmd, ToggleDrawMode):
            self.toggle_draw_mode()
        elif isinstance(cmd, ClearWalls):
            self.clear_walls()
        elif isinstance(cmd, TogglePause):
            self.toggle_pause()
        else:
            raise TypeError(f"unknown command: {cmd!r}")

    def move_cursor(self, dx: int, dy: int) -> None:
        self.cursor_x = min(max(self.cursor_x + dx, 0), self.grid.width - 1)
        self.cursor_y = min(max(self.cursor_y + dy, 0), self.grid.height - 1)
        if self.draw_walls and self.grid.paint_wall(self.cursor):
            self.invalidate_search()

    def toggle_draw_mode(self) -> None:
        self.draw_walls = not self.draw_walls
        if self.draw_walls:
            self.set_status("Wall draw: ON | Arrows paint walls | Space to exit | X toggles a single wall")
            if self.grid.paint_wall(self.cursor):
                self.invalidate_search()
        else:
            self.set_status("Wall draw: OFF | Space to enter draw mode | X toggles a single wall")

    def toggle_wall(self, index: Optional[int] = None) -> bool:
        if not self.grid.toggle_wall(self._target(index)):
            return False
        self.invalidate_search()
        return True

    def set_start(self, index: Optional[int] = None) -> bool:
        try:
            changed = self.grid.set_start(self._target(index))
        except InvalidEndpoints as e:
            self.set_status(str(e))
            return False
        if changed:
            self.invalidate_search()
        return changed

    def set_end(self, index: Optional[int] = None) -> bool:
        try:
            changed = self.grid.set_end(self._target(index))
        except InvalidEndpoints as e:
            self.set_status(str(e))
            return False
        if changed:
            self.invalidate_search()
        return changed

    def clear_walls(self) -> None:
        self.grid.clear_walls()
        self.invalidate_search()
        self.draw_walls = False
        self.set_status("Cleared walls + search. Wall draw: OFF.")

    def resize(self, width: int, height: int) -> bool:
        if not self.grid.resize(width, height):
            return False
        self.cursor_x = min(self.cursor_x, self.grid.width - 1)
        self.cursor_y = min(self.cursor_y, self.grid.height - 1)
        self.invalidate_search()
        self.draw_walls = False
        self.set_status("Resized. Search cleared. Wall draw: OFF.")
        return True

    def start_search(self, algorithm: Algorithm) -> bool:
        try:
            search = start_search(algorithm, self.grid)
        except InvalidEndpoints as e:
            self.set_status(str(e))
            return False
        self.search = search
        self.path = frozenset()
        self.set_status(f"Running {algorithm.label} (press R to reset search)")
        return True

    def reset_search(self) -> None:
        self.invalidate_search()
        self.set_status("Search cleared. Press B, D, or A to run again.")

    def toggle_pause(self) -> None:
        if self.search is None or self.search.finished:
            return
        if self.search.running:
            self.search.pause()
            self.set_status(f"{self.search.algorithm.label} paused (P to resume)")
        else:
            self.search.resume()
            self.set_status(f"Running {self.search.algorithm.label} (press R to reset search)")

    def tick(self) -> StepOutcome:
        """Advance the current search by one step; called once per external tick."""
        if self.search is None:
            return StepOutcome.IDLE
        try:
            outcome = self.search.step()
            if outcome is StepOutcome.FOUND:
                self.path = path_cells(self.search)
        except InvariantViolation as e:
            logger.exception("search aborted")
            self.invalidate_search()
            self.set_status(f"Search aborted: {e}")
            return StepOutcome.IDLE
        if outcome is StepOutcome.FOUND:
            self.set_status("Path found! (R to reset search)")
        elif outcome is StepOutcome.NOT_FOUND:
            self.set_status("No path found. (R to reset search)")
        return outcome

    # ----------------- render queries -----------------
    def classify(self, index: int) -> CellClass:
        return classify_cell(self.grid, self.search, self.path, index, self.cursor)

    def info_line(self) -> str:
        alg = self.search.algorithm.label if self.search is not None else "None"
        return (f"Alg: {alg} | Grid: {self.grid.width}x{self.grid.height} | "
                f"Cursor: ({self.cursor_x},{self.cursor_y}) | Start: {self.grid.start} | End: {self.grid.end} | "
                f"Wall draw: {'ON' if self.draw_walls else 'OFF'} | Phase: {self.phase.value}")
