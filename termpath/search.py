# termpath/search.py
from __future__ import annotations
from math import inf
from typing import List, Optional
import logging

from .errors import InvalidEndpoints, InvariantViolation
from .frontier import Frontier, make_frontier
from .grid import Grid
from .heuristics import STEP_COST, priority
from .path import reconstruct_path
from .types import Algorithm, SearchPhase, StepOutcome

logger = logging.getLogger(__name__)

class SearchState:
    """
    One in-progress or completed single-source search over a Grid.

    Each call to step() performs at most one frontier pop and up to four
    relaxations, so driving it one tick at a time or in a single batch
    produces the same visitation order and predecessor tree.
    """

    def __init__(self, algorithm: Algorithm, grid: Grid, start: int, end: int):
        n = grid.size()
        for idx in (start, end):
            if not 0 <= idx < n:
                raise InvalidEndpoints(f"endpoint {idx} is outside the {grid.width}x{grid.height} grid")
        if start == end:
            raise InvalidEndpoints("Start and End are the same. Move one of them.")
        if grid.is_wall(start) or grid.is_wall(end):
            raise InvalidEndpoints("Start/End must be on empty cells.")

        self.algorithm = algorithm
        self.grid = grid
        self.start = start
        self.end = end
        self.revision = grid.revision

        self.running = True
        self.finished = False
        self.found = False

        self.visited: List[bool] = [False] * n
        self.in_frontier: List[bool] = [False] * n
        self.dist: List[float] = [inf] * n
        self.predecessor: List[Optional[int]] = [None] * n
        self.frontier: Frontier = make_frontier(algorithm)

        self.steps = 0
        self.stale_pops = 0
        self.expanded: List[int] = []

        self.dist[start] = 0
        self.frontier.push(start, 0, priority(algorithm, 0, grid.manhattan(start, end)))
        self.in_frontier[start] = True
        logger.debug("%s search created: start=%d end=%d on %dx%d grid",
                     algorithm.label, start, end, grid.width, grid.height)

    # ----------------- transitions -----------------
    def step(self) -> StepOutcome:
        if not self.running or self.finished:
            return StepOutcome.IDLE
        if self.grid.revision != self.revision:
            raise InvariantViolation(
                f"grid changed (revision {self.revision} -> {self.grid.revision}) under a live search")

        self.steps += 1
        node = self.frontier.pop()
        if node is None:
            return self._finish(found=False)

        cur = node.index
        if self.visited[cur]:
            self.stale_pops += 1
            return StepOutcome.STALE

        if not self.in_frontier[cur]:
            raise InvariantViolation(f"popped cell {cur} was never marked as in the frontier")
        if node.g != self.dist[cur]:
            raise InvariantViolation(
                f"first pop of cell {cur} carries g={node.g} but dist is {self.dist[cur]}")

        self.in_frontier[cur] = False
        self.visited[cur] = True
        self.expanded.append(cur)

        if cur == self.end:
            return self._finish(found=True)

        grid = self.grid
        alg = self.algorithm
        for nb in grid.neighbors4(cur):
            if grid.is_wall(nb) or self.visited[nb]:
                continue
            new_g = node.g + STEP_COST
            if alg is Algorithm.BFS:
                # unit costs: first discovery is already the shortest distance
                accept = self.dist[nb] == inf
            else:
                accept = new_g < self.dist[nb]
            if not accept:
                continue
            self.dist[nb] = new_g
            self.predecessor[nb] = cur
            self.frontier.push(nb, new_g, priority(alg, new_g, grid.manhattan(nb, self.end)))
            self.in_frontier[nb] = True

        return StepOutcome.EXPANDED

    def _finish(self, found: bool) -> StepOutcome:
        self.running = False
        self.finished = True
        self.found = found
        logger.debug("%s search finished: found=%s after %d steps (%d expanded, %d stale)",
                     self.algorithm.label, found, self.steps, len(self.expanded), self.stale_pops)
        return StepOutcome.FOUND if found else StepOutcome.NOT_FOUND

    def run(self, max_steps: Optional[int] = None) -> StepOutcome:
        """Step until the search is terminal or max_steps calls have been made."""
        outcome = StepOutcome.IDLE
        taken = 0
        while self.running and not self.finished:
            if max_steps is not None and taken >= max_steps:
                break
            outcome = self.step()
            taken += 1
        return outcome

    def pause(self) -> None:
        if not self.finished:
            self.running = False

    def resume(self) -> None:
        if not self.finished:
            self.running = True

    # ----------------- queries -----------------
    @property
    def phase(self) -> SearchPhase:
        if self.finished:
            return SearchPhase.FOUND if self.found else SearchPhase.NOT_FOUND
        return SearchPhase.RUNNING if self.running else SearchPhase.PAUSED

    def path(self) -> List[int]:
        return reconstruct_path(self)

def start_search(algorithm: Algorithm, grid: Grid,
                 start: Optional[int] = None, end: Optional[int] = None) -> SearchState:
    return SearchState(algorithm, grid,
                       grid.start if start is None else start,
                       grid.end if end is None else end)
