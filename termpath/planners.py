# termpath/planners.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple
import os
import time

from .grid import Grid
from .search import SearchState, start_search
from .types import Algorithm
from .viz import draw_search_png

@dataclass
class RunStats:
    algorithm: Algorithm
    found: bool
    moves: int
    expansions: int
    steps: int
    stale_pops: int
    elapsed_sec: float
    path: List[int]
    expanded: List[int]

def run_search(grid: Grid, algorithm: Algorithm) -> Tuple[SearchState, RunStats]:
    """Run one search to completion in a single batch."""
    t0 = time.perf_counter()
    state = start_search(algorithm, grid)
    state.run()
    path = state.path() if state.found else []
    stats = RunStats(
        algorithm=algorithm,
        found=state.found,
        moves=max(len(path) - 1, 0),
        expansions=len(state.expanded),
        steps=state.steps,
        stale_pops=state.stale_pops,
        elapsed_sec=time.perf_counter() - t0,
        path=path,
        expanded=list(state.expanded),
    )
    return state, stats

def run_all_algs(grid: Grid, out_dir: Optional[str] = None, base_tag: str = "run") -> List[RunStats]:
    results: List[RunStats] = []
    for alg in Algorithm:
        state, stats = run_search(grid, alg)
        results.append(stats)
        if out_dir:
            draw_search_png(grid, state, os.path.join(out_dir, f"{base_tag}_{alg.value}.png"))
    return results
