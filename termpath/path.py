# termpath/path.py
from __future__ import annotations
from typing import TYPE_CHECKING, FrozenSet, List

from .errors import InvariantViolation

if TYPE_CHECKING:
    from .search import SearchState

def reconstruct_path(state: "SearchState") -> List[int]:
    """
    Walk predecessor links back from the goal.
    Returns cell indices start -> end, both inclusive.
    """
    if not (state.finished and state.found):
        raise ValueError("path is only available once a search has found the end")

    limit = state.grid.size()
    cur = state.end
    out = [cur]
    while cur != state.start:
        prev = state.predecessor[cur]
        if prev is None:
            raise InvariantViolation(f"predecessor chain breaks at cell {cur} before reaching start {state.start}")
        cur = prev
        out.append(cur)
        if len(out) > limit:
            raise InvariantViolation(f"predecessor chain from {state.end} exceeds {limit} cells")
    out.reverse()
    return out

def path_cells(state: "SearchState") -> FrozenSet[int]:
    return frozenset(reconstruct_path(state))
