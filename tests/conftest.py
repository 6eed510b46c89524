from collections import deque
from typing import Optional

import pytest

from termpath import Grid


def bfs_distance(grid: Grid) -> Optional[int]:
    """Reference shortest distance, independent of the engine under test."""
    dist = {grid.start: 0}
    q = deque([grid.start])
    while q:
        cur = q.popleft()
        if cur == grid.end:
            return dist[cur]
        x, y = grid.xy(cur)
        for nx, ny in ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)):
            if not grid.in_bounds(nx, ny):
                continue
            nb = grid.index(nx, ny)
            if nb in dist or grid.is_wall(nb):
                continue
            dist[nb] = dist[cur] + 1
            q.append(nb)
    return None


def wall_column(grid: Grid, x: int) -> None:
    for y in range(grid.height):
        assert grid.toggle_wall(grid.index(x, y))


@pytest.fixture
def open_10x10() -> Grid:
    return Grid.empty(10, 10, start=0, end=99)
