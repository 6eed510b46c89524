# termpath/grid.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import logging
import os
import random

from .errors import InvalidEndpoints
from .heuristics import manhattan
from .types import Cell, Coord

logger = logging.getLogger(__name__)

MIN_WIDTH = 10
MIN_HEIGHT = 5
HUD_ROWS = 2

@dataclass
class Grid:
    width: int
    height: int
    cells: List[Cell]  # row-major, index = y * width + x
    start: int
    end: int
    revision: int = 0

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"grid must be at least 1x1, got {self.width}x{self.height}")
        if len(self.cells) != self.width * self.height:
            raise ValueError(f"cells length {len(self.cells)} != width*height {self.width * self.height}")
        for name, idx in (("start", self.start), ("end", self.end)):
            if not 0 <= idx < len(self.cells):
                raise ValueError(f"{name} index {idx} outside a {self.width}x{self.height} grid")
        if self.start == self.end:
            raise ValueError(f"start and end share cell {self.start}")

    # ----------------- construction -----------------
    @staticmethod
    def empty(width: int, height: int, start: Optional[int] = None, end: Optional[int] = None) -> "Grid":
        n = width * height
        mid = (height // 2) * width
        if start is None:
            start = mid + width // 4
        if end is None:
            end = mid + min(3 * width // 4, width - 1)
        if start == end and n > 1:
            end = _nudge(end, n)
        return Grid(width, height, [Cell.EMPTY] * n, start, end)

    @staticmethod
    def for_viewport(view_w: int, view_h: int, hud_rows: int = HUD_ROWS) -> "Grid":
        """Grid filling a viewport measured in cells, leaving room for the HUD."""
        w = max(view_w, MIN_WIDTH)
        h = max(view_h - hud_rows, MIN_HEIGHT)
        return Grid.empty(w, h)

    @staticmethod
    def random(width: int = 40, height: int = 20, p_blocked: float = 0.30,
               seed: Optional[int] = None) -> "Grid":
        rng = random.Random(seed)
        grid = Grid.empty(width, height, start=0, end=width * height - 1)
        grid.cells = [Cell.WALL if rng.random() < p_blocked else Cell.EMPTY for _ in range(width * height)]
        grid.cells[grid.start] = Cell.EMPTY
        grid.cells[grid.end] = Cell.EMPTY
        return grid

    @staticmethod
    def load(path: str) -> "Grid":
        with open(path, "r") as f:
            lines = [line.strip() for line in f if line.strip()]

        header = lines[0].split()
        if header and header[0] == "GRID" and len(header) == 5:
            w, h, start, end = map(int, header[1:])
            rows = lines[1:]
            if len(rows) != h:
                raise ValueError(f"{path}: header says {h} rows, found {len(rows)}")
            grid = Grid(w, h, _parse_rows(rows, w, path), start, end)
            grid.cells[grid.start] = Cell.EMPTY
            grid.cells[grid.end] = Cell.EMPTY
            return grid

        # fallback (legacy flat format: rows of 0/1; start=first cell, end=last cell)
        w, h = len(lines[0]), len(lines)
        grid = Grid(w, h, _parse_rows(lines, w, path), 0, w * h - 1)
        grid.cells[grid.start] = Cell.EMPTY
        grid.cells[grid.end] = Cell.EMPTY
        return grid

    def save(self, path: str) -> None:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "w") as f:
            f.write(f"GRID {self.width} {self.height} {self.start} {self.end}\n")
            for y in range(self.height):
                row = self.cells[y * self.width:(y + 1) * self.width]
                f.write("".join("1" if c is Cell.WALL else "0" for c in row) + "\n")

    # ----------------- geometry -----------------
    def size(self) -> int:
        return self.width * self.height

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def xy(self, index: int) -> Coord:
        return index % self.width, index // self.width

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_wall(self, index: int) -> bool:
        return self.cells[index] is Cell.WALL

    def manhattan(self, a: int, b: int) -> int:
        return manhattan(self.xy(a), self.xy(b))

    def neighbors4(self, index: int) -> List[int]:
        """Up, down, left, right; the order is fixed so expansion order is reproducible."""
        x, y = self.xy(index)
        w = self.width
        out = []
        if y > 0:
            out.append(index - w)
        if y + 1 < self.height:
            out.append(index + w)
        if x > 0:
            out.append(index - 1)
        if x + 1 < w:
            out.append(index + 1)
        return out

    # ----------------- mutation -----------------
    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.size():
            raise IndexError(f"cell index {index} out of range for {self.width}x{self.height} grid")

    def toggle_wall(self, index: int) -> bool:
        self._check_index(index)
        if index == self.start or index == self.end:
            return False
        self.cells[index] = Cell.EMPTY if self.cells[index] is Cell.WALL else Cell.WALL
        self.revision += 1
        return True

    def paint_wall(self, index: int) -> bool:
        self._check_index(index)
        if index == self.start or index == self.end or self.cells[index] is Cell.WALL:
            return False
        self.cells[index] = Cell.WALL
        self.revision += 1
        return True

    def set_start(self, index: int) -> bool:
        self._check_index(index)
        if index == self.end:
            raise InvalidEndpoints("Start and End cannot share a cell.")
        if self.is_wall(index):
            raise InvalidEndpoints("Start must be on an empty cell.")
        if index == self.start:
            return False
        self.start = index
        self.revision += 1
        return True

    def set_end(self, index: int) -> bool:
        self._check_index(index)
        if index == self.start:
            raise InvalidEndpoints("Start and End cannot share a cell.")
        if self.is_wall(index):
            raise InvalidEndpoints("End must be on an empty cell.")
        if index == self.end:
            return False
        self.end = index
        self.revision += 1
        return True

    def clear_walls(self) -> None:
        self.cells = [Cell.EMPTY] * self.size()
        self.revision += 1

    def resize(self, new_w: int, new_h: int) -> bool:
        """Resize in place, keeping the top-left overlap; returns False if nothing changed."""
        new_w = max(new_w, MIN_WIDTH)
        new_h = max(new_h, MIN_HEIGHT)
        if new_w == self.width and new_h == self.height:
            return False

        new_cells = [Cell.EMPTY] * (new_w * new_h)
        copy_w = min(self.width, new_w)
        copy_h = min(self.height, new_h)
        for y in range(copy_h):
            src = y * self.width
            dst = y * new_w
            new_cells[dst:dst + copy_w] = self.cells[src:src + copy_w]

        sx, sy = self.xy(self.start)
        ex, ey = self.xy(self.end)
        self.width, self.height, self.cells = new_w, new_h, new_cells

        self.start = self.index(min(sx, new_w - 1), min(sy, new_h - 1))
        self.end = self.index(min(ex, new_w - 1), min(ey, new_h - 1))
        if self.start == self.end:
            self.end = _nudge(self.end, self.size())
        # relocated endpoints may land on copied walls
        self.cells[self.start] = Cell.EMPTY
        self.cells[self.end] = Cell.EMPTY

        self.revision += 1
        logger.info("grid resized to %dx%d (start=%d end=%d)", new_w, new_h, self.start, self.end)
        return True

def _nudge(index: int, n: int) -> int:
    return index + 1 if index + 1 < n else index - 1

def _parse_rows(rows: List[str], width: int, path: str) -> List[Cell]:
    cells: List[Cell] = []
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"{path}: row {y} has {len(row)} cells, expected {width}")
        cells.extend(Cell.WALL if c == "1" else Cell.EMPTY for c in row)
    return cells
