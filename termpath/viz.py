# termpath/viz.py
from __future__ import annotations
from typing import Dict, Optional, Tuple
import logging
import os

from PIL import Image, ImageDraw

from .grid import Grid
from .path import path_cells
from .search import SearchState
from .session import classify_cell
from .types import CellClass

logger = logging.getLogger(__name__)

PALETTE: Dict[CellClass, Tuple[int, int, int]] = {
    CellClass.CURSOR: (240, 220, 60),
    CellClass.START: (100, 220, 120),
    CellClass.END: (230, 80, 80),
    CellClass.WALL: (40, 40, 48),
    CellClass.PATH: (90, 210, 230),
    CellClass.FRONTIER: (200, 90, 200),
    CellClass.VISITED: (150, 170, 240),
    CellClass.EMPTY: (240, 240, 240),
}

def draw_search_png(grid: Grid,
                    state: Optional[SearchState],
                    out_png: str,
                    cell: int = 10) -> None:
    path = path_cells(state) if state is not None and state.found else frozenset()

    img = Image.new("RGB", (grid.width * cell, grid.height * cell), PALETTE[CellClass.EMPTY])
    drw = ImageDraw.Draw(img)

    for idx in range(grid.size()):
        kind = classify_cell(grid, state, path, idx)
        if kind is CellClass.EMPTY:
            continue
        x, y = grid.xy(idx)
        x0, y0 = x * cell, y * cell
        drw.rectangle((x0, y0, x0 + cell - 1, y0 + cell - 1), fill=PALETTE[kind])

    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    img.save(out_png)
    logger.debug("wrote %s", out_png)
