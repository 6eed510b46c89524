# termpath/pygame_viewer.py (interactive driver)
from __future__ import annotations
import argparse
import logging
import pygame

from .grid import HUD_ROWS, Grid
from .session import (DEFAULT_TICK_MS, ClearWalls, MoveCursor, ResetSearch, SetEnd, SetStart, Session, StartSearch,
                      Step, ToggleDrawMode, TogglePause, ToggleWall, Resize)
from .types import Algorithm, CellClass

logger = logging.getLogger(__name__)


class Colors:
    BG = (18, 18, 22)
    HUD = (235, 235, 240)
    STATUS = (140, 140, 150)
    GRID = (60, 60, 70)
    # one entry per CellClass member, same name
    CURSOR = (240, 220, 60)
    START = (90, 200, 110)
    END = (220, 80, 80)
    WALL = (70, 70, 80)
    PATH = (80, 200, 220)
    FRONTIER = (190, 80, 190)
    VISITED = (70, 90, 170)
    EMPTY = (28, 28, 34)

    @classmethod
    def for_cell(cls, kind: CellClass):
        return getattr(cls, kind.name)

KEY_COMMANDS = {
    pygame.K_LEFT: MoveCursor(-1, 0),
    pygame.K_RIGHT: MoveCursor(1, 0),
    pygame.K_UP: MoveCursor(0, -1),
    pygame.K_DOWN: MoveCursor(0, 1),
    pygame.K_SPACE: ToggleDrawMode(),
    pygame.K_x: ToggleWall(),
    pygame.K_s: SetStart(),
    pygame.K_e: SetEnd(),
    pygame.K_b: StartSearch(Algorithm.BFS),
    pygame.K_d: StartSearch(Algorithm.DIJKSTRA),
    pygame.K_a: StartSearch(Algorithm.ASTAR),
    pygame.K_p: TogglePause(),
    pygame.K_r: ResetSearch(),
    pygame.K_c: ClearWalls(),
}

class Viewer:
    def __init__(self, session: Session, cell_size: int = 16, fps: int = 60,
                 tick_ms: int = DEFAULT_TICK_MS):
        self.session = session
        self.cell = cell_size
        self.fps = fps
        self.tick_ms = tick_ms
        self._tick_acc = 0
        self.show_grid = False

        self._recreate_display()
        pygame.display.set_caption("termpath: BFS / Dijkstra / A*")
        pygame.key.set_repeat(200, 40)
        self.font = pygame.font.SysFont("monospace", max(self.cell - 3, 10))
        self.clock = pygame.time.Clock()

    # ----------------- display -----------------
    def _recreate_display(self) -> None:
        grid = self.session.grid
        W, H = grid.width * self.cell, (grid.height + HUD_ROWS) * self.cell
        self.screen = pygame.display.set_mode((W, H), pygame.RESIZABLE)

    def _on_window_resize(self, w_px: int, h_px: int) -> None:
        cols = w_px // self.cell
        rows = h_px // self.cell
        self.session.apply(Resize(cols, rows - HUD_ROWS))
        # grid may have been clamped to its minimum; keep the window in sync
        self._recreate_display()

    # ----------------- draw -----------------
    def draw(self) -> None:
        session, cell = self.session, self.cell
        grid = session.grid
        scr = self.screen
        scr.fill(Colors.BG)

        for idx in range(grid.size()):
            x, y = grid.xy(idx)
            scr.fill(Colors.for_cell(session.classify(idx)), pygame.Rect(x * cell, y * cell, cell, cell))

        if self.show_grid:
            for i in range(grid.width + 1):
                pygame.draw.line(scr, Colors.GRID, (i * cell, 0), (i * cell, grid.height * cell))
            for j in range(grid.height + 1):
                pygame.draw.line(scr, Colors.GRID, (0, j * cell), (grid.width * cell, j * cell))

        top = grid.height * cell
        scr.blit(self.font.render(session.info_line(), True, Colors.HUD), (2, top))
        scr.blit(self.font.render(session.status, True, Colors.STATUS), (2, top + cell))

        pygame.display.flip()

    # ----------------- loop -----------------
    def handle_key(self, event) -> bool:
        """Returns False when the viewer should quit."""
        if event.key in (pygame.K_q, pygame.K_ESCAPE):
            return False
        if event.key == pygame.K_c and (event.mod & pygame.KMOD_CTRL):
            return False
        if event.key == pygame.K_PAGEUP:
            self.tick_ms = max(self.tick_ms // 2, 1)
            logger.info("tick interval: %d ms", self.tick_ms)
        elif event.key == pygame.K_PAGEDOWN:
            self.tick_ms = min(self.tick_ms * 2, 1000)
            logger.info("tick interval: %d ms", self.tick_ms)
        elif event.key == pygame.K_h:
            self.show_grid = not self.show_grid
        elif event.key in KEY_COMMANDS:
            self.session.apply(KEY_COMMANDS[event.key])
        return True

    def run(self) -> None:
        running = True
        while running:
            self._tick_acc += self.clock.tick(self.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    self._on_window_resize(event.w, event.h)
                elif event.type == pygame.KEYDOWN:
                    if not self.handle_key(event):
                        running = False

            # at most one search step per tick
            if self._tick_acc >= self.tick_ms:
                self._tick_acc = 0
                self.session.apply(Step())

            self.draw()

def launch(args: argparse.Namespace) -> None:
    if args.load:
        grid = Grid.load(args.load)
    else:
        grid = Grid.for_viewport(args.width, args.height)

    pygame.init()
    try:
        Viewer(Session(grid), cell_size=args.cell, fps=args.fps, tick_ms=args.tick_ms).run()
    finally:
        pygame.quit()

def main():
    from .cli import add_view_arguments
    parser = argparse.ArgumentParser(description="Step-by-step grid search viewer")
    add_view_arguments(parser)
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    launch(args)

if __name__ == "__main__":
    main()
