"""
console.py

Character-cell console drawn with pygame.
Console holds the cells plus the per-frame input the game reads;
ConsoleWindow owns the pygame window, clock and font.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import pygame

from .constants import (
    TITLE, CELL_WIDTH, CELL_HEIGHT, FONT_SIZE, TARGET_FPS,
    SCREEN_WIDTH, SCREEN_HEIGHT, BLACK, WHITE
)

Color = Tuple[int, int, int]


class ConsoleInitError(RuntimeError):
    """The display or the font could not be set up."""


@dataclass
class Cell:
    glyph: str = " "
    fg: Color = WHITE
    bg: Color = BLACK


class Console:
    """Fixed-size grid of cells. Writes outside the grid are dropped."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        self.width = width
        self.height = height
        self.cells: List[List[Cell]] = []

        # Per-frame input, filled in by ConsoleWindow.poll
        self.key: Optional[int] = None
        self.frame_time_ms: float = 0.0
        self.quitting = False

        self.cls()

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cls(self):
        self.cls_bg(BLACK)

    def cls_bg(self, bg: Color):
        self.cells = [
            [Cell(bg=bg) for _ in range(self.width)] for _ in range(self.height)
        ]

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        if self.in_bounds(x, y):
            self.cells[y][x] = Cell(glyph, fg, bg)

    def print(self, x: int, y: int, text: str):
        """Left-aligned white text; keeps each cell's background."""
        for i, ch in enumerate(text):
            if self.in_bounds(x + i, y):
                cell = self.cells[y][x + i]
                self.cells[y][x + i] = Cell(ch, WHITE, cell.bg)

    def print_centered(self, y: int, text: str):
        self.print((self.width - len(text)) // 2, y, text)

    def get(self, x: int, y: int) -> Cell:
        return self.cells[y][x]

    def row_text(self, y: int) -> str:
        return "".join(cell.glyph for cell in self.cells[y])


class ConsoleWindow:
    """The pygame side: window, clock, keyboard and blitting."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 title: str = TITLE):
        try:
            pygame.init()
            self.screen = pygame.display.set_mode(
                (width * CELL_WIDTH, height * CELL_HEIGHT))
            pygame.display.set_caption(title)
            self.font = pygame.font.SysFont("monospace", FONT_SIZE)
        except pygame.error as e:
            pygame.quit()
            raise ConsoleInitError(str(e)) from e

        self.clock = pygame.time.Clock()
        self.glyph_cache: Dict[Tuple[str, Color, Color], pygame.Surface] = {}

    def poll(self, console: Console):
        """Measures the frame and stores the most recent key press, if any."""
        console.frame_time_ms = float(self.clock.tick(TARGET_FPS))
        console.key = None

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                console.quitting = True
            if event.type == pygame.KEYDOWN:
                console.key = event.key

    def _glyph(self, cell: Cell) -> pygame.Surface:
        key = (cell.glyph, cell.fg, cell.bg)
        surf = self.glyph_cache.get(key)
        if surf is None:
            surf = self.font.render(cell.glyph, True, cell.fg, cell.bg)
            self.glyph_cache[key] = surf
        return surf

    def present(self, console: Console):
        for y, row in enumerate(console.cells):
            for x, cell in enumerate(row):
                px, py = x * CELL_WIDTH, y * CELL_HEIGHT
                self.screen.fill(cell.bg, (px, py, CELL_WIDTH, CELL_HEIGHT))
                if cell.glyph != " ":
                    surf = self._glyph(cell)
                    self.screen.blit(surf, (
                        px + (CELL_WIDTH - surf.get_width()) // 2,
                        py + (CELL_HEIGHT - surf.get_height()) // 2))

        pygame.display.flip()

    def close(self):
        pygame.quit()


def main_loop(window: ConsoleWindow, console: Console, state):
    """Runs state.tick once per frame until the console is told to quit."""
    try:
        while not console.quitting:
            window.poll(console)
            if console.quitting:
                break
            state.tick(console)
            window.present(console)
    finally:
        window.close()
