"""
data_models.py: Data structures for the game state.
"""

import random
from dataclasses import dataclass
from typing import Optional

from .constants import (
    PLAYER_OFFSET, START_Y, FORWARD_VELOCITY, SCREEN_HEIGHT,
    GAP_Y_MIN, GAP_Y_MAX, BLACK, YELLOW, RED, PLAYER_GLYPH, WALL_GLYPH
)
from .physics_core import core, to_cell


@dataclass
class Player:
    """The dragon. World x grows each frame while the screen column stays fixed."""
    x: float = float(PLAYER_OFFSET)
    y: float = START_Y
    dx: float = FORWARD_VELOCITY
    dy: float = 0.0

    def world_x(self) -> int:
        return to_cell(self.x)

    def screen_y(self) -> int:
        return to_cell(self.y)

    def update(self, delta_s: float):
        self.x, self.y, self.dy = core.apply_gravity_and_movement(
            self.x, self.y, self.dx, self.dy, delta_s)

    def flap(self):
        self.dy = core.flap()

    def render(self, console):
        console.set(PLAYER_OFFSET, self.screen_y(), YELLOW, BLACK, PLAYER_GLYPH)


@dataclass
class Obstacle:
    """A wall with a single gap. Replaced, never moved, once the player passes it."""
    x: int
    gap_y: int
    size: int

    @classmethod
    def spawn(cls, x: int, score: int, rng: Optional[random.Random] = None) -> "Obstacle":
        """Places a new wall at world column x; the gap shrinks as the score grows."""
        rng = rng or random
        return cls(
            x=x,
            gap_y=rng.randrange(GAP_Y_MIN, GAP_Y_MAX),
            size=core.gap_size(score),
        )

    def render(self, console, player_x: int):
        screen_x = self.x - player_x + PLAYER_OFFSET
        half_size = self.size // 2

        # top half
        for y in range(0, self.gap_y - half_size):
            console.set(screen_x, y, RED, BLACK, WALL_GLYPH)

        # bottom half
        for y in range(self.gap_y + half_size, SCREEN_HEIGHT):
            console.set(screen_x, y, RED, BLACK, WALL_GLYPH)

    def hit(self, player: Player) -> bool:
        return core.check_collision(
            player.world_x(), player.screen_y(), self.x, self.gap_y, self.size)
