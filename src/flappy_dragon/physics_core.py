"""
physics_core.py: The shared kinematic functions and collision logic.
"""

import math

from .constants import (
    GRAVITY_ACCEL, FLAP_VELOCITY, GAP_SIZE_START, GAP_SIZE_MIN
)


def to_cell(value: float) -> int:
    """Rounds a world coordinate to a cell, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class PhysicsCore:
    """
    Stateless physics shared by the player and the obstacles.
    Integration is variable-step: callers pass the measured frame delta.
    """

    GRAVITY = GRAVITY_ACCEL
    FLAP = FLAP_VELOCITY

    def apply_gravity_and_movement(
        self, x: float, y: float, dx: float, dy: float, delta_s: float
    ) -> tuple[float, float, float]:
        """
        Explicit Euler step: velocity first, then position.
        Returns (x, y, dy) with y clamped to the top of the screen.
        """
        dy += self.GRAVITY * delta_s
        y += dy * delta_s
        x += dx * delta_s

        if y < 0.0:
            y = 0.0

        return x, y, dy

    def flap(self) -> float:
        """Returns the vertical velocity after a flap."""
        return self.FLAP

    def gap_size(self, score: int) -> int:
        """The gap narrows by one cell per point until it reaches the minimum."""
        return max(GAP_SIZE_MIN, GAP_SIZE_START - score)

    def check_collision(
        self, player_x: int, player_y: int, wall_x: int, gap_y: int, size: int
    ) -> bool:
        """
        True when the player sits in the wall column outside the gap.
        Only exact column equality counts, so a step longer than one cell
        can pass through a wall.
        """
        if player_x != wall_x:
            return False

        half_size = size // 2
        above_gap = player_y < gap_y - half_size
        below_gap = player_y > gap_y + half_size
        return above_gap or below_gap


core = PhysicsCore()
