"""
game_state.py: The mode machine that drives one frame of the game.
"""

import random
from enum import Enum
from typing import Optional

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, PLAYER_OFFSET, NAVY,
    KEY_FLAP, KEY_PLAY, KEY_QUIT
)
from .data_models import Player, Obstacle


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    END = "end"


class GameState:
    """
    Owns the player, the single live obstacle, the score and the mode.
    tick() is called once per frame with the console.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.player = Player()
        self.obstacle = Obstacle.spawn(SCREEN_WIDTH, 0, self.rng)
        self.mode = GameMode.MENU
        self.score = 0

    def tick(self, console):
        if self.mode == GameMode.MENU:
            self.main_menu(console)
        elif self.mode == GameMode.PLAYING:
            self.play(console)
        elif self.mode == GameMode.END:
            self.dead(console)

    def restart(self):
        self.player = Player()
        self.obstacle = Obstacle.spawn(SCREEN_WIDTH, 0, self.rng)
        self.score = 0
        self.mode = GameMode.PLAYING

    def play(self, console):
        console.cls_bg(NAVY)

        self.player.update(console.frame_time_ms / 1000.0)
        if console.key == KEY_FLAP:
            self.player.flap()

        self.player.render(console)
        self.obstacle.render(console, self.player.world_x())

        console.print(0, 0, "Press SPACE to flap.")
        console.print(0, 1, f"Score {self.score}")

        if self.player.world_x() > self.obstacle.x + PLAYER_OFFSET:
            self.score += 1
            self.obstacle = Obstacle.spawn(
                self.player.world_x() + SCREEN_WIDTH - PLAYER_OFFSET,
                self.score, self.rng)

        if self.player.screen_y() > SCREEN_HEIGHT or self.obstacle.hit(self.player):
            self.mode = GameMode.END

    def _menu_keys(self, console):
        if console.key == KEY_PLAY:
            self.restart()
        elif console.key == KEY_QUIT:
            console.quitting = True

    def main_menu(self, console):
        console.cls()
        console.print_centered(5, "Welcome to Flappy Dragon")
        console.print_centered(8, "(P) Play game")
        console.print_centered(9, "(Q) Quit game")
        self._menu_keys(console)

    def dead(self, console):
        console.cls()
        console.print_centered(5, "You are dead!")
        console.print_centered(6, f"You earned {self.score} points")
        console.print_centered(8, "(P) Play again")
        console.print_centered(9, "(Q) Quit game")
        self._menu_keys(console)
