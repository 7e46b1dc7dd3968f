#!/usr/bin/env python3
"""
Flappy Dragon entry point: opens the console window and runs the game loop.
"""

import sys

from .console import Console, ConsoleWindow, ConsoleInitError, main_loop
from .game_state import GameState


def main() -> int:
    print("Starting Flappy Dragon...")
    try:
        window = ConsoleWindow()
    except ConsoleInitError as e:
        print(f"Could not open window: {e}")
        return 1

    state = GameState()
    main_loop(window, Console(), state)
    print(f"Game closed. Last score: {state.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
