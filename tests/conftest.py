"""Shared fixtures for the game tests."""
import os
import random

import pytest

# Window tests never need a real display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from flappy_dragon.console import Console
from flappy_dragon.game_state import GameState


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def console():
    """A fresh 80x50 console with no key and a zero-length frame."""
    return Console()


@pytest.fixture
def state(rng):
    return GameState(rng=rng)


@pytest.fixture
def playing(state):
    """A game that has just been started from the menu."""
    state.restart()
    return state
