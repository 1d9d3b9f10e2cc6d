"""Shared fixtures for the game tests.

Rendering runs against off-screen surfaces, so SDL is pointed at its dummy
drivers before pygame is imported anywhere.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from src.game import Game


@pytest.fixture
def game() -> Game:
    """An 800x600 game with the player resting in the middle."""
    return Game(800, 600)


@pytest.fixture
def big_game() -> Game:
    """Large enough that a projectile expires before it leaves the screen."""
    return Game(2000, 2000)
