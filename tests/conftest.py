"""Shared fixtures for Breakout tests."""
import os

# Headless pygame for rendering and event tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from breakout.config import GameConfig
from breakout.game.progression import reset_game
from breakout.input.input_state import InputState


@pytest.fixture
def config():
    """Default game configuration."""
    return GameConfig()


@pytest.fixture
def game_state(config):
    """A freshly reset game."""
    return reset_game(config)


@pytest.fixture
def inputs():
    """Input state with nothing held."""
    return InputState()


@pytest.fixture
def single_block_config():
    """Configuration whose first wave is a single block."""
    return GameConfig(block_initial_rows=1, block_columns=1)
