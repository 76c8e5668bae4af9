"""Shared fixtures: headless pygame and small deterministic sessions."""

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from cursor_snake.config import Config  # noqa: E402
from cursor_snake.game import COUNTDOWN_EVENT, new_game_state  # noqa: E402


@pytest.fixture
def cfg():
    return Config(seed=1234)


@pytest.fixture
def state(cfg):
    return new_game_state(cfg, rng=random.Random(cfg.seed))


@pytest.fixture
def playing(state):
    """A session whose countdown has already finished."""
    state.countdown = 0
    # park the food in the far corner so it does not interfere
    state.food = (380.0, 380.0)
    return state


@pytest.fixture
def display():
    pygame.init()
    screen = pygame.display.set_mode((1, 1))
    pygame.event.clear()
    yield screen
    pygame.time.set_timer(COUNTDOWN_EVENT, 0)
    pygame.quit()
