import os
import random
import sys

import pytest

# Headless pygame for the UI tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

# Ensure the repository root (containing the `game` and `ui` packages) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

import pygame

from game.config import GameConfig
from game.game_engine import GameEngine

PLAYER_SIZE = (40, 40)
FALLING_OBJECT_SIZE = (20, 20)


@pytest.fixture(scope='session', autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture()
def config():
    return GameConfig()


@pytest.fixture()
def player_image():
    return pygame.Surface(PLAYER_SIZE)


@pytest.fixture()
def falling_object_image():
    return pygame.Surface(FALLING_OBJECT_SIZE)


@pytest.fixture()
def engine(player_image, falling_object_image, config):
    return GameEngine(player_image, falling_object_image, config, rng=random.Random(1234))
