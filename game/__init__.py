"""Game module containing core game logic."""

from .constants import *
from .errors import ConfigError, AssetLoadError
from .config import GameConfig
from .geometry import Vector, Rect, intersects
from .timer import Timer
from .input import InputState
from .sprite import Sprite
from .player import Player
from .falling_object import FallingObject
from .game_engine import GameEngine
