"""UI module containing rendering components."""

from .colors import *
from .game_ui import GameUI, draw_image, draw_text
