"""Color definitions for the game UI."""

# Basic colors
WHITE = (255, 255, 255)
RED = (255, 0, 0)

# Game-specific colors
BACKGROUND = (100, 149, 237)  # Cornflower blue
SCORE_COLOR = WHITE
LIVES_COLOR = RED
