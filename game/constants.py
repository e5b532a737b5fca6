"""Game constants and configuration settings."""

import os

# Window settings
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
TICKS_PER_SECOND = 60
GAME_TITLE = "Robo Catch"

# Asset locations
ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'assets')
PLAYER_IMAGE = os.path.join(ASSETS_DIR, 'images', 'robo.bmp')
FALLING_OBJECT_IMAGE = os.path.join(ASSETS_DIR, 'images', 'bomba.bmp')
HEALTH_ICON_IMAGE = os.path.join(ASSETS_DIR, 'images', 'heart-icon.bmp')
SCORE_FONT = None  # None selects pygame's built-in font
HEALTH_FONT = None
SCORE_FONT_SIZE = 48
HEALTH_FONT_SIZE = 32
TRANSPARENT_KEY = (255, 0, 255)  # Magenta pixels in sprites are see-through

# Player settings
PLAYER_START_Y = 420
PLAYER_RIGHT_OFFSET = 25
PLAYER_SPEED_DISTANCE = 600  # Distance covered per second, split over ticks

# Falling object settings
FALLING_OBJECT_START_Y = -20.0
GRAVITY = 10.0
SPAWN_INTERVAL_MS = 1000

# Starting values
STARTING_LIVES = 3
STARTING_SCORE = 0

# Drawing
SPRITE_SCALE = 1.5
HEALTH_ICON_POSITION = (10, 20)
HEALTH_ICON_SCALE = 1.0
HEALTH_TEXT_POSITION = (50, 17)
SCORE_TEXT_OFFSET = (-100, 20)  # Relative to the horizontal centre of the screen
