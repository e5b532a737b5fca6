"""Validated game configuration built from the defaults in constants."""

from dataclasses import dataclass
from typing import Optional

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, TICKS_PER_SECOND, SPAWN_INTERVAL_MS, GRAVITY,
    FALLING_OBJECT_START_Y, PLAYER_START_Y, PLAYER_RIGHT_OFFSET,
    PLAYER_SPEED_DISTANCE, STARTING_LIVES, PLAYER_IMAGE, FALLING_OBJECT_IMAGE,
    HEALTH_ICON_IMAGE, SCORE_FONT, HEALTH_FONT, SCORE_FONT_SIZE, HEALTH_FONT_SIZE
)
from .errors import ConfigError


@dataclass
class GameConfig:
    """All tunable values for one run of the game."""
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    ticks_per_second: int = TICKS_PER_SECOND
    spawn_interval_ms: int = SPAWN_INTERVAL_MS
    gravity: float = GRAVITY
    falling_object_start_y: float = FALLING_OBJECT_START_Y
    player_start_y: float = PLAYER_START_Y
    player_right_offset: int = PLAYER_RIGHT_OFFSET
    starting_lives: int = STARTING_LIVES

    player_image: str = PLAYER_IMAGE
    falling_object_image: str = FALLING_OBJECT_IMAGE
    health_icon_image: str = HEALTH_ICON_IMAGE
    score_font: Optional[str] = SCORE_FONT
    score_font_size: int = SCORE_FONT_SIZE
    health_font: Optional[str] = HEALTH_FONT
    health_font_size: int = HEALTH_FONT_SIZE

    def __post_init__(self):
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ConfigError(
                f"Screen size must be positive, got {self.screen_width}x{self.screen_height}"
            )
        if self.ticks_per_second <= 0:
            raise ConfigError(f"Tick rate must be positive, got {self.ticks_per_second}")
        if self.ticks_per_second > PLAYER_SPEED_DISTANCE:
            raise ConfigError(
                f"Tick rate {self.ticks_per_second} leaves the player no distance to move per tick"
            )
        if self.spawn_interval_ms <= 0:
            raise ConfigError(f"Spawn interval must be positive, got {self.spawn_interval_ms}")
        if self.spawn_interval_ms * self.ticks_per_second // 1000 < 1:
            raise ConfigError(
                f"Spawn interval {self.spawn_interval_ms} ms is shorter than one tick"
            )
        if self.gravity <= 0:
            raise ConfigError(f"Gravity must be positive, got {self.gravity}")
        if self.starting_lives <= 0:
            raise ConfigError(f"Starting lives must be positive, got {self.starting_lives}")
        if self.score_font_size <= 0 or self.health_font_size <= 0:
            raise ConfigError("Font sizes must be positive")

    @property
    def player_speed(self) -> float:
        """Horizontal distance the player moves in one tick."""
        return float(PLAYER_SPEED_DISTANCE // self.ticks_per_second)
