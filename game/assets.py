"""Loading of image and font assets at startup."""

import os
from dataclasses import dataclass
from typing import Optional

import pygame

from .config import GameConfig
from .constants import TRANSPARENT_KEY
from .errors import AssetLoadError


def load_image(path: str) -> pygame.Surface:
    """
    Load an image from disk.

    Args:
        path: Path to the image file

    Returns:
        The loaded surface with the transparent colour key set

    Raises:
        AssetLoadError: If the file is missing or cannot be decoded
    """
    if not os.path.isfile(path):
        raise AssetLoadError(path, "file not found")

    try:
        image = pygame.image.load(path)
    except pygame.error as e:
        raise AssetLoadError(path, str(e)) from e

    image.set_colorkey(TRANSPARENT_KEY)
    return image


def load_font(path: Optional[str], size: int) -> pygame.font.Font:
    """
    Load a font at the given point size.

    Args:
        path: Path to a TTF/OTF file, or None for pygame's built-in font
        size: Point size

    Raises:
        AssetLoadError: If the font file is missing or unreadable
    """
    if not pygame.font.get_init():
        pygame.font.init()

    if path is not None and not os.path.isfile(path):
        raise AssetLoadError(path, "file not found")

    try:
        return pygame.font.Font(path, size)
    except (pygame.error, OSError) as e:
        raise AssetLoadError(path or '<default font>', str(e)) from e


@dataclass
class GameAssets:
    """Every image and font the game needs, loaded once."""
    player_image: pygame.Surface
    falling_object_image: pygame.Surface
    health_icon: pygame.Surface
    score_font: pygame.font.Font
    health_font: pygame.font.Font

    @classmethod
    def load(cls, config: GameConfig) -> 'GameAssets':
        """Load all assets named by the configuration."""
        return cls(
            player_image=load_image(config.player_image),
            falling_object_image=load_image(config.falling_object_image),
            health_icon=load_image(config.health_icon_image),
            score_font=load_font(config.score_font, config.score_font_size),
            health_font=load_font(config.health_font, config.health_font_size),
        )
