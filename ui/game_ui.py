"""Game UI: sprites, score and lives HUD."""

from typing import Dict, Tuple

import pygame

from game.assets import GameAssets
from game.constants import (
    SCREEN_WIDTH, SPRITE_SCALE, HEALTH_ICON_POSITION, HEALTH_ICON_SCALE,
    HEALTH_TEXT_POSITION, SCORE_TEXT_OFFSET
)
from game.sprite import Sprite
from .colors import BACKGROUND, SCORE_COLOR, LIVES_COLOR


def draw_image(surface: pygame.Surface, image: pygame.Surface,
               position: Tuple[float, float], scale: float = 1.0):
    """
    Draw an image scaled about its top-left corner, then translated.

    Args:
        surface: Target surface
        image: Image to draw
        position: Top-left corner on the target
        scale: Uniform scale factor (linear filtering)
    """
    if scale != 1.0:
        size = (max(1, round(image.get_width() * scale)),
                max(1, round(image.get_height() * scale)))
        image = pygame.transform.smoothscale(image, size)
    surface.blit(image, (round(position[0]), round(position[1])))


def draw_text(surface: pygame.Surface, text: str, font: pygame.font.Font,
              position: Tuple[float, float], color):
    """Render text with its top-left corner at position."""
    rendered = font.render(text, True, color)
    surface.blit(rendered, (round(position[0]), round(position[1])))


class GameUI:
    """Draws one frame of the game from the engine's state."""

    def __init__(self, assets: GameAssets, screen_width: int = SCREEN_WIDTH):
        """
        Initialize the game UI.

        Args:
            assets: Loaded images and fonts
            screen_width: Width used to centre the score
        """
        self.assets = assets
        self.screen_width = screen_width
        self._scaled_cache: Dict[Tuple[int, float], pygame.Surface] = {}

    def _scaled(self, image: pygame.Surface, scale: float) -> pygame.Surface:
        """Scale an image once and reuse it on later frames."""
        key = (id(image), scale)
        if key not in self._scaled_cache:
            size = (max(1, round(image.get_width() * scale)),
                    max(1, round(image.get_height() * scale)))
            scaled = pygame.transform.smoothscale(image, size)
            colorkey = image.get_colorkey()
            if colorkey is not None:
                scaled.set_colorkey(colorkey)
            self._scaled_cache[key] = scaled
        return self._scaled_cache[key]

    def draw_sprite(self, surface: pygame.Surface, sprite: Sprite):
        """Draw an entity's sprite enlarged by the sprite scale."""
        draw_image(surface, self._scaled(sprite.image, SPRITE_SCALE),
                   (sprite.position.x, sprite.position.y))

    def draw_background(self, surface: pygame.Surface):
        surface.fill(BACKGROUND)

    def draw_hud(self, surface: pygame.Surface, score: int, lives: int):
        """
        Draw the score and remaining lives.

        Args:
            surface: Target surface
            score: Current score, shown zero-padded to six digits
            lives: Remaining lives
        """
        score_pos = (self.screen_width / 2 + SCORE_TEXT_OFFSET[0], SCORE_TEXT_OFFSET[1])
        draw_text(surface, f"{score:06d}", self.assets.score_font, score_pos, SCORE_COLOR)

        draw_text(surface, f"0{lives}", self.assets.health_font, HEALTH_TEXT_POSITION, LIVES_COLOR)
        draw_image(surface, self._scaled(self.assets.health_icon, HEALTH_ICON_SCALE),
                   HEALTH_ICON_POSITION)

    def draw(self, surface: pygame.Surface, game_state: Dict):
        """
        Draw a full frame.

        Args:
            surface: Target surface
            game_state: Snapshot from GameEngine.get_game_state()
        """
        self.draw_background(surface)

        for falling_object in game_state['falling_objects']:
            self.draw_sprite(surface, falling_object.sprite)
        self.draw_sprite(surface, game_state['player'].sprite)

        self.draw_hud(surface, game_state['score'], game_state['lives'])
