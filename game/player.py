"""Player-controlled robot that catches falling objects."""

import pygame

from .config import GameConfig
from .geometry import Vector, Rect
from .input import InputState
from .sprite import Sprite


class Player:
    """The robot at the bottom of the screen."""

    def __init__(self, image: pygame.Surface, config: GameConfig):
        """
        Initialize the player centred horizontally at the start height.

        Args:
            image: Sprite image; its size is the player's collider size
            config: Game configuration (screen bounds, speed, lives)
        """
        self.config = config
        half_width = image.get_width() / 2
        self.sprite = Sprite(
            image=image,
            position=Vector(config.screen_width / 2 - half_width, config.player_start_y),
        )
        self.lives = config.starting_lives
        self.speed = config.player_speed

    @property
    def position(self) -> Vector:
        return self.sprite.position

    @property
    def right_bound(self) -> float:
        """Largest x the player may step from when moving right."""
        return self.config.screen_width - self.sprite.width - self.config.player_right_offset

    def update(self, input_state: InputState):
        """
        Move the player one tick according to input.

        A step left is dropped if it would put x below zero. A step right
        is taken whenever the current x is still inside the right bound,
        so the last step may end up to one speed increment past it.

        Args:
            input_state: Movement keys held this tick
        """
        position = self.sprite.position

        if input_state.left and position.x - self.speed >= 0:
            position.x -= self.speed

        if input_state.right and position.x < self.right_bound:
            position.x += self.speed

    def collider(self) -> Rect:
        return self.sprite.collider()

    def lose_life(self) -> bool:
        """
        Take one life away.

        Returns:
            True if the player has no lives left
        """
        if self.lives > 0:
            self.lives -= 1
        return self.lives == 0
