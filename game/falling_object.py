"""Objects that drop from above the screen for the player to catch."""

import random
from typing import Optional

import pygame

from .constants import FALLING_OBJECT_START_Y, GRAVITY
from .geometry import Vector, Rect
from .sprite import Sprite


class FallingObject:
    """A falling object moving down at a constant speed per tick."""

    def __init__(self, image: pygame.Surface, x: float,
                 y: float = FALLING_OBJECT_START_Y, gravity: float = GRAVITY):
        self.sprite = Sprite(image=image, position=Vector(x, y))
        self.gravity = gravity

    @classmethod
    def spawn_new(cls, image: pygame.Surface, screen_width: int,
                  rng: Optional[random.Random] = None,
                  y: float = FALLING_OBJECT_START_Y,
                  gravity: float = GRAVITY) -> 'FallingObject':
        """
        Create an object at a random horizontal position above the screen.

        Args:
            image: Sprite image for the object
            screen_width: Width of the playfield
            rng: Random source; pass a seeded random.Random for repeatable runs
            y: Starting height (negative is above the visible area)
            gravity: Distance fallen per tick

        Returns:
            The new falling object
        """
        rng = rng or random
        max_x = max(0, screen_width - image.get_width())
        return cls(image, rng.uniform(0, max_x), y, gravity)

    @property
    def position(self) -> Vector:
        return self.sprite.position

    def update(self):
        """Fall by one tick's worth of gravity."""
        self.sprite.position.y += self.gravity

    def collider(self) -> Rect:
        return self.sprite.collider()

    def has_fallen_past(self, screen_height: float) -> bool:
        """Check whether the object has reached the bottom of the screen."""
        return self.sprite.position.y >= screen_height
