"""Image plus position, shared by every on-screen entity."""

from dataclasses import dataclass, field

import pygame

from .geometry import Vector, Rect


@dataclass
class Sprite:
    """An image placed at a position in screen space."""
    image: pygame.Surface
    position: Vector = field(default_factory=Vector)

    @property
    def width(self) -> int:
        return self.image.get_width()

    @property
    def height(self) -> int:
        return self.image.get_height()

    def collider(self) -> Rect:
        """Get the sprite's bounding rectangle at its current position."""
        return Rect(self.position.x, self.position.y, self.width, self.height)
