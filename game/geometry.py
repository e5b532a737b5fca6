"""2D position and axis-aligned rectangle primitives."""

from dataclasses import dataclass


@dataclass
class Vector:
    """A point in screen space."""
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle anchored at its top-left corner."""
    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def intersects(self, other: 'Rect') -> bool:
        """
        Check whether two rectangles overlap.

        Bounds are inclusive, so rectangles sharing an edge or a corner
        count as intersecting.
        """
        return (self.x <= other.max_x and
                other.x <= self.max_x and
                self.y <= other.max_y and
                other.y <= self.max_y)


def intersects(a: Rect, b: Rect) -> bool:
    """Check whether rectangles a and b overlap (inclusive bounds)."""
    return a.intersects(b)
