"""Per-tick player input."""

from dataclasses import dataclass

import pygame


@dataclass(frozen=True)
class InputState:
    """Horizontal movement intent for a single tick."""
    left: bool = False
    right: bool = False

    @classmethod
    def from_pressed(cls, pressed) -> 'InputState':
        """
        Build an input state from a key-state sequence.

        Args:
            pressed: Result of pygame.key.get_pressed() (or any mapping
                indexed by pygame key constants)
        """
        return cls(left=bool(pressed[pygame.K_LEFT]), right=bool(pressed[pygame.K_RIGHT]))

    @classmethod
    def poll(cls) -> 'InputState':
        """Read the current keyboard state."""
        return cls.from_pressed(pygame.key.get_pressed())
