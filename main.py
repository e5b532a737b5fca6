#!/usr/bin/env python3
"""
Robo Catch - a small arcade catching game.

Steer the robot left and right to catch the objects falling from the sky.
Every catch scores a point; every object that hits the ground costs a life.
Losing the last life starts a fresh game.
"""

import sys
from typing import Optional, Tuple

import pygame

from game.assets import GameAssets
from game.config import GameConfig
from game.constants import GAME_TITLE
from game.errors import AssetLoadError, ConfigError
from game.game_engine import GameEngine
from game.input import InputState
from ui.game_ui import GameUI


class RoboCatch:
    """Main game application class."""

    def __init__(self, assets: GameAssets, config: GameConfig):
        """
        Initialize the game application.

        Args:
            assets: Images and fonts loaded at startup
            config: Validated game configuration
        """
        self.config = config
        self.assets = assets
        self.game_engine = GameEngine(assets.player_image, assets.falling_object_image, config)
        self.game_ui = GameUI(assets, config.screen_width)
        self.clock = pygame.time.Clock()

        # Running state
        self.running = True

    def update(self, input_state: Optional[InputState] = None):
        """Advance the game by one tick using the current keyboard state."""
        if input_state is None:
            input_state = InputState.poll()
        self.game_engine.update(input_state)

    def draw(self, screen: pygame.Surface):
        """Render the current game state."""
        self.game_ui.draw(screen, self.game_engine.get_game_state())

    def layout(self, outer_width: int, outer_height: int) -> Tuple[int, int]:
        """Logical screen size for a given window size (identity)."""
        return outer_width, outer_height

    def run(self, screen: pygame.Surface):
        """Main game loop."""
        while self.running:
            self.clock.tick(self.config.ticks_per_second)

            # Handle events
            self._handle_events()
            if not self.running:
                break

            self.update()
            self.draw(screen)

            pygame.display.flip()

        pygame.quit()

    def _handle_events(self):
        """Handle pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False


def main():
    """Entry point for the game."""
    print("=" * 50)
    print("  ROBO CATCH")
    print("=" * 50)
    print()
    print("Controls:")
    print("  - Left/Right arrows: Move")
    print("  - Escape: Quit")
    print()

    try:
        config = GameConfig()
    except ConfigError as e:
        print(f"Invalid configuration: {e}")
        sys.exit(1)

    pygame.init()

    # Assets load before the window opens
    try:
        assets = GameAssets.load(config)
    except AssetLoadError as e:
        print(f"Error: {e}")
        pygame.quit()
        sys.exit(1)

    game = RoboCatch(assets, config)

    screen = pygame.display.set_mode(game.layout(config.screen_width, config.screen_height))
    pygame.display.set_caption(GAME_TITLE)

    game.run(screen)


if __name__ == "__main__":
    main()
