"""Main game engine managing world state and the per-tick update."""

import random
from typing import Dict, List, Optional

import pygame

from .config import GameConfig
from .constants import STARTING_SCORE
from .falling_object import FallingObject
from .input import InputState
from .player import Player
from .timer import Timer


class GameEngine:
    """Owns the player, the falling objects, the spawn timer and the score."""

    def __init__(self, player_image: pygame.Surface, falling_object_image: pygame.Surface,
                 config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        """
        Initialize the game engine.

        Args:
            player_image: Sprite image for the player
            falling_object_image: Sprite image shared by all falling objects
            config: Game configuration, defaults if omitted
            rng: Random source for spawn positions
        """
        self.config = config or GameConfig()
        self.player_image = player_image
        self.falling_object_image = falling_object_image
        self.rng = rng or random.Random()

        self.player = Player(self.player_image, self.config)
        self.falling_objects: List[FallingObject] = []
        self.spawn_timer = Timer(self.config.spawn_interval_ms, self.config.ticks_per_second)
        self.score = STARTING_SCORE

        # Statistics (in memory only)
        self.stats = {
            'total_spawned': 0,
            'caught': 0,
            'missed': 0,
            'games_played': 1,
        }

    def reset_game(self):
        """Reset the world to its starting state."""
        self.player = Player(self.player_image, self.config)
        self.falling_objects = []
        self.spawn_timer.reset()
        self.score = STARTING_SCORE
        self.stats['games_played'] += 1

    def update(self, input_state: Optional[InputState] = None) -> Dict:
        """
        Advance the simulation by one tick.

        Args:
            input_state: Keys held this tick, nothing held if omitted

        Returns:
            Dictionary with update events for UI feedback
        """
        events = {
            'spawned': False,
            'caught': 0,
            'missed': 0,
            'reset': False,
        }

        self.player.update(input_state or InputState())

        self.spawn_timer.update()
        if self.spawn_timer.is_ready():
            self.spawn_timer.reset()
            self.spawn_falling_object()
            events['spawned'] = True

        self._catch_falling_objects(events)

        for falling_object in self.falling_objects:
            falling_object.update()

        self._drop_missed_objects(events)

        return events

    def spawn_falling_object(self) -> FallingObject:
        """Add a new falling object at a random position above the screen."""
        falling_object = FallingObject.spawn_new(
            self.falling_object_image,
            self.config.screen_width,
            self.rng,
            y=self.config.falling_object_start_y,
            gravity=self.config.gravity,
        )
        self.falling_objects.append(falling_object)
        self.stats['total_spawned'] += 1
        return falling_object

    def _catch_falling_objects(self, events: Dict):
        """Remove every object touching the player and score one point each."""
        player_rect = self.player.collider()
        survivors = []

        for falling_object in self.falling_objects:
            if falling_object.collider().intersects(player_rect):
                self.score += 1
                events['caught'] += 1
                self.stats['caught'] += 1
            else:
                survivors.append(falling_object)

        self.falling_objects = survivors

    def _drop_missed_objects(self, events: Dict):
        """Remove objects that fell past the bottom and take a life for each."""
        survivors = []

        for falling_object in self.falling_objects:
            if not falling_object.has_fallen_past(self.config.screen_height):
                survivors.append(falling_object)
                continue

            events['missed'] += 1
            self.stats['missed'] += 1
            if self.player.lose_life():
                print(f"Game over - final score {self.score}")
                self.reset_game()
                events['reset'] = True
                # The old world, including any other misses this tick, is gone
                return

        self.falling_objects = survivors

    def get_game_state(self) -> Dict:
        """Get current game state for rendering."""
        return {
            'score': self.score,
            'lives': self.player.lives,
            'player': self.player,
            'falling_objects': list(self.falling_objects),
            'stats': dict(self.stats),
        }
