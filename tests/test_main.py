import pygame

from game.assets import GameAssets
from game.config import GameConfig
from game.input import InputState

import main


def make_game():
    config = GameConfig()
    return main.RoboCatch(GameAssets.load(config), config)


def test_layout_is_identity():
    game = make_game()
    assert game.layout(800, 600) == (800, 600)
    assert game.layout(640, 480) == (640, 480)


def test_update_advances_engine():
    game = make_game()
    assert game.update(InputState(right=True)) is None
    assert game.game_engine.player.position.x == 320 - 20 + 10


def test_draw_renders_frame():
    game = make_game()
    screen = pygame.Surface((640, 480))
    game.draw(screen)
    assert tuple(screen.get_at((0, 479)))[:3] == (100, 149, 237)
