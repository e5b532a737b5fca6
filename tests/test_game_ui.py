import pygame
import pytest

from game.assets import GameAssets
from game.config import GameConfig
from game.game_engine import GameEngine
from ui.colors import BACKGROUND
from ui.game_ui import GameUI, draw_image, draw_text


@pytest.fixture()
def assets():
    return GameAssets.load(GameConfig())


def test_draw_image_scales_and_translates():
    target = pygame.Surface((50, 50))
    target.fill((0, 0, 0))
    image = pygame.Surface((10, 10))
    image.fill((255, 0, 0))

    draw_image(target, image, (5, 5), scale=2.0)

    assert tuple(target.get_at((24, 24)))[:3] == (255, 0, 0)
    assert tuple(target.get_at((26, 26)))[:3] == (0, 0, 0)
    assert tuple(target.get_at((4, 4)))[:3] == (0, 0, 0)


def test_draw_text_marks_pixels(assets):
    target = pygame.Surface((200, 80))
    target.fill((0, 0, 0))
    draw_text(target, "000042", assets.score_font, (0, 0), (255, 255, 255))
    assert any(
        tuple(target.get_at((x, y)))[:3] != (0, 0, 0)
        for x in range(200) for y in range(80)
    )


def test_draw_frame(assets):
    engine = GameEngine(assets.player_image, assets.falling_object_image)
    engine.spawn_falling_object()
    ui = GameUI(assets)
    screen = pygame.Surface((640, 480))

    ui.draw(screen, engine.get_game_state())

    assert tuple(screen.get_at((639, 479)))[:3] == BACKGROUND
    # Player sprite drawn over its start position
    player = engine.player
    centre = (int(player.position.x + player.sprite.width * 0.75),
              int(player.position.y + player.sprite.height * 0.75))
    assert tuple(screen.get_at(centre))[:3] != BACKGROUND


def test_scaled_images_are_cached(assets):
    ui = GameUI(assets)
    first = ui._scaled(assets.player_image, 1.5)
    assert ui._scaled(assets.player_image, 1.5) is first
    assert first.get_size() == (60, 60)
