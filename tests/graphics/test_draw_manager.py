"""
test_draw_manager.py
--------------------
Rendering smoke tests against the dummy SDL video driver.
"""

import pygame
import pytest

from letter_stairs.graphics.draw_manager import DrawManager, PLACEHOLDER_COLOR
from letter_stairs.systems.world.level_builder import DEFAULT_LEVEL, build_level
from letter_stairs.systems.world.world import World


@pytest.fixture
def screen():
    pygame.init()
    surface = pygame.display.set_mode((640, 480))
    yield surface
    pygame.quit()


def test_missing_sprite_falls_back_to_placeholder(screen, tmp_path):
    draw = DrawManager()

    sprite = draw.load_sprite("player", [str(tmp_path / "nope.png")], (18, 25))

    assert sprite.get_size() == (18, 25)
    assert sprite.get_at((9, 12))[:3] == PLACEHOLDER_COLOR
    assert draw.load_sprite("player", [], (1, 1)) is sprite


def test_frame_clears_letter_highlights(screen):
    world = World(level=build_level(DEFAULT_LEVEL), viewport=screen.get_size())
    for block in world.letter_platforms:
        block.is_colliding = True

    DrawManager().draw_frame(screen, world, debug=True)

    assert not any(block.is_colliding for block in world.letter_platforms)
