"""
test_input_manager.py
---------------------
Keyboard and on-screen button input feeding the InputState.
"""

from collections import defaultdict
from unittest.mock import patch

import pygame
import pytest

from letter_stairs.core.runtime.input_state import InputState, MOVE_LEFT, MOVE_RIGHT, JUMP
from letter_stairs.core.services.input_manager import InputManager


@pytest.fixture
def manager():
    return InputManager(InputState(), screen_size=(1280, 620))


def keys_down(*held):
    keys = defaultdict(bool)
    for key in held:
        keys[key] = True
    return keys


def button_center(manager, action):
    return next(b for b in manager.buttons if b.action == action).rect.center


class TestKeyboard:

    def test_arrow_and_wasd_keys_map_to_actions(self, manager):
        manager.apply(keys_down(pygame.K_a, pygame.K_SPACE))

        assert manager.input_state.snapshot() == {MOVE_LEFT: True, MOVE_RIGHT: False, JUMP: True}

    def test_released_keys_clear_actions(self, manager):
        manager.apply(keys_down(pygame.K_RIGHT))
        manager.apply(keys_down())

        assert not manager.input_state.is_held(MOVE_RIGHT)

    def test_update_polls_pygame(self, manager):
        with patch("pygame.key.get_pressed", return_value=keys_down(pygame.K_UP)):
            manager.update()

        assert manager.input_state.is_held(JUMP)

    def test_system_keys_return_actions(self, manager):
        f3 = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_F3)
        esc = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
        other = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT)

        assert manager.handle_event(f3) == "toggle_debug"
        assert manager.handle_event(esc) == "quit"
        assert manager.handle_event(other) is None


class TestButtons:

    def test_layout_hugs_bottom_corners(self, manager):
        left, right, jump = manager.buttons
        assert left.rect.topleft == (16, 532)
        assert right.rect.left == left.rect.right + 16
        assert jump.rect.right == 1280 - 16

    def test_mouse_press_holds_action_until_release(self, manager):
        pos = button_center(manager, JUMP)
        manager.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos))
        manager.apply(keys_down())
        assert manager.input_state.is_held(JUMP)

        manager.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=pos))
        manager.apply(keys_down())
        assert not manager.input_state.is_held(JUMP)

    def test_dragging_off_a_button_releases_it(self, manager):
        pos = button_center(manager, MOVE_LEFT)
        manager.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos))
        manager.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(640, 100), rel=(0, 0), buttons=(1, 0, 0)))
        manager.apply(keys_down())

        assert not manager.input_state.is_held(MOVE_LEFT)

    def test_right_click_is_ignored(self, manager):
        pos = button_center(manager, MOVE_RIGHT)
        manager.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=pos))
        manager.apply(keys_down())

        assert not manager.input_state.is_held(MOVE_RIGHT)

    def test_focus_loss_releases_everything(self, manager):
        for action in (MOVE_LEFT, JUMP):
            manager.handle_event(pygame.event.Event(
                pygame.MOUSEBUTTONDOWN, button=1, pos=button_center(manager, action)))
        manager.handle_event(pygame.event.Event(pygame.WINDOWFOCUSLOST))
        manager.apply(keys_down())

        assert not any(manager.input_state.snapshot().values())

    def test_relayout_follows_new_size(self, manager):
        manager.layout_buttons(640, 480)
        jump = manager.buttons[-1]
        assert jump.rect.bottomright == (640 - 16, 480 - 16)
