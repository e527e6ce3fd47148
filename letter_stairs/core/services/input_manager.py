"""
input_manager.py
----------------
Collects keyboard and on-screen button input into the shared InputState.

Provides:
- Key bindings per context (gameplay actions, system toggles)
- On-screen left/right/jump buttons driven by mouse or touch
- Held-state polling once per frame
"""

import pygame

from letter_stairs.core.debug.debug_logger import DebugLogger
from letter_stairs.core.runtime.game_settings import Input
from letter_stairs.core.runtime.input_state import ACTIONS, MOVE_LEFT, MOVE_RIGHT, JUMP


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "gameplay": {
        MOVE_LEFT: [pygame.K_LEFT, pygame.K_a],
        MOVE_RIGHT: [pygame.K_RIGHT, pygame.K_d],
        JUMP: [pygame.K_UP, pygame.K_w, pygame.K_SPACE],
    },
    "system": {
        "toggle_debug": [pygame.K_F3],
        "quit": [pygame.K_ESCAPE],
    },
}


class TouchButton:
    """On-screen button holding one logical action while pressed."""

    __slots__ = ("action", "rect", "label", "pointers")

    def __init__(self, action, rect, label=""):
        self.action = action
        self.rect = pygame.Rect(rect)
        self.label = label
        self.pointers = set()

    @property
    def pressed(self) -> bool:
        return bool(self.pointers)


class InputManager:
    """
    Polls held actions into an InputState.

    Usage:
        input_manager.handle_event(event)   # for every pygame event
        input_manager.update()              # once per frame, before world.update()
    """

    MOUSE_POINTER = "mouse"

    def __init__(self, input_state, key_bindings=None, screen_size=None):
        """
        Args:
            input_state: InputState to write held actions into
            key_bindings: Custom bindings dict (DEFAULT_KEY_BINDINGS if None)
            screen_size: (width, height) used to lay out on-screen buttons
        """
        DebugLogger.init_entry("InputManager")

        self.input_state = input_state
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._system_lookup = {
            key: action
            for action, keys in self.key_bindings.get("system", {}).items()
            for key in keys
        }

        self.buttons = []
        if screen_size:
            self.layout_buttons(*screen_size)

    # ===========================================================
    # On-screen Buttons
    # ===========================================================

    def layout_buttons(self, width, height):
        """Place left/right in the bottom-left corner and jump bottom-right."""
        size, margin = Input.BUTTON_SIZE, Input.BUTTON_MARGIN
        top = height - size - margin

        self.buttons = [
            TouchButton(MOVE_LEFT, (margin, top, size, size), "<"),
            TouchButton(MOVE_RIGHT, (margin * 2 + size, top, size, size), ">"),
            TouchButton(JUMP, (width - size - margin, top, size, size), "^"),
        ]
        DebugLogger.state(f"Laid out {len(self.buttons)} on-screen buttons", category="input")

    def _press_at(self, pointer, pos):
        for button in self.buttons:
            if button.rect.collidepoint(pos):
                button.pointers.add(pointer)

    def _release(self, pointer):
        for button in self.buttons:
            button.pointers.discard(pointer)

    def _drag_to(self, pointer, pos):
        """Pointer leaving a button releases it."""
        for button in self.buttons:
            if pointer in button.pointers and not button.rect.collidepoint(pos):
                button.pointers.discard(pointer)

    # ===========================================================
    # Event Handling
    # ===========================================================

    def handle_event(self, event):
        """
        Route one pygame event.

        Returns:
            str or None: Name of a triggered system action ("toggle_debug", "quit").
        """
        if event.type == pygame.KEYDOWN:
            return self._system_lookup.get(event.key)

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._press_at(self.MOUSE_POINTER, event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._release(self.MOUSE_POINTER)
        elif event.type == pygame.MOUSEMOTION:
            self._drag_to(self.MOUSE_POINTER, event.pos)
        elif event.type == pygame.FINGERDOWN:
            self._press_at(event.finger_id, self._finger_pos(event))
        elif event.type == pygame.FINGERUP:
            self._release(event.finger_id)
        elif event.type == pygame.FINGERMOTION:
            self._drag_to(event.finger_id, self._finger_pos(event))
        elif event.type == pygame.WINDOWFOCUSLOST:
            for button in self.buttons:
                button.pointers.clear()
        return None

    def _finger_pos(self, event):
        # Finger coordinates are normalized to [0, 1]
        surface = pygame.display.get_surface()
        width, height = surface.get_size() if surface else (1, 1)
        return event.x * width, event.y * height

    # ===========================================================
    # Frame Update
    # ===========================================================

    def update(self):
        """Poll keyboard and buttons into the InputState. Call once per frame."""
        self.apply(pygame.key.get_pressed())

    def apply(self, keys):
        gameplay = self.key_bindings["gameplay"]
        for action in ACTIONS:
            held = any(keys[key] for key in gameplay.get(action, ()))
            held = held or any(b.pressed for b in self.buttons if b.action == action)
            self.input_state.set(action, held)
