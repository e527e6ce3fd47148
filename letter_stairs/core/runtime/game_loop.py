"""
game_loop.py
------------
Main runtime loop: events -> input -> world update -> speech -> render, once per frame.

Responsibilities
----------------
- Initialize pygame, the window and the runtime services
- Build the world for the selected character and wire speech to it
- Run until the window is closed (or ESC is pressed)
"""

import pygame

from letter_stairs.audio.speech_manager import SpeechManager
from letter_stairs.core.debug.debug_logger import DebugLogger
from letter_stairs.core.runtime.game_settings import Display, Debug
from letter_stairs.core.runtime.input_state import InputState
from letter_stairs.core.services.event_manager import EventManager
from letter_stairs.core.services.input_manager import InputManager
from letter_stairs.graphics.draw_manager import DrawManager, SPRITE_EXTRA_HEIGHT
from letter_stairs.systems.world.world import World


class GameLoop:
    """Owns the window and drives the simulation at the display refresh rate."""

    def __init__(self, character, level=None):
        """
        Args:
            character: CharacterConfig chosen for this session
            level: Optional prebuilt Level (default staircase if None)
        """
        DebugLogger.section("Initializing GameLoop")

        pygame.init()
        pygame.display.set_caption(Display.CAPTION)
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT), pygame.RESIZABLE)
        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT}")

        self.events = EventManager()
        self.input_state = InputState()
        self.input_manager = InputManager(self.input_state, screen_size=self.screen.get_size())
        self.speech = SpeechManager(self.events)
        self.draw_manager = DrawManager()

        self.world = World(
            level=level,
            character=character,
            input_state=self.input_state,
            event_manager=self.events,
            viewport=self.screen.get_size(),
        )

        body = self.world.body
        self.sprite = self.draw_manager.load_sprite(
            f"player_{character.id}",
            character.sprite_chain,
            (int(body.width), int(body.height) + SPRITE_EXTRA_HEIGHT),
        )

        self.clock = pygame.time.Clock()
        self.show_debug = Debug.SHOW_OVERLAY
        self.running = True

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================

    def run(self):
        DebugLogger.section("Game Loop")

        while self.running:
            self._handle_events()
            self.input_manager.update()
            self.world.update()
            self.speech.update()
            self._draw()
            self.clock.tick(Display.FPS)

        self.speech.shutdown()
        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                self._resize(event.w, event.h)

            action = self.input_manager.handle_event(event)
            if action == "toggle_debug":
                self.show_debug = not self.show_debug
                DebugLogger.state(f"Debug overlay {'ON' if self.show_debug else 'OFF'}")
            elif action == "quit":
                self.running = False

    def _resize(self, width, height):
        """Clamp the window to the supported range and resize the camera."""
        width = max(Display.MIN_WIDTH, min(width, Display.WIDTH))
        height = max(Display.MIN_HEIGHT, min(height, Display.HEIGHT))
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.world.camera.resize(width, height)
        self.input_manager.layout_buttons(width, height)
        DebugLogger.state(f"Resized to {width}x{height}", category="display")

    def _draw(self):
        self.draw_manager.draw_frame(
            self.screen,
            self.world,
            sprite=self.sprite,
            buttons=self.input_manager.buttons,
            debug=self.show_debug,
        )
        pygame.display.flip()
