"""
world.py
--------
Owns the level geometry and the player body and runs one simulation frame.

Frame order
-----------
1. Input has already been collected into the InputState by the caller.
2. Physics and platform collision (update_body).
3. Letter-trigger detection on every letter block.
4. Camera follow.
"""

from letter_stairs.core.debug.debug_logger import DebugLogger
from letter_stairs.core.runtime.game_settings import Display, World as WorldSettings, PlayerBody
from letter_stairs.core.runtime.input_state import InputState
from letter_stairs.core.services.event_manager import EventManager, PlayerRespawnedEvent
from letter_stairs.entities.body import Body
from letter_stairs.systems.camera import Camera
from letter_stairs.systems.letter_trigger import LetterTriggerDetector
from letter_stairs.systems.physics.body_physics import PhysicsParams, update_body
from letter_stairs.systems.world.level_builder import build_level


class World:
    """Single-level simulation: body, platforms, letter triggers and camera."""

    def __init__(self, level=None, character=None, input_state=None, event_manager=None,
                 viewport=(Display.WIDTH, Display.HEIGHT), canvas_height=Display.HEIGHT):
        """
        Args:
            level: Prebuilt Level (None builds the default staircase)
            character: CharacterConfig for the player sprite
            input_state: Shared InputState written by the input collaborator
            event_manager: EventManager receiving letter and respawn events
            viewport: Initial camera size (width, height)
            canvas_height: Logical canvas height; falling 100px below it respawns
        """
        self.level = level if level is not None else build_level()
        self.input_state = input_state if input_state is not None else InputState()
        self.events = event_manager if event_manager is not None else EventManager()

        self.body = Body(PlayerBody.SPAWN_X, PlayerBody.SPAWN_Y, character=character)
        self.params = PhysicsParams(
            world_width=self.level.world_width,
            fall_limit=canvas_height + WorldSettings.RESPAWN_MARGIN,
        )

        self.camera = Camera(viewport[0], viewport[1], world_width=self.level.world_width)
        self.letter_detector = LetterTriggerDetector(self.events)

        # Resolution order is fixed for the lifetime of the level
        self._collision_order = self.level.all_platforms
        self.frame = 0

        DebugLogger.init_entry("World")
        DebugLogger.init_sub(f"Character: {character.name if character else 'placeholder'}")
        DebugLogger.init_sub(f"Platforms: {len(self._collision_order)}")

    @property
    def platforms(self):
        return self.level.platforms

    @property
    def letter_platforms(self):
        return self.level.letter_platforms

    def update(self):
        """
        Advance one frame.

        Returns:
            list[str]: Letters newly landed on this frame.
        """
        self.frame += 1

        if update_body(self.body, self.input_state, self._collision_order, self.params):
            self.events.dispatch(PlayerRespawnedEvent(position=(self.body.x, self.body.y)))

        fired = self.letter_detector.update(self.body, self.level.letter_platforms)
        self.camera.follow(self.body)
        return fired
