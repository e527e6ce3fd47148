"""
letter_trigger.py
-----------------
Rising-edge detection of the player landing on letter blocks.

Each block remembers whether the player was already on it (player_on).
A letter fires only on the not-touching -> touching transition, so
standing still on a block pronounces it exactly once; stepping off clears
the latch and the next landing fires again.
"""

from letter_stairs.core.debug.debug_logger import DebugLogger
from letter_stairs.core.services.event_manager import LetterLandedEvent
from letter_stairs.systems.physics.collision import is_touching_letter


class LetterTriggerDetector:
    """Fires LetterLandedEvent for newly touched letter blocks."""

    def __init__(self, event_manager):
        self.event_manager = event_manager

    def update(self, body, letter_platforms):
        """
        Check every letter block against the body.

        Returns:
            list[str]: Letters that fired this frame, in block order.
        """
        fired = []
        for platform in letter_platforms:
            if self.check(body, platform):
                fired.append(platform.letter)
        return fired

    def check(self, body, platform) -> bool:
        """Update one block's flags; return True if it fired."""
        if not is_touching_letter(body, platform):
            platform.player_on = False
            return False

        platform.is_colliding = True
        if platform.player_on:
            return False

        platform.player_on = True
        DebugLogger.action(f"Landed on letter '{platform.letter}'", category="letters")
        self.event_manager.dispatch(
            LetterLandedEvent(letter=platform.letter, position=(platform.x, platform.y))
        )
        return True
