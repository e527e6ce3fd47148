"""
animation_state.py
------------------
Animation selection for the player body.

Responsibilities
----------------
- Derive the logical animation (idle / walk / jump / fall) from body physics.
- Cycle sprite frames on a fixed update delay, restarting on every switch.

The logical animation is never stored as an independent source of truth:
SpriteAnimator re-derives it from the body every update and only keeps the
frame-cycle position.

current_frame is not read by the renderer yet: the player is drawn as one
whole image, not cut from a sprite sheet.
"""

from enum import Enum

from letter_stairs.core.debug.debug_logger import DebugLogger
from letter_stairs.core.runtime.game_settings import Animation


class AnimationState(str, Enum):
    IDLE = "idle"
    WALK = "walk"
    JUMP = "jump"
    FALL = "fall"


def select_animation(is_grounded: bool, velocity_x: float, velocity_y: float) -> AnimationState:
    """Pick the animation matching the body's physical state."""
    if not is_grounded:
        if velocity_y < 0:
            return AnimationState.JUMP
        return AnimationState.FALL
    if velocity_x != 0:
        return AnimationState.WALK
    return AnimationState.IDLE


class SpriteAnimator:
    """Frame cycler for a body's sprite animations."""

    __slots__ = ("frames", "frame_delay", "current", "frame_index", "counter")

    def __init__(self, frames=None, frame_delay: int = Animation.FRAME_DELAY):
        self.frames = frames or Animation.FRAMES
        self.frame_delay = frame_delay
        self.current = AnimationState.IDLE
        self.frame_index = 0
        self.counter = 0

    def set_animation(self, state: AnimationState):
        """Switch animation; switching restarts the cycle at frame 0."""
        if state == self.current:
            return
        DebugLogger.trace(f"{self.current.value} -> {state.value}", category="animation")
        self.current = state
        self.frame_index = 0
        self.counter = 0

    def update(self, body):
        """Re-derive the animation from body physics, then advance the cycle."""
        self.set_animation(select_animation(body.is_grounded, body.velocity_x, body.velocity_y))

        self.counter += 1
        if self.counter >= self.frame_delay:
            self.counter = 0
            self.frame_index = (self.frame_index + 1) % len(self.frames[self.current.value])

    @property
    def current_frame(self) -> int:
        """Sprite sheet index of the frame to draw."""
        return self.frames[self.current.value][self.frame_index]
