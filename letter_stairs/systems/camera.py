"""
camera.py
---------
Viewport that follows the player body.

The body sits a third of the way across the view horizontally and at the
middle vertically. The view never scrolls left of 0 or past the world's
right edge, and never above 0; there is no bottom clamp and no easing.
"""

from letter_stairs.core.debug.debug_logger import DebugLogger
from letter_stairs.core.runtime.game_settings import Display, World


class Camera:
    """Top-left corner and size of the visible area in world space."""

    __slots__ = ("x", "y", "width", "height", "world_width")

    def __init__(self, width=Display.WIDTH, height=Display.HEIGHT, world_width=World.WIDTH):
        self.x = 0
        self.y = 0
        self.width = width
        self.height = height
        self.world_width = world_width

    def follow(self, target):
        self.x = max(0, target.x - self.width / 3)
        self.x = min(self.x, self.world_width - self.width)
        self.y = max(0, target.y - self.height / 2)

    def resize(self, width, height):
        self.width = width
        self.height = height
        DebugLogger.state(f"Viewport resized to {width}x{height}", category="camera")

    def to_screen(self, x, y):
        """Convert world coordinates to screen coordinates."""
        return x - self.x, y - self.y
