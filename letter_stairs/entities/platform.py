"""
platform.py
-----------
Static, axis-aligned surfaces the player stands on or bumps into.

Coordinate System
-----------------
Platforms use top-left coordinates (x, y) plus width/height, the same
space as the player Body. The y axis grows downward.
"""

from letter_stairs.core.runtime.game_settings import LetterBlocks


class Platform:
    """Plain solid rectangle."""

    __slots__ = ("x", "y", "width", "height")

    def __init__(self, x: float, y: float, width: float, height: float):
        if width <= 0 or height <= 0:
            raise ValueError(
                f"{type(self).__name__}: size must be positive, got {width}x{height}"
            )
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def __repr__(self):
        return f"{type(self).__name__}(x={self.x}, y={self.y}, w={self.width}, h={self.height})"


class LetterPlatform(Platform):
    """
    Fixed-size letter block that pronounces its letter on landing.

    Attributes:
        letter: Single character shown on the block and spoken on landing
        is_colliding: Highlight flag for the current frame, cleared after drawing
        player_on: Whether the player was already standing here last frame
    """

    __slots__ = ("letter", "is_colliding", "player_on")

    def __init__(self, x: float, y: float, letter: str,
                 width: float = LetterBlocks.WIDTH, height: float = LetterBlocks.HEIGHT):
        super().__init__(x, y, width, height)
        if not isinstance(letter, str) or len(letter) != 1:
            raise ValueError(f"LetterPlatform: letter must be one character, got {letter!r}")
        self.letter = letter
        self.is_colliding = False
        self.player_on = False

    def clear_highlight(self):
        self.is_colliding = False

    def __repr__(self):
        return f"LetterPlatform({self.letter!r}, x={self.x}, y={self.y})"
