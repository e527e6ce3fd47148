"""
body.py
-------
The physically simulated player entity.

Coordinate System
-----------------
(x, y) is the top-left corner of the collision box, y grows downward.
The "foot point" is the horizontal center of the box and is the only
horizontal probe used for platform contact.

Lifecycle
---------
Created once per level at the spawn point. Mutated every frame by
update_body(); reset by respawn() after falling out of the world.
"""

from letter_stairs.core.runtime.game_settings import PlayerBody
from letter_stairs.graphics.animations.animation_state import SpriteAnimator


class Body:
    """Player position, velocity and contact flags."""

    __slots__ = (
        # Spatial
        "x", "y", "width", "height",
        # Motion
        "velocity_x", "velocity_y",
        # Flags
        "is_grounded", "is_jumping", "facing_right",
        # Spawn
        "start_x", "start_y",
        # Presentation
        "character", "animator",
    )

    def __init__(self, x: float = PlayerBody.SPAWN_X, y: float = PlayerBody.SPAWN_Y,
                 width: float = PlayerBody.WIDTH, height: float = PlayerBody.HEIGHT,
                 character=None):
        """
        Args:
            x, y: Spawn position (top-left)
            width, height: Collision box size
            character: CharacterConfig used to pick the sprite; None draws a placeholder
        """
        self.x = x
        self.y = y
        self.width = width
        self.height = height

        self.velocity_x = 0
        self.velocity_y = 0

        self.is_grounded = False
        self.is_jumping = False
        self.facing_right = True

        self.start_x = x
        self.start_y = y

        self.character = character
        self.animator = SpriteAnimator()

    # ===========================================================
    # Derived Geometry
    # ===========================================================

    @property
    def foot_x(self) -> float:
        return self.x + self.width / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def respawn(self):
        """Return to the spawn point at rest."""
        self.x = self.start_x
        self.y = self.start_y
        self.velocity_x = 0
        self.velocity_y = 0
        self.is_jumping = False
        self.is_grounded = False

    def __repr__(self):
        return (f"Body(x={self.x:.1f}, y={self.y:.1f}, vx={self.velocity_x}, "
                f"vy={self.velocity_y:.2f}, grounded={self.is_grounded})")
