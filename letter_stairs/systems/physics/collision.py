"""
collision.py
------------
Contact predicates between the player body and platforms.

Both tests use the body's foot point (horizontal center) widened by
FOOT_MARGIN on each side instead of a full bounding-box overlap, so the
player does not slip off narrow block edges.
"""

from letter_stairs.core.runtime.game_settings import Collision


def foot_overlaps(body, platform, margin: float = Collision.FOOT_MARGIN) -> bool:
    """True when the foot point lies over the platform (edges inclusive)."""
    foot_x = body.foot_x
    return platform.x - margin <= foot_x <= platform.x + platform.width + margin


def is_touching_letter(body, platform,
                       tolerance: float = Collision.LETTER_TOLERANCE,
                       margin: float = Collision.FOOT_MARGIN) -> bool:
    """
    Looser contact test used for letter pronunciation.

    The body counts as on the block when its feet are above the block top
    (or sunk at most `tolerance` into it) and its projected next bottom
    reaches the top.
    """
    if not foot_overlaps(body, platform, margin):
        return False
    bottom = body.bottom
    return bottom <= platform.y + tolerance and bottom + body.velocity_y >= platform.y
