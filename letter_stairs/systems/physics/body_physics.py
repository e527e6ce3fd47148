"""
body_physics.py
---------------
Per-frame physics step for the player body.

Responsibilities
----------------
- Translate held actions into horizontal velocity and facing.
- Apply gravity and integrate position (single semi-implicit Euler step).
- Resolve platform contacts: landing, head bump and small-gap snapping.
- Trigger jumps, clamp to the world's horizontal bounds, respawn on fall-out.
- Re-derive the body's animation.

Platforms are tested in list order and the first contact that resolves
ends the pass, so when two platforms qualify in the same frame the
earlier one wins.
"""

from letter_stairs.core.debug.debug_logger import DebugLogger
from letter_stairs.core.runtime.game_settings import Physics, World, Display, Collision
from letter_stairs.core.runtime.input_state import MOVE_LEFT, MOVE_RIGHT, JUMP
from letter_stairs.systems.physics.collision import foot_overlaps


class PhysicsParams:
    """Tunable constants for one physics step."""

    __slots__ = ("gravity", "jump_power", "move_speed", "world_width",
                 "fall_limit", "foot_margin", "snap_gap")

    def __init__(self, gravity=Physics.GRAVITY, jump_power=Physics.JUMP_POWER,
                 move_speed=Physics.MOVE_SPEED, world_width=World.WIDTH,
                 fall_limit=Display.HEIGHT + World.RESPAWN_MARGIN,
                 foot_margin=Collision.FOOT_MARGIN, snap_gap=Collision.SNAP_GAP):
        self.gravity = gravity
        self.jump_power = jump_power
        self.move_speed = move_speed
        self.world_width = world_width
        self.fall_limit = fall_limit
        self.foot_margin = foot_margin
        self.snap_gap = snap_gap


DEFAULT_PARAMS = PhysicsParams()


def update_body(body, input_state, platforms, params=DEFAULT_PARAMS):
    """
    Advance the body by one frame.

    Args:
        body (Body): Player body, mutated in place.
        input_state (InputState): Held actions for this frame.
        platforms (list[Platform]): Every solid platform, in resolution order.
        params (PhysicsParams): Step constants.

    Returns:
        bool: True if the body fell out of the world and was respawned.
    """
    apply_horizontal_input(body, input_state, params.move_speed)

    body.velocity_y += params.gravity

    previous_y = body.y
    body.x += body.velocity_x
    body.y += body.velocity_y

    resolve_platform_contacts(body, platforms, previous_y, params)
    apply_jump(body, input_state, params.jump_power)
    clamp_to_world(body, params.world_width)

    respawned = body.y > params.fall_limit
    if respawned:
        DebugLogger.state(f"Fell out of world at y={body.y:.1f}, respawning", category="physics")
        body.respawn()

    body.animator.update(body)
    return respawned


def apply_horizontal_input(body, input_state, speed):
    """Velocity is set directly from input; no acceleration or friction."""
    body.velocity_x = 0
    if input_state.is_held(MOVE_LEFT):
        body.velocity_x = -speed
        body.facing_right = False
    if input_state.is_held(MOVE_RIGHT):
        body.velocity_x = speed
        body.facing_right = True


def resolve_platform_contacts(body, platforms, previous_y, params=DEFAULT_PARAMS):
    """
    Resolve the first platform contact after integration.

    Args:
        previous_y: Body y before this frame's integration (sweep start).

    Returns:
        Platform or None: The platform that stopped the body, if any.
    """
    body.is_grounded = False

    previous_bottom = previous_y + body.height
    current_bottom = body.bottom

    for platform in platforms:
        if not foot_overlaps(body, platform, params.foot_margin):
            continue

        # Landing: bottom edge swept through the platform top this frame
        if body.velocity_y >= 0 and previous_bottom <= platform.y <= current_bottom:
            _land_on(body, platform)
            DebugLogger.trace(f"Landed on {platform}", category="collision")
            return platform

        # Head bump: top edge swept through the platform underside while rising
        if body.velocity_y < 0 and previous_y >= platform.bottom >= body.y:
            body.y = platform.bottom
            body.velocity_y = 0
            DebugLogger.trace(f"Head bump on {platform}", category="collision")
            return platform

        # Small floating gap between stair steps
        gap = platform.y - current_bottom
        if body.velocity_y >= 0 and 0 < gap <= params.snap_gap:
            _land_on(body, platform)
            DebugLogger.trace(f"Snapped {gap:.2f}px gap onto {platform}", category="collision")
            return platform

    return None


def _land_on(body, platform):
    body.y = platform.y - body.height
    body.velocity_y = 0
    body.is_grounded = True


def apply_jump(body, input_state, jump_power):
    """
    Start a jump from the ground.

    is_jumping latches while jump is held so holding the button in the air
    cannot fire a second impulse; releasing clears it.
    """
    jump_held = input_state.is_held(JUMP)

    if jump_held and body.is_grounded and not body.is_jumping:
        body.velocity_y = -jump_power
        body.is_jumping = True
        body.is_grounded = False

    if not jump_held:
        body.is_jumping = False


def clamp_to_world(body, world_width):
    if body.x < 0:
        body.x = 0
    if body.x + body.width > world_width:
        body.x = world_width - body.width
