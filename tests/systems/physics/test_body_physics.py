"""
test_body_physics.py
--------------------
Regression tests for the per-frame body physics step.

Covers:
1. Landing snaps the body exactly onto the platform top
2. Grounded is recomputed every frame (never sticky)
3. Jump impulse, and the held-jump latch while airborne
4. Head bumps, small-gap snapping and first-match-wins ordering
5. Horizontal clamping and respawn after falling out of the world
"""

import random

import pytest

from letter_stairs.core.runtime.game_settings import Physics, World, PlayerBody, Display
from letter_stairs.entities.body import Body
from letter_stairs.entities.platform import Platform
from letter_stairs.systems.physics.body_physics import (
    PhysicsParams,
    update_body,
    resolve_platform_contacts,
)


GROUND_Y = World.GROUND_Y
STANDING_Y = GROUND_Y - PlayerBody.HEIGHT


# ===========================================================
# Landing
# ===========================================================

class TestLanding:

    @pytest.mark.parametrize("start_y, start_vy", [
        (400, 5),
        (300, 0),
        (100, 2.3),
        (STANDING_Y - 37.7, 11.1),
    ])
    def test_landing_snaps_bottom_exactly_to_platform_top(self, ground, make_input, start_y, start_vy):
        body = Body(50, start_y)
        body.velocity_y = start_vy

        for _ in range(200):
            update_body(body, make_input(), [ground])
            if body.is_grounded:
                break

        assert body.is_grounded
        assert body.y + body.height == GROUND_Y
        assert body.velocity_y == 0

    def test_resting_body_stays_grounded_every_frame(self, ground, make_input, standing_body):
        for _ in range(30):
            update_body(standing_body, make_input(), [ground])
            assert standing_body.is_grounded
            assert standing_body.y == STANDING_Y
            assert standing_body.velocity_y == 0

    def test_small_gap_is_snapped_onto_platform(self, ground, make_input):
        body = Body(50, STANDING_Y - 4)

        update_body(body, make_input(), [ground])

        # Bottom ends 3.4px above the top without crossing it: still snapped
        assert body.is_grounded
        assert body.y == STANDING_Y
        assert body.velocity_y == 0

    def test_gap_larger_than_snap_distance_keeps_falling(self, ground, make_input):
        body = Body(50, STANDING_Y - 5)

        update_body(body, make_input(), [ground])

        assert not body.is_grounded
        assert body.velocity_y == pytest.approx(Physics.GRAVITY)

    def test_foot_outside_platform_does_not_land(self, make_input):
        ledge = Platform(0, GROUND_Y, 200, 50)
        # foot_x = 131 + 90 = 221, beyond 200 + 12 margin
        body = Body(131, STANDING_Y)

        update_body(body, make_input(), [ledge])

        assert not body.is_grounded
        assert body.y > STANDING_Y


# ===========================================================
# Grounded Flag
# ===========================================================

class TestGroundedFlag:

    def test_grounded_is_cleared_without_support(self, make_input):
        body = Body(50, 100)
        body.is_grounded = True

        update_body(body, make_input(), [])

        assert body.is_grounded is False

    def test_walking_off_a_ledge_clears_grounded(self, make_input):
        ledge = Platform(0, GROUND_Y, 200, 50)
        body = Body(20, STANDING_Y)
        body.is_grounded = True

        grounded_history = []
        for _ in range(20):
            update_body(body, make_input(move_right=True), [ledge])
            grounded_history.append(body.is_grounded)

        assert grounded_history[0] is True
        assert grounded_history[-1] is False
        assert body.y > STANDING_Y


# ===========================================================
# Jumping
# ===========================================================

class TestJump:

    def test_single_frame_jump_press(self, ground, make_input, standing_body):
        update_body(standing_body, make_input(jump=True), [ground])

        assert standing_body.velocity_y == -Physics.JUMP_POWER
        assert standing_body.is_grounded is False
        assert standing_body.is_jumping is True

        update_body(standing_body, make_input(), [ground])

        assert standing_body.is_jumping is False
        assert standing_body.velocity_y == pytest.approx(-Physics.JUMP_POWER + Physics.GRAVITY)

    def test_airborne_body_cannot_jump(self, ground, make_input):
        body = Body(50, 200)

        update_body(body, make_input(jump=True), [ground])

        assert body.velocity_y == pytest.approx(Physics.GRAVITY)
        assert body.is_jumping is False

    def test_holding_jump_fires_one_impulse_until_released(self, ground, make_input, standing_body):
        impulses = 0
        for _ in range(120):
            update_body(standing_body, make_input(jump=True), [ground])
            if standing_body.velocity_y == -Physics.JUMP_POWER:
                impulses += 1

        assert impulses == 1
        # Back on the ground but still latched while the button is held
        assert standing_body.is_grounded
        assert standing_body.is_jumping

        update_body(standing_body, make_input(), [ground])
        update_body(standing_body, make_input(jump=True), [ground])

        assert standing_body.velocity_y == -Physics.JUMP_POWER

    def test_jump_returns_to_ground(self, ground, make_input, standing_body):
        update_body(standing_body, make_input(jump=True), [ground])
        for _ in range(100):
            update_body(standing_body, make_input(), [ground])

        assert standing_body.is_grounded
        assert standing_body.y == STANDING_Y


# ===========================================================
# Head Bump & Ordering
# ===========================================================

class TestHeadBumpAndOrdering:

    def test_rising_body_bumps_platform_underside(self, ground, make_input):
        ceiling = Platform(0, 200, 400, 20)
        body = Body(50, 230)
        body.velocity_y = -15

        update_body(body, make_input(), [ground, ceiling])

        assert body.y == ceiling.bottom
        assert body.velocity_y == 0
        assert body.is_grounded is False

    def test_first_matching_platform_wins(self):
        first = Platform(0, 600, 400, 50)
        second = Platform(0, 598, 400, 10)

        def falling_body():
            body = Body(50, 410.6)
            body.velocity_y = 5.6
            return body

        body = falling_body()
        hit = resolve_platform_contacts(body, [first, second], previous_y=405)
        assert hit is first
        assert body.y == 600 - body.height

        body = falling_body()
        hit = resolve_platform_contacts(body, [second, first], previous_y=405)
        assert hit is second
        assert body.y == 598 - body.height

    def test_head_bump_stops_the_pass_before_a_later_landing(self):
        ceiling = Platform(0, 200, 400, 20)
        floor = Platform(0, 300, 400, 20)
        body = Body(50, 215.6)
        body.velocity_y = -14.4

        hit = resolve_platform_contacts(body, [ceiling, floor], previous_y=230)

        assert hit is ceiling
        assert body.is_grounded is False


# ===========================================================
# Horizontal Movement & Bounds
# ===========================================================

class TestHorizontalMovement:

    def test_velocity_follows_input_instantly(self, ground, make_input, standing_body):
        update_body(standing_body, make_input(move_left=True), [ground])
        assert standing_body.velocity_x == -Physics.MOVE_SPEED
        assert standing_body.facing_right is False

        update_body(standing_body, make_input(), [ground])
        assert standing_body.velocity_x == 0
        assert standing_body.facing_right is False

        update_body(standing_body, make_input(move_right=True), [ground])
        assert standing_body.velocity_x == Physics.MOVE_SPEED
        assert standing_body.facing_right is True

    def test_right_wins_when_both_directions_held(self, ground, make_input, standing_body):
        update_body(standing_body, make_input(move_left=True, move_right=True), [ground])

        assert standing_body.velocity_x == Physics.MOVE_SPEED
        assert standing_body.facing_right is True

    def test_clamped_at_left_edge(self, ground, make_input):
        body = Body(3, STANDING_Y)

        update_body(body, make_input(move_left=True), [ground])

        assert body.x == 0

    def test_clamped_at_right_edge(self, ground, make_input):
        body = Body(World.WIDTH - PlayerBody.WIDTH - 2, STANDING_Y)

        update_body(body, make_input(move_right=True), [ground])

        assert body.x == World.WIDTH - PlayerBody.WIDTH

    def test_random_input_never_leaves_horizontal_bounds(self, ground, make_input):
        rng = random.Random(1234)
        params = PhysicsParams(world_width=900)
        body = Body(50, STANDING_Y)

        for _ in range(2000):
            held = {
                "move_left": rng.random() < 0.5,
                "move_right": rng.random() < 0.4,
                "jump": rng.random() < 0.2,
            }
            update_body(body, make_input(**held), [ground], params)
            assert 0 <= body.x <= 900 - body.width


# ===========================================================
# Respawn
# ===========================================================

class TestRespawn:

    def test_fall_below_world_respawns_at_spawn_point(self, ground, make_input):
        body = Body(PlayerBody.SPAWN_X, PlayerBody.SPAWN_Y)
        body.x = 1500
        body.y = Display.HEIGHT + 101
        body.velocity_x = 8
        body.velocity_y = 22

        respawned = update_body(body, make_input(move_right=True), [ground])

        assert respawned is True
        assert (body.x, body.y, body.velocity_x, body.velocity_y) == (
            PlayerBody.SPAWN_X, PlayerBody.SPAWN_Y, 0, 0
        )
        assert body.is_grounded is False
        assert body.is_jumping is False

    def test_no_respawn_inside_world(self, ground, make_input, standing_body):
        assert update_body(standing_body, make_input(), [ground]) is False

    def test_respawn_uses_configured_fall_limit(self, make_input):
        body = Body(50, 0)
        body.y = 150
        params = PhysicsParams(fall_limit=100)

        assert update_body(body, make_input(), [], params) is True
        assert body.y == 0
