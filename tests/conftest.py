"""
conftest.py
-----------
Shared pytest configuration and fixtures for Letter Stairs tests.

Contains:
- Headless SDL drivers so pygame-backed modules import without a display
- Common world-building fixtures (ground, bodies, input, event capture)
- Pytest markers and collection hooks
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from letter_stairs.core.runtime.game_settings import LoggerConfig, World, PlayerBody
from letter_stairs.core.runtime.input_state import InputState
from letter_stairs.core.services.event_manager import EventManager, LetterLandedEvent
from letter_stairs.entities.body import Body
from letter_stairs.entities.platform import Platform


GROUND_Y = World.GROUND_Y
STANDING_Y = GROUND_Y - PlayerBody.HEIGHT


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep test output clean; individual tests patch DebugLogger to assert on it."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


@pytest.fixture
def make_input():
    """Factory for InputState with the given actions held."""
    def _make(**held):
        return InputState(**held)
    return _make


@pytest.fixture
def ground():
    """Full-width ground strip, top at GROUND_Y."""
    return Platform(0, GROUND_Y, World.WIDTH, World.GROUND_HEIGHT)


@pytest.fixture
def standing_body():
    """Body at rest on the ground at the default spawn point."""
    body = Body(PlayerBody.SPAWN_X, STANDING_Y)
    body.is_grounded = True
    return body


@pytest.fixture
def letter_log():
    """EventManager plus the list of letters it has dispatched."""
    events = EventManager()
    spoken = []
    events.subscribe(LetterLandedEvent, lambda event: spoken.append(event.letter))
    return events, spoken


# Pytest configuration
def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Tag every test not explicitly marked as integration as a unit test."""
    for item in items:
        if item.get_closest_marker("integration") is None:
            item.add_marker(pytest.mark.unit)
