"""
Core services exports.

Provides the event system and configuration loading.
"""

from letter_stairs.core.services.config_manager import load_config
from letter_stairs.core.services.event_manager import (
    EventManager,
    BaseEvent,
    LetterLandedEvent,
    PlayerRespawnedEvent,
)

__all__ = [
    # Config
    'load_config',
    # Events
    'EventManager',
    'BaseEvent',
    'LetterLandedEvent',
    'PlayerRespawnedEvent',
]
