"""
Runtime configuration exports.

Provides game-wide constants and the shared input state. All exports are
lightweight with no initialization overhead.
"""

from letter_stairs.core.runtime.game_settings import (
    Display,
    Physics,
    World,
    PlayerBody,
    Collision,
    LetterBlocks,
    Stairs,
    Animation,
    Speech,
    Input,
    Debug,
    LoggerConfig,
)
from letter_stairs.core.runtime.input_state import InputState, MOVE_LEFT, MOVE_RIGHT, JUMP

__all__ = [
    # Configuration
    'Display',
    'Physics',
    'World',
    'PlayerBody',
    'Collision',
    'LetterBlocks',
    'Stairs',
    'Animation',
    'Speech',
    'Input',
    # Debug
    'Debug',
    'LoggerConfig',
    # Input
    'InputState',
    'MOVE_LEFT',
    'MOVE_RIGHT',
    'JUMP',
]
