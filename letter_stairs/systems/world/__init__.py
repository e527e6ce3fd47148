"""
World system exports.

Provides level generation and the per-frame world orchestrator.
"""

from letter_stairs.systems.world.level_builder import Level, build_level, load_level_config
from letter_stairs.systems.world.world import World

__all__ = [
    'Level',
    'build_level',
    'load_level_config',
    'World',
]
