"""
letter_stairs/entities/__init__.py
----------------------------------
Entity module exports.

Exports:
    Body            - Player physics state
    Platform        - Solid rectangle
    LetterPlatform  - Letter block with landing flags
    CharacterConfig - Selected character (sprite chain)
"""

from letter_stairs.entities.body import Body
from letter_stairs.entities.platform import Platform, LetterPlatform
from letter_stairs.entities.character import CharacterConfig

__all__ = [
    'Body',
    'Platform',
    'LetterPlatform',
    'CharacterConfig',
]
