"""
character.py
------------
Playable character roster.

The selected character is an explicit CharacterConfig handed to the level
and body at construction; nothing reads a global "current character".
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from letter_stairs.core.debug.debug_logger import DebugLogger
from letter_stairs.core.services.config_manager import load_config


DEFAULT_ROSTER = {
    "characters": [
        {
            "id": "bluey",
            "name": "Bluey",
            "sprite": "sprites/bluey-transparent.png",
            "thumbnail": "sprites/bluey-transparent.png",
        },
    ],
    "fallback_sprites": [
        "sprites/bluey-transparent.png",
        "sprites/bluey-sprite.png",
    ],
}


@dataclass(frozen=True)
class CharacterConfig:
    id: str
    name: str
    sprite: str
    thumbnail: str = ""
    fallback_sprites: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def sprite_chain(self) -> List[str]:
        """Sprite paths to try in order, without duplicates."""
        chain = []
        for path in (self.sprite, *self.fallback_sprites):
            if path and path not in chain:
                chain.append(path)
        return chain


def load_characters(filename="characters.yaml"):
    """Load the roster; entries missing id, name or sprite are skipped."""
    data = load_config(filename, DEFAULT_ROSTER)
    fallbacks = tuple(data.get("fallback_sprites", ()))

    roster = []
    for entry in data.get("characters", []):
        try:
            roster.append(CharacterConfig(
                id=entry["id"],
                name=entry["name"],
                sprite=entry["sprite"],
                thumbnail=entry.get("thumbnail", entry["sprite"]),
                fallback_sprites=fallbacks,
            ))
        except (KeyError, TypeError) as e:
            DebugLogger.warn(f"Skipping malformed character entry {entry!r}: {e}", category="loading")

    if not roster:
        raise ValueError(f"No playable characters defined in {filename}")
    return roster


def get_character(character_id=None, roster=None):
    """
    Find a character by id.

    Args:
        character_id: Roster id, or None for the first roster entry
        roster: Pre-loaded roster (loaded from config when omitted)

    Raises:
        ValueError: If no character has that id.
    """
    roster = roster if roster is not None else load_characters()
    if character_id is None:
        return roster[0]

    for character in roster:
        if character.id == character_id:
            return character

    known = ", ".join(c.id for c in roster)
    raise ValueError(f"Unknown character '{character_id}' (available: {known})")
