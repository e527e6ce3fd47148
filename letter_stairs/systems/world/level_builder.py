"""
level_builder.py
----------------
Procedural level: one ground strip plus a cycling staircase of letter blocks.

Responsibilities
----------------
- Load staircase parameters from level.yaml over built-in defaults.
- Build the ordered platform lists used for collision resolution.

Each block steps `spacing_x` to the right and `step_height` up. When a
step would rise above `min_top_y`, the stairs drop back to `reset_top_y`
and climb again. Letters cycle through the alphabet.
"""

from dataclasses import dataclass, field
from typing import List

from letter_stairs.core.debug.debug_logger import DebugLogger
from letter_stairs.core.runtime.game_settings import World, Stairs, LetterBlocks
from letter_stairs.core.services.config_manager import load_config
from letter_stairs.entities.platform import Platform, LetterPlatform


DEFAULT_LEVEL = {
    "ground": {
        "y": World.GROUND_Y,
        "height": World.GROUND_HEIGHT,
    },
    "stairs": {
        "count": Stairs.COUNT,
        "start_x": Stairs.START_X,
        "spacing_x": Stairs.SPACING_X,
        "step_height": Stairs.STEP_HEIGHT,
        "min_top_y": Stairs.MIN_TOP_Y,
        "reset_top_y": Stairs.RESET_TOP_Y,
    },
    "letters": LetterBlocks.ALPHABET,
}


@dataclass
class Level:
    """Static geometry of one level, in collision order."""
    platforms: List[Platform] = field(default_factory=list)
    letter_platforms: List[LetterPlatform] = field(default_factory=list)
    world_width: float = World.WIDTH

    @property
    def all_platforms(self) -> list:
        """Ground platforms first, then letter blocks."""
        return [*self.platforms, *self.letter_platforms]


def load_level_config(filename="level.yaml"):
    return load_config(filename, DEFAULT_LEVEL)


def build_level(config=None, world_width=World.WIDTH) -> Level:
    """
    Build the ground strip and staircase.

    Args:
        config: Level dict shaped like DEFAULT_LEVEL (None loads level.yaml)
        world_width: Total playable width; the ground spans all of it

    Raises:
        ValueError: If no letters are configured.
    """
    if config is None:
        config = load_level_config()

    ground = config["ground"]
    stairs = config["stairs"]
    letters = config["letters"]
    if not letters:
        raise ValueError("Level config needs at least one letter")

    level = Level(world_width=world_width)
    level.platforms.append(Platform(0, ground["y"], world_width, ground["height"]))

    stair_x = stairs["start_x"]
    top_y = ground["y"] - LetterBlocks.HEIGHT

    for i in range(stairs["count"]):
        level.letter_platforms.append(LetterPlatform(stair_x, top_y, letters[i % len(letters)]))

        stair_x += stairs["spacing_x"]
        top_y -= stairs["step_height"]
        if top_y < stairs["min_top_y"]:
            top_y = stairs["reset_top_y"]

    DebugLogger.system(
        f"Built level: {len(level.platforms)} ground, {len(level.letter_platforms)} letter blocks",
        category="level"
    )
    return level
