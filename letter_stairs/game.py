"""
game.py
-------
Command-line entry point.

Usage:
    letter-stairs                       # play as the first roster character
    letter-stairs --character bingo     # pick a character
    letter-stairs --list-characters     # show the roster and exit
"""

import argparse
import sys

from letter_stairs.core.debug.debug_logger import DebugLogger
from letter_stairs.core.runtime.game_loop import GameLoop
from letter_stairs.core.runtime.game_settings import LoggerConfig
from letter_stairs.entities.character import load_characters, get_character


def build_parser():
    parser = argparse.ArgumentParser(description="Climb the letter stairs and hear the alphabet")
    parser.add_argument("--character", help="Character id from characters.yaml")
    parser.add_argument("--list-characters", action="store_true",
                        help="Print available characters and exit")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable per-frame trace logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        LoggerConfig.LOG_LEVEL = "VERBOSE"

    roster = load_characters()
    if args.list_characters:
        for character in roster:
            print(f"{character.id:<12} {character.name}")
        return 0

    try:
        character = get_character(args.character, roster)
    except ValueError as e:
        DebugLogger.fail(str(e))
        return 2

    GameLoop(character).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
