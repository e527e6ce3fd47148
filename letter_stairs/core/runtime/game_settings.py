"""
game_settings.py
----------------
Centralized constants for all game systems.

All physics values are expressed per frame: the simulation advances one
step per rendered frame and has no delta-time scaling.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 1280
    HEIGHT: int = 620
    FPS: int = 60
    CAPTION: str = "Letter Stairs"

    MIN_WIDTH: int = 320
    MIN_HEIGHT: int = 240


# ===========================================================
# Physics
# ===========================================================

class Physics:
    """Per-frame motion constants."""
    GRAVITY: float = 0.6
    JUMP_POWER: float = 15
    MOVE_SPEED: float = 8


# ===========================================================
# World Bounds
# ===========================================================

class World:
    """Playable area and ground placement."""
    BASE_WIDTH: int = 1700
    WIDTH: int = BASE_WIDTH * 2
    GROUND_Y: int = 600
    GROUND_HEIGHT: int = 50
    RESPAWN_MARGIN: int = 100


# ===========================================================
# Player Body
# ===========================================================

class PlayerBody:
    """Collision box and spawn point of the player."""
    WIDTH: int = 180
    HEIGHT: int = 190
    SPAWN_X: int = 50
    SPAWN_Y: int = World.GROUND_Y - HEIGHT


# ===========================================================
# Collision Tuning
# ===========================================================

class Collision:
    """Leniency values used by the landing and letter tests."""
    FOOT_MARGIN: int = 12       # horizontal leniency around the foot point
    SNAP_GAP: int = 4           # max floating gap snapped onto a platform
    LETTER_TOLERANCE: int = 10  # letter contact tolerance below block top


# ===========================================================
# Level Layout
# ===========================================================

class LetterBlocks:
    WIDTH: int = 100
    HEIGHT: int = 100
    ALPHABET: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Stairs:
    """Procedural staircase parameters (overridable from level.yaml)."""
    COUNT: int = 40
    START_X: int = 100
    SPACING_X: int = 80
    STEP_HEIGHT: int = LetterBlocks.HEIGHT
    MIN_TOP_Y: int = 100
    RESET_TOP_Y: int = World.GROUND_Y - 60


# ===========================================================
# Animation
# ===========================================================

class Animation:
    FRAME_DELAY: int = 8
    FRAMES = {
        "idle": [0],
        "walk": [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12],
        "jump": [13, 14],
        "fall": [15],
    }


# ===========================================================
# Speech
# ===========================================================

class Speech:
    """Text-to-speech settings, relative to the engine's defaults."""
    RATE_SCALE: float = 1.2
    PITCH_SCALE: float = 1.2
    VOLUME: float = 1.0


# ===========================================================
# Input Configuration
# ===========================================================

class Input:
    """On-screen button layout (touch and mouse)."""
    BUTTON_SIZE: int = 72
    BUTTON_MARGIN: int = 16


# ===========================================================
# Debug (Visual)
# ===========================================================

class Debug:
    """Visual debug toggles, not related to logging."""
    SHOW_OVERLAY: bool = False


# ===========================================================
# Logger Configuration (Textual / Console Logging)
# ===========================================================

class LoggerConfig:
    """
    Controls which subsystems emit log messages and at what verbosity level.
    Used by DebugLogger to decide what to print.
    """

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Core Systems
        "system": True,
        "loading": False,
        "display": True,
        "event_manager": False,
        "input": False,

        # Simulation
        "physics": True,
        "collision": False,
        "camera": False,
        "animation": False,
        "level": True,
        "letters": True,

        # Output
        "render": True,
        "audio": True,
    }
