from __future__ import annotations

"""
Severity Level Domain Model.

Defines the closed vocabulary of log levels, the console colour assigned to
each of them, and the per-level bookkeeping record held by every Logger.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

from colorama import Fore, Style

from sessionlog.domain.errors import InvalidLevelError

# -----------------------------------------------------------------------------
# DISPLAY PALETTE
# -----------------------------------------------------------------------------


class Color:
    """ANSI foreground colours used by the console renderer."""
    RED = Fore.RED
    GREEN = Fore.GREEN
    YELLOW = Fore.YELLOW
    # Terminals have no orange foreground; ERROR falls back to yellow.
    ORANGE = Fore.YELLOW
    BLUE = Fore.BLUE
    MAGENTA = Fore.MAGENTA
    CYAN = Fore.CYAN
    WHITE = Fore.WHITE
    RESET = Style.RESET_ALL


class TextStyle:
    """ANSI text attributes."""
    BOLD = "\x1b[1m"
    UNDERLINE = "\x1b[4m"
    BLINK = "\x1b[5m"
    REVERSE = "\x1b[7m"


# -----------------------------------------------------------------------------
# LEVELS
# -----------------------------------------------------------------------------


class Level(str, Enum):
    """Recognized severities. The value is the name written to the sink."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    FATAL = "FATAL"
    MESSAGE = "MESSAGE"
    UNKNOWN = "UNKNOWN"

    def __str__(self) -> str:
        return self.value


LevelLike = Union[Level, str]

LEVEL_COLORS: Dict[Level, str] = {
    Level.DEBUG: Color.GREEN,
    Level.INFO: Color.CYAN,
    Level.WARNING: Color.YELLOW,
    Level.ERROR: Color.ORANGE,
    Level.FATAL: Color.RED,
    Level.MESSAGE: Color.BLUE,
    Level.UNKNOWN: Color.WHITE,
}

BANNER_COLOR = Color.CYAN
FALLBACK_COLOR = Color.WHITE


def parse_level(level: LevelLike) -> Level:
    """
    Resolve a level name or member to a Level.

    Matching is exact and case-sensitive.

    Args:
        level: A Level member or the exact name of one.

    Returns:
        Level: The matching member.

    Raises:
        InvalidLevelError: If the value names no recognized level.
    """
    if isinstance(level, Level):
        return level
    try:
        return Level(level)
    except ValueError:
        raise InvalidLevelError(level) from None


def color_for(level: LevelLike) -> str:
    """Return the display colour of a level, white for anything unrecognized."""
    try:
        return LEVEL_COLORS[Level(level)]
    except ValueError:
        return FALLBACK_COLOR


# -----------------------------------------------------------------------------
# HANDLER RECORD
# -----------------------------------------------------------------------------


@dataclass
class LevelHandler:
    """
    Per-level bookkeeping owned by a Logger.

    Attributes:
        level: The level this record describes.
        color: Console colour escape for the level.
        count: Number of messages logged at this level so far.
    """
    level: Level
    color: str
    count: int = 0


def seed_handlers() -> Dict[Level, LevelHandler]:
    """Build a fresh handler table with every level at count zero."""
    return {lvl: LevelHandler(lvl, LEVEL_COLORS[lvl]) for lvl in Level}
