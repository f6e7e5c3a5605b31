from __future__ import annotations

"""
Colored console output.

Wraps lines in a level-specific ANSI colour and a reset suffix. The target
stream is resolved at call time so redirected stdout is honoured.
"""

import sys
from typing import Optional, TextIO

from sessionlog.core.formatting import format_line, format_timestamp, now
from sessionlog.domain.levels import Color, LevelLike, color_for


def colorize(text: str, color: str) -> str:
    return f"{color}{text}{Color.RESET}"


def write_console(text: str, color: str, stream: Optional[TextIO] = None) -> None:
    """Write one coloured line to the console (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    out.write(colorize(text, color) + "\n")
    out.flush()


def print_log(
        message: str,
        level: LevelLike,
        *,
        timestamp: Optional[str] = None,
        stream: Optional[TextIO] = None,
) -> None:
    """
    Print one log line to the console.

    Any level name is accepted; names outside the recognized set are shown
    in white.

    Args:
        message: Text to print.
        level: Level member or arbitrary level name.
        timestamp: Pre-rendered timestamp. Defaults to the current instant.
        stream: Output stream. Defaults to sys.stdout.
    """
    stamp = timestamp if timestamp is not None else format_timestamp(now())
    write_console(format_line(stamp, level, message), color_for(level), stream)
