from __future__ import annotations

"""
Error taxonomy for session loggers.

Recoverable failures derive from SessionLogError. Logging into a closed sink
is fatal and is signalled with InactiveSinkFatal, a SystemExit subclass, so
that generic `except Exception` blocks cannot swallow it.
"""

from typing import Any

EXIT_FAILURE = 1


class SessionLogError(Exception):
    """Base class for recoverable logger errors."""


class InvalidLevelError(SessionLogError, ValueError):
    """Raised when a level name is outside the recognized set."""

    def __init__(self, level: Any) -> None:
        self.level = level
        super().__init__(f"Invalid logger level: {level}")


class InactiveSinkFatal(SystemExit):
    """Raised when a message is logged to a logger whose file is not open."""

    def __init__(self, path: str = "") -> None:
        super().__init__(EXIT_FAILURE)
        self.path = path

    def __str__(self) -> str:
        return f"Logger not active: {self.path}" if self.path else "Logger not active"
