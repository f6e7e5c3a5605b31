from __future__ import annotations

from .config import LoggerSettings, get_default_settings, load_settings
from .errors import InactiveSinkFatal, InvalidLevelError, SessionLogError
from .levels import Color, Level, LevelHandler, TextStyle

__all__ = [
    "Color",
    "InactiveSinkFatal",
    "InvalidLevelError",
    "Level",
    "LevelHandler",
    "LoggerSettings",
    "SessionLogError",
    "TextStyle",
    "get_default_settings",
    "load_settings",
]
