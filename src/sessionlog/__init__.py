from __future__ import annotations

"""
sessionlog: timestamped, level-counted session logging to a single file.
"""

from sessionlog.core.console import print_log
from sessionlog.core.logger import Logger, registry
from sessionlog.core.registry import InstanceRegistry
from sessionlog.domain.config import LoggerSettings, get_default_settings, load_settings
from sessionlog.domain.errors import InactiveSinkFatal, InvalidLevelError, SessionLogError
from sessionlog.domain.levels import Color, Level, LevelHandler, TextStyle

__version__ = "1.0.0"

__all__ = [
    "Color",
    "InactiveSinkFatal",
    "InstanceRegistry",
    "InvalidLevelError",
    "Level",
    "LevelHandler",
    "Logger",
    "LoggerSettings",
    "SessionLogError",
    "TextStyle",
    "get_default_settings",
    "load_settings",
    "print_log",
    "registry",
]
