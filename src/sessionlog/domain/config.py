from __future__ import annotations

"""
Logger Settings Domain.

Holds the construction parameters of a Logger and loads them from an
optional JSON document. Missing or malformed documents fall back to the
defaults so that a demo run never fails on configuration alone.
"""

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_ROOT_DIR = "cache"
DEFAULT_FILE_NAME = "test_logger.log"


@dataclass(frozen=True)
class LoggerSettings:
    """
    Immutable construction parameters for a Logger.

    Attributes:
        root_dir: Directory that receives the log file.
        file_name: Name of the log file inside root_dir.
        debug: Mirror every logged line to the console.
    """
    root_dir: str = DEFAULT_ROOT_DIR
    file_name: str = DEFAULT_FILE_NAME
    debug: bool = False


def get_default_settings() -> LoggerSettings:
    """Return the default settings used by the demo program."""
    return LoggerSettings()


def settings_from_dict(data: Dict[str, Any], base: Optional[LoggerSettings] = None) -> LoggerSettings:
    """
    Merge known keys of a mapping into a settings object.

    Unknown keys are ignored and None values leave the base value untouched.

    Args:
        data: Raw key/value pairs.
        base: Settings to start from. Defaults to get_default_settings().

    Returns:
        LoggerSettings: The merged settings.
    """
    base = base or get_default_settings()
    known = {f.name for f in fields(LoggerSettings)}
    overrides = {k: v for k, v in data.items() if k in known and v is not None}
    if "debug" in overrides:
        overrides["debug"] = bool(overrides["debug"])
    for key in ("root_dir", "file_name"):
        if key in overrides:
            overrides[key] = str(overrides[key])
    return replace(base, **overrides)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_settings(path: Optional[str]) -> LoggerSettings:
    """
    Load settings from a JSON object on disk.

    Args:
        path: Location of the JSON document. None returns the defaults.

    Returns:
        LoggerSettings: The loaded settings or the defaults on failure.
    """
    defaults = get_default_settings()
    if not path:
        return defaults

    if not os.path.exists(path):
        logger.warning(f"Settings file not found: {path}. Using defaults.")
        return defaults

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to load settings from {path}: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning(f"Settings file {path} is not a JSON object. Using defaults.")
        return defaults

    return settings_from_dict(data, defaults)
