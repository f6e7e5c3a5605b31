from __future__ import annotations

"""
Diagnostics Handlers.

Handler factories plus the tagging mechanism that lets configure_logging
tell its own handlers apart from ones installed by the host application.
"""

import logging
import os
import sys
from typing import Optional

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_sessionlog_handler"


def _tag_handler(handler: logging.Handler) -> None:
    """Mark a handler as managed by sessionlog."""
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """Return True if the handler carries our tag."""
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_stream_handler(level_int: int, formatter: logging.Formatter) -> logging.Handler:
    """Build a tagged stderr handler."""
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(formatter)
    _tag_handler(sh)
    return sh


def _create_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
) -> Optional[logging.FileHandler]:
    """
    Initialize a FileHandler for diagnostics.

    Args:
        log_file: Target path for the diagnostics file.
        level_int: Numeric logging level.
        formatter: Pre-configured logging formatter.

    Returns:
        Optional[logging.FileHandler]: Configured handler or None if I/O fails.
    """
    try:
        parent = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(parent, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as e:
        sys.stderr.write(f"WARNING: Diagnostics file unavailable at '{log_file}': {e}\n")
        return None
    fh.setLevel(level_int)
    fh.setFormatter(formatter)
    _tag_handler(fh)
    return fh
