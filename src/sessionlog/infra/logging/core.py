from __future__ import annotations

"""
Diagnostics Logging Bootstrap.

Idempotent setup of the 'sessionlog' logger hierarchy. The library itself
never calls configure_logging; entry points (the demo CLI) do. Handlers are
synchronous, each record is written before the call returns.
"""

import logging
from typing import List

from sessionlog.infra.logging.config import _LEVEL_MAP, LoggingConfig
from sessionlog.infra.logging.handlers import (
    _create_file_handler,
    _create_stream_handler,
    _is_our_handler,
)

ROOT_LOGGER_NAME = "sessionlog"
_CONFIGURED_FLAG_ATTR: str = "_sessionlog_configured"


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach diagnostics handlers to the package logger.

    Repeated calls are no-ops unless force is set, in which case the
    previously attached handlers are replaced.

    Args:
        cfg: Diagnostics configuration.
        force: Re-initialize even if already configured.

    Returns:
        logging.Logger: The package logger.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)
    _remove_our_handlers(root)

    handlers_list: List[logging.Handler] = []
    if cfg.console:
        handlers_list.append(
            _create_stream_handler(level_int, logging.Formatter(cfg.console_fmt))
        )
    if cfg.log_file:
        fh = _create_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
        )
        if fh:
            handlers_list.append(fh)

    for h in handlers_list:
        root.addHandler(h)
    root.propagate = not handlers_list

    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def reset_logging() -> None:
    """Detach and close every handler configure_logging attached."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    _remove_our_handlers(root)
    root.propagate = True
    root.setLevel(logging.NOTSET)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


def get_logger(name: str) -> logging.Logger:
    """Acquire a named logger (usually __name__)."""
    return logging.getLogger(name)


def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(root: logging.Logger) -> None:
    """Detach and close all internally-managed handlers."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()
