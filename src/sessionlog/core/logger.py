from __future__ import annotations

"""
Session Logger.

A Logger owns one log file under a root directory for the duration of a
session. Every message is appended to the file as
`<timestamp> <LEVEL> <message>`, optionally echoed to the console in colour,
and counted per level. Start and end banners delimit the session.

Lifecycle:
    Active  --log()-->        Active
    Active  --exit_logger()-> Closed (terminal)
    Closed  --exit_logger()-> Closed (reported, no effect)
    Closed  --log()-->        fatal, InactiveSinkFatal is raised
A logger whose file could not be opened starts out Closed.
"""

import copy
import logging
import sys
from datetime import datetime
from types import TracebackType
from typing import IO, Callable, Dict, Optional, Type

from sessionlog.core.console import print_log, write_console
from sessionlog.core.formatting import (
    end_banner,
    format_line,
    format_timestamp,
    now,
    start_banner,
)
from sessionlog.core.registry import InstanceRegistry
from sessionlog.domain.config import LoggerSettings
from sessionlog.domain.errors import InactiveSinkFatal
from sessionlog.domain.levels import (
    BANNER_COLOR,
    Level,
    LevelHandler,
    LevelLike,
    parse_level,
    seed_handlers,
)
from sessionlog.infra.fs import join_log_path, open_sink

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class Logger:
    """
    One logging session bound to one file.

    Args:
        root_dir: Destination directory, created if missing.
        file_name: Log file inside root_dir. An existing file is truncated.
        debug: Echo every logged line to the console.
        clock: Source of the current instant. Defaults to local wall-clock.
    """

    print_log = staticmethod(print_log)

    def __init__(
            self,
            root_dir: str,
            file_name: str,
            debug: bool = False,
            *,
            clock: Optional[Clock] = None,
    ) -> None:
        self._root_dir = root_dir
        self._file_name = file_name
        self._debug = debug
        self._clock: Clock = clock or now
        self._start_time = self._clock()
        self._end_time = self._start_time
        self._handler: Dict[Level, LevelHandler] = seed_handlers()
        self._log_count = 0
        self._file: Optional[IO[str]] = None
        self.open_error: Optional[OSError] = None

        try:
            self._file = open_sink(root_dir, file_name)
        except OSError as e:
            self.open_error = e
            logger.warning(f"Could not open log file '{self.log_file_path}': {e}")

        stamp = format_timestamp(self._start_time)
        if self._file is not None:
            self._write(start_banner(stamp))
        write_console(start_banner(stamp), BANNER_COLOR)

        registry().register(self)
        logger.debug(f"Logger constructed for '{self.log_file_path}'")

    @classmethod
    def from_settings(cls, settings: LoggerSettings, **kwargs) -> "Logger":
        """Construct a Logger from a LoggerSettings object."""
        return cls(settings.root_dir, settings.file_name, settings.debug, **kwargs)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def is_active(self) -> bool:
        """True while the log file is open."""
        return self._file is not None and not self._file.closed

    @property
    def root_dir(self) -> str:
        return self._root_dir

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def log_file_path(self) -> str:
        return join_log_path(self._root_dir, self._file_name)

    @property
    def debug(self) -> bool:
        return self._debug

    def get_root_dir(self) -> str:
        return self._root_dir

    def get_file_name(self) -> str:
        return self._file_name

    def get_start_time(self) -> datetime:
        return self._start_time

    def get_end_time(self) -> datetime:
        return self._end_time

    def get_log_count(self) -> int:
        """Total number of messages logged across all levels."""
        return self._log_count

    def get_log_level_count(self, level: LevelLike) -> int:
        """
        Number of messages logged at one level.

        Raises:
            InvalidLevelError: If level is not a recognized level name.
        """
        return self._handler[parse_level(level)].count

    def get_handler(self) -> Dict[Level, LevelHandler]:
        """Independent copy of the level table."""
        return copy.deepcopy(self._handler)

    # -------------------------------------------------------------------------
    # Write path
    # -------------------------------------------------------------------------

    def log(self, message: str, level: LevelLike = Level.INFO, debug_once: bool = False) -> None:
        """
        Append one message to the log file and count it.

        Args:
            message: Text of the entry.
            level: Level member or exact level name.
            debug_once: Echo this entry to the console even if debug is off.

        Raises:
            InactiveSinkFatal: If the logger is not active. Not recoverable.
            InvalidLevelError: If level is unrecognized. Nothing is written.
        """
        if not self.is_active():
            sys.stderr.write("[ERROR]: Logger not active\n")
            logger.critical(f"Attempt to log into inactive logger '{self.log_file_path}'")
            raise InactiveSinkFatal(self.log_file_path)

        lvl = parse_level(level)
        stamp = format_timestamp(self._clock())

        if self._debug or debug_once:
            print_log(message, lvl, timestamp=stamp)

        self._write(format_line(stamp, lvl, message))
        self._handler[lvl].count += 1
        self._log_count += 1

    def exit_logger(self) -> None:
        """
        Write the end banner, close the file and leave the registry.

        On an inactive logger the call is reported and only the registry
        membership is dropped; a logger that never opened its file leaves
        the registry this way.
        """
        if not self.is_active():
            sys.stderr.write("No active logger exists\n")
            logger.warning(f"exit_logger called on inactive logger '{self.log_file_path}'")
            registry().unregister(self)
            return

        self._end_time = self._clock()
        stamp = format_timestamp(self._end_time)
        self._write(end_banner(stamp))
        self._file.close()
        self._file = None

        registry().unregister(self)
        write_console(end_banner(stamp), BANNER_COLOR)

    def _write(self, line: str) -> None:
        self._file.write(line + "\n")
        self._file.flush()

    # -------------------------------------------------------------------------
    # Context manager
    # -------------------------------------------------------------------------

    def __enter__(self) -> "Logger":
        return self

    def __exit__(
            self,
            exc_type: Optional[Type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType],
    ) -> None:
        if self.is_active():
            self.exit_logger()
        else:
            registry().unregister(self)

    def __repr__(self) -> str:
        state = "active" if self.is_active() else "closed"
        return f"Logger({self.log_file_path!r}, {state}, log_count={self._log_count})"


def registry() -> InstanceRegistry[Logger]:
    """The process-wide registry of active loggers."""
    return InstanceRegistry.for_type(Logger)
