from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Directory creation, log path resolution and sink opening for Logger
instances. Mirrors the behaviour of a POSIX `mkdir(path, 0777)` followed by
an `open for writing` of the joined path.
"""

import logging
import os
from typing import IO, Optional, Tuple

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

DIR_MODE = 0o777
PATH_SEPARATORS = ("/", "\\")

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------


def join_log_path(root_dir: str, file_name: str) -> str:
    """
    Join a directory and a file name with exactly one separator.

    A '/' is inserted unless root_dir already ends in '/' or '\\'. An empty
    root_dir denotes the current directory and yields file_name unchanged.

    Args:
        root_dir: Destination directory.
        file_name: File name inside the directory.

    Returns:
        str: The concatenated path.
    """
    if not root_dir or root_dir.endswith(PATH_SEPARATORS):
        return root_dir + file_name
    return root_dir + "/" + file_name


def ensure_dir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Create a directory if it is missing. Existing directories are accepted.

    Only the leaf is created, with permissive mode (umask applies).
    An empty path denotes the current directory, which always exists.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    if not path:
        return True, None
    try:
        os.mkdir(path, DIR_MODE)
        return True, None
    except FileExistsError:
        return True, None
    except OSError as e:
        return False, str(e)


# -----------------------------------------------------------------------------
# SINK API
# -----------------------------------------------------------------------------


def open_sink(root_dir: str, file_name: str) -> IO[str]:
    """
    Prepare root_dir and open the log file for writing.

    An existing file is truncated. The stream is line buffered.

    Args:
        root_dir: Destination directory.
        file_name: Log file name.

    Returns:
        IO[str]: The open text stream.

    Raises:
        OSError: If the file cannot be opened.
    """
    ok, err = ensure_dir(root_dir)
    if not ok:
        logger.debug(f"Could not create directory '{root_dir}': {err}")
    return open(join_log_path(root_dir, file_name), "w", encoding="utf-8", buffering=1)
