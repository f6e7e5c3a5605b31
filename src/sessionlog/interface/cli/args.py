from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the demo program's command-line schema and translates the parsed
namespace into LoggerSettings overrides and a list of messages to log.
"""

import argparse
from typing import Any, Dict, List, Optional, Tuple

from sessionlog.domain.levels import Level

# Sample session written when no --message is given
DEFAULT_MESSAGES: List[Tuple[str, str]] = [
    ("Debug log!", Level.DEBUG.value),
    ("Info log!", Level.INFO.value),
    ("Warning log!", Level.WARNING.value),
    ("Error log!", Level.ERROR.value),
    ("Fatal log!", Level.FATAL.value),
    ("Unknown log!", Level.UNKNOWN.value),
    ("Message log!", Level.MESSAGE.value),
]


def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the sessionlog demo.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="sessionlog-demo",
        description="Write a sample logging session to a file.",
    )

    # --- Destination ---
    p.add_argument(
        "-d", "--root-dir",
        dest="root_dir",
        default=None,
        help="Directory that receives the log file.",
    )
    p.add_argument(
        "-f", "--file-name",
        dest="file_name",
        default=None,
        help="Name of the log file.",
    )
    p.add_argument(
        "-c", "--config",
        dest="config_path",
        default=None,
        help="JSON file with root_dir, file_name and debug keys.",
    )

    # --- Messages ---
    p.add_argument(
        "-m", "--message",
        dest="messages",
        action="append",
        default=None,
        help="Message to log. Repeat for several messages.",
    )
    p.add_argument(
        "-l", "--level",
        dest="levels",
        action="append",
        default=None,
        help="Level of the matching --message (default INFO).",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Echo every logged line to the console.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show sessionlog's own diagnostics at DEBUG level.",
    )
    return p


def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Extract settings overrides from the parsed namespace.

    Options that were not given are reported as None.

    Args:
        args: Parsed arguments.

    Returns:
        Dict[str, Any]: Keys compatible with LoggerSettings.
    """
    return {
        "root_dir": args.root_dir,
        "file_name": args.file_name,
        "debug": args.debug,
    }


def args_to_messages(args: argparse.Namespace) -> List[Tuple[str, str]]:
    """
    Pair every --message with its --level.

    Messages without a matching level use INFO. Without any --message the
    sample session is returned.
    """
    messages: Optional[List[str]] = args.messages
    if not messages:
        return list(DEFAULT_MESSAGES)

    levels: List[str] = args.levels or []
    out: List[Tuple[str, str]] = []
    for i, message in enumerate(messages):
        level = levels[i] if i < len(levels) else Level.INFO.value
        out.append((message, level))
    return out
