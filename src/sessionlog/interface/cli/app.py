from __future__ import annotations

"""
Demo CLI Application Controller.

Bootstraps diagnostics logging, resolves settings (defaults, optional JSON
file, command-line overrides), runs one logging session and prints a
per-level summary of what was written.
"""

import sys
from typing import List, Optional

from colorama import just_fix_windows_console

from sessionlog.core.logger import Logger
from sessionlog.domain.config import load_settings, settings_from_dict
from sessionlog.domain.errors import InvalidLevelError
from sessionlog.domain.levels import Level
from sessionlog.infra.logging import LoggingConfig, configure_logging, get_logger
from sessionlog.interface.cli import args as cli_args

logger = get_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the demo workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 open failure, 2 invalid level).
    """
    just_fix_windows_console()

    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(LoggingConfig(level="DEBUG" if args.verbose else "WARNING"))

    settings = settings_from_dict(
        cli_args.args_to_overrides(args),
        load_settings(args.config_path),
    )
    messages = cli_args.args_to_messages(args)

    with Logger.from_settings(settings) as session:
        if not session.is_active():
            print(f"ERROR: cannot open {session.log_file_path}: {session.open_error}", file=sys.stderr)
            return 1

        try:
            for message, level in messages:
                session.log(message, level)
        except InvalidLevelError as e:
            logger.error(str(e))
            print(f"ERROR: {e}", file=sys.stderr)
            return 2

    _print_summary(session)
    return 0


def _print_summary(session: Logger) -> None:
    """Render the per-level counts of a finished session."""
    print(f"Log file: {session.log_file_path}")
    for level in Level:
        count = session.get_log_level_count(level)
        if count:
            print(f"  {level.value:<8} {count}")
    print(f"Total: {session.get_log_count()}")


if __name__ == "__main__":
    sys.exit(main())
