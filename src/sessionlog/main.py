from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the demo CLI and turns uncaught failures, including
the fatal inactive-logger signal, into a diagnostic plus a non-zero exit.
"""

import logging
import os
import sys
import traceback
from typing import Any

# Path visibility when executed as a script from a source checkout
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from sessionlog.domain.errors import EXIT_FAILURE, InactiveSinkFatal  # noqa: E402


def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Report an unhandled exception and terminate with a failure status.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    logging.getLogger("sessionlog.supervisor").critical(f"FATAL EXCEPTION DETECTED: {value}")
    print(stack_trace, file=sys.stderr)
    sys.exit(EXIT_FAILURE)


sys.excepthook = global_exception_handler


def main() -> int:
    """
    Run the demo CLI.

    Returns:
        int: Process exit code.
    """
    from sessionlog.interface.cli.app import main as cli_main

    try:
        return cli_main()
    except InactiveSinkFatal as e:
        print(f"FATAL: {e}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
