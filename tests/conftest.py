from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the process-wide Logger registry and diagnostics logging.
3. A deterministic clock for timestamp assertions.
"""

import os
import sys
from datetime import datetime, timedelta, timezone
from typing import Callable, Generator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from sessionlog.core.logger import registry  # noqa: E402
from sessionlog.infra.logging import reset_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_state() -> Generator[None, None, None]:
    """Start and finish every test with an empty Logger registry."""
    registry().clear()
    reset_logging()
    yield
    for active in registry().all():
        active.exit_logger()
    registry().clear()
    reset_logging()


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """
    Return a clock that advances one second per call.

    First reading is 2025-01-01T12:00:00+00:00.
    """
    state = {"now": datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)}

    def _clock() -> datetime:
        current = state["now"]
        state["now"] = current + timedelta(seconds=1)
        return current

    return _clock


@pytest.fixture
def log_dir(tmp_path) -> str:
    """A not-yet-existing directory for log files."""
    return str(tmp_path / "cache")
