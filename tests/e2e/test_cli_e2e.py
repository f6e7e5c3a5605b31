from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Runs the demo entry point in a subprocess and checks exit codes, console
output and the resulting log file.
"""

import os
import re
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "sessionlog" / "main.py"

LINE_RE = re.compile(r"^\S+ [A-Z]+ .+$")


def run_cli(args: List[str], cwd: Path) -> subprocess.CompletedProcess[str]:
    """
    Execute the demo CLI in a separate process.

    Args:
        args: Command line arguments (excluding interpreter and script).
        cwd: Working directory for the subprocess.

    Returns:
        subprocess.CompletedProcess: Finished process with captured streams.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_default_session(tmp_path: Path) -> None:
    result = run_cli([], cwd=tmp_path)

    assert result.returncode == 0, result.stderr
    lines = (tmp_path / "cache" / "test_logger.log").read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith(">>> Logger initiated at ")
    assert lines[-1].startswith(">>> Logger exited at ")
    assert len(lines) == 9
    assert all(LINE_RE.match(line) for line in lines[1:-1])
    assert "Total: 7" in result.stdout


def test_custom_messages_and_debug_echo(tmp_path: Path) -> None:
    result = run_cli(
        ["-d", str(tmp_path / "logs"), "-f", "run.log", "--debug", "-m", "hello", "-l", "WARNING"],
        cwd=tmp_path,
    )

    assert result.returncode == 0, result.stderr
    assert "\x1b[33m" in result.stdout
    assert "WARNING hello" in result.stdout
    content = (tmp_path / "logs" / "run.log").read_text(encoding="utf-8")
    assert " WARNING hello\n" in content


def test_invalid_level_exit_code(tmp_path: Path) -> None:
    result = run_cli(["-m", "x", "-l", "LOUD"], cwd=tmp_path)

    assert result.returncode == 2
    assert "Invalid logger level: LOUD" in result.stderr
    content = (tmp_path / "cache" / "test_logger.log").read_text(encoding="utf-8")
    assert content.splitlines()[-1].startswith(">>> Logger exited at ")


def test_unopenable_destination(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    result = run_cli(["-d", str(blocker)], cwd=tmp_path)

    assert result.returncode == 1
    assert "cannot open" in result.stderr
