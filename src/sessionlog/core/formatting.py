from __future__ import annotations

"""
Line formats shared by the file sink and the console.

Timestamps are ISO-8601 local time with UTC offset and microseconds, e.g.
2026-10-19T14:03:07.512034+02:00. They contain no spaces, so every content
line splits into exactly `<timestamp> <LEVEL> <message>`.
"""

from datetime import datetime

from sessionlog.domain.levels import LevelLike


def now() -> datetime:
    """Current wall-clock instant, timezone aware."""
    return datetime.now().astimezone()


def format_timestamp(moment: datetime) -> str:
    return moment.isoformat(timespec="microseconds")


def format_line(timestamp: str, level: LevelLike, message: str) -> str:
    return f"{timestamp} {level} {message}"


def start_banner(timestamp: str) -> str:
    return f">>> Logger initiated at {timestamp} <<<"


def end_banner(timestamp: str) -> str:
    return f">>> Logger exited at {timestamp} <<<"
