"""Data models for audit logging."""

from dataclasses import dataclass
from typing import Any

__all__ = ["LogEvent"]


@dataclass
class LogEvent:
    """Structured log event.

    Attributes
    ----------
    ts : str
        ISO8601 timestamp with microseconds (UTC).
    run_id : str
        Unique run identifier.
    level : str
        Log level ("DEBUG", "INFO", "WARN", "ERROR").
    event : str
        Event type identifier.
    data : dict[str, Any]
        Event-specific data payload.
    command : str | None
        CLI command that produced the event.
    rid : str | None
        Record id string the event is about.
    """

    ts: str
    run_id: str
    level: str
    event: str
    data: dict[str, Any]
    command: str | None = None
    rid: str | None = None
