"""Structured audit logger for JSONL event logging.

Provides append-only structured event logging to JSONL files with
a persistent file handle.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from sierra_record_id.audit.models import LogEvent
from sierra_record_id.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes structured log events to a JSONL file (one JSON object per line).
    Events are append-only and flushed after each write.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path
        Path to JSONL log file.
    current_command : str | None
        CLI command the following events belong to.
    """

    def __init__(self, run_id: str, log_path: Path) -> None:
        """Initialize audit logger and open file handle.

        Parameters
        ----------
        run_id : str
            Unique run identifier.
        log_path : Path
            Path to JSONL log file.
        """
        self.run_id = run_id
        self.log_path = log_path
        self.current_command: str | None = None

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close file."""
        self.close()

    def close(self) -> None:
        """Flush and close the log file handle."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def set_command(self, command: str | None) -> None:
        """Set the CLI command attached to subsequent events."""
        self.current_command = command

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        rid: str | None = None,
    ) -> None:
        """Write structured event to log.

        Parameters
        ----------
        event_type : str
            Event type identifier (e.g., "conversion").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").
        rid : str | None, optional
            Record id string the event is about.
        """
        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data or {},
            command=self.current_command,
            rid=rid,
        )
        self._write_event(log_event)

    def _write_event(self, event: LogEvent) -> None:
        json.dump(asdict(event), self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()

    def run_started(self, command: list[str], parameters: dict[str, Any]) -> None:
        """Log run_started event.

        Parameters
        ----------
        command : list[str]
            Command-line arguments.
        parameters : dict[str, Any]
            Options the command was invoked with.
        """
        self.event("run_started", data={"command": command, "parameters": parameters})

    def run_finished(self, status: str, duration_seconds: float, ids_processed: int | None = None) -> None:
        """Log run_finished event.

        Parameters
        ----------
        status : str
            Run status ("success", "failed", "partial").
        duration_seconds : float
            Total execution time in seconds.
        ids_processed : int | None, optional
            Number of record ids handled.
        """
        data: dict[str, Any] = {"status": status, "duration_seconds": duration_seconds}
        if ids_processed is not None:
            data["ids_processed"] = ids_processed
        self.event("run_finished", data=data)

    def detection(self, rid: str, kind: str | None) -> None:
        """Log detection event. ``kind`` is None for unrecognised strings."""
        self.event("detection", data={"kind": kind}, rid=rid)

    def conversion(self, rid: str, source_kind: str, target_kind: str, output: str) -> None:
        """Log conversion event.

        Parameters
        ----------
        rid : str
            Input record id string.
        source_kind : str
            Kind the input was read as.
        target_kind : str
            Kind actually produced (may differ from the requested one for
            virtual strong keys).
        output : str
            Canonical output string.
        """
        self.event(
            "conversion",
            data={"source_kind": source_kind, "target_kind": target_kind, "output": output},
            rid=rid,
        )

    def validation(self, rid: str, valid: bool, kind: str | None = None, field: str | None = None) -> None:
        """Log validation event, with the offending field when invalid."""
        data: dict[str, Any] = {"valid": valid, "kind": kind}
        if field is not None:
            data["field"] = field
        self.event("validation", data=data, level="INFO" if valid else "WARN", rid=rid)

    def error(self, exception_class: str, message: str, rid: str | None = None) -> None:
        """Log error event.

        Parameters
        ----------
        exception_class : str
            Exception class name.
        message : str
            Error message.
        rid : str | None, optional
            Record id string being processed.
        """
        self.event(
            "error",
            data={"exception_class": exception_class, "message": message},
            level="ERROR",
            rid=rid,
        )
