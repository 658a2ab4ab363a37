"""Tests for audit logger module."""

import json
import re
from collections.abc import Iterator
from pathlib import Path

import pytest

from sierra_record_id.audit import generate_run_id, get_package_version
from sierra_record_id.audit.helpers import get_python_version
from sierra_record_id.audit.logger import AuditLogger
from sierra_record_id.utils import get_iso_timestamp, parse_iso_timestamp


@pytest.fixture
def logger(tmp_path: Path) -> Iterator[AuditLogger]:
    """Create a logger that auto-closes after test."""
    lg = AuditLogger(run_id="test_run", log_path=tmp_path / "events.jsonl")
    yield lg
    lg.close()


def _read_events(path: Path) -> list[dict]:
    """Read all JSONL events from file."""
    with path.open() as f:
        return [json.loads(line) for line in f if line.strip()]


# ---------------------------------------------------------------------------
# AuditLogger
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_logger_init_creates_file(logger: AuditLogger) -> None:
    """Test logger creates the log file and sets initial state."""
    assert logger.log_path.exists()
    assert logger.current_command is None
    assert logger.run_id == "test_run"


@pytest.mark.unit
def test_logger_creates_parent_dirs(tmp_path: Path) -> None:
    """Test missing parent directories are created."""
    with AuditLogger(run_id="r", log_path=tmp_path / "a" / "b" / "events.jsonl") as lg:
        lg.event("detection")
    assert (tmp_path / "a" / "b" / "events.jsonl").exists()


@pytest.mark.unit
def test_logger_event_writes_valid_jsonl(logger: AuditLogger) -> None:
    """Test event() writes a valid JSONL line with correct envelope."""
    logger.event("detection", data={"kind": "DATABASE_ID"}, level="INFO", rid="420908029575")

    events = _read_events(logger.log_path)

    assert len(events) == 1
    evt = events[0]
    assert evt["run_id"] == "test_run"
    assert evt["event"] == "detection"
    assert evt["level"] == "INFO"
    assert evt["data"] == {"kind": "DATABASE_ID"}
    assert evt["rid"] == "420908029575"
    assert evt["ts"].endswith("Z")


@pytest.mark.unit
def test_logger_command_context(logger: AuditLogger) -> None:
    """Test the command set via set_command propagates to events."""
    logger.set_command("convert")
    logger.event("ev1")
    logger.set_command(None)
    logger.event("ev2")

    events = _read_events(logger.log_path)

    assert events[0]["command"] == "convert"
    assert events[1]["command"] is None


@pytest.mark.unit
def test_logger_appends(tmp_path: Path) -> None:
    """Test a second logger on the same file appends."""
    path = tmp_path / "events.jsonl"
    with AuditLogger("r1", path) as lg:
        lg.event("detection")
    with AuditLogger("r2", path) as lg:
        lg.event("detection")

    assert [e["run_id"] for e in _read_events(path)] == ["r1", "r2"]


@pytest.mark.unit
def test_logger_close_is_idempotent(logger: AuditLogger) -> None:
    """Test closing twice is harmless."""
    logger.close()
    logger.close()


# ---------------------------------------------------------------------------
# Event helpers
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_run_events(logger: AuditLogger) -> None:
    """Test run_started and run_finished payloads."""
    logger.run_started(command=["sierra-record-id", "detect", "b1234567x"], parameters={"ids": ["b1234567x"]})
    logger.run_finished(status="success", duration_seconds=0.5, ids_processed=1)
    logger.run_finished(status="failed", duration_seconds=0.1)

    started, finished, failed = _read_events(logger.log_path)

    assert started["data"]["parameters"] == {"ids": ["b1234567x"]}
    assert finished["data"] == {"status": "success", "duration_seconds": 0.5, "ids_processed": 1}
    assert failed["data"] == {"status": "failed", "duration_seconds": 0.1}


@pytest.mark.unit
def test_conversion_event(logger: AuditLogger) -> None:
    """Test conversion events carry kinds and output."""
    logger.conversion("b1234567", "WEAK_RECORD_KEY", "DATABASE_ID", "420908029575")

    (evt,) = _read_events(logger.log_path)

    assert evt["rid"] == "b1234567"
    assert evt["data"] == {
        "source_kind": "WEAK_RECORD_KEY",
        "target_kind": "DATABASE_ID",
        "output": "420908029575",
    }


@pytest.mark.unit
def test_validation_event_levels(logger: AuditLogger) -> None:
    """Test invalid ids log at WARN with the offending field."""
    logger.validation("b12345672", True, kind="STRONG_RECORD_KEY")
    logger.validation("b12345673", False, field="check_digit")

    valid, invalid = _read_events(logger.log_path)

    assert valid["level"] == "INFO"
    assert "field" not in valid["data"]
    assert invalid["level"] == "WARN"
    assert invalid["data"]["field"] == "check_digit"


@pytest.mark.unit
def test_error_event(logger: AuditLogger) -> None:
    """Test error events log at ERROR."""
    logger.error("ParseError", "Cannot parse", rid="zzz")

    (evt,) = _read_events(logger.log_path)

    assert evt["level"] == "ERROR"
    assert evt["data"] == {"exception_class": "ParseError", "message": "Cannot parse"}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_generate_run_id_format() -> None:
    """Test run ids are a timestamp and a random hex suffix."""
    run_id = generate_run_id()
    timestamp, _, suffix = run_id.partition("__")

    assert re.fullmatch(r"[0-9a-f]{8}", suffix)
    parse_iso_timestamp(timestamp)
    assert generate_run_id() != run_id


@pytest.mark.unit
def test_versions() -> None:
    """Test version helpers return strings."""
    assert isinstance(get_package_version(), str)
    assert re.match(r"\d+\.\d+", get_python_version())


@pytest.mark.unit
def test_iso_timestamp_round_trip() -> None:
    """Test timestamps parse back to aware datetimes."""
    ts = get_iso_timestamp()
    assert ts.endswith("Z")
    assert parse_iso_timestamp(ts).tzinfo is not None
