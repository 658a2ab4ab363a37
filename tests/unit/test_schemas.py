"""Tests for schema validation of record id dicts and audit events."""

import json
from pathlib import Path

import jsonschema
import pytest
from click.testing import CliRunner

from sierra_record_id import RecordId
from sierra_record_id.audit.logger import AuditLogger
from sierra_record_id.cli.main import cli


@pytest.mark.unit
@pytest.mark.parametrize(
    "value",
    [
        "1234567",
        "1234567@abcd",
        ".b12345672@xyz",
        "420908029575",
        "11822369929877127",
        "/v4/items/1234567",
        "/v5/patrons/1234567@abcd",
        "https://lib.example.edu/iii/sierra-api/v4/bibs/1234567",
        "https://lib.example.edu/api/v5/orders/1234567@abcd",
    ],
)
def test_parsed_record_ids_validate(record_id_schema: dict, value: str) -> None:
    """Test to_dict of every detectable kind passes schema validation."""
    jsonschema.validate(instance=RecordId.from_string(value).to_dict(), schema=record_id_schema)


@pytest.mark.unit
def test_schema_rejects_foreign_fields(record_id_schema: dict) -> None:
    """Test dicts with fields outside the schema are rejected."""
    data = RecordId.from_string("420908029575").to_dict()
    data["check_digit"] = "2"
    data.pop("campus_id")

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance=data, schema=record_id_schema)


@pytest.mark.unit
def test_generated_events_validate(tmp_path: Path, log_event_schema: dict) -> None:
    """Test programmatically generated events validate against schema."""
    path = tmp_path / "events.jsonl"
    with AuditLogger(run_id="2026-01-01T00:00:00.000000Z__0123abcd", log_path=path) as logger:
        logger.set_command("convert")
        logger.run_started(command=["sierra-record-id"], parameters={})
        logger.detection("b1234567", "AMBIGUOUS_RECORD_KEY")
        logger.detection("???", None)
        logger.conversion("b1234567", "WEAK_RECORD_KEY", "DATABASE_ID", "420908029575")
        logger.validation("b12345673", False, field="check_digit")
        logger.error("ParseError", "Cannot parse")
        logger.run_finished(status="failed", duration_seconds=0.01)

    with path.open() as f:
        for line in f:
            jsonschema.validate(instance=json.loads(line), schema=log_event_schema)


@pytest.mark.unit
def test_schema_rejects_conversion_without_output(log_event_schema: dict) -> None:
    """Test a conversion event needs its output."""
    event = {
        "ts": "2026-01-01T00:00:00Z",
        "run_id": "2026-01-01T00:00:00Z__0123abcd",
        "level": "INFO",
        "event": "conversion",
        "data": {"source_kind": "WEAK_RECORD_KEY", "target_kind": "DATABASE_ID"},
        "rid": "b1234567",
    }

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance=event, schema=log_event_schema)


@pytest.mark.unit
def test_cli_audit_log_validates(tmp_path: Path, log_event_schema: dict) -> None:
    """Test every line the CLI writes validates against schema."""
    path = tmp_path / "audit.jsonl"
    runner = CliRunner()
    runner.invoke(cli, ["--audit-log", str(path), "detect", "b1234567x", "nonsense"])
    runner.invoke(cli, ["--audit-log", str(path), "validate", "b12345673"])
    runner.invoke(cli, ["--audit-log", str(path), "convert", "11822369929877127", "--to", "RECORD_NUMBER"])

    lines = path.read_text().splitlines()
    assert len(lines) == 10
    for line in lines:
        jsonschema.validate(instance=json.loads(line), schema=log_event_schema)
