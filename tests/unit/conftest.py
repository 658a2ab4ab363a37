"""Shared fixtures for unit tests."""

import json
from pathlib import Path

import pytest

_SCHEMAS_DIR = Path(__file__).parent.parent.parent / "schemas"


@pytest.fixture(scope="session")
def record_id_schema() -> dict:
    """Load the record id JSON schema once for all unit tests."""
    with (_SCHEMAS_DIR / "record_id.schema.json").open() as f:
        return json.load(f)


@pytest.fixture(scope="session")
def log_event_schema() -> dict:
    """Load the audit log event JSON schema once for all unit tests."""
    with (_SCHEMAS_DIR / "log_event.schema.json").open() as f:
        return json.load(f)
