"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from sierra_record_id import (  # noqa: E402
    ConversionContext,
    RecordId,
    RecordIdKind,
    StaticResolver,
)

API_HOST = "lib.example.edu"
CAMPUSES = {"abcd": 42, "xyz": 7}


@pytest.fixture(autouse=True)
def _isolated_sierra_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's SIERRA_API_* settings out of every test."""
    monkeypatch.delenv("SIERRA_API_HOST", raising=False)
    monkeypatch.delenv("SIERRA_API_PATH", raising=False)


@pytest.fixture
def resolver() -> StaticResolver:
    """In-memory resolver for campuses abcd=42 and xyz=7."""
    return StaticResolver(CAMPUSES)


@pytest.fixture
def context(resolver: StaticResolver) -> ConversionContext:
    """Conversion context with a test API host and the static resolver."""
    return ConversionContext(api_host=API_HOST, resolver=resolver)


@pytest.fixture
def make_record_id() -> Callable[..., RecordId]:
    """Factory for record ids with minimal boilerplate.

    Defaults to the local bib b1234567 as a weak record key; absolute URLs
    get the test API host unless one is given.
    """

    def _factory(
        kind: RecordIdKind | str = RecordIdKind.WEAK_RECORD_KEY,
        *,
        rec_num: str = "1234567",
        record_type_code: str | None = "b",
        **parts: Any,
    ) -> RecordId:
        parts.setdefault("context", {"api_host": API_HOST})
        return RecordId.from_parts(
            kind,
            rec_num=rec_num,
            record_type_code=record_type_code,
            **parts,
        )

    return _factory
