"""Timestamp utilities for sierra_record_id."""

from datetime import UTC, datetime

__all__ = ["get_iso_timestamp", "parse_iso_timestamp"]


def get_iso_timestamp() -> str:
    """Get current UTC timestamp in ISO8601 format with microseconds.

    Returns
    -------
    str
        ISO8601 timestamp with microseconds (e.g., "2026-02-03T12:34:56.123456Z").
    """
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def parse_iso_timestamp(iso_str: str) -> datetime:
    """Parse an ISO8601 timestamp with a ``Z`` or ``+00:00`` suffix."""
    return datetime.fromisoformat(iso_str.replace("Z", "+00:00"))
