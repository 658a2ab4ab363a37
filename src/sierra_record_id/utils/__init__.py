"""Common utility functions for sierra_record_id."""

from sierra_record_id.utils.timestamps import get_iso_timestamp, parse_iso_timestamp

__all__ = ["get_iso_timestamp", "parse_iso_timestamp"]
