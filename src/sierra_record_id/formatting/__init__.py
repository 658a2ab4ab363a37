"""Canonical string rendering for every record id kind."""

from sierra_record_id.formatting.formatter import (
    DEFAULT_API_PATH,
    format_parts,
    make_absolute_api_url,
    make_database_id,
    make_record_number,
    make_relative_api_url,
    make_strong_record_key,
    make_weak_record_key,
)

__all__ = [
    "DEFAULT_API_PATH",
    "format_parts",
    "make_record_number",
    "make_weak_record_key",
    "make_strong_record_key",
    "make_database_id",
    "make_relative_api_url",
    "make_absolute_api_url",
]
