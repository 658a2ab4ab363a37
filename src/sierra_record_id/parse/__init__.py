"""String parsing for every record id kind.

Main entry points:
- parse_parts: Parse a string as a known kind into a parts dict
- patterns: Compiled grammars shared with the detector and validator
"""

from sierra_record_id.parse.parser import (
    Parts,
    parse_absolute_api_url,
    parse_database_id,
    parse_parts,
    parse_record_number,
    parse_relative_api_url,
    parse_strong_record_key,
    parse_weak_record_key,
)

__all__ = [
    "Parts",
    "parse_parts",
    "parse_record_number",
    "parse_weak_record_key",
    "parse_strong_record_key",
    "parse_database_id",
    "parse_relative_api_url",
    "parse_absolute_api_url",
]
