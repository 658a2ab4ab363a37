"""Per-kind extraction of record id parts from strings.

Each parser strips surrounding whitespace, applies the kind's anchored
grammar and returns a dict of parts keyed by ``RecordId`` field name, or
``None`` if the string does not match.
"""

import re
from collections.abc import Callable
from typing import Any

from sierra_record_id.models.database_id import MAX_DATABASE_ID, unpack_database_id
from sierra_record_id.models.kinds import RecordIdKind
from sierra_record_id.models.record_types import api_record_type_to_record_type_code
from sierra_record_id.parse.patterns import (
    ABSOLUTE_V4_API_URL_RE,
    ABSOLUTE_V5_API_URL_RE,
    DATABASE_ID_RE,
    RECORD_NUMBER_RE,
    RELATIVE_V4_API_URL_RE,
    RELATIVE_V5_API_URL_RE,
    STRONG_RECORD_KEY_RE,
    WEAK_RECORD_KEY_RE,
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

Parts = dict[str, Any]


def _match(pattern: re.Pattern[str], value: str | None) -> re.Match[str] | None:
    if value is None:
        return None
    return pattern.fullmatch(value.strip())


def parse_record_number(value: str) -> Parts | None:
    """Parse ``recNum[@campusCode]``."""
    match = _match(RECORD_NUMBER_RE, value)
    if match is None:
        return None
    return {
        "rec_num": match["rec_num"],
        "campus_code": match["campus_code"],
    }


def parse_weak_record_key(value: str) -> Parts | None:
    """Parse ``[.]recordTypeCode recNum[@campusCode]``."""
    match = _match(WEAK_RECORD_KEY_RE, value)
    if match is None:
        return None
    return {
        "initial_period": match["initial_period"] == ".",
        "record_type_code": match["record_type_code"],
        "rec_num": match["rec_num"],
        "campus_code": match["campus_code"],
    }


def parse_strong_record_key(value: str) -> Parts | None:
    """Parse ``[.]recordTypeCode recNum checkDigit[@campusCode]``.

    A key whose digit run is seven long parses as a six digit record
    number plus a numeric check digit.
    """
    match = _match(STRONG_RECORD_KEY_RE, value)
    if match is None:
        return None
    return {
        "initial_period": match["initial_period"] == ".",
        "record_type_code": match["record_type_code"],
        "rec_num": match["rec_num"],
        "check_digit": match["check_digit"],
        "campus_code": match["campus_code"],
    }


def parse_database_id(value: str) -> Parts | None:
    """Parse a 12 to 20 digit packed database id.

    Values that do not fit in 64 bits are rejected.
    """
    match = _match(DATABASE_ID_RE, value)
    if match is None or int(match.group(0)) > MAX_DATABASE_ID:
        return None
    campus_id, record_type_code, rec_num = unpack_database_id(match.group(0))
    return {
        "campus_id": campus_id,
        "record_type_code": record_type_code,
        "rec_num": rec_num,
    }


def _api_url_parts(match: re.Match[str]) -> Parts:
    return {
        "record_type_code": api_record_type_to_record_type_code(match["api_record_type"]),
        "rec_num": match["rec_num"],
        "campus_code": match["campus_code"],
    }


def parse_relative_api_url(value: str, version: str = "v4") -> Parts | None:
    """Parse ``/vN/{apiRecordType}/recNum[@campusCode]``.

    Parameters
    ----------
    value : str
        String to parse.
    version : str, optional
        ``"v4"`` or ``"v5"``, by default "v4".

    Returns
    -------
    Parts | None
        Parts, or None if ``value`` is not a relative URL of that version.
    """
    pattern = RELATIVE_V5_API_URL_RE if version == "v5" else RELATIVE_V4_API_URL_RE
    match = _match(pattern, value)
    if match is None:
        return None
    return _api_url_parts(match)


def parse_absolute_api_url(value: str, version: str = "v4") -> Parts | None:
    """Parse ``https://{apiHost}{apiPath}vN/{apiRecordType}/recNum[@campusCode]``.

    Parameters
    ----------
    value : str
        String to parse.
    version : str, optional
        ``"v4"`` or ``"v5"``, by default "v4".

    Returns
    -------
    Parts | None
        Parts including ``api_host`` and ``api_path``, or None.
    """
    pattern = ABSOLUTE_V5_API_URL_RE if version == "v5" else ABSOLUTE_V4_API_URL_RE
    match = _match(pattern, value)
    if match is None:
        return None
    parts = _api_url_parts(match)
    parts["api_host"] = match["api_host"]
    parts["api_path"] = match["api_path"]
    return parts


_PARSERS: dict[RecordIdKind, Callable[[str], Parts | None]] = {
    RecordIdKind.RECORD_NUMBER: parse_record_number,
    RecordIdKind.WEAK_RECORD_KEY: parse_weak_record_key,
    RecordIdKind.STRONG_RECORD_KEY: parse_strong_record_key,
    RecordIdKind.DATABASE_ID: parse_database_id,
    RecordIdKind.RELATIVE_V4_API_URL: lambda v: parse_relative_api_url(v, "v4"),
    RecordIdKind.RELATIVE_V5_API_URL: lambda v: parse_relative_api_url(v, "v5"),
    RecordIdKind.ABSOLUTE_V4_API_URL: lambda v: parse_absolute_api_url(v, "v4"),
    RecordIdKind.ABSOLUTE_V5_API_URL: lambda v: parse_absolute_api_url(v, "v5"),
}


def parse_parts(kind: RecordIdKind | str, value: str) -> Parts | None:
    """Parse a string as the given kind.

    Parameters
    ----------
    kind : RecordIdKind | str
        Kind to parse as. ``AMBIGUOUS_RECORD_KEY`` never parses.
    value : str
        String to parse.

    Returns
    -------
    Parts | None
        Parts dict, or None if the string does not match the kind's grammar.
    """
    parser = _PARSERS.get(RecordIdKind(kind))
    if parser is None:
        return None
    return parser(value)
