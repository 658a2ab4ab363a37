"""Rendering of record id parts as canonical strings.

Every function here is pure. The ``@campusCode`` suffix is written only for
a non-empty campus code and the leading period only when requested.
"""

from collections.abc import Callable, Mapping
from typing import Any

from sierra_record_id.models.database_id import pack_database_id
from sierra_record_id.models.kinds import RecordIdKind, api_version_of
from sierra_record_id.models.record_types import record_type_code_to_api_record_type

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

DEFAULT_API_PATH = "/iii/sierra-api/"


def _campus_suffix(campus_code: str | None) -> str:
    return f"@{campus_code}" if campus_code else ""


def _period(initial_period: bool) -> str:
    return "." if initial_period else ""


def make_record_number(rec_num: str, campus_code: str | None = None) -> str:
    """Render ``recNum[@campusCode]``."""
    return f"{rec_num}{_campus_suffix(campus_code)}"


def make_weak_record_key(
    record_type_code: str,
    rec_num: str,
    campus_code: str | None = None,
    initial_period: bool = False,
) -> str:
    """Render ``[.]recordTypeCode recNum[@campusCode]``."""
    return f"{_period(initial_period)}{record_type_code}{rec_num}{_campus_suffix(campus_code)}"


def make_strong_record_key(
    record_type_code: str,
    rec_num: str,
    check_digit: str,
    campus_code: str | None = None,
    initial_period: bool = False,
) -> str:
    """Render ``[.]recordTypeCode recNum checkDigit[@campusCode]``."""
    return (
        f"{_period(initial_period)}{record_type_code}{rec_num}{check_digit}"
        f"{_campus_suffix(campus_code)}"
    )


def make_database_id(record_type_code: str, rec_num: str, campus_id: int = 0) -> str:
    """Render the decimal form of the packed database id."""
    return str(pack_database_id(record_type_code, rec_num, campus_id))


def make_relative_api_url(
    record_type_code: str,
    rec_num: str,
    campus_code: str | None = None,
    version: str = "v4",
) -> str:
    """Render ``/vN/{apiRecordType}/recNum[@campusCode]``.

    Raises
    ------
    UnsupportedConversionError
        If the record type has no API collection.
    """
    api_record_type = record_type_code_to_api_record_type(record_type_code)
    return f"/{version}/{api_record_type}/{make_record_number(rec_num, campus_code)}"


def make_absolute_api_url(
    record_type_code: str,
    rec_num: str,
    api_host: str,
    api_path: str = DEFAULT_API_PATH,
    campus_code: str | None = None,
    version: str = "v4",
) -> str:
    """Render ``https://{apiHost}{apiPath}vN/{apiRecordType}/recNum[@campusCode]``.

    ``api_path`` must begin and end with ``/``.
    """
    relative = make_relative_api_url(record_type_code, rec_num, campus_code, version)
    # relative already starts with "/" and api_path already ends with one
    return f"https://{api_host}{api_path}{relative[1:]}"


def _format_relative(kind: RecordIdKind) -> Callable[[Mapping[str, Any]], str]:
    version = api_version_of(kind)
    return lambda p: make_relative_api_url(
        p["record_type_code"], p["rec_num"], p.get("campus_code"), version
    )


def _format_absolute(kind: RecordIdKind) -> Callable[[Mapping[str, Any]], str]:
    version = api_version_of(kind)
    return lambda p: make_absolute_api_url(
        p["record_type_code"],
        p["rec_num"],
        p["api_host"],
        p.get("api_path") or DEFAULT_API_PATH,
        p.get("campus_code"),
        version,
    )


_FORMATTERS: dict[RecordIdKind, Callable[[Mapping[str, Any]], str]] = {
    RecordIdKind.RECORD_NUMBER: lambda p: make_record_number(p["rec_num"], p.get("campus_code")),
    RecordIdKind.WEAK_RECORD_KEY: lambda p: make_weak_record_key(
        p["record_type_code"],
        p["rec_num"],
        p.get("campus_code"),
        bool(p.get("initial_period")),
    ),
    RecordIdKind.STRONG_RECORD_KEY: lambda p: make_strong_record_key(
        p["record_type_code"],
        p["rec_num"],
        p["check_digit"],
        p.get("campus_code"),
        bool(p.get("initial_period")),
    ),
    RecordIdKind.DATABASE_ID: lambda p: make_database_id(
        p["record_type_code"], p["rec_num"], p.get("campus_id") or 0
    ),
    RecordIdKind.RELATIVE_V4_API_URL: _format_relative(RecordIdKind.RELATIVE_V4_API_URL),
    RecordIdKind.RELATIVE_V5_API_URL: _format_relative(RecordIdKind.RELATIVE_V5_API_URL),
    RecordIdKind.ABSOLUTE_V4_API_URL: _format_absolute(RecordIdKind.ABSOLUTE_V4_API_URL),
    RecordIdKind.ABSOLUTE_V5_API_URL: _format_absolute(RecordIdKind.ABSOLUTE_V5_API_URL),
}


def format_parts(kind: RecordIdKind | str, parts: Mapping[str, Any]) -> str:
    """Render parts as the canonical string of ``kind``.

    Parameters
    ----------
    kind : RecordIdKind | str
        Target kind. ``AMBIGUOUS_RECORD_KEY`` cannot be rendered.
    parts : Mapping[str, Any]
        Parts keyed by ``RecordId`` field name.

    Returns
    -------
    str
        Canonical string.

    Raises
    ------
    KeyError
        If ``kind`` is not renderable or a required part is missing.
    """
    return _FORMATTERS[RecordIdKind(kind)](parts)
