"""Public API for working with Sierra record ids.

This module provides the string-level entry points of sierra_record_id:
- Detecting and parsing record id strings
- Rendering record ids from parts
- Converting between kinds, synchronously or with a campus resolver
- Validating record id strings
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sierra_record_id.config import ConversionContext
from sierra_record_id.convert import convert_record_id, convert_record_id_async
from sierra_record_id.detect import detect
from sierra_record_id.errors import AmbiguousFormError, ParseError
from sierra_record_id.models.kinds import RecordIdKind
from sierra_record_id.record_id import RecordId
from sierra_record_id.validate import is_valid

__all__ = [
    "detect",
    "parse_id",
    "make",
    "convert",
    "convert_async",
    "is_valid",
]


def _source(value: str | RecordId, from_: RecordIdKind | str | None) -> RecordId:
    if isinstance(value, RecordId):
        return value
    if from_ is None:
        return RecordId.from_string(value)
    return RecordId.parse(from_, value)


def parse_id(value: str, kind: RecordIdKind | str | None = None) -> RecordId | None:
    """Parse a record id string, detecting its kind when not given.

    Parameters
    ----------
    value : str
        String to parse.
    kind : RecordIdKind | str | None, optional
        Kind to parse as. Detected when omitted.

    Returns
    -------
    RecordId | None
        Parsed record id, or None if the string is ambiguous or does not
        match (the detected or given) kind.

    Examples
    --------
        >>> parse_id("b1234567x").kind
        <RecordIdKind.STRONG_RECORD_KEY: 'STRONG_RECORD_KEY'>
        >>> parse_id("b1234567") is None
        True
    """
    try:
        return _source(value, kind)
    except (ParseError, AmbiguousFormError):
        return None


def make(
    kind: RecordIdKind | str,
    context: ConversionContext | Mapping[str, Any] | None = None,
    **parts: Any,
) -> str:
    """Render a record id of ``kind`` from its parts.

    Parameters
    ----------
    kind : RecordIdKind | str
        Kind to render.
    context : ConversionContext | Mapping[str, Any] | None, optional
        Defaults for absolute URL host and path.
    **parts : Any
        Parts as accepted by :meth:`RecordId.from_parts`.

    Returns
    -------
    str
        Canonical string.

    Examples
    --------
        >>> make("WEAK_RECORD_KEY", record_type_code="b", rec_num="1234567", initial_period=True)
        '.b1234567'
    """
    return RecordId.from_parts(kind, context=context, **parts).value


def convert(
    value: str | RecordId,
    to: RecordIdKind | str,
    from_: RecordIdKind | str | None = None,
    **options: Any,
) -> str:
    """Convert a record id string to another kind.

    Parameters
    ----------
    value : str | RecordId
        Record id string (or an already parsed record id).
    to : RecordIdKind | str
        Target kind.
    from_ : RecordIdKind | str | None, optional
        Kind of ``value``. Detected when omitted.
    **options : Any
        ``record_type_code``, ``initial_period``,
        ``strong_keys_for_virtual_records``, ``api_host``, ``api_path``,
        ``context``. See :func:`convert_record_id`.

    Returns
    -------
    str
        Canonical string of the converted record id.

    Raises
    ------
    AmbiguousFormError
        If ``from_`` is omitted and ``value`` may be a weak or a strong key.
    ParseError
        If ``value`` does not parse.
    RecordIdError
        Any conversion error, see :func:`convert_record_id`.

    Examples
    --------
        >>> convert("1234567", "WEAK_RECORD_KEY", record_type_code="b")
        'b1234567'
        >>> convert("b1234567", "STRONG_RECORD_KEY", "WEAK_RECORD_KEY")
        'b12345672'
    """
    return convert_record_id(_source(value, from_), to, **options).value


async def convert_async(
    value: str | RecordId,
    to: RecordIdKind | str,
    from_: RecordIdKind | str | None = None,
    **options: Any,
) -> str:
    """Convert a record id string, resolving campuses of virtual records.

    Same as :func:`convert`, plus a resolver in ``context`` for virtual
    records entering or leaving the database id form.
    """
    converted = await convert_record_id_async(_source(value, from_), to, **options)
    return converted.value
