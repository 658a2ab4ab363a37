"""Structural validation of record ids.

The predicates are shared building blocks; :func:`validate_record_id`
composes them per kind and raises :class:`ValidationError` on the first
broken invariant, and :func:`is_valid` is the boolean string-level check.
"""

from __future__ import annotations

from typing import Any

from sierra_record_id.check_digit import CheckDigitFn, calc_check_digit
from sierra_record_id.config import is_valid_api_host, is_valid_api_path
from sierra_record_id.errors import ValidationError
from sierra_record_id.models.database_id import MAX_CAMPUS_ID
from sierra_record_id.models.kinds import ABSOLUTE_API_URL_KINDS, API_URL_KINDS, RecordIdKind
from sierra_record_id.models.record_types import record_type_codes
from sierra_record_id.parse.patterns import CAMPUS_CODE_RE, REC_NUM_RE
from sierra_record_id.record_id import RecordId

__all__ = [
    "is_valid_rec_num",
    "is_valid_record_type_code",
    "is_valid_campus_code",
    "is_valid_campus_id",
    "is_valid_api_host",
    "is_valid_api_path",
    "is_valid_check_digit",
    "validate_record_id",
    "is_valid",
]


def is_valid_rec_num(rec_num: Any) -> bool:
    """Check a record number: 6 or 7 digits, no leading zero."""
    return isinstance(rec_num, str) and REC_NUM_RE.fullmatch(rec_num) is not None


def is_valid_record_type_code(record_type_code: Any, api_compatible_only: bool = False) -> bool:
    """Check a record type code against the full or API-compatible alphabet."""
    return (
        isinstance(record_type_code, str)
        and len(record_type_code) == 1
        and record_type_code in record_type_codes(api_compatible_only)
    )


def is_valid_campus_code(campus_code: Any) -> bool:
    """Check a campus code. None (a local record) is valid."""
    if campus_code is None:
        return True
    return isinstance(campus_code, str) and CAMPUS_CODE_RE.fullmatch(campus_code) is not None


def is_valid_campus_id(campus_id: Any) -> bool:
    """Check a numeric campus id is in 0..65535."""
    return isinstance(campus_id, int) and not isinstance(campus_id, bool) and 0 <= campus_id <= MAX_CAMPUS_ID


def is_valid_check_digit(
    rec_num: Any, check_digit: Any, check_digit_fn: CheckDigitFn = calc_check_digit
) -> bool:
    """Check that ``check_digit`` is the check digit of ``rec_num``."""
    return is_valid_rec_num(rec_num) and check_digit == check_digit_fn(rec_num)


def validate_record_id(
    record_id: RecordId,
    api_compatible_only: bool = False,
    expected_api_host: str | None = None,
    expected_api_path: str | None = None,
    check_digit_fn: CheckDigitFn | None = None,
) -> None:
    """Validate the invariants of a record id.

    Parameters
    ----------
    record_id : RecordId
        Record id to check.
    api_compatible_only : bool, optional
        Restrict record type codes to the ones the REST API serves. API URL
        kinds are always checked against that alphabet.
    expected_api_host : str | None, optional
        If given, absolute API URLs must use exactly this host.
    expected_api_path : str | None, optional
        If given, absolute API URLs must use exactly this path.
    check_digit_fn : CheckDigitFn | None, optional
        Check digit function, by default the Sierra MOD-11 one.

    Raises
    ------
    ValidationError
        On the first broken invariant. ``field`` names the offending part.
    """
    check_digit_fn = check_digit_fn or calc_check_digit
    kind = record_id.kind

    if not is_valid_rec_num(record_id.rec_num):
        raise ValidationError(
            f"Invalid rec_num in {kind}: {record_id.rec_num!r}", "rec_num", record_id.rec_num
        )

    if kind is not RecordIdKind.RECORD_NUMBER:
        api_only = api_compatible_only or kind in API_URL_KINDS
        if not is_valid_record_type_code(record_id.record_type_code, api_only):
            raise ValidationError(
                f"Invalid record_type_code in {kind}: {record_id.record_type_code!r}",
                "record_type_code",
                record_id.record_type_code,
            )

    if kind is RecordIdKind.DATABASE_ID:
        if not is_valid_campus_id(record_id.campus_id):
            raise ValidationError(
                f"Invalid campus_id in {kind}: {record_id.campus_id!r}",
                "campus_id",
                record_id.campus_id,
            )
    elif not is_valid_campus_code(record_id.campus_code):
        raise ValidationError(
            f"Invalid campus_code in {kind}: {record_id.campus_code!r}",
            "campus_code",
            record_id.campus_code,
        )

    if kind is RecordIdKind.STRONG_RECORD_KEY and not is_valid_check_digit(
        record_id.rec_num, record_id.check_digit, check_digit_fn
    ):
        raise ValidationError(
            f"Check digit {record_id.check_digit!r} does not match record number {record_id.rec_num}",
            "check_digit",
            record_id.check_digit,
        )

    if kind in ABSOLUTE_API_URL_KINDS:
        if not is_valid_api_host(record_id.api_host):
            raise ValidationError(f"Invalid api_host: {record_id.api_host!r}", "api_host", record_id.api_host)
        if not is_valid_api_path(record_id.api_path):
            raise ValidationError(f"Invalid api_path: {record_id.api_path!r}", "api_path", record_id.api_path)
        if expected_api_host is not None and record_id.api_host != expected_api_host:
            raise ValidationError(
                f"Expected api_host {expected_api_host!r}, got {record_id.api_host!r}",
                "api_host",
                record_id.api_host,
            )
        if expected_api_path is not None and record_id.api_path != expected_api_path:
            raise ValidationError(
                f"Expected api_path {expected_api_path!r}, got {record_id.api_path!r}",
                "api_path",
                record_id.api_path,
            )


def is_valid(
    value: str,
    kind: RecordIdKind | str | None = None,
    api_compatible_only: bool = False,
    expected_api_host: str | None = None,
    expected_api_path: str | None = None,
    check_digit_fn: CheckDigitFn | None = None,
) -> bool:
    """Check whether a string is a valid record id.

    Parameters
    ----------
    value : str
        String to check.
    kind : RecordIdKind | str | None, optional
        Kind to check against. Detected when omitted.
    api_compatible_only, expected_api_host, expected_api_path, check_digit_fn
        As for :func:`validate_record_id`.

    Returns
    -------
    bool
        True if the string parses and validates. Ambiguous record keys and
        strings of no known kind are not valid.

    Examples
    --------
        >>> is_valid("b12345672")
        True
        >>> is_valid("b12345673")
        False
    """
    try:
        record_id = RecordId.from_string(value) if kind is None else RecordId.parse(kind, value)
        validate_record_id(
            record_id,
            api_compatible_only=api_compatible_only,
            expected_api_host=expected_api_host,
            expected_api_path=expected_api_path,
            check_digit_fn=check_digit_fn,
        )
    except ValueError:
        # RecordIdError, or a ValueError from a custom check_digit_fn
        return False
    return True
