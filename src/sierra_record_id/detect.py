"""Classification of raw strings into record id kinds.

Detection looks only at the shape of the string. It does not check that
the result actually parses; that is the parser's job.
"""

from sierra_record_id.models.kinds import RecordIdKind
from sierra_record_id.parse.patterns import (
    ABSOLUTE_API_VERSION_RE,
    LEADING_DATABASE_ID_DIGITS_RE,
)

__all__ = ["detect", "detect_record_key_strength"]

_ABSOLUTE_KINDS = {
    "v4": RecordIdKind.ABSOLUTE_V4_API_URL,
    "v5": RecordIdKind.ABSOLUTE_V5_API_URL,
}


def detect(value: str | None) -> RecordIdKind | None:
    """Detect which kind of record id a string is.

    Parameters
    ----------
    value : str | None
        Raw string, surrounding whitespace allowed.

    Returns
    -------
    RecordIdKind | None
        The detected kind, ``RecordIdKind.AMBIGUOUS_RECORD_KEY`` for keys
        that could be weak or strong, or None if the string looks like
        none of the kinds.

    Examples
    --------
        >>> detect("b1234567x")
        <RecordIdKind.STRONG_RECORD_KEY: 'STRONG_RECORD_KEY'>
        >>> detect("b1234567")
        <RecordIdKind.AMBIGUOUS_RECORD_KEY: 'AMBIGUOUS_RECORD_KEY'>
    """
    if not value:
        return None

    trimmed = value.strip()
    if not trimmed:
        return None

    first = trimmed[0]

    if first == "." or "a" <= first <= "z":
        return detect_record_key_strength(trimmed)

    if trimmed.startswith("https://"):
        match = ABSOLUTE_API_VERSION_RE.search(trimmed)
        return _ABSOLUTE_KINDS[match.group(1)] if match else None

    if trimmed.startswith("/v4/"):
        return RecordIdKind.RELATIVE_V4_API_URL

    if trimmed.startswith("/v5/"):
        return RecordIdKind.RELATIVE_V5_API_URL

    if "0" <= first <= "9":
        if LEADING_DATABASE_ID_DIGITS_RE.match(trimmed):
            return RecordIdKind.DATABASE_ID
        return RecordIdKind.RECORD_NUMBER

    return None


def detect_record_key_strength(value: str) -> RecordIdKind | None:
    """Tell weak record keys from strong ones.

    Looks at the run between the record type code and the optional
    ``@campusCode``: a trailing ``x`` or eight characters means strong,
    six means weak, seven is ambiguous (a seven digit record number, or a
    six digit one plus a numeric check digit).

    Parameters
    ----------
    value : str
        Stripped record key, optionally starting with a period.

    Returns
    -------
    RecordIdKind | None
        ``STRONG_RECORD_KEY``, ``WEAK_RECORD_KEY``, ``AMBIGUOUS_RECORD_KEY``,
        or None for any other length.
    """
    start = 2 if value.startswith(".") else 1
    at = value.find("@")
    digits = value[start : at if at != -1 else len(value)]

    if digits.endswith("x"):
        return RecordIdKind.STRONG_RECORD_KEY
    if len(digits) == 6:
        return RecordIdKind.WEAK_RECORD_KEY
    if len(digits) == 7:
        return RecordIdKind.AMBIGUOUS_RECORD_KEY
    if len(digits) == 8:
        return RecordIdKind.STRONG_RECORD_KEY
    return None
