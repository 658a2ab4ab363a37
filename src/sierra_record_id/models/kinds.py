"""Kinds of Sierra record identifier."""

from enum import StrEnum

__all__ = [
    "RecordIdKind",
    "CONCRETE_KINDS",
    "RECORD_KEY_KINDS",
    "RELATIVE_API_URL_KINDS",
    "ABSOLUTE_API_URL_KINDS",
    "API_URL_KINDS",
    "api_version_of",
]


class RecordIdKind(StrEnum):
    """Tag identifying which textual form a record id is written in.

    Attributes
    ----------
    RECORD_NUMBER : str
        Bare record number, e.g. ``1234567`` or ``1234567@abcd``.
    WEAK_RECORD_KEY : str
        Record type code plus record number, e.g. ``b1234567``.
    STRONG_RECORD_KEY : str
        Weak record key plus check digit, e.g. ``b12345672``.
    AMBIGUOUS_RECORD_KEY : str
        Detector-only tag for keys that may be either weak or strong.
    DATABASE_ID : str
        Packed 64-bit decimal id used inside the Sierra database.
    RELATIVE_V4_API_URL : str
        ``/v4/{type}/{recNum}``.
    RELATIVE_V5_API_URL : str
        ``/v5/{type}/{recNum}``.
    ABSOLUTE_V4_API_URL : str
        ``https://{host}{path}v4/{type}/{recNum}``.
    ABSOLUTE_V5_API_URL : str
        ``https://{host}{path}v5/{type}/{recNum}``.
    """

    RECORD_NUMBER = "RECORD_NUMBER"
    WEAK_RECORD_KEY = "WEAK_RECORD_KEY"
    STRONG_RECORD_KEY = "STRONG_RECORD_KEY"
    AMBIGUOUS_RECORD_KEY = "AMBIGUOUS_RECORD_KEY"
    DATABASE_ID = "DATABASE_ID"
    RELATIVE_V4_API_URL = "RELATIVE_V4_API_URL"
    RELATIVE_V5_API_URL = "RELATIVE_V5_API_URL"
    ABSOLUTE_V4_API_URL = "ABSOLUTE_V4_API_URL"
    ABSOLUTE_V5_API_URL = "ABSOLUTE_V5_API_URL"


# Every kind a RecordId can actually hold (AMBIGUOUS is a detector result only)
CONCRETE_KINDS = tuple(k for k in RecordIdKind if k is not RecordIdKind.AMBIGUOUS_RECORD_KEY)

RECORD_KEY_KINDS = frozenset({RecordIdKind.WEAK_RECORD_KEY, RecordIdKind.STRONG_RECORD_KEY})

RELATIVE_API_URL_KINDS = frozenset(
    {RecordIdKind.RELATIVE_V4_API_URL, RecordIdKind.RELATIVE_V5_API_URL}
)
ABSOLUTE_API_URL_KINDS = frozenset(
    {RecordIdKind.ABSOLUTE_V4_API_URL, RecordIdKind.ABSOLUTE_V5_API_URL}
)
API_URL_KINDS = RELATIVE_API_URL_KINDS | ABSOLUTE_API_URL_KINDS

_API_VERSIONS = {
    RecordIdKind.RELATIVE_V4_API_URL: "v4",
    RecordIdKind.ABSOLUTE_V4_API_URL: "v4",
    RecordIdKind.RELATIVE_V5_API_URL: "v5",
    RecordIdKind.ABSOLUTE_V5_API_URL: "v5",
}


def api_version_of(kind: RecordIdKind) -> str:
    """Return the API version path segment (``"v4"``/``"v5"``) of a URL kind.

    Parameters
    ----------
    kind : RecordIdKind
        An API URL kind.

    Returns
    -------
    str
        Version segment without slashes.

    Raises
    ------
    KeyError
        If ``kind`` is not an API URL kind.
    """
    return _API_VERSIONS[kind]
