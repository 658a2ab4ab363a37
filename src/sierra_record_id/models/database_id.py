"""Packing and unpacking of Sierra database ids.

A database id is the decimal rendering of a 64-bit unsigned integer::

    bits 48-63  campus id (0 for records held locally)
    bits 32-47  code point of the record type code
    bits  0-31  record number

Python ints are arbitrary precision, so the packing is exact for every
value up to 20 decimal digits.
"""

from typing import NamedTuple

__all__ = [
    "MAX_CAMPUS_ID",
    "MAX_DATABASE_ID",
    "DatabaseIdFields",
    "pack_database_id",
    "unpack_database_id",
]

MAX_CAMPUS_ID = 0xFFFF
MAX_DATABASE_ID = 0xFFFF_FFFF_FFFF_FFFF

_CAMPUS_ID_SHIFT = 48
_RECORD_TYPE_SHIFT = 32
_MASK_16 = 0xFFFF
_MASK_32 = 0xFFFF_FFFF


class DatabaseIdFields(NamedTuple):
    """Fields recovered from a packed database id.

    Supports tuple unpacking:
    ``campus_id, record_type_code, rec_num = unpack_database_id(...)``.
    """

    campus_id: int
    record_type_code: str
    rec_num: str


def pack_database_id(record_type_code: str, rec_num: str | int, campus_id: int = 0) -> int:
    """Pack record fields into the 64-bit database id integer.

    Parameters
    ----------
    record_type_code : str
        Single-character record type code.
    rec_num : str | int
        Record number.
    campus_id : int, optional
        Numeric campus id, 0 for non-virtual records, by default 0.

    Returns
    -------
    int
        Packed database id.
    """
    return (
        ((campus_id & _MASK_16) << _CAMPUS_ID_SHIFT)
        | ((ord(record_type_code) & _MASK_16) << _RECORD_TYPE_SHIFT)
        | (int(rec_num) & _MASK_32)
    )


def unpack_database_id(database_id: str | int) -> DatabaseIdFields:
    """Split a database id into campus id, record type code and record number.

    Parameters
    ----------
    database_id : str | int
        Decimal string or integer form of the database id.

    Returns
    -------
    DatabaseIdFields
        Unpacked fields. ``rec_num`` is returned as a decimal string.
    """
    value = int(database_id)
    return DatabaseIdFields(
        campus_id=(value >> _CAMPUS_ID_SHIFT) & _MASK_16,
        record_type_code=chr((value >> _RECORD_TYPE_SHIFT) & _MASK_16),
        rec_num=str(value & _MASK_32),
    )
