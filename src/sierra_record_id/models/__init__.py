"""Shared value types for sierra_record_id.

This package holds the pieces every other module builds on:
- Kinds → sierra_record_id.models.kinds
- Record type alphabets and API names → sierra_record_id.models.record_types
- Database id bit layout → sierra_record_id.models.database_id

The RecordId value type itself lives in sierra_record_id.record_id.
"""

from sierra_record_id.models.database_id import (
    MAX_CAMPUS_ID,
    MAX_DATABASE_ID,
    DatabaseIdFields,
    pack_database_id,
    unpack_database_id,
)
from sierra_record_id.models.kinds import (
    ABSOLUTE_API_URL_KINDS,
    API_URL_KINDS,
    CONCRETE_KINDS,
    RECORD_KEY_KINDS,
    RELATIVE_API_URL_KINDS,
    RecordIdKind,
    api_version_of,
)
from sierra_record_id.models.record_types import (
    ALL_RECORD_TYPE_CODES,
    API_RECORD_TYPE_CODES,
    api_record_type_to_record_type_code,
    record_type_code_to_api_record_type,
    record_type_codes,
)

__all__ = [
    # Kinds
    "RecordIdKind",
    "CONCRETE_KINDS",
    "RECORD_KEY_KINDS",
    "RELATIVE_API_URL_KINDS",
    "ABSOLUTE_API_URL_KINDS",
    "API_URL_KINDS",
    "api_version_of",
    # Record types
    "ALL_RECORD_TYPE_CODES",
    "API_RECORD_TYPE_CODES",
    "record_type_codes",
    "record_type_code_to_api_record_type",
    "api_record_type_to_record_type_code",
    # Database ids
    "MAX_CAMPUS_ID",
    "MAX_DATABASE_ID",
    "DatabaseIdFields",
    "pack_database_id",
    "unpack_database_id",
]
