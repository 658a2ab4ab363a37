"""Detection, parsing, validation and conversion of Sierra record ids.

This package provides:
- Models (sierra_record_id.models) — kinds, record types, database id packing
- Record ids (sierra_record_id.record_id) — the RecordId value type
- Parsing (sierra_record_id.parse) — per-kind grammars
- Formatting (sierra_record_id.formatting) — canonical strings
- Detection (sierra_record_id.detect) — string classification
- Validation (sierra_record_id.validate) — structural checks
- Conversion (sierra_record_id.convert) — sync and resolver-backed async
- Configuration (sierra_record_id.config) — API host/path and context
- Audit (sierra_record_id.audit) — JSONL event logging for the CLI
- CLI (sierra_record_id.cli) — command-line interface
- Public API (sierra_record_id.api) — string-level convenience functions
"""

__version__ = "0.1.0"
__license__ = "GPL-3.0-or-later"

from sierra_record_id.api import convert, convert_async, detect, is_valid, make, parse_id
from sierra_record_id.check_digit import calc_check_digit
from sierra_record_id.config import ApiSettings, ConversionContext
from sierra_record_id.errors import (
    AmbiguousFormError,
    ConfigurationError,
    MissingFieldError,
    ParseError,
    RecordIdError,
    UnsupportedConversionError,
    ValidationError,
    VirtualRecordRestrictionError,
)
from sierra_record_id.models import RecordIdKind
from sierra_record_id.record_id import RecordId
from sierra_record_id.resolver import Resolver, StaticResolver

__all__ = [
    "__version__",
    "__license__",
    # Core types
    "RecordId",
    "RecordIdKind",
    # Functions
    "detect",
    "parse_id",
    "make",
    "convert",
    "convert_async",
    "is_valid",
    "calc_check_digit",
    # Configuration
    "ApiSettings",
    "ConversionContext",
    "Resolver",
    "StaticResolver",
    # Errors
    "RecordIdError",
    "ParseError",
    "AmbiguousFormError",
    "MissingFieldError",
    "UnsupportedConversionError",
    "VirtualRecordRestrictionError",
    "ConfigurationError",
    "ValidationError",
]
