"""Exceptions raised by sierra_record_id.

All of them derive from :class:`RecordIdError`, itself a ``ValueError``, so
callers can catch the whole family at once.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "RecordIdError",
    "ParseError",
    "AmbiguousFormError",
    "MissingFieldError",
    "UnsupportedConversionError",
    "VirtualRecordRestrictionError",
    "ConfigurationError",
    "ValidationError",
]


class RecordIdError(ValueError):
    """Base class for every record id error."""


class ParseError(RecordIdError):
    """Raised when a string does not match the grammar of a record id kind."""

    def __init__(self, message: str, kind: str | None = None, value: str | None = None) -> None:
        """Initialize parse error.

        Parameters
        ----------
        message : str
            Error message.
        kind : str | None, optional
            Name of the kind the string was parsed as.
        value : str | None, optional
            The offending string.
        """
        super().__init__(message)
        self.kind = kind
        self.value = value


class AmbiguousFormError(RecordIdError):
    """Raised when a record key could be either weak or strong."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Ambiguous record key, cannot tell if it is strong or weak: {value}")
        self.value = value


class MissingFieldError(RecordIdError):
    """Raised when a field needed to build or convert a record id is absent."""

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message)
        self.field = field


class UnsupportedConversionError(RecordIdError):
    """Raised when the target kind cannot represent the source record."""

    def __init__(self, message: str, source: str | None = None, target: str | None = None) -> None:
        super().__init__(message)
        self.source = source
        self.target = target


class VirtualRecordRestrictionError(RecordIdError):
    """Raised when a virtual record needs a campus lookup the sync path cannot do."""


class ConfigurationError(RecordIdError):
    """Raised when an API host or a resolver is required but not available."""


class ValidationError(RecordIdError):
    """Raised when a record id breaks one of its invariants."""

    def __init__(self, message: str, field: str, value: Any = None) -> None:
        """Initialize validation error.

        Parameters
        ----------
        message : str
            Error message.
        field : str
            Name of the offending part (e.g. ``"rec_num"``).
        value : Any, optional
            The offending value.
        """
        super().__init__(message)
        self.field = field
        self.value = value
