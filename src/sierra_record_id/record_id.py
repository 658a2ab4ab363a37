"""The RecordId value type.

A single frozen dataclass carries the union of every field any record id
kind can hold; ``kind`` says which of them are meaningful. Instances are
built by parsing (:meth:`RecordId.parse`, :meth:`RecordId.from_string`) or
from parts (:meth:`RecordId.from_parts`), and render their canonical string
once, on first access to :attr:`RecordId.value`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, Any

from sierra_record_id.config import ConversionContext
from sierra_record_id.detect import detect
from sierra_record_id.errors import (
    AmbiguousFormError,
    MissingFieldError,
    ParseError,
    RecordIdError,
    ValidationError,
    VirtualRecordRestrictionError,
)
from sierra_record_id.formatting import format_parts
from sierra_record_id.models.database_id import MAX_CAMPUS_ID
from sierra_record_id.models.kinds import (
    ABSOLUTE_API_URL_KINDS,
    API_URL_KINDS,
    RECORD_KEY_KINDS,
    RecordIdKind,
)
from sierra_record_id.models.record_types import record_type_code_to_api_record_type
from sierra_record_id.parse import parse_parts

if TYPE_CHECKING:
    from sierra_record_id.check_digit import CheckDigitFn

__all__ = ["RecordId", "FIELDS_BY_KIND"]

_URL_FIELDS = ("record_type_code", "rec_num", "campus_code")
_KEY_FIELDS = ("initial_period", "record_type_code", "rec_num")

# Fields that are part of each kind's textual form, in rendering order
FIELDS_BY_KIND: dict[RecordIdKind, tuple[str, ...]] = {
    RecordIdKind.RECORD_NUMBER: ("rec_num", "campus_code"),
    RecordIdKind.WEAK_RECORD_KEY: (*_KEY_FIELDS, "campus_code"),
    RecordIdKind.STRONG_RECORD_KEY: (*_KEY_FIELDS, "check_digit", "campus_code"),
    RecordIdKind.DATABASE_ID: ("campus_id", "record_type_code", "rec_num"),
    RecordIdKind.RELATIVE_V4_API_URL: _URL_FIELDS,
    RecordIdKind.RELATIVE_V5_API_URL: _URL_FIELDS,
    RecordIdKind.ABSOLUTE_V4_API_URL: ("api_host", "api_path", *_URL_FIELDS),
    RecordIdKind.ABSOLUTE_V5_API_URL: ("api_host", "api_path", *_URL_FIELDS),
}


@dataclass(frozen=True)
class RecordId:
    """An identifier of one Sierra record, in one of the known textual forms.

    Attributes
    ----------
    kind : RecordIdKind
        Which form the id is written in. Never ``AMBIGUOUS_RECORD_KEY``.
    rec_num : str
        Six or seven digit record number.
    record_type_code : str | None
        One-letter record type code. None only for ``RECORD_NUMBER``.
    campus_code : str | None
        Campus of a virtual record. Always None for ``DATABASE_ID``.
    campus_id : int
        Numeric campus of a virtual record, ``DATABASE_ID`` only (0 otherwise).
    check_digit : str | None
        ``"0"``-``"9"`` or ``"x"``, ``STRONG_RECORD_KEY`` only.
    initial_period : bool
        Whether a record key is written with a leading ``.``.
    api_host : str | None
        Host of an absolute API URL.
    api_path : str | None
        Path prefix of an absolute API URL.
    """

    kind: RecordIdKind
    rec_num: str
    record_type_code: str | None = None
    campus_code: str | None = None
    campus_id: int = 0
    check_digit: str | None = None
    initial_period: bool = False
    api_host: str | None = None
    api_path: str | None = None

    def __post_init__(self) -> None:
        """Normalize ``kind`` to the enum."""
        kind = RecordIdKind(self.kind)
        if kind is RecordIdKind.AMBIGUOUS_RECORD_KEY:
            raise RecordIdError(f"{kind} is a detection result, not a record id kind")
        object.__setattr__(self, "kind", kind)

    def __str__(self) -> str:
        return self.value

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, kind: RecordIdKind | str, value: str) -> RecordId:
        """Parse a string as a given kind.

        Parameters
        ----------
        kind : RecordIdKind | str
            Kind to parse as.
        value : str
            String to parse. Surrounding whitespace is ignored.

        Returns
        -------
        RecordId
            Parsed record id.

        Raises
        ------
        ParseError
            If ``value`` does not match the grammar of ``kind``.
        """
        kind = RecordIdKind(kind)
        parts = parse_parts(kind, value) if isinstance(value, str) else None
        if parts is None:
            raise ParseError(f"Cannot parse the string {value!r} as a {kind}", kind=kind, value=value)
        return cls.from_parts(kind, **parts)

    @classmethod
    def from_string(cls, value: str) -> RecordId:
        """Detect the kind of a string and parse it.

        Raises
        ------
        AmbiguousFormError
            If the string is a record key that may be either weak or strong.
        ParseError
            If the kind cannot be detected or the string does not parse.
        """
        kind = detect(value)
        if kind is None:
            raise ParseError(f"Cannot detect the kind of record id: {value!r}", value=value)
        if kind is RecordIdKind.AMBIGUOUS_RECORD_KEY:
            raise AmbiguousFormError(value.strip())
        return cls.parse(kind, value)

    @classmethod
    def from_parts(
        cls,
        kind: RecordIdKind | str,
        *,
        rec_num: str | int | None = None,
        record_type_code: str | None = None,
        campus_code: str | None = None,
        campus_id: int | None = None,
        check_digit: str | None = None,
        initial_period: bool = False,
        api_host: str | None = None,
        api_path: str | None = None,
        context: ConversionContext | Mapping[str, Any] | None = None,
    ) -> RecordId:
        """Build a record id from parts, filling in what the kind derives.

        Fields that are not part of ``kind`` are dropped. A strong record key
        without a check digit gets one computed; an absolute API URL without
        host or path takes them from ``context`` or the environment.

        Parameters
        ----------
        kind : RecordIdKind | str
            Kind to build.
        rec_num : str | int | None
            Record number. Required.
        record_type_code : str | None
            Required for every kind except ``RECORD_NUMBER``.
        campus_code : str | None
            Campus code of a virtual record (not for ``DATABASE_ID``).
        campus_id : int | None
            Campus id of a virtual ``DATABASE_ID``.
        check_digit : str | None
            Check digit of a ``STRONG_RECORD_KEY``. Computed when omitted.
        initial_period : bool
            Leading period of a record key.
        api_host, api_path : str | None
            Host and path of an absolute API URL.
        context : ConversionContext | Mapping[str, Any] | None
            Defaults for host, path and the check digit function.

        Returns
        -------
        RecordId
            The record id.

        Raises
        ------
        MissingFieldError
            If a required part is missing.
        VirtualRecordRestrictionError
            If a database id is given a campus code but no campus id.
        UnsupportedConversionError
            If an API URL is requested for a type the API does not serve.
        ConfigurationError
            If an absolute URL has no host and ``SIERRA_API_HOST`` is unset.
        """
        kind = RecordIdKind(kind)
        ctx = ConversionContext.coerce(context)

        if rec_num is None or rec_num == "":
            raise MissingFieldError(f"Cannot construct a {kind} without a rec_num part", "rec_num")
        rec_num = str(rec_num)

        if kind is RecordIdKind.RECORD_NUMBER:
            record_type_code = None
        elif not record_type_code:
            raise MissingFieldError(
                f"Cannot construct a {kind} without a record_type_code part", "record_type_code"
            )

        if kind is RecordIdKind.DATABASE_ID:
            campus_id = campus_id or 0
            if campus_code and not campus_id:
                raise VirtualRecordRestrictionError(
                    f"Cannot construct a virtual {kind} from a campus_code without a campus_id"
                )
            if not 0 <= campus_id <= MAX_CAMPUS_ID:
                raise ValidationError(
                    f"campus_id must be in [0, {MAX_CAMPUS_ID}], got {campus_id}",
                    "campus_id",
                    campus_id,
                )
            campus_code = None
        else:
            if campus_id and not campus_code:
                raise VirtualRecordRestrictionError(
                    f"Cannot construct a virtual {kind} from a campus_id without a campus_code"
                )
            campus_id = 0
            campus_code = campus_code or None

        if kind is RecordIdKind.STRONG_RECORD_KEY:
            check_digit = check_digit or ctx.check_digit_fn(rec_num)
        else:
            check_digit = None

        if kind not in RECORD_KEY_KINDS:
            initial_period = False

        if kind in API_URL_KINDS:
            record_type_code_to_api_record_type(record_type_code)

        if kind in ABSOLUTE_API_URL_KINDS:
            # explicit parts are kept as given; validate() checks them
            if not (api_host and api_path):
                settings = ctx.api_settings(api_host, api_path)
                api_host, api_path = settings.api_host, settings.api_path
        else:
            api_host = api_path = None

        return cls(
            kind=kind,
            rec_num=rec_num,
            record_type_code=record_type_code,
            campus_code=campus_code,
            campus_id=campus_id,
            check_digit=check_digit,
            initial_period=bool(initial_period),
            api_host=api_host,
            api_path=api_path,
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @cached_property
    def value(self) -> str:
        """Canonical string, computed once."""
        return format_parts(self.kind, self.parts())

    def to_string(self, initial_period: bool | None = None) -> str:
        """Render the canonical string, optionally overriding the leading period.

        The override only affects record keys.
        """
        if initial_period is None or self.kind not in RECORD_KEY_KINDS:
            return self.value
        return format_parts(self.kind, {**self.parts(), "initial_period": initial_period})

    @property
    def is_virtual(self) -> bool:
        """Whether the record is hosted by another campus."""
        if self.kind is RecordIdKind.DATABASE_ID:
            return self.campus_id != 0
        return bool(self.campus_code)

    def parts(self) -> dict[str, Any]:
        """Return the fields that make up this kind's textual form."""
        return {name: getattr(self, name) for name in FIELDS_BY_KIND[self.kind]}

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary.

        Returns
        -------
        dict[str, Any]
            ``kind``, canonical ``value``, ``virtual`` flag and the kind's parts.
        """
        return {
            "kind": str(self.kind),
            "value": self.value,
            "virtual": self.is_virtual,
            **self.parts(),
        }

    # ------------------------------------------------------------------
    # Validation and conversion
    # ------------------------------------------------------------------

    def validate(
        self,
        api_compatible_only: bool = False,
        expected_api_host: str | None = None,
        expected_api_path: str | None = None,
        check_digit_fn: CheckDigitFn | None = None,
    ) -> RecordId:
        """Check the invariants of this record id.

        Returns
        -------
        RecordId
            ``self``, for chaining.

        Raises
        ------
        ValidationError
            On the first broken invariant.
        """
        from sierra_record_id.validate import validate_record_id

        validate_record_id(
            self,
            api_compatible_only=api_compatible_only,
            expected_api_host=expected_api_host,
            expected_api_path=expected_api_path,
            check_digit_fn=check_digit_fn,
        )
        return self

    def convert_to(self, to: RecordIdKind | str, **options: Any) -> RecordId:
        """Convert to another kind. See :func:`convert_record_id` for options."""
        from sierra_record_id.convert import convert_record_id

        return convert_record_id(self, to, **options)

    async def convert_to_async(self, to: RecordIdKind | str, **options: Any) -> RecordId:
        """Convert to another kind, resolving campuses of virtual records.

        See :func:`convert_record_id_async` for options.
        """
        from sierra_record_id.convert import convert_record_id_async

        return await convert_record_id_async(self, to, **options)
