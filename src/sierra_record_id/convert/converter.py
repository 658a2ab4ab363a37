"""Synchronous conversion between record id kinds.

Conversion never needs I/O except when a virtual record has to cross into
or out of the database id form, where the campus code and campus id must be
looked up. That case is rejected here and handled by
:mod:`sierra_record_id.convert.resolved`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sierra_record_id.config import ConversionContext
from sierra_record_id.errors import (
    MissingFieldError,
    UnsupportedConversionError,
    VirtualRecordRestrictionError,
)
from sierra_record_id.models.kinds import (
    ABSOLUTE_API_URL_KINDS,
    API_URL_KINDS,
    RECORD_KEY_KINDS,
    RecordIdKind,
)
from sierra_record_id.models.record_types import RECORD_TYPE_CODE_TO_API_RECORD_TYPE
from sierra_record_id.record_id import RecordId

__all__ = ["convert_record_id", "target_kind"]


def target_kind(to: RecordIdKind | str, source: RecordId) -> RecordIdKind:
    """Coerce a conversion target, rejecting the detector-only ambiguous tag."""
    kind = RecordIdKind(to)
    if kind is RecordIdKind.AMBIGUOUS_RECORD_KEY:
        raise UnsupportedConversionError(
            f"Cannot convert to {kind}", source=source.kind, target=kind
        )
    return kind


def required_record_type_code(
    source: RecordId, target: RecordIdKind, record_type_code: str | None
) -> str | None:
    """Pick the record type code for ``target``, the source's own winning.

    Raises
    ------
    MissingFieldError
        If ``target`` needs a record type code and neither the source nor
        the ``record_type_code`` option provides one.
    """
    code = source.record_type_code or record_type_code
    if target is not RecordIdKind.RECORD_NUMBER and not code:
        raise MissingFieldError(
            f"record_type_code option is required to convert a {source.kind} to a {target}",
            "record_type_code",
        )
    return code


def convert_record_id(
    source: RecordId,
    to: RecordIdKind | str,
    *,
    record_type_code: str | None = None,
    initial_period: bool | None = None,
    strong_keys_for_virtual_records: bool = False,
    api_host: str | None = None,
    api_path: str | None = None,
    context: ConversionContext | Mapping[str, Any] | None = None,
) -> RecordId:
    """Convert a record id to another kind.

    Parameters
    ----------
    source : RecordId
        Record id to convert.
    to : RecordIdKind | str
        Target kind.
    record_type_code : str | None, optional
        Record type code for sources that carry none (``RECORD_NUMBER``).
        Ignored when the source has its own.
    initial_period : bool | None, optional
        Leading period of a record key target. None keeps the source's.
    strong_keys_for_virtual_records : bool, optional
        Produce strong record keys for virtual records too. By default a
        virtual record converted to a strong key comes out as a weak key.
    api_host, api_path : str | None, optional
        Host and path for absolute API URL targets. Default to the source's
        (when it is itself an absolute URL), then ``context``, then the
        ``SIERRA_API_HOST`` / ``SIERRA_API_PATH`` environment.
    context : ConversionContext | Mapping[str, Any] | None, optional
        Shared defaults and the check digit function.

    Returns
    -------
    RecordId
        Converted record id. Strong keys always carry a freshly computed
        check digit.

    Raises
    ------
    MissingFieldError
        If the target needs a record type code the source lacks.
    VirtualRecordRestrictionError
        If a virtual record would enter or leave the database id form.
    UnsupportedConversionError
        If an API URL is requested for a record type the API does not serve.
    ConfigurationError
        If an absolute URL is requested and no host is known.

    Examples
    --------
        >>> source = RecordId.parse("RECORD_NUMBER", "1234567")
        >>> convert_record_id(source, "WEAK_RECORD_KEY", record_type_code="b").value
        'b1234567'
    """
    target = target_kind(to, source)
    ctx = ConversionContext.coerce(context)

    if source.kind is RecordIdKind.DATABASE_ID and source.is_virtual and target is not source.kind:
        raise VirtualRecordRestrictionError(
            "Cannot use convert to convert from database ids for virtual records. "
            "Must use convert_async instead"
        )
    if target is RecordIdKind.DATABASE_ID and source.kind is not target and source.is_virtual:
        raise VirtualRecordRestrictionError(
            "Cannot use convert to convert to database ids for virtual records. "
            "Must use convert_async instead"
        )

    if target is source.kind and target not in RECORD_KEY_KINDS:
        return source

    code = required_record_type_code(source, target, record_type_code)

    if target in API_URL_KINDS and code not in RECORD_TYPE_CODE_TO_API_RECORD_TYPE:
        raise UnsupportedConversionError(
            f"The API does not support records of type {code}", source=source.kind, target=target
        )

    if (
        target is RecordIdKind.STRONG_RECORD_KEY
        and source.is_virtual
        and not strong_keys_for_virtual_records
    ):
        target = RecordIdKind.WEAK_RECORD_KEY

    if target in ABSOLUTE_API_URL_KINDS and source.kind in ABSOLUTE_API_URL_KINDS:
        api_host = api_host or source.api_host
        api_path = api_path or source.api_path

    return RecordId.from_parts(
        target,
        rec_num=source.rec_num,
        record_type_code=code,
        campus_code=source.campus_code,
        initial_period=source.initial_period if initial_period is None else initial_period,
        api_host=api_host,
        api_path=api_path,
        context=ctx,
    )
