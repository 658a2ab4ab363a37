"""Asynchronous conversion, resolving campuses of virtual records.

Identical to :func:`convert_record_id` except for the two conversions that
cross the database id boundary for a virtual record. Each of those awaits
exactly one resolver call; every other conversion awaits nothing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sierra_record_id.config import ConversionContext
from sierra_record_id.convert.converter import (
    convert_record_id,
    required_record_type_code,
    target_kind,
)
from sierra_record_id.models.kinds import RecordIdKind
from sierra_record_id.record_id import RecordId

__all__ = ["convert_record_id_async"]


async def convert_record_id_async(
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
    """Convert a record id to another kind, virtual records included.

    Takes the same options as :func:`convert_record_id`. ``context`` must
    carry a resolver when a virtual record enters or leaves the database id
    form.

    Returns
    -------
    RecordId
        Converted record id.

    Raises
    ------
    ConfigurationError
        If a campus lookup is needed and ``context`` has no resolver.
    Exception
        Whatever the resolver raises, unchanged.
    """
    target = target_kind(to, source)
    ctx = ConversionContext.coerce(context)
    options: dict[str, Any] = {
        "record_type_code": record_type_code,
        "initial_period": initial_period,
        "strong_keys_for_virtual_records": strong_keys_for_virtual_records,
        "api_host": api_host,
        "api_path": api_path,
        "context": ctx,
    }

    if source.kind is RecordIdKind.DATABASE_ID and source.is_virtual and target is not source.kind:
        resolver = ctx.require_resolver()
        campus_code = await resolver.resolve_campus_code_from_id(source.campus_id)
        local_form = RecordId.from_parts(
            RecordIdKind.WEAK_RECORD_KEY,
            rec_num=source.rec_num,
            record_type_code=source.record_type_code,
            campus_code=campus_code,
            context=ctx,
        )
        return convert_record_id(local_form, target, **options)

    if target is RecordIdKind.DATABASE_ID and source.kind is not target and source.is_virtual:
        code = required_record_type_code(source, target, record_type_code)
        resolver = ctx.require_resolver()
        campus_id = await resolver.resolve_campus_id_from_code(source.campus_code)
        return RecordId.from_parts(
            RecordIdKind.DATABASE_ID,
            rec_num=source.rec_num,
            record_type_code=code,
            campus_id=campus_id,
            context=ctx,
        )

    return convert_record_id(source, target, **options)
