"""Conversion between record id kinds.

Main entry points:
- convert_record_id: Synchronous conversion of a RecordId
- convert_record_id_async: Same, resolving campuses of virtual records
"""

from sierra_record_id.convert.converter import convert_record_id
from sierra_record_id.convert.resolved import convert_record_id_async

__all__ = ["convert_record_id", "convert_record_id_async"]
