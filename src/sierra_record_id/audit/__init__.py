"""Audit logging subsystem for sierra_record_id.

Main Components
---------------
- AuditLogger: JSONL event logger used by the CLI
- LogEvent: One logged event
"""

from sierra_record_id.audit.helpers import generate_run_id, get_package_version
from sierra_record_id.audit.logger import AuditLogger
from sierra_record_id.audit.models import LogEvent
from sierra_record_id.utils import get_iso_timestamp

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
    "get_package_version",
    "get_iso_timestamp",
]
