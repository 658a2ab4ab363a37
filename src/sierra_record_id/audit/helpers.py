"""Helper utilities for audit logging.

For timestamp utilities, see sierra_record_id.utils.
"""

import secrets
import sys

from sierra_record_id.utils import get_iso_timestamp

__all__ = [
    "generate_run_id",
    "get_package_version",
    "get_python_version",
]


def generate_run_id() -> str:
    """Generate unique run identifier.

    Returns
    -------
    str
        Run ID in format: ISO8601_timestamp__random_suffix.
    """
    suffix = secrets.token_hex(4)
    return f"{get_iso_timestamp()}__{suffix}"


def get_package_version() -> str:
    """Get sierra-record-id package version.

    Returns
    -------
    str
        Package version or "unknown".
    """
    try:
        import importlib.metadata

        return importlib.metadata.version("sierra-record-id")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_python_version() -> str:
    """Get Python version string (e.g., "3.12.3")."""
    return sys.version.split()[0]
