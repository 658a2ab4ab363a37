"""Command-line interface for sierra_record_id."""

from sierra_record_id.cli.main import cli

__all__ = ["cli"]
