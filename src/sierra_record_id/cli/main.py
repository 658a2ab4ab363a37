"""Command-line interface for sierra_record_id.

Provides CLI commands to detect, parse, convert and validate record ids.
"""

import asyncio
import importlib.metadata
import json
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import click

from sierra_record_id.audit import AuditLogger, generate_run_id
from sierra_record_id.audit.helpers import get_package_version, get_python_version
from sierra_record_id.config import ConversionContext
from sierra_record_id.convert import convert_record_id, convert_record_id_async
from sierra_record_id.detect import detect
from sierra_record_id.errors import RecordIdError, ValidationError
from sierra_record_id.models.kinds import CONCRETE_KINDS
from sierra_record_id.record_id import RecordId
from sierra_record_id.resolver import StaticResolver

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("sierra-record-id")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development

KIND_CHOICE = click.Choice([str(kind) for kind in CONCRETE_KINDS], case_sensitive=False)


def _parse_campus(ctx: click.Context, param: click.Parameter, values: tuple[str, ...]) -> dict[str, int]:
    campuses: dict[str, int] = {}
    for value in values:
        code, sep, campus_id = value.partition("=")
        if not sep or not code or not campus_id.isdigit():
            raise click.BadParameter(f"expected CODE=ID, got {value!r}", ctx=ctx, param=param)
        campuses[code] = int(campus_id)
    return campuses


def _read(value: str, kind: str | None) -> RecordId:
    return RecordId.from_string(value) if kind is None else RecordId.parse(kind, value)


@contextmanager
def _audited_run(
    ctx: click.Context, parameters: dict[str, Any], ids_processed: int | None = None
) -> Iterator[AuditLogger | None]:
    """Bracket a command with run_started/run_finished when auditing is on."""
    audit: AuditLogger | None = ctx.obj.get("audit")
    if audit is None:
        yield None
        return

    audit.set_command(ctx.info_name)
    audit.run_started(
        command=sys.argv,
        parameters={
            **parameters,
            "package_version": get_package_version(),
            "python_version": get_python_version(),
        },
    )
    started = time.monotonic()
    status = "failed"
    try:
        yield audit
        status = "success"
    finally:
        audit.run_finished(
            status=status,
            duration_seconds=time.monotonic() - started,
            ids_processed=ids_processed,
        )


def _fail(audit: AuditLogger | None, error: Exception, rid: str | None = None) -> None:
    if audit is not None:
        audit.error(type(error).__name__, str(error), rid=rid)
    click.secho(f"Error: {error}", fg="red", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="sierra-record-id")
@click.option(
    "--audit-log",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Append JSONL audit events to this file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.pass_context
def cli(ctx: click.Context, audit_log: Path | None, verbose: bool) -> None:
    """Detect, parse, convert and validate Sierra record ids.

    Use 'sierra-record-id COMMAND --help' for command-specific help.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["audit"] = None
    if audit_log is not None:
        audit = AuditLogger(generate_run_id(), audit_log)
        ctx.call_on_close(audit.close)
        ctx.obj["audit"] = audit


@cli.command(name="detect")
@click.argument("ids", nargs=-1, required=True)
@click.pass_context
def detect_command(ctx: click.Context, ids: tuple[str, ...]) -> None:
    """Print the kind of each of IDS, one per line.

    Record keys that may be either weak or strong are reported as
    AMBIGUOUS_RECORD_KEY, unrecognised strings as UNKNOWN.

    Examples
    --------
        sierra-record-id detect b1234567x 1234567 /v4/bibs/1234567
    """
    with _audited_run(ctx, {"ids": list(ids)}, ids_processed=len(ids)) as audit:
        for value in ids:
            kind = detect(value)
            if audit is not None:
                audit.detection(value, str(kind) if kind else None)
            click.echo(str(kind) if kind else "UNKNOWN")


@cli.command(name="parse")
@click.argument("record_id")
@click.option("--kind", "-k", type=KIND_CHOICE, default=None, help="Kind to parse as (default: detect)")
@click.option("--json", "as_json", is_flag=True, help="Print parts as JSON")
@click.pass_context
def parse_command(ctx: click.Context, record_id: str, kind: str | None, as_json: bool) -> None:
    """Print the parts of RECORD_ID.

    Examples
    --------
        sierra-record-id parse b1234567x
        sierra-record-id parse 420908029575 --json
    """
    with _audited_run(ctx, {"record_id": record_id, "kind": kind}) as audit:
        try:
            parsed = _read(record_id, kind)
        except RecordIdError as e:
            _fail(audit, e, rid=record_id)

        if ctx.obj["verbose"]:
            click.echo(f"Parsed as: {parsed.kind}", err=True)

        if as_json:
            click.echo(json.dumps(parsed.to_dict(), indent=2))
        else:
            for name, value in parsed.to_dict().items():
                click.echo(f"{name}: {value}")


@cli.command(name="convert")
@click.argument("record_id")
@click.option("--to", "to_kind", type=KIND_CHOICE, required=True, help="Target kind")
@click.option("--from", "from_kind", type=KIND_CHOICE, default=None, help="Source kind (default: detect)")
@click.option("--record-type", "record_type_code", default=None, help="Record type code for bare record numbers")
@click.option(
    "--initial-period/--no-initial-period",
    default=None,
    help="Write record keys with/without a leading period (default: as the source)",
)
@click.option(
    "--strong-keys-for-virtual-records",
    is_flag=True,
    help="Produce strong keys for virtual records instead of weak ones",
)
@click.option("--api-host", default=None, help="API host for absolute URLs (default: $SIERRA_API_HOST)")
@click.option("--api-path", default=None, help="API path for absolute URLs (default: $SIERRA_API_PATH)")
@click.option(
    "--campus",
    "campuses",
    multiple=True,
    callback=_parse_campus,
    metavar="CODE=ID",
    help="Campus code to campus id mapping for virtual records (repeatable)",
)
@click.pass_context
def convert_command(
    ctx: click.Context,
    record_id: str,
    to_kind: str,
    from_kind: str | None,
    record_type_code: str | None,
    initial_period: bool | None,
    strong_keys_for_virtual_records: bool,
    api_host: str | None,
    api_path: str | None,
    campuses: dict[str, int],
) -> None:
    """Convert RECORD_ID to another kind.

    Virtual records crossing into or out of the DATABASE_ID form need
    --campus mappings.

    Examples
    --------
        sierra-record-id convert 1234567 --to WEAK_RECORD_KEY --record-type b
        sierra-record-id convert /v4/bibs/1234567 --to ABSOLUTE_V4_API_URL --api-host lib.example.edu
        sierra-record-id convert b12345672@abcd --to DATABASE_ID --campus abcd=42
    """
    parameters = {
        "record_id": record_id,
        "to": to_kind,
        "from": from_kind,
        "record_type_code": record_type_code,
        "initial_period": initial_period,
        "strong_keys_for_virtual_records": strong_keys_for_virtual_records,
        "api_host": api_host,
        "api_path": api_path,
        "campuses": campuses,
    }
    with _audited_run(ctx, parameters) as audit:
        try:
            context = ConversionContext(
                api_host=api_host,
                api_path=api_path,
                resolver=StaticResolver(campuses) if campuses else None,
            )
            source = _read(record_id, from_kind)
            options: dict[str, Any] = {
                "record_type_code": record_type_code,
                "initial_period": initial_period,
                "strong_keys_for_virtual_records": strong_keys_for_virtual_records,
                "context": context,
            }
            if campuses:
                converted = asyncio.run(convert_record_id_async(source, to_kind, **options))
            else:
                converted = convert_record_id(source, to_kind, **options)
        except (ValueError, LookupError) as e:
            _fail(audit, e, rid=record_id)

        if ctx.obj["verbose"]:
            click.echo(f"{source.kind} -> {converted.kind}", err=True)
        if audit is not None:
            audit.conversion(record_id, str(source.kind), str(converted.kind), converted.value)
        click.echo(converted.value)


@cli.command(name="validate")
@click.argument("record_id")
@click.option("--kind", "-k", type=KIND_CHOICE, default=None, help="Kind to validate as (default: detect)")
@click.option("--api-compatible-only", is_flag=True, help="Only accept record types served by the REST API")
@click.option("--expected-api-host", default=None, help="Required host of absolute API URLs")
@click.option("--expected-api-path", default=None, help="Required path of absolute API URLs")
@click.pass_context
def validate_command(
    ctx: click.Context,
    record_id: str,
    kind: str | None,
    api_compatible_only: bool,
    expected_api_host: str | None,
    expected_api_path: str | None,
) -> None:
    """Check that RECORD_ID is a valid record id. Exits 1 when it is not.

    Examples
    --------
        sierra-record-id validate b12345672
        sierra-record-id validate p1234567 --kind WEAK_RECORD_KEY --api-compatible-only
    """
    parameters = {
        "record_id": record_id,
        "kind": kind,
        "api_compatible_only": api_compatible_only,
        "expected_api_host": expected_api_host,
        "expected_api_path": expected_api_path,
    }
    with _audited_run(ctx, parameters) as audit:
        try:
            parsed = _read(record_id, kind).validate(
                api_compatible_only=api_compatible_only,
                expected_api_host=expected_api_host,
                expected_api_path=expected_api_path,
            )
        except RecordIdError as e:
            if audit is not None:
                field = e.field if isinstance(e, ValidationError) else None
                audit.validation(record_id, False, kind=kind, field=field)
            click.secho(f"✗ Invalid: {e}", fg="red", err=True)
            sys.exit(1)

        if audit is not None:
            audit.validation(record_id, True, kind=str(parsed.kind))
        click.secho(f"✓ Valid {parsed.kind}", fg="green")


if __name__ == "__main__":
    cli()
