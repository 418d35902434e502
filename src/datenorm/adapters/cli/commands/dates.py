"""Date commands: parse, to-utc, parse-offset, match and flex.

Each command validates ``[datenorm]`` into a :class:`DateNormalizer`,
runs one operation and prints either canonical text or JSON. Unparseable
input exits with :attr:`ExitCode.DATA_ERROR`.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from datenorm.domain.enums import DateTimeKind
from datenorm.domain.errors import ConversionError, ParseError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import FORMAT_CHOICES, emit, fail_with, load_settings

logger = logging.getLogger(__name__)

_pattern_option = click.option(
    "-p",
    "--pattern",
    type=str,
    default=None,
    help="Custom format pattern (default: datenorm.default_pattern)",
)
_subsecond_option = click.option(
    "--subsecond/--no-subsecond",
    "include_subsecond",
    default=None,
    help="Append milliseconds as .fff (default: datenorm.include_subsecond)",
)
_format_option = click.option(
    "--format",
    "output_format",
    type=FORMAT_CHOICES,
    default="human",
    help="Output format (human-readable or JSON)",
)


@click.command("parse", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
@_pattern_option
@click.option("--utc/--no-utc", "use_utc", default=None, help="Convert to UTC and append Z")
@_subsecond_option
@_format_option
@click.pass_context
def cli_parse(
    ctx: click.Context,
    text: str,
    pattern: str | None,
    use_utc: bool | None,
    include_subsecond: bool | None,
    output_format: str,
) -> None:
    r"""Strictly parse TEXT and print it in canonical form.

    \b
    Example:
        datenorm parse "03.01.2026 14:30" -p "dd.MM.yyyy HH:mm"
        2026-01-03T14:30:00
    """
    settings = load_settings(get_cli_context(ctx))
    normalizer = settings.to_normalizer()
    effective_pattern = settings.default_pattern if pattern is None else pattern
    to_utc = settings.use_utc if use_utc is None else use_utc
    subsecond = settings.include_subsecond if include_subsecond is None else include_subsecond

    with lib_log_rich.runtime.bind(job_id="cli-parse", extra={"command": "parse", "pattern": effective_pattern}):
        logger.info("Parsing date", extra={"pattern": effective_pattern, "utc": to_utc})
        try:
            value = normalizer.parse_exact(text, effective_pattern)
            rendered = normalizer.format(value, use_utc=to_utc, include_subsecond=subsecond)
        except (ParseError, ConversionError) as exc:
            fail_with(exc, ExitCode.DATA_ERROR)
        kind = DateTimeKind.UTC if to_utc else value.kind
        emit(
            output_format,
            {"input": text, "pattern": effective_pattern, "kind": kind.value, "value": rendered},
            [rendered],
        )


@click.command("to-utc", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
@_pattern_option
@click.option(
    "--kind",
    "source_kind",
    type=click.Choice([k.value for k in DateTimeKind], case_sensitive=False),
    default=None,
    help="How to interpret TEXT (default: datenorm.source_kind)",
)
@_subsecond_option
@_format_option
@click.pass_context
def cli_to_utc(
    ctx: click.Context,
    text: str,
    pattern: str | None,
    source_kind: str | None,
    include_subsecond: bool | None,
    output_format: str,
) -> None:
    """Parse TEXT as a local, UTC or unspecified value and print it in UTC.

    Unspecified input is converted exactly like local input.
    """
    settings = load_settings(get_cli_context(ctx))
    normalizer = settings.to_normalizer()
    effective_pattern = settings.default_pattern if pattern is None else pattern
    kind = DateTimeKind(source_kind.lower()) if source_kind else settings.source_kind
    subsecond = settings.include_subsecond if include_subsecond is None else include_subsecond

    extra = {"command": "to-utc", "pattern": effective_pattern, "source_kind": kind.value}
    with lib_log_rich.runtime.bind(job_id="cli-to-utc", extra=extra):
        logger.info("Converting date to UTC", extra={"pattern": effective_pattern, "source_kind": kind.value})
        try:
            value = normalizer.parse_to_utc(text, effective_pattern, kind)
        except ConversionError as exc:
            fail_with(exc, ExitCode.DATA_ERROR)
        rendered = normalizer.format(value, use_utc=True, include_subsecond=subsecond)
        emit(
            output_format,
            {"input": text, "pattern": effective_pattern, "source_kind": kind.value, "value": rendered},
            [rendered],
        )


@click.command("parse-offset", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
@click.option(
    "-p",
    "--pattern",
    type=str,
    default=None,
    help="Pattern with an offset token (default: datenorm.default_offset_pattern)",
)
@_subsecond_option
@_format_option
@click.pass_context
def cli_parse_offset(
    ctx: click.Context,
    text: str,
    pattern: str | None,
    include_subsecond: bool | None,
    output_format: str,
) -> None:
    """Parse TEXT carrying a UTC offset; print local value, offset and UTC instant."""
    settings = load_settings(get_cli_context(ctx))
    normalizer = settings.to_normalizer()
    effective_pattern = settings.default_offset_pattern if pattern is None else pattern
    subsecond = settings.include_subsecond if include_subsecond is None else include_subsecond

    with lib_log_rich.runtime.bind(job_id="cli-parse-offset", extra={"command": "parse-offset"}):
        logger.info("Parsing offset date", extra={"pattern": effective_pattern})
        try:
            value = normalizer.parse_offset(text, effective_pattern)
        except ParseError as exc:
            fail_with(exc, ExitCode.DATA_ERROR)
        canonical = normalizer.format_offset(value, include_subsecond=subsecond)
        local = normalizer.format(value.local_value, include_subsecond=subsecond)
        utc = normalizer.format(value.utc_instant, use_utc=True, include_subsecond=subsecond)
        offset = canonical[len(local) :]
        emit(
            output_format,
            {
                "input": text,
                "pattern": effective_pattern,
                "local": local,
                "offset": offset,
                "offset_text": value.offset_text,
                "utc": utc,
            },
            [f"local:  {local}", f"offset: {offset}", f"utc:    {utc}"],
        )


@click.command("match", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
@_pattern_option
@click.pass_context
def cli_match(ctx: click.Context, text: str, pattern: str | None) -> None:
    """Print ``true`` and exit 0 if TEXT conforms to the pattern, else ``false`` and exit 1."""
    settings = load_settings(get_cli_context(ctx))
    effective_pattern = settings.default_pattern if pattern is None else pattern

    with lib_log_rich.runtime.bind(job_id="cli-match", extra={"command": "match", "pattern": effective_pattern}):
        matched = settings.to_normalizer().try_match(text, effective_pattern)
        logger.info("Checked pattern conformance", extra={"pattern": effective_pattern, "matched": matched})
        click.echo("true" if matched else "false")
        if not matched:
            raise SystemExit(ExitCode.NO_MATCH)


@click.command("flex", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
@click.option(
    "-p",
    "--pattern",
    "patterns",
    type=str,
    multiple=True,
    help="Candidate pattern, tried in the order given (repeatable; default: datenorm.candidate_patterns)",
)
@_subsecond_option
@_format_option
@click.pass_context
def cli_flex(
    ctx: click.Context,
    text: str,
    patterns: tuple[str, ...],
    include_subsecond: bool | None,
    output_format: str,
) -> None:
    r"""Parse TEXT with the first candidate pattern that matches.

    \b
    Example:
        datenorm flex 01/03/2026 -p MM/dd/yyyy -p dd/MM/yyyy
        2026-01-03T00:00:00
        pattern: MM/dd/yyyy
    """
    settings = load_settings(get_cli_context(ctx))
    normalizer = settings.to_normalizer()
    subsecond = settings.include_subsecond if include_subsecond is None else include_subsecond

    with lib_log_rich.runtime.bind(job_id="cli-flex", extra={"command": "flex", "candidates": len(patterns)}):
        result = normalizer.parse_flexible(text, patterns or None)
        rendered = (
            normalizer.format(result.value, include_subsecond=subsecond)
            if result.success and result.value is not None
            else None
        )
        payload = {
            "input": text,
            "success": result.success,
            "value": rendered,
            "pattern": result.pattern,
            "attempted": list(result.attempted),
            "message": result.message,
        }
        if rendered is None:
            logger.warning("No candidate pattern matched", extra={"attempted": len(result.attempted)})
            if output_format.lower() == "json":
                emit(output_format, payload, [])
            click.echo(f"\nError: {result.message}", err=True)
            raise SystemExit(ExitCode.DATA_ERROR)
        logger.info("Flexible parse matched", extra={"pattern": result.pattern})
        emit(output_format, payload, [rendered, f"pattern: {result.pattern}"])


__all__ = ["cli_flex", "cli_match", "cli_parse", "cli_parse_offset", "cli_to_utc"]
