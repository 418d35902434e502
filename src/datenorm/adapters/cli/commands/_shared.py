"""Helpers shared by the date commands."""

from __future__ import annotations

import logging
from typing import Any, NoReturn

import orjson
import rich_click as click

from datenorm.adapters.config.settings import NormalizerConfig
from datenorm.domain.enums import OutputFormat
from datenorm.domain.errors import ConfigurationError

from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

#: ``--format`` choices shared by every date command.
FORMAT_CHOICES = click.Choice([f.value for f in OutputFormat], case_sensitive=False)


def load_settings(cli_ctx: CLIContext) -> NormalizerConfig:
    """Validate ``[datenorm]`` or exit with :attr:`ExitCode.CONFIG_ERROR`."""
    try:
        return cli_ctx.services.load_normalizer_config(cli_ctx.config)
    except ConfigurationError as exc:
        logger.error("Invalid normalizer configuration", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def fail_with(exc: Exception, code: ExitCode) -> NoReturn:
    """Report ``exc`` on stderr and exit with ``code``."""
    logger.error("Command failed", extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"\nError: {exc}", err=True)
    raise SystemExit(code) from exc


def emit(output_format: str, payload: dict[str, Any], lines: list[str]) -> None:
    """Print ``payload`` as JSON or ``lines`` as plain text.

    Example:
        >>> emit("json", {"value": "2026-01-03T00:00:00"}, [])
        {
          "value": "2026-01-03T00:00:00"
        }
    """
    if OutputFormat(output_format.lower()) is OutputFormat.JSON:
        click.echo(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8"))
        return
    for line in lines:
        click.echo(line)


__all__ = ["FORMAT_CHOICES", "emit", "fail_with", "load_settings"]
