"""Command-line interface built on rich_click.

Contents:
    * :mod:`.root` - ``datenorm`` group and global options
    * :mod:`.main` - Entry point with exit-code translation
    * :mod:`.commands` - Subcommands
"""

from __future__ import annotations

from .commands import (
    cli_config,
    cli_config_deploy,
    cli_config_generate_examples,
    cli_flex,
    cli_info,
    cli_match,
    cli_parse,
    cli_parse_offset,
    cli_to_utc,
)
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    CLIContext,
    TracebackState,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "CLIContext",
    "ExitCode",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_config",
    "cli_config_deploy",
    "cli_config_generate_examples",
    "cli_flex",
    "cli_info",
    "cli_match",
    "cli_parse",
    "cli_parse_offset",
    "cli_to_utc",
    "get_cli_context",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
