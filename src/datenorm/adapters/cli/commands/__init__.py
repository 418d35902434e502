"""Subcommands attached to the root group."""

from __future__ import annotations

from .config import cli_config, cli_config_deploy, cli_config_generate_examples
from .dates import cli_flex, cli_match, cli_parse, cli_parse_offset, cli_to_utc
from .info import cli_info

__all__ = [
    "cli_config",
    "cli_config_deploy",
    "cli_config_generate_examples",
    "cli_flex",
    "cli_info",
    "cli_match",
    "cli_parse",
    "cli_parse_offset",
    "cli_to_utc",
]
