"""Typed Click context state and traceback flag handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from datenorm.composition import AppServices

TracebackState = tuple[bool, bool]
"""``(traceback, traceback_force_color)`` as stored in ``lib_cli_exit_tools.config``."""


@dataclass(slots=True)
class CLIContext:
    """State the root group hands to every subcommand via ``ctx.obj``.

    Attributes:
        traceback: Whether ``--traceback`` was given.
        config: Layered configuration with ``--set`` overrides applied.
        services: Wired application services.
        profile: Profile selected on the root command.
        set_overrides: Raw ``--set`` strings, reapplied when a subcommand
            reloads configuration for another profile.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace ``ctx.obj`` (the services factory) with a :class:`CLIContext`.

    Example:
        >>> from unittest.mock import MagicMock
        >>> from datenorm.composition import build_testing
        >>> ctx = MagicMock()
        >>> store_cli_context(ctx, traceback=False, config=Config({}, {}), services=build_testing())
        >>> ctx.obj.profile is None
        True
    """
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root command.

    Raises:
        RuntimeError: If the root command did not run first.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Mirror ``--traceback`` into ``lib_cli_exit_tools.config``.

    Example:
        >>> apply_traceback_preferences(False)
        >>> bool(lib_cli_exit_tools.config.traceback)
        False
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Capture the traceback flags so :func:`restore_traceback_state` can undo changes."""
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Reapply flags captured by :func:`snapshot_traceback_state`.

    Example:
        >>> saved = snapshot_traceback_state()
        >>> apply_traceback_preferences(True)
        >>> restore_traceback_state(saved)
        >>> snapshot_traceback_state() == saved
        True
    """
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
