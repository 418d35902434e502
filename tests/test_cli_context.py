"""CLI context storage and the main() error paths."""

from __future__ import annotations

import pytest
import rich_click as click
from click.testing import CliRunner, Result
from lib_layered_config import Config

from datenorm.adapters import cli as cli_mod
from datenorm.adapters.cli.context import CLIContext, get_cli_context, store_cli_context
from datenorm.adapters.cli.exit_codes import ExitCode
from datenorm.adapters.cli.main import main
from datenorm.composition import build_production, build_testing


@pytest.mark.os_agnostic
def test_main_turns_usage_errors_into_exit_code_two(managed_traceback_state: None) -> None:
    exit_code = main(["--set", "invalid_no_dot=value", "info"], services_factory=build_production)

    assert exit_code == 2


@pytest.mark.os_agnostic
def test_get_cli_context_raises_when_not_initialized() -> None:
    ctx = click.Context(click.Command("parse"))
    ctx.obj = "not a CLIContext"

    with pytest.raises(RuntimeError, match="CLI context not initialized"):
        get_cli_context(ctx)


@pytest.mark.os_agnostic
def test_cli_root_rejects_obj_that_is_not_a_factory(cli_runner: CliRunner) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj="not_callable")

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_store_and_get_cli_context_round_trip() -> None:
    ctx = click.Context(click.Command("parse"))
    config = Config({"datenorm": {"local_zone": "UTC"}}, {})

    store_cli_context(
        ctx,
        traceback=True,
        config=config,
        services=build_testing(),
        profile="staging",
        set_overrides=("datenorm.use_utc=true",),
    )
    result = get_cli_context(ctx)

    assert isinstance(result, CLIContext)
    assert result.traceback is True
    assert result.config is config
    assert result.profile == "staging"
    assert result.set_overrides == ("datenorm.use_utc=true",)


@pytest.mark.os_agnostic
def test_exit_codes_follow_sysexits() -> None:
    assert ExitCode.SUCCESS == 0
    assert ExitCode.NO_MATCH == ExitCode.GENERAL_ERROR == 1
    assert ExitCode.INVALID_ARGUMENT == 22
    assert ExitCode.DATA_ERROR == 65
    assert ExitCode.CONFIG_ERROR == 78
