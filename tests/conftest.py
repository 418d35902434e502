"""Shared pytest fixtures for domain, configuration and CLI tests.

Fixtures are discovered implicitly by pytest; names read as plain English.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from datetime import timedelta, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from datenorm.domain import DateNormalizer

if TYPE_CHECKING:
    from datenorm.composition import AppServices


def _load_dotenv() -> None:
    """Load a project-level .env when present."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

#: Fixed zone two hours ahead of UTC with no DST, for deterministic local conversion.
PLUS_TWO = timezone(timedelta(hours=2))


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Fresh CliRunner; use ``result.stdout`` when parsing JSON output."""
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """The ``build_production`` services factory."""
    from datenorm.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Helper removing ANSI escape sequences from rich output."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start with traceback flags off and restore every flag afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the cached layered configuration before the test."""
    from datenorm.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build real ``Config`` objects from plain dicts (no provenance)."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def utc_normalizer() -> DateNormalizer:
    """Normalizer whose local zone is UTC."""
    return DateNormalizer(zone=timezone.utc)


@pytest.fixture
def plus_two_normalizer() -> DateNormalizer:
    """Normalizer whose local zone is a fixed UTC+02:00."""
    return DateNormalizer(zone=PLUS_TWO)


def _services_with_config(config: Config) -> AppServices:
    from datenorm.composition import AppServices, build_production

    def _fake_get_config(**_kwargs: Any) -> Config:
        return config

    prod = build_production()
    return AppServices(
        get_config=_fake_get_config,
        get_default_config_path=prod.get_default_config_path,
        deploy_configuration=prod.deploy_configuration,
        display_config=prod.display_config,
        init_logging=prod.init_logging,
        load_normalizer_config=prod.load_normalizer_config,
    )


@pytest.fixture
def inject_config(clear_config_cache: None) -> Callable[[Config], Callable[[], AppServices]]:
    """Services factory whose ``get_config`` returns the given Config.

    Only the configuration I/O is replaced; every other adapter is real.

    Example:
        def test_config_display(cli_runner, config_factory, inject_config) -> None:
            factory = inject_config(config_factory({"datenorm": {"culture": "invariant"}}))
            result = cli_runner.invoke(cli, ["config"], obj=factory)
    """

    def _inject(config: Config) -> Callable[[], AppServices]:
        services = _services_with_config(config)
        return lambda: services

    return _inject


@pytest.fixture
def dates_cli_context(clear_config_cache: None) -> Callable[..., Callable[[], AppServices]]:
    """Services factory for date commands with a pinned local zone.

    Keyword arguments become ``[datenorm]`` keys; ``local_zone`` defaults to
    ``"UTC"`` so conversions do not depend on the machine's zone.

    Example:
        def test_to_utc(cli_runner, dates_cli_context) -> None:
            factory = dates_cli_context(local_zone="+02:00")
            result = cli_runner.invoke(cli, ["to-utc", "2026-01-03T12:00:00"], obj=factory)
    """

    def _create(**section: Any) -> Callable[[], AppServices]:
        section.setdefault("local_zone", "UTC")
        services = _services_with_config(Config({"datenorm": section}, {}))
        return lambda: services

    return _create


@pytest.fixture
def inject_deploy_configuration() -> Callable[[Callable[..., list[Path]]], Callable[[], AppServices]]:
    """Services factory with a replacement ``deploy_configuration``."""
    from datenorm.composition import AppServices, build_production, build_testing

    def _inject(deploy_fn: Callable[..., list[Path]]) -> Callable[[], AppServices]:
        memory = build_testing()
        services = AppServices(
            get_config=memory.get_config,
            get_default_config_path=memory.get_default_config_path,
            deploy_configuration=deploy_fn,
            display_config=memory.display_config,
            init_logging=build_production().init_logging,
            load_normalizer_config=memory.load_normalizer_config,
        )
        return lambda: services

    return _inject

