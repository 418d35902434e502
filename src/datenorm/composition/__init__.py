"""Composition root: wires adapters into :class:`AppServices`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.deploy import deploy_configuration
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.config.settings import load_normalizer, load_normalizer_config
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..application.ports import (
        DeployConfiguration,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadNormalizerConfig,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_deploy_configuration: DeployConfiguration = deploy_configuration
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_load_normalizer_config: LoadNormalizerConfig = load_normalizer_config


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding one implementation per application port."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    deploy_configuration: DeployConfiguration
    display_config: DisplayConfig
    init_logging: InitLogging
    load_normalizer_config: LoadNormalizerConfig


def build_production() -> AppServices:
    """Wire the real adapters."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        deploy_configuration=deploy_configuration,
        display_config=display_config,
        init_logging=init_logging,
        load_normalizer_config=load_normalizer_config,
    )


def build_testing() -> AppServices:
    """Wire the in-memory adapters.

    Configuration starts empty, logging stays uninitialised and the local
    zone defaults to UTC.
    """
    from ..adapters.memory import (
        deploy_configuration_in_memory,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
        load_normalizer_config_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        deploy_configuration=deploy_configuration_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        load_normalizer_config=load_normalizer_config_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "deploy_configuration",
    "display_config",
    "get_config",
    "get_default_config_path",
    "init_logging",
    "load_normalizer",
    "load_normalizer_config",
]
