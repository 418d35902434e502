"""In-memory implementations of the application ports, for tests.

Contents:
    * :mod:`.config` - Configuration and normalizer-settings adapters
    * :mod:`.logging` - Logging initialiser
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    deploy_configuration_in_memory,
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
    load_normalizer_config_in_memory,
)
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from datenorm.application.ports import (
        DeployConfiguration,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadNormalizerConfig,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_deploy_configuration: DeployConfiguration = deploy_configuration_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_load_normalizer_config: LoadNormalizerConfig = load_normalizer_config_in_memory

__all__ = [
    "deploy_configuration_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
    "load_normalizer_config_in_memory",
]
