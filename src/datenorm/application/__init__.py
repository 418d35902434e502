"""Application layer: port Protocols implemented by the adapters."""

from __future__ import annotations

from .ports import (
    DeployConfiguration,
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadNormalizerConfig,
)

__all__ = [
    "DeployConfiguration",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadNormalizerConfig",
]
