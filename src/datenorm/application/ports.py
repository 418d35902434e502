"""Callable Protocols that adapter functions satisfy structurally.

Infrastructure types are imported under ``TYPE_CHECKING`` only, so this
layer stays free of runtime adapter imports.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import DeployTarget, OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import NormalizerConfig


class GetConfig(Protocol):
    """Load layered configuration on top of the bundled defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the bundled ``defaultconfig.toml`` path."""

    def __call__(self) -> Path: ...


class DeployConfiguration(Protocol):
    """Write the default configuration into the given layers."""

    def __call__(
        self,
        *,
        targets: Sequence[DeployTarget],
        force: bool = ...,
        profile: str | None = ...,
    ) -> list[Path]: ...


class DisplayConfig(Protocol):
    """Print configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialise the logging runtime from configuration."""

    def __call__(self, config: Config) -> None: ...


class LoadNormalizerConfig(Protocol):
    """Validate the ``[datenorm]`` section into normalizer settings."""

    def __call__(self, config: Config) -> NormalizerConfig: ...


__all__ = [
    "DeployConfiguration",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadNormalizerConfig",
]
