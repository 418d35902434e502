"""In-memory configuration adapters used by ``build_testing``.

Nothing here touches the filesystem or lib_layered_config's search paths.
"""

from __future__ import annotations

import tempfile
from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import Config

from ...adapters.config.settings import NormalizerConfig, load_normalizer_config_from_dict
from ...domain.enums import DeployTarget, OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty Config; ``--set`` overrides still apply on top."""
    return Config({}, {})


def get_default_config_path_in_memory() -> Path:
    """Return a path that is never read."""
    return Path(tempfile.gettempdir()) / "datenorm" / "defaultconfig.toml"


def deploy_configuration_in_memory(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
) -> list[Path]:
    """Pretend every target already exists."""
    return []


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op."""


def load_normalizer_config_in_memory(config: Config) -> NormalizerConfig:
    """Validate ``[datenorm]`` with the local zone pinned to UTC unless set.

    Keeps conversions independent of the machine running the tests.

    Example:
        >>> load_normalizer_config_in_memory(Config({}, {})).local_zone
        'UTC'
    """
    data = config.as_dict()
    section = dict(data.get("datenorm") or {})
    section.setdefault("local_zone", "UTC")
    return load_normalizer_config_from_dict({"datenorm": section})


__all__ = [
    "deploy_configuration_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "load_normalizer_config_in_memory",
]
