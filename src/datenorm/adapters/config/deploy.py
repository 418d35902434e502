"""Copy the bundled ``defaultconfig.toml`` into app/host/user config layers."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import deploy_config
from lib_layered_config.examples.deploy import DeployAction

from datenorm import __init__conf__
from datenorm.adapters.config.loader import get_default_config_path, validate_profile
from datenorm.domain.enums import DeployTarget

_WRITTEN = frozenset({DeployAction.CREATED, DeployAction.OVERWRITTEN})


def deploy_configuration(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
) -> list[Path]:
    """Deploy the default configuration to the requested layers.

    Existing files are left alone unless ``force`` is set. On Linux the user
    layer lands in ``~/.config/datenorm/config.toml``; a profile inserts
    ``profile/<name>/`` into that path.

    Args:
        targets: Layers to write.
        force: Overwrite files that already exist.
        profile: Optional profile name.

    Returns:
        Paths that were created or overwritten. Empty when nothing changed.

    Raises:
        PermissionError: Writing app/host layers without privileges.
        ValueError: Invalid profile name.
    """
    if profile is not None:
        validate_profile(profile)

    results = deploy_config(
        source=get_default_config_path(),
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        targets=[target.value for target in targets],
        force=force,
    )

    written: list[Path] = []
    for result in results:
        if result.action in _WRITTEN:
            written.append(result.destination)
        written.extend(extra.destination for extra in result.dot_d_results if extra.action in _WRITTEN)
    return written


__all__ = ["deploy_configuration"]
