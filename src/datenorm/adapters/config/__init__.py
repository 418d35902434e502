"""Configuration adapter built on lib_layered_config.

Contents:
    * :mod:`.loader` - Cached layered loading
    * :mod:`.settings` - ``[datenorm]`` validation and normalizer construction
    * :mod:`.deploy` - Writing defaults into config layers
    * :mod:`.display` - Human/JSON configuration dumps
    * :mod:`.overrides` - ``--set`` parsing
"""

from __future__ import annotations

from .deploy import deploy_configuration
from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import NormalizerConfig, load_normalizer, load_normalizer_config, resolve_zone

__all__ = [
    "NormalizerConfig",
    "apply_overrides",
    "deploy_configuration",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_normalizer",
    "load_normalizer_config",
    "resolve_zone",
]
