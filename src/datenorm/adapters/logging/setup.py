"""lib_log_rich runtime setup shared by the console script and ``python -m``.

Domain code logs through the standard :mod:`logging` module; this adapter
initialises lib_log_rich once and bridges stdlib records into it.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from datenorm import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` section.

    Keys other than ``service`` and ``environment`` pass straight through
    to ``RuntimeConfig``.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(service="datenorm-batch").service
        'datenorm-batch'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    section: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialise lib_log_rich from ``config`` unless already running.

    Loads ``.env`` first so ``LOG_*`` variables take effect, then attaches
    the stdlib bridge so ``logging.getLogger(__name__)`` records reach the
    rich console.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
