"""Deployment adapter: arguments passed to lib_layered_config and result filtering."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest
from lib_layered_config.examples.deploy import DeployAction

from datenorm.adapters.config import deploy as deploy_mod
from datenorm.adapters.config.deploy import deploy_configuration
from datenorm.domain.enums import DeployTarget


def _result(path: str, action: object, extras: tuple[Any, ...] = ()) -> SimpleNamespace:
    return SimpleNamespace(destination=Path(path), action=action, dot_d_results=list(extras))


@pytest.mark.os_agnostic
def test_deploy_returns_only_written_paths(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, Any]] = []

    def fake_deploy_config(**kwargs: Any) -> list[SimpleNamespace]:
        calls.append(kwargs)
        return [
            _result(
                "/home/u/.config/datenorm/config.toml",
                DeployAction.CREATED,
                (_result("/home/u/.config/datenorm/config.d/10-zones.toml", DeployAction.OVERWRITTEN),),
            ),
            _result("/etc/xdg/datenorm/hosts/build01.toml", "skipped"),
        ]

    monkeypatch.setattr(deploy_mod, "deploy_config", fake_deploy_config)

    written = deploy_configuration(targets=[DeployTarget.USER, DeployTarget.HOST], force=True, profile="staging")

    assert written == [
        Path("/home/u/.config/datenorm/config.toml"),
        Path("/home/u/.config/datenorm/config.d/10-zones.toml"),
    ]
    assert calls[0]["targets"] == ["user", "host"]
    assert calls[0]["force"] is True
    assert calls[0]["profile"] == "staging"
    assert calls[0]["slug"] == "datenorm"
    assert calls[0]["source"].name == "defaultconfig.toml"


@pytest.mark.os_agnostic
def test_deploy_rejects_unsafe_profiles_before_writing(monkeypatch: pytest.MonkeyPatch) -> None:
    def must_not_run(**_kwargs: Any) -> list[Any]:
        raise AssertionError("deploy_config must not be called")

    monkeypatch.setattr(deploy_mod, "deploy_config", must_not_run)

    with pytest.raises(ValueError):
        deploy_configuration(targets=[DeployTarget.USER], profile="../../x")
