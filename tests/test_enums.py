"""Domain enums: values, string equality, and closed member sets."""

from __future__ import annotations

import pytest

from datenorm.domain.enums import DateTimeKind, DeployTarget, OutputFormat


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "value"),
    [
        (DateTimeKind.LOCAL, "local"),
        (DateTimeKind.UTC, "utc"),
        (DateTimeKind.UNSPECIFIED, "unspecified"),
    ],
)
def test_date_time_kind_values_compare_as_strings(member: DateTimeKind, value: str) -> None:
    assert member.value == value
    assert member == value
    assert DateTimeKind(value) is member


@pytest.mark.os_agnostic
def test_date_time_kind_is_a_closed_set_of_three() -> None:
    assert len(DateTimeKind) == 3


@pytest.mark.os_agnostic
def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValueError):
        DateTimeKind("floating")


@pytest.mark.os_agnostic
def test_output_format_members() -> None:
    assert [member.value for member in OutputFormat] == ["human", "json"]


@pytest.mark.os_agnostic
def test_deploy_target_members() -> None:
    assert {member.value for member in DeployTarget} == {"app", "host", "user"}
