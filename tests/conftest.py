from __future__ import annotations

import pytest

AWS_ENV = (
    "AWS_PROFILE",
    "AWS_DEFAULT_PROFILE",
    "AWS_DEFAULT_REGION",
    "AWS_ECS_CLUSTER",
    "ECSWATCH_CONFIG",
    "NO_COLOR",
    "FORCE_COLOR",
    "LOGLEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in AWS_ENV:
        monkeypatch.delenv(name, raising=False)
