from __future__ import annotations

import pytest

from clusterlog.config.control_plane import ENDPOINT_ENV, REGION_ENV, TIMEOUT_ENV, TOKEN_ENV
from tests.helpers.cluster_logging import FakeLoggingApplyGateway


@pytest.fixture(autouse=True)
def _clean_control_plane_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (ENDPOINT_ENV, REGION_ENV, TOKEN_ENV, TIMEOUT_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def gateway() -> FakeLoggingApplyGateway:
    return FakeLoggingApplyGateway()
