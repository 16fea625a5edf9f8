from __future__ import annotations

import pytest

from clusterlog.adapters.control_plane import ControlPlaneLoggingGateway, ControlPlaneLoggingProbe
from clusterlog.app import update_cluster_logging
from clusterlog.config import MissingConfigurationError
from clusterlog.domain.capabilities import (
    CLUSTER_LOG_TYPES,
    ReconciliationOutcome,
    UnknownCapabilityError,
)
from tests.helpers.cluster_logging import (
    SMALL_CATALOG,
    FakeLoggingApplyGateway,
    FakeLoggingStateProbe,
    make_cluster,
)


def test_without_approve_only_plans(gateway: FakeLoggingApplyGateway) -> None:
    result = update_cluster_logging(
        make_cluster(),
        ["all"],
        approve=False,
        probe=FakeLoggingStateProbe({"api"}),
        gateway=gateway,
    )

    assert result.outcome is ReconciliationOutcome.PLANNED_ONLY
    assert result.plan.report.to_enable == {
        "audit",
        "authenticator",
        "controllerManager",
        "scheduler",
    }
    assert not gateway.called


def test_with_approve_applies(gateway: FakeLoggingApplyGateway) -> None:
    cluster = make_cluster()

    result = update_cluster_logging(
        cluster,
        ["audit"],
        approve=True,
        probe=FakeLoggingStateProbe({"api"}),
        gateway=gateway,
    )

    assert result.outcome is ReconciliationOutcome.APPLIED
    assert gateway.calls == [(cluster, frozenset({"audit"}))]


def test_unknown_type_fails_before_probing(gateway: FakeLoggingApplyGateway) -> None:
    probe = FakeLoggingStateProbe({"api"})

    with pytest.raises(UnknownCapabilityError) as exc:
        update_cluster_logging(
            make_cluster(), ["bogus"], approve=True, probe=probe, gateway=gateway
        )

    assert exc.value.token == "bogus"
    assert len(exc.value.supported) == len(CLUSTER_LOG_TYPES)
    assert probe.calls == []
    assert not gateway.called


def test_custom_catalog_is_used_end_to_end(gateway: FakeLoggingApplyGateway) -> None:
    result = update_cluster_logging(
        make_cluster(),
        ["all"],
        approve=True,
        catalog=SMALL_CATALOG,
        probe=FakeLoggingStateProbe({"alpha"}),
        gateway=gateway,
    )

    assert result.plan.partition.disabled == frozenset()
    assert gateway.calls[0][1] == SMALL_CATALOG.as_set()


def test_default_adapters_need_endpoint_configuration() -> None:
    with pytest.raises(MissingConfigurationError, match="CLUSTERLOG_ENDPOINT"):
        update_cluster_logging(make_cluster(), ["api"], approve=False)


def test_default_adapters_are_built_for_cluster_region(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("CLUSTERLOG_ENDPOINT", "https://control-plane.test")
    captured: dict[str, object] = {}

    def fake_probe_call(self: ControlPlaneLoggingProbe, cluster: object) -> frozenset[str]:
        captured["probe_region"] = self.config.region
        captured["cluster"] = cluster
        return frozenset({"api"})

    def fake_gateway_call(
        self: ControlPlaneLoggingGateway, cluster: object, enabled: frozenset[str]
    ) -> None:
        captured["gateway_region"] = self.config.region
        captured["enabled"] = enabled

    monkeypatch.setattr(ControlPlaneLoggingProbe, "__call__", fake_probe_call)
    monkeypatch.setattr(ControlPlaneLoggingGateway, "__call__", fake_gateway_call)

    cluster = make_cluster(region="sa-east-1")
    result = update_cluster_logging(cluster, ["api", "audit"], approve=True)

    assert result.outcome is ReconciliationOutcome.APPLIED
    assert captured == {
        "probe_region": "sa-east-1",
        "cluster": cluster,
        "gateway_region": "sa-east-1",
        "enabled": frozenset({"api", "audit"}),
    }
