"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from clusterlog.adapters.control_plane import ControlPlaneLoggingGateway, ControlPlaneLoggingProbe
from clusterlog.config import get_control_plane_config
from clusterlog.domain.capabilities import (
    CLUSTER_LOG_TYPES,
    ReconciliationExecutor,
    ReconciliationResult,
    resolve_desired_set,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from clusterlog.domain.capabilities import CapabilityCatalog
    from clusterlog.domain.cluster import ClusterRef
    from clusterlog.domain.ports import LoggingApplyGateway, LoggingStateProbe


log = getLogger(__name__)


def update_cluster_logging(
    cluster: ClusterRef,
    enable_types: Sequence[str] | None,
    *,
    approve: bool,
    catalog: CapabilityCatalog = CLUSTER_LOG_TYPES,
    probe: LoggingStateProbe | None = None,
    gateway: LoggingApplyGateway | None = None,
) -> ReconciliationResult:
    """Converge the cluster's CloudWatch log types to ``enable_types``.

    Without ``approve`` the run only reports what it would change. Unknown types
    are rejected before any request reaches the control plane.
    """

    desired = resolve_desired_set(enable_types, catalog)
    log.info("using region %s", cluster.region)

    if probe is None or gateway is None:
        config = get_control_plane_config(region=cluster.region)
        probe = probe or ControlPlaneLoggingProbe(config=config, catalog=catalog)
        gateway = gateway or ControlPlaneLoggingGateway(config=config, catalog=catalog)

    executor = ReconciliationExecutor(catalog=catalog, probe=probe, gateway=gateway)
    return executor.reconcile(cluster, desired, plan_mode=not approve)
