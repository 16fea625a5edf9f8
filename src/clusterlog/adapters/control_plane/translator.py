"""Translation between control-plane logging payloads and capability sets."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .schema import LoggingModel, LogSetupModel, UpdateClusterConfigRequest

if TYPE_CHECKING:
    from clusterlog.domain.capabilities import CapabilityCatalog, CapabilitySet

log = getLogger(__name__)


def enabled_types_from_logging(
    logging_model: LoggingModel,
    catalog: CapabilityCatalog,
) -> CapabilitySet:
    """Union of the types in every enabled group, restricted to ``catalog``."""

    enabled: set[str] = set()
    for setup in logging_model.cluster_logging:
        if setup.enabled:
            enabled.update(setup.types)

    unknown = sorted(token for token in enabled if token not in catalog)
    if unknown:
        log.warning("Ignoring log types not in the %s catalog: %s", catalog.resource_type, unknown)
    return frozenset(token for token in enabled if token in catalog)


def build_update_request(
    enabled: CapabilitySet,
    catalog: CapabilityCatalog,
) -> UpdateClusterConfigRequest:
    """Full-replace request: every catalog type lands in the enabled or disabled group."""

    groups: list[LogSetupModel] = []
    enabled_types = [token for token in catalog.tokens if token in enabled]
    disabled_types = [token for token in catalog.tokens if token not in enabled]
    if enabled_types:
        groups.append(LogSetupModel(types=enabled_types, enabled=True))
    if disabled_types:
        groups.append(LogSetupModel(types=disabled_types, enabled=False))
    return UpdateClusterConfigRequest(logging=LoggingModel(cluster_logging=groups))
