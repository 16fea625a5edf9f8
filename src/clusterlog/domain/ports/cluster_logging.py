"""Ports for reading and replacing a cluster's enabled log types."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from clusterlog.domain.capabilities.catalog import CapabilitySet
    from clusterlog.domain.cluster import ClusterRef


@runtime_checkable
class LoggingStateProbe(Protocol):
    """Return the authoritative set of log types currently enabled."""

    def __call__(self, cluster: ClusterRef) -> CapabilitySet: ...


@runtime_checkable
class LoggingApplyGateway(Protocol):
    """Make ``enabled`` the complete set of enabled log types (replace, not patch)."""

    def __call__(self, cluster: ClusterRef, enabled: CapabilitySet) -> None: ...


__all__ = ["LoggingApplyGateway", "LoggingStateProbe"]
