"""HTTP adapters for the cluster control-plane API."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from clusterlog.config import ControlPlaneConfig, get_control_plane_config
from clusterlog.domain.capabilities import (
    CLUSTER_LOG_TYPES,
    ApplyGatewayError,
    CapabilityCatalog,
    StateProbeError,
)

from .schema import DescribeClusterResponse, ErrorResponse, UpdateClusterConfigResponse
from .translator import build_update_request, enabled_types_from_logging

if TYPE_CHECKING:
    from collections.abc import Callable

    from clusterlog.domain.capabilities import CapabilitySet
    from clusterlog.domain.cluster import ClusterRef
    from clusterlog.domain.ports import LoggingApplyGateway, LoggingStateProbe

log = getLogger(__name__)


class ControlPlaneAPIError(RuntimeError):
    """Raised when the control plane rejects a request or cannot be reached."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ClusterDescribeError(ControlPlaneAPIError, StateProbeError):
    """Reading the cluster's logging configuration failed."""


class ClusterUpdateError(ControlPlaneAPIError, ApplyGatewayError):
    """Replacing the cluster's logging configuration failed."""


def _default_client_factory(config: ControlPlaneConfig) -> httpx.Client:
    return httpx.Client(
        base_url=config.base_url,
        timeout=config.timeout_seconds,
        headers=config.headers(),
    )


def _cluster_path(cluster: ClusterRef) -> str:
    return f"/clusters/{quote(cluster.name, safe='')}"


def _error_message(response: httpx.Response) -> str:
    detail: str | None = None
    try:
        detail = ErrorResponse.model_validate(response.json()).message
    except ValueError:
        detail = response.text.strip() or None
    reason = detail or response.reason_phrase
    request = response.request
    return f"{request.method} {request.url.path} returned {response.status_code}: {reason}"


@dataclass(slots=True)
class _ControlPlaneCaller:
    config: ControlPlaneConfig
    client_factory: Callable[[ControlPlaneConfig], httpx.Client]

    def request(
        self,
        method: str,
        path: str,
        *,
        error_type: type[ControlPlaneAPIError],
        json: Any = None,
    ) -> Any:
        try:
            with self.client_factory(self.config) as client:
                response = client.request(
                    method,
                    path,
                    params={"region": self.config.region},
                    json=json,
                )
        except httpx.HTTPError as exc:
            raise error_type(f"{method} {path} failed: {exc}") from exc

        if response.is_error:
            raise error_type(_error_message(response), status_code=response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            raise error_type(
                f"{method} {path} returned a non-JSON body", status_code=response.status_code
            ) from exc


@dataclass(slots=True)
class ControlPlaneLoggingProbe:
    """Read the enabled log types from ``GET /clusters/{name}``."""

    config: ControlPlaneConfig = field(default_factory=get_control_plane_config)
    catalog: CapabilityCatalog = CLUSTER_LOG_TYPES
    client_factory: Callable[[ControlPlaneConfig], httpx.Client] = field(
        default=_default_client_factory
    )

    def __call__(self, cluster: ClusterRef) -> CapabilitySet:
        caller = _ControlPlaneCaller(self.config, self.client_factory)
        payload = caller.request("GET", _cluster_path(cluster), error_type=ClusterDescribeError)
        try:
            response = DescribeClusterResponse.model_validate(payload)
        except ValidationError as exc:
            raise ClusterDescribeError(f"Unexpected describe payload for {cluster}: {exc}") from exc

        current = enabled_types_from_logging(response.cluster.logging, self.catalog)
        log.debug("Currently enabled log types for %s: %s", cluster, sorted(current))
        return current


@dataclass(slots=True)
class ControlPlaneLoggingGateway:
    """Replace the enabled log types via ``POST /clusters/{name}/update-config``."""

    config: ControlPlaneConfig = field(default_factory=get_control_plane_config)
    catalog: CapabilityCatalog = CLUSTER_LOG_TYPES
    client_factory: Callable[[ControlPlaneConfig], httpx.Client] = field(
        default=_default_client_factory
    )

    def __call__(self, cluster: ClusterRef, enabled: CapabilitySet) -> None:
        request = build_update_request(enabled, self.catalog)
        caller = _ControlPlaneCaller(self.config, self.client_factory)
        payload = caller.request(
            "POST",
            f"{_cluster_path(cluster)}/update-config",
            error_type=ClusterUpdateError,
            json=request.model_dump(mode="json", by_alias=True),
        )
        try:
            response = UpdateClusterConfigResponse.model_validate(payload)
        except ValidationError as exc:
            raise ClusterUpdateError(f"Unexpected update payload for {cluster}: {exc}") from exc

        log.debug(
            "Submitted logging update %s for %s (status=%s)",
            response.update.id,
            cluster,
            response.update.status,
        )


if TYPE_CHECKING:
    _probe_check: LoggingStateProbe = ControlPlaneLoggingProbe()
    _gateway_check: LoggingApplyGateway = ControlPlaneLoggingGateway()
