"""Control-plane adapter for cluster logging configuration."""

from __future__ import annotations

from .client import (
    ClusterDescribeError,
    ClusterUpdateError,
    ControlPlaneAPIError,
    ControlPlaneLoggingGateway,
    ControlPlaneLoggingProbe,
)
from .schema import DescribeClusterResponse, UpdateClusterConfigRequest, UpdateClusterConfigResponse
from .translator import build_update_request, enabled_types_from_logging

__all__ = [
    "ClusterDescribeError",
    "ClusterUpdateError",
    "ControlPlaneAPIError",
    "ControlPlaneLoggingGateway",
    "ControlPlaneLoggingProbe",
    "DescribeClusterResponse",
    "UpdateClusterConfigRequest",
    "UpdateClusterConfigResponse",
    "build_update_request",
    "enabled_types_from_logging",
]
