"""Domain port definitions for adapters."""

from __future__ import annotations

from .cluster_logging import LoggingApplyGateway, LoggingStateProbe

__all__ = [
    "LoggingApplyGateway",
    "LoggingStateProbe",
]
