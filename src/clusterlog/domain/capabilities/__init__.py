"""Capability-set reconciliation for managed cluster resources.

Flow for one invocation:
1) resolve user tokens into a desired set (``resolve``)
2) probe the remote for the current set (port)
3) diff desired against current into a plan (``plan``)
4) report, or apply the full desired set once (``executor``)
"""

from __future__ import annotations

from .catalog import (
    ALL_TOKEN,
    CLUSTER_LOG_TYPES,
    CapabilityCatalog,
    CapabilitySet,
    CapabilityToken,
    supported_cluster_log_types,
)
from .errors import (
    ApplyGatewayError,
    CapabilityError,
    StateProbeError,
    UnknownCapabilityError,
)
from .executor import (
    PLAN_MODE_ADVISORY,
    ReconciliationExecutor,
    ReconciliationOutcome,
    ReconciliationResult,
)
from .plan import CapabilityPartition, ReconciliationPlan, ReportDelta, plan_reconciliation
from .resolve import resolve_desired_set

__all__ = [
    "ALL_TOKEN",
    "CLUSTER_LOG_TYPES",
    "PLAN_MODE_ADVISORY",
    "ApplyGatewayError",
    "CapabilityCatalog",
    "CapabilityError",
    "CapabilityPartition",
    "CapabilitySet",
    "CapabilityToken",
    "ReconciliationExecutor",
    "ReconciliationOutcome",
    "ReconciliationPlan",
    "ReconciliationResult",
    "ReportDelta",
    "StateProbeError",
    "UnknownCapabilityError",
    "plan_reconciliation",
    "resolve_desired_set",
    "supported_cluster_log_types",
]
