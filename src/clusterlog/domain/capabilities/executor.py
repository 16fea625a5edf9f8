"""Single-pass reconciliation of a cluster's enabled log types.

States, in order:
1) probe the current set (failures propagate, nothing else runs)
2) diff against the desired set
3) stop as up-to-date, stop after reporting in plan mode, or apply once

The executor holds no state between calls; ``plan_mode`` is always passed in
explicitly so the no-mutation guarantee can be checked at the call site.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Final

from .plan import ReconciliationPlan, plan_reconciliation

if TYPE_CHECKING:
    from clusterlog.domain.cluster import ClusterRef
    from clusterlog.domain.ports import LoggingApplyGateway, LoggingStateProbe

    from .catalog import CapabilityCatalog, CapabilitySet

log = getLogger(__name__)

PLAN_MODE_ADVISORY: Final[str] = (
    "no changes were applied, run again with '--approve' to apply the changes"
)


class ReconciliationOutcome(StrEnum):
    UP_TO_DATE = "up_to_date"
    PLANNED_ONLY = "planned_only"
    APPLIED = "applied"


@dataclass(frozen=True, slots=True)
class ReconciliationResult:
    cluster: ClusterRef
    outcome: ReconciliationOutcome
    plan: ReconciliationPlan

    @property
    def changed(self) -> bool:
        return self.outcome is ReconciliationOutcome.APPLIED


def _log_intended_action(cluster: ClusterRef, plan: ReconciliationPlan, *, plan_mode: bool) -> None:
    prefix = "(plan) " if plan_mode else ""
    log.info(
        "%supdate CloudWatch logging for %s (%s)",
        prefix,
        cluster,
        plan.report.describe(),
    )


@dataclass(slots=True)
class ReconciliationExecutor:
    """Converge the remote log configuration towards a desired set."""

    catalog: CapabilityCatalog
    probe: LoggingStateProbe
    gateway: LoggingApplyGateway

    def reconcile(
        self,
        cluster: ClusterRef,
        desired: CapabilitySet,
        *,
        plan_mode: bool,
    ) -> ReconciliationResult:
        current = self.probe(cluster)
        plan = plan_reconciliation(desired, current, self.catalog)
        log.debug("Reconciliation plan for %s: %r", cluster, plan)

        if not plan.update_required:
            log.info("CloudWatch logging for %s is already up-to-date", cluster)
            return ReconciliationResult(
                cluster=cluster,
                outcome=ReconciliationOutcome.UP_TO_DATE,
                plan=plan,
            )

        _log_intended_action(cluster, plan, plan_mode=plan_mode)
        if plan_mode:
            log.warning(PLAN_MODE_ADVISORY)
            return ReconciliationResult(
                cluster=cluster,
                outcome=ReconciliationOutcome.PLANNED_ONLY,
                plan=plan,
            )

        self.gateway(cluster, plan.wire_state)
        log.info("Updated CloudWatch logging for %s", cluster)
        return ReconciliationResult(
            cluster=cluster,
            outcome=ReconciliationOutcome.APPLIED,
            plan=plan,
        )
