"""Diff between desired and observed capability sets.

The remote update is a full replace: it always receives the complete enabled
set. A plan therefore carries two distinct views:
- ``wire_state``/``partition``: what is sent (the whole desired partition)
- ``report``: what actually changes, used only for human-readable output
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import UnknownCapabilityError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .catalog import CapabilityCatalog, CapabilitySet


def _describe(verb: str, tokens: Iterable[str]) -> str:
    ordered = sorted(tokens)
    if not ordered:
        return f"no types to {verb}"
    return f"{verb} types: {', '.join(ordered)}"


@dataclass(frozen=True, slots=True)
class CapabilityPartition:
    """Full enabled/disabled split of the catalog."""

    enabled: CapabilitySet
    disabled: CapabilitySet


@dataclass(frozen=True, slots=True)
class ReportDelta:
    """Tokens whose state changes; never sent over the wire."""

    to_enable: CapabilitySet
    to_disable: CapabilitySet

    def describe_enable(self) -> str:
        return _describe("enable", self.to_enable)

    def describe_disable(self) -> str:
        return _describe("disable", self.to_disable)

    def describe(self) -> str:
        return f"{self.describe_enable()} & {self.describe_disable()}"


@dataclass(frozen=True, slots=True)
class ReconciliationPlan:
    wire_state: CapabilitySet
    partition: CapabilityPartition
    report: ReportDelta
    update_required: bool


def plan_reconciliation(
    desired: CapabilitySet,
    current: CapabilitySet,
    catalog: CapabilityCatalog,
) -> ReconciliationPlan:
    """Build the plan converging ``current`` towards ``desired``."""

    for token in sorted(desired):
        if token not in catalog:
            raise UnknownCapabilityError(token, catalog.supported())

    desired = frozenset(desired)
    current = frozenset(current)
    return ReconciliationPlan(
        wire_state=desired,
        partition=CapabilityPartition(
            enabled=desired,
            disabled=catalog.as_set() - desired,
        ),
        report=ReportDelta(
            to_enable=desired - current,
            to_disable=current - desired,
        ),
        update_required=current != desired,
    )
