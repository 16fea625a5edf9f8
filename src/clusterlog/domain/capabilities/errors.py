"""Error taxonomy for capability reconciliation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class CapabilityError(ValueError):
    """Raised when requested capabilities cannot be interpreted."""


class UnknownCapabilityError(CapabilityError):
    """Raised when a token is not part of the resource type's catalog."""

    def __init__(self, token: str, supported: Sequence[str]) -> None:
        self.token = token
        self.supported = tuple(supported)
        super().__init__(
            f"unknown log type {token}. Supported log types: {', '.join(self.supported)}"
        )


class StateProbeError(RuntimeError):
    """Raised when the current capability set cannot be read."""


class ApplyGatewayError(RuntimeError):
    """Raised when the full-replace update is rejected or fails in transit."""
