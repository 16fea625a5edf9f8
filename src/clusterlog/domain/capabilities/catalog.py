"""Static catalogs of capability tokens per resource type.

A catalog is a plain immutable value passed to the resolver, the diff and the
executor. Nothing looks it up globally, so tests can swap in any catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, TypeAlias

CapabilityToken: TypeAlias = str
CapabilitySet: TypeAlias = frozenset[CapabilityToken]

ALL_TOKEN: Final[str] = "all"


@dataclass(frozen=True, slots=True)
class CapabilityCatalog:
    """Complete, ordered list of tokens a resource type supports."""

    resource_type: str
    tokens: tuple[CapabilityToken, ...]

    def __post_init__(self) -> None:
        if len(set(self.tokens)) != len(self.tokens):
            raise ValueError(f"Duplicate tokens in {self.resource_type} catalog")
        if ALL_TOKEN in self.tokens:
            raise ValueError(f"'{ALL_TOKEN}' is reserved and cannot be a catalog token")

    def __contains__(self, token: object) -> bool:
        return token in self.tokens

    def __len__(self) -> int:
        return len(self.tokens)

    def as_set(self) -> CapabilitySet:
        return frozenset(self.tokens)

    def supported(self) -> list[CapabilityToken]:
        return list(self.tokens)


CLUSTER_LOG_TYPES: Final[CapabilityCatalog] = CapabilityCatalog(
    resource_type="cluster-logging",
    tokens=("api", "audit", "authenticator", "controllerManager", "scheduler"),
)


def supported_cluster_log_types() -> list[CapabilityToken]:
    return CLUSTER_LOG_TYPES.supported()
