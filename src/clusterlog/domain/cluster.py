"""Identity of the managed cluster targeted by one invocation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ClusterRef:
    name: str
    region: str

    def __str__(self) -> str:
        return f'cluster "{self.name}" in "{self.region}"'
