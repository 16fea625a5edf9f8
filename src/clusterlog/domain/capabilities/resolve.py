"""Expansion of user-supplied tokens into a desired capability set."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .catalog import ALL_TOKEN
from .errors import UnknownCapabilityError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .catalog import CapabilityCatalog, CapabilitySet


def resolve_desired_set(
    tokens: Sequence[str] | None,
    catalog: CapabilityCatalog,
) -> CapabilitySet:
    """Return the deduplicated set of tokens the user wants enabled.

    An empty request means "enable nothing". The single token ``all`` expands to
    the whole catalog; anywhere else it is treated like any other unknown token.
    """

    if not tokens:
        return frozenset()
    if len(tokens) == 1 and tokens[0] == ALL_TOKEN:
        return catalog.as_set()

    desired: set[str] = set()
    for token in tokens:
        if token not in catalog:
            raise UnknownCapabilityError(token, catalog.supported())
        desired.add(token)
    return frozenset(desired)
