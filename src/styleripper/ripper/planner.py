"""Rename planner: ranks classnames by byte weight and assigns short names."""

from __future__ import annotations

import string
from collections.abc import Mapping

ALPHABET = string.ascii_lowercase


def byte_weight(name: str, count: int) -> int:
    """Bytes a classname occupies across the build unit: ``count * len(name)``."""
    return count * len(name)


def rank_classnames(counts: Mapping[str, int]) -> list[str]:
    """Return classnames sorted by descending byte weight.

    The sort is stable, so classnames of equal weight keep the order in which
    they were first counted (HTML document order, then CSS order).
    """
    return sorted(counts, key=lambda name: -byte_weight(name, counts[name]))


def shortest_name(index: int) -> str:
    """Map a rank index to a short identifier.

    ``0..25`` give ``a..z``; after that each round of 26 appends the round
    number: ``26 -> a0``, ``51 -> z0``, ``52 -> a1`` and so on.
    """
    if index < 0:
        raise ValueError(f"index must be non-negative, got {index}")
    rounds, position = divmod(index, len(ALPHABET))
    if rounds == 0:
        return ALPHABET[position]
    return f"{ALPHABET[position]}{rounds - 1}"


def plan_renames(ranking: list[str]) -> dict[str, str]:
    """Assign ``shortest_name(i)`` to the classname at rank ``i``."""
    return {name: shortest_name(index) for index, name in enumerate(ranking)}
