"""Small helpers over plain collections."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def get_sum(numbers: Iterable[float]) -> float:
    """Return the sum of ``numbers``, or 0.0 when there are none."""
    return sum(numbers, 0.0)


def get_name(names: Mapping[int, str], key: int) -> str:
    """Return the name stored under ``key``, or an empty string if absent."""
    return names.get(key, "")