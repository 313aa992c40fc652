"""Three-dimensional points and nearest-point lookup."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Vector:
    """A point in three-dimensional space."""

    x: float
    y: float
    z: float


def square_distance(a: Vector, b: Vector) -> float:
    """Return the squared Euclidean distance between ``a`` and ``b``."""
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2 + (a.z - b.z) ** 2


def distance(a: Vector, b: Vector) -> float:
    """Return the Euclidean distance between ``a`` and ``b``."""
    return math.sqrt(square_distance(a, b))


def closest_vector(origin: Vector, vectors: Iterable[Vector]) -> Optional[Vector]:
    """Return the vector nearest to ``origin``, or None if there are none.

    Ties go to the first of the nearest vectors.
    """
    return min(vectors, key=lambda v: square_distance(origin, v), default=None)