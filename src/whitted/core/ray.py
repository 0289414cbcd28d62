"""Ray data structure and reflection helper.

A ray is an origin point plus a direction vector. Rays are the only values
that cross the world/object space boundary, so the point/vector contract is
checked when a ray is built.

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuples import point, vector
    >>> ray = Ray(point(2, 3, 4), vector(1, 0, 0))
    >>> ray.position(2.5)  # point(4.5, 3, 4)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.whitted.core.matrix import Matrix
from src.whitted.core.tuples import Tuple


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray (w=1).
        direction: The direction vector of the ray (w=0). Not required to be
            unit length; object-space rays are generally not.
    """

    origin: Tuple
    direction: Tuple

    def __post_init__(self) -> None:
        assert self.origin.is_point(), f"ray origin must be a point, got {self.origin!r}"
        assert self.direction.is_vector(), f"ray direction must be a vector, got {self.direction!r}"

    def position(self, t: float) -> Tuple:
        """Compute the point along the ray at parameter t."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Return the ray with origin and direction mapped through a matrix."""
        return Ray(matrix @ self.origin, matrix @ self.direction)


def reflect(incident: Tuple, normal: Tuple) -> Tuple:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction vector.
        normal: The surface normal (should be normalized).

    Returns:
        The reflected direction vector.
    """
    return incident - normal * (2.0 * incident.dot(normal))
