"""Infinite xz plane primitive (y = 0 in object space)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Tuple, vector
from src.whitted.geometry.shape import Shape

if TYPE_CHECKING:
    from src.whitted.scene.intersection import Intersection

UP = vector(0.0, 1.0, 0.0)


class Plane(Shape):
    """The object-space plane y = 0, facing +y."""

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        dy = ray.direction.y
        # Parallel or coplanar rays never register a hit
        if abs(dy) < EPSILON:
            return []
        return [self.intersection(-ray.origin.y / dy)]

    def local_normal_at(self, point: Tuple) -> Tuple:
        return UP
