"""Axis-aligned cube primitive spanning [-1, 1] on every object-space axis.

Intersection uses the slab method: each axis contributes the interval of t
over which the ray lies between that axis' two faces, and the ray hits the
cube when the intersection of the three intervals is non-empty, i.e. when
max(tmin) <= min(tmax).
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Tuple, vector
from src.whitted.geometry.shape import Shape

if TYPE_CHECKING:
    from src.whitted.scene.intersection import Intersection


def check_axis(origin: float, direction: float) -> tuple[float, float]:
    """Compute the t interval between the -1 and +1 slabs of one axis.

    Args:
        origin: The ray origin component on this axis.
        direction: The ray direction component on this axis.

    Returns:
        Tuple of (tmin, tmax) with tmin <= tmax. When the ray is parallel to
        the slabs the bounds are infinite.
    """
    tmin_numerator = -1.0 - origin
    tmax_numerator = 1.0 - origin

    if abs(direction) >= EPSILON:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        tmin = math.copysign(math.inf, tmin_numerator)
        tmax = math.copysign(math.inf, tmax_numerator)

    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


class Cube(Shape):
    """An axis-aligned cube of half-size 1 at the object-space origin."""

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        xtmin, xtmax = check_axis(ray.origin.x, ray.direction.x)
        ytmin, ytmax = check_axis(ray.origin.y, ray.direction.y)
        ztmin, ztmax = check_axis(ray.origin.z, ray.direction.z)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)
        if tmin > tmax:
            return []
        return [self.intersection(tmin), self.intersection(tmax)]

    def local_normal_at(self, point: Tuple) -> Tuple:
        ax, ay, az = abs(point.x), abs(point.y), abs(point.z)
        maxc = max(ax, ay, az)

        if maxc == ax:
            return vector(point.x, 0.0, 0.0)
        if maxc == ay:
            return vector(0.0, point.y, 0.0)
        return vector(0.0, 0.0, point.z)
