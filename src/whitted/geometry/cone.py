"""Double-napped cone around the object-space y axis.

The side is x^2 - y^2 + z^2 = 0, so the radius at height y is |y| and the
two nappes meet at the origin. Truncation and caps work as for the
cylinder, except that each cap's radius is the absolute value of its bound.

When the ray runs parallel to one nappe the quadratic coefficient ``a``
vanishes and the equation degrades to the linear b*t + c = 0, which still
yields a single hit on the other nappe.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Tuple, vector
from src.whitted.geometry.cylinder import CappedShape

if TYPE_CHECKING:
    from src.whitted.scene.intersection import Intersection


class Cone(CappedShape):
    """A double-napped cone on the y axis, infinite unless bounded."""

    def cap_radius_squared(self, y: float) -> float:
        return y * y

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        ox, oy, oz = ray.origin.x, ray.origin.y, ray.origin.z
        dx, dy, dz = ray.direction.x, ray.direction.y, ray.direction.z

        a = dx * dx - dy * dy + dz * dz
        b = 2.0 * ox * dx - 2.0 * oy * dy + 2.0 * oz * dz
        c = ox * ox - oy * oy + oz * oz

        a_zero = abs(a) < EPSILON
        b_zero = abs(b) < EPSILON

        xs: list[Intersection] = []
        if a_zero and not b_zero:
            t = -c / (2.0 * b)
            if self._within_bounds(ray, t):
                xs.append(self.intersection(t))
        elif not a_zero:
            disc = b * b - 4.0 * a * c
            # Rays grazing a nappe can round the discriminant just below zero
            if disc < -EPSILON:
                return []

            sqrt_d = math.sqrt(max(disc, 0.0))
            t0 = (-b - sqrt_d) / (2.0 * a)
            t1 = (-b + sqrt_d) / (2.0 * a)
            if t0 > t1:
                t0, t1 = t1, t0

            for t in (t0, t1):
                if self._within_bounds(ray, t):
                    xs.append(self.intersection(t))

        xs.extend(self.intersect_caps(ray))
        return xs

    def local_normal_at(self, point: Tuple) -> Tuple:
        cap = self._cap_normal(point)
        if cap is not None:
            return cap

        y = math.sqrt(point.x**2 + point.z**2)
        if point.y > 0.0:
            y = -y
        return vector(point.x, y, point.z)
