"""Radius-1 cylinder around the object-space y axis.

The side is the quadric x^2 + z^2 = 1, optionally truncated to
``minimum < y < maximum`` (exclusive). A closed cylinder also carries flat
end caps at both bounds, found with a plane test at each bound plus a
radius check.
"""

from __future__ import annotations

import math
from abc import abstractmethod
from typing import TYPE_CHECKING

from src.whitted.core.matrix import IDENTITY, Matrix
from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Tuple, vector
from src.whitted.geometry.shape import Shape
from src.whitted.materials.material import Material

if TYPE_CHECKING:
    from src.whitted.scene.intersection import Intersection


class CappedShape(Shape):
    """Base for y-axis quadrics truncated to [minimum, maximum].

    Attributes:
        minimum: Lower y bound (exclusive for the side surface).
        maximum: Upper y bound (exclusive for the side surface).
        closed: Whether flat caps close the shape at both bounds.
    """

    def __init__(
        self,
        transform: Matrix = IDENTITY,
        material: Material | None = None,
        minimum: float = -math.inf,
        maximum: float = math.inf,
        closed: bool = False,
    ) -> None:
        super().__init__(transform, material)
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed

    @abstractmethod
    def cap_radius_squared(self, y: float) -> float:
        """Squared radius of the cap disk lying in the plane at height y."""

    def _within_bounds(self, ray: Ray, t: float) -> bool:
        y = ray.origin.y + t * ray.direction.y
        return self.minimum < y < self.maximum

    def _check_cap(self, ray: Ray, t: float, y: float) -> bool:
        x = ray.origin.x + t * ray.direction.x
        z = ray.origin.z + t * ray.direction.z
        # Rim hits count, with rounding slack
        return x * x + z * z <= self.cap_radius_squared(y) + EPSILON

    def intersect_caps(self, ray: Ray) -> list[Intersection]:
        """Intersect the end caps of a closed shape."""
        xs: list[Intersection] = []
        if not self.closed or abs(ray.direction.y) < EPSILON:
            return xs

        for bound in (self.minimum, self.maximum):
            if math.isinf(bound):
                continue
            t = (bound - ray.origin.y) / ray.direction.y
            if self._check_cap(ray, t, bound):
                xs.append(self.intersection(t))
        return xs

    def _cap_normal(self, point: Tuple) -> Tuple | None:
        dist = point.x**2 + point.z**2
        if dist < self.cap_radius_squared(self.maximum) and point.y >= self.maximum - EPSILON:
            return vector(0.0, 1.0, 0.0)
        if dist < self.cap_radius_squared(self.minimum) and point.y <= self.minimum + EPSILON:
            return vector(0.0, -1.0, 0.0)
        return None

    def _geometry_key(self) -> tuple:
        return (self.minimum, self.maximum, self.closed)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(minimum={self.minimum}, maximum={self.maximum}, "
            f"closed={self.closed}, transform={self.transform!r})"
        )


class Cylinder(CappedShape):
    """A radius-1 cylinder on the y axis, infinite unless bounded."""

    def cap_radius_squared(self, y: float) -> float:
        return 1.0

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        dx, dz = ray.direction.x, ray.direction.z
        ox, oz = ray.origin.x, ray.origin.z

        xs: list[Intersection] = []
        a = dx * dx + dz * dz

        # A ray parallel to the y axis can only hit the caps
        if abs(a) >= EPSILON:
            b = 2.0 * ox * dx + 2.0 * oz * dz
            c = ox * ox + oz * oz - 1.0

            disc = b * b - 4.0 * a * c
            if disc < 0.0:
                return []

            sqrt_d = math.sqrt(disc)
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
        return vector(point.x, 0.0, point.z)
