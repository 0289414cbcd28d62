"""Unit sphere primitive.

The canonical sphere has radius 1 and is centred on the object-space origin;
position and size come from the shape transform.

The ray-sphere intersection solves

    |origin + t * direction|^2 = 1

which expands to the quadratic a*t^2 + b*t + c = 0 with

    a = direction . direction
    b = 2 * (direction . (origin - center))
    c = (origin - center) . (origin - center) - 1

A tangent ray yields the same t twice so callers always see hits in pairs.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import Tuple, point
from src.whitted.geometry.shape import Shape
from src.whitted.materials.material import Material

if TYPE_CHECKING:
    from src.whitted.scene.intersection import Intersection

ORIGIN = point(0.0, 0.0, 0.0)


class Sphere(Shape):
    """A unit sphere at the object-space origin."""

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        sphere_to_ray = ray.origin - ORIGIN

        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)
        return [self.intersection(t1), self.intersection(t2)]

    def local_normal_at(self, point: Tuple) -> Tuple:
        return point - ORIGIN


def glass_sphere() -> Sphere:
    """Create a unit sphere of clear glass (transparency 1, index 1.5)."""
    return Sphere(material=Material(transparency=1.0, refractive_index=1.5))
