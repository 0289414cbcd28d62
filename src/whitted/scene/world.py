"""World container and recursive Whitted light transport.

A World holds shapes and point lights and answers the single question the
camera asks: what color does a ray see?

Shading a hit combines

    surface   = sum of shadow-tested Phong lighting over all lights
    reflected = color seen along the mirror direction * reflective
    refracted = color seen along the Snell direction * transparency

Reflected and refracted colors are found by tracing secondary rays through
``color_at`` with one less unit of recursion budget. A budget of zero stops
the recursion with black, so facing mirrors terminate after at most
``depth`` bounces. When a material both reflects and refracts, the two are
weighted by Schlick's reflectance instead of being summed in full.

The world is only read while rendering; nothing here mutates shapes or
lights.

Example:
    >>> world = World.default()
    >>> ray = Ray(point(0, 0, -5), vector(0, 0, 1))
    >>> world.color_at(ray)  # Color(0.38066, 0.47583, 0.2855)
"""

from __future__ import annotations

import logging
import math

from src.whitted.core.matrix import scaling
from src.whitted.core.ray import Ray
from src.whitted.core.tuples import BLACK, WHITE, Color, Tuple, color, point
from src.whitted.geometry.shape import Shape
from src.whitted.geometry.sphere import Sphere
from src.whitted.materials.material import Material
from src.whitted.scene.intersection import (
    Computations,
    Intersection,
    hit,
    intersections,
    prepare_computations,
    schlick,
)
from src.whitted.scene.light import PointLight

logger = logging.getLogger(__name__)

# Maximum number of secondary bounces per primary ray
REFLECTION_DEPTH = 5


class World:
    """A collection of shapes lit by point lights.

    Attributes:
        objects: Shapes in the scene.
        lights: Point lights illuminating the scene.
    """

    def __init__(
        self,
        objects: list[Shape] | None = None,
        lights: list[PointLight] | None = None,
    ) -> None:
        self.objects = list(objects) if objects is not None else []
        self.lights = list(lights) if lights is not None else []

    @classmethod
    def default(cls) -> World:
        """Create the standard two-sphere test world.

        An outer unit sphere with a green-tinted matte material, a half-size
        sphere inside it, and a white light at (-10, 10, -10).
        """
        outer = Sphere(material=Material(color=color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
        inner = Sphere(transform=scaling(0.5, 0.5, 0.5))
        light = PointLight(point(-10.0, 10.0, -10.0), WHITE)
        return cls([outer, inner], [light])

    def __repr__(self) -> str:
        return f"World(objects={len(self.objects)}, lights={len(self.lights)})"

    # =========================================================================
    # Ray Queries
    # =========================================================================

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a ray with every shape, in object order (unsorted)."""
        xs: list[Intersection] = []
        for shape in self.objects:
            xs.extend(shape.intersect(ray))
        return xs

    def is_shadowed(self, light: PointLight, world_point: Tuple) -> bool:
        """Check whether any shape blocks the light from a point.

        Only occluders strictly between the point and the light count.
        """
        to_light = light.position - world_point
        distance = to_light.magnitude()
        ray = Ray(world_point, to_light.normalize())

        h = hit(self.intersect(ray))
        return h is not None and h.t < distance

    # =========================================================================
    # Light Transport
    # =========================================================================

    def color_at(self, ray: Ray, remaining: int = REFLECTION_DEPTH) -> Color:
        """Trace a ray into the world and return the color it sees.

        Args:
            ray: The ray to trace.
            remaining: Recursion budget for secondary rays.

        Returns:
            The shaded color at the nearest hit, or black on a miss.
        """
        xs = intersections(*self.intersect(ray))
        h = hit(xs)
        if h is None:
            return BLACK

        comps = prepare_computations(h, ray, xs)
        return self.shade_hit(comps, remaining)

    def shade_hit(self, comps: Computations, remaining: int = REFLECTION_DEPTH) -> Color:
        """Shade a prepared hit with direct lighting plus secondary rays."""
        material = comps.object.material

        surface = BLACK
        for light in self.lights:
            in_shadow = self.is_shadowed(light, comps.over_point)
            surface = surface + material.lighting(
                comps.object,
                light,
                comps.over_point,
                comps.eyev,
                comps.normalv,
                in_shadow,
            )

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        if material.reflective > 0.0 and material.transparency > 0.0:
            reflectance = schlick(comps)
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)

        return surface + reflected + refracted

    def reflected_color(self, comps: Computations, remaining: int = REFLECTION_DEPTH) -> Color:
        """Color arriving along the mirror direction, scaled by reflectivity."""
        reflective = comps.object.material.reflective
        if reflective == 0.0:
            return BLACK
        if remaining <= 0:
            logger.debug("Reflection budget exhausted at t=%.5f", comps.t)
            return BLACK

        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps: Computations, remaining: int = REFLECTION_DEPTH) -> Color:
        """Color arriving through the surface, scaled by transparency.

        Uses Snell's law to bend the eye ray. Total internal reflection
        yields black.
        """
        transparency = comps.object.material.transparency
        if transparency == 0.0:
            return BLACK
        if remaining <= 0:
            logger.debug("Refraction budget exhausted at t=%.5f", comps.t)
            return BLACK

        n_ratio = comps.n1 / comps.n2
        cos_i = comps.eyev.dot(comps.normalv)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            return BLACK

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency
