"""Ray-shape intersections, hit selection and per-hit shading context.

An intersection is a ray parameter ``t`` paired with the shape it belongs
to. Shapes return their intersections unsorted; ``intersections`` and the
world sort them by ``t``.

``prepare_computations`` turns the chosen hit into a ``Computations``
record holding everything shading needs: the world point, the eye and
normal vectors (normal flipped toward the eye for inside hits), the
reflection vector, two points nudged by EPSILON to either side of the
surface, and the refractive indices ``n1``/``n2`` of the media being left
and entered.

The indices come from walking the full sorted intersection list while
tracking which shapes the ray is currently inside. A shape enters the
container list on its first intersection and leaves on its second, so
nested and overlapping transparent volumes resolve correctly. Shapes are
tracked by identity, since two structurally equal spheres are still
distinct volumes.

Example:
    >>> xs = intersections(*sphere.intersect(ray))
    >>> i = hit(xs)
    >>> if i is not None:
    ...     comps = prepare_computations(i, ray, xs)
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.whitted.core.ray import Ray, reflect
from src.whitted.core.tuples import EPSILON, Tuple

if TYPE_CHECKING:
    from src.whitted.geometry.shape import Shape


@dataclass(frozen=True, eq=False)
class Intersection:
    """A ray parameter paired with the shape it hit.

    Attributes:
        t: Distance along the ray, in units of the ray direction.
        object: The shape that was hit. Not owned by the intersection.
    """

    t: float
    object: Shape

    def __repr__(self) -> str:
        return f"Intersection(t={self.t}, object={type(self.object).__name__})"


@dataclass
class Computations:
    """Precomputed shading context for a single hit.

    Attributes:
        t: Ray parameter of the hit.
        object: The shape that was hit.
        point: World-space hit point.
        over_point: ``point`` nudged along the normal, for shadow and
            reflection rays.
        under_point: ``point`` nudged against the normal, for refraction rays.
        eyev: Unit vector from the point toward the eye.
        normalv: Unit surface normal, flipped to face the eye.
        reflectv: Ray direction mirrored about the normal.
        inside: Whether the hit is on the inside of the shape.
        n1: Refractive index of the medium being left.
        n2: Refractive index of the medium being entered.
    """

    t: float
    object: Shape
    point: Tuple
    over_point: Tuple
    under_point: Tuple
    eyev: Tuple
    normalv: Tuple
    reflectv: Tuple
    inside: bool
    n1: float = 1.0
    n2: float = 1.0


def intersections(*xs: Intersection) -> list[Intersection]:
    """Collect intersections into a list sorted by ascending t."""
    return sorted(xs, key=lambda i: i.t)


def hit(xs: Iterable[Intersection]) -> Intersection | None:
    """Select the visible intersection.

    Returns the intersection with the lowest non-negative ``t``, or None if
    every intersection lies behind the ray origin. When several share the
    lowest ``t`` the first one in ``xs`` wins.
    """
    visible = [i for i in xs if i.t >= 0.0]
    if not visible:
        return None
    return min(visible, key=lambda i: i.t)


def _refractive_indices(hit: Intersection, xs: Sequence[Intersection]) -> tuple[float, float]:
    containers: list[Shape] = []
    n1 = n2 = 1.0

    for i in xs:
        if i is hit:
            n1 = containers[-1].material.refractive_index if containers else 1.0

        for index, shape in enumerate(containers):
            if shape is i.object:
                del containers[index]
                break
        else:
            containers.append(i.object)

        if i is hit:
            n2 = containers[-1].material.refractive_index if containers else 1.0
            break

    return n1, n2


def prepare_computations(
    hit: Intersection,
    ray: Ray,
    xs: Sequence[Intersection] | None = None,
) -> Computations:
    """Build the shading context for a hit.

    Args:
        hit: The intersection being shaded.
        ray: The ray that produced it.
        xs: The full, sorted intersection list the hit came from. Needed for
            the refractive indices; when omitted only ``hit`` is considered.

    Returns:
        The Computations record for the hit.
    """
    if xs is None:
        xs = [hit]

    shape = hit.object
    world_point = ray.position(hit.t)
    eyev = -ray.direction
    normalv = shape.normal_at(world_point)

    inside = normalv.dot(eyev) < 0.0
    if inside:
        normalv = -normalv

    offset = normalv * EPSILON
    n1, n2 = _refractive_indices(hit, xs)

    return Computations(
        t=hit.t,
        object=shape,
        point=world_point,
        over_point=world_point + offset,
        under_point=world_point - offset,
        eyev=eyev,
        normalv=normalv,
        reflectv=reflect(ray.direction, normalv),
        inside=inside,
        n1=n1,
        n2=n2,
    )


def schlick(comps: Computations) -> float:
    """Schlick's approximation of the Fresnel reflectance at a hit.

    Returns:
        The fraction of light reflected, in [0, 1]. Total internal
        reflection yields exactly 1.0.
    """
    cos = comps.eyev.dot(comps.normalv)

    if comps.n1 > comps.n2:
        ratio = comps.n1 / comps.n2
        sin2_t = ratio * ratio * (1.0 - cos * cos)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5
