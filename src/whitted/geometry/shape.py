"""Shape contract with shared world/object space handling.

Every shape kind is defined once, in canonical unit-object space, by two
hooks:

    local_intersect(ray) -> list[Intersection]
    local_normal_at(point) -> vector

The base class owns the transform and material and supplies the world-space
``intersect`` and ``normal_at`` built on those hooks:

- ``intersect`` maps the world ray into object space with the inverse
  transform before delegating.
- ``normal_at`` maps the point into object space, computes the local normal
  and maps it back with the inverse-transpose, which keeps normals
  perpendicular to the surface under non-uniform scale.

The inverse and inverse-transpose are computed once when the transform is
assigned.

Example:
    >>> from src.whitted.core.matrix import scaling
    >>> from src.whitted.geometry.sphere import Sphere
    >>> s = Sphere(transform=scaling(2, 2, 2))
    >>> n = s.normal_at(point(0, 2, 0))  # vector(0, 1, 0)
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from src.whitted.core.matrix import IDENTITY, Matrix
from src.whitted.core.ray import Ray
from src.whitted.core.tuples import Tuple
from src.whitted.materials.material import Material

if TYPE_CHECKING:
    from src.whitted.scene.intersection import Intersection


class Shape(ABC):
    """Abstract base for all renderable shapes.

    Attributes:
        transform: Object-to-world matrix. Must be invertible.
        material: Surface material used for shading.
    """

    def __init__(self, transform: Matrix = IDENTITY, material: Material | None = None) -> None:
        self.transform = transform
        self.material = material if material is not None else Material()

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, transform: Matrix) -> None:
        # Raises ValueError for singular transforms before any ray sees them
        inverse = transform.inverse()
        self._transform = transform
        self._inverse = inverse
        self._inverse_transpose = inverse.transpose()

    @property
    def inverse_transform(self) -> Matrix:
        return self._inverse

    def with_transform(self, transform: Matrix) -> Shape:
        """Return a copy of this shape with a different transform.

        The copy gets its own material, so editing one shape's material
        leaves the other unchanged.
        """
        shape = copy.copy(self)
        shape.transform = transform
        shape.material = self.material.with_()
        return shape

    def with_material(self, material: Material) -> Shape:
        """Return a copy of this shape with a different material."""
        shape = copy.copy(self)
        shape.material = material
        return shape

    # =========================================================================
    # World-space Behavior
    # =========================================================================

    def world_to_object(self, world_point: Tuple) -> Tuple:
        return self._inverse @ world_point

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with this shape.

        Returns:
            The intersections in the order produced by the local hook (not
            necessarily sorted). Empty if the ray misses.
        """
        return self.local_intersect(ray.transform(self._inverse))

    def normal_at(self, world_point: Tuple) -> Tuple:
        """Compute the unit surface normal at a world-space point."""
        local_point = self.world_to_object(world_point)
        local_normal = self.local_normal_at(local_point)
        world_normal = self._inverse_transpose @ local_normal
        world_normal.data[3] = 0.0
        return world_normal.normalize()

    def intersection(self, t: float) -> Intersection:
        """Create an intersection of this shape at ray parameter t."""
        from src.whitted.scene.intersection import Intersection

        return Intersection(t, self)

    # =========================================================================
    # Local Hooks
    # =========================================================================

    @abstractmethod
    def local_intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a ray already expressed in object space."""

    @abstractmethod
    def local_normal_at(self, point: Tuple) -> Tuple:
        """Compute the (not necessarily unit) normal at an object-space point."""

    # =========================================================================
    # Structural Equality
    # =========================================================================

    def _geometry_key(self) -> tuple:
        """Kind-specific parameters that take part in equality."""
        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.transform == other.transform
            and self.material == other.material
            and self._geometry_key() == other._geometry_key()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(transform={self.transform!r})"
