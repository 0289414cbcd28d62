"""Geometry module for shape primitives.

Components:
    shape: Abstract Shape with shared transform, material and normal mapping
    sphere: Unit sphere and the glass_sphere helper
    plane: Infinite xz plane
    cube: Axis-aligned cube using the slab method
    cylinder: Truncatable, optionally capped cylinder
    cone: Truncatable, optionally capped double-napped cone

Each kind only implements the object-space hooks; world/object space
conversion happens once, in Shape:

    xs = shape.intersect(world_ray)      # list[Intersection]
    n = shape.normal_at(world_point)     # unit vector
"""

from .cone import Cone
from .cube import Cube, check_axis
from .cylinder import CappedShape, Cylinder
from .plane import Plane
from .shape import Shape
from .sphere import Sphere, glass_sphere

__all__ = [
    "Shape",
    "Sphere",
    "glass_sphere",
    "Plane",
    "Cube",
    "check_axis",
    "CappedShape",
    "Cylinder",
    "Cone",
]
