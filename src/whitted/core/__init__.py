"""Core geometry kernel.

Components:
    tuples: Affine points/vectors and RGB colors with fuzzy equality
    matrix: Square matrices, cofactor inversion and transform factories
    transformations: Camera view transform
    ray: Ray data structure and reflection

Everything here is plain Python over small NumPy arrays; nothing in the
kernel touches Taichi, so it can be used before or without ``ti.init``.
"""

from .matrix import (
    IDENTITY,
    Matrix,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
)
from .ray import Ray, reflect
from .transformations import view_transform
from .tuples import (
    BLACK,
    EPSILON,
    WHITE,
    Color,
    Tuple,
    color,
    fuzzy_eq,
    point,
    vector,
)

__all__ = [
    # Tuples and colors
    "Tuple",
    "point",
    "vector",
    "Color",
    "color",
    "BLACK",
    "WHITE",
    "EPSILON",
    "fuzzy_eq",
    # Matrices
    "Matrix",
    "IDENTITY",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
    # Rays
    "Ray",
    "reflect",
]
