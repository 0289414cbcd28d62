"""Affine tuples and RGB colors.

A Tuple is a 4-component affine value backed by a NumPy array. The w
component distinguishes points (w=1) from free vectors (w=0). Colors are
3-component values with the same arithmetic plus the Hadamard product.

Equality on both types is fuzzy: components compare equal when they differ
by less than EPSILON.

Example:
    >>> from src.whitted.core.tuples import point, vector
    >>> p = point(1, 2, 3)
    >>> v = vector(0, 1, 0)
    >>> q = p + v * 2.0  # point(1, 4, 3)
"""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

# Tolerance for fuzzy comparisons and the over/under point offset
EPSILON = 1e-5


def fuzzy_eq(a: float, b: float) -> bool:
    """Return True if two scalars differ by less than EPSILON."""
    return abs(a - b) < EPSILON


class Tuple:
    """A 4-component affine tuple (x, y, z, w).

    Attributes:
        data: The underlying float64 array of shape (4,).
    """

    __slots__ = ("data",)

    def __init__(self, x: float, y: float, z: float, w: float) -> None:
        self.data = np.array((x, y, z, w), dtype=np.float64)

    @classmethod
    def from_array(cls, data: npt.NDArray[np.float64]) -> Tuple:
        """Wrap an existing array of shape (4,) without copying."""
        t = cls.__new__(cls)
        t.data = data
        return t

    @property
    def x(self) -> float:
        return float(self.data[0])

    @property
    def y(self) -> float:
        return float(self.data[1])

    @property
    def z(self) -> float:
        return float(self.data[2])

    @property
    def w(self) -> float:
        return float(self.data[3])

    def is_point(self) -> bool:
        return fuzzy_eq(self.w, 1.0)

    def is_vector(self) -> bool:
        return fuzzy_eq(self.w, 0.0)

    def __add__(self, other: Tuple) -> Tuple:
        return Tuple.from_array(self.data + other.data)

    def __sub__(self, other: Tuple) -> Tuple:
        return Tuple.from_array(self.data - other.data)

    def __neg__(self) -> Tuple:
        return Tuple.from_array(-self.data)

    def __mul__(self, scalar: float) -> Tuple:
        return Tuple.from_array(self.data * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        return Tuple.from_array(self.data / scalar)

    def magnitude(self) -> float:
        return math.sqrt(float(np.dot(self.data, self.data)))

    def normalize(self) -> Tuple:
        """Return a unit-length copy of this tuple."""
        return self / self.magnitude()

    def dot(self, other: Tuple) -> float:
        return float(np.dot(self.data, other.data))

    def cross(self, other: Tuple) -> Tuple:
        """Compute the cross product of two vectors.

        Both operands must be vectors; the w component is ignored by the
        product and the result is always a vector.
        """
        assert self.is_vector() and other.is_vector(), "cross product is only defined for vectors"
        c = np.cross(self.data[:3], other.data[:3])
        return vector(c[0], c[1], c[2])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return bool(np.all(np.abs(self.data - other.data) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Tuple({self.x:g}, {self.y:g}, {self.z:g}, {self.w:g})"


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w=1)."""
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (w=0)."""
    return Tuple(x, y, z, 0.0)


class Color:
    """An RGB color with unbounded float components.

    Components above 1.0 are valid (bright highlights); they are clamped only
    when the canvas is quantized for output.
    """

    __slots__ = ("data",)

    def __init__(self, red: float, green: float, blue: float) -> None:
        self.data = np.array((red, green, blue), dtype=np.float64)

    @classmethod
    def from_array(cls, data: npt.NDArray[np.float64]) -> Color:
        c = cls.__new__(cls)
        c.data = data
        return c

    @property
    def red(self) -> float:
        return float(self.data[0])

    @property
    def green(self) -> float:
        return float(self.data[1])

    @property
    def blue(self) -> float:
        return float(self.data[2])

    def __add__(self, other: Color) -> Color:
        return Color.from_array(self.data + other.data)

    def __sub__(self, other: Color) -> Color:
        return Color.from_array(self.data - other.data)

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color.from_array(self.data * other.data)
        return Color.from_array(self.data * other)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return bool(np.all(np.abs(self.data - other.data) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self):
        return iter((self.red, self.green, self.blue))

    def __repr__(self) -> str:
        return f"Color({self.red:.5f}, {self.green:.5f}, {self.blue:.5f})"


def color(red: float, green: float, blue: float) -> Color:
    """Create a color from its red, green and blue components."""
    return Color(red, green, blue)


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
