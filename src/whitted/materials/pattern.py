"""Procedural surface patterns.

A pattern is a pure function from a point to a color. Points are taken from
world space into the shape's object space and then into the pattern's own
space, so texture placement is independent of the shape transform:

    pattern_point = pattern.inverse @ shape.inverse @ world_point

Pattern kinds:
    StripePattern: alternates two colors on integer x
    GradientPattern: linear blend from a to b across each unit of x
    RingPattern: concentric rings in the xz plane
    CheckersPattern: 3D checkerboard
    TestPattern: returns the pattern-space coordinates as a color
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from src.whitted.core.matrix import IDENTITY, Matrix
from src.whitted.core.tuples import Color, Tuple

if TYPE_CHECKING:
    from src.whitted.geometry.shape import Shape


class Pattern(ABC):
    """Abstract base for procedural patterns.

    Attributes:
        transform: Pattern-to-object matrix. Must be invertible.
    """

    def __init__(self, transform: Matrix = IDENTITY) -> None:
        self.transform = transform

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, transform: Matrix) -> None:
        self._inverse = transform.inverse()
        self._transform = transform

    @abstractmethod
    def pattern_at(self, pattern_point: Tuple) -> Color:
        """Return the color at a point already in pattern space."""

    def pattern_at_shape(self, shape: Shape, world_point: Tuple) -> Color:
        """Return the color at a world-space point on the given shape."""
        object_point = shape.world_to_object(world_point)
        return self.pattern_at(self._inverse @ object_point)

    def _colors(self) -> tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.transform == other.transform
            and self._colors() == other._colors()
        )

    __hash__ = None  # type: ignore[assignment]


class _TwoColorPattern(Pattern):
    def __init__(self, a: Color, b: Color, transform: Matrix = IDENTITY) -> None:
        super().__init__(transform)
        self.a = a
        self.b = b

    def _colors(self) -> tuple:
        return (self.a, self.b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.a!r}, {self.b!r})"


class StripePattern(_TwoColorPattern):
    def pattern_at(self, pattern_point: Tuple) -> Color:
        return self.a if math.floor(pattern_point.x) % 2 == 0 else self.b


class GradientPattern(_TwoColorPattern):
    def pattern_at(self, pattern_point: Tuple) -> Color:
        fraction = pattern_point.x - math.floor(pattern_point.x)
        return self.a + (self.b - self.a) * fraction


class RingPattern(_TwoColorPattern):
    def pattern_at(self, pattern_point: Tuple) -> Color:
        distance = math.hypot(pattern_point.x, pattern_point.z)
        return self.a if math.floor(distance) % 2 == 0 else self.b


class CheckersPattern(_TwoColorPattern):
    def pattern_at(self, pattern_point: Tuple) -> Color:
        total = (
            math.floor(pattern_point.x) + math.floor(pattern_point.y) + math.floor(pattern_point.z)
        )
        return self.a if total % 2 == 0 else self.b


class TestPattern(Pattern):
    """Echo the pattern-space point as a color; used to inspect transforms."""

    __test__ = False

    def pattern_at(self, pattern_point: Tuple) -> Color:
        return Color(pattern_point.x, pattern_point.y, pattern_point.z)

    def __repr__(self) -> str:
        return "TestPattern()"
