"""Point light source."""

from __future__ import annotations

from dataclasses import dataclass

from src.whitted.core.tuples import Color, Tuple


@dataclass
class PointLight:
    """A light with no size, emitting equally in every direction.

    Attributes:
        position: World-space point the light sits at.
        intensity: Color and brightness of the light.
    """

    position: Tuple
    intensity: Color
