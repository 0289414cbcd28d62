"""Scene module for lights, hit resolution and light transport.

Components:
    light: Point light source
    intersection: Intersections, hit selection, shading context and Schlick
    world: World container with recursive Whitted shading
    config: Dictionary/JSON scene descriptions (import directly)
    demo: Built-in showcase scene (import directly)

The config and demo modules build cameras as well as worlds, so they are not
re-exported here; import them as ``src.whitted.scene.config`` and
``src.whitted.scene.demo``.
"""

from .intersection import (
    Computations,
    Intersection,
    hit,
    intersections,
    prepare_computations,
    schlick,
)
from .light import PointLight
from .world import REFLECTION_DEPTH, World

__all__ = [
    # Lights
    "PointLight",
    # Intersection module
    "Intersection",
    "intersections",
    "hit",
    "Computations",
    "prepare_computations",
    "schlick",
    # World module
    "World",
    "REFLECTION_DEPTH",
]
