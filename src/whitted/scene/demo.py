"""Built-in showcase scene.

A checkered floor and a mirror wall surround one object of every shape kind:
a hollow glass sphere, a striped cube, a capped cylinder and a truncated
cone. The scene exercises shadows, reflection, refraction (including the
nested media of the hollow sphere) and every procedural pattern.

Example:
    >>> world, camera = create_demo_scene(width=400, height=200)
    >>> canvas = camera.render(world)
"""

from __future__ import annotations

import math

from src.whitted.camera.camera import Camera
from src.whitted.core.matrix import IDENTITY, rotation_x, scaling, translation
from src.whitted.core.transformations import view_transform
from src.whitted.core.tuples import color, point, vector
from src.whitted.geometry.cone import Cone
from src.whitted.geometry.cube import Cube
from src.whitted.geometry.cylinder import Cylinder
from src.whitted.geometry.plane import Plane
from src.whitted.geometry.sphere import Sphere, glass_sphere
from src.whitted.materials.material import Material
from src.whitted.materials.pattern import (
    CheckersPattern,
    GradientPattern,
    RingPattern,
    StripePattern,
)
from src.whitted.scene.light import PointLight
from src.whitted.scene.world import World

WHITE_TILE = color(0.9, 0.9, 0.9)
DARK_TILE = color(0.2, 0.2, 0.25)


def create_demo_scene(width: int = 200, height: int = 100) -> tuple[World, Camera]:
    """Create the showcase world and a camera looking at it.

    Args:
        width: Canvas width in pixels.
        height: Canvas height in pixels.

    Returns:
        Tuple of (world, camera).
    """
    floor = Plane(
        material=Material(
            pattern=CheckersPattern(WHITE_TILE, DARK_TILE),
            specular=0.0,
            reflective=0.1,
        )
    )

    mirror = Plane(
        transform=IDENTITY.rotate_x(math.pi / 2).translate(0.0, 0.0, 5.0),
        material=Material(
            color=color(0.05, 0.05, 0.08),
            diffuse=0.2,
            specular=1.0,
            shininess=300.0,
            reflective=0.9,
        ),
    )

    # Hollow glass sphere: an air bubble inside a glass shell
    shell = glass_sphere().with_transform(translation(-0.5, 1.0, 0.5))
    shell.material = shell.material.with_(
        color=color(0.1, 0.1, 0.1),
        diffuse=0.1,
        ambient=0.0,
        specular=1.0,
        shininess=300.0,
        reflective=0.9,
    )
    bubble = Sphere(
        transform=translation(-0.5, 1.0, 0.5) @ scaling(0.5, 0.5, 0.5),
        material=Material(
            color=color(0.1, 0.1, 0.1),
            diffuse=0.0,
            ambient=0.0,
            specular=0.9,
            shininess=300.0,
            reflective=0.9,
            transparency=0.9,
            refractive_index=1.0000034,
        ),
    )

    cube = Cube(
        transform=IDENTITY.scale(0.4, 0.4, 0.4).rotate_y(math.pi / 5).translate(1.6, 0.4, -0.6),
        material=Material(
            pattern=StripePattern(
                color(0.9, 0.4, 0.1),
                color(1.0, 0.9, 0.6),
                transform=scaling(0.25, 0.25, 0.25),
            ),
            diffuse=0.8,
            specular=0.3,
        ),
    )

    cylinder = Cylinder(
        transform=translation(-2.2, 0.0, 1.5) @ scaling(0.5, 1.0, 0.5),
        material=Material(
            pattern=RingPattern(
                color(0.2, 0.5, 0.9),
                color(0.9, 0.9, 1.0),
                transform=scaling(0.2, 0.2, 0.2),
            ),
            specular=0.5,
        ),
        minimum=0.0,
        maximum=1.5,
        closed=True,
    )

    cone = Cone(
        transform=translation(0.9, 1.0, 1.8) @ scaling(0.5, 1.0, 0.5),
        material=Material(
            pattern=GradientPattern(
                color(0.9, 0.2, 0.3),
                color(0.3, 0.9, 0.4),
                transform=translation(-1.0, 0.0, 0.0) @ scaling(2.0, 1.0, 1.0),
            ),
            diffuse=0.7,
            specular=0.4,
        ),
        minimum=-1.0,
        maximum=0.0,
        closed=True,
    )

    world = World(
        [floor, mirror, shell, bubble, cube, cylinder, cone],
        [PointLight(point(-4.0, 6.0, -6.0), color(1.0, 1.0, 1.0))],
    )

    camera = Camera(
        width,
        height,
        math.pi / 3.0,
        view_transform(point(0.0, 2.5, -6.0), point(0.0, 1.0, 0.5), vector(0.0, 1.0, 0.0)),
    )
    return world, camera
