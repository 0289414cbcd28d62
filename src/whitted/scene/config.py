"""Scene description loading.

Scenes can be described as plain dictionaries (usually read from JSON) and
turned into a World and Camera. The layout is:

    {
        "camera": {
            "width": 100, "height": 50, "field_of_view": 1.0472,
            "from": [0, 1.5, -5], "to": [0, 1, 0], "up": [0, 1, 0]
        },
        "lights": [
            {"position": [-10, 10, -10], "intensity": [1, 1, 1]}
        ],
        "objects": [
            {
                "type": "sphere",
                "transform": [["scale", 0.5, 0.5, 0.5], ["translate", 0, 1, 0]],
                "material": {
                    "color": [1, 0.2, 1], "diffuse": 0.7,
                    "pattern": {"type": "stripe",
                                "colors": [[1, 1, 1], [0, 0, 0]],
                                "transform": [["scale", 0.2, 0.2, 0.2]]}
                }
            }
        ]
    }

Transforms are applied in list order. Shape types are ``sphere``, ``plane``,
``cube``, ``cylinder`` and ``cone``; cylinders and cones also accept
``minimum``, ``maximum`` and ``closed``. Field of view is in radians.

Example:
    >>> config = load_scene("scenes/demo.json")
    >>> world = build_world(config)
    >>> camera = build_camera(config, width=400, height=200)
    >>> canvas = camera.render(world)
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from src.whitted.camera.camera import Camera
from src.whitted.core.matrix import (
    IDENTITY,
    Matrix,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
)
from src.whitted.core.transformations import view_transform
from src.whitted.core.tuples import WHITE, Color, Tuple, color, point, vector
from src.whitted.geometry.cone import Cone
from src.whitted.geometry.cube import Cube
from src.whitted.geometry.cylinder import Cylinder
from src.whitted.geometry.plane import Plane
from src.whitted.geometry.shape import Shape
from src.whitted.geometry.sphere import Sphere
from src.whitted.materials.material import Material
from src.whitted.materials.pattern import (
    CheckersPattern,
    GradientPattern,
    Pattern,
    RingPattern,
    StripePattern,
)
from src.whitted.scene.light import PointLight
from src.whitted.scene.world import World

logger = logging.getLogger(__name__)

TRANSFORM_OPS: dict[str, Callable[..., Matrix]] = {
    "translate": translation,
    "scale": scaling,
    "rotate_x": rotation_x,
    "rotate_y": rotation_y,
    "rotate_z": rotation_z,
    "shear": shearing,
}

SHAPE_TYPES: dict[str, type[Shape]] = {
    "sphere": Sphere,
    "plane": Plane,
    "cube": Cube,
    "cylinder": Cylinder,
    "cone": Cone,
}

PATTERN_TYPES: dict[str, type[Pattern]] = {
    "stripe": StripePattern,
    "gradient": GradientPattern,
    "ring": RingPattern,
    "checkers": CheckersPattern,
}

DEFAULT_CAMERA: dict[str, Any] = {
    "width": 100,
    "height": 50,
    "field_of_view": math.pi / 3.0,
    "from": [0.0, 1.5, -5.0],
    "to": [0.0, 1.0, 0.0],
    "up": [0.0, 1.0, 0.0],
}

# Material fields settable from a scene file, besides color and pattern
_SCALAR_MATERIAL_FIELDS = frozenset(
    f.name for f in fields(Material) if f.name not in ("color", "pattern")
)


@dataclass
class SceneConfig:
    """Configuration for scene serialization.

    Attributes:
        camera: Camera settings (size, field of view, view transform).
        lights: List of light configurations.
        objects: List of shape configurations.
    """

    camera: dict[str, Any] = field(default_factory=dict)
    lights: list[dict[str, Any]] = field(default_factory=list)
    objects: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SceneConfig:
        """Create a configuration from a dictionary.

        Args:
            data: Dictionary with optional 'camera', 'lights', 'objects' keys.
        """
        return cls(
            camera=dict(data.get("camera", {})),
            lights=list(data.get("lights", [])),
            objects=list(data.get("objects", [])),
        )

    def to_dict(self) -> dict[str, Any]:
        """Export the configuration to a dictionary (for JSON serialization)."""
        return {
            "camera": self.camera,
            "lights": self.lights,
            "objects": self.objects,
        }


def load_scene(path: str | Path) -> SceneConfig:
    """Read a scene configuration from a JSON file.

    Raises:
        ValueError: If the file is not a JSON object.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Scene file must contain a JSON object, got {type(data).__name__}")

    config = SceneConfig.from_dict(data)
    logger.info(
        "Loaded scene %s: %d objects, %d lights",
        path,
        len(config.objects),
        len(config.lights),
    )
    return config


# =============================================================================
# Value Parsing
# =============================================================================


def _triple(values: Sequence[float], name: str) -> tuple[float, float, float]:
    if len(values) != 3:
        raise ValueError(f"'{name}' needs 3 components, got {list(values)}")
    return float(values[0]), float(values[1]), float(values[2])


def _point(values: Sequence[float], name: str) -> Tuple:
    return point(*_triple(values, name))


def _vector(values: Sequence[float], name: str) -> Tuple:
    return vector(*_triple(values, name))


def _color(values: Sequence[float], name: str) -> Color:
    return color(*_triple(values, name))


def parse_transform(ops: Sequence[Sequence[Any]] | None) -> Matrix:
    """Build a matrix from a list of ``[op, *args]`` steps, applied in order.

    Raises:
        ValueError: If an operation is unknown or has the wrong arguments.
    """
    m = IDENTITY
    for step in ops or []:
        if not step:
            raise ValueError("Empty transform step")
        op, *args = step
        factory = TRANSFORM_OPS.get(op)
        if factory is None:
            raise ValueError(f"Unknown transform: {op}")
        try:
            m = factory(*(float(a) for a in args)) @ m
        except TypeError as exc:
            raise ValueError(f"Bad arguments for transform '{op}': {args}") from exc
    return m


def parse_pattern(data: dict[str, Any]) -> Pattern:
    """Build a pattern from ``{"type", "colors", "transform"}``.

    Raises:
        ValueError: If the pattern type is unknown or colors are malformed.
    """
    pattern_type = str(data.get("type", "")).lower()
    pattern_cls = PATTERN_TYPES.get(pattern_type)
    if pattern_cls is None:
        raise ValueError(f"Unknown pattern type: {pattern_type}")

    colors = data.get("colors", [[1.0, 1.0, 1.0], [0.0, 0.0, 0.0]])
    if len(colors) != 2:
        raise ValueError(f"Pattern '{pattern_type}' needs 2 colors, got {len(colors)}")

    a = _color(colors[0], "colors[0]")
    b = _color(colors[1], "colors[1]")
    return pattern_cls(a, b, transform=parse_transform(data.get("transform")))


def parse_material(data: dict[str, Any] | None) -> Material:
    """Build a material; missing fields keep their defaults.

    Raises:
        ValueError: If a field name is unknown.
    """
    if not data:
        return Material()

    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key == "color":
            kwargs["color"] = _color(value, "color")
        elif key == "pattern":
            kwargs["pattern"] = parse_pattern(value)
        elif key in _SCALAR_MATERIAL_FIELDS:
            kwargs[key] = float(value)
        else:
            raise ValueError(f"Unknown material field: {key}")
    return Material(**kwargs)


def parse_shape(data: dict[str, Any]) -> Shape:
    """Build a shape from its configuration.

    Raises:
        ValueError: If the shape type is unknown.
    """
    shape_type = str(data.get("type", "")).lower()
    shape_cls = SHAPE_TYPES.get(shape_type)
    if shape_cls is None:
        raise ValueError(f"Unknown shape type: {shape_type}")

    transform = parse_transform(data.get("transform"))
    material = parse_material(data.get("material"))

    if shape_cls in (Cylinder, Cone):
        return shape_cls(
            transform,
            material,
            minimum=float(data.get("minimum", -math.inf)),
            maximum=float(data.get("maximum", math.inf)),
            closed=bool(data.get("closed", False)),
        )
    return shape_cls(transform, material)


def parse_light(data: dict[str, Any]) -> PointLight:
    position = _point(data.get("position", [-10.0, 10.0, -10.0]), "position")
    intensity = data.get("intensity")
    return PointLight(position, _color(intensity, "intensity") if intensity else WHITE)


# =============================================================================
# Builders
# =============================================================================


def build_world(config: SceneConfig) -> World:
    """Create the World described by a configuration.

    A scene without lights is valid; every surface then renders black.
    """
    objects = [parse_shape(obj) for obj in config.objects]
    lights = [parse_light(light) for light in config.lights]
    if not lights:
        logger.warning("Scene has no lights")
    return World(objects, lights)


def build_camera(
    config: SceneConfig,
    width: int | None = None,
    height: int | None = None,
) -> Camera:
    """Create the Camera described by a configuration.

    Args:
        config: Scene configuration.
        width: Overrides the configured canvas width.
        height: Overrides the configured canvas height.
    """
    settings = {**DEFAULT_CAMERA, **config.camera}
    transform = view_transform(
        _point(settings["from"], "from"),
        _point(settings["to"], "to"),
        _vector(settings["up"], "up"),
    )
    return Camera(
        int(width if width is not None else settings["width"]),
        int(height if height is not None else settings["height"]),
        float(settings["field_of_view"]),
        transform,
    )
