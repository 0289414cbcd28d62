"""Phong material model.

The local illumination at a surface point is the sum of three terms:

    ambient  = effective_color * ambient
    diffuse  = effective_color * diffuse * (light . normal)
    specular = light_intensity * specular * (reflect . eye) ** shininess

where ``effective_color`` is the surface color (or pattern color) modulated
by the light intensity. Diffuse and specular drop to zero when the light is
behind the surface or the highlight points away from the eye, and a point in
shadow receives the ambient term only.

Besides Phong coefficients, a material carries the global-illumination
coefficients used by the world: ``reflective`` (mirror weight),
``transparency`` (refraction weight) and ``refractive_index``.

Example:
    >>> from src.whitted.core.tuples import color
    >>> from src.whitted.materials.material import Material
    >>> matte = Material(color=color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)
    >>> glass = Material(transparency=1.0, refractive_index=1.5)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from src.whitted.core.ray import reflect
from src.whitted.core.tuples import BLACK, WHITE, Color, Tuple
from src.whitted.materials.pattern import Pattern

if TYPE_CHECKING:
    from src.whitted.geometry.shape import Shape
    from src.whitted.scene.light import PointLight


@dataclass
class Material:
    """Surface reflectance properties.

    Attributes:
        color: Base surface color, used when no pattern is set.
        ambient: Ambient coefficient in [0, 1].
        diffuse: Diffuse coefficient in [0, 1].
        specular: Specular coefficient in [0, 1].
        shininess: Specular exponent; larger values give tighter highlights.
        reflective: Mirror reflection weight (0 = none, 1 = perfect mirror).
        transparency: Refraction weight (0 = opaque).
        refractive_index: Index of refraction. Common values:
            - Vacuum/Air: 1.0
            - Water: 1.333
            - Glass: 1.5
            - Diamond: 2.417
        pattern: Optional procedural pattern overriding ``color``.
    """

    color: Color = field(default_factory=lambda: WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0
    pattern: Pattern | None = None

    def with_(self, **changes) -> Material:
        """Return a copy with some fields replaced."""
        return replace(self, **changes)

    def lighting(
        self,
        shape: Shape,
        light: PointLight,
        point: Tuple,
        eyev: Tuple,
        normalv: Tuple,
        in_shadow: bool = False,
    ) -> Color:
        """Compute Phong illumination of a point by a single light.

        Args:
            shape: The shape being shaded (needed to place the pattern).
            light: The point light.
            point: The world-space point being shaded.
            eyev: Unit vector from the point toward the eye.
            normalv: Unit surface normal at the point, facing the eye.
            in_shadow: Whether the light is occluded from the point.

        Returns:
            The ambient + diffuse + specular color.
        """
        if self.pattern is not None:
            surface = self.pattern.pattern_at_shape(shape, point)
        else:
            surface = self.color

        effective_color = surface * light.intensity
        ambient = effective_color * self.ambient
        if in_shadow:
            return ambient

        lightv = (light.position - point).normalize()
        light_dot_normal = lightv.dot(normalv)
        if light_dot_normal <= 0.0:
            # Light is on the other side of the surface
            return ambient

        diffuse = effective_color * (self.diffuse * light_dot_normal)

        reflectv = reflect(-lightv, normalv)
        reflect_dot_eye = reflectv.dot(eyev)
        if reflect_dot_eye <= 0.0:
            specular = BLACK
        else:
            specular = light.intensity * (self.specular * reflect_dot_eye**self.shininess)

        return ambient + diffuse + specular
