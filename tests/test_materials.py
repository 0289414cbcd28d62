"""Unit tests for Phong materials and procedural patterns.

Tests cover:
- Material defaults and copies
- Phong lighting for eye/light placements and shadows
- Stripe, gradient, ring and checkers patterns
- Pattern placement through object and pattern transforms
"""

import math

import pytest

from src.whitted.core.matrix import IDENTITY, scaling, translation
from src.whitted.core.tuples import BLACK, WHITE, color, point, vector
from src.whitted.geometry.sphere import Sphere
from src.whitted.materials.material import Material
from src.whitted.materials.pattern import (
    CheckersPattern,
    GradientPattern,
    RingPattern,
    StripePattern,
    TestPattern,
)
from src.whitted.scene.light import PointLight

SQRT2_2 = math.sqrt(2) / 2


class TestMaterialDefaults:
    """Tests for material construction."""

    def test_defaults(self):
        """Test the default material coefficients."""
        m = Material()
        assert m.color == WHITE
        assert m.ambient == 0.1
        assert m.diffuse == 0.9
        assert m.specular == 0.9
        assert m.shininess == 200.0
        assert m.reflective == 0.0
        assert m.transparency == 0.0
        assert m.refractive_index == 1.0
        assert m.pattern is None

    def test_with_returns_copy(self):
        """Test with_ replaces fields without mutating the original."""
        m = Material()
        glass = m.with_(transparency=1.0, refractive_index=1.5)
        assert glass.transparency == 1.0
        assert glass.refractive_index == 1.5
        assert m.transparency == 0.0


class TestLighting:
    """Tests for the Phong lighting function."""

    @pytest.fixture
    def setup(self):
        return Material(), Sphere(), point(0, 0, 0)

    def test_eye_between_light_and_surface(self, setup):
        """Test full ambient, diffuse and specular."""
        m, shape, position = setup
        light = PointLight(point(0, 0, -10), WHITE)
        result = m.lighting(shape, light, position, vector(0, 0, -1), vector(0, 0, -1))
        assert result == color(1.9, 1.9, 1.9)

    def test_eye_offset_45_degrees(self, setup):
        """Test the specular highlight drops off with an offset eye."""
        m, shape, position = setup
        light = PointLight(point(0, 0, -10), WHITE)
        eyev = vector(0, SQRT2_2, -SQRT2_2)
        result = m.lighting(shape, light, position, eyev, vector(0, 0, -1))
        assert result == color(1.0, 1.0, 1.0)

    def test_light_offset_45_degrees(self, setup):
        """Test diffuse falls off with the light angle."""
        m, shape, position = setup
        light = PointLight(point(0, 10, -10), WHITE)
        result = m.lighting(shape, light, position, vector(0, 0, -1), vector(0, 0, -1))
        assert result == color(0.7364, 0.7364, 0.7364)

    def test_eye_in_reflection_path(self, setup):
        """Test the full specular highlight in the reflection path."""
        m, shape, position = setup
        light = PointLight(point(0, 10, -10), WHITE)
        eyev = vector(0, -SQRT2_2, -SQRT2_2)
        result = m.lighting(shape, light, position, eyev, vector(0, 0, -1))
        assert result == color(1.6364, 1.6364, 1.6364)

    def test_light_behind_surface(self, setup):
        """Test only ambient remains when the light is behind the surface."""
        m, shape, position = setup
        light = PointLight(point(0, 0, 10), WHITE)
        result = m.lighting(shape, light, position, vector(0, 0, -1), vector(0, 0, -1))
        assert result == color(0.1, 0.1, 0.1)

    def test_surface_in_shadow(self, setup):
        """Test only ambient remains in shadow."""
        m, shape, position = setup
        light = PointLight(point(0, 0, -10), WHITE)
        result = m.lighting(
            shape, light, position, vector(0, 0, -1), vector(0, 0, -1), in_shadow=True
        )
        assert result == color(0.1, 0.1, 0.1)

    def test_light_intensity_tints_result(self, setup):
        """Test a colored light tints ambient, diffuse and specular."""
        m, shape, position = setup
        light = PointLight(point(0, 0, -10), color(1, 0, 0))
        result = m.lighting(shape, light, position, vector(0, 0, -1), vector(0, 0, -1))
        assert result == color(1.9, 0, 0)

    def test_lighting_with_pattern(self):
        """Test the pattern replaces the material color."""
        m = Material(
            pattern=StripePattern(WHITE, BLACK),
            ambient=1.0,
            diffuse=0.0,
            specular=0.0,
        )
        shape = Sphere()
        light = PointLight(point(0, 0, -10), WHITE)
        eyev = vector(0, 0, -1)
        normalv = vector(0, 0, -1)
        assert m.lighting(shape, light, point(0.9, 0, 0), eyev, normalv) == WHITE
        assert m.lighting(shape, light, point(1.1, 0, 0), eyev, normalv) == BLACK


class TestStripePattern:
    """Tests for the stripe pattern."""

    def test_colors(self):
        """Test the pattern keeps its two colors."""
        p = StripePattern(WHITE, BLACK)
        assert p.a == WHITE
        assert p.b == BLACK

    @pytest.mark.parametrize(
        "p",
        [point(0, 0, 0), point(0, 1, 0), point(0, 2, 0), point(0, 0, 1), point(0, 0, 2)],
    )
    def test_constant_in_y_and_z(self, p):
        """Test stripes only vary along x."""
        assert StripePattern(WHITE, BLACK).pattern_at(p) == WHITE

    @pytest.mark.parametrize(
        "x, expected",
        [(0, WHITE), (0.9, WHITE), (1, BLACK), (-0.1, BLACK), (-1, BLACK), (-1.1, WHITE)],
    )
    def test_alternates_in_x(self, x, expected):
        """Test stripes alternate on integer x."""
        assert StripePattern(WHITE, BLACK).pattern_at(point(x, 0, 0)) == expected

    def test_object_transform(self):
        """Test the shape transform moves the stripes."""
        shape = Sphere(transform=scaling(2, 2, 2))
        p = StripePattern(WHITE, BLACK)
        assert p.pattern_at_shape(shape, point(1.5, 0, 0)) == WHITE

    def test_pattern_transform(self):
        """Test the pattern transform moves the stripes."""
        p = StripePattern(WHITE, BLACK, transform=scaling(2, 2, 2))
        assert p.pattern_at_shape(Sphere(), point(1.5, 0, 0)) == WHITE

    def test_object_and_pattern_transform(self):
        """Test both transforms apply together."""
        shape = Sphere(transform=scaling(2, 2, 2))
        p = StripePattern(WHITE, BLACK, transform=translation(0.5, 0, 0))
        assert p.pattern_at_shape(shape, point(2.5, 0, 0)) == WHITE


class TestPatternTransforms:
    """Tests for pattern placement using the test pattern."""

    def test_default_transform(self):
        """Test the default pattern transform is identity."""
        assert TestPattern().transform == IDENTITY

    def test_assign_transform(self):
        """Test assigning a pattern transform."""
        p = TestPattern()
        p.transform = translation(1, 2, 3)
        assert p.transform == translation(1, 2, 3)

    def test_object_transform(self):
        """Test a pattern on a transformed shape."""
        shape = Sphere(transform=scaling(2, 2, 2))
        assert TestPattern().pattern_at_shape(shape, point(2, 3, 4)) == color(1, 1.5, 2)

    def test_pattern_transform(self):
        """Test a pattern with its own transform."""
        p = TestPattern(transform=scaling(2, 2, 2))
        assert p.pattern_at_shape(Sphere(), point(2, 3, 4)) == color(1, 1.5, 2)

    def test_object_and_pattern_transform(self):
        """Test a pattern with both transforms."""
        shape = Sphere(transform=scaling(2, 2, 2))
        p = TestPattern(transform=translation(0.5, 1, 1.5))
        assert p.pattern_at_shape(shape, point(2.5, 3, 3.5)) == color(0.75, 0.5, 0.25)


class TestOtherPatterns:
    """Tests for gradient, ring and checkers patterns."""

    @pytest.mark.parametrize(
        "x, expected",
        [
            (0, WHITE),
            (0.25, color(0.75, 0.75, 0.75)),
            (0.5, color(0.5, 0.5, 0.5)),
            (0.75, color(0.25, 0.25, 0.25)),
        ],
    )
    def test_gradient(self, x, expected):
        """Test a gradient interpolates linearly between colors."""
        assert GradientPattern(WHITE, BLACK).pattern_at(point(x, 0, 0)) == expected

    @pytest.mark.parametrize(
        "p, expected",
        [
            (point(0, 0, 0), WHITE),
            (point(1, 0, 0), BLACK),
            (point(0, 0, 1), BLACK),
            (point(0.708, 0, 0.708), BLACK),
        ],
    )
    def test_ring(self, p, expected):
        """Test rings extend in both x and z."""
        assert RingPattern(WHITE, BLACK).pattern_at(p) == expected

    @pytest.mark.parametrize(
        "p, expected",
        [
            (point(0, 0, 0), WHITE),
            (point(0.99, 0, 0), WHITE),
            (point(1.01, 0, 0), BLACK),
            (point(0, 0.99, 0), WHITE),
            (point(0, 1.01, 0), BLACK),
            (point(0, 0, 0.99), WHITE),
            (point(0, 0, 1.01), BLACK),
        ],
    )
    def test_checkers(self, p, expected):
        """Test checkers repeat in every dimension."""
        assert CheckersPattern(WHITE, BLACK).pattern_at(p) == expected

    def test_pattern_equality(self):
        """Test patterns compare by kind, colors and transform."""
        assert StripePattern(WHITE, BLACK) == StripePattern(WHITE, BLACK)
        assert StripePattern(WHITE, BLACK) != RingPattern(WHITE, BLACK)
        assert StripePattern(WHITE, BLACK) != StripePattern(BLACK, WHITE)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
