"""Unit tests for the World and recursive light transport.

Tests cover:
- World construction and the default two-sphere world
- Intersecting a world
- Shadow tests
- shade_hit() and color_at(), inside hits and shadows
- Reflection, refraction and their depth limits
- Schlick blending for reflective, transparent surfaces
"""

import math

import pytest

from src.whitted.core.matrix import scaling, translation
from src.whitted.core.ray import Ray
from src.whitted.core.tuples import BLACK, WHITE, color, point, vector
from src.whitted.geometry.plane import Plane
from src.whitted.geometry.sphere import Sphere
from src.whitted.materials.material import Material
from src.whitted.materials.pattern import TestPattern
from src.whitted.scene.intersection import Intersection, intersections, prepare_computations
from src.whitted.scene.light import PointLight
from src.whitted.scene.world import REFLECTION_DEPTH, World

SQRT2_2 = math.sqrt(2) / 2


def assert_color(c, expected, tol=1e-4):
    """Assert a color matches an (r, g, b) triple within tol."""
    assert (c.red, c.green, c.blue) == pytest.approx(expected, abs=tol)


@pytest.fixture
def world():
    """The default two-sphere world."""
    return World.default()


class TestWorldConstruction:
    """Tests for building worlds."""

    def test_empty_world(self):
        """Test a new world has no objects or lights."""
        w = World()
        assert w.objects == []
        assert w.lights == []

    def test_default_world(self, world):
        """Test the default world's light and spheres."""
        s1 = Sphere(material=Material(color=color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
        s2 = Sphere(transform=scaling(0.5, 0.5, 0.5))
        assert world.lights == [PointLight(point(-10, 10, -10), WHITE)]
        assert s1 in world.objects
        assert s2 in world.objects

    def test_default_recursion_depth(self):
        """Test the default recursion budget."""
        assert REFLECTION_DEPTH == 5

    def test_intersect_world(self, world):
        """Test a ray collects hits from every shape."""
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        xs = intersections(*world.intersect(r))
        assert [i.t for i in xs] == pytest.approx([4, 4.5, 5.5, 6])

    def test_intersect_world_miss(self, world):
        """Test a ray missing everything."""
        assert world.intersect(Ray(point(0, 0, -5), vector(0, 1, 0))) == []


class TestShadows:
    """Tests for is_shadowed()."""

    @pytest.mark.parametrize(
        "p, expected",
        [
            (point(0, 10, 0), False),
            (point(10, -10, 10), True),
            (point(-20, 20, -20), False),
            (point(-2, 2, -2), False),
        ],
    )
    def test_is_shadowed(self, world, p, expected):
        """Test occluders count only between the point and the light."""
        assert world.is_shadowed(world.lights[0], p) is expected


class TestShading:
    """Tests for shade_hit() and color_at()."""

    def test_shade_intersection(self, world):
        """Test shading an outside hit."""
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        shape = world.objects[0]
        comps = prepare_computations(Intersection(4, shape), r)
        assert_color(world.shade_hit(comps), (0.38066, 0.47583, 0.2855))

    def test_shade_intersection_from_inside(self, world):
        """Test shading an inside hit."""
        world.lights = [PointLight(point(0, 0.25, 0), WHITE)]
        r = Ray(point(0, 0, 0), vector(0, 0, 1))
        shape = world.objects[1]
        comps = prepare_computations(Intersection(0.5, shape), r)
        assert_color(world.shade_hit(comps), (0.90498, 0.90498, 0.90498))

    def test_shade_hit_in_shadow(self):
        """Test a shadowed hit receives only ambient light."""
        s1 = Sphere()
        s2 = Sphere(transform=translation(0, 0, 10))
        w = World([s1, s2], [PointLight(point(0, 0, -10), WHITE)])
        r = Ray(point(0, 0, 5), vector(0, 0, 1))
        comps = prepare_computations(Intersection(4, s2), r)
        assert_color(w.shade_hit(comps), (0.1, 0.1, 0.1))

    def test_shade_hit_sums_lights(self, world):
        """Test every light contributes."""
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        comps = prepare_computations(Intersection(4, world.objects[0]), r)
        single = world.shade_hit(comps)
        world.lights = world.lights * 2
        double = world.shade_hit(comps)
        assert_color(double, tuple(2 * v for v in single))

    def test_color_at_miss(self, world):
        """Test a miss is black."""
        r = Ray(point(0, 0, -5), vector(0, 1, 0))
        assert world.color_at(r) == BLACK

    def test_color_at_hit(self, world):
        """Test the color of a primary hit."""
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        assert_color(world.color_at(r), (0.38066, 0.47583, 0.2855))

    def test_color_at_hit_behind_ray(self, world):
        """Test the hit behind the ray origin is ignored."""
        outer, inner = world.objects
        outer.material.ambient = 1.0
        inner.material.ambient = 1.0
        r = Ray(point(0, 0, 0.75), vector(0, 0, -1))
        assert world.color_at(r) == inner.material.color

    def test_no_lights_is_black(self):
        """Test a world without lights shades everything black."""
        w = World([Sphere()])
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        assert w.color_at(r) == BLACK


class TestReflection:
    """Tests for reflected_color()."""

    def test_nonreflective_material(self, world):
        """Test a matte surface reflects nothing."""
        r = Ray(point(0, 0, 0), vector(0, 0, 1))
        shape = world.objects[1]
        shape.material.ambient = 1.0
        comps = prepare_computations(Intersection(1, shape), r)
        assert world.reflected_color(comps) == BLACK

    def test_reflective_material(self, world):
        """Test the reflected color of a half-mirror plane."""
        shape = Plane(material=Material(reflective=0.5), transform=translation(0, -1, 0))
        world.objects.append(shape)
        r = Ray(point(0, 0, -3), vector(0, -SQRT2_2, SQRT2_2))
        comps = prepare_computations(Intersection(math.sqrt(2), shape), r)
        assert_color(world.reflected_color(comps), (0.19032, 0.2379, 0.14274), tol=1e-3)

    def test_shade_hit_with_reflection(self, world):
        """Test shade_hit adds the reflected color."""
        shape = Plane(material=Material(reflective=0.5), transform=translation(0, -1, 0))
        world.objects.append(shape)
        r = Ray(point(0, 0, -3), vector(0, -SQRT2_2, SQRT2_2))
        comps = prepare_computations(Intersection(math.sqrt(2), shape), r)
        assert_color(world.shade_hit(comps), (0.87677, 0.92436, 0.82918), tol=1e-3)

    def test_mutually_reflective_surfaces_terminate(self):
        """Test facing mirrors stop after the recursion budget."""
        lower = Plane(material=Material(reflective=1.0), transform=translation(0, -1, 0))
        upper = Plane(material=Material(reflective=1.0), transform=translation(0, 1, 0))
        w = World([lower, upper], [PointLight(point(0, 0, 0), WHITE)])
        r = Ray(point(0, 0, 0), vector(0, 1, 0))
        c = w.color_at(r)
        assert all(math.isfinite(v) for v in c)

    def test_reflection_at_max_depth(self, world):
        """Test no reflection once the budget is used up."""
        shape = Plane(material=Material(reflective=0.5), transform=translation(0, -1, 0))
        world.objects.append(shape)
        r = Ray(point(0, 0, -3), vector(0, -SQRT2_2, SQRT2_2))
        comps = prepare_computations(Intersection(math.sqrt(2), shape), r)
        assert world.reflected_color(comps, 0) == BLACK


class TestRefraction:
    """Tests for refracted_color()."""

    def test_opaque_surface(self, world):
        """Test an opaque surface refracts nothing."""
        shape = world.objects[0]
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        xs = intersections(Intersection(4, shape), Intersection(6, shape))
        comps = prepare_computations(xs[0], r, xs)
        assert world.refracted_color(comps, 5) == BLACK

    def test_max_depth(self, world):
        """Test no refraction once the budget is used up."""
        shape = world.objects[0]
        shape.material.transparency = 1.0
        shape.material.refractive_index = 1.5
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        xs = intersections(Intersection(4, shape), Intersection(6, shape))
        comps = prepare_computations(xs[0], r, xs)
        assert world.refracted_color(comps, 0) == BLACK

    def test_total_internal_reflection(self, world):
        """Test total internal reflection yields black."""
        shape = world.objects[0]
        shape.material.transparency = 1.0
        shape.material.refractive_index = 1.5
        r = Ray(point(0, 0, SQRT2_2), vector(0, 1, 0))
        xs = intersections(Intersection(-SQRT2_2, shape), Intersection(SQRT2_2, shape))
        comps = prepare_computations(xs[1], r, xs)
        assert world.refracted_color(comps, 5) == BLACK

    def test_refracted_ray(self, world):
        """Test the color seen along a refracted ray."""
        a, b = world.objects
        a.material.ambient = 1.0
        a.material.pattern = TestPattern()
        b.material.transparency = 1.0
        b.material.refractive_index = 1.5
        r = Ray(point(0, 0, 0.1), vector(0, 1, 0))
        xs = intersections(
            Intersection(-0.9899, a),
            Intersection(-0.4899, b),
            Intersection(0.4899, b),
            Intersection(0.9899, a),
        )
        comps = prepare_computations(xs[2], r, xs)
        assert_color(world.refracted_color(comps, 5), (0, 0.99888, 0.04725), tol=1e-3)

    def test_shade_hit_with_transparency(self, world):
        """Test shade_hit adds the refracted color."""
        floor = Plane(
            transform=translation(0, -1, 0),
            material=Material(transparency=0.5, refractive_index=1.5),
        )
        ball = Sphere(
            transform=translation(0, -3.5, -0.5),
            material=Material(color=color(1, 0, 0), ambient=0.5),
        )
        world.objects.extend([floor, ball])
        r = Ray(point(0, 0, -3), vector(0, -SQRT2_2, SQRT2_2))
        xs = intersections(Intersection(math.sqrt(2), floor))
        comps = prepare_computations(xs[0], r, xs)
        assert_color(world.shade_hit(comps, 5), (0.93642, 0.68642, 0.68642), tol=1e-3)

    def test_shade_hit_with_schlick(self, world):
        """Test reflective, transparent surfaces blend by reflectance."""
        floor = Plane(
            transform=translation(0, -1, 0),
            material=Material(reflective=0.5, transparency=0.5, refractive_index=1.5),
        )
        ball = Sphere(
            transform=translation(0, -3.5, -0.5),
            material=Material(color=color(1, 0, 0), ambient=0.5),
        )
        world.objects.extend([floor, ball])
        r = Ray(point(0, 0, -3), vector(0, -SQRT2_2, SQRT2_2))
        xs = intersections(Intersection(math.sqrt(2), floor))
        comps = prepare_computations(xs[0], r, xs)
        assert_color(world.shade_hit(comps, 5), (0.93391, 0.69643, 0.69243), tol=1e-3)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
