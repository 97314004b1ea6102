"""Unit tests for sphere intersection.

Tests cover:
- Ray hitting sphere from outside
- Ray missing sphere (negative sentinel)
- Ray starting inside sphere and sphere behind the ray (negative near root)
- Ray tangent to sphere
- Containment predicate
- Kernel-side hit_distance agreeing with the Python version
"""

import math

import pytest
import taichi as ti


class TestSphereBasics:
    """Tests for the Sphere dataclass."""

    def test_default_color_is_white(self):
        """Test that spheres default to a white surface."""
        from raylight.core.vector import Vec3
        from raylight.geometry.sphere import Sphere

        sphere = Sphere(center=Vec3(0.0, 0.0, -1.0), radius=0.5)
        assert sphere.color == Vec3(1.0, 1.0, 1.0)

    @pytest.mark.parametrize("radius", [0.0, -1.5])
    def test_rejects_non_positive_radius(self, radius):
        """Test that a non-positive radius is rejected."""
        from raylight.core.vector import Vec3
        from raylight.geometry.sphere import Sphere

        with pytest.raises(ValueError, match="radius must be positive"):
            Sphere(center=Vec3(0.0, 0.0, -1.0), radius=radius)


class TestSphereIntersection:
    """Tests for the Python ray-sphere intersection."""

    def test_direct_hit_from_outside(self):
        """Test a ray aimed at the center hits at distance(origin, center) - r."""
        from raylight.core.vector import Vec3, distance, normalize, subtract
        from raylight.geometry.sphere import Sphere, intersect

        sphere = Sphere(center=Vec3(-2.0, 0.0, -5.0), radius=1.5)
        origin = Vec3(0.0, 0.0, 0.0)
        direction = normalize(subtract(sphere.center, origin))

        t = intersect(origin, direction, sphere)

        expected = distance(origin, sphere.center) - sphere.radius
        assert t > 0
        assert abs(t - expected) < 1e-9
        assert abs(expected - (math.sqrt(29.0) - 1.5)) < 1e-12

    def test_miss_returns_sentinel(self):
        """Test a ray pointing away along +x misses the default sphere."""
        from raylight.core.vector import Vec3
        from raylight.geometry.sphere import NO_HIT, Sphere, intersect

        sphere = Sphere(center=Vec3(-2.0, 0.0, -5.0), radius=1.5)
        t = intersect(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0), sphere)

        assert t == NO_HIT
        assert t < 0

    def test_origin_inside_returns_negative_near_root(self):
        """Test that from the center, the near root lies behind the origin."""
        from raylight.core.vector import Vec3
        from raylight.geometry.sphere import Sphere, intersect

        sphere = Sphere(center=Vec3(0.0, 0.0, 0.0), radius=1.5)
        t = intersect(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0), sphere)

        assert abs(t - (-1.5)) < 1e-12

    def test_sphere_behind_ray(self):
        """Test a sphere behind the origin gives a negative distance."""
        from raylight.core.vector import Vec3
        from raylight.geometry.sphere import Sphere, intersect

        sphere = Sphere(center=Vec3(0.0, 0.0, -5.0), radius=1.0)
        t = intersect(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, 1.0), sphere)

        assert abs(t - (-6.0)) < 1e-12

    def test_tangent_ray(self):
        """Test a grazing ray (zero discriminant) hits at the tangent point."""
        from raylight.core.vector import Vec3
        from raylight.geometry.sphere import Sphere, intersect

        sphere = Sphere(center=Vec3(0.0, 0.0, -5.0), radius=1.0)
        t = intersect(Vec3(1.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0), sphere)

        assert abs(t - 5.0) < 1e-12

    def test_unnormalized_direction(self):
        """Test that t is expressed in units of the given direction."""
        from raylight.core.vector import Vec3
        from raylight.geometry.sphere import Sphere, intersect

        sphere = Sphere(center=Vec3(0.0, 0.0, -5.0), radius=1.0)
        t = intersect(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -2.0), sphere)

        # Hit point is z = -4, reached at t = 2 with |direction| = 2
        assert abs(t - 2.0) < 1e-12


class TestIsInside:
    """Tests for the containment predicate."""

    def test_center_is_inside(self):
        """Test the center is inside the sphere."""
        from raylight.core.vector import Vec3
        from raylight.geometry.sphere import Sphere, is_inside

        sphere = Sphere(center=Vec3(-2.0, 0.0, -5.0), radius=1.5)
        assert is_inside(sphere.center, sphere)

    def test_surface_point_is_not_inside(self):
        """Test that containment is strict at the surface."""
        from raylight.core.vector import Vec3
        from raylight.geometry.sphere import Sphere, is_inside

        sphere = Sphere(center=Vec3(-2.0, 0.0, -5.0), radius=1.5)
        assert not is_inside(Vec3(-0.5, 0.0, -5.0), sphere)

    def test_default_light_is_outside(self):
        """Test the default light position is outside the default sphere."""
        from raylight.core.vector import Vec3
        from raylight.geometry.sphere import Sphere, is_inside

        sphere = Sphere(center=Vec3(-2.0, 0.0, -5.0), radius=1.5)
        assert not is_inside(Vec3(3.0, 0.0, -5.0), sphere)


class TestKernelHitDistance:
    """Tests for the Taichi-side hit_distance."""

    def test_hit_distance_direct_hit(self):
        """Test kernel intersection from outside."""
        from raylight.geometry.sphere import hit_distance, vec3

        result = ti.field(dtype=ti.f32, shape=())

        @ti.kernel
        def test_kernel():
            result[None] = hit_distance(
                vec3(0.0, 0.0, 0.0), vec3(0.0, 0.0, -1.0), vec3(0.0, 0.0, -5.0), 1.0
            )

        test_kernel()
        assert abs(result[None] - 4.0) < 1e-5

    def test_hit_distance_miss(self):
        """Test kernel intersection returns the sentinel on a miss."""
        from raylight.geometry.sphere import NO_HIT, hit_distance, vec3

        result = ti.field(dtype=ti.f32, shape=())

        @ti.kernel
        def test_kernel():
            result[None] = hit_distance(
                vec3(0.0, 0.0, 0.0), vec3(1.0, 0.0, 0.0), vec3(-2.0, 0.0, -5.0), 1.5
            )

        test_kernel()
        assert result[None] == NO_HIT

    def test_hit_distance_matches_python(self):
        """Test kernel and Python intersections agree for an oblique ray."""
        from raylight.core.vector import Vec3, normalize
        from raylight.geometry.sphere import Sphere, hit_distance, intersect, vec3

        direction = normalize(Vec3(-0.35, 0.1, -1.0))
        sphere = Sphere(center=Vec3(-2.0, 0.0, -5.0), radius=1.5)
        expected = intersect(Vec3(0.0, 0.0, 0.0), direction, sphere)

        result = ti.field(dtype=ti.f32, shape=())

        @ti.kernel
        def test_kernel(dx: ti.f32, dy: ti.f32, dz: ti.f32):
            result[None] = hit_distance(
                vec3(0.0, 0.0, 0.0), vec3(dx, dy, dz), vec3(-2.0, 0.0, -5.0), 1.5
            )

        test_kernel(direction.x, direction.y, direction.z)
        assert expected > 0
        assert abs(result[None] - expected) < 1e-4
