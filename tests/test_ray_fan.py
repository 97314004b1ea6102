"""Tests for the light's visualization ray fan.

Tests cover:
- Fan directions (unit length, in the XY plane, angle order)
- Ray endpoints for blocked and unblocked rays
- The blocked range and hit distance thresholds
- Empty fan for a light inside the sphere
"""

import math

import pytest


class TestFanDirection:
    """Tests for fan_direction."""

    def test_first_ray_points_along_positive_x(self):
        """Test ray 0 points along +x."""
        from raylight.core.vector import Vec3
        from raylight.scene.ray_fan import fan_direction

        assert fan_direction(0, 360) == Vec3(1.0, 0.0, 0.0)

    @pytest.mark.parametrize("index", [0, 45, 90, 180, 271, 359])
    def test_directions_are_unit_and_planar(self, index):
        """Test every direction has length 1 and z == 0."""
        from raylight.core.vector import length
        from raylight.scene.ray_fan import fan_direction

        d = fan_direction(index, 360)
        assert d.z == 0.0
        assert abs(length(d) - 1.0) < 1e-12

    def test_quarter_turn(self):
        """Test ray 90 of 360 points along +y."""
        from raylight.scene.ray_fan import fan_direction

        d = fan_direction(90, 360)
        assert abs(d.x) < 1e-12
        assert abs(d.y - 1.0) < 1e-12


class TestRayEndpoint:
    """Tests for ray_endpoint."""

    def test_blocked_ray_stops_on_surface(self):
        """Test a ray from the light toward the sphere center stops at its surface."""
        from raylight.core.vector import Vec3
        from raylight.geometry.sphere import Sphere
        from raylight.scene.ray_fan import ray_endpoint

        sphere = Sphere(center=Vec3(-2.0, 0.0, -5.0), radius=1.5)
        end, blocked = ray_endpoint(Vec3(3.0, 0.0, -5.0), Vec3(-1.0, 0.0, 0.0), sphere)

        assert blocked
        assert abs(end.x - (-0.5)) < 1e-12
        assert end.y == 0.0
        assert end.z == -5.0

    def test_unblocked_ray_has_max_length(self):
        """Test a ray pointing away from the sphere extends to the max distance."""
        from raylight.core.vector import Vec3
        from raylight.geometry.sphere import Sphere
        from raylight.scene.ray_fan import MAX_RAY_DISTANCE, ray_endpoint

        sphere = Sphere(center=Vec3(-2.0, 0.0, -5.0), radius=1.5)
        end, blocked = ray_endpoint(Vec3(3.0, 0.0, -5.0), Vec3(1.0, 0.0, 0.0), sphere)

        assert not blocked
        assert end == Vec3(3.0 + MAX_RAY_DISTANCE, 0.0, -5.0)

    def test_far_sphere_is_not_blocking(self):
        """Test a hit beyond the max distance does not block the ray."""
        from raylight.core.vector import Vec3
        from raylight.geometry.sphere import Sphere
        from raylight.scene.ray_fan import ray_endpoint

        sphere = Sphere(center=Vec3(-2.0, 0.0, -5.0), radius=1.5)
        # Near root is at t = 22 - 1.5 = 20.5
        _, blocked = ray_endpoint(Vec3(20.0, 0.0, -5.0), Vec3(-1.0, 0.0, 0.0), sphere)

        assert not blocked

    def test_light_on_surface_is_not_blocked(self):
        """Test a hit at t == 0 is below the minimum hit distance."""
        from raylight.core.vector import Vec3
        from raylight.geometry.sphere import Sphere
        from raylight.scene.ray_fan import ray_endpoint

        sphere = Sphere(center=Vec3(-2.0, 0.0, -5.0), radius=1.5)
        _, blocked = ray_endpoint(Vec3(-0.5, 0.0, -5.0), Vec3(-1.0, 0.0, 0.0), sphere)

        assert not blocked


class TestComputeRayFan:
    """Tests for compute_ray_fan on the default scene."""

    def _default_fan(self, width=1200, height=800, **kwargs):
        from raylight.scene.ray_fan import compute_ray_fan
        from raylight.scene.scene import create_scene

        sphere, light = create_scene()
        return compute_ray_fan(light.position, sphere, width, height, **kwargs)

    def test_fan_has_360_rays(self):
        """Test the default fan has one ray per degree."""
        assert len(self._default_fan()) == 360

    def test_all_rays_start_at_light_glyph(self):
        """Test every ray starts at the projected light position."""
        rays = self._default_fan()
        for ray in rays:
            assert abs(ray.screen_start[0] - 840.0) < 1e-9
            assert abs(ray.screen_start[1] - 400.0) < 1e-9

    def test_ray_toward_sphere_is_blocked(self):
        """Test ray 180 hits the sphere at t = 3.5 and ends at x = 560."""
        ray = self._default_fan()[180]

        assert ray.blocked
        # World end (-0.5, 0, -5): ((-0.5 / 5) * (800 / 1200) + 1) * 600
        assert abs(ray.screen_end[0] - 560.0) < 1e-6
        assert abs(ray.screen_end[1] - 400.0) < 1e-6

    def test_ray_away_from_sphere_is_unblocked(self):
        """Test ray 0 is unblocked and ends past the image edge."""
        ray = self._default_fan()[0]

        assert not ray.blocked
        # World end (18, 0, -5)
        assert abs(ray.screen_end[0] - 2040.0) < 1e-6

    def test_blocked_range(self):
        """Test exactly the rays within the sphere's angular radius are blocked.

        The sphere subtends asin(1.5 / 5) ~ 17.46 degrees around 180.
        """
        rays = self._default_fan()
        blocked = [i for i, ray in enumerate(rays) if ray.blocked]

        assert blocked == list(range(163, 198))

    def test_distant_light_blocks_nothing(self):
        """Test no ray is blocked when every hit lies beyond the max distance."""
        from raylight.core.vector import Vec3
        from raylight.scene.ray_fan import compute_ray_fan
        from raylight.scene.scene import create_scene

        sphere, _ = create_scene()
        rays = compute_ray_fan(Vec3(20.0, 0.0, -5.0), sphere, 1200, 800)

        assert len(rays) == 360
        assert not any(ray.blocked for ray in rays)

    def test_light_inside_sphere_gives_empty_fan(self):
        """Test a light inside the sphere produces no rays."""
        from raylight.scene.ray_fan import compute_ray_fan
        from raylight.scene.scene import create_scene

        sphere, _ = create_scene()
        assert compute_ray_fan(sphere.center, sphere, 1200, 800) == ()

    def test_custom_ray_count(self):
        """Test num_rays controls the fan size and spacing."""
        rays = self._default_fan(num_rays=4)

        assert len(rays) == 4
        # Ray 2 of 4 points along -x toward the sphere
        assert rays[2].blocked
        assert not rays[0].blocked

    def test_screen_end_matches_projection(self):
        """Test an oblique unblocked ray ends at the projected world endpoint."""
        from raylight.camera.projection import project
        from raylight.core.vector import Vec3

        ray = self._default_fan()[30]
        angle = math.radians(30)
        end = Vec3(3.0 + 15.0 * math.cos(angle), 15.0 * math.sin(angle), -5.0)
        x, y = project(end, 1200, 800)

        assert not ray.blocked
        assert abs(ray.screen_end[0] - x) < 1e-6
        assert abs(ray.screen_end[1] - y) < 1e-6
