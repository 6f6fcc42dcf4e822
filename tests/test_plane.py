"""Unit tests for the one-sided infinite plane."""

import pytest


@pytest.fixture
def floor(matte):
    from mirrortrace.core.vector import Vector3
    from mirrortrace.geometry.plane import Plane

    return Plane(origin=Vector3(0.0, -1.0, 0.0), normal=Vector3(0.0, 1.0, 0.0), material=matte)


class TestPlaneIntersection:
    """Tests for Plane.intersect."""

    def test_hit_from_above(self, floor):
        """Test a downward ray from above hits at the right distance."""
        from mirrortrace.core.ray import Ray
        from mirrortrace.core.vector import Vector3

        t = floor.intersect(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, -1.0, 0.0)))
        assert t == 1.0

    def test_oblique_hit(self, floor):
        """Test an oblique ray lands on the plane."""
        from mirrortrace.core.ray import Ray
        from mirrortrace.core.vector import Vector3

        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, -1.0, -1.0).normalize())
        t = floor.intersect(ray)
        assert t is not None
        assert abs(ray.at(t).y + 1.0) < 1e-12

    def test_parallel_ray(self, floor):
        """Test a ray parallel to the plane misses."""
        from mirrortrace.core.ray import Ray
        from mirrortrace.core.vector import Vector3

        assert floor.intersect(Ray(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0))) is None

    def test_ray_moving_away(self, floor):
        """Test a ray moving away from the front face misses."""
        from mirrortrace.core.ray import Ray
        from mirrortrace.core.vector import Vector3

        assert floor.intersect(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))) is None

    def test_back_side_is_invisible(self, floor):
        """Test rays from below the plane never hit it."""
        from mirrortrace.core.ray import Ray
        from mirrortrace.core.vector import Vector3

        below = Vector3(0.0, -2.0, 0.0)
        assert floor.intersect(Ray(below, Vector3(0.0, -1.0, 0.0))) is None
        assert floor.intersect(Ray(below, Vector3(0.0, 1.0, 0.0))) is None

    def test_origin_on_plane(self, floor):
        """Test a ray starting on the plane reports t = 0."""
        from mirrortrace.core.ray import Ray
        from mirrortrace.core.vector import Vector3

        t = floor.intersect(Ray(Vector3(3.0, -1.0, 2.0), Vector3(0.0, -1.0, 0.0)))
        assert t == 0.0

    def test_normal_is_constant(self, floor):
        """Test normal_at returns the plane normal everywhere."""
        from mirrortrace.core.vector import Vector3

        assert floor.normal_at(Vector3(10.0, -1.0, -3.0)) == Vector3(0.0, 1.0, 0.0)
