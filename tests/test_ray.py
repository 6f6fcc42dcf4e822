"""Unit tests for the Ray type."""


class TestRay:
    """Tests for ray evaluation and reflection."""

    def test_at(self):
        """Test that at(t) returns origin + t * direction."""
        from mirrortrace.core.ray import Ray
        from mirrortrace.core.vector import Vector3

        ray = Ray(origin=Vector3(0.0, 0.0, 0.0), direction=Vector3(0.0, 0.0, -1.0))
        assert ray.at(5.0) == Vector3(0.0, 0.0, -5.0)
        assert ray.at(0.0) == Vector3(0.0, 0.0, 0.0)

    def test_at_with_offset_origin(self):
        """Test at(t) with a non-zero origin."""
        from mirrortrace.core.ray import Ray
        from mirrortrace.core.vector import Vector3

        ray = Ray(origin=Vector3(1.0, 2.0, 3.0), direction=Vector3(0.0, 1.0, 0.0))
        assert ray.at(2.0) == Vector3(1.0, 4.0, 3.0)

    def test_reflect_off_floor(self):
        """Test reflecting a downward diagonal ray off an upward normal."""
        from mirrortrace.core.ray import Ray
        from mirrortrace.core.vector import Vector3

        ray = Ray(origin=Vector3(0.0, 0.0, 0.0), direction=Vector3(1.0, -1.0, 0.0).normalize())
        hit = Vector3(1.0, -1.0, 0.0)
        reflected = ray.reflect(hit, Vector3(0.0, 1.0, 0.0))

        assert reflected.origin == hit
        assert reflected.direction == Vector3(1.0, 1.0, 0.0)

    def test_reflect_keeps_incident_length(self):
        """Test that the reflected direction has the incident segment's length."""
        from mirrortrace.core.ray import Ray
        from mirrortrace.core.vector import Vector3

        ray = Ray(origin=Vector3(0.0, 0.0, 0.0), direction=Vector3(0.0, 0.0, -1.0))
        hit = Vector3(0.0, 0.0, -3.0)
        reflected = ray.reflect(hit, Vector3(0.0, 0.0, 1.0))

        assert reflected.direction == Vector3(0.0, 0.0, 3.0)
        assert reflected.direction.norm() == 3.0
