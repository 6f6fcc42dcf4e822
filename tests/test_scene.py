"""Tests for the Scene container and its sequential renderer.

Tests cover:
- Primary rays
- Frame coverage and ordering
- Sky fallback
- Sphere animation about a pivot
"""

import math

import pytest


def plane_only_scene(width=10, height=10):
    """A scene with just the reference floor and light."""
    from mirrortrace.core.color import WHITE
    from mirrortrace.core.vector import Vector3
    from mirrortrace.geometry.plane import Plane
    from mirrortrace.scene.light import Light
    from mirrortrace.scene.reference import PLANE_MATERIAL
    from mirrortrace.scene.scene import Scene

    light = Light(direction=Vector3(0.0, -0.3, -1.0).normalize(), color=WHITE, intensity=3.0)
    plane = Plane(Vector3(0.0, -1.0, 0.0), Vector3(0.0, 1.0, 0.0), PLANE_MATERIAL)
    return Scene(height, width, math.pi / 2.0, light, plane)


class TestSceneBasics:
    """Tests for scene construction and primary rays."""

    def test_add_sphere_keeps_order(self, matte):
        """Test spheres are stored in insertion order."""
        from mirrortrace.core.vector import Vector3
        from mirrortrace.geometry.sphere import Sphere

        scene = plane_only_scene()
        first = Sphere(Vector3(0.0, 0.0, -3.0), 1.0, matte)
        second = Sphere(Vector3(1.0, 0.0, -3.0), 0.5, matte)
        scene.add_sphere(first)
        scene.add_sphere(second)
        assert scene.spheres == [first, second]

    def test_materials_plane_first(self, reference_scene):
        """Test materials lists the plane before the spheres."""
        from mirrortrace.scene.reference import PLANE_MATERIAL

        materials = reference_scene.materials
        assert len(materials) == 4
        assert materials[0] == PLANE_MATERIAL

    def test_primary_ray(self, reference_scene):
        """Test primary rays are unit length and look into -z."""
        ray = reference_scene.create_primary_ray(400, 300)
        assert abs(ray.direction.norm() - 1.0) < 1e-12
        assert ray.direction.z < 0.0

    def test_repr(self, reference_scene):
        """Test the repr mentions the frame size."""
        assert "width=800" in repr(reference_scene)
        assert "spheres=3" in repr(reference_scene)


class TestSceneRender:
    """Tests for Scene.render()."""

    def test_covers_every_pixel_once(self):
        """Test the frame emits each (x, y) exactly once."""
        scene = plane_only_scene(width=8, height=6)
        coords = [(x, y) for x, y, _ in scene.render()]
        assert len(coords) == 48
        assert set(coords) == {(x, y) for x in range(8) for y in range(6)}

    def test_column_major_order(self):
        """Test x is the outer loop and y the inner loop."""
        scene = plane_only_scene(width=3, height=2)
        coords = [(x, y) for x, y, _ in scene.render()]
        assert coords == [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)]

    def test_render_is_restartable(self):
        """Test iterating the frame twice yields the same pixels."""
        scene = plane_only_scene(width=4, height=4)
        frame = scene.render()
        assert list(frame) == list(frame)
        assert len(frame) == 16

    def test_sky_fallback(self):
        """Test rays above the horizon of a plane-only scene see the sky."""
        from mirrortrace.core.color import SKY_COLOR

        scene = plane_only_scene()
        for x in range(scene.width):
            assert scene.render_pixel(x, 0) == SKY_COLOR

    def test_floor_is_not_sky(self):
        """Test rays below the horizon hit the floor."""
        from mirrortrace.core.color import SKY_COLOR

        scene = plane_only_scene()
        assert scene.render_pixel(5, 9) != SKY_COLOR

    def test_reference_center_hits_geometry(self, reference_scene):
        """Test the middle of the reference frame is not background."""
        from mirrortrace.core.color import SKY_COLOR

        assert reference_scene.render_pixel(400, 300) != SKY_COLOR

    def test_resolve_ray_color_default_energy(self, reference_scene):
        """Test the Scene method matches the integrator at full energy."""
        from mirrortrace.core.integrator import resolve_ray_color

        ray = reference_scene.create_primary_ray(200, 500)
        assert reference_scene.resolve_ray_color(ray) == resolve_ray_color(
            reference_scene, ray, 1.0
        )


class TestSceneUpdate:
    """Tests for Scene.update()."""

    def test_rotate_about_origin(self, matte):
        """Test a quarter turn about the origin carries +x toward +z."""
        from mirrortrace.core.vector import ZERO, Vector3
        from mirrortrace.geometry.sphere import Sphere

        scene = plane_only_scene()
        scene.add_sphere(Sphere(Vector3(1.0, 0.0, 0.0), 0.5, matte))
        scene.update(math.pi / 2.0, ZERO)

        c = scene.spheres[0].center
        assert abs(c.x) < 1e-12
        assert abs(c.y) < 1e-12
        assert abs(c.z - 1.0) < 1e-12

    def test_rotate_about_pivot(self, matte):
        """Test rotation is about the vertical axis through the pivot."""
        from mirrortrace.core.vector import Vector3
        from mirrortrace.geometry.sphere import Sphere
        from mirrortrace.scene.reference import ANIMATION_PIVOT

        scene = plane_only_scene()
        scene.add_sphere(Sphere(Vector3(1.0, 0.0, -1.0), 0.5, matte))
        scene.update(math.pi / 2.0, ANIMATION_PIVOT)

        c = scene.spheres[0].center
        assert abs(c.x) < 1e-12
        assert abs(c.z) < 1e-12

    @pytest.mark.parametrize("angle", [0.1, 1.0, -2.5])
    def test_update_preserves_pivot_distance_and_height(self, reference_scene, angle):
        """Test spheres stay on their orbit."""
        from mirrortrace.scene.reference import ANIMATION_PIVOT

        before = [s.center for s in reference_scene.spheres]
        reference_scene.update(angle, ANIMATION_PIVOT)

        for old, sphere in zip(before, reference_scene.spheres):
            new = sphere.center
            assert new.y == old.y
            r_old = (old - ANIMATION_PIVOT).norm()
            r_new = (new - ANIMATION_PIVOT).norm()
            assert abs(r_old - r_new) < 1e-12

    def test_zero_angle_is_identity(self, reference_scene):
        """Test update(0) leaves the spheres in place."""
        from mirrortrace.scene.reference import ANIMATION_PIVOT

        before = [s.center for s in reference_scene.spheres]
        reference_scene.update(0.0, ANIMATION_PIVOT)
        for old, sphere in zip(before, reference_scene.spheres):
            assert abs((sphere.center - old).norm()) < 1e-15
