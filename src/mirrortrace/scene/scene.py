"""Scene container and sequential renderer.

The Scene owns the camera parameters, the light, the ground plane and an
ordered list of spheres. It renders a frame as a lazy sequence of
(x, y, color) triples and animates its spheres between frames with update().

update() and render() must not interleave: the caller performs one update,
then consumes one render, per frame.

Example:
    >>> import math
    >>> from mirrortrace.scene.scene import Scene
    >>> scene = Scene(600, 800, math.pi / 2, light, plane)
    >>> scene.add_sphere(sphere)
    >>> for x, y, color in scene.render():
    ...     buffer[y, x] = color.to_tuple()
"""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger

from mirrortrace.camera.pinhole import PinholeCamera
from mirrortrace.core.color import SKY_COLOR, Color
from mirrortrace.core.integrator import resolve_ray_color
from mirrortrace.core.ray import Ray
from mirrortrace.core.vector import Vector3
from mirrortrace.geometry.plane import Plane
from mirrortrace.geometry.sphere import Sphere
from mirrortrace.materials.material import Material
from mirrortrace.scene.light import Light

# (x, y, color) triple emitted by Scene.render()
Pixel = tuple[int, int, Color]


class FrameIterable:
    """Restartable view over every pixel of a scene.

    Each iteration re-renders the frame from the current scene state. Pixels
    are emitted column by column: x in the outer loop, y in the inner loop.
    """

    def __init__(self, scene: Scene) -> None:
        self._scene = scene

    def __iter__(self) -> Iterator[Pixel]:
        scene = self._scene
        for x in range(scene.width):
            for y in range(scene.height):
                yield x, y, scene.render_pixel(x, y)

    def __len__(self) -> int:
        return self._scene.width * self._scene.height


class Scene:
    """A renderable scene with one plane, one light and a list of spheres.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        fov: Field of view in radians.
        light: The directional light.
        plane: The ground plane.
        spheres: Spheres in insertion order.
    """

    def __init__(
        self,
        height: int,
        width: int,
        fov: float,
        light: Light,
        plane: Plane,
    ) -> None:
        """Create an empty scene.

        Args:
            height: Image height in pixels.
            width: Image width in pixels.
            fov: Field of view in radians.
            light: The directional light.
            plane: The ground plane.
        """
        self.height = height
        self.width = width
        self.fov = fov
        self.light = light
        self.plane = plane
        self.spheres: list[Sphere] = []
        self._camera = PinholeCamera(width=width, height=height, fov=fov)
        logger.debug("Created {}x{} scene (fov={:.4f} rad)", width, height, fov)

    @property
    def camera(self) -> PinholeCamera:
        """The pinhole camera matching the scene dimensions and fov."""
        return self._camera

    @property
    def materials(self) -> list[Material]:
        """Materials of every primitive, plane first."""
        return [self.plane.material] + [s.material for s in self.spheres]

    def add_sphere(self, sphere: Sphere) -> None:
        """Append a sphere to the scene."""
        self.spheres.append(sphere)

    def create_primary_ray(self, x: int, y: int) -> Ray:
        """Create the camera ray through pixel (x, y)."""
        return self._camera.get_ray(x, y)

    def resolve_ray_color(self, ray: Ray | None, acc_factor: float = 1.0) -> Color | None:
        """Resolve the color seen along a ray (None if nothing is hit)."""
        return resolve_ray_color(self, ray, acc_factor)

    def render_pixel(self, x: int, y: int) -> Color:
        """Render one pixel, falling back to the sky color on a miss."""
        color = self.resolve_ray_color(self.create_primary_ray(x, y), 1.0)
        if color is None:
            return SKY_COLOR
        return color

    def render(self) -> FrameIterable:
        """Render every pixel of the frame.

        Returns:
            A lazy, restartable iterable of (x, y, color) covering each pixel
            exactly once, with x in the outer loop and y in the inner loop.
        """
        return FrameIterable(self)

    def update(self, angle: float, pivot: Vector3) -> None:
        """Rotate every sphere about the vertical axis through pivot.

        Args:
            angle: Rotation angle in radians (see Vector3.rotate_y).
            pivot: Point the vertical rotation axis passes through.
        """
        for sphere in self.spheres:
            sphere.center = (sphere.center - pivot).rotate_y(angle) + pivot

    def __repr__(self) -> str:
        return (
            f"Scene(width={self.width}, height={self.height}, "
            f"fov={self.fov:.4f}, spheres={len(self.spheres)})"
        )
