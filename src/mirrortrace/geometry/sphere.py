"""Sphere primitive with geometric ray-sphere intersection.

The intersection projects the center-to-origin vector onto the ray direction
instead of solving the full quadratic:

    L  = center - origin
    d  = L . D                (distance along the ray to the closest approach)
    h2 = L . L - d^2          (squared distance from center to the ray line)
    s2 = radius^2 - h2        (squared half-chord)
    t0 = d - sqrt(s2)

Only the near root t0 is reported, and only when it lies in front of the ray
origin. Rays starting inside the sphere therefore never hit it, which keeps
shadow and reflection rays from re-entering the surface they left.

Example:
    >>> from mirrortrace.core.ray import Ray
    >>> from mirrortrace.core.vector import Vector3
    >>> from mirrortrace.geometry.sphere import Sphere
    >>> sphere = Sphere(center=Vector3(0.0, 0.0, -5.0), radius=1.0, material=material)
    >>> sphere.intersect(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)))
    4.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from mirrortrace.core.ray import Ray
from mirrortrace.core.vector import Vector3
from mirrortrace.materials.material import Material


@dataclass
class Sphere:
    """A sphere defined by center point and radius.

    The center is mutable so the scene can animate it between frames.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive float).
        material: Surface material.
    """

    center: Vector3
    radius: float
    material: Material

    def intersect(self, ray: Ray) -> float | None:
        """Test for ray-sphere intersection.

        Args:
            ray: The ray to test. The direction is assumed to be unit length.

        Returns:
            The distance t > 0 to the near intersection, or None if the ray
            misses the sphere or the near intersection lies behind the origin.
        """
        l = self.center - ray.origin  # noqa: E741
        d = l.dot(ray.direction)
        h2 = l.dot(l) - d * d
        s2 = self.radius * self.radius - h2

        if s2 < 0.0:
            return None

        t0 = d - math.sqrt(s2)
        if t0 > 0.0:
            return t0
        return None

    def normal_at(self, hit_point: Vector3) -> Vector3:
        """Get the outward unit normal at a point on the surface."""
        return (hit_point - self.center).normalize()
