"""Infinite plane primitive.

A plane is one-sided: rays only hit it when they approach its front face (the
side its normal points to). Rays parallel to the plane or moving away from the
front face never hit.
"""

from __future__ import annotations

from dataclasses import dataclass

from mirrortrace.core.ray import Ray
from mirrortrace.core.vector import Vector3
from mirrortrace.materials.material import Material


@dataclass(frozen=True)
class Plane:
    """An infinite plane through a point.

    Attributes:
        origin: Any point on the plane.
        normal: Unit normal of the front face.
        material: Surface material.
    """

    origin: Vector3
    normal: Vector3
    material: Material

    def intersect(self, ray: Ray) -> float | None:
        """Test for ray-plane intersection.

        Args:
            ray: The ray to test.

        Returns:
            The distance t >= 0 along the ray, or None if the ray does not
            approach the front face or the plane lies behind the origin.
        """
        proj = self.normal.dot(ray.direction)

        if proj < 0.0:
            t = (self.origin - ray.origin).dot(self.normal) / proj
            if t >= 0.0:
                return t
        return None

    def normal_at(self, hit_point: Vector3) -> Vector3:
        """Get the surface normal, which is the same everywhere on a plane."""
        return self.normal
