"""Ray data structure.

A ray is parametrized as origin + t * direction. Primary and shadow rays carry
unit directions; reflected rays keep the length of the incident segment they
were built from.

Example:
    >>> from mirrortrace.core.ray import Ray
    >>> from mirrortrace.core.vector import Vector3
    >>> ray = Ray(origin=Vector3(0.0, 0.0, 0.0), direction=Vector3(0.0, 0.0, -1.0))
    >>> ray.at(5.0)  # Point 5 units along the ray
    Vector3(x=0.0, y=0.0, z=-5.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from mirrortrace.core.vector import Vector3


@dataclass(frozen=True, slots=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Should be normalized
            for most operations, but this is not enforced.
    """

    origin: Vector3
    direction: Vector3

    def at(self, t: float) -> Vector3:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point direction * t + origin.
        """
        return self.direction * t + self.origin

    def reflect(self, hit_point: Vector3, normal: Vector3) -> Ray:
        """Mirror this ray about a surface normal at a hit point.

        The incident vector runs from the ray origin to the hit point and is
        reflected about the normal; the new ray starts at the hit point.

        Args:
            hit_point: The point the reflected ray starts from.
            normal: The surface normal (should be normalized).

        Returns:
            The reflected ray.
        """
        incident = hit_point - self.origin
        d = normal * incident.dot(normal * 2.0)
        return Ray(origin=hit_point, direction=incident - d)
