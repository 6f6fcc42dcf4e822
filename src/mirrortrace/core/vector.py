"""3D vector value type and utilities.

This module provides the immutable Vector3 used for points, directions and
surface normals throughout the tracer, together with the handful of operations
the shading model needs: arithmetic, dot product, norm, normalization and
rotation about the coordinate axes.

Example:
    >>> from mirrortrace.core.vector import Vector3
    >>> v = Vector3(3.0, 0.0, 4.0)
    >>> v.norm()
    5.0
    >>> v.normalize()
    Vector3(x=0.6, y=0.0, z=0.8)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Norm below which normalize() returns the zero vector
NORMALIZE_EPSILON = 1e-13


@dataclass(frozen=True, slots=True)
class Vector3:
    """An immutable 3D vector.

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
    """

    x: float
    y: float
    z: float

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vector3:
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def __neg__(self) -> Vector3:
        return self * -1.0

    def dot(self, other: Vector3) -> float:
        """Compute the dot product of two vectors.

        Args:
            other: Second vector.

        Returns:
            The dot product self . other.
        """
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm(self) -> float:
        """Compute the Euclidean length of the vector."""
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vector3:
        """Normalize the vector to unit length.

        Returns:
            A unit vector in the same direction. Vectors whose norm is below
            NORMALIZE_EPSILON map to the zero vector instead of dividing by a
            near-zero value.
        """
        norm = self.norm()
        if abs(norm) < NORMALIZE_EPSILON:
            return ZERO
        return self * (1.0 / norm)

    def rotate_x(self, angle: float) -> Vector3:
        """Rotate counter-clockwise about the X axis by angle radians."""
        s, c = math.sin(angle), math.cos(angle)
        return Vector3(self.x, self.y * c - self.z * s, self.y * s + self.z * c)

    def rotate_y(self, angle: float) -> Vector3:
        """Rotate about the Y axis by angle radians.

        Uses x' = x*cos - z*sin and z' = x*sin + z*cos, so a positive angle
        carries +x toward +z.
        """
        s, c = math.sin(angle), math.cos(angle)
        return Vector3(self.x * c - self.z * s, self.y, self.x * s + self.z * c)

    def rotate_z(self, angle: float) -> Vector3:
        """Rotate counter-clockwise about the Z axis by angle radians."""
        s, c = math.sin(angle), math.cos(angle)
        return Vector3(self.x * c - self.y * s, self.x * s + self.y * c, self.z)

    def to_tuple(self) -> tuple[float, float, float]:
        """Return the components as an (x, y, z) tuple."""
        return (self.x, self.y, self.z)


ZERO = Vector3(0.0, 0.0, 0.0)
ORIGIN = ZERO
