"""Geometry module for shape primitives.

This module provides the two primitive kinds the tracer knows about:

Components:
    sphere: Sphere primitive with geometric ray-sphere intersection
    plane: One-sided infinite plane

Both primitives expose the same capability set, so the shading model treats
them uniformly:

    t = shape.intersect(ray)          # float | None
    n = shape.normal_at(hit_point)    # unit Vector3
    m = shape.material                # Material
"""

from typing import Union

from .plane import Plane
from .sphere import Sphere

# Closed set of primitive kinds
Primitive = Union[Sphere, Plane]

__all__ = [
    "Plane",
    "Primitive",
    "Sphere",
]
