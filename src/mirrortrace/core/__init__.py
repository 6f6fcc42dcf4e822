"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    vector: Immutable 3D vector with rotation and normalization
    color: 8-bit RGB color with saturating arithmetic
    ray: Ray data structure and mirror reflection
    integrator: Whitted-style shading (Lambertian, hard shadows, reflection)
    framebuffer: Pixel sequence to image buffer conversion
    parallel: Taichi kernel renderer for whole frames
    animation: Update -> render -> present frame loop

Reflections recurse until the accumulated reflectivity of a path drops below
an energy cutoff, which bounds the recursion without a depth counter.
"""

from .color import BLACK, SKY_COLOR, WHITE, Color
from .ray import Ray
from .vector import ORIGIN, ZERO, Vector3

# Note: integrator, framebuffer, parallel and animation are NOT imported here
# to avoid circular imports with the scene package. Import them directly, e.g.
#   from mirrortrace.core.parallel import ParallelRenderer

__all__ = [
    "Vector3",
    "ZERO",
    "ORIGIN",
    "Color",
    "BLACK",
    "WHITE",
    "SKY_COLOR",
    "Ray",
]
