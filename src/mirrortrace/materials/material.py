"""Diffuse-reflective material model.

Every primitive carries one Material. Shading combines a Lambertian diffuse
term with a mirror reflection weighted by the reflectivity:

    base  = (color * light_color) * (intensity * albedo / pi)
    final = base * (1 - reflectivity) + reflected * reflectivity

Example:
    >>> from mirrortrace.core.color import Color
    >>> from mirrortrace.materials.material import Material
    >>> chrome = Material(color=Color(0xCC, 0xCC, 0xCC), albedo=1.0, reflectivity=0.8)
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from mirrortrace.core.color import Color


@dataclass(frozen=True, slots=True)
class Material:
    """Surface appearance of a primitive.

    Attributes:
        color: Diffuse surface color.
        albedo: Fraction of incident light diffusely reflected, in [0, 1].
        reflectivity: Weight of the mirror reflection, in [0, 1]. Also scales
            the energy carried into the reflected ray.
    """

    color: Color
    albedo: float
    reflectivity: float

    @property
    def light_reflected(self) -> float:
        """Lambertian normalization factor albedo / pi."""
        return self.albedo / math.pi


def max_reflectivity(materials: Iterable[Material]) -> float:
    """Get the largest reflectivity among materials (0.0 if there are none)."""
    return max((m.reflectivity for m in materials), default=0.0)
