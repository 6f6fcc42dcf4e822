"""Directional light source."""

from __future__ import annotations

from dataclasses import dataclass

from mirrortrace.core.color import Color
from mirrortrace.core.vector import Vector3


@dataclass(frozen=True)
class Light:
    """A directional light, constant for the lifetime of a scene.

    Attributes:
        direction: Unit vector pointing from the light into the scene.
        color: Light color.
        intensity: Scalar brightness applied to the Lambertian term.
    """

    direction: Vector3
    color: Color
    intensity: float

    @property
    def to_light(self) -> Vector3:
        """Unit vector pointing from a surface toward the light."""
        return self.direction * -1.0
