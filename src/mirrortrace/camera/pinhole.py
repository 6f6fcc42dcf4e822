"""Pinhole camera model for primary ray generation.

The camera sits at the world origin and looks down the -z axis with +y up.
Pixel centers are mapped onto a virtual image plane at z = -1 whose half-height
is tan(fov / 2); the half-width is scaled by the aspect ratio:

    dir_x = ((x + 0.5) / width * 2 - 1) * aspect * tan(fov / 2)
    dir_y = (1 - 2 * (y + 0.5) / height) * tan(fov / 2)

Pixel (0, 0) is the top-left corner of the image.

Example:
    >>> import math
    >>> from mirrortrace.camera.pinhole import PinholeCamera
    >>> camera = PinholeCamera(width=800, height=600, fov=math.pi / 2)
    >>> ray = camera.get_ray(400, 300)  # Ray just below-right of center
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from mirrortrace.core.ray import Ray
from mirrortrace.core.vector import ORIGIN, Vector3


@dataclass(frozen=True)
class PinholeCamera:
    """Configuration for a pinhole (perspective) camera.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        fov: Field of view in radians.
    """

    width: int
    height: int
    fov: float

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height of the output image."""
        return self.width / self.height

    @property
    def fov_adjustment(self) -> float:
        """Half-height of the image plane at unit distance, tan(fov / 2)."""
        return math.tan(self.fov / 2.0)

    def get_ray(self, x: int, y: int) -> Ray:
        """Generate the primary ray through the center of a pixel.

        Args:
            x: Pixel column (0 = left).
            y: Pixel row (0 = top).

        Returns:
            A ray from the camera origin with a unit direction.
        """
        w, h = float(self.width), float(self.height)
        fov_adj = self.fov_adjustment
        dir_x = ((x + 0.5) / w * 2.0 - 1.0) * (w / h) * fov_adj
        dir_y = (1.0 - 2.0 * ((y + 0.5) / h)) * fov_adj

        return Ray(origin=ORIGIN, direction=Vector3(dir_x, dir_y, -1.0).normalize())
