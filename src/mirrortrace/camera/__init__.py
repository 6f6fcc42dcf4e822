"""Camera module for primary ray generation.

Components:
    pinhole: Pinhole camera at the origin looking down -z

Example:
    >>> from mirrortrace.camera import PinholeCamera
    >>> camera = PinholeCamera(width=800, height=600, fov=math.pi / 2)
    >>> ray = camera.get_ray(0, 0)  # Top-left pixel
"""

from .pinhole import PinholeCamera

__all__ = [
    "PinholeCamera",
]
