"""Reference scene configuration.

This module provides a factory for the default demo scene: a green ground
plane lit by a white directional light, with three reflective spheres.

The scene consists of:
- Ground plane at y = -1 (green, slightly reflective)
- Grey sphere in the middle, highly reflective
- Red sphere in front on the right
- Blue sphere in the back on the left

When animated, the spheres orbit the vertical axis through ANIMATION_PIVOT.

Example:
    >>> from mirrortrace.scene.reference import create_reference_scene
    >>> scene = create_reference_scene()
    >>> len(scene.spheres)
    3
"""

import math
from dataclasses import dataclass

from mirrortrace.core.color import Color
from mirrortrace.core.vector import Vector3
from mirrortrace.geometry.plane import Plane
from mirrortrace.geometry.sphere import Sphere
from mirrortrace.materials.material import Material
from mirrortrace.scene.light import Light
from mirrortrace.scene.scene import Scene

# =============================================================================
# Reference Scene Parameters
# =============================================================================


@dataclass
class ReferenceSceneParams:
    """Parameters for configuring the reference scene.

    Attributes:
        width: Image width in pixels. Default is 800.
        height: Image height in pixels. Default is 600.
        fov: Field of view in radians. Default is pi / 2 (90 degrees).
        light_direction: Direction the light travels, normalized on use.
            Default is (0, -0.3, -1): from behind the camera, slightly above.
        light_color: 8-bit RGB color of the light. Default is white.
        light_intensity: Brightness of the light. Default is 3.0.

    Example:
        >>> params = ReferenceSceneParams()
        >>> params.light_intensity
        3.0

        >>> # Small, dimmer preview
        >>> custom = ReferenceSceneParams(width=160, height=120, light_intensity=2.0)
    """

    width: int = 800
    height: int = 600
    fov: float = math.pi / 2.0
    light_direction: tuple[float, float, float] = (0.0, -0.3, -1.0)
    light_color: tuple[int, int, int] = (0xFF, 0xFF, 0xFF)
    light_intensity: float = 3.0


# =============================================================================
# Reference Scene Constants
# =============================================================================

# Vertical rotation axis for animation passes through this point
ANIMATION_PIVOT = Vector3(0.0, 0.0, -1.0)

PLANE_MATERIAL = Material(color=Color.from_hex(0x66CC66), albedo=1.0, reflectivity=0.1)

# (center, radius, material) for each sphere, in insertion order
REFERENCE_SPHERES = (
    (
        Vector3(0.0, 0.25, -2.0),
        0.5,
        Material(color=Color.from_hex(0xCCCCCC), albedo=1.0, reflectivity=0.8),
    ),
    (
        Vector3(0.75, 0.75, -1.25),
        0.75,
        Material(color=Color.from_hex(0xFF5555), albedo=1.0, reflectivity=0.2),
    ),
    (
        Vector3(-1.0, 1.0, -3.0),
        1.0,
        Material(color=Color.from_hex(0x5555FF), albedo=1.0, reflectivity=0.3),
    ),
)


# =============================================================================
# Reference Scene Factory
# =============================================================================


def create_reference_scene(params: ReferenceSceneParams | None = None) -> Scene:
    """Create the reference scene.

    Args:
        params: Optional ReferenceSceneParams for customizing the image size,
            field of view and light. If None, uses default ReferenceSceneParams().

    Returns:
        A Scene with the ground plane and three spheres.
    """
    if params is None:
        params = ReferenceSceneParams()

    light = Light(
        direction=Vector3(*params.light_direction).normalize(),
        color=Color(*params.light_color),
        intensity=params.light_intensity,
    )
    plane = Plane(
        origin=Vector3(0.0, -1.0, 0.0),
        normal=Vector3(0.0, 1.0, 0.0).normalize(),
        material=PLANE_MATERIAL,
    )

    scene = Scene(params.height, params.width, params.fov, light, plane)
    for center, radius, material in REFERENCE_SPHERES:
        scene.add_sphere(Sphere(center=center, radius=radius, material=material))

    return scene
