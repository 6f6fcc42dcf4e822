"""Scene module for scene ownership and rendering.

Components:
    light: Directional light source
    scene: Scene container with the sequential per-pixel renderer and the
        update step that animates spheres
    reference: Factory for the default three-sphere demo scene

Example:
    >>> from mirrortrace.scene import create_reference_scene, ANIMATION_PIVOT
    >>> scene = create_reference_scene()
    >>> scene.update(0.1, ANIMATION_PIVOT)
    >>> pixels = list(scene.render())
"""

from .light import Light
from .reference import (
    ANIMATION_PIVOT,
    ReferenceSceneParams,
    create_reference_scene,
)
from .scene import FrameIterable, Pixel, Scene

__all__ = [
    "Light",
    "Scene",
    "FrameIterable",
    "Pixel",
    "ANIMATION_PIVOT",
    "ReferenceSceneParams",
    "create_reference_scene",
]
