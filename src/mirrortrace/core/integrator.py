"""Whitted-style shading integrator.

This module resolves the color seen along a ray: it finds the nearest primitive,
lights it with a single directional light (Lambertian term plus hard shadows),
and folds in a recursively traced mirror reflection.

Recursion depth is not counted. Each reflection multiplies an accumulated
energy factor by the surface reflectivity, and a ray whose factor has dropped
below ENERGY_CUTOFF contributes nothing. This bounds both the reflection depth
and the cost of a pixel.

Key features:
    - Nearest-hit resolution over the plane and spheres, first strictly
      closer hit wins
    - Shadow rays tested against spheres only (planes cast no shadows)
    - Shadow bias offset along the normal to avoid self-intersection
    - Reflection blending weighted by material reflectivity

Example:
    >>> from mirrortrace.core.integrator import resolve_ray_color
    >>> from mirrortrace.scene.reference import create_reference_scene
    >>>
    >>> scene = create_reference_scene()
    >>> color = resolve_ray_color(scene, scene.create_primary_ray(400, 300), 1.0)
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from mirrortrace.core.color import Color
from mirrortrace.core.ray import Ray

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mirrortrace.core.vector import Vector3
    from mirrortrace.geometry import Primitive, Sphere
    from mirrortrace.scene.light import Light
    from mirrortrace.scene.scene import Scene

# =============================================================================
# Shading Constants
# =============================================================================

# Offset along the surface normal for shadow and reflection ray origins
SHADOW_BIAS = 1e-6

# Accumulated reflectivity below which a ray is no longer traced
ENERGY_CUTOFF = 1e-3


# =============================================================================
# Lighting
# =============================================================================


def is_shadowed(shadow_ray: Ray, occluders: Iterable[Sphere]) -> bool:
    """Test if anything blocks a shadow ray.

    Args:
        shadow_ray: Ray from the (biased) hit point toward the light.
        occluders: Primitives that can cast shadows.

    Returns:
        True if any occluder intersects the ray.
    """
    return any(o.intersect(shadow_ray) is not None for o in occluders)


def diffuse_intensity(normal: Vector3, light: Light, shadowed: bool) -> float:
    """Compute the Lambertian light intensity at a surface point.

    Args:
        normal: Unit surface normal.
        light: The directional light.
        shadowed: Whether the point is occluded from the light.

    Returns:
        0.0 when shadowed, otherwise max(0, normal . to_light * intensity).
    """
    if shadowed:
        return 0.0
    dot = normal.dot(light.to_light) * light.intensity
    return dot if dot > 0.0 else 0.0


def blend_reflection(base: Color, reflected: Color, reflectivity: float) -> Color:
    """Mix a surface's own color with the color seen in its reflection."""
    return base * (1.0 - reflectivity) + reflected * reflectivity


# =============================================================================
# Ray Resolution
# =============================================================================


def shade_object(
    scene: Scene,
    obj: Primitive,
    ray: Ray,
    closest: float,
    acc_factor: float,
) -> tuple[Color | None, float]:
    """Shade one candidate primitive if it is the closest hit so far.

    Args:
        scene: Scene providing the light, the shadow casters and recursion.
        obj: The primitive to test.
        ray: The ray being resolved.
        closest: Distance of the closest hit found so far along the ray.
        acc_factor: Energy accumulated along the reflection path so far.

    Returns:
        A tuple (color, closest). color is None and closest unchanged when the
        primitive is missed or not strictly closer than the current hit.
    """
    dist = obj.intersect(ray)
    if dist is None or not dist < closest:
        return None, closest

    hit_point = ray.at(dist)
    surf_normal = obj.normal_at(hit_point)
    light = scene.light

    shadow_origin = hit_point + surf_normal * SHADOW_BIAS
    shadow_ray = Ray(origin=shadow_origin, direction=light.to_light)
    intensity = diffuse_intensity(surf_normal, light, is_shadowed(shadow_ray, scene.spheres))

    material = obj.material
    color = (material.color * light.color) * (intensity * material.light_reflected)

    refl = material.reflectivity
    reflected_ray = ray.reflect(shadow_origin, surf_normal)
    color_reflected = resolve_ray_color(scene, reflected_ray, acc_factor * refl)
    if color_reflected is not None:
        color = blend_reflection(color, color_reflected, refl)

    return color, dist


def resolve_ray_color(scene: Scene, ray: Ray | None, acc_factor: float) -> Color | None:
    """Resolve the color seen along a ray.

    The plane is tested first, then every sphere in insertion order. Each
    candidate only replaces the current color when it is strictly closer, so
    ties keep the earlier primitive.

    Args:
        scene: The scene to trace.
        ray: The ray to resolve, or None for a degenerate ray.
        acc_factor: Energy accumulated along the reflection path (1.0 for
            primary rays).

    Returns:
        The color of the nearest hit with its reflection folded in, or None
        if nothing was hit or the energy cutoff was reached.
    """
    if acc_factor < ENERGY_CUTOFF:
        return None
    if ray is None:
        return None

    color, closest = shade_object(scene, scene.plane, ray, math.inf, acc_factor)
    for obj in scene.spheres:
        candidate, closest = shade_object(scene, obj, ray, closest, acc_factor)
        if candidate is not None:
            color = candidate
    return color
