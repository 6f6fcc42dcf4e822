"""Materials module for surface appearance.

Components:
    material: Material record (color, albedo, reflectivity) shared by all
        primitives

The shading model uses a single material kind: Lambertian diffuse lighting
blended with a perfect mirror reflection.
"""

from .material import Material, max_reflectivity

__all__ = [
    "Material",
    "max_reflectivity",
]
