"""CPU ray tracer with diffuse shading, hard shadows and mirror reflections.

This package renders scenes made of one ground plane and any number of
spheres under a single directional light, with support for:
- Lambertian shading with hard shadows
- Recursive mirror reflections bounded by an energy cutoff
- Sphere animation about a vertical axis between frames
- Parallel frame rendering with Taichi

Subpackages:
    core: Vector/color algebra, rays, the shading integrator and renderers
    geometry: Sphere and plane primitives
    materials: Surface material record
    scene: Scene container, light and the reference scene
    camera: Pinhole camera for primary rays
    preview: Frame sinks (PNG export, Taichi window, Matplotlib)
"""

__version__ = "0.1.0"
