"""Parallel frame renderer on Taichi's CPU backend.

Per-pixel evaluation is independent, so a whole frame can be traced in a
Taichi kernel with one thread per pixel. The kernel reproduces the sequential
integrator (mirrortrace.core.integrator) bit for bit in 64-bit floats:

    - nearest hit over the plane, then spheres in insertion order
    - hard shadows from spheres only, with the same shadow bias
    - 8-bit color arithmetic with the same saturation and truncation

Taichi functions cannot recurse, so reflections are traced iteratively. Each
level's base color and reflectivity go onto a per-pixel scratch stack, and
the stack is folded back to front with the same blend the recursive version
applies on the way out. The stack depth is the scene's bounce budget: the
largest number of levels any path can reach before the energy cutoff, derived
from the largest material reflectivity. A path therefore never runs out of
stack before the cutoff would have stopped it.

Columns are rendered in batches to keep the scratch stack small; results land
in an image field indexed by (x, y) and are returned as a (height, width, 3)
uint8 array, the same layout as framebuffer.render_frame().

Example:
    >>> from mirrortrace.core.parallel import ParallelRenderer, init_backend
    >>> from mirrortrace.scene.reference import create_reference_scene
    >>>
    >>> init_backend()
    >>> scene = create_reference_scene()
    >>> renderer = ParallelRenderer(scene)
    >>> frame = renderer.render_frame()  # (600, 800, 3) uint8
"""

import math
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

import numpy as np
import numpy.typing as npt
import taichi as ti
from loguru import logger

from mirrortrace.core.color import CHANNEL_MAX, SKY_COLOR, Color
from mirrortrace.core.integrator import ENERGY_CUTOFF, SHADOW_BIAS
from mirrortrace.core.vector import NORMALIZE_EPSILON
from mirrortrace.materials.material import max_reflectivity

if TYPE_CHECKING:
    from mirrortrace.scene.scene import Pixel, Scene

# 64-bit vector and 8-bit-in-int32 color types used inside kernels
vec3d = ti.types.vector(3, ti.f64)
rgb = ti.types.vector(3, ti.i32)

# Hit kinds returned by the nearest-hit search
MISS = -1
PLANE = 0
SPHERE = 1

# Image columns traced per kernel launch
COLUMNS_PER_LAUNCH = 16


def init_backend(arch: Any = None, **kwargs: Any) -> None:
    """Initialize Taichi for bit-exact rendering.

    Uses 64-bit default floats and disables fast math so kernel arithmetic
    matches the sequential renderer.

    Args:
        arch: Taichi backend (default ti.cpu).
        **kwargs: Extra options forwarded to ti.init().
    """
    ti.init(
        arch=ti.cpu if arch is None else arch,
        default_fp=ti.f64,
        fast_math=False,
        **kwargs,
    )


def bounce_budget(reflectivity: float) -> int:
    """Compute how many reflection levels a path can reach.

    A level is traced while the accumulated energy (the product of the
    reflectivities met so far) stays at or above ENERGY_CUTOFF. The worst case
    is a path that only meets the most reflective material.

    Args:
        reflectivity: The largest reflectivity in the scene.

    Returns:
        The number of levels, counting the primary hit.

    Raises:
        ValueError: If reflectivity >= 1, where paths are unbounded.
    """
    if reflectivity >= 1.0:
        raise ValueError(
            f"Reflectivity {reflectivity} never reaches the energy cutoff; "
            "use the sequential renderer"
        )

    levels = 1
    acc = 1.0
    while True:
        acc *= reflectivity
        if acc < ENERGY_CUTOFF:
            return levels
        levels += 1


# =============================================================================
# Kernel Helpers
# =============================================================================


@ti.func
def _normalize(v: vec3d) -> vec3d:
    """Normalize a vector, mapping near-zero vectors to zero."""
    norm = ti.sqrt(v.dot(v))
    result = vec3d(0.0, 0.0, 0.0)
    if ti.abs(norm) >= NORMALIZE_EPSILON:
        result = v * (1.0 / norm)
    return result


@ti.func
def _scale_color(c: rgb, factor: ti.f64) -> rgb:
    """Scale a color, saturating each channel to [0, 255]."""
    v = ti.cast(c, ti.f64) * factor
    out = rgb(0, 0, 0)
    for k in ti.static(range(3)):
        if v[k] > CHANNEL_MAX:
            out[k] = CHANNEL_MAX
        elif v[k] > 0.0:
            out[k] = ti.cast(v[k], ti.i32)
    return out


@ti.func
def _mul_colors(a: rgb, b: rgb) -> rgb:
    """Perceptual multiply, (a * b) // 255 per channel."""
    return (a * b) // CHANNEL_MAX


@ti.func
def _add_colors(a: rgb, b: rgb) -> rgb:
    """Per-channel sum saturating at 255."""
    out = a + b
    for k in ti.static(range(3)):
        if out[k] > CHANNEL_MAX:
            out[k] = CHANNEL_MAX
    return out


# =============================================================================
# Parallel Renderer
# =============================================================================


@ti.data_oriented
class ParallelRenderer:
    """Render whole frames of a Scene in a Taichi kernel.

    Plane, light and materials are uploaded once; sphere centers are uploaded
    again by sync(), which render_frame() calls so that Scene.update() between
    frames is picked up. Spheres must not be added after construction.

    Taichi must be initialized with init_backend() first.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        max_bounces: Bounce budget of the scene (scratch stack depth).
    """

    def __init__(self, scene: "Scene", *, columns_per_launch: int = COLUMNS_PER_LAUNCH) -> None:
        """Allocate fields and upload the scene.

        Args:
            scene: The scene to render.
            columns_per_launch: Image columns traced per kernel launch.

        Raises:
            ValueError: If a material has reflectivity >= 1.
        """
        self._scene = scene
        self.width = scene.width
        self.height = scene.height
        self.max_bounces = bounce_budget(max_reflectivity(scene.materials))
        self._columns = max(1, min(columns_per_launch, scene.width))
        self._sphere_count = len(scene.spheres)

        capacity = max(self._sphere_count, 1)
        self._num_spheres = ti.field(dtype=ti.i32, shape=())
        self._sphere_centers = ti.Vector.field(3, dtype=ti.f64, shape=capacity)
        self._sphere_radii = ti.field(dtype=ti.f64, shape=capacity)
        self._sphere_colors = ti.Vector.field(3, dtype=ti.i32, shape=capacity)
        self._sphere_diffuse = ti.field(dtype=ti.f64, shape=capacity)
        self._sphere_refl = ti.field(dtype=ti.f64, shape=capacity)

        self._plane_origin = ti.Vector.field(3, dtype=ti.f64, shape=())
        self._plane_normal = ti.Vector.field(3, dtype=ti.f64, shape=())
        self._plane_color = ti.Vector.field(3, dtype=ti.i32, shape=())
        self._plane_diffuse = ti.field(dtype=ti.f64, shape=())
        self._plane_refl = ti.field(dtype=ti.f64, shape=())

        self._light_dir = ti.Vector.field(3, dtype=ti.f64, shape=())
        self._light_color = ti.Vector.field(3, dtype=ti.i32, shape=())
        self._light_intensity = ti.field(dtype=ti.f64, shape=())

        self._image = ti.Vector.field(3, dtype=ti.i32, shape=(self.width, self.height))
        stack_shape = (self._columns, self.height, self.max_bounces)
        self._stack_color = ti.Vector.field(3, dtype=ti.i32, shape=stack_shape)
        self._stack_refl = ti.field(dtype=ti.f64, shape=stack_shape)

        self._upload_static()
        self.sync()
        logger.debug(
            "Parallel renderer: {}x{}, {} spheres, bounce budget {}",
            self.width,
            self.height,
            self._sphere_count,
            self.max_bounces,
        )

    def _upload_static(self) -> None:
        """Upload the parts of the scene that never change."""
        scene = self._scene
        plane = scene.plane
        self._plane_origin[None] = plane.origin.to_tuple()
        self._plane_normal[None] = plane.normal.to_tuple()
        self._plane_color[None] = plane.material.color.to_tuple()
        # albedo / pi is computed in Python so kernel and integrator share it
        self._plane_diffuse[None] = plane.material.light_reflected
        self._plane_refl[None] = plane.material.reflectivity

        light = scene.light
        self._light_dir[None] = light.direction.to_tuple()
        self._light_color[None] = light.color.to_tuple()
        self._light_intensity[None] = light.intensity

        self._num_spheres[None] = self._sphere_count
        for i, sphere in enumerate(scene.spheres):
            self._sphere_radii[i] = sphere.radius
            self._sphere_colors[i] = sphere.material.color.to_tuple()
            self._sphere_diffuse[i] = sphere.material.light_reflected
            self._sphere_refl[i] = sphere.material.reflectivity

    def sync(self) -> None:
        """Upload the current sphere centers.

        Raises:
            RuntimeError: If spheres were added after construction.
        """
        spheres = self._scene.spheres
        if len(spheres) != self._sphere_count:
            raise RuntimeError(
                f"Scene has {len(spheres)} spheres, renderer was built for "
                f"{self._sphere_count}; create a new ParallelRenderer"
            )
        if spheres:
            centers = np.array([s.center.to_tuple() for s in spheres], dtype=np.float64)
            self._sphere_centers.from_numpy(centers)

    # =========================================================================
    # Kernel Functions
    # =========================================================================

    @ti.func
    def _hit_sphere(self, i: ti.i32, origin: vec3d, direction: vec3d) -> ti.f64:
        """Near intersection distance with sphere i, or -1 on a miss."""
        l = self._sphere_centers[i] - origin  # noqa: E741
        d = l.dot(direction)
        h2 = l.dot(l) - d * d
        r = self._sphere_radii[i]
        s2 = r * r - h2
        t = -1.0
        if s2 >= 0.0:
            t0 = d - ti.sqrt(s2)
            if t0 > 0.0:
                t = t0
        return t

    @ti.func
    def _hit_plane(self, origin: vec3d, direction: vec3d) -> ti.f64:
        """Intersection distance with the plane, or -1 on a miss."""
        n = self._plane_normal[None]
        proj = n.dot(direction)
        t = -1.0
        if proj < 0.0:
            d = (self._plane_origin[None] - origin).dot(n) / proj
            if d >= 0.0:
                t = d
        return t

    @ti.func
    def _nearest_hit(self, origin: vec3d, direction: vec3d):
        """Find the closest primitive along a ray.

        Returns:
            A tuple (kind, index, t). kind is MISS, PLANE or SPHERE; index is
            the sphere index for SPHERE hits.
        """
        closest = math.inf
        kind = MISS
        index = -1

        t_plane = self._hit_plane(origin, direction)
        if t_plane >= 0.0:
            if t_plane < closest:
                closest = t_plane
                kind = PLANE

        for i in range(self._num_spheres[None]):
            t = self._hit_sphere(i, origin, direction)
            if t > 0.0:
                if t < closest:
                    closest = t
                    kind = SPHERE
                    index = i

        return kind, index, closest

    @ti.func
    def _occluded(self, origin: vec3d, direction: vec3d) -> ti.i32:
        """1 if any sphere blocks the ray, 0 otherwise."""
        blocked = 0
        for i in range(self._num_spheres[None]):
            if blocked == 0:
                if self._hit_sphere(i, origin, direction) > 0.0:
                    blocked = 1
        return blocked

    @ti.func
    def _trace_pixel(
        self,
        c: ti.i32,
        x: ti.i32,
        y: ti.i32,
        fov_adj: ti.f64,
        aspect: ti.f64,
        bias: ti.f64,
        cutoff: ti.f64,
    ) -> rgb:
        """Trace the primary ray of pixel (x, y) and its reflections.

        Args:
            c: Column slot of the pixel within the current batch.
            x: Pixel column.
            y: Pixel row.
            fov_adj: tan(fov / 2).
            aspect: Width divided by height.
            bias: Shadow bias.
            cutoff: Energy cutoff.

        Returns:
            The pixel color, or the sky color if the primary ray escapes.
        """
        w = ti.cast(self.width, ti.f64)
        h = ti.cast(self.height, ti.f64)
        dir_x = ((ti.cast(x, ti.f64) + 0.5) / w * 2.0 - 1.0) * aspect * fov_adj
        dir_y = (1.0 - 2.0 * ((ti.cast(y, ti.f64) + 0.5) / h)) * fov_adj
        origin = vec3d(0.0, 0.0, 0.0)
        direction = _normalize(vec3d(dir_x, dir_y, -1.0))

        to_light = self._light_dir[None] * -1.0
        light_color = self._light_color[None]
        light_intensity = self._light_intensity[None]

        acc = 1.0
        levels = 0
        active = 1

        # Trace front to back, pushing each level's base color
        for k in range(self.max_bounces):
            if active == 1:
                if acc < cutoff:
                    active = 0
                else:
                    kind, index, t = self._nearest_hit(origin, direction)
                    if kind == MISS:
                        active = 0
                    else:
                        hit_point = direction * t + origin
                        normal = self._plane_normal[None]
                        color = self._plane_color[None]
                        diffuse = self._plane_diffuse[None]
                        refl = self._plane_refl[None]
                        if kind == SPHERE:
                            normal = _normalize(hit_point - self._sphere_centers[index])
                            color = self._sphere_colors[index]
                            diffuse = self._sphere_diffuse[index]
                            refl = self._sphere_refl[index]

                        shadow_origin = hit_point + normal * bias
                        intensity = 0.0
                        if self._occluded(shadow_origin, to_light) == 0:
                            dot = normal.dot(to_light) * light_intensity
                            if dot > 0.0:
                                intensity = dot

                        base = _scale_color(_mul_colors(color, light_color), intensity * diffuse)
                        self._stack_color[c, y, k] = base
                        self._stack_refl[c, y, k] = refl
                        levels = k + 1

                        incident = shadow_origin - origin
                        direction = incident - normal * incident.dot(normal * 2.0)
                        origin = shadow_origin
                        acc = acc * refl

        # Fold back to front: each level blends in the level above it
        result = rgb(SKY_COLOR.r, SKY_COLOR.g, SKY_COLOR.b)
        if levels > 0:
            result = self._stack_color[c, y, levels - 1]
            for m in range(self.max_bounces):
                k = levels - 2 - m
                if k >= 0:
                    r = self._stack_refl[c, y, k]
                    result = _add_colors(
                        _scale_color(self._stack_color[c, y, k], 1.0 - r),
                        _scale_color(result, r),
                    )
        return result

    @ti.kernel
    def _render_columns(
        self,
        x0: ti.i32,
        fov_adj: ti.f64,
        aspect: ti.f64,
        bias: ti.f64,
        cutoff: ti.f64,
    ):
        """Trace one batch of columns starting at x0."""
        for c, y in ti.ndrange(self._columns, self.height):
            x = x0 + c
            if x < self.width:
                self._image[x, y] = self._trace_pixel(c, x, y, fov_adj, aspect, bias, cutoff)

    # =========================================================================
    # Public Rendering API
    # =========================================================================

    def render_frame(self) -> npt.NDArray[np.uint8]:
        """Render the current scene state.

        Returns:
            Array of shape (height, width, 3) with dtype uint8.
        """
        self.sync()
        camera = self._scene.camera
        fov_adj = camera.fov_adjustment
        aspect = camera.aspect_ratio

        for x0 in range(0, self.width, self._columns):
            self._render_columns(x0, fov_adj, aspect, SHADOW_BIAS, ENERGY_CUTOFF)

        # Field is indexed (x, y); images are (row, column)
        image = self._image.to_numpy()
        return np.ascontiguousarray(np.transpose(image, (1, 0, 2))).astype(np.uint8)

    def render(self) -> "Iterator[Pixel]":
        """Render a frame and emit it as (x, y, color), x outer, y inner."""
        frame = self.render_frame()
        for x in range(self.width):
            for y in range(self.height):
                r, g, b = frame[y, x]
                yield x, y, Color(int(r), int(g), int(b))

    def __repr__(self) -> str:
        return (
            f"ParallelRenderer(width={self.width}, height={self.height}, "
            f"spheres={self._sphere_count}, max_bounces={self.max_bounces})"
        )
