"""Per-pixel visibility rasterizer for the single-sphere scene.

For every pixel a primary ray is cast from the camera (see
raylight.camera.pinhole) and tested against the sphere. Shading is a flat
silhouette: a positive hit distance gives white, anything else black. The
light does not take part in this pass.

The pixel loop runs as a Taichi kernel writing linear colors into a NumPy
array; the colors are then scaled to bytes and packed into an RGBA buffer
with opaque alpha. Every pixel is written exactly once and independently of
the others, so the parallel loop produces the same buffer as a sequential
row-major one.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from raylight.core.rasterizer import render
    >>> from raylight.scene.scene import create_scene
    >>> sphere, light = create_scene()
    >>> pixels = render(1200, 800, sphere)
    >>> pixels.shape
    (800, 1200, 4)
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

from raylight.camera.pinhole import CAMERA_ORIGIN, camera_ray_direction, get_ray
from raylight.core.vector import Vec3
from raylight.geometry.sphere import Sphere, hit_distance, intersect, vec3

HIT_COLOR = Vec3(1.0, 1.0, 1.0)
BACKGROUND_COLOR = Vec3(0.0, 0.0, 0.0)


@ti.kernel
def _render_colors(
    colors: ti.types.ndarray(),
    width: ti.i32,
    height: ti.i32,
    center_x: ti.f32,
    center_y: ti.f32,
    center_z: ti.f32,
    radius: ti.f32,
):
    """Fill colors[y, x, :] with the linear silhouette color of each pixel.

    Args:
        colors: Float array of shape (height, width, 3) to write into.
        width: Image width in pixels.
        height: Image height in pixels.
        center_x: Sphere center x.
        center_y: Sphere center y.
        center_z: Sphere center z.
        radius: Sphere radius.
    """
    center = vec3(center_x, center_y, center_z)
    for y, x in ti.ndrange(height, width):
        ray = get_ray(x, y, width, height)
        t = hit_distance(ray.origin, ray.direction, center, radius)

        shade = 0.0
        if t > 0.0:
            shade = 1.0

        for c in ti.static(range(3)):
            colors[y, x, c] = shade


def to_rgba8(colors: npt.NDArray[np.float32]) -> npt.NDArray[np.uint8]:
    """Convert linear [0, 1] colors to an opaque RGBA byte buffer.

    Args:
        colors: Array of shape (height, width, 3).

    Returns:
        Array of shape (height, width, 4), dtype uint8, alpha 255.
    """
    height, width = colors.shape[:2]
    rgba = np.empty((height, width, 4), dtype=np.uint8)
    rgba[..., :3] = np.clip(colors * 255.0, 0.0, 255.0).astype(np.uint8)
    rgba[..., 3] = 255
    return rgba


def render(width: int, height: int, sphere: Sphere) -> npt.NDArray[np.uint8]:
    """Rasterize the sphere silhouette into a fresh RGBA buffer.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        sphere: The sphere to render.

    Returns:
        Array of shape (height, width, 4), dtype uint8, row-major with the
        origin at the top-left and alpha 255.

    Raises:
        ValueError: If width or height is not positive.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")

    colors = np.zeros((height, width, 3), dtype=np.float32)
    center = sphere.center
    _render_colors(colors, width, height, center.x, center.y, center.z, sphere.radius)
    return to_rgba8(colors)


def shade_pixel(x: int, y: int, width: int, height: int, sphere: Sphere) -> Vec3:
    """Compute the color of a single pixel in double precision.

    Evaluates the same rule as the kernel for one pixel. Useful for checking
    individual pixels without rasterizing the whole image.

    Args:
        x: Pixel x-coordinate (0 = left).
        y: Pixel y-coordinate (0 = top).
        width: Image width in pixels.
        height: Image height in pixels.
        sphere: The sphere to test against.

    Returns:
        HIT_COLOR if the primary ray hits the sphere in front of the camera,
        BACKGROUND_COLOR otherwise.
    """
    direction = camera_ray_direction(x, y, width, height)
    t = intersect(CAMERA_ORIGIN, direction, sphere)
    if t > 0:
        return HIT_COLOR
    return BACKGROUND_COLOR
