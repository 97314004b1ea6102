"""World-to-screen projection for overlay geometry, and its inverse.

The projection is a simplified perspective divide by absolute depth:

    sx = ((x / |z|) * (height / width) + 1) * width / 2
    sy = ((-y / |z|) + 1) * height / 2

Note the horizontal factor is height / width, the inverse of the aspect ratio
used for primary rays in raylight.camera.pinhole. Overlay geometry and the
drag mapping depend on this exact formula, so it is kept as is.

`unproject` is its exact algebraic inverse for a fixed depth.
"""

from raylight.core.vector import Vec3


def project(point: Vec3, width: int, height: int) -> tuple[float, float]:
    """Project a world-space point to screen-space pixel coordinates.

    Args:
        point: The world-space point. Its z must be non-zero.
        width: Surface width in pixels.
        height: Surface height in pixels.

    Returns:
        Tuple (screen_x, screen_y) with the origin at the top-left.

    Raises:
        ValueError: If point.z is zero (projection undefined).
    """
    if point.z == 0:
        raise ValueError(f"Cannot project a point at z == 0: {point}")

    depth = abs(point.z)
    screen_x = ((point.x / depth) * (height / width) + 1) * width / 2
    screen_y = ((-point.y / depth) + 1) * height / 2
    return screen_x, screen_y


def unproject(
    screen_x: float,
    screen_y: float,
    depth: float,
    width: int,
    height: int,
) -> Vec3:
    """Recover the world-space point on the plane z = depth under a pixel.

    Args:
        screen_x: Pointer x in surface pixels.
        screen_y: Pointer y in surface pixels.
        depth: The z of the plane to land on. Must be non-zero.
        width: Surface width in pixels.
        height: Surface height in pixels.

    Returns:
        The point (x, y, depth) that projects back to (screen_x, screen_y).

    Raises:
        ValueError: If depth is zero.
    """
    if depth == 0:
        raise ValueError("Cannot unproject onto the z == 0 plane")

    u = (screen_x / width) * 2 - 1
    v = (screen_y / height) * 2 - 1
    new_x = u * abs(depth) / (height / width)
    new_y = -v * abs(depth)
    return Vec3(new_x, new_y, depth)
