"""Single-sphere ray tracer with an interactive light ray fan.

This package renders one sphere with a minimal ray tracer and overlays a fan
of rays emitted by a draggable point light. Moving the light recomputes the
whole image.

Subpackages:
    core: Vector algebra and the Taichi rasterization kernel
    geometry: Sphere primitive and ray-sphere intersection
    camera: Primary ray generation and world-to-screen projection
    scene: Scene parameters, ray fan, pointer mapping and render controller
    preview: Overlay compositing, PNG export and preview windows
"""

__version__ = "0.1.0"
