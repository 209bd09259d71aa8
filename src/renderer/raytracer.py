# renderer/raytracer.py
import logging
import time

import numpy as np

from camera.camera import Camera
from core.config import RenderConfig
from geometry.world import World
from .cpu_kernels import render_kernel
from .shading import trace
from .tone_mapping import to_rgb8

logger = logging.getLogger(__name__)

class Renderer:
    """
    Renders a World to an N x N RGB image, one primary ray per pixel.

    The "numba" backend packs the scene into flat arrays and runs the
    compiled kernel in renderer.cpu_kernels; the "python" backend walks the
    object model through renderer.shading. Both produce the same image.
    """
    def __init__(self, config: RenderConfig = None):
        self.config = config if config is not None else RenderConfig()

        # Packed scene data for the compiled backend
        self.sphere_centers = None
        self.sphere_radii = None
        self.sphere_colors = None
        self.sphere_kinds = None
        self.sphere_ids = None
        self.triangle_vertices = None
        self.triangle_colors = None
        self.triangle_kinds = None
        self.triangle_ids = None

    def update_scene_data(self, world: World) -> None:
        """
        Flatten the world's spheres and triangles into NumPy arrays.
        """
        n_spheres = len(world.spheres)
        n_triangles = len(world.triangles)
        logger.debug("Packing %d spheres and %d triangles", n_spheres, n_triangles)

        self.sphere_centers = np.zeros((n_spheres, 3), dtype=np.float64)
        self.sphere_radii = np.zeros(n_spheres, dtype=np.float64)
        self.sphere_colors = np.zeros((n_spheres, 3), dtype=np.float64)
        self.sphere_kinds = np.zeros(n_spheres, dtype=np.int64)
        self.sphere_ids = np.zeros(n_spheres, dtype=np.int64)
        for i, sphere in enumerate(world.spheres):
            self.sphere_centers[i] = sphere.center.to_tuple()
            self.sphere_radii[i] = sphere.radius
            self.sphere_colors[i] = sphere.material.color.to_tuple()
            self.sphere_kinds[i] = int(sphere.material.kind)
            self.sphere_ids[i] = sphere.id

        self.triangle_vertices = np.zeros((n_triangles, 9), dtype=np.float64)
        self.triangle_colors = np.zeros((n_triangles, 3), dtype=np.float64)
        self.triangle_kinds = np.zeros(n_triangles, dtype=np.int64)
        self.triangle_ids = np.zeros(n_triangles, dtype=np.int64)
        for i, triangle in enumerate(world.triangles):
            self.triangle_vertices[i, 0:3] = triangle.a.to_tuple()
            self.triangle_vertices[i, 3:6] = triangle.b.to_tuple()
            self.triangle_vertices[i, 6:9] = triangle.c.to_tuple()
            self.triangle_colors[i] = triangle.material.color.to_tuple()
            self.triangle_kinds[i] = int(triangle.material.kind)
            self.triangle_ids[i] = triangle.id

    def render_linear(self, world: World, camera: Camera = None) -> np.ndarray:
        """
        Linear float colors, shape (N, N, 3), indexed [y, x].
        """
        config = self.config
        if camera is None:
            camera = Camera.from_config(config)

        start = time.perf_counter()
        if config.backend == "numba":
            image = self._render_numba(world, camera)
        else:
            image = self._render_python(world, camera)
        logger.info("Rendered %dx%d with the %s backend in %.2fs",
                    camera.resolution, camera.resolution, config.backend,
                    time.perf_counter() - start)
        return image

    def render(self, world: World, camera: Camera = None) -> np.ndarray:
        """
        8-bit RGB image, shape (N, N, 3), indexed [y, x].
        """
        return to_rgb8(self.render_linear(world, camera))

    def _render_python(self, world: World, camera: Camera) -> np.ndarray:
        n = camera.resolution
        image = np.zeros((n, n, 3), dtype=np.float64)
        for y in range(n):
            for x in range(n):
                image[y, x] = trace(world, camera.get_ray(x, y), self.config).to_tuple()
        return image

    def _render_numba(self, world: World, camera: Camera) -> np.ndarray:
        self.update_scene_data(world)
        config = self.config
        n = camera.resolution
        image = np.zeros((n, n, 3), dtype=np.float64)
        render_kernel(
            image,
            camera.position.to_tuple(),
            float(camera.pixel_width),
            float(camera.image_size / 2.0),
            float(camera.plane_distance),
            config.light.to_tuple(),
            int(config.reflection_depth),
            float(config.ambient),
            float(config.specular_exponent),
            self.sphere_centers, self.sphere_radii, self.sphere_colors,
            self.sphere_kinds, self.sphere_ids,
            self.triangle_vertices, self.triangle_colors,
            self.triangle_kinds, self.triangle_ids,
        )
        return image
