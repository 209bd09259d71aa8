import numpy as np
import pytest

from camera.camera import Camera
from core.config import RenderConfig
from core.vector import Vector3
from geometry.hittable import NO_HIT_ID
from geometry.sphere import Sphere
from materials.material import Material, MaterialKind
from renderer.raytracer import Renderer
from renderer.tone_mapping import to_rgb8
from scene.demo import create_demo_world


def test_to_rgb8_clamps_before_truncating():
    linear = np.array([[[1.5, -0.2, 0.5], [1.0, 0.0, 0.999]]])
    out = to_rgb8(linear)
    assert out.dtype == np.uint8
    assert out.tolist() == [[[255, 0, 127], [255, 0, 254]]]


def test_red_sphere_center_and_corner(red_sphere_world, python_config):
    camera = Camera.from_config(python_config)

    center_hit = red_sphere_world.find_closest_hit(camera.get_ray(32, 32))
    assert center_hit.id == 1
    corner_hit = red_sphere_world.find_closest_hit(camera.get_ray(0, 0))
    assert corner_hit.id == NO_HIT_ID

    image = Renderer(python_config).render(red_sphere_world, camera)
    assert image.shape == (64, 64, 3)
    assert image[32, 32, 0] > 0
    assert image[32, 32, 1] == 0
    assert image[32, 32, 2] == 0
    assert image[0, 0].tolist() == [0, 0, 0]


@pytest.mark.parametrize("backend", ["python", "numba"])
def test_render_is_deterministic(backend):
    config = RenderConfig(resolution=24, backend=backend)
    world = create_demo_world()
    first = Renderer(config).render(world)
    second = Renderer(config).render(world)
    assert np.array_equal(first, second)


def test_backends_agree():
    world = create_demo_world()
    py = Renderer(RenderConfig(resolution=32, backend="python")).render_linear(world)
    nb = Renderer(RenderConfig(resolution=32, backend="numba")).render_linear(world)
    assert np.allclose(py, nb, atol=1e-9)
    diff = np.abs(to_rgb8(py).astype(int) - to_rgb8(nb).astype(int))
    assert diff.max() <= 1


def test_backends_agree_on_red_sphere(red_sphere_world):
    light = (0, 10, -10)
    py = Renderer(RenderConfig(resolution=64, backend="python", light_position=light)).render(red_sphere_world)
    nb = Renderer(RenderConfig(resolution=64, backend="numba", light_position=light)).render(red_sphere_world)
    assert nb[32, 32, 0] > 0
    assert nb[0, 0].tolist() == [0, 0, 0]
    assert np.abs(py.astype(int) - nb.astype(int)).max() <= 1


def test_update_scene_data_packs_arrays():
    world = create_demo_world()
    renderer = Renderer(RenderConfig(resolution=8))
    renderer.update_scene_data(world)
    assert renderer.sphere_centers.shape == (3, 3)
    assert renderer.triangle_vertices.shape == (2, 9)
    assert renderer.sphere_ids.tolist() == [s.id for s in world.spheres]
    assert renderer.sphere_kinds.tolist() == [int(s.material.kind) for s in world.spheres]
    assert renderer.triangle_vertices[0, 3:6].tolist() == list(world.triangles[0].b.to_tuple())


def test_empty_world_renders_black():
    from geometry.world import World
    image = Renderer(RenderConfig(resolution=8, backend="numba")).render(World())
    assert not image.any()


def test_demo_scene_has_lit_pixels():
    image = Renderer(RenderConfig(resolution=32, backend="python")).render(create_demo_world())
    assert image.sum() > 0
    # Top rows look over the scene into empty space
    assert not image[0].any()


@pytest.mark.parametrize("backend", ["python", "numba"])
def test_light_on_visible_surface_point(red_sphere_world, backend):
    # The single pixel's ray hits the sphere at (0, 0, -8), where the light sits
    config = RenderConfig(resolution=1, backend=backend, light_position=(0, 0, -8))
    image = Renderer(config).render_linear(red_sphere_world)
    assert image[0, 0].tolist() == pytest.approx([0.2, 0.0, 0.0])


@pytest.mark.parametrize("depth", [0, 1])
def test_numba_unresolved_mirror_chain_is_black(facing_mirrors, depth):
    config = RenderConfig(resolution=1, reflection_depth=depth, backend="numba")
    image = Renderer(config).render_linear(facing_mirrors)
    assert image[0, 0].tolist() == [0.0, 0.0, 0.0]


def test_numba_shadowed_point_gets_ambient_floor(red_sphere_world):
    # The pixel sees (0, 0, -8); the light is straight above the eye
    config = RenderConfig(resolution=1, backend="numba", light_position=(0, 6, 0))
    lit = Renderer(config).render_linear(red_sphere_world)
    assert lit[0, 0].tolist() == pytest.approx([0.8, 0.0, 0.0])

    # Blocker on the segment to the light, clear of the line of sight
    red_sphere_world.add(Sphere(Vector3(0, 3, -4), 1, Material(Vector3(0, 1, 0), MaterialKind.MATTE)))
    shadowed = Renderer(config).render_linear(red_sphere_world)
    assert shadowed[0, 0].tolist() == pytest.approx([0.2, 0.0, 0.0])
