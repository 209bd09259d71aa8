import pytest

from core.config import RenderConfig
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.triangle import Triangle
from geometry.world import World
from materials.material import Material, MaterialKind


def matte(r, g, b):
    return Material(Vector3(r, g, b), MaterialKind.MATTE)


@pytest.fixture
def red_matte():
    return matte(1, 0, 0)


@pytest.fixture
def mirror():
    return Material(Vector3(1, 1, 1), MaterialKind.REFLECTIVE)


@pytest.fixture
def red_sphere_world(red_matte):
    """A single matte red sphere in front of the camera, lit from above."""
    world = World()
    world.add(Sphere(Vector3(0, 0, -10), 2, red_matte, id=1))
    return world


@pytest.fixture
def front_triangle():
    return Triangle(Vector3(-1, -1, -5), Vector3(1, -1, -5), Vector3(0, 1, -5),
                    matte(0, 1, 0), id=7)


@pytest.fixture
def python_config():
    return RenderConfig(resolution=64, backend="python", light_position=(0, 10, -10))


@pytest.fixture
def facing_mirrors(mirror):
    """Two parallel mirror triangles at z = -5 and z = 5; a ray along -z bounces forever."""
    world = World()
    world.add(Triangle(Vector3(-10, -10, -5), Vector3(10, -10, -5), Vector3(0, 10, -5), mirror))
    world.add(Triangle(Vector3(-10, -10, 5), Vector3(10, -10, 5), Vector3(0, 10, 5), mirror))
    return world
