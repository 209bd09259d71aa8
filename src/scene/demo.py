# scene/demo.py
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.triangle import Triangle
from geometry.world import World
from materials.presets import GlossyPresets, MattePresets, MirrorPresets

def create_demo_world() -> World:
    """
    Three spheres (matte, glossy, mirror) standing on a two-triangle floor,
    all in front of the default camera.
    """
    world = World()

    world.add(Sphere(Vector3(-2.2, -1.0, -9.0), 1.0, MattePresets.red()))
    world.add(Sphere(Vector3(0.0, -0.5, -11.0), 1.5, MirrorPresets.mirror()))
    world.add(Sphere(Vector3(2.2, -1.0, -9.0), 1.0, GlossyPresets.blue_plastic()))

    # Floor at y = -2; vertices ordered so the normal points up
    floor = MattePresets.gray()
    world.add(Triangle(Vector3(-10, -2, -2), Vector3(10, -2, -20), Vector3(10, -2, -2), floor))
    world.add(Triangle(Vector3(-10, -2, -2), Vector3(-10, -2, -20), Vector3(10, -2, -20), floor))

    return world
