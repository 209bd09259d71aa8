from geometry.hittable import Hittable, RayHit, NO_EXCLUDE, NO_HIT_ID
from geometry.sphere import Sphere
from geometry.triangle import Triangle
from geometry.world import SceneError, World

__all__ = [
    "Hittable", "RayHit", "NO_EXCLUDE", "NO_HIT_ID",
    "Sphere", "Triangle", "SceneError", "World",
]
