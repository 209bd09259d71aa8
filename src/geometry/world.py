# geometry/world.py
import logging
from typing import Iterator, List, Optional, Set

from core.ray import Ray
from geometry.hittable import Hittable, RayHit, NO_EXCLUDE
from geometry.sphere import Sphere
from geometry.triangle import Triangle

logger = logging.getLogger(__name__)

class SceneError(ValueError):
    """Raised when a scene cannot be built or parsed."""

class World:
    """
    The scene: an ordered list of spheres and an ordered list of triangles.
    Every primitive carries an id that is unique across both lists; ids are
    only used to stop a ray from re-hitting the surface it starts on.
    """
    def __init__(self):
        self.spheres: List[Sphere] = []
        self.triangles: List[Triangle] = []
        self._ids: Set[int] = set()
        self._next_id = 0

    def add(self, obj: Hittable) -> Hittable:
        """
        Adds a sphere or triangle, assigning it the next free id when it has
        none. Explicit ids must be non-negative and unused.
        """
        if obj.id is None:
            while self._next_id in self._ids:
                self._next_id += 1
            obj.id = self._next_id
        elif obj.id < 0:
            raise SceneError(f"Primitive ids must be non-negative, got {obj.id}")
        elif obj.id in self._ids:
            raise SceneError(f"Duplicate primitive id {obj.id}")

        if isinstance(obj, Sphere):
            self.spheres.append(obj)
        elif isinstance(obj, Triangle):
            self.triangles.append(obj)
        else:
            raise SceneError(f"Unsupported primitive type {type(obj).__name__}")
        self._ids.add(obj.id)
        return obj

    @property
    def objects(self) -> Iterator[Hittable]:
        yield from self.spheres
        yield from self.triangles

    def __len__(self) -> int:
        return len(self.spheres) + len(self.triangles)

    def find_closest_hit(self, ray: Ray, exclude_id: int = NO_EXCLUDE) -> RayHit:
        """
        Nearest intersection in front of the ray origin, skipping the
        primitive whose id is `exclude_id`. Returns the no-hit record
        (t = inf, id = NO_HIT_ID) when nothing qualifies.
        """
        closest = RayHit.miss(ray)

        for obj in self.objects:
            rec = obj.hit(ray, closest)
            if 0 < rec.t < closest.t and rec.id != exclude_id:
                closest = rec

        return closest

    def hit(self, ray: Ray, exclude_id: int = NO_EXCLUDE) -> Optional[RayHit]:
        """
        Same as find_closest_hit() but returns None instead of the no-hit record.
        """
        rec = self.find_closest_hit(ray, exclude_id)
        return rec if rec.is_hit else None
