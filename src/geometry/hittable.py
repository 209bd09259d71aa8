# geometry/hittable.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from materials.material import Material, NULL_MATERIAL

# Id carried by the no-hit record; never assigned to a primitive
NO_HIT_ID = -2
# Exclusion id for primary rays, which have no originating primitive
NO_EXCLUDE = -1

class RayHit:
    """
    Records details of a ray-object intersection. A record with
    id == NO_HIT_ID and t == inf stands for "nothing was hit"; its normal
    is not meaningful.
    """
    __slots__ = ("t", "material", "point", "normal", "id")

    def __init__(self, t: float, material: Material, point: Vector3,
                 normal: Vector3, id: int):
        self.t = t                  # Ray parameter at intersection
        self.material = material
        self.point = point          # World-space intersection point
        self.normal = normal        # Unit surface normal
        self.id = id                # Id of the primitive that was hit

    @classmethod
    def miss(cls, ray: Ray) -> "RayHit":
        return cls(math.inf, NULL_MATERIAL, ray.origin, ray.origin, NO_HIT_ID)

    @property
    def is_hit(self) -> bool:
        return self.id != NO_HIT_ID and self.t != math.inf

    def __repr__(self) -> str:
        if not self.is_hit:
            return "RayHit(miss)"
        return f"RayHit(t={self.t}, id={self.id}, point={self.point!r}, normal={self.normal!r})"

class Hittable:
    """
    Base class for scene primitives. Ids are assigned by the World when the
    primitive is added, unless one was given explicitly.
    """
    def __init__(self, material: Material, id: Optional[int] = None):
        self.material = material
        self.id = id

    def hit(self, ray: Ray, closest: RayHit) -> RayHit:
        """
        Returns a hit record that is at least as close as `closest`.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")
