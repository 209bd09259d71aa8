# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, RayHit
from materials.material import Material

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material: Material,
                 id: Optional[int] = None):
        if not radius > 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        super().__init__(material, id)
        self.center = center
        self.radius = float(radius)

    def intersect(self, ray: Ray) -> float:
        """
        Distance along the ray to the sphere surface, or -1.0 if the ray's
        line misses it or its direction is zero. When both roots are
        negative the nearer one is still returned; callers reject t <= 0.
        """
        emc = ray.origin - self.center
        ddd = ray.direction.dot(ray.direction)
        if ddd == 0:
            return -1.0
        ddemc = ray.direction.dot(emc)
        discriminant = ddemc * ddemc - ddd * (emc.dot(emc) - self.radius * self.radius)

        if discriminant < 0:
            return -1.0

        sqrt_disc = math.sqrt(discriminant)
        t1 = (-ddemc + sqrt_disc) / ddd
        t2 = (-ddemc - sqrt_disc) / ddd

        if t1 < 0:
            return t2
        if t2 < 0:
            return t1
        return min(t1, t2)

    def hit_record(self, ray: Ray) -> RayHit:
        """
        Unconditional hit record at intersect(); t may be -1 or negative.
        """
        t = self.intersect(ray)
        point = ray.at(t)
        return RayHit(t, self.material, point, (point - self.center).normalize(), self.id)

    def hit(self, ray: Ray, closest: RayHit) -> RayHit:
        rec = self.hit_record(ray)
        if 0 < rec.t < closest.t:
            return rec
        return closest

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius}, id={self.id})"
