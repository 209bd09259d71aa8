# geometry/triangle.py
from typing import Optional, Tuple
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, RayHit
from materials.material import Material

class Triangle(Hittable):
    """
    A single triangle with a flat normal of fixed orientation,
    normalize((c - a) x (b - a)). The normal is not flipped toward the ray.
    """
    def __init__(self, a: Vector3, b: Vector3, c: Vector3, material: Material,
                 id: Optional[int] = None):
        face = (c - a).cross(b - a)
        if face.magnitude() == 0:
            raise ValueError(f"Degenerate triangle, vertices are collinear: {a!r}, {b!r}, {c!r}")
        super().__init__(material, id)
        self.a = a
        self.b = b
        self.c = c
        self.normal = face.normalize()

    def solve(self, ray: Ray) -> Optional[Tuple[float, float, float]]:
        """
        Solves o + t*d = a + beta*(b - a) + gamma*(c - a) with Cramer's rule.
        Returns (t, beta, gamma), or None when the ray is parallel to the
        triangle's plane.
        """
        a = self.a.x - self.b.x
        b = self.a.y - self.b.y
        c = self.a.z - self.b.z
        d = self.a.x - self.c.x
        e = self.a.y - self.c.y
        f = self.a.z - self.c.z
        g = ray.direction.x
        h = ray.direction.y
        i = ray.direction.z
        j = self.a.x - ray.origin.x
        k = self.a.y - ray.origin.y
        l = self.a.z - ray.origin.z

        m = a * (e * i - h * f) + b * (g * f - d * i) + c * (d * h - e * g)
        if m == 0:
            return None

        t = -(f * (a * k - j * b) + e * (j * c - a * l) + d * (b * l - k * c)) / m
        gamma = (i * (a * k - j * b) + h * (j * c - a * l) + g * (b * l - k * c)) / m
        beta = (j * (e * i - h * f) + k * (g * f - d * i) + l * (d * h - e * g)) / m
        return t, beta, gamma

    def hit(self, ray: Ray, closest: RayHit) -> RayHit:
        """
        Returns a record for this triangle if the ray meets it no farther
        than `closest`, otherwise `closest` unchanged. Meant to be folded
        over all triangles of a scene.
        """
        solution = self.solve(ray)
        if solution is None:
            return closest
        t, beta, gamma = solution

        if t < 0 or t > closest.t:
            return closest
        if gamma < 0 or gamma > 1:
            return closest
        if beta < 0 or beta > 1 - gamma:
            return closest

        return RayHit(t, self.material, ray.at(t), self.normal, self.id)

    @property
    def centroid(self) -> Vector3:
        return (self.a + self.b + self.c) / 3

    def __repr__(self) -> str:
        return f"Triangle({self.a!r}, {self.b!r}, {self.c!r}, id={self.id})"
