# renderer/shading.py
"""
Reference shading pipeline over the object model. The compiled kernels in
renderer.cpu_kernels mirror these functions operation for operation.
"""
from typing import NamedTuple

from core.ray import Ray
from core.utils import clamp, reflect
from core.vector import Vector3
from geometry.hittable import RayHit, NO_EXCLUDE
from geometry.world import World
from materials.material import MaterialKind

BLACK = Vector3(0, 0, 0)

class ReflectionResult(NamedTuple):
    ray: Ray          # last ray cast, i.e. the ray that produced `hit`
    hit: RayHit       # final hit; the no-hit record if the chain escaped
    escaped: bool     # a bounce left the scene without hitting anything
    bounces: int

def light_blocked(world: World, point: Vector3, light: Vector3, exclude_id: int) -> bool:
    """
    True if a primitive other than `exclude_id` lies between `point` and
    the light.
    """
    to_light = light - point
    distance = to_light.magnitude()
    if distance == 0:
        # Point lies on the light; there is no segment to block
        return False
    blocker = world.find_closest_hit(Ray(point, to_light.normalize()), exclude_id)
    return blocker.t > 0 and distance > blocker.t

def diffuse(world: World, hit: RayHit, light: Vector3, ambient: float = 0.2) -> float:
    """
    Lambertian term clamped to [ambient, 1]. Shadowed points get exactly
    `ambient`.
    """
    if light_blocked(world, hit.point, light, hit.id):
        return ambient
    to_light_norm = (light - hit.point).normalize()
    return clamp(to_light_norm.dot(hit.normal), ambient, 1.0)

def specular(world: World, hit: RayHit, light: Vector3, view_dir: Vector3,
             exponent: float = 11.0) -> float:
    """
    Phong highlight: cosine between the light reflected about the normal
    and `view_dir` (unit vector from the surface toward the viewer), raised
    to `exponent`. Zero when the light is blocked.
    """
    light_dir_norm = (light - hit.point).normalize()
    reflected = hit.normal * (hit.normal.dot(light_dir_norm) * 2.0) - light_dir_norm
    cosine = max(reflected.normalize().dot(view_dir), 0.0)
    highlight = clamp(cosine ** exponent, 0.0, 1.0)

    if light_blocked(world, hit.point, light, hit.id):
        return 0.0
    return highlight

def follow_reflections(world: World, ray: Ray, hit: RayHit, max_depth: int) -> ReflectionResult:
    """
    Bounces `ray` off mirror surfaces, starting at `hit`, for at most
    `max_depth` bounces. Stops at the first non-reflective surface or when a
    bounce hits nothing.
    """
    bounces = 0
    for _ in range(max_depth):
        if hit.material.kind != MaterialKind.REFLECTIVE:
            break
        direction = reflect(ray.direction, hit.normal).normalize()
        ray = Ray(hit.point, direction)
        hit = world.find_closest_hit(ray, hit.id)
        bounces += 1
        if not hit.is_hit:
            return ReflectionResult(ray, hit, True, bounces)
    return ReflectionResult(ray, hit, False, bounces)

def shade(world: World, ray: Ray, hit: RayHit, config) -> Vector3:
    """
    Color of a primary hit, following mirror bounces first. Escaped or
    unresolved mirror chains are black.
    """
    if not hit.is_hit:
        return BLACK

    result = follow_reflections(world, ray, hit, config.reflection_depth)
    final = result.hit
    if result.escaped or final.material.kind == MaterialKind.REFLECTIVE:
        return BLACK

    d = diffuse(world, final, config.light, config.ambient)
    color = final.material.color * d
    if final.material.kind == MaterialKind.GLOSSY:
        s = specular(world, final, config.light, -result.ray.direction,
                     config.specular_exponent)
        color = color + Vector3(s, s, s)
    return color

def trace(world: World, ray: Ray, config) -> Vector3:
    """Linear color seen along a primary ray."""
    return shade(world, ray, world.find_closest_hit(ray, NO_EXCLUDE), config)
