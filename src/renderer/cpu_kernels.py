# renderer/cpu_kernels.py
from numba import njit, prange

from .cpu_geometry import (
    add, sub, scale, dot, cross, magnitude, normalize, row3, closest_hit,
)

# Must match materials.material.MaterialKind
MATTE = 0
GLOSSY = 1
REFLECTIVE = 2

NO_EXCLUDE = -1

@njit
def resolve_hit(origin, direction, t, index, is_triangle,
                sphere_centers, sphere_colors, sphere_kinds, sphere_ids,
                triangle_vertices, triangle_colors, triangle_kinds, triangle_ids):
    """Returns (point, normal, color, kind, id) for a hit found by closest_hit()."""
    point = add(origin, scale(direction, t))
    if is_triangle:
        a = row3(triangle_vertices, index, 0)
        b = row3(triangle_vertices, index, 3)
        c = row3(triangle_vertices, index, 6)
        normal = normalize(cross(sub(c, a), sub(b, a)))
        return (point, normal, row3(triangle_colors, index, 0),
                triangle_kinds[index], triangle_ids[index])
    normal = normalize(sub(point, row3(sphere_centers, index, 0)))
    return (point, normal, row3(sphere_colors, index, 0),
            sphere_kinds[index], sphere_ids[index])

@njit
def light_blocked(point, light, exclude_id,
                  sphere_centers, sphere_radii, sphere_ids,
                  triangle_vertices, triangle_ids):
    to_light = sub(light, point)
    distance = magnitude(to_light)
    if distance == 0.0:
        return False
    t, index, is_triangle = closest_hit(point, normalize(to_light), exclude_id,
                                        sphere_centers, sphere_radii, sphere_ids,
                                        triangle_vertices, triangle_ids)
    return t > 0.0 and distance > t

@njit
def diffuse_term(point, normal, hit_id, light, ambient,
                 sphere_centers, sphere_radii, sphere_ids,
                 triangle_vertices, triangle_ids):
    if light_blocked(point, light, hit_id, sphere_centers, sphere_radii, sphere_ids,
                     triangle_vertices, triangle_ids):
        return ambient
    cosine = dot(normalize(sub(light, point)), normal)
    return max(ambient, min(1.0, cosine))

@njit
def specular_term(point, normal, hit_id, light, view_dir, exponent,
                  sphere_centers, sphere_radii, sphere_ids,
                  triangle_vertices, triangle_ids):
    light_dir_norm = normalize(sub(light, point))
    reflected = sub(scale(normal, dot(normal, light_dir_norm) * 2.0), light_dir_norm)
    cosine = max(dot(normalize(reflected), view_dir), 0.0)
    highlight = max(0.0, min(1.0, cosine ** exponent))

    if light_blocked(point, light, hit_id, sphere_centers, sphere_radii, sphere_ids,
                     triangle_vertices, triangle_ids):
        return 0.0
    return highlight

@njit
def shade_pixel(origin, direction, light, reflection_depth, ambient, exponent,
                sphere_centers, sphere_radii, sphere_colors, sphere_kinds, sphere_ids,
                triangle_vertices, triangle_colors, triangle_kinds, triangle_ids):
    """Linear (r, g, b) seen along a primary ray."""
    t, index, is_triangle = closest_hit(origin, direction, NO_EXCLUDE,
                                        sphere_centers, sphere_radii, sphere_ids,
                                        triangle_vertices, triangle_ids)
    if index < 0:
        return (0.0, 0.0, 0.0)

    point, normal, color, kind, hit_id = resolve_hit(
        origin, direction, t, index, is_triangle,
        sphere_centers, sphere_colors, sphere_kinds, sphere_ids,
        triangle_vertices, triangle_colors, triangle_kinds, triangle_ids)

    # Mirror chain
    for _ in range(reflection_depth):
        if kind != REFLECTIVE:
            break
        direction = normalize(sub(direction, scale(normal, 2.0 * dot(direction, normal))))
        origin = point
        t, index, is_triangle = closest_hit(origin, direction, hit_id,
                                            sphere_centers, sphere_radii, sphere_ids,
                                            triangle_vertices, triangle_ids)
        if index < 0:
            return (0.0, 0.0, 0.0)
        point, normal, color, kind, hit_id = resolve_hit(
            origin, direction, t, index, is_triangle,
            sphere_centers, sphere_colors, sphere_kinds, sphere_ids,
            triangle_vertices, triangle_colors, triangle_kinds, triangle_ids)

    if kind == REFLECTIVE:
        return (0.0, 0.0, 0.0)

    d = diffuse_term(point, normal, hit_id, light, ambient,
                     sphere_centers, sphere_radii, sphere_ids,
                     triangle_vertices, triangle_ids)
    s = 0.0
    if kind == GLOSSY:
        s = specular_term(point, normal, hit_id, light, scale(direction, -1.0), exponent,
                          sphere_centers, sphere_radii, sphere_ids,
                          triangle_vertices, triangle_ids)
    return (color[0] * d + s, color[1] * d + s, color[2] * d + s)

@njit(parallel=True)
def render_kernel(out, eye, pixel_width, half_size, plane_distance,
                  light, reflection_depth, ambient, exponent,
                  sphere_centers, sphere_radii, sphere_colors, sphere_kinds, sphere_ids,
                  triangle_vertices, triangle_colors, triangle_kinds, triangle_ids):
    """
    Fills `out[y, x]` with the linear color of every pixel. Rows are
    independent and run in parallel.
    """
    resolution = out.shape[0]
    for y in prange(resolution):
        for x in range(resolution):
            img_x = (x * pixel_width) + (pixel_width / 2.0) - half_size
            img_y = -((y * pixel_width) + (pixel_width / 2.0) - half_size)
            direction = normalize((img_x, img_y, -plane_distance))
            r, g, b = shade_pixel(eye, direction, light, reflection_depth, ambient, exponent,
                                  sphere_centers, sphere_radii, sphere_colors, sphere_kinds, sphere_ids,
                                  triangle_vertices, triangle_colors, triangle_kinds, triangle_ids)
            out[y, x, 0] = r
            out[y, x, 1] = g
            out[y, x, 2] = b
