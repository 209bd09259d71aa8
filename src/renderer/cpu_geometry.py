# renderer/cpu_geometry.py
"""
Compiled vector and intersection routines for the numba backend. Vectors
are plain 3-tuples of floats; scene data comes from the arrays packed by
Renderer.update_scene_data().
"""
import math
from numba import njit

INFINITY = math.inf
NO_HIT_ID = -2

@njit
def add(a, b):
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])

@njit
def sub(a, b):
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])

@njit
def scale(a, s):
    return (a[0] * s, a[1] * s, a[2] * s)

@njit
def dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]

@njit
def cross(a, b):
    return (a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0])

@njit
def magnitude(a):
    return math.sqrt(dot(a, a))

@njit
def normalize(a):
    l = magnitude(a)
    if l == 0.0:
        return (0.0, 0.0, 0.0)
    return (a[0] / l, a[1] / l, a[2] / l)

@njit
def row3(arr, i, offset):
    return (arr[i, offset], arr[i, offset + 1], arr[i, offset + 2])

@njit
def ray_sphere_intersect(origin, direction, center, radius):
    """
    Nearer non-negative root, the smaller root if both are negative, -1.0 on
    a miss or a zero direction.
    """
    emc = sub(origin, center)
    ddd = dot(direction, direction)
    if ddd == 0.0:
        return -1.0
    ddemc = dot(direction, emc)
    discriminant = ddemc * ddemc - ddd * (dot(emc, emc) - radius * radius)

    if discriminant < 0.0:
        return -1.0

    sqrt_disc = math.sqrt(discriminant)
    t1 = (-ddemc + sqrt_disc) / ddd
    t2 = (-ddemc - sqrt_disc) / ddd

    if t1 < 0.0:
        return t2
    if t2 < 0.0:
        return t1
    return min(t1, t2)

@njit
def ray_triangle_intersect(origin, direction, va, vb, vc, t_max):
    """
    Cramer's rule barycentric test. Returns t, or -1.0 if the ray is
    parallel, the hit is behind the origin or beyond t_max, or the point
    falls outside the triangle.
    """
    a = va[0] - vb[0]
    b = va[1] - vb[1]
    c = va[2] - vb[2]
    d = va[0] - vc[0]
    e = va[1] - vc[1]
    f = va[2] - vc[2]
    g = direction[0]
    h = direction[1]
    i = direction[2]
    j = va[0] - origin[0]
    k = va[1] - origin[1]
    l = va[2] - origin[2]

    m = a * (e * i - h * f) + b * (g * f - d * i) + c * (d * h - e * g)
    if m == 0.0:
        return -1.0

    t = -(f * (a * k - j * b) + e * (j * c - a * l) + d * (b * l - k * c)) / m
    if t < 0.0 or t > t_max:
        return -1.0

    gamma = (i * (a * k - j * b) + h * (j * c - a * l) + g * (b * l - k * c)) / m
    if gamma < 0.0 or gamma > 1.0:
        return -1.0

    beta = (j * (e * i - h * f) + k * (g * f - d * i) + l * (d * h - e * g)) / m
    if beta < 0.0 or beta > 1.0 - gamma:
        return -1.0

    return t

@njit
def closest_hit(origin, direction, exclude_id,
                sphere_centers, sphere_radii, sphere_ids,
                triangle_vertices, triangle_ids):
    """
    Returns (t, index, is_triangle) of the nearest hit not carrying
    `exclude_id`; index is -1 and t is inf when nothing is hit.
    """
    best_t = INFINITY
    best_index = -1
    best_is_triangle = False

    for s in range(sphere_ids.shape[0]):
        t = ray_sphere_intersect(origin, direction, row3(sphere_centers, s, 0), sphere_radii[s])
        if t > 0.0 and t < best_t and sphere_ids[s] != exclude_id:
            best_t = t
            best_index = s
            best_is_triangle = False

    for n in range(triangle_ids.shape[0]):
        t = ray_triangle_intersect(origin, direction,
                                   row3(triangle_vertices, n, 0),
                                   row3(triangle_vertices, n, 3),
                                   row3(triangle_vertices, n, 6),
                                   best_t)
        if t > 0.0 and t < best_t and triangle_ids[n] != exclude_id:
            best_t = t
            best_index = n
            best_is_triangle = True

    return best_t, best_index, best_is_triangle
