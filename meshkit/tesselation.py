"""Triangulation of planar-ish polygons for rendering, and crease-angle limits."""

import math

from meshkit.core import InvalidInputException

MIN_CREASE_ANGLE = 0.0
MAX_CREASE_ANGLE = 180.0


def _sub(a, b):
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def squared_area(p0, p1, p2):
    """Return the squared norm of the cross product of the triangle's edges.

    This is four times the squared area of the triangle (p0, p1, p2).
    """
    a = _sub(p1, p0)
    b = _sub(p2, p0)
    cx = a[1] * b[2] - a[2] * b[1]
    cy = a[2] * b[0] - a[0] * b[2]
    cz = a[0] * b[1] - a[1] * b[0]
    return cx * cx + cy * cy + cz * cz


def _tesselate_quad(points):
    p0, p1, p2, p3 = points
    if squared_area(p0, p1, p2) + squared_area(p0, p2, p3) < squared_area(
        p0, p1, p3
    ) + squared_area(p1, p2, p3):
        return [(0, 1, 2), (0, 2, 3)]
    return [(0, 1, 3), (1, 2, 3)]


def _split_table(points):
    """Dynamic programming table: best split index for each sub-polygon."""
    n = len(points)
    weight = {(i, i + 1): 0.0 for i in range(n - 1)}
    split = {}
    for span in range(2, n):
        for start in range(n - span):
            end = start + span
            best_weight = math.inf
            best_split = -1
            for middle in range(start + 1, end):
                w = (
                    weight[(start, middle)]
                    + squared_area(points[start], points[middle], points[end])
                    + weight[(middle, end)]
                )
                if w < best_weight:
                    best_weight = w
                    best_split = middle
            weight[(start, end)] = best_weight
            split[(start, end)] = best_split
    return split


def tesselate(points):
    """Triangulate a polygon given by its corner points.

    Returns a list of index triples into ``points``. Triangles and quads
    are handled directly; larger polygons are split so that the sum of
    squared triangle areas is minimal, which avoids folded triangles for
    non-convex polygons. Fewer than three points yield no triangles.
    """
    points = list(points)
    n = len(points)
    if n == 0:
        raise InvalidInputException("cannot tesselate a polygon without points")
    if n == 3:
        return [(0, 1, 2)]
    if n == 4:
        return _tesselate_quad(points)

    split = _split_table(points)
    triangles = []
    todo = [(0, n - 1)]
    while todo:
        start, end = todo.pop()
        if end - start < 2:
            continue
        middle = split[(start, end)]
        triangles.append((start, middle, end))
        todo.append((start, middle))
        todo.append((middle, end))
    return triangles


def clamp_crease_angle(angle):
    """Clamp a crease angle in degrees to the range [0, 180]."""
    return max(MIN_CREASE_ANGLE, min(MAX_CREASE_ANGLE, angle))