"""Barycentric coordinates of a point with respect to a triangle."""

# For the dominant normal axis, the pair of coordinate axes spanning the
# plane the triangle is projected onto.
_PROJECTION_AXES = {0: (1, 2), 1: (2, 0), 2: (0, 1)}


def _sub(a, b):
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def barycentric_coordinates(p, u, v, w):
    """Return the barycentric coordinates of p in the triangle (u, v, w).

    The triangle is projected onto the coordinate plane orthogonal to the
    largest component of its normal, and the 2D problem is solved there.
    A point off the triangle's plane is thus projected first. For a
    degenerate triangle the barycenter (1/3, 1/3, 1/3) is returned.
    """
    vu = _sub(v, u)
    wu = _sub(w, u)
    pu = _sub(p, u)

    normal = (
        vu[1] * wu[2] - vu[2] * wu[1],
        vu[2] * wu[0] - vu[0] * wu[2],
        vu[0] * wu[1] - vu[1] * wu[0],
    )
    ax, ay, az = (abs(c) for c in normal)

    if ax > ay:
        axis = 0 if ax > az else 2
    else:
        axis = 1 if ay > az else 2

    n = normal[axis]
    if 1.0 + abs(n) == 1.0:
        third = 1.0 / 3.0
        return (third, third, third)

    i, j = _PROJECTION_AXES[axis]
    b1 = 1.0 + (pu[i] * wu[j] - pu[j] * wu[i]) / n - 1.0
    b2 = 1.0 + (vu[i] * pu[j] - vu[j] * pu[i]) / n - 1.0
    return (1.0 - b1 - b2, b1, b2)