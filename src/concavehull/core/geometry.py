"""Vector primitives over 2D points.

This module provides the small amount of vector arithmetic the hull
algorithms need:
- Vector construction and dot/cross products
- Squared norms (no square roots for length comparisons)
- Angle between two vectors
- Signed area (shoelace formula) and winding direction

Vectors are plain (dx, dy) tuples. All functions are pure and stateless.
"""

import math
from collections.abc import Sequence

from concavehull.domain import Point, WindingDirection

Vector = tuple[float, float]


def vector_between(a: Point, b: Point) -> Vector:
    """Vector pointing from ``a`` to ``b`` (that is, ``b - a``)."""
    return (b.x - a.x, b.y - a.y)


def dot(u: Vector, v: Vector) -> float:
    return u[0] * v[0] + u[1] * v[1]


def cross(u: Vector, v: Vector) -> float:
    """Z component of the cross product; positive when v is left of u."""
    return u[0] * v[1] - u[1] * v[0]


def norm_squared(v: Vector) -> float:
    return v[0] * v[0] + v[1] * v[1]


def angle_between(u: Vector, v: Vector) -> float:
    """Unsigned angle between two vectors, in radians.

    Args:
        u: First vector
        v: Second vector

    Returns:
        Angle in [0, pi]. Returns 0.0 if either vector has zero length.

    Examples:
        >>> angle_between((1.0, 0.0), (0.0, 2.0))  # doctest: +ELLIPSIS
        1.5707963...
    """
    n1 = math.hypot(u[0], u[1])
    n2 = math.hypot(v[0], v[1])
    if n1 == 0.0 or n2 == 0.0:
        return 0.0

    # Rounding can push the cosine slightly outside [-1, 1]
    cos_angle = max(-1.0, min(1.0, dot(u, v) / (n1 * n2)))
    return math.acos(cos_angle)


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: Points forming the polygon boundary (implicitly closed)

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> square = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]
        >>> signed_area(square)
        1.0
        >>> signed_area(square[::-1])
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def winding_direction(points: Sequence[Point]) -> WindingDirection | None:
    """Winding direction of a polygon, or None if it has no area."""
    area = signed_area(points)
    if area > 0:
        return WindingDirection.COUNTER_CLOCKWISE
    if area < 0:
        return WindingDirection.CLOCKWISE
    return None
