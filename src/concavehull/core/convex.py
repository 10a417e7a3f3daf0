"""Convex hull provider.

The refinement engine starts from the convex hull of the point cloud. This
module provides the default provider, Andrew's monotone chain, returning
point indices rather than coordinates.

Any callable with the signature of ``convex_hull_indices`` can replace it.
"""

from collections.abc import Callable, Sequence

from concavehull.core.geometry import cross, vector_between
from concavehull.domain import Point

ConvexHullProvider = Callable[[Sequence[Point]], list[int]]


def _turn(points: Sequence[Point], o: int, a: int, b: int) -> float:
    return cross(vector_between(points[o], points[a]), vector_between(points[o], points[b]))


def convex_hull_indices(points: Sequence[Point]) -> list[int]:
    """Compute the convex hull of a point cloud as a list of indices.

    The hull winds counter-clockwise (y-up) and starts at the smallest point
    by (x, y). Points lying on a hull edge but not at a corner are left out.
    Ties in the sort order are broken by index, so identical input always
    gives identical output.

    Args:
        points: Point cloud

    Returns:
        Indices of the hull corners in counter-clockwise order. For fewer
        than three points, the indices of all points in input order.

    Examples:
        >>> pts = [Point(0, 1), Point(1, 1), Point(0, 2), Point(1, 2)]
        >>> convex_hull_indices(pts)
        [0, 1, 3, 2]
    """
    n = len(points)
    if n < 3:
        return list(range(n))

    order = sorted(range(n), key=lambda i: (points[i].x, points[i].y, i))

    lower: list[int] = []
    for idx in order:
        while len(lower) >= 2 and _turn(points, lower[-2], lower[-1], idx) <= 0:
            lower.pop()
        lower.append(idx)

    upper: list[int] = []
    for idx in reversed(order):
        while len(upper) >= 2 and _turn(points, upper[-2], upper[-1], idx) <= 0:
            upper.pop()
        upper.append(idx)

    # The last point of each chain is the first point of the other
    return lower[:-1] + upper[:-1]
