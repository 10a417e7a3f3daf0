"""Segment intersection test for hull edges.

Edges are compared by index first and by geometry second. Distinct indices
are assumed to refer to distinct points, so touching at a shared index is
adjacency, not a crossing.
"""

from concavehull.domain import Edge


def edges_intersect(e1: Edge, e2: Edge) -> bool:
    """Decide whether two hull edges cross.

    Rules, applied in order:
    1. Identical index pairs intersect (a duplicate edge).
    2. Edges chained end-to-start at one index do not intersect.
    3. Otherwise the segments intersect when the parametric intersection
       point lies within both, endpoints included.
    4. Parallel or degenerate segments (zero denominator) do not intersect.

    Args:
        e1: First edge
        e2: Second edge

    Returns:
        True if the edges intersect

    Examples:
        >>> from concavehull.domain import Point
        >>> a = Edge(0, 1, Point(0, 0), Point(1, 0))
        >>> b = Edge(1, 2, Point(1, 0), Point(2, 0))
        >>> edges_intersect(a, b)
        False
    """
    if e1.i == e2.i and e1.j == e2.j:
        return True

    if e1.i == e2.j or e2.i == e1.j:
        return False

    x1, y1 = e1.point_i.x, e1.point_i.y
    x2, y2 = e1.point_j.x, e1.point_j.y
    x3, y3 = e2.point_i.x, e2.point_i.y
    x4, y4 = e2.point_j.x, e2.point_j.y

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if denom == 0:
        return False

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom

    return 0 <= t <= 1 and 0 <= u <= 1
