"""Search strategies used by the refinement engine.

The engine runs two searches for every edge it tries to open:

- Candidate search: which point should be inserted into the edge
- Intersection sweep: would the two new edges cross the current boundary

Both are linear scans here. They sit behind small protocols so a spatial
index can replace either one without changing the engine's results.
"""

from collections.abc import Iterable, Sequence
from typing import NamedTuple, Protocol

from concavehull.core.geometry import angle_between, vector_between
from concavehull.core.intersection import edges_intersect
from concavehull.domain import Edge, Point


class Candidate(NamedTuple):
    """A point proposed for insertion into an edge.

    Attributes:
        index: Index of the point in the cloud
        point: The point itself
        score: Larger of the two angles the point makes with the edge
            (radians); smaller is better
    """

    index: int
    point: Point
    score: float


class CandidateFinder(Protocol):
    """Finds the best point to open an edge with."""

    def best_candidate(self, edge: Edge) -> Candidate | None: ...


class IntersectionSweep(Protocol):
    """Checks proposed edges against an existing boundary."""

    def crosses_any(self, new_edges: Sequence[Edge], existing: Iterable[Edge]) -> bool: ...


class LinearCandidateFinder:
    """Scores every point in the cloud against the edge.

    A point's score is the larger of the angle at the edge's start (between
    the edge and the vector to the point) and the angle at its end (between
    the edge and the vector from the point). The lowest score wins; the
    first point seen wins ties. The edge's own endpoints are skipped.
    Points already on the boundary are not filtered out here.
    """

    def __init__(self, points: Sequence[Point]) -> None:
        self.points = points

    def best_candidate(self, edge: Edge) -> Candidate | None:
        direction = vector_between(edge.point_i, edge.point_j)
        best: Candidate | None = None

        for idx, p in enumerate(self.points):
            if idx == edge.i or idx == edge.j:
                continue

            score = max(
                angle_between(direction, vector_between(edge.point_i, p)),
                angle_between(direction, vector_between(p, edge.point_j)),
            )
            if best is None or score < best.score:
                best = Candidate(idx, p, score)

        return best


class LinearSweep:
    """Tests every new edge against every existing edge."""

    def crosses_any(self, new_edges: Sequence[Edge], existing: Iterable[Edge]) -> bool:
        return any(
            edges_intersect(edge, new_edge)
            for edge in existing
            for new_edge in new_edges
        )
