"""Gift-opening refinement of a convex boundary.

The engine keeps three pieces of state for one run:

- A max-priority queue of pending edges, longest first
- The set of point indices already on the boundary
- The list of edges accepted as final

Each popped edge that is longer than the concavity limit is opened by
inserting the best-scoring point between its endpoints, unless that point
is already on the boundary or the two new edges would cross an edge that
is finalized or still pending. Every committed split moves one point onto
the boundary for good, so the loop terminates.
"""

import heapq
import itertools
import math
from collections.abc import Iterator, Sequence

import structlog

from concavehull.core.search import (
    CandidateFinder,
    IntersectionSweep,
    LinearCandidateFinder,
    LinearSweep,
)
from concavehull.domain import Edge, Point
from concavehull.exceptions import InvalidConcavityError, NoCandidateError
from concavehull.utils import RefinementLogger, RefinementStats, get_logger


def validate_concavity(concavity: float) -> float:
    """Return concavity as a float, rejecting negative and NaN values.

    Raises:
        InvalidConcavityError: If concavity is NaN or negative
    """
    try:
        value = float(concavity)
    except (TypeError, ValueError):
        raise InvalidConcavityError(concavity) from None
    if math.isnan(value) or value < 0:
        raise InvalidConcavityError(concavity)
    return value


class _EdgeQueue:
    """Max-heap of edges by squared length, first-in first-out on ties."""

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, Edge]] = []
        self._counter = itertools.count()

    def push(self, edge: Edge) -> None:
        heapq.heappush(self._heap, (-edge.squared_length(), next(self._counter), edge))

    def pop(self) -> Edge:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Edge]:
        return (entry[2] for entry in self._heap)


class HullRefiner:
    """Opens the long edges of a convex boundary into a concave one.

    A refiner is bound to one point cloud and one concavity. Each call to
    ``refine`` starts from fresh state, so a refiner can be reused, but it
    must not be shared between threads while a call is running.

    Example:
        refiner = HullRefiner(points, concavity=40.0)
        edges = refiner.refine(convex_hull_indices(points))
    """

    def __init__(
        self,
        points: Sequence[Point],
        concavity: float,
        candidate_finder: CandidateFinder | None = None,
        sweep: IntersectionSweep | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the refiner.

        Args:
            points: Point cloud; edge indices refer to positions in it
            concavity: Edges longer than this are opened (0 to inf)
            candidate_finder: Strategy for picking insertion points
            sweep: Strategy for detecting crossings
            logger: Structured logger for refinement events

        Raises:
            InvalidConcavityError: If concavity is negative or NaN
        """
        self.points = points
        self.concavity = validate_concavity(concavity)
        self.candidate_finder = candidate_finder or LinearCandidateFinder(points)
        self.sweep = sweep or LinearSweep()
        self._logger = logger or get_logger(__name__)
        self._refinement_logger = RefinementLogger(self._logger)

    @property
    def stats(self) -> RefinementStats:
        """Statistics of the most recent ``refine`` call."""
        return self._refinement_logger.stats

    def refine(self, convex_indices: Sequence[int]) -> list[Edge]:
        """Refine a convex boundary into the final set of hull edges.

        Args:
            convex_indices: Convex hull corners in winding order

        Returns:
            Finalized edges, in acceptance order. Together they form one
            directed cycle in the same winding as the input.

        Raises:
            NoCandidateError: If an edge must be opened but no other point
                exists
        """
        events = RefinementLogger(self._logger)
        self._refinement_logger = events

        queue = _EdgeQueue()
        boundary: set[int] = set()
        n = len(convex_indices)
        for pos, i in enumerate(convex_indices):
            j = convex_indices[(pos + 1) % n]
            boundary.add(i)
            queue.push(Edge.from_points(i, j, self.points))

        limit = self.concavity * self.concavity
        finalized: list[Edge] = []
        events.log_start(len(self.points), n, self.concavity)

        while queue:
            edge = queue.pop()
            events.log_pop()

            if edge.squared_length() <= limit:
                events.log_accepted_short(edge.key)
                finalized.append(edge)
                continue

            candidate = self.candidate_finder.best_candidate(edge)
            if candidate is None:
                raise NoCandidateError(edge.key)

            if candidate.index in boundary:
                events.log_rejected_boundary(edge.key, candidate.index)
                finalized.append(edge)
                continue

            e1, e2 = edge.split_by(candidate.point, candidate.index)
            if self.sweep.crosses_any((e1, e2), itertools.chain(finalized, queue)):
                events.log_rejected_intersection(edge.key, candidate.index)
                finalized.append(edge)
                continue

            queue.push(e1)
            queue.push(e2)
            boundary.add(candidate.index)
            events.log_split(edge.key, candidate.index, candidate.score)

        events.log_complete(len(finalized))
        return finalized
