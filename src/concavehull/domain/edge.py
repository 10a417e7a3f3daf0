"""Directed candidate boundary segments."""

from collections.abc import Sequence
from dataclasses import dataclass

from concavehull.domain.point import Point


@dataclass(frozen=True, slots=True, eq=False)
class Edge:
    """A directed segment from point ``i`` to point ``j``.

    Edges are value objects keyed by their index pair: two edges are equal
    when ``(i, j)`` match, whatever their stored coordinates. Ordering
    compares squared length only, so the longest edge sorts last.

    Attributes:
        i: Index of the start point
        j: Index of the end point
        point_i: Coordinates of the start point
        point_j: Coordinates of the end point
    """

    i: int
    j: int
    point_i: Point
    point_j: Point

    @classmethod
    def from_points(cls, i: int, j: int, points: Sequence[Point]) -> "Edge":
        """Build an edge between two indices of a point sequence."""
        return cls(i, j, points[i], points[j])

    @property
    def key(self) -> tuple[int, int]:
        """The (i, j) index pair identifying this edge."""
        return (self.i, self.j)

    def squared_length(self) -> float:
        """Squared Euclidean length, for relative comparison only."""
        dx = self.point_j.x - self.point_i.x
        dy = self.point_j.y - self.point_i.y
        return dx * dx + dy * dy

    def split_by(self, point: Point, index: int) -> tuple["Edge", "Edge"]:
        """Split this edge around an inserted point.

        Direction is preserved: the result is ``(i -> index, index -> j)``.
        The original edge is left untouched.

        Args:
            point: Coordinates of the inserted point
            index: Index of the inserted point

        Returns:
            Tuple of the two child edges
        """
        return (
            Edge(self.i, index, self.point_i, point),
            Edge(index, self.j, point, self.point_j),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.i == other.i and self.j == other.j

    def __hash__(self) -> int:
        return hash((self.i, self.j))

    def __lt__(self, other: "Edge") -> bool:
        return self.squared_length() < other.squared_length()

    def __gt__(self, other: "Edge") -> bool:
        return self.squared_length() > other.squared_length()
