"""Hull result types."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple

from concavehull.domain.edge import Edge
from concavehull.domain.point import Point


class WindingDirection(Enum):
    """Polygon winding direction.

    Hulls produced by this library wind counter-clockwise in a y-up
    coordinate system (positive signed area).
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


class HullVertex(NamedTuple):
    """One boundary vertex: the original index and the point at that index."""

    index: int
    point: Point


@dataclass
class Hull:
    """An ordered, implicitly closed hull boundary.

    The last vertex connects back to the first. Each original index appears
    at most once.

    Attributes:
        vertices: Boundary vertices in winding order
    """

    vertices: list[HullVertex]

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[HullVertex]:
        return iter(self.vertices)

    def indices(self) -> list[int]:
        """Original indices of the boundary points, in order."""
        return [v.index for v in self.vertices]

    def points(self) -> list[Point]:
        """Boundary points, in order."""
        return [v.point for v in self.vertices]

    def edges(self) -> list[Edge]:
        """Directed boundary edges, including the closing edge.

        Hulls with fewer than two vertices have no edges.
        """
        n = len(self.vertices)
        if n < 2:
            return []
        return [
            Edge(a.index, b.index, a.point, b.point)
            for a, b in zip(self.vertices, self.vertices[1:] + self.vertices[:1])
        ]

    def signed_area(self) -> float:
        """Signed area of the boundary (positive for counter-clockwise)."""
        from concavehull.core.geometry import signed_area

        return signed_area(self.points())

    @property
    def direction(self) -> WindingDirection | None:
        """Winding direction, or None for degenerate (zero-area) hulls."""
        from concavehull.core.geometry import winding_direction

        return winding_direction(self.points())
