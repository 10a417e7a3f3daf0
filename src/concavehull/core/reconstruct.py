"""Reassemble finalized hull edges into one ordered ring."""

from collections.abc import Iterable

from concavehull.domain import Edge, HullVertex
from concavehull.exceptions import BrokenCycleError


def reconstruct_ring(edges: Iterable[Edge], start: int | None = None) -> list[HullVertex]:
    """Walk a set of directed edges into an ordered boundary.

    The edges must form exactly one closed directed cycle. The walk follows
    edge direction, so the ring keeps the winding the edges were built
    with.

    Args:
        edges: Unordered edges forming a single cycle
        start: Index the ring should begin at (default: start of the first
            edge)

    Returns:
        Boundary vertices in order, implicitly closed

    Raises:
        BrokenCycleError: If the edges are not a single closed cycle
    """
    by_start: dict[int, Edge] = {}
    first: Edge | None = None
    for edge in edges:
        if edge.i in by_start:
            raise BrokenCycleError(f"two edges start at index {edge.i}")
        by_start[edge.i] = edge
        if first is None:
            first = edge

    if first is None:
        return []

    if start is None:
        current = first
    elif start in by_start:
        current = by_start[start]
    else:
        raise BrokenCycleError(f"start index {start} is not on the ring")

    ring: list[HullVertex] = []
    origin = current.i
    while True:
        ring.append(HullVertex(current.i, current.point_i))
        if current.j == origin:
            break
        nxt = by_start.get(current.j)
        if nxt is None:
            raise BrokenCycleError(f"no edge continues from index {current.j}")
        if len(ring) == len(by_start):
            raise BrokenCycleError(f"walk from index {origin} never returns to it")
        current = nxt

    if len(ring) != len(by_start):
        raise BrokenCycleError(
            f"ring closed after {len(ring)} of {len(by_start)} edges"
        )

    return ring
