"""Core algorithms for concavehull.

This module contains:

- Vector primitives (angles, squared norms, signed area)
- Convex hull provider (monotone chain, counter-clockwise)
- Segment intersection test for hull edges
- Candidate search and intersection sweep strategies
- Gift-opening refinement engine
- Ring reconstruction from finalized edges

Key functions:
- concave_hull: Compute a concave hull in one call
- convex_hull_indices: Convex hull as ordered indices
- edges_intersect: Decide whether two hull edges cross
- reconstruct_ring: Order a cycle of edges into a boundary

Key classes:
- ConcaveHullBuilder: Configurable hull computation
- HullRefiner: The refinement engine
- LinearCandidateFinder, LinearSweep: Default search strategies
"""

from concavehull.core.convex import ConvexHullProvider, convex_hull_indices
from concavehull.core.geometry import (
    angle_between,
    cross,
    dot,
    norm_squared,
    signed_area,
    vector_between,
    winding_direction,
)
from concavehull.core.hull import ConcaveHullBuilder, concave_hull
from concavehull.core.intersection import edges_intersect
from concavehull.core.reconstruct import reconstruct_ring
from concavehull.core.refine import HullRefiner, validate_concavity
from concavehull.core.search import (
    Candidate,
    CandidateFinder,
    IntersectionSweep,
    LinearCandidateFinder,
    LinearSweep,
)

__all__ = [
    # Search strategies
    "Candidate",
    "CandidateFinder",
    # Orchestration
    "ConcaveHullBuilder",
    "ConvexHullProvider",
    # Engine
    "HullRefiner",
    "IntersectionSweep",
    "LinearCandidateFinder",
    "LinearSweep",
    # Geometry functions
    "angle_between",
    "concave_hull",
    "convex_hull_indices",
    "cross",
    "dot",
    "edges_intersect",
    "norm_squared",
    "reconstruct_ring",
    "signed_area",
    "validate_concavity",
    "vector_between",
    "winding_direction",
]
