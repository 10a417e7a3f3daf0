"""concavehull - Concave hulls of 2D point clouds.

concavehull computes an ordered polygon boundary around a point cloud that hugs
the points more tightly than the convex hull. It uses the gift-opening approach:
start from the convex hull and repeatedly open long edges inward by inserting
interior points, as long as the boundary stays simple.

Example:
    >>> from concavehull import concave_hull
    >>> hull = concave_hull([(0, 0), (4, 0), (4, 4), (2, 1), (0, 4)], concavity=1.0)
    >>> [vertex.index for vertex in hull]
    [0, 3, 1, 2, 4]
"""

from concavehull.config import (
    ConcaveHullSettings,
    HullConfig,
    LoggingConfig,
    get_default_settings,
)
from concavehull.core import (
    ConcaveHullBuilder,
    concave_hull,
    convex_hull_indices,
    edges_intersect,
)
from concavehull.domain import Edge, Hull, HullVertex, Point, WindingDirection
from concavehull.exceptions import (
    BrokenCycleError,
    ConcaveHullError,
    HullInvariantError,
    InputError,
    InvalidConcavityError,
    InvalidPointError,
    NoCandidateError,
)

__version__ = "0.1.0"

__all__ = [
    "BrokenCycleError",
    "ConcaveHullBuilder",
    "ConcaveHullError",
    "ConcaveHullSettings",
    "Edge",
    "Hull",
    "HullConfig",
    "HullInvariantError",
    "HullVertex",
    "InputError",
    "InvalidConcavityError",
    "InvalidPointError",
    "LoggingConfig",
    "NoCandidateError",
    "Point",
    "WindingDirection",
    "__version__",
    "concave_hull",
    "convex_hull_indices",
    "edges_intersect",
    "get_default_settings",
]
