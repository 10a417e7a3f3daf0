"""Concave hull orchestration.

Ties the pieces together for one point cloud:
1. Coerce and validate the input points
2. Compute the convex hull (pluggable provider)
3. Refine it with the gift-opening engine
4. Reassemble the finalized edges into an ordered ring

Key components:
- ConcaveHullBuilder: Configurable, reusable entry point
- concave_hull: One-shot helper returning (index, point) pairs
"""

from collections.abc import Iterable
from typing import Any

import structlog

from concavehull.config import ConcaveHullSettings, get_default_settings
from concavehull.core.convex import ConvexHullProvider, convex_hull_indices
from concavehull.core.reconstruct import reconstruct_ring
from concavehull.core.refine import HullRefiner, validate_concavity
from concavehull.domain import Hull, HullVertex, as_points
from concavehull.utils import RefinementStats, configure_logging, get_logger


class ConcaveHullBuilder:
    """Computes concave hulls of 2D point clouds.

    Hulls wind counter-clockwise (y-up) when the default convex hull
    provider is used; a custom provider's winding is kept as is. With an
    infinite concavity the result is exactly the provider's hull.

    A builder holds only settings and collaborators, so it can be shared
    between threads; per-call state lives inside ``build``. The ``stats``
    attribute reflects whichever call finished last.

    Example:
        builder = ConcaveHullBuilder()
        hull = builder.build(points, concavity=25.0)
        print(hull.indices())
    """

    def __init__(
        self,
        settings: ConcaveHullSettings | None = None,
        convex_hull: ConvexHullProvider | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            settings: Library settings (defaults if None)
            convex_hull: Convex hull provider returning ordered indices
            logger: Structured logger (package logger if None)
        """
        self.settings = settings or get_default_settings()
        self.convex_hull = convex_hull or convex_hull_indices

        if logger is not None:
            self.logger = logger
        elif self.settings.logging.configure:
            self.logger = configure_logging(
                log_file=self.settings.logging.log_file,
                console_level=self.settings.logging.log_level,
                file_level=self.settings.logging.file_log_level,
            )
        else:
            self.logger = get_logger("concavehull")

        self.stats: RefinementStats | None = None

    def build(self, points: Iterable[Any], concavity: float | None = None) -> Hull:
        """Compute the concave hull of a point cloud.

        Args:
            points: Points or (x, y) pairs; must not contain coincident points
            concavity: Opening threshold in coordinate units (settings
                default if None)

        Returns:
            The hull boundary as (index, point) vertices

        Raises:
            InvalidPointError: If a point is not a pair of finite numbers
            InvalidConcavityError: If concavity is negative or NaN
            HullInvariantError: If an internal invariant is broken
        """
        if concavity is None:
            concavity = self.settings.hull.concavity
        concavity = validate_concavity(concavity)
        cloud = as_points(points)
        self.stats = None

        if len(cloud) <= 2:
            return Hull([HullVertex(i, p) for i, p in enumerate(cloud)])

        convex = self.convex_hull(cloud)
        if len(cloud) <= 3:
            # Too few points to open anything
            return Hull([HullVertex(i, cloud[i]) for i in convex])

        refiner = HullRefiner(cloud, concavity, logger=self.logger)
        edges = refiner.refine(convex)
        self.stats = refiner.stats

        return Hull(reconstruct_ring(edges, start=convex[0]))


def concave_hull(points: Iterable[Any], concavity: float = 40.0) -> list[HullVertex]:
    """Compute the concave hull of a point cloud.

    Concavity is compared against edge lengths in coordinate units: 0 opens
    every edge it can, ``float("inf")`` returns the convex hull. It is not
    scale-invariant.

    Args:
        points: Points or (x, y) pairs; must not contain coincident points
        concavity: Opening threshold

    Returns:
        (index, point) pairs in counter-clockwise order, implicitly closed

    Examples:
        >>> square = [(0, 1), (1, 1), (0, 2), (1, 2)]
        >>> [v.index for v in concave_hull(square, concavity=10)]
        [0, 1, 3, 2]
    """
    return ConcaveHullBuilder().build(points, concavity).vertices
