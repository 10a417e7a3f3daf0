"""End-to-end tests for concave hull computation.

Tests cover:
- Degenerate inputs (0-3 points)
- Worked examples with known output
- Concavity extremes (0 and infinity)
- Input handling and errors
"""

import math

import pytest

from concavehull import (
    ConcaveHullBuilder,
    ConcaveHullSettings,
    HullConfig,
    HullVertex,
    InvalidConcavityError,
    InvalidPointError,
    Point,
    WindingDirection,
    concave_hull,
    convex_hull_indices,
)


def indices(hull: list[HullVertex]) -> list[int]:
    return [v.index for v in hull]


class TestDegenerateInputs:
    """Inputs too small to refine."""

    def test_no_points(self):
        assert concave_hull([], 1.0) == []

    def test_single_point(self):
        assert concave_hull([(3.0, 4.0)], 0.0) == [HullVertex(0, Point(3.0, 4.0))]

    def test_two_points_keep_input_order(self):
        hull = concave_hull([(5.0, 5.0), (0.0, 0.0)], 0.0)
        assert hull == [HullVertex(0, Point(5.0, 5.0)), HullVertex(1, Point(0.0, 0.0))]

    @pytest.mark.parametrize("concavity", [0.0, 1.0, math.inf])
    def test_three_points_follow_convex_hull(self, concavity):
        pts = [(0.0, 0.0), (0.0, 4.0), (4.0, 0.0)]
        expected = convex_hull_indices([Point(x, y) for x, y in pts])
        assert indices(concave_hull(pts, concavity)) == expected

    def test_three_collinear_points(self):
        hull = concave_hull([(1.0, 1.0), (0.0, 0.0), (2.0, 2.0)], 0.0)
        assert indices(hull) == [1, 2]

    def test_collinear_cloud(self):
        """A line of points opens into a ring through every point."""
        builder = ConcaveHullBuilder()
        hull = builder.build([(i, 0) for i in range(6)], 0.0)

        assert hull.indices() == [0, 1, 2, 3, 4, 5]
        assert builder.stats is not None
        assert builder.stats.splits == 4
        assert hull.direction is None

    def test_no_stats_for_fast_path(self):
        builder = ConcaveHullBuilder()
        builder.build([(0, 0), (1, 0), (0, 1)])
        assert builder.stats is None


class TestWorkedExamples:
    """Small clouds with hand-checked results."""

    def test_unit_square(self):
        pts = [(0.0, 1.0), (1.0, 1.0), (0.0, 2.0), (1.0, 2.0)]
        hull = concave_hull(pts, 10.0)

        assert indices(hull) == [0, 1, 3, 2]
        assert [v.point.to_tuple() for v in hull] == [
            (0.0, 1.0),
            (1.0, 1.0),
            (1.0, 2.0),
            (0.0, 2.0),
        ]

    def test_notch(self):
        pts = [(0, 0), (4, 0), (4, 4), (2, 1), (0, 4)]
        assert indices(concave_hull(pts, 1.0)) == [0, 3, 1, 2, 4]

    def test_notch_not_opened_with_large_concavity(self):
        pts = [(0, 0), (4, 0), (4, 4), (2, 1), (0, 4)]
        assert indices(concave_hull(pts, 4.0)) == [0, 1, 2, 4]

    def test_pocket(self):
        pts = [(0, 0), (10, 0), (10, 10), (0, 10), (5, 9), (2, 8)]
        hull = ConcaveHullBuilder().build(pts, 1.0)

        assert hull.indices() == [0, 5, 4, 1, 2, 3]
        assert hull.direction == WindingDirection.COUNTER_CLOCKWISE
        assert hull.signed_area() == pytest.approx(44.0)


class TestConcavityExtremes:
    """Behaviour at concavity 0 and infinity."""

    def test_infinity_returns_convex_hull(self, sample_cloud):
        expected = convex_hull_indices(sample_cloud)
        assert indices(concave_hull(sample_cloud, math.inf)) == expected

    def test_zero_accepts_edges_only_by_rejection(self, sample_cloud):
        builder = ConcaveHullBuilder()
        hull = builder.build(sample_cloud, 0.0)

        stats = builder.stats
        assert stats is not None
        assert stats.accepted_short == 0
        assert stats.rejected_boundary + stats.rejected_intersection == len(hull)

    def test_smaller_concavity_never_fewer_points(self, sample_cloud):
        loose = concave_hull(sample_cloud, math.inf)
        tight = concave_hull(sample_cloud, 0.0)
        assert len(tight) >= len(loose)

    def test_vertex_count_matches_splits(self, sample_cloud):
        builder = ConcaveHullBuilder()
        hull = builder.build(sample_cloud, 5.0)
        assert builder.stats is not None
        assert len(hull) == len(convex_hull_indices(sample_cloud)) + builder.stats.splits


class TestBuilder:
    """Tests for ConcaveHullBuilder configuration."""

    def test_settings_concavity_used_by_default(self, sample_cloud):
        settings = ConcaveHullSettings(hull=HullConfig(concavity=math.inf))
        hull = ConcaveHullBuilder(settings).build(sample_cloud)
        assert hull.indices() == convex_hull_indices(sample_cloud)

    def test_explicit_concavity_overrides_settings(self, sample_cloud):
        settings = ConcaveHullSettings(hull=HullConfig(concavity=math.inf))
        hull = ConcaveHullBuilder(settings).build(sample_cloud, 0.0)
        assert len(hull) > len(convex_hull_indices(sample_cloud))

    def test_default_matches_helper(self, sample_cloud):
        assert ConcaveHullBuilder().build(sample_cloud).vertices == concave_hull(sample_cloud)

    def test_custom_convex_hull_provider(self):
        """A clockwise provider yields a clockwise hull."""
        pts = [(0, 0), (0, 4), (4, 4), (4, 0), (2, 2)]
        builder = ConcaveHullBuilder(convex_hull=lambda points: [0, 1, 2, 3])
        hull = builder.build(pts, math.inf)

        assert hull.indices() == [0, 1, 2, 3]
        assert hull.direction == WindingDirection.CLOCKWISE

    def test_builder_is_reusable(self, sample_cloud):
        builder = ConcaveHullBuilder()
        first = builder.build(sample_cloud, 20.0)
        second = builder.build(sample_cloud, 20.0)
        assert first.vertices == second.vertices


class TestInputHandling:
    """Tests for input coercion and errors."""

    def test_accepts_points_and_pairs(self, sample_cloud):
        as_pairs = [p.to_tuple() for p in sample_cloud]
        assert concave_hull(as_pairs, 30.0) == concave_hull(sample_cloud, 30.0)

    def test_returns_caller_points(self, sample_cloud):
        hull = concave_hull(sample_cloud, 30.0)
        assert all(v.point is sample_cloud[v.index] for v in hull)

    def test_negative_concavity(self):
        with pytest.raises(InvalidConcavityError):
            concave_hull([(0, 0), (1, 0), (0, 1), (1, 1)], -1.0)

    def test_negative_concavity_rejected_even_for_tiny_input(self):
        with pytest.raises(ValueError):
            concave_hull([], -1.0)

    def test_nan_concavity(self):
        with pytest.raises(InvalidConcavityError):
            concave_hull([(0, 0), (1, 0), (0, 1), (1, 1)], math.nan)

    def test_bad_point(self):
        with pytest.raises(InvalidPointError) as exc_info:
            concave_hull([(0, 0), (1, 0), (0, math.inf), (1, 1)], 1.0)
        assert exc_info.value.index == 2
