"""Tests for the distance statistics helpers."""

import pytest

from movement.errors import InsufficientSamples
from movement.utils.distances import (
    all_pairs_extremes,
    centroid,
    closest_point,
    distinct_count,
    reference_stats,
)
from movement.utils.point import Point
from tests.conftest import CIRCLE_BOUNDARY_TRACE, LINE_TRACE


def test_centroid_truncates_per_axis():
    assert centroid([Point(0, 0), Point(3, 5)]) == Point(1, 2)
    assert centroid([Point(-3, 0), Point(0, 0)]) == Point(-1, 0)
    assert centroid(LINE_TRACE) == Point(600, 919)


def test_centroid_of_empty_trace_fails():
    with pytest.raises(InsufficientSamples):
        centroid([])


def test_all_pairs_extremes_with_witnesses():
    trace = [Point(0, 0), Point(3, 4), Point(10, 0), Point(3, 4)]
    ds = all_pairs_extremes(trace)
    assert ds.max == 10
    assert ds.max_pair == (Point(0, 0), Point(10, 0))
    assert ds.min == 5
    assert ds.min_pair == (Point(0, 0), Point(3, 4))
    assert ds.max >= ds.min >= 0


def test_all_pairs_extremes_ties_keep_first_pair():
    trace = [Point(0, 0), Point(10, 0), Point(0, 10), Point(10, 10)]
    ds = all_pairs_extremes(trace)
    assert ds.max == 14
    assert ds.max_pair == (Point(0, 0), Point(10, 10))
    assert ds.min == 10
    assert ds.min_pair == (Point(0, 0), Point(10, 0))


def test_all_pairs_extremes_without_distinct_points():
    ds = all_pairs_extremes([Point(4, 4), Point(4, 4)])
    assert ds.max == 0
    assert ds.min == 0
    assert ds.max_pair is None
    assert ds.min_pair is None


def test_reference_stats_on_perfect_circle():
    trace = [Point(10, 0), Point(0, 10), Point(-10, 0), Point(0, -10)]
    stats = reference_stats(trace, Point(0, 0), 0.25)
    assert stats.avg == 10
    assert stats.min == stats.max == 10
    assert stats.above == stats.below == 0
    assert stats.values == 4
    assert stats.passes_percent == 100
    assert stats.max_pair == (Point(0, 0), Point(10, 0))


def test_reference_stats_averages_over_full_count():
    # The coincident reference contributes no distance but still counts
    trace = [Point(0, 0), Point(10, 0), Point(0, 10), Point(-10, 0)]
    stats = reference_stats(trace, Point(0, 0), 0.25)
    assert stats.avg == 7
    assert stats.above == 3
    assert stats.below == 0
    assert stats.values == 4
    assert stats.passes_percent == 25
    assert stats.passed == 1


def test_reference_stats_boundary_fixture():
    stats = reference_stats(CIRCLE_BOUNDARY_TRACE, Point(400, 300), 0.25)
    assert stats.avg == 124
    assert stats.above == 3
    assert stats.below == 0
    assert stats.passes_percent == 75


def test_reference_stats_tolerance_band():
    trace = [Point(10, 0), Point(0, 20), Point(-30, 0)]
    # avg = 60 // 3 = 20; zero band flags both outliers
    strict = reference_stats(trace, Point(0, 0), 0.0)
    assert (strict.above, strict.below) == (1, 1)
    # band = 10: 10 + 10 is not below 20, 30 - 10 is not above 20
    loose = reference_stats(trace, Point(0, 0), 0.5)
    assert (loose.above, loose.below) == (0, 0)
    assert loose.passes_percent == 100


def test_closest_point_skips_target_and_keeps_first():
    trace = [Point(0, 0), Point(5, 0), Point(0, 5)]
    assert closest_point(trace, Point(0, 0)) == (Point(5, 0), 5)
    assert closest_point(trace, Point(1, 1)) == (Point(0, 0), 1)
    assert closest_point([Point(2, 2)], Point(2, 2)) is None


def test_distinct_count():
    assert distinct_count([Point(1, 1), Point(1, 1), Point(2, 2)]) == 2
