"""Tests for polyline length, interpolation, nearest-point search and slicing."""

from __future__ import annotations

import numpy as np
import pytest
from pyproj import Geod

from common.types import PointOnLineResult
from common.units import Q_

geod = Geod(ellps="WGS84")

SEGMENT_A = (-77.031669, 38.878605)
SEGMENT_B = (-77.029609, 38.881946)
QUERY = (-77.034076, 38.882017)


# ── lineDistance ─────────────────────────────────────────────────────────


class TestLineDistance:
    def test_against_geodesic(self, ruler, lines):
        for line in lines:
            lons, lats = zip(*line)
            expected = geod.line_length(lons, lats) / 1000.0
            assert ruler.line_distance(line) == pytest.approx(expected, rel=0.003)

    def test_sum_of_segments(self, ruler, zigzag):
        expected = sum(ruler.distance(a, b) for a, b in zip(zigzag, zigzag[1:]))
        assert ruler.line_distance(zigzag) == pytest.approx(expected, rel=1e-15)

    def test_degenerate_lines(self, ruler):
        assert ruler.line_distance([]) == 0.0
        assert ruler.line_distance([(30.5, 32.8)]) == 0.0

    def test_duplicate_vertices_add_nothing(self, ruler, zigzag):
        doubled = [p for p in zigzag for _ in range(2)]
        assert ruler.line_distance(doubled) == pytest.approx(ruler.line_distance(zigzag), rel=1e-12)


# ── along ────────────────────────────────────────────────────────────────


class TestAlong:
    def test_midpoint_against_geodesic(self, ruler, lines):
        for line in lines:
            half = ruler.line_distance(line) / 2
            point = ruler.along(line, half)
            lons, lats = zip(*ruler.line_slice_along(0, half, line))
            assert geod.line_length(lons, lats) / 1000.0 == pytest.approx(half, rel=0.003)
            assert ruler.point_on_line(line, point).point == pytest.approx(point, abs=1e-12)

    def test_within_segment(self, ruler):
        line = [(30.0, 32.8351), (30.1, 32.8351)]
        point = ruler.along(line, ruler.kx * 0.025)
        assert point == pytest.approx((30.025, 32.8351))

    @pytest.mark.parametrize("dist", [0, -5, -1e-9])
    def test_before_start(self, ruler, zigzag, dist):
        assert ruler.along(zigzag, dist) == zigzag[0]

    @pytest.mark.parametrize("extra", [0.0, 1e-6, 1000])
    def test_past_end(self, ruler, zigzag, extra):
        assert ruler.along(zigzag, ruler.line_distance(zigzag) + extra) == zigzag[-1]

    def test_single_point(self, ruler):
        assert ruler.along([(1.0, 2.0)], 5) == (1.0, 2.0)

    def test_empty_line(self, ruler):
        with pytest.raises(ValueError, match="at least one point"):
            ruler.along([], 1)

    def test_over_dateline(self, ruler):
        line = [(179.9, 32.7), (-179.9, 32.9)]
        third = ruler.line_distance(line) / 3
        lon, lat = ruler.along(line, third)
        assert lon == pytest.approx(179.9 + 0.2 / 3)
        assert lat == pytest.approx(32.7 + 0.2 / 3)

    def test_skips_duplicate_vertices(self, ruler, zigzag):
        doubled = [p for p in zigzag for _ in range(2)]
        d = ruler.line_distance(zigzag) * 0.45
        assert ruler.along(doubled, d) == pytest.approx(ruler.along(zigzag, d), abs=1e-12)

    def test_quantity_distance(self, ruler, zigzag):
        assert ruler.along(zigzag, Q_(300, "m")) == pytest.approx(ruler.along(zigzag, 0.3))


# ── pointOnLine / pointToSegmentDistance ─────────────────────────────────


class TestPointOnLine:
    def test_reference_scenario(self, ruler):
        result = ruler.point_on_line([SEGMENT_A, SEGMENT_B], QUERY)
        assert isinstance(result, PointOnLineResult)
        assert result.point == pytest.approx((-77.03052689033436, 38.880457324462576), rel=1e-12)
        assert result.index == 0
        assert result.t == pytest.approx(0.5544221677861756, rel=1e-12)

    def test_t_clamped(self, ruler):
        line = [SEGMENT_A, SEGMENT_B]
        before = ruler.point_on_line(line, (-80, 38))
        after = ruler.point_on_line(line, (-75, 38))
        assert before.t == 0
        assert before.point == SEGMENT_A
        assert after.t == 1
        assert after.point == SEGMENT_B

    def test_over_dateline(self, ruler):
        line = [(179.9, 32.7), (-179.9, 32.9)]
        result = ruler.point_on_line(line, (180, 32.7))
        assert result.point == pytest.approx((179.9416136283502, 32.7416136283502), rel=1e-12)

    def test_index_and_t_in_range(self, ruler, lines):
        probes = [(30.505, 32.833), (30.6, 32.9), (30.0, 32.0), (30.5125, 32.8390)]
        for line in lines:
            for p in probes:
                result = ruler.point_on_line(line, p)
                assert 0 <= result.index <= len(line) - 2
                assert 0.0 <= result.t <= 1.0

    def test_picks_nearest_segment(self, ruler, zigzag):
        result = ruler.point_on_line(zigzag, (30.5095, 32.8360))
        assert result.index == 3
        assert 0 < result.t < 1

    def test_first_segment_wins_ties(self, ruler):
        # Out-and-back line: every point is equally near both legs
        line = [(30.0, 32.8), (30.1, 32.8), (30.0, 32.8)]
        result = ruler.point_on_line(line, (30.05, 32.81))
        assert result.index == 0
        assert result.t == pytest.approx(0.5)

    def test_zero_length_segments(self, ruler):
        line = [(30.0, 32.8), (30.0, 32.8), (30.1, 32.8), (30.1, 32.8)]
        result = ruler.point_on_line(line, (30.04, 32.81))
        assert result.index == 1
        assert result.point == pytest.approx((30.04, 32.8))

    def test_single_point_line(self, ruler):
        result = ruler.point_on_line([(30.0, 32.8)], (31.0, 33.0))
        assert result == PointOnLineResult(point=(30.0, 32.8), index=0, t=0.0)

    def test_empty_line(self, ruler):
        with pytest.raises(ValueError):
            ruler.point_on_line([], (0, 0))


class TestPointToSegmentDistance:
    def test_reference_scenario(self, ruler):
        distance = ruler.point_to_segment_distance(QUERY, SEGMENT_A, SEGMENT_B)
        assert distance == pytest.approx(0.37461484020420416, rel=1e-12)

    def test_degenerate_segment(self, ruler):
        p, a = (30.5, 32.8), (30.51, 32.81)
        assert ruler.point_to_segment_distance(p, a, a) == pytest.approx(ruler.distance(p, a))

    def test_beyond_endpoints(self, ruler):
        a, b = (30.0, 32.8), (30.1, 32.8)
        assert ruler.point_to_segment_distance((29.9, 32.8), a, b) == pytest.approx(ruler.distance((29.9, 32.8), a))
        assert ruler.point_to_segment_distance((30.3, 32.8), a, b) == pytest.approx(ruler.distance((30.3, 32.8), b))

    def test_perpendicular(self, ruler):
        a, b = (30.0, 32.8), (30.1, 32.8)
        assert ruler.point_to_segment_distance((30.05, 32.81), a, b) == pytest.approx(0.01 * ruler.ky)

    def test_on_segment(self, ruler):
        a, b = (30.0, 32.8), (30.1, 32.8)
        assert ruler.point_to_segment_distance((30.05, 32.8), a, b) == pytest.approx(0.0, abs=1e-12)


# ── lineSlice ────────────────────────────────────────────────────────────


class TestLineSlice:
    def test_reconstructs_sub_length(self, ruler, lines):
        for line in lines:
            length = ruler.line_distance(line)
            start = ruler.along(line, length * 0.3)
            stop = ruler.along(line, length * 0.7)
            sliced = ruler.line_slice(start, stop, line)
            assert ruler.line_distance(sliced) == pytest.approx(length * 0.4, rel=1e-9)

    def test_reverse_order(self, ruler, zigzag):
        length = ruler.line_distance(zigzag)
        start = ruler.along(zigzag, length * 0.7)
        stop = ruler.along(zigzag, length * 0.3)
        reverse = ruler.line_slice(start, stop, zigzag)
        forward = ruler.line_slice(stop, start, zigzag)
        assert reverse == forward
        assert ruler.line_distance(reverse) == pytest.approx(length * 0.4, rel=1e-9)
        assert reverse[0] == pytest.approx(stop, abs=1e-12)

    def test_interior_vertices(self, ruler, zigzag):
        start = ruler.along(zigzag, ruler.distance(zigzag[0], zigzag[1]) / 2)
        stop = ruler.along(zigzag, ruler.line_distance(zigzag) - 0.01)
        sliced = ruler.line_slice(start, stop, zigzag)
        assert sliced[1:-1] == zigzag[1:-1]
        assert len(sliced) == len(zigzag)

    def test_off_line_points_are_projected(self, ruler):
        line = [(30.0, 32.8), (30.1, 32.8), (30.2, 32.8)]
        sliced = ruler.line_slice((30.05, 32.81), (30.15, 32.79), line)
        np.testing.assert_allclose(sliced, [(30.05, 32.8), (30.1, 32.8), (30.15, 32.8)])

    def test_start_on_vertex_not_duplicated(self, ruler):
        line = [(30.0, 32.8), (30.1, 32.8), (30.2, 32.8)]
        sliced = ruler.line_slice((30.1, 32.8), (30.15, 32.8), line)
        assert sliced[0] == (30.1, 32.8)
        assert len(sliced) == 2

    def test_single_point_line(self, ruler):
        assert ruler.line_slice((0, 0), (1, 1), [(30.0, 32.8)]) == [(30.0, 32.8)]


# ── lineSliceAlong ───────────────────────────────────────────────────────


class TestLineSliceAlong:
    def test_reconstructs_sub_length(self, ruler, lines):
        for line in lines:
            length = ruler.line_distance(line)
            sliced = ruler.line_slice_along(length * 0.3, length * 0.7, line)
            assert ruler.line_distance(sliced) == pytest.approx(length * 0.4, rel=1e-9)
            assert sliced[0] == pytest.approx(ruler.along(line, length * 0.3), abs=1e-12)
            assert sliced[-1] == pytest.approx(ruler.along(line, length * 0.7), abs=1e-12)

    def test_matches_line_slice(self, ruler, lines):
        for line in lines:
            length = ruler.line_distance(line)
            start = ruler.along(line, length * 0.3)
            stop = ruler.along(line, length * 0.7)
            by_point = ruler.line_distance(ruler.line_slice(start, stop, line))
            by_distance = ruler.line_distance(ruler.line_slice_along(length * 0.3, length * 0.7, line))
            assert by_distance == pytest.approx(by_point, rel=1e-5)

    def test_line_revisiting_itself(self, ruler):
        # Out-and-back: nearest-point projection is ambiguous, distances are not
        line = [(30.0, 32.8), (30.1, 32.8), (30.0, 32.8)]
        leg = ruler.distance(line[0], line[1])
        sliced = ruler.line_slice_along(leg * 1.25, leg * 1.75, line)
        np.testing.assert_allclose(sliced, [(30.075, 32.8), (30.025, 32.8)])

    def test_reverse_order(self, ruler, zigzag):
        length = ruler.line_distance(zigzag)
        assert ruler.line_slice_along(length * 0.7, length * 0.3, zigzag) == \
            ruler.line_slice_along(length * 0.3, length * 0.7, zigzag)

    def test_clamped_to_line(self, ruler, zigzag):
        sliced = ruler.line_slice_along(-3, 1000, zigzag)
        assert sliced[0] == zigzag[0]
        assert sliced[-1] == zigzag[-1]
        assert ruler.line_distance(sliced) == pytest.approx(ruler.line_distance(zigzag), rel=1e-12)

    @pytest.mark.parametrize("start,stop", [(-5, -1), (-1, -5), (-2, 0)])
    def test_negative_range_stays_at_start(self, ruler, start, stop):
        line = [(30.0, 32.8), (30.1, 32.8)]
        sliced = ruler.line_slice_along(start, stop, line)
        assert sliced == [line[0]] * len(sliced)
        assert sliced[-1] == ruler.along(line, stop)

    def test_start_past_end(self, ruler, zigzag):
        assert ruler.line_slice_along(999, 1000, zigzag) == [zigzag[-1]]

    def test_zero_length_segments(self, ruler):
        line = [(30.0, 32.8), (30.0, 32.8), (30.1, 32.8), (30.1, 32.8), (30.2, 32.8)]
        leg = ruler.distance(line[0], line[2])
        sliced = ruler.line_slice_along(0, leg * 1.5, line)
        assert sliced[0] == (30.0, 32.8)
        assert sliced[-1] == pytest.approx((30.15, 32.8))
        assert ruler.line_distance(sliced) == pytest.approx(leg * 1.5, rel=1e-9)

    def test_quantities(self, ruler, zigzag):
        np.testing.assert_allclose(
            ruler.line_slice_along(Q_(100, "m"), Q_(400, "m"), zigzag),
            ruler.line_slice_along(0.1, 0.4, zigzag),
        )
