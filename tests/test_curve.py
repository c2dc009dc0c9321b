"""Tests for the caustic curve generator."""

import math

import numpy as np
import pytest

from caustics.model.curve import (
    TWO_PI,
    CurveParameters,
    InvalidParameterError,
    build_geometry,
    edge_segments,
    generate_boundary_edges,
    generate_chord_edges,
    generate_points,
)


class TestCurveParameters:
    """Tests for CurveParameters validation."""

    def test_defaults_match_reference_figure(self):
        params = CurveParameters.default()
        assert (params.point_count, params.chord_stride, params.freq_x, params.freq_y) == (200, 37, 1, 1)

    @pytest.mark.parametrize("bad", [0, -1, -200])
    def test_non_positive_point_count_rejected(self, bad):
        with pytest.raises(InvalidParameterError):
            CurveParameters(point_count=bad)

    def test_non_integer_point_count_rejected(self):
        with pytest.raises(InvalidParameterError):
            CurveParameters(point_count=2.5)
        with pytest.raises(InvalidParameterError):
            CurveParameters(point_count=True)

    def test_invalid_parameter_is_value_error(self):
        with pytest.raises(ValueError):
            CurveParameters(point_count=0)

    def test_any_integer_stride_and_frequency_accepted(self):
        params = CurveParameters(point_count=10, chord_stride=-13, freq_x=-3, freq_y=0)
        assert params.chord_stride == -13
        assert params.normalized_stride == 7

    def test_numpy_integers_accepted(self):
        params = CurveParameters(point_count=np.int64(8), chord_stride=np.int32(3))
        assert params.point_count == 8
        assert type(params.point_count) is int

    def test_parameters_are_immutable(self):
        params = CurveParameters()
        with pytest.raises(AttributeError):
            params.point_count = 5


class TestGeneratePoints:
    """Tests for generate_points."""

    @pytest.mark.parametrize("q", [1, 2, 3, 4, 17, 200])
    def test_returns_exactly_q_points(self, q):
        assert len(generate_points(CurveParameters(point_count=q))) == q

    def test_first_point_at_angle_zero(self, default_params):
        p0 = generate_points(default_params)[0]
        assert p0.x == pytest.approx(1.0)
        assert p0.y == pytest.approx(0.0)

    def test_four_points_form_unit_square(self, square_params):
        points = generate_points(square_params)
        expected = [(1, 0), (0, 1), (-1, 0), (0, -1)]
        for p, (x, y) in zip(points, expected):
            assert p.x == pytest.approx(x, abs=1e-5)
            assert p.y == pytest.approx(y, abs=1e-5)

    def test_points_lie_on_unit_circle(self, default_params):
        xy = generate_points(default_params).to_array()
        assert xy.shape == (200, 2)
        np.testing.assert_allclose(np.hypot(xy[:, 0], xy[:, 1]), 1.0, atol=1e-12)

    def test_index_corresponds_to_angle(self):
        params = CurveParameters(point_count=12, freq_x=3, freq_y=2)
        points = generate_points(params)
        for i, p in enumerate(points):
            angle = i * TWO_PI / 12
            assert p.x == pytest.approx(math.cos(3 * angle))
            assert p.y == pytest.approx(math.sin(2 * angle))

    def test_idempotent(self, default_params):
        assert generate_points(default_params) == generate_points(default_params)

    def test_single_point(self):
        points = generate_points(CurveParameters(point_count=1))
        assert len(points) == 1
        assert points[0].to_tuple() == pytest.approx((1.0, 0.0))


class TestBoundaryEdges:
    """Tests for generate_boundary_edges."""

    def test_edges_join_consecutive_points(self):
        edges = generate_boundary_edges(5)
        assert list(edges) == [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)]

    @pytest.mark.parametrize("q", [1, 2, 7, 200])
    def test_single_cycle_through_all_points(self, q):
        edges = generate_boundary_edges(q)
        assert len(edges) == q
        successor = dict(edges)
        seen, i = [], 0
        for _ in range(q):
            seen.append(i)
            i = successor[i]
        assert i == 0
        assert sorted(seen) == list(range(q))

    def test_single_point_is_self_loop(self):
        assert list(generate_boundary_edges(1)) == [(0, 0)]

    @pytest.mark.parametrize("bad", [0, -3])
    def test_invalid_point_count(self, bad):
        with pytest.raises(InvalidParameterError):
            generate_boundary_edges(bad)


class TestChordEdges:
    """Tests for generate_chord_edges."""

    def test_reference_chords(self):
        edges = generate_chord_edges(200, 37)
        assert len(edges) == 200
        assert edges[0] == (0, 37)
        assert edges[163] == (163, 0)

    def test_zero_stride_gives_self_loops(self):
        edges = generate_chord_edges(6, 0)
        assert list(edges) == [(i, i) for i in range(6)]

    def test_stride_multiple_of_count_gives_self_loops(self):
        assert all(i == j for i, j in generate_chord_edges(6, 12))

    def test_negative_stride_normalized(self):
        edges = generate_chord_edges(10, -3)
        assert edges[0] == (0, 7)
        assert edges[2] == (2, 9)
        assert edges[5] == (5, 2)
        assert all(0 <= j < 10 for _, j in edges)

    def test_large_stride_reduced(self):
        assert list(generate_chord_edges(5, 7)) == list(generate_chord_edges(5, 2))

    @pytest.mark.parametrize("bad", [0, -1])
    def test_invalid_point_count(self, bad):
        with pytest.raises(InvalidParameterError):
            generate_chord_edges(bad, 3)


class TestBuildGeometry:
    """Tests for the per-render geometry bundle."""

    def test_bundle_contents(self, default_params):
        geometry = build_geometry(default_params)
        assert geometry.params is default_params
        assert len(geometry.points) == 200
        assert geometry.boundary == generate_boundary_edges(200)
        assert geometry.chords == generate_chord_edges(200, 37)

    def test_fresh_objects_each_call(self, default_params):
        first = build_geometry(default_params)
        second = build_geometry(default_params)
        assert first == second
        assert first is not second
        assert first.points is not second.points

    def test_negative_stride_uses_normalized_chords(self):
        params = CurveParameters(point_count=10, chord_stride=-3)
        geometry = build_geometry(params)
        assert geometry.chords == generate_chord_edges(10, 7)
        assert geometry.params.chord_stride == -3

    def test_edge_segments(self, square_params):
        geometry = build_geometry(square_params)
        segs = edge_segments(geometry.points, geometry.boundary)
        assert segs.shape == (4, 2, 2)
        np.testing.assert_allclose(segs[0], [[1.0, 0.0], [0.0, 1.0]], atol=1e-12)
        np.testing.assert_allclose(segs[3], [[0.0, -1.0], [1.0, 0.0]], atol=1e-12)

    def test_edge_segments_rejects_foreign_edges(self, square_params):
        points = generate_points(square_params)
        with pytest.raises(IndexError):
            edge_segments(points, generate_boundary_edges(5))
