"""Tests for geometry helpers: arc flattening, bounds and unit mapping."""

from __future__ import annotations

import math

import pytest

from clipnorm.engine.context import BoundingBox, Segment, SegmentKind as K, Transform
from clipnorm.utils.geometry import (
    apply_transform,
    arc_to_cubics,
    compute_bbox,
    normalize,
    reflect,
    unit_transform,
)

KAPPA = 4.0 / 3.0 * math.tan(math.pi / 8)


def test_reflect():
    assert reflect((1.0, 2.0), (3.0, 3.0)) == (5.0, 4.0)


class TestArcToCubics:
    def test_quarter_circle_control_points(self):
        curves = arc_to_cubics((1.0, 0.0), (0.0, 1.0), 1.0, 1.0, 0.0, False, True)
        assert len(curves) == 1
        assert curves[0] == pytest.approx((1.0, KAPPA, KAPPA, 1.0, 0.0, 1.0))

    def test_large_arc_split_in_three(self):
        curves = arc_to_cubics((1.0, 0.0), (0.0, 1.0), 1.0, 1.0, 0.0, True, True)
        assert len(curves) == 3
        assert curves[-1][4:] == (0.0, 1.0)

    def test_smaller_max_sweep_gives_more_pieces(self):
        curves = arc_to_cubics((0.0, 0.0), (20.0, 0.0), 10.0, 10.0, 0.0, False, True, max_sweep_degrees=45.0)
        assert len(curves) == 4

    def test_rotated_ellipse_ends_on_endpoint(self):
        curves = arc_to_cubics((0.0, 0.0), (30.0, 10.0), 20.0, 10.0, 30.0, False, False)
        assert curves[-1][4:] == (30.0, 10.0)


class TestComputeBbox:
    def test_lines(self):
        seq = [Segment(K.MOVE_TO, (10, 10)), Segment(K.LINE_TO, (110, 60)), Segment(K.CLOSE_PATH)]
        assert compute_bbox(seq) == BoundingBox(10, 10, 110, 60)

    def test_horizontal_vertical_fold_one_axis(self):
        seq = [Segment(K.MOVE_TO, (0, 7)), Segment(K.HORIZONTAL_LINE_TO, (40,)), Segment(K.VERTICAL_LINE_TO, (-3,))]
        assert compute_bbox(seq) == BoundingBox(0, -3, 40, 7)

    def test_control_points_included(self):
        seq = [Segment(K.MOVE_TO, (0, 0)), Segment(K.CUBIC_CURVE, (0, 10, 10, 10, 10, 0))]
        assert compute_bbox(seq) == BoundingBox(0, 0, 10, 10)

    def test_quadratic_control_point_included(self):
        seq = [Segment(K.MOVE_TO, (0, 0)), Segment(K.QUADRATIC_CURVE, (5, -5, 10, 0))]
        assert compute_bbox(seq) == BoundingBox(0, -5, 10, 0)

    @pytest.mark.parametrize("seq", [[], [Segment(K.CLOSE_PATH)]])
    def test_empty(self, seq):
        assert compute_bbox(seq) is None


class TestUnitTransform:
    def test_regular_box(self):
        t = unit_transform(BoundingBox(10, 10, 110, 60))
        assert (t.apply_x(10), t.apply_y(10)) == (0.0, 0.0)
        assert (t.apply_x(110), t.apply_y(60)) == (1.0, 1.0)

    def test_zero_width_centred(self):
        t = unit_transform(BoundingBox(5, 0, 5, 100))
        assert t.apply_x(5) == 0.5
        assert t.apply_y(100) == 1.0

    def test_zero_height_centred(self):
        t = unit_transform(BoundingBox(0, 7, 40, 7))
        assert t.apply_x(40) == 1.0
        assert t.apply_y(7) == 0.5

    def test_custom_center(self):
        t = unit_transform(BoundingBox(0, 7, 40, 7), center=0.25)
        assert t.apply_y(7) == 0.25

    @pytest.mark.parametrize("bbox", [None, BoundingBox(3, 3, 3, 3)])
    def test_point_or_empty(self, bbox):
        assert unit_transform(bbox) is None


class TestNormalize:
    def test_rectangle(self):
        seq = [
            Segment(K.MOVE_TO, (10, 10)),
            Segment(K.LINE_TO, (110, 10)),
            Segment(K.LINE_TO, (110, 60)),
            Segment(K.LINE_TO, (10, 60)),
            Segment(K.CLOSE_PATH),
        ]
        out = normalize(seq, compute_bbox(seq))
        assert [s.params for s in out] == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), ()]

    def test_result_spans_unit_square(self):
        seq = [Segment(K.MOVE_TO, (-3, 2)), Segment(K.CUBIC_CURVE, (0, 9, 4, 9, 7, 2.5))]
        out = normalize(seq, compute_bbox(seq))
        values = [v for s in out for v in s.params]
        assert min(values) == 0.0
        assert max(values) == 1.0

    def test_idempotent(self):
        seq = [Segment(K.MOVE_TO, (2, 3)), Segment(K.QUADRATIC_CURVE, (9, 0, 4, 8)), Segment(K.HORIZONTAL_LINE_TO, (1,))]
        once = normalize(seq, compute_bbox(seq))
        twice = normalize(once, compute_bbox(once))
        assert [v for s in twice for v in s.params] == pytest.approx([v for s in once for v in s.params])

    def test_point_collapses_to_center(self):
        seq = [Segment(K.MOVE_TO, (3, 3)), Segment(K.LINE_TO, (3, 3))]
        assert normalize(seq, compute_bbox(seq)) == [Segment(K.MOVE_TO, (0.5, 0.5))]

    def test_empty_collapses_to_center(self):
        assert normalize([], None) == [Segment(K.MOVE_TO, (0.5, 0.5))]


def test_apply_transform_rounds_negative_zero():
    out = apply_transform([Segment(K.MOVE_TO, (-1e-9, 0.4999999999))], Transform(), precision=6)
    x, y = out[0].params
    assert x == 0.0 and math.copysign(1.0, x) == 1.0
    assert y == 0.5
