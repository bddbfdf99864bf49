"""Tests for Layer 2 — bounding boxes match each shape's analytic extent."""

import pytest

from clipnorm.engine.context import ShapeContext
from clipnorm.engine.registry import Layer, get_registry


def test_layer2_registers_bounding_box(pipeline):
    assert [s.id for s in get_registry().get_layer(Layer.MEASUREMENT)] == ["T2.01"]


@pytest.mark.parametrize(
    "tag,attributes,expected",
    [
        ("rect", {"x": "5", "y": "7", "width": "20", "height": "10"}, (5, 7, 25, 17)),
        ("circle", {"cx": "12", "cy": "12", "r": "10"}, (2, 2, 22, 22)),
        ("ellipse", {"cx": "50", "cy": "20", "rx": "40", "ry": "15"}, (10, 5, 90, 35)),
        ("polygon", {"points": "0,0 10,-5 20,30"}, (0, -5, 20, 30)),
        ("polyline", {"points": "3 4 -2 8"}, (-2, 4, 3, 8)),
        ("path", {"d": "M10 10 h100 v50 h-100 z"}, (10, 10, 110, 60)),
    ],
)
def test_layer2_analytic_extent(pipeline, tag, attributes, expected):
    ctx = pipeline.run(ShapeContext(id="E1", tag=tag, attributes=attributes))
    assert ctx.bbox.as_tuple() == pytest.approx(expected, abs=1e-9)


def test_layer2_empty_geometry(pipeline):
    ctx = pipeline.run(ShapeContext(id="E1", tag="path", attributes={"d": ""}))
    assert ctx.bbox is None
    assert ctx.features["empty_geometry"] is True
