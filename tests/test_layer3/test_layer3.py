"""Tests for Layer 3 — unit-square normalization through the pipeline."""

from clipnorm.engine.context import ShapeContext
from clipnorm.engine.registry import Layer, get_registry


def _run(pipeline, d: str) -> ShapeContext:
    return pipeline.run(ShapeContext(id="E1", tag="path", attributes={"d": d}))


def test_layer3_registers_normalization(pipeline):
    assert [s.id for s in get_registry().get_layer(Layer.NORMALIZATION)] == ["T3.01"]


def test_layer3_segment_count_and_kinds_preserved(pipeline):
    ctx = _run(pipeline, "M0 0 C10 0 20 10 20 20 Q 30 30 40 20 H50 V0 Z")
    assert [s.kind for s in ctx.normalized] == [s.kind for s in ctx.sequence]
    assert ctx.features["degenerate"] is None


def test_layer3_degenerate_flags(pipeline):
    assert _run(pipeline, "M5,0 L5,100").features["degenerate"] == "zero_width"
    assert _run(pipeline, "M0,5 L100,5").features["degenerate"] == "zero_height"
    assert _run(pipeline, "M3,3 L3,3").features["degenerate"] == "point"


def test_layer3_coordinates_inside_unit_square(pipeline):
    ctx = _run(pipeline, "M8 14s1.5 2 4 2 4-2 4-2")
    values = [v for seg in ctx.normalized for v in seg.params]
    assert all(0.0 <= v <= 1.0 for v in values)
    assert min(values) == 0.0
    assert max(values) == 1.0
