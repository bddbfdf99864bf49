"""T1.01 — Path Decomposition.

Parse path data into absolute segments with arcs expanded to cubic béziers
and S/T expanded to C/Q. Records segment composition for diagnostics.
"""

from __future__ import annotations

from clipnorm.engine.context import ShapeContext
from clipnorm.engine.registry import Layer, transform
from clipnorm.svg.path_parser import decompose


@transform(
    id="T1.01",
    layer=Layer.DECOMPOSITION,
    dependencies=["T0.01"],
    description="Decompose path data into absolute segments",
)
def decompose_transform(ctx: ShapeContext) -> None:
    ctx.sequence = decompose(ctx.path_data or "", ctx.config.arc_max_sweep_degrees)

    segment_types: dict[str, int] = {}
    for seg in ctx.sequence:
        segment_types[seg.letter] = segment_types.get(seg.letter, 0) + 1
    ctx.features["segment_types"] = segment_types
    ctx.features["segment_count"] = len(ctx.sequence)
