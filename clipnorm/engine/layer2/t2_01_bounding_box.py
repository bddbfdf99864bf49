"""T2.01 — Bounding Box.

Axis-aligned extent of every coordinate the segments write (control points
included). None marks empty geometry, handled downstream like a single point.
"""

from __future__ import annotations

from clipnorm.engine.context import ShapeContext
from clipnorm.engine.registry import Layer, transform
from clipnorm.utils.geometry import compute_bbox


@transform(
    id="T2.01",
    layer=Layer.MEASUREMENT,
    dependencies=["T1.01"],
    description="Compute the bounding box of the segment sequence",
)
def bounding_box(ctx: ShapeContext) -> None:
    ctx.bbox = compute_bbox(ctx.sequence or [])
    ctx.features["empty_geometry"] = ctx.bbox is None
