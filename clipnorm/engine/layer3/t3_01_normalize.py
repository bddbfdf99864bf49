"""T3.01 — Unit-Square Normalization.

Translate the bounding box to the origin and scale it onto [0,1] x [0,1].
A zero-width or zero-height axis is recentered on 0.5; a single point (or
empty geometry) collapses to M0.5,0.5.
"""

from __future__ import annotations

from clipnorm.engine.context import ShapeContext
from clipnorm.engine.registry import Layer, transform
from clipnorm.utils.geometry import normalize


def _degeneracy(ctx: ShapeContext) -> str | None:
    if ctx.bbox is None:
        return "empty"
    if ctx.bbox.width == 0 and ctx.bbox.height == 0:
        return "point"
    if ctx.bbox.width == 0:
        return "zero_width"
    if ctx.bbox.height == 0:
        return "zero_height"
    return None


@transform(
    id="T3.01",
    layer=Layer.NORMALIZATION,
    dependencies=["T2.01"],
    description="Map coordinates into objectBoundingBox units",
)
def normalize_transform(ctx: ShapeContext) -> None:
    ctx.normalized = normalize(
        ctx.sequence or [],
        ctx.bbox,
        precision=ctx.config.precision,
        center=ctx.config.degenerate_center,
    )
    ctx.features["degenerate"] = _degeneracy(ctx)
