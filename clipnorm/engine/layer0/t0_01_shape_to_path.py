"""T0.01 — Shape → Path Data.

Rewrite rect/circle/ellipse/polygon/polyline as equivalent path data; <path>
passes its `d` through. Any other tag raises UnsupportedShapeKind, which
leaves ctx.path_data unset so the element is skipped.
"""

from __future__ import annotations

from clipnorm.engine.context import ShapeContext
from clipnorm.engine.registry import Layer, transform
from clipnorm.svg.shapes import shape_to_path


@transform(
    id="T0.01",
    layer=Layer.CONVERSION,
    description="Convert a shape element to path data",
)
def shape_to_path_transform(ctx: ShapeContext) -> None:
    ctx.path_data = shape_to_path(ctx.tag, ctx.attributes)
