"""T4.01 — Path Serialization."""

from __future__ import annotations

from clipnorm.engine.context import ShapeContext
from clipnorm.engine.registry import Layer, transform
from clipnorm.svg.serializer import serialize_path


@transform(
    id="T4.01",
    layer=Layer.SERIALIZATION,
    dependencies=["T3.01"],
    description="Serialize normalized segments to path data",
)
def serialize_transform(ctx: ShapeContext) -> None:
    ctx.output = serialize_path(ctx.normalized or [], ctx.config.precision)
