"""Transform registry — every pipeline stage is a function registered via decorator.

Usage:
    @transform(id="T2.01", layer=Layer.MEASUREMENT, dependencies=["T1.01"])
    def bounding_box(ctx: ShapeContext) -> None:
        ctx.bbox = compute_bbox(ctx.sequence)

Adding a stage = creating one module under engine/layerN with the decorator.
"""

from __future__ import annotations

import enum
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from clipnorm.engine.context import ShapeContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    CONVERSION = 0
    DECOMPOSITION = 1
    MEASUREMENT = 2
    NORMALIZATION = 3
    SERIALIZATION = 4


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["ShapeContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    """Registry of pipeline stages keyed by transform id."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def get(self, transform_id: str) -> TransformSpec:
        return self._transforms[transform_id]

    def __contains__(self, transform_id: str) -> bool:
        return transform_id in self._transforms

    def get_layer(self, layer: Layer) -> list[TransformSpec]:
        return sorted((s for s in self._transforms.values() if s.layer == layer), key=lambda s: s.id)

    def all(self) -> list[TransformSpec]:
        return sorted(self._transforms.values(), key=lambda s: (s.layer, s.id))

    def resolve_order(self) -> list[TransformSpec]:
        """Dependencies first; ties broken by (layer, id) so runs are deterministic."""
        pending = {spec.id: {d for d in spec.dependencies if d in self._transforms} for spec in self.all()}
        ready = deque(tid for tid, deps in pending.items() if not deps)
        ordered: list[TransformSpec] = []

        while ready:
            tid = ready.popleft()
            ordered.append(self._transforms[tid])
            del pending[tid]
            for other in self.all():
                deps = pending.get(other.id)
                if deps and tid in deps:
                    deps.discard(tid)
                    if not deps:
                        ready.append(other.id)

        if pending:
            raise ValueError(f"Circular dependency detected among: {set(pending)}")
        return ordered

    @property
    def count(self) -> int:
        return len(self._transforms)


# Module-level singleton
_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a stage function on the shared registry."""

    def decorator(fn: Callable[["ShapeContext"], None]):
        _registry.register(
            TransformSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator
