"""Pipeline orchestrator — runs the stage transforms over one shape at a time."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time
from collections.abc import Iterable

from clipnorm.engine.config import PipelineConfig
from clipnorm.engine.context import ShapeContext
from clipnorm.engine.registry import Layer, TransformRegistry, get_registry

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = [f"clipnorm.engine.layer{int(layer)}" for layer in Layer]


def load_transforms() -> None:
    """Import all transform modules so @transform decorators fire."""
    for package_name in _LAYER_PACKAGES:
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")


class Pipeline:
    """Runs registered transforms in dependency order.

    A failing transform is recorded in ``ctx.errors``; every transform that
    depends on it (directly or not) is skipped for that shape only.
    """

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def run(self, ctx: ShapeContext) -> ShapeContext:
        ctx.config = self.config
        for spec in self.registry.resolve_order():
            self._run_spec(ctx, spec)
        return ctx

    def run_many(self, contexts: Iterable[ShapeContext]) -> list[ShapeContext]:
        """Run every shape independently, preserving input order."""
        start = time.perf_counter()
        results = [self.run(ctx) for ctx in contexts]
        failed = sum(1 for ctx in results if ctx.errors)
        logger.info(
            "Pipeline complete: %d shapes (%d with errors) in %.0fms",
            len(results),
            failed,
            (time.perf_counter() - start) * 1000,
        )
        return results

    def run_layer(self, ctx: ShapeContext, layer: Layer) -> ShapeContext:
        """Run only transforms in a specific layer."""
        ctx.config = self.config
        for spec in self.registry.get_layer(layer):
            self._run_spec(ctx, spec)
        return ctx

    def _run_spec(self, ctx: ShapeContext, spec) -> None:
        missing = [d for d in spec.dependencies if d in self.registry and d not in ctx.completed_transforms]
        if missing:
            ctx.skipped_transforms.add(spec.id)
            logger.debug("  %s skipped for %s (missing %s)", spec.id, ctx.id, ", ".join(missing))
            return

        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s FAILED for %s: %s", spec.id, ctx.id, e)
            return
        ctx.completed_transforms.add(spec.id)
        logger.debug("  %s completed for %s in %.1fms", spec.id, ctx.id, (time.perf_counter() - t0) * 1000)


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline with every stage loaded."""
    load_transforms()
    return Pipeline(config=config)
