"""clipnorm path normalization engine."""

from clipnorm.engine.registry import transform, Layer, get_registry
from clipnorm.engine.context import BoundingBox, Segment, SegmentKind, ShapeContext, Transform
from clipnorm.engine.pipeline import Pipeline, create_pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "BoundingBox",
    "Segment",
    "SegmentKind",
    "ShapeContext",
    "Transform",
    "Pipeline",
    "create_pipeline",
]
