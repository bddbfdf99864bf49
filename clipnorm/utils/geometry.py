"""Leaf-node geometry helpers for path sequences."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence

import numpy as np
from svgpathtools import Arc

from clipnorm.engine.context import BoundingBox, Segment, SegmentKind, Transform


def reflect(control: tuple[float, float], about: tuple[float, float]) -> tuple[float, float]:
    """Reflect a control point through the current point."""
    return (2 * about[0] - control[0], 2 * about[1] - control[1])


def arc_to_cubics(
    start: tuple[float, float],
    end: tuple[float, float],
    rx: float,
    ry: float,
    rotation: float,
    large_arc: bool,
    sweep: bool,
    max_sweep_degrees: float = 90.0,
) -> list[tuple[float, float, float, float, float, float]]:
    """Approximate an elliptical arc with cubic béziers.

    Returns (c1x, c1y, c2x, c2y, x, y) tuples, each spanning at most
    ``max_sweep_degrees``. The caller must drop arcs with start == end and treat
    a zero radius as a straight line; svgpathtools rejects both.
    """
    arc = Arc(complex(*start), complex(abs(rx), abs(ry)), rotation, large_arc, sweep, complex(*end))

    # svgpathtools scales the radius up when it cannot reach the endpoint
    rx, ry = arc.radius.real, arc.radius.imag
    rot = cmath.exp(1j * math.radians(arc.rotation))

    n = max(1, math.ceil(abs(arc.delta) / max_sweep_degrees - 1e-6))
    step = math.radians(arc.delta) / n
    theta = math.radians(arc.theta)
    alpha = 4.0 / 3.0 * math.tan(step / 4.0)

    def point(t: float) -> complex:
        return arc.center + rot * complex(rx * math.cos(t), ry * math.sin(t))

    def derivative(t: float) -> complex:
        return rot * complex(-rx * math.sin(t), ry * math.cos(t))

    curves = []
    p0 = complex(*start)
    for i in range(n):
        t1 = theta + i * step
        t2 = t1 + step
        # Last endpoint is pinned to the arc's declared end to avoid drift
        p3 = complex(*end) if i == n - 1 else point(t2)
        c1 = p0 + alpha * derivative(t1)
        c2 = p3 - alpha * derivative(t2)
        curves.append((c1.real, c1.imag, c2.real, c2.imag, p3.real, p3.imag))
        p0 = p3
    return curves


def compute_bbox(sequence: Sequence[Segment]) -> BoundingBox | None:
    """Fold every coordinate a segment writes into an axis-aligned box.

    Control points are folded as-is (convex-hull bound, not the tight curve
    extent). H/V contribute only the axis they move. Returns None when either
    axis received no coordinate.
    """
    xs: list[float] = []
    ys: list[float] = []

    for seg in sequence:
        kind = seg.kind
        if kind is SegmentKind.CLOSE_PATH:
            continue
        if kind is SegmentKind.HORIZONTAL_LINE_TO:
            xs.append(seg.params[0])
        elif kind is SegmentKind.VERTICAL_LINE_TO:
            ys.append(seg.params[0])
        else:
            # M/L/T: endpoint; S/Q: control + endpoint; C: two controls + endpoint
            xs.extend(seg.params[0::2])
            ys.extend(seg.params[1::2])

    if not xs or not ys:
        return None

    x = np.asarray(xs, dtype=np.float64)
    y = np.asarray(ys, dtype=np.float64)
    return BoundingBox(float(np.min(x)), float(np.min(y)), float(np.max(x)), float(np.max(y)))


def unit_transform(bbox: BoundingBox | None, center: float = 0.5) -> Transform | None:
    """Translate+scale mapping ``bbox`` onto the unit square.

    None means the geometry is a single point (or empty) and cannot be scaled.
    A zero-extent axis is left unscaled and shifted onto ``center``.
    """
    if bbox is None:
        return None

    width, height = bbox.width, bbox.height
    tx, ty = -bbox.min_x, -bbox.min_y

    if width == 0 and height == 0:
        return None
    if width == 0:
        return Transform(tx=tx, ty=ty, sx=1.0, sy=1.0 / height, ox=center)
    if height == 0:
        return Transform(tx=tx, ty=ty, sx=1.0 / width, sy=1.0, oy=center)
    return Transform(tx=tx, ty=ty, sx=1.0 / width, sy=1.0 / height)


def _round(value: float, precision: int | None) -> float:
    if precision is None:
        return value
    # + 0.0 folds -0.0 into 0.0
    return round(value, precision) + 0.0


def apply_transform(
    sequence: Sequence[Segment],
    transform: Transform,
    precision: int | None = None,
) -> list[Segment]:
    """Apply ``transform`` to every endpoint and control point."""
    out: list[Segment] = []
    for seg in sequence:
        kind = seg.kind
        if kind is SegmentKind.HORIZONTAL_LINE_TO:
            params = (_round(transform.apply_x(seg.params[0]), precision),)
        elif kind is SegmentKind.VERTICAL_LINE_TO:
            params = (_round(transform.apply_y(seg.params[0]), precision),)
        else:
            coords = []
            for i, value in enumerate(seg.params):
                mapped = transform.apply_x(value) if i % 2 == 0 else transform.apply_y(value)
                coords.append(_round(mapped, precision))
            params = tuple(coords)
        out.append(Segment(kind, params))
    return out


def normalize(
    sequence: Sequence[Segment],
    bbox: BoundingBox | None,
    precision: int | None = 6,
    center: float = 0.5,
) -> list[Segment]:
    """Map ``sequence`` into objectBoundingBox units ([0,1] x [0,1]).

    Single-point or empty geometry collapses to one MoveTo at the unit centre.
    """
    transform = unit_transform(bbox, center)
    if transform is None:
        return [Segment(SegmentKind.MOVE_TO, (center, center))]
    return apply_transform(sequence, transform, precision)
