"""Pipeline configuration — numeric policy for normalization."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Controls precision and curve expansion for every shape."""

    # Decimal digits kept after normalization and in serialized output
    precision: int = 6

    # Widest elliptical sweep approximated by a single cubic
    arc_max_sweep_degrees: float = 90.0

    # Unit-square coordinate used to recenter degenerate axes
    degenerate_center: float = 0.5
