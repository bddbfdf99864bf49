"""ShapeContext — the mutable state object flowing through all transforms.

One context per input shape element. Geometry values (Segment, BoundingBox,
Transform) are immutable; transforms replace them rather than editing in place.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from clipnorm.engine.config import PipelineConfig


class SegmentKind(str, enum.Enum):
    MOVE_TO = "M"
    LINE_TO = "L"
    HORIZONTAL_LINE_TO = "H"
    VERTICAL_LINE_TO = "V"
    CUBIC_CURVE = "C"
    SMOOTH_CUBIC_CURVE = "S"
    QUADRATIC_CURVE = "Q"
    SMOOTH_QUADRATIC_CURVE = "T"
    CLOSE_PATH = "Z"


# Number of parameters carried by each kind
ARITY: dict[SegmentKind, int] = {
    SegmentKind.MOVE_TO: 2,
    SegmentKind.LINE_TO: 2,
    SegmentKind.HORIZONTAL_LINE_TO: 1,
    SegmentKind.VERTICAL_LINE_TO: 1,
    SegmentKind.CUBIC_CURVE: 6,
    SegmentKind.SMOOTH_CUBIC_CURVE: 4,
    SegmentKind.QUADRATIC_CURVE: 4,
    SegmentKind.SMOOTH_QUADRATIC_CURVE: 2,
    SegmentKind.CLOSE_PATH: 0,
}


@dataclass(frozen=True)
class Segment:
    """One absolute path command: kind + flat parameter tuple."""

    kind: SegmentKind
    params: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if len(self.params) != ARITY[self.kind]:
            raise ValueError(
                f"{self.kind.value} expects {ARITY[self.kind]} parameters, got {len(self.params)}"
            )

    @property
    def letter(self) -> str:
        return self.kind.value


PathSequence = list[Segment]


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned extent: (min_x, min_y, max_x, max_y)."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)


@dataclass(frozen=True)
class Transform:
    """x' = (x + tx) * sx + ox, y' = (y + ty) * sy + oy."""

    tx: float = 0.0
    ty: float = 0.0
    sx: float = 1.0
    sy: float = 1.0
    # Post-scale offsets, only non-zero when recentering a degenerate axis
    ox: float = 0.0
    oy: float = 0.0

    def apply_x(self, x: float) -> float:
        return (x + self.tx) * self.sx + self.ox

    def apply_y(self, y: float) -> float:
        return (y + self.ty) * self.sy + self.oy


@dataclass
class ShapeContext:
    """State for a single shape element travelling through the pipeline."""

    id: str
    # Tag name without namespace, e.g. "rect"
    tag: str = "path"
    # Original SVG attributes
    attributes: dict[str, str] = field(default_factory=dict)
    # Path data produced by T0.01 (or the raw `d` for <path>)
    path_data: str | None = None
    # Absolute, unshortened segments (T1.01)
    sequence: PathSequence | None = None
    # None when the sequence has no coordinate-bearing segment (T2.01)
    bbox: BoundingBox | None = None
    # Unit-square segments (T3.01)
    normalized: PathSequence | None = None
    # Serialized normalized path data (T4.01)
    output: str | None = None
    # Free-form per-transform metadata
    features: dict[str, Any] = field(default_factory=dict)
    # Numeric policy, set by the pipeline before any transform runs
    config: PipelineConfig = field(default_factory=PipelineConfig)

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    skipped_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def skipped(self) -> bool:
        """True when the element produced no path data at all."""
        return self.path_data is None

    @property
    def result(self) -> str | None:
        """Path data to write back into the document.

        Falls back to the untouched path data when a later stage failed.
        """
        if self.output is not None:
            return self.output
        return self.path_data


@dataclass
class DocumentResult:
    """Outcome of converting one SVG document into a clipPath."""

    svg: str
    # Normalized path data, in document order
    paths: list[str] = field(default_factory=list)
    # Ids of elements left out of the clip path
    skipped: list[str] = field(default_factory=list)
    # Per-element error messages, keyed by element id
    errors: dict[str, str] = field(default_factory=dict)
