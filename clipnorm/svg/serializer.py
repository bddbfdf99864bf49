"""Write compact path data from segment sequences."""

from __future__ import annotations

from collections.abc import Sequence

from clipnorm.engine.context import Segment, SegmentKind


def format_number(value: float, precision: int | None = 6) -> str:
    """Shortest decimal text for ``value``: 1.0 → "1", 0.500000 → "0.5", -0 → "0".

    ``precision=None`` keeps the full float (used for generated shape paths).
    """
    if precision is None:
        text = repr(float(value))
        if text.endswith(".0"):
            text = text[:-2]
    else:
        text = f"{round(value, precision):.{precision}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def format_segment(seg: Segment, precision: int | None = 6) -> str:
    if seg.kind is SegmentKind.CLOSE_PATH:
        return seg.letter
    if seg.kind in (SegmentKind.HORIZONTAL_LINE_TO, SegmentKind.VERTICAL_LINE_TO):
        return seg.letter + format_number(seg.params[0], precision)
    pairs = [
        f"{format_number(seg.params[i], precision)},{format_number(seg.params[i + 1], precision)}"
        for i in range(0, len(seg.params), 2)
    ]
    return seg.letter + " ".join(pairs)


def serialize_path(sequence: Sequence[Segment], precision: int | None = 6) -> str:
    """Render segments as path data, e.g. "M0,0 L1,0 L1,1 L0,1 Z"."""
    return " ".join(format_segment(seg, precision) for seg in sequence)
