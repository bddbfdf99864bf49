"""Basic SVG shapes → equivalent path data."""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping

from clipnorm.engine.errors import MalformedPathData, UnsupportedShapeKind
from clipnorm.svg.serializer import format_number

SUPPORTED_SHAPES = ("path", "rect", "circle", "ellipse", "polygon", "polyline")

_POINTS_SPLIT_RE = re.compile(r"[\s,]+")


def strip_ns(tag: str) -> str:
    """Remove namespace from tag name."""
    return tag.split("}")[-1] if "}" in tag else tag


def _to_float(raw: str, name: str) -> float:
    text = raw.strip()
    if text.endswith("px"):
        text = text[:-2]
    try:
        value = float(text)
    except ValueError:
        raise MalformedPathData(f"Invalid numeric value for {name!r}: {raw!r}") from None
    if not math.isfinite(value):
        raise MalformedPathData(f"Non-finite value for {name!r}: {raw!r}")
    return value


def _number(attributes: Mapping[str, str], name: str) -> float:
    """Numeric attribute; missing or blank defaults to 0."""
    raw = attributes.get(name)
    if raw is None or not raw.strip():
        return 0.0
    return _to_float(raw, name)


def _pt(x: float, y: float) -> str:
    return f"{format_number(x, None)},{format_number(y, None)}"


def rect_to_path(attributes: Mapping[str, str]) -> str:
    x, y = _number(attributes, "x"), _number(attributes, "y")
    w, h = _number(attributes, "width"), _number(attributes, "height")
    return f"M{_pt(x, y)} L{_pt(x + w, y)} L{_pt(x + w, y + h)} L{_pt(x, y + h)} Z"


def _ellipse_path(cx: float, cy: float, rx: float, ry: float) -> str:
    # One arc cannot close on itself, so sweep left → right → left
    radii = f"{format_number(rx, None)},{format_number(ry, None)}"
    return (
        f"M{_pt(cx - rx, cy)} "
        f"A{radii} 0 1 0 {_pt(cx + rx, cy)} "
        f"A{radii} 0 1 0 {_pt(cx - rx, cy)} Z"
    )


def circle_to_path(attributes: Mapping[str, str]) -> str:
    r = _number(attributes, "r")
    return _ellipse_path(_number(attributes, "cx"), _number(attributes, "cy"), r, r)


def ellipse_to_path(attributes: Mapping[str, str]) -> str:
    return _ellipse_path(
        _number(attributes, "cx"),
        _number(attributes, "cy"),
        _number(attributes, "rx"),
        _number(attributes, "ry"),
    )


def parse_points(points: str) -> list[tuple[float, float]]:
    """Split a points attribute into pairs; an odd trailing value is dropped."""
    tokens = [t for t in _POINTS_SPLIT_RE.split(points.strip()) if t]
    values = [_to_float(t, "points") for t in tokens]
    return [(values[i], values[i + 1]) for i in range(0, len(values) - 1, 2)]


def points_to_path(points: str, closed: bool) -> str:
    pairs = parse_points(points)
    if not pairs:
        return ""
    parts = [f"M{_pt(*pairs[0])}"]
    parts.extend(f"L{_pt(x, y)}" for x, y in pairs[1:])
    if closed:
        parts.append("Z")
    return " ".join(parts)


_CONVERTERS: dict[str, Callable[[Mapping[str, str]], str]] = {
    "path": lambda attrs: attrs.get("d", ""),
    "rect": rect_to_path,
    "circle": circle_to_path,
    "ellipse": ellipse_to_path,
    "polygon": lambda attrs: points_to_path(attrs.get("points", ""), closed=True),
    "polyline": lambda attrs: points_to_path(attrs.get("points", ""), closed=False),
}


def shape_to_path(tag: str, attributes: Mapping[str, str]) -> str:
    """Path data equivalent to a shape element.

    Raises UnsupportedShapeKind for tags outside SUPPORTED_SHAPES; the caller
    skips that element.
    """
    name = strip_ns(tag)
    converter = _CONVERTERS.get(name)
    if converter is None:
        raise UnsupportedShapeKind(name)
    return converter(attributes)
