"""Path-data decomposer — raw `d` text → absolute, unshortened Segments.

Relative commands are resolved against an explicit cursor, S/T are expanded
to C/Q with the reflected control point, and A arcs are replaced by cubic
béziers. No other module tracks the current point while parsing.
"""

from __future__ import annotations

import re

from clipnorm.engine.context import Segment, SegmentKind
from clipnorm.engine.errors import MalformedPathData
from clipnorm.utils.geometry import arc_to_cubics, reflect

_COMMAND_LETTERS = frozenset("MmZzLlHhVvCcSsQqTtAa")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_SEPARATOR_RE = re.compile(r"[\s,]*")
_FLAG_RE = re.compile(r"[01]")

_CUBIC_FAMILY = frozenset("CS")
_QUADRATIC_FAMILY = frozenset("QT")

Point = tuple[float, float]


class _Scanner:
    """Position-based tokenizer; separators are whitespace and commas."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _skip(self) -> None:
        self.pos = _SEPARATOR_RE.match(self.text, self.pos).end()

    def at_end(self) -> bool:
        self._skip()
        return self.pos >= len(self.text)

    def command(self) -> str:
        self._skip()
        ch = self.text[self.pos]
        if ch not in _COMMAND_LETTERS:
            raise MalformedPathData(f"Unexpected {ch!r} at offset {self.pos} in path data")
        self.pos += 1
        return ch

    def has_number(self) -> bool:
        self._skip()
        return _NUMBER_RE.match(self.text, self.pos) is not None

    def number(self) -> float:
        self._skip()
        m = _NUMBER_RE.match(self.text, self.pos)
        if m is None:
            raise MalformedPathData(f"Expected a number at offset {self.pos} in path data")
        self.pos = m.end()
        return float(m.group(0))

    def flag(self) -> bool:
        # Flags are single characters and may be packed without separators: "011"
        self._skip()
        m = _FLAG_RE.match(self.text, self.pos)
        if m is None:
            raise MalformedPathData(f"Expected an arc flag at offset {self.pos} in path data")
        self.pos = m.end()
        return m.group(0) == "1"

    def point(self, relative: bool, cursor: Point) -> Point:
        x, y = self.number(), self.number()
        if relative:
            return (x + cursor[0], y + cursor[1])
        return (x, y)


def decompose(d: str, max_sweep_degrees: float = 90.0) -> list[Segment]:
    """Parse path data into absolute Segments.

    Output never contains arcs, S or T. Empty input gives an empty list.
    Raises MalformedPathData on unknown letters, bad numbers or missing
    parameters.
    """
    scanner = _Scanner(d)
    segments: list[Segment] = []
    cursor: Point = (0.0, 0.0)
    subpath_start: Point = cursor
    previous = ""

    while not scanner.at_end():
        letter = scanner.command()
        if not segments and letter not in "Mm":
            raise MalformedPathData(f"Path data must start with a moveto, got {letter!r}")

        cmd = letter.upper()
        relative = letter.islower()

        if cmd == "Z":
            segments.append(Segment(SegmentKind.CLOSE_PATH))
            cursor = subpath_start
            previous = cmd
            continue

        while True:
            if cmd == "M":
                cursor = scanner.point(relative, cursor)
                subpath_start = cursor
                segments.append(Segment(SegmentKind.MOVE_TO, cursor))
                # Extra coordinate pairs after a moveto are implicit linetos
                cmd = "L"
                previous = "M"
            else:
                cursor = _emit(cmd, relative, scanner, segments, cursor, previous, max_sweep_degrees)
                previous = cmd
            if not scanner.has_number():
                break

    return segments


def _emit(
    cmd: str,
    relative: bool,
    scanner: _Scanner,
    segments: list[Segment],
    cursor: Point,
    previous: str,
    max_sweep_degrees: float,
) -> Point:
    """Append the segment(s) for one parameter group; return the new cursor."""
    if cmd == "L":
        end = scanner.point(relative, cursor)
        segments.append(Segment(SegmentKind.LINE_TO, end))
        return end

    if cmd == "H":
        x = scanner.number() + (cursor[0] if relative else 0.0)
        segments.append(Segment(SegmentKind.HORIZONTAL_LINE_TO, (x,)))
        return (x, cursor[1])

    if cmd == "V":
        y = scanner.number() + (cursor[1] if relative else 0.0)
        segments.append(Segment(SegmentKind.VERTICAL_LINE_TO, (y,)))
        return (cursor[0], y)

    if cmd == "C":
        c1 = scanner.point(relative, cursor)
        c2 = scanner.point(relative, cursor)
        end = scanner.point(relative, cursor)
        segments.append(Segment(SegmentKind.CUBIC_CURVE, (*c1, *c2, *end)))
        return end

    if cmd == "S":
        c2 = scanner.point(relative, cursor)
        end = scanner.point(relative, cursor)
        c1 = cursor
        if previous in _CUBIC_FAMILY:
            last = segments[-1].params
            c1 = reflect((last[2], last[3]), cursor)
        segments.append(Segment(SegmentKind.CUBIC_CURVE, (*c1, *c2, *end)))
        return end

    if cmd == "Q":
        c = scanner.point(relative, cursor)
        end = scanner.point(relative, cursor)
        segments.append(Segment(SegmentKind.QUADRATIC_CURVE, (*c, *end)))
        return end

    if cmd == "T":
        end = scanner.point(relative, cursor)
        c = cursor
        if previous in _QUADRATIC_FAMILY:
            last = segments[-1].params
            c = reflect((last[0], last[1]), cursor)
        segments.append(Segment(SegmentKind.QUADRATIC_CURVE, (*c, *end)))
        return end

    # cmd == "A"
    rx, ry, rotation = scanner.number(), scanner.number(), scanner.number()
    large_arc, sweep = scanner.flag(), scanner.flag()
    end = scanner.point(relative, cursor)

    if end == cursor:
        return end
    if rx == 0 or ry == 0:
        segments.append(Segment(SegmentKind.LINE_TO, end))
        return end

    for curve in arc_to_cubics(cursor, end, rx, ry, rotation, large_arc, sweep, max_sweep_degrees):
        segments.append(Segment(SegmentKind.CUBIC_CURVE, curve))
    return end
