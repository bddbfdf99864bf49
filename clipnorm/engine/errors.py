"""Error kinds raised by the normalization engine and the document layer.

Per-shape errors (MalformedPathData, UnsupportedShapeKind) are captured by the
pipeline and never abort sibling shapes. Document-level errors (InvalidDocument,
NoShapesFound) propagate to the caller.
"""

from __future__ import annotations


class ClipPathError(ValueError):
    """Base class for every conversion failure."""

    kind = "clip_path_error"


class MalformedPathData(ClipPathError):
    kind = "malformed_path_data"


class UnsupportedShapeKind(ClipPathError):
    kind = "unsupported_shape_kind"

    def __init__(self, tag: str) -> None:
        super().__init__(f"Unsupported shape element: <{tag}>")
        self.tag = tag


class InvalidDocument(ClipPathError):
    kind = "invalid_document"


class NoShapesFound(ClipPathError):
    kind = "no_shapes_found"

    def __init__(self, message: str = "No shape elements found.") -> None:
        super().__init__(message)
