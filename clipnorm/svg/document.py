"""SVG document → objectBoundingBox clipPath.

Walks the document with ElementTree, runs every candidate shape through the
pipeline in document order, and writes the normalized path data back:

- existing <clipPath>: clipPathUnits is forced to objectBoundingBox and its
  shapes are normalized in place;
- no <clipPath>: root attributes are stripped, a new clipPath becomes the
  root's first child, and every converted shape moves into it as a <path>.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from clipnorm.engine.config import PipelineConfig
from clipnorm.engine.context import DocumentResult, ShapeContext
from clipnorm.engine.errors import InvalidDocument, NoShapesFound
from clipnorm.engine.pipeline import Pipeline, create_pipeline
from clipnorm.svg.shapes import strip_ns

logger = logging.getLogger(__name__)

# Subtrees that never contribute geometry
REMOVE_TAGS = {"title", "desc", "metadata", "style", "defs"}

# Candidate elements; anything outside SUPPORTED_SHAPES is skipped by T0.01
SHAPE_TAGS = {"path", "circle", "ellipse", "rect", "line", "polyline", "polygon"}

OBJECT_BOUNDING_BOX = "objectBoundingBox"


def _namespace(tag: str) -> str:
    return tag[1:].split("}")[0] if tag.startswith("{") else ""


def _qname(ns: str, name: str) -> str:
    return f"{{{ns}}}{name}" if ns else name


def parse_document(svg_text: str) -> ET.Element:
    """Parse SVG text; raises InvalidDocument for bad XML or a non-<svg> root."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise InvalidDocument(f"Invalid SVG document: {e}") from e
    if strip_ns(root.tag) != "svg":
        raise InvalidDocument("No <svg> root element found.")
    return root


def find_shape_elements(element: ET.Element) -> list[ET.Element]:
    """Shape descendants of ``element`` in document order."""
    shapes: list[ET.Element] = []
    for child in element:
        tag = strip_ns(child.tag)
        if tag in REMOVE_TAGS:
            continue
        if tag in SHAPE_TAGS:
            shapes.append(child)
        else:
            shapes.extend(find_shape_elements(child))
    return shapes


def find_clip_path(root: ET.Element) -> ET.Element | None:
    for el in root.iter():
        if strip_ns(el.tag) == "clipPath":
            return el
    return None


def convert_shape(
    tag: str,
    attributes: dict[str, str],
    pipeline: Pipeline | None = None,
    shape_id: str = "E1",
) -> ShapeContext:
    """Run a single (tag, attributes) pair through the full pipeline."""
    pipeline = pipeline or create_pipeline()
    return pipeline.run(ShapeContext(id=shape_id, tag=strip_ns(tag), attributes=dict(attributes)))


def convert_document(
    svg_text: str,
    clip_path_id: str = "clip",
    config: PipelineConfig | None = None,
) -> DocumentResult:
    """Convert every shape of an SVG document into one normalized clipPath.

    Raises InvalidDocument or NoShapesFound; per-shape failures are reported
    in the result instead.
    """
    root = parse_document(svg_text)
    ns = _namespace(root.tag)
    parents = {child: parent for parent in root.iter() for child in parent}

    clip = find_clip_path(root)
    candidates = find_shape_elements(clip if clip is not None else root)

    pipeline = create_pipeline(config)
    contexts = pipeline.run_many(
        ShapeContext(id=el.get("id") or f"E{i + 1}", tag=strip_ns(el.tag), attributes=dict(el.attrib))
        for i, el in enumerate(candidates)
    )

    converted = [(el, ctx) for el, ctx in zip(candidates, contexts) if not ctx.skipped]
    if not converted:
        raise NoShapesFound()

    if clip is not None:
        clip.set("clipPathUnits", OBJECT_BOUNDING_BOX)
        for el, ctx in converted:
            _replace_with_path(el, parents[el], ns, ctx.result)
    else:
        root.attrib.clear()
        clip = ET.Element(
            _qname(ns, "clipPath"),
            {"id": clip_path_id, "clipPathUnits": OBJECT_BOUNDING_BOX},
        )
        for el, ctx in converted:
            parents[el].remove(el)
            ET.SubElement(clip, _qname(ns, "path"), {"d": ctx.result})
        root.insert(0, clip)

    result = DocumentResult(
        svg=serialize_document(root),
        paths=[ctx.result for _, ctx in converted],
        skipped=[ctx.id for ctx in contexts if ctx.skipped],
        errors={
            ctx.id: "; ".join(f"{tid}: {msg}" for tid, msg in sorted(ctx.errors.items()))
            for ctx in contexts
            if ctx.errors
        },
    )
    logger.info(
        "Converted SVG: %d clip paths, %d skipped, %d with errors",
        len(result.paths),
        len(result.skipped),
        len(result.errors),
    )
    return result


def _replace_with_path(el: ET.Element, parent: ET.Element, ns: str, d: str) -> None:
    if strip_ns(el.tag) == "path":
        el.set("d", d)
        return
    path = ET.Element(_qname(ns, "path"), {"d": d})
    if el.get("id"):
        path.set("id", el.get("id"))
    path.tail = el.tail
    index = list(parent).index(el)
    parent.remove(el)
    parent.insert(index, path)


def serialize_document(root: ET.Element) -> str:
    """Pretty-printed markup with the root namespace as default namespace."""
    ns = _namespace(root.tag)
    if ns:
        ET.register_namespace("", ns)
    ET.indent(root)
    return ET.tostring(root, encoding="unicode")
