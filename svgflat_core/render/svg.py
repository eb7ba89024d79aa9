from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Optional
import xml.etree.ElementTree as ET

from ..config import ConverterConfig
from ..errors import MalformedDocumentError
from .paint import PrimitiveCanvas, paint_primitives
from .primitives import CirclePrimitive, PathPrimitive, Primitive, RectPrimitive
from .style import StyleState, merge_style
from .transform import (
    AffineMatrix,
    ElementaryTransform,
    ScaleX,
    ScaleY,
    TransformOps,
    TranslateX,
    TranslateY,
    composed_matrix,
    parse_number,
    parse_transform,
)


LOGGER = logging.getLogger(__name__)


@dataclass
class SvgPrimitiveDocument:
    primitives: list[Primitive] = field(default_factory=list)

    @classmethod
    def from_file(cls, path: str | Path, config: ConverterConfig | None = None) -> "SvgPrimitiveDocument":
        return cls(primitives=parse_file(path, config))

    @classmethod
    def from_markup(cls, svg_markup: str, config: ConverterConfig | None = None) -> "SvgPrimitiveDocument":
        return cls(primitives=parse_document(svg_markup, config))

    def paint(self, canvas: PrimitiveCanvas, base_matrix: AffineMatrix | None = None) -> int:
        return paint_primitives(self.primitives, canvas, base_matrix=base_matrix)


@dataclass(frozen=True)
class _Frame:
    element: ET.Element
    ops: TransformOps
    style: StyleState


def parse_file(path: str | Path, config: ConverterConfig | None = None) -> list[Primitive]:
    # Raw bytes let the parser honour the encoding named in the XML declaration.
    svg_path = Path(path)
    return parse_document(svg_path.read_bytes(), config)


def parse_document(text: str | bytes, config: ConverterConfig | None = None) -> list[Primitive]:
    """Flatten an svg/g/rect/circle/path document into primitives in paint order."""
    cfg = config or ConverterConfig()
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise MalformedDocumentError(f"malformed document: {exc}", exc.position) from exc

    primitives: list[Primitive] = []
    # Children are pushed in reverse so pops follow document order.
    stack = [_Frame(element=root, ops=(), style=StyleState())]
    while stack:
        frame = stack.pop()
        elem = frame.element
        ops = frame.ops + parse_transform(elem.attrib.get("transform"), zero_as_unset=cfg.zero_as_unset)
        style = merge_style(frame.style, elem.attrib)
        tag = _strip_namespace(elem.tag)

        if tag == "rect":
            primitives.append(_rect(elem, style, ops, cfg))
        elif tag == "circle":
            primitives.append(_circle(elem, style, ops, cfg))
        elif tag == "path":
            path = _path(elem, style, ops, cfg)
            if path is not None:
                primitives.append(path)
        elif tag == "g":
            stack.extend(_Frame(child, ops, style) for child in reversed(list(elem)))
        elif tag == "svg":
            child_ops = ops + _viewport_ops(elem, cfg)
            stack.extend(_Frame(child, child_ops, style) for child in reversed(list(elem)))
        else:
            LOGGER.debug("skipping unsupported element <%s>", tag)

    LOGGER.debug("emitted %d primitives", len(primitives))
    return primitives


def _viewport_ops(elem: ET.Element, cfg: ConverterConfig) -> TransformOps:
    """Position the nested viewport and map its viewBox onto width/height."""
    zero = cfg.zero_as_unset
    x = parse_number(elem.attrib.get("x"), zero_as_unset=zero)
    y = parse_number(elem.attrib.get("y"), zero_as_unset=zero)
    width = parse_number(elem.attrib.get("width"), zero_as_unset=zero)
    height = parse_number(elem.attrib.get("height"), zero_as_unset=zero)
    ops: list[ElementaryTransform] = []
    # A zero offset is the identity; leaving it out keeps untransformed primitives matrix-free.
    if x or y:
        ops.append(TranslateX(x))
        ops.append(TranslateY(y))

    raw_viewbox = elem.attrib.get("viewBox")
    viewbox = _parse_viewbox(raw_viewbox)
    if viewbox is None:
        if raw_viewbox:
            LOGGER.debug("ignoring unparsable viewBox %r", raw_viewbox)
        return tuple(ops)
    min_x, min_y, vb_width, vb_height = viewbox
    if not width:
        width = vb_width
    if not height:
        height = vb_height
    if vb_width > 0 and vb_height > 0:
        ops.append(ScaleX(width / vb_width))
        ops.append(ScaleY(height / vb_height))
        ops.append(TranslateX(-min_x))
        ops.append(TranslateY(-min_y))
    return tuple(ops)


def _rect(elem: ET.Element, style: StyleState, ops: TransformOps, cfg: ConverterConfig) -> RectPrimitive:
    zero = cfg.zero_as_unset
    return RectPrimitive(
        x=parse_number(elem.attrib.get("x"), zero_as_unset=zero),
        y=parse_number(elem.attrib.get("y"), zero_as_unset=zero),
        width=parse_number(elem.attrib.get("width"), zero_as_unset=zero),
        height=parse_number(elem.attrib.get("height"), zero_as_unset=zero),
        r=parse_number(elem.attrib.get("rx"), zero_as_unset=zero),
        **_paint_fields(style, ops, cfg),
    )


def _circle(elem: ET.Element, style: StyleState, ops: TransformOps, cfg: ConverterConfig) -> CirclePrimitive:
    zero = cfg.zero_as_unset
    return CirclePrimitive(
        cx=parse_number(elem.attrib.get("cx"), zero_as_unset=zero),
        cy=parse_number(elem.attrib.get("cy"), zero_as_unset=zero),
        r=parse_number(elem.attrib.get("r"), zero_as_unset=zero),
        **_paint_fields(style, ops, cfg),
    )


def _path(
    elem: ET.Element, style: StyleState, ops: TransformOps, cfg: ConverterConfig
) -> Optional[PathPrimitive]:
    d = elem.attrib.get("d") or ""
    if not d:
        return None
    return PathPrimitive(d=d, **_paint_fields(style, ops, cfg))


def _paint_fields(style: StyleState, ops: TransformOps, cfg: ConverterConfig) -> dict[str, object]:
    return {
        "fill_color": style.fill_color,
        "stroke_color": style.stroke_color,
        "stroke_width": parse_number(
            style.stroke_width, cfg.default_stroke_width, zero_as_unset=cfg.zero_as_unset
        ),
        "opacity": parse_number(style.opacity, cfg.default_opacity, zero_as_unset=cfg.zero_as_unset),
        "matrix": composed_matrix(ops),
    }


def _strip_namespace(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def _parse_viewbox(value: Optional[str]) -> Optional[tuple[float, float, float, float]]:
    if not value:
        return None
    parts = value.replace(",", " ").split()
    if len(parts) != 4:
        return None
    min_x, min_y, width, height = (parse_number(p) for p in parts)
    return (min_x, min_y, width, height)
