from .paint import PrimitiveCanvas, paint_primitives
from .primitives import CirclePrimitive, PathPrimitive, Primitive, RectPrimitive
from .style import StyleState, merge_style, parse_style_attribute
from .svg import SvgPrimitiveDocument, parse_document, parse_file
from .transform import (
    AffineMatrix,
    ElementaryTransform,
    Rotate,
    ScaleX,
    ScaleY,
    SkewX,
    SkewY,
    TranslateX,
    TranslateY,
    compose,
    composed_matrix,
    parse_number,
    parse_transform,
)

__all__ = [
    "AffineMatrix",
    "CirclePrimitive",
    "ElementaryTransform",
    "PathPrimitive",
    "Primitive",
    "PrimitiveCanvas",
    "RectPrimitive",
    "Rotate",
    "ScaleX",
    "ScaleY",
    "SkewX",
    "SkewY",
    "StyleState",
    "SvgPrimitiveDocument",
    "TranslateX",
    "TranslateY",
    "compose",
    "composed_matrix",
    "merge_style",
    "paint_primitives",
    "parse_document",
    "parse_file",
    "parse_number",
    "parse_style_attribute",
    "parse_transform",
]
