from svgflat_core.config import ConverterConfig, load_config
from svgflat_core.errors import MalformedDocumentError
from svgflat_core.render import (
    AffineMatrix,
    CirclePrimitive,
    PathPrimitive,
    Primitive,
    PrimitiveCanvas,
    RectPrimitive,
    SvgPrimitiveDocument,
    compose,
    paint_primitives,
    parse_document,
    parse_file,
    parse_transform,
)

__all__ = [
    "AffineMatrix",
    "CirclePrimitive",
    "ConverterConfig",
    "MalformedDocumentError",
    "PathPrimitive",
    "Primitive",
    "PrimitiveCanvas",
    "RectPrimitive",
    "SvgPrimitiveDocument",
    "compose",
    "load_config",
    "paint_primitives",
    "parse_document",
    "parse_file",
    "parse_transform",
]
