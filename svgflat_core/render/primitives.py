from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TypeAlias

from .transform import AffineMatrix


@dataclass(frozen=True)
class RectPrimitive:
    x: float
    y: float
    width: float
    height: float
    r: float
    fill_color: Optional[str] = None
    stroke_color: Optional[str] = None
    stroke_width: float = 0.0
    opacity: float = 1.0
    matrix: Optional[AffineMatrix] = None

    kind = "rect"

    def to_dict(self) -> dict[str, object]:
        return {
            "type": self.kind,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "r": self.r,
            **_paint_dict(self.fill_color, self.stroke_color, self.stroke_width, self.opacity, self.matrix),
        }


@dataclass(frozen=True)
class CirclePrimitive:
    cx: float
    cy: float
    r: float
    fill_color: Optional[str] = None
    stroke_color: Optional[str] = None
    stroke_width: float = 0.0
    opacity: float = 1.0
    matrix: Optional[AffineMatrix] = None

    kind = "circle"

    def to_dict(self) -> dict[str, object]:
        return {
            "type": self.kind,
            "cx": self.cx,
            "cy": self.cy,
            "r": self.r,
            **_paint_dict(self.fill_color, self.stroke_color, self.stroke_width, self.opacity, self.matrix),
        }


@dataclass(frozen=True)
class PathPrimitive:
    """Path outline; `d` is passed through to the renderer unparsed."""

    d: str
    fill_color: Optional[str] = None
    stroke_color: Optional[str] = None
    stroke_width: float = 0.0
    opacity: float = 1.0
    matrix: Optional[AffineMatrix] = None

    kind = "path"

    def to_dict(self) -> dict[str, object]:
        return {
            "type": self.kind,
            "d": self.d,
            **_paint_dict(self.fill_color, self.stroke_color, self.stroke_width, self.opacity, self.matrix),
        }


Primitive: TypeAlias = RectPrimitive | CirclePrimitive | PathPrimitive


def _paint_dict(
    fill_color: Optional[str],
    stroke_color: Optional[str],
    stroke_width: float,
    opacity: float,
    matrix: Optional[AffineMatrix],
) -> dict[str, object]:
    out: dict[str, object] = {"stroke_width": stroke_width, "opacity": opacity}
    if fill_color is not None:
        out["fill_color"] = fill_color
    if stroke_color is not None:
        out["stroke_color"] = stroke_color
    if matrix is not None:
        out["matrix"] = list(matrix.to_tuple())
    return out
