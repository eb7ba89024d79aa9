from __future__ import annotations

from typing import Iterable, Optional, Protocol

from .primitives import CirclePrimitive, PathPrimitive, Primitive, RectPrimitive
from .transform import AffineMatrix


class PrimitiveCanvas(Protocol):
    """Backend-agnostic drawing surface that primitives are painted onto.

    Each call applies `matrix` (when given) before drawing. The canvas owns all
    rasterization; nothing here touches pixels.
    """

    def fill_rounded_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        r: float,
        *,
        color: str,
        opacity: float,
        matrix: Optional[AffineMatrix],
    ) -> None:
        ...

    def stroke_rounded_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        r: float,
        *,
        color: str,
        stroke_width: float,
        opacity: float,
        matrix: Optional[AffineMatrix],
    ) -> None:
        ...

    def fill_circle(
        self, cx: float, cy: float, r: float, *, color: str, opacity: float, matrix: Optional[AffineMatrix]
    ) -> None:
        ...

    def stroke_circle(
        self,
        cx: float,
        cy: float,
        r: float,
        *,
        color: str,
        stroke_width: float,
        opacity: float,
        matrix: Optional[AffineMatrix],
    ) -> None:
        ...

    def fill_path(self, d: str, *, color: str, opacity: float, matrix: Optional[AffineMatrix]) -> None:
        ...

    def stroke_path(
        self, d: str, *, color: str, stroke_width: float, opacity: float, matrix: Optional[AffineMatrix]
    ) -> None:
        ...


def paint_primitives(
    primitives: Iterable[Primitive],
    canvas: PrimitiveCanvas,
    base_matrix: AffineMatrix | None = None,
) -> int:
    """Issue fill then stroke calls per primitive, in sequence order.

    A missing fill or stroke color skips that call. `base_matrix` acts like an
    enclosing canvas group transform. Returns the number of draw calls made.
    """
    calls = 0
    for primitive in primitives:
        if not isinstance(primitive, (RectPrimitive, CirclePrimitive, PathPrimitive)):
            raise TypeError(f"Unsupported primitive: {type(primitive)!r}")
        matrix = _with_base(base_matrix, primitive.matrix)
        if isinstance(primitive, RectPrimitive):
            geometry = (primitive.x, primitive.y, primitive.width, primitive.height, primitive.r)
            if primitive.fill_color is not None:
                canvas.fill_rounded_rect(
                    *geometry, color=primitive.fill_color, opacity=primitive.opacity, matrix=matrix
                )
                calls += 1
            if primitive.stroke_color is not None:
                canvas.stroke_rounded_rect(
                    *geometry,
                    color=primitive.stroke_color,
                    stroke_width=primitive.stroke_width,
                    opacity=primitive.opacity,
                    matrix=matrix,
                )
                calls += 1
        elif isinstance(primitive, CirclePrimitive):
            if primitive.fill_color is not None:
                canvas.fill_circle(
                    primitive.cx,
                    primitive.cy,
                    primitive.r,
                    color=primitive.fill_color,
                    opacity=primitive.opacity,
                    matrix=matrix,
                )
                calls += 1
            if primitive.stroke_color is not None:
                canvas.stroke_circle(
                    primitive.cx,
                    primitive.cy,
                    primitive.r,
                    color=primitive.stroke_color,
                    stroke_width=primitive.stroke_width,
                    opacity=primitive.opacity,
                    matrix=matrix,
                )
                calls += 1
        else:
            if primitive.fill_color is not None:
                canvas.fill_path(primitive.d, color=primitive.fill_color, opacity=primitive.opacity, matrix=matrix)
                calls += 1
            if primitive.stroke_color is not None:
                canvas.stroke_path(
                    primitive.d,
                    color=primitive.stroke_color,
                    stroke_width=primitive.stroke_width,
                    opacity=primitive.opacity,
                    matrix=matrix,
                )
                calls += 1
    return calls


def _with_base(base: AffineMatrix | None, matrix: AffineMatrix | None) -> AffineMatrix | None:
    if base is None:
        return matrix
    if matrix is None:
        return base
    return base.multiply(matrix)
