from __future__ import annotations

import unittest

from svgflat_core.render.paint import PrimitiveCanvas, paint_primitives
from svgflat_core.render.primitives import CirclePrimitive, PathPrimitive, RectPrimitive
from svgflat_core.render.svg import SvgPrimitiveDocument, parse_document
from svgflat_core.render.transform import AffineMatrix


class _RecordingCanvas(PrimitiveCanvas):
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, object]]] = []

    def fill_rounded_rect(self, x, y, width, height, r, *, color, opacity, matrix) -> None:
        self.calls.append(("fill_rounded_rect", {"rect": (x, y, width, height, r), "color": color, "matrix": matrix}))

    def stroke_rounded_rect(self, x, y, width, height, r, *, color, stroke_width, opacity, matrix) -> None:
        self.calls.append(
            ("stroke_rounded_rect", {"rect": (x, y, width, height, r), "color": color, "stroke_width": stroke_width})
        )

    def fill_circle(self, cx, cy, r, *, color, opacity, matrix) -> None:
        self.calls.append(("fill_circle", {"circle": (cx, cy, r), "color": color, "opacity": opacity}))

    def stroke_circle(self, cx, cy, r, *, color, stroke_width, opacity, matrix) -> None:
        self.calls.append(("stroke_circle", {"circle": (cx, cy, r), "color": color}))

    def fill_path(self, d, *, color, opacity, matrix) -> None:
        self.calls.append(("fill_path", {"d": d, "color": color, "matrix": matrix}))

    def stroke_path(self, d, *, color, stroke_width, opacity, matrix) -> None:
        self.calls.append(("stroke_path", {"d": d, "color": color, "matrix": matrix}))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


class PaintPrimitivesTests(unittest.TestCase):
    def test_fill_none_rect_only_strokes(self) -> None:
        canvas = _RecordingCanvas()
        primitives = parse_document('<svg><rect fill="none" stroke="blue" stroke-width="2" width="4" height="4"/></svg>')
        calls = paint_primitives(primitives, canvas)
        self.assertEqual(calls, 1)
        self.assertEqual(canvas.names(), ["stroke_rounded_rect"])
        self.assertEqual(canvas.calls[0][1]["color"], "blue")
        self.assertEqual(canvas.calls[0][1]["stroke_width"], 2.0)

    def test_fill_is_drawn_before_stroke_in_sequence_order(self) -> None:
        canvas = _RecordingCanvas()
        primitives = [
            CirclePrimitive(cx=1.0, cy=2.0, r=3.0, fill_color="red", stroke_color="black", opacity=0.5),
            PathPrimitive(d="M0 0", fill_color="green", stroke_color="white"),
            RectPrimitive(x=0.0, y=0.0, width=1.0, height=1.0, r=0.0, fill_color="blue"),
        ]
        self.assertEqual(paint_primitives(primitives, canvas), 5)
        self.assertEqual(
            canvas.names(),
            ["fill_circle", "stroke_circle", "fill_path", "stroke_path", "fill_rounded_rect"],
        )
        self.assertEqual(canvas.calls[0][1], {"circle": (1.0, 2.0, 3.0), "color": "red", "opacity": 0.5})

    def test_unpainted_primitive_issues_no_calls(self) -> None:
        canvas = _RecordingCanvas()
        self.assertEqual(paint_primitives([PathPrimitive(d="M0 0")], canvas), 0)
        self.assertEqual(canvas.calls, [])

    def test_base_matrix_wraps_primitive_matrix(self) -> None:
        canvas = _RecordingCanvas()
        base = AffineMatrix(a=5.0, d=5.0)
        primitives = [
            PathPrimitive(d="M0 0", fill_color="red"),
            PathPrimitive(d="M0 0", fill_color="red", matrix=AffineMatrix(e=1.0, f=2.0)),
        ]
        paint_primitives(primitives, canvas, base_matrix=base)
        self.assertEqual(canvas.calls[0][1]["matrix"], base)
        self.assertEqual(canvas.calls[1][1]["matrix"].apply((0.0, 0.0)), (5.0, 10.0))

    def test_matrix_passes_through_without_base(self) -> None:
        canvas = _RecordingCanvas()
        (path,) = parse_document('<svg><path d="M0 0" fill="red" transform="translate(3,4)"/></svg>')
        paint_primitives([path], canvas)
        self.assertIs(canvas.calls[0][1]["matrix"], path.matrix)

    def test_document_paint_delegates(self) -> None:
        canvas = _RecordingCanvas()
        doc = SvgPrimitiveDocument.from_markup('<svg><circle r="2" fill="red" stroke="red"/></svg>')
        self.assertEqual(doc.paint(canvas), 2)

    def test_unknown_primitive_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            paint_primitives([object()], _RecordingCanvas())  # type: ignore[list-item]


if __name__ == "__main__":
    unittest.main()
