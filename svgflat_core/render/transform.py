from __future__ import annotations

from dataclasses import dataclass
import math
import re
from typing import Iterable, Optional, TypeAlias

import numpy as np


@dataclass(frozen=True)
class TranslateX:
    value: float


@dataclass(frozen=True)
class TranslateY:
    value: float


@dataclass(frozen=True)
class ScaleX:
    value: float


@dataclass(frozen=True)
class ScaleY:
    value: float


@dataclass(frozen=True)
class Rotate:
    """Rotation about the origin, in radians."""

    value: float


@dataclass(frozen=True)
class SkewX:
    value: float


@dataclass(frozen=True)
class SkewY:
    value: float


ElementaryTransform: TypeAlias = TranslateX | TranslateY | ScaleX | ScaleY | Rotate | SkewX | SkewY
TransformOps: TypeAlias = tuple[ElementaryTransform, ...]


@dataclass(frozen=True)
class AffineMatrix:
    """2D affine matrix [[a, c, e], [b, d, f], [0, 0, 1]]."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> "AffineMatrix":
        return cls()

    @classmethod
    def from_array(cls, array: np.ndarray) -> "AffineMatrix":
        m = np.asarray(array, dtype=np.float64)
        if m.shape != (3, 3):
            raise ValueError(f"expected a 3x3 matrix, got shape {m.shape}")
        return cls(
            a=float(m[0, 0]),
            b=float(m[1, 0]),
            c=float(m[0, 1]),
            d=float(m[1, 1]),
            e=float(m[0, 2]),
            f=float(m[1, 2]),
        )

    def to_array(self) -> np.ndarray:
        return np.array(
            [
                [self.a, self.c, self.e],
                [self.b, self.d, self.f],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )

    def to_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    def multiply(self, other: "AffineMatrix") -> "AffineMatrix":
        """Return self · other (other is applied to points first)."""
        return AffineMatrix.from_array(self.to_array() @ other.to_array())

    def apply(self, point: tuple[float, float]) -> tuple[float, float]:
        x, y = point
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    def is_identity(self, tol: float = 1e-12) -> bool:
        return bool(np.allclose(self.to_array(), np.eye(3), rtol=0.0, atol=tol))


_NON_NUMERIC_RE = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER_RE = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")
_ARG_SPLIT_RE = re.compile(r"[\s,]+")

_TRANSLATE_RE = re.compile(r"translate\(([^)]+)\)")
_SCALE_RE = re.compile(r"scale\(([^)]+)\)")
_ROTATE_RE = re.compile(r"rotate\(([^)]+)\)")
_SKEW_X_RE = re.compile(r"skewX\(([^)]+)\)")
_SKEW_Y_RE = re.compile(r"skewY\(([^)]+)\)")


def parse_number(value: Optional[str], default: float = 0.0, *, zero_as_unset: bool = False) -> float:
    """Read a lenient numeric attribute value.

    Every character other than digits, `.` and `-` is dropped (so units such
    as `px` disappear) and the longest leading decimal number is read. Missing,
    empty or non-numeric input yields `default`.
    """
    if not value:
        return default
    match = _LEADING_NUMBER_RE.match(_NON_NUMERIC_RE.sub("", value))
    if match is None:
        return default
    number = float(match.group(0))
    if zero_as_unset and number == 0.0:
        return default
    return number


def parse_transform(text: Optional[str], *, zero_as_unset: bool = False) -> TransformOps:
    """Parse a `transform` attribute into elementary ops in application order.

    Only the first `translate`, `scale`, `rotate`, `skewX` and `skewY` call is
    read, and the ops are always emitted in that kind order.
    """
    if not text:
        return ()
    ops: list[ElementaryTransform] = []

    translate_args = _function_args(_TRANSLATE_RE, text)
    if translate_args is not None:
        tx = _arg(translate_args, 0, 0.0, zero_as_unset)
        ty = _arg(translate_args, 1, 0.0, zero_as_unset)
        ops.append(TranslateX(tx))
        ops.append(TranslateY(ty))

    scale_args = _function_args(_SCALE_RE, text)
    if scale_args is not None:
        sx = _arg(scale_args, 0, 0.0, zero_as_unset)
        sy = _arg(scale_args, 1, sx, zero_as_unset)
        ops.append(ScaleX(sx))
        ops.append(ScaleY(sy))

    rotate_args = _function_args(_ROTATE_RE, text)
    if rotate_args is not None:
        angle = _arg(rotate_args, 0, 0.0, zero_as_unset)
        cx = _arg(rotate_args, 1, 0.0, zero_as_unset)
        cy = _arg(rotate_args, 2, 0.0, zero_as_unset)
        ops.append(TranslateX(cx))
        ops.append(TranslateY(cy))
        ops.append(Rotate(math.radians(angle)))
        ops.append(TranslateX(-cx))
        ops.append(TranslateY(-cy))

    skew_x_args = _function_args(_SKEW_X_RE, text)
    if skew_x_args is not None:
        ops.append(SkewX(math.radians(_arg(skew_x_args, 0, 0.0, zero_as_unset))))

    skew_y_args = _function_args(_SKEW_Y_RE, text)
    if skew_y_args is not None:
        ops.append(SkewY(math.radians(_arg(skew_y_args, 0, 0.0, zero_as_unset))))

    return tuple(ops)


def op_matrix(op: ElementaryTransform) -> np.ndarray:
    if isinstance(op, TranslateX):
        return np.array([[1.0, 0.0, op.value], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])
    if isinstance(op, TranslateY):
        return np.array([[1.0, 0.0, 0.0], [0.0, 1.0, op.value], [0.0, 0.0, 1.0]])
    if isinstance(op, ScaleX):
        return np.array([[op.value, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])
    if isinstance(op, ScaleY):
        return np.array([[1.0, 0.0, 0.0], [0.0, op.value, 0.0], [0.0, 0.0, 1.0]])
    if isinstance(op, Rotate):
        cos_a = math.cos(op.value)
        sin_a = math.sin(op.value)
        return np.array([[cos_a, -sin_a, 0.0], [sin_a, cos_a, 0.0], [0.0, 0.0, 1.0]])
    if isinstance(op, SkewX):
        return np.array([[1.0, math.tan(op.value), 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])
    if isinstance(op, SkewY):
        return np.array([[1.0, 0.0, 0.0], [math.tan(op.value), 1.0, 0.0], [0.0, 0.0, 1.0]])
    raise TypeError(f"Unsupported transform op: {type(op)!r}")


def compose(ops: Iterable[ElementaryTransform]) -> AffineMatrix:
    """Multiply ops left to right; the last op is applied to points first."""
    out = np.eye(3, dtype=np.float64)
    for op in ops:
        out = out @ op_matrix(op)
    return AffineMatrix.from_array(out)


def composed_matrix(ops: TransformOps) -> AffineMatrix | None:
    if not ops:
        return None
    return compose(ops)


def _function_args(pattern: re.Pattern[str], text: str) -> list[str] | None:
    match = pattern.search(text)
    if match is None:
        return None
    return [token for token in _ARG_SPLIT_RE.split(match.group(1).strip()) if token]


def _arg(args: list[str], index: int, default: float, zero_as_unset: bool) -> float:
    if index >= len(args):
        return default
    return parse_number(args[index], default, zero_as_unset=zero_as_unset)
