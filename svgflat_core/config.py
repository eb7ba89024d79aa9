from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
import math
import tomllib
from typing import Any


CONFIG_TABLE = "converter"


@dataclass(frozen=True)
class ConverterConfig:
    """Numeric fallbacks used while resolving primitives.

    `zero_as_unset` reproduces hosts that read a literal `0` as "missing" and
    substitute the default (so `opacity="0"` resolves to `default_opacity`).
    """

    default_opacity: float = 1.0
    default_stroke_width: float = 0.0
    zero_as_unset: bool = False

    def __post_init__(self) -> None:
        if not math.isfinite(self.default_opacity) or not 0.0 <= self.default_opacity <= 1.0:
            raise ValueError("default_opacity must be in [0, 1]")
        if not math.isfinite(self.default_stroke_width) or self.default_stroke_width < 0.0:
            raise ValueError("default_stroke_width must be >= 0")

    @classmethod
    def from_mapping(cls, raw: dict[str, Any]) -> "ConverterConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValueError(f"unknown converter option: {unknown[0]}")
        values: dict[str, Any] = {}
        for name in ("default_opacity", "default_stroke_width"):
            if name in raw:
                values[name] = _coerce_float(raw[name], name)
        if "zero_as_unset" in raw:
            if not isinstance(raw["zero_as_unset"], bool):
                raise ValueError("zero_as_unset must be a boolean")
            values["zero_as_unset"] = raw["zero_as_unset"]
        return cls(**values)


def load_config(path: str | Path) -> ConverterConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"converter config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    table = raw.get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise ValueError(f"[{CONFIG_TABLE}] must be a table")
    return ConverterConfig.from_mapping(table)


def _coerce_float(value: object, field_name: str) -> float:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field_name} must be a number")
    return float(value)
