from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping, Optional


STYLE_PROPERTIES = ("fill", "stroke", "stroke-width", "opacity")
_FIELD_BY_PROPERTY = {
    "fill": "fill",
    "stroke": "stroke",
    "stroke-width": "stroke_width",
    "opacity": "opacity",
}


@dataclass(frozen=True)
class StyleState:
    """Paint properties in effect at one point of the tree. None means unset."""

    fill: Optional[str] = None
    stroke: Optional[str] = None
    stroke_width: Optional[str] = None
    opacity: Optional[str] = None

    def overlay(self, values: Mapping[str, str]) -> "StyleState":
        """Return a copy with recognized properties from `values` taking precedence."""
        updates = {
            _FIELD_BY_PROPERTY[name]: value
            for name, value in values.items()
            if name in _FIELD_BY_PROPERTY
        }
        if not updates:
            return self
        return replace(self, **updates)

    @property
    def fill_color(self) -> Optional[str]:
        return _paint(self.fill)

    @property
    def stroke_color(self) -> Optional[str]:
        return _paint(self.stroke)


def parse_style_attribute(style: Optional[str]) -> dict[str, str]:
    """Parse `key:value;key:value`; pairs with an empty key or value are dropped."""
    if not style:
        return {}
    out: dict[str, str] = {}
    for part in style.split(";"):
        if ":" not in part:
            continue
        key, value = part.split(":", 1)
        key = key.strip()
        value = value.strip()
        if key and value:
            out[key] = value
    return out


def merge_style(parent: StyleState, attrib: Mapping[str, str]) -> StyleState:
    """Inherited style, then the element's `style`, then its presentation attributes."""
    merged = parent.overlay(parse_style_attribute(attrib.get("style")))
    presentation = {name: attrib[name] for name in STYLE_PROPERTIES if name in attrib}
    return merged.overlay(presentation)


def _paint(value: Optional[str]) -> Optional[str]:
    if not value or value == "none":
        return None
    return value
