"""Tagged value variants for theme values: Scalar, ListValue, MapValue, Opaque."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

ScalarType = Union[str, int, float, bool]


def css_text(value: Any) -> str:
    """Render a scalar the way it should appear inside a CSS value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class Scalar:
    """A single CSS value such as ``"1rem"`` or ``700``."""

    value: ScalarType


@dataclass(frozen=True)
class ListValue:
    """A CSS value list, e.g. font fallbacks or stacked shadow layers."""

    items: tuple[Any, ...]

    def joined(self) -> str:
        return ", ".join(css_text(item) for item in self.items)


@dataclass(frozen=True)
class MapValue:
    """A nested declaration map (a preset, a pseudo-class or an at-rule block)."""

    entries: Mapping[str, Any]


@dataclass(frozen=True)
class Opaque:
    """Anything else. Passed through untouched."""

    value: Any


Value = Union[Scalar, ListValue, MapValue, Opaque]


def classify(raw: Any) -> Value:
    """Wrap a raw theme value in its tagged variant."""
    if isinstance(raw, Mapping):
        return MapValue(raw)
    if isinstance(raw, (list, tuple)):
        return ListValue(tuple(raw))
    if isinstance(raw, (str, int, float, bool)):
        return Scalar(raw)
    return Opaque(raw)
