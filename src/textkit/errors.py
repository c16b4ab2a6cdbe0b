"""Error hierarchy for textkit."""
from __future__ import annotations


class TextkitError(Exception):
    """Base error for all textkit errors."""


class ConfigError(TextkitError):
    """Plugin options are unknown or have the wrong type."""


class ThemeError(TextkitError):
    """A theme file cannot be loaded or a theme table has the wrong shape."""


class ResolutionError(TextkitError):
    """Base error for text style resolution failures."""


# ---------------------------------------------------------------------------
# Specific resolution errors
# ---------------------------------------------------------------------------


class UnknownPresetError(ResolutionError):
    """A preset name (or an ``extends`` target) is not in the preset table."""

    def __init__(self, name: object, *, referenced_by: str | None = None) -> None:
        self.name = name
        self.referenced_by = referenced_by
        if referenced_by is None:
            message = f"Unknown text style {name!r}"
        else:
            message = f"Text style {referenced_by!r} extends unknown text style {name!r}"
        super().__init__(message)


class CyclicExtendsError(ResolutionError):
    """The ``extends`` graph loops back on itself."""

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = list(cycle)
        super().__init__("Cyclic extends: " + " -> ".join(self.cycle))
