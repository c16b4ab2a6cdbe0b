"""Theme provider: user theme tables layered over the built-in defaults."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from textkit.errors import ThemeError

__all__ = [
    "DEFAULT_THEME",
    "DEFAULT_VARIANTS",
    "UTILITY_KEYS",
    "ThemeProvider",
    "ThemeFile",
    "load_theme_file",
]

DEFAULT_THEME: dict[str, dict[str, Any]] = {
    "textIndent": {},
    "textShadow": {},
    "fontVariantCaps": {
        "normal": "normal",
        "small": "small-caps",
        "all-small": "all-small-caps",
        "petite": "petite-caps",
        "unicase": "unicase",
        "titling": "titling-caps",
    },
    "fontVariantNumeric": {
        "normal": "normal",
        "ordinal": "ordinal",
        "slashed-zero": "slashed-zero",
        "lining": "lining-nums",
        "oldstyle": "oldstyle-nums",
        "proportional": "proportional-nums",
        "tabular": "tabular-nums",
        "diagonal-fractions": "diagonal-fractions",
        "stacked-fractions": "stacked-fractions",
    },
    "fontVariantLigatures": {
        "normal": "normal",
        "none": "none",
        "common": "common-ligatures",
        "no-common": "no-common-ligatures",
        "discretionary": "discretionary-ligatures",
        "no-discretionary": "no-discretionary-ligatures",
        "historical": "historical-ligatures",
        "no-historical": "no-historical-ligatures",
        "contextual": "contextual",
        "no-contextual": "no-contextual",
    },
    "textStyles": {},
}

# Utility groups in registration order.
UTILITY_KEYS = (
    "textIndent",
    "textShadow",
    "ellipsis",
    "hyphens",
    "textUnset",
    "fontVariantCaps",
    "fontVariantNumeric",
    "fontVariantLigatures",
)

DEFAULT_VARIANTS: dict[str, list[str]] = {key: ["responsive"] for key in UTILITY_KEYS}


class ThemeProvider:
    """Read-only access to theme tables and variant lists.

    A user table replaces the default table of the same key.  Entries under
    the ``extend`` key are layered on top of whichever table is in effect.
    """

    def __init__(
        self,
        theme: Mapping[str, Any] | None = None,
        variants: Mapping[str, Any] | None = None,
    ) -> None:
        self._theme: Mapping[str, Any] = theme or {}
        self._variants: Mapping[str, Any] = variants or {}

    def table(self, key: str) -> dict[str, Any]:
        """Return the effective table for *key*.

        Raises:
            ThemeError: If the user table (or its ``extend`` entry) is not a mapping.
        """
        user = self._theme.get(key)
        if user is None:
            base: Mapping[str, Any] = DEFAULT_THEME.get(key, {})
        elif isinstance(user, Mapping):
            base = user
        else:
            raise ThemeError(f"Theme table {key!r} must be a mapping, got {type(user).__name__}")

        extend = self._theme.get("extend") or {}
        extra = extend.get(key) if isinstance(extend, Mapping) else None
        if extra is None:
            return dict(base)
        if not isinstance(extra, Mapping):
            raise ThemeError(
                f"Theme table 'extend.{key}' must be a mapping, got {type(extra).__name__}"
            )
        return {**base, **extra}

    def variants(self, key: str) -> list[str]:
        """Return the variant names to generate for utility group *key*."""
        value = self._variants.get(key)
        if value is None:
            return list(DEFAULT_VARIANTS.get(key, []))
        if isinstance(value, str):
            return [value]
        return list(value)


@dataclass(frozen=True)
class ThemeFile:
    """The contents of a JSON theme file."""

    theme: dict[str, Any] = field(default_factory=dict)
    variants: dict[str, Any] = field(default_factory=dict)
    options: dict[str, Any] = field(default_factory=dict)

    def provider(self) -> ThemeProvider:
        return ThemeProvider(self.theme, self.variants)


def load_theme_file(path: str | Path) -> ThemeFile:
    """Load a JSON theme file.

    The file is either ``{"theme": {...}, "variants": {...}, "options": {...}}``
    or a bare theme object.
    """
    theme_path = Path(path)
    try:
        data = json.loads(theme_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ThemeError(f"Cannot read theme file {theme_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ThemeError(f"Invalid JSON in {theme_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ThemeError(f"Theme file {theme_path} must contain a JSON object")

    if "theme" not in data:
        return ThemeFile(theme=data)

    sections: dict[str, dict[str, Any]] = {}
    for section in ("theme", "variants", "options"):
        value = data.get(section) or {}
        if not isinstance(value, dict):
            raise ThemeError(f"'{section}' in {theme_path} must be a JSON object")
        sections[section] = value
    return ThemeFile(**sections)
