from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from textkit.errors import ConfigError

# Option names as written in a theme file, mapped to PluginOptions fields.
_OPTION_FIELDS: dict[str, str] = {
    "ellipsis": "ellipsis",
    "hyphens": "hyphens",
    "textUnset": "text_unset",
    "text_unset": "text_unset",
    "componentPrefix": "component_prefix",
    "component_prefix": "component_prefix",
    "strictExtends": "strict_extends",
    "strict_extends": "strict_extends",
}


@dataclass(frozen=True)
class PluginOptions:
    ellipsis: bool = True
    hyphens: bool = True
    text_unset: bool = True
    component_prefix: str = "c-"
    strict_extends: bool = True  # False: unknown extends targets merge nothing

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> PluginOptions:
        """Build options from a camelCase (or snake_case) mapping.

        Missing keys and ``None`` values fall back to the defaults.
        """
        if options is None:
            return cls()
        if not isinstance(options, Mapping):
            raise ConfigError(f"Options must be a mapping, got {type(options).__name__}")
        types = {f.name: f.type for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in options.items():
            field_name = _OPTION_FIELDS.get(key)
            if field_name is None:
                raise ConfigError(f"Unknown option: {key!r}")
            if value is None:
                continue
            expected = bool if types[field_name] == "bool" else str
            if not isinstance(value, expected):
                raise ConfigError(
                    f"Option {key!r} must be {expected.__name__}, got {type(value).__name__}"
                )
            values[field_name] = value
        return cls(**values)
