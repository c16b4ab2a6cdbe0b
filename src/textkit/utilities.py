"""Flat utility synthesis: one class rule per theme table entry.

Theme-driven tables map each modifier to a class with a single declaration.
Fixed groups (ellipsis, hyphens, text unset) carry hard-coded declarations
and are switched on or off as a whole by a plugin option.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from textkit.model.rule import Rule, RuleSet
from textkit.model.value import ListValue, classify
from textkit.naming import Escape, class_selector, escape_class_name

__all__ = [
    "DEFAULT_MODIFIER",
    "FlatTable",
    "FixedGroup",
    "TEXT_INDENT",
    "TEXT_SHADOW",
    "FONT_VARIANT_CAPS",
    "FONT_VARIANT_NUMERIC",
    "FONT_VARIANT_LIGATURES",
    "ELLIPSIS",
    "HYPHENS",
    "TEXT_UNSET",
    "UTILITY_GROUPS",
    "build_table_utilities",
    "build_fixed_utilities",
]

DEFAULT_MODIFIER = "default"


@dataclass(frozen=True)
class FlatTable:
    """A theme table whose entries each become one utility class."""

    key: str  # theme key, also the variants key
    base_name: str
    css_property: str
    default_collapses: bool = False  # modifier "default" drops the suffix

    def class_name(self, modifier: str) -> str:
        if self.default_collapses and modifier == DEFAULT_MODIFIER:
            return self.base_name
        return f"{self.base_name}-{modifier}"


@dataclass(frozen=True)
class FixedGroup:
    """A set of hard-coded utility classes gated by one boolean option."""

    key: str  # variants key
    option: str  # PluginOptions field
    rules: tuple[tuple[str, str, str], ...]  # (class name, property, value)


TEXT_INDENT = FlatTable("textIndent", "indent", "text-indent")
TEXT_SHADOW = FlatTable("textShadow", "text-shadow", "text-shadow", default_collapses=True)
FONT_VARIANT_CAPS = FlatTable("fontVariantCaps", "caps", "font-variant-caps")
FONT_VARIANT_NUMERIC = FlatTable("fontVariantNumeric", "nums", "font-variant-numeric")
FONT_VARIANT_LIGATURES = FlatTable("fontVariantLigatures", "ligatures", "font-variant-ligatures")

ELLIPSIS = FixedGroup(
    "ellipsis",
    "ellipsis",
    (
        ("ellipsis", "text-overflow", "ellipsis"),
        ("no-ellipsis", "text-overflow", "clip"),
    ),
)

HYPHENS = FixedGroup(
    "hyphens",
    "hyphens",
    (
        ("hyphens-none", "hyphens", "none"),
        ("hyphens-manual", "hyphens", "manual"),
        ("hyphens-auto", "hyphens", "auto"),
    ),
)

TEXT_UNSET = FixedGroup(
    "textUnset",
    "text_unset",
    (
        ("font-family-unset", "font-family", "inherit"),
        ("font-weight-unset", "font-weight", "inherit"),
        ("font-style-unset", "font-style", "inherit"),
        ("text-size-unset", "font-size", "inherit"),
        ("text-align-unset", "text-align", "inherit"),
        ("leading-unset", "line-height", "inherit"),
        ("tracking-unset", "letter-spacing", "inherit"),
        ("text-color-unset", "color", "inherit"),
        ("text-transform-unset", "text-transform", "inherit"),
    ),
)

# Registration order.
UTILITY_GROUPS: tuple[Union[FlatTable, FixedGroup], ...] = (
    TEXT_INDENT,
    TEXT_SHADOW,
    ELLIPSIS,
    HYPHENS,
    TEXT_UNSET,
    FONT_VARIANT_CAPS,
    FONT_VARIANT_NUMERIC,
    FONT_VARIANT_LIGATURES,
)


def _declaration_value(raw: Any) -> Any:
    value = classify(raw)
    if isinstance(value, ListValue):
        return value.joined()
    return raw


def build_table_utilities(
    table: Mapping[str, Any],
    group: FlatTable,
    escape: Escape = escape_class_name,
) -> RuleSet:
    """Map every (modifier, value) entry of *table* to a class rule."""
    rules = [
        Rule(
            selector=class_selector(group.class_name(str(modifier)), escape),
            declarations={group.css_property: _declaration_value(value)},
        )
        for modifier, value in table.items()
    ]
    return RuleSet(name=group.key, rules=rules)


def build_fixed_utilities(
    group: FixedGroup,
    enabled: bool,
    escape: Escape = escape_class_name,
) -> RuleSet:
    """Return the group's rules, or an empty set when *enabled* is False."""
    if not enabled:
        return RuleSet(name=group.key)
    rules = [
        Rule(selector=class_selector(name, escape), declarations={prop: value})
        for name, prop, value in group.rules
    ]
    return RuleSet(name=group.key, rules=rules)
