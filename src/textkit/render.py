"""Serialize registered rule sets to CSS text.

Nested declaration maps are flattened into separate blocks:

    ".c-link": {"color": "blue", "&:hover": {"color": "red"}}

renders as ``.c-link { color: blue; }`` followed by
``.c-link:hover { color: red; }``.  A nested key starting with ``@`` wraps
its block in that at-rule; any other nested key becomes a descendant
selector.  Breakpoint variants are not expanded, only noted in a comment.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from textkit.model.value import ListValue, MapValue, classify, css_text
from textkit.naming import css_property
from textkit.sink import Registration, RegistrationKind

__all__ = ["render_rule", "render_registrations"]

_INDENT = "  "


def _nested_selector(parent: str, key: str) -> str:
    if "&" in key:
        return key.replace("&", parent)
    return f"{parent} {key}"


def render_rule(selector: str, declarations: Mapping[str, Any], depth: int = 0) -> list[str]:
    """Render one rule (and its nested blocks) as a list of CSS lines."""
    pad = _INDENT * depth
    own: list[str] = []
    nested: list[str] = []
    for key, raw in declarations.items():
        value = classify(raw)
        if isinstance(value, MapValue):
            if key.startswith("@"):
                nested.append(f"{pad}{key} {{")
                nested.extend(render_rule(selector, value.entries, depth + 1))
                nested.append(f"{pad}}}")
            else:
                nested.extend(render_rule(_nested_selector(selector, key), value.entries, depth))
            continue
        if raw is None:
            continue
        text = value.joined() if isinstance(value, ListValue) else css_text(raw)
        own.append(f"{pad}{_INDENT}{css_property(key)}: {text};")

    lines: list[str] = []
    if own:
        lines.append(f"{pad}{selector} {{")
        lines.extend(own)
        lines.append(f"{pad}}}")
    lines.extend(nested)
    return lines


def _header(reg: Registration) -> str:
    if reg.kind is RegistrationKind.COMPONENTS:
        return f"/* components: {reg.rules.name} */"
    variants = ", ".join(reg.variants) or "none"
    return f"/* utilities: {reg.rules.name} (variants: {variants}) */"


def render_registrations(registrations: Iterable[Registration]) -> str:
    """Render every non-empty registration, in order, as one stylesheet."""
    sections: list[str] = []
    for reg in registrations:
        if not len(reg.rules):
            continue
        lines = [_header(reg)]
        for rule in reg.rules:
            lines.extend(render_rule(rule.selector, rule.declarations))
        sections.append("\n".join(lines))
    if not sections:
        return ""
    return "\n\n".join(sections) + "\n"
