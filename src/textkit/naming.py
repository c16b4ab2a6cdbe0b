"""Class name synthesis: kebab-casing, prefixing and selector escaping."""

from __future__ import annotations

import re
from typing import Callable

__all__ = [
    "Escape",
    "kebab_case",
    "css_property",
    "escape_class_name",
    "class_selector",
    "component_class_name",
]

Escape = Callable[[str], str]

# "primaryHeading" -> "primary-Heading", "h1Title" -> "h1-Title"
_LOWER_UPPER_RE = re.compile(r"([a-z0-9])([A-Z])")
# "HTMLBlock" -> "HTML-Block": split before the last capital of a run
_ACRONYM_RE = re.compile(r"([A-Z])([A-Z])(?=[a-z])")

_UPPER_RE = re.compile(r"[A-Z]")


def kebab_case(name: str) -> str:
    """Convert a camelCase preset name to a kebab-case class name."""
    name = _LOWER_UPPER_RE.sub(r"\1-\2", name)
    name = _ACRONYM_RE.sub(r"\1-\2", name)
    return name.lower()


def css_property(name: str) -> str:
    """Convert a camelCase declaration key to a CSS property name.

    Custom properties (``--foo``) and already-hyphenated names pass through.
    """
    if name.startswith("--"):
        return name
    name = _UPPER_RE.sub(lambda m: "-" + m.group(0).lower(), name)
    if name.startswith("ms-"):
        name = "-" + name
    return name


def _hex_escape(char: str) -> str:
    return f"\\{ord(char):x} "


def escape_class_name(name: str) -> str:
    """Escape *name* for use as a CSS class selector (CSSOM ``CSS.escape``)."""
    out: list[str] = []
    for index, char in enumerate(name):
        code = ord(char)
        if code == 0:
            out.append("\ufffd")
        elif 0x01 <= code <= 0x1F or code == 0x7F:
            out.append(_hex_escape(char))
        elif char.isdigit() and char.isascii() and (
            index == 0 or (index == 1 and name[0] == "-")
        ):
            out.append(_hex_escape(char))
        elif index == 0 and char == "-" and len(name) == 1:
            out.append("\\-")
        elif code >= 0x80 or char in "-_" or (char.isascii() and char.isalnum()):
            out.append(char)
        else:
            out.append("\\" + char)
    return "".join(out)


def class_selector(class_name: str, escape: Escape = escape_class_name) -> str:
    """Return the ``.class`` selector for an unescaped class name."""
    return "." + escape(class_name)


def component_class_name(prefix: str, preset_name: str) -> str:
    """Prefix a kebab-cased preset name. The prefix keeps its own casing."""
    return f"{prefix}{kebab_case(preset_name)}"
