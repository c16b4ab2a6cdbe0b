"""Validation rules for themes.

Each rule is a function taking a ThemeProvider and returning a list of
Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Mapping

from textkit.errors import ThemeError
from textkit.model.diagnostic import Diagnostic, Severity
from textkit.model.value import MapValue, Opaque, classify
from textkit.naming import kebab_case
from textkit.resolver import EXTENDS_KEY, OUTPUT_KEY, extends_targets
from textkit.theme import ThemeProvider
from textkit.utilities import UTILITY_GROUPS, FlatTable

TEXT_STYLES = "textStyles"

FLAT_TABLE_KEYS = tuple(g.key for g in UTILITY_GROUPS if isinstance(g, FlatTable))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _presets(theme: ThemeProvider) -> dict[str, Any]:
    try:
        return theme.table(TEXT_STYLES)
    except ThemeError:
        return {}  # check_tables_are_mappings reports this


def _map_presets(theme: ThemeProvider) -> dict[str, Mapping[str, Any]]:
    return {k: v for k, v in _presets(theme).items() if isinstance(v, Mapping)}


def _extends_values(entries: Mapping[str, Any]) -> Iterator[Any]:
    """Yield every raw ``extends`` value in *entries* and its nested maps."""
    for key, value in entries.items():
        if key == EXTENDS_KEY:
            yield value
        elif isinstance(value, Mapping):
            yield from _extends_values(value)


def _extends_names(entries: Mapping[str, Any]) -> list[Any]:
    names: list[Any] = []
    for raw in _extends_values(entries):
        names.extend(extends_targets(raw))
    return names


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_tables_are_mappings(theme: ThemeProvider) -> list[Diagnostic]:
    """Every known theme table must be a mapping."""
    diagnostics: list[Diagnostic] = []
    for key in FLAT_TABLE_KEYS + (TEXT_STYLES,):
        try:
            theme.table(key)
        except ThemeError as exc:
            diagnostics.append(
                Diagnostic(
                    rule="check_tables_are_mappings",
                    severity=Severity.ERROR,
                    message=str(exc),
                    table=key,
                    fix=f"Define '{key}' as an object of modifier -> value.",
                )
            )
    return diagnostics


def check_presets_are_mappings(theme: ThemeProvider) -> list[Diagnostic]:
    """Every text style must be a declaration map."""
    diagnostics: list[Diagnostic] = []
    for name, value in _presets(theme).items():
        if not isinstance(value, Mapping):
            diagnostics.append(
                Diagnostic(
                    rule="check_presets_are_mappings",
                    severity=Severity.ERROR,
                    message=f"Text style '{name}' is a {type(value).__name__}, not a declaration map.",
                    preset=name,
                    fix="Give the text style an object of property -> value.",
                )
            )
    return diagnostics


def check_extends_type(theme: ThemeProvider) -> list[Diagnostic]:
    """``extends`` must be a preset name or a list of preset names."""
    diagnostics: list[Diagnostic] = []
    for name, entries in _map_presets(theme).items():
        for raw in _extends_values(entries):
            if isinstance(raw, str):
                continue
            if isinstance(raw, (list, tuple)) and all(isinstance(n, str) for n in raw):
                continue
            diagnostics.append(
                Diagnostic(
                    rule="check_extends_type",
                    severity=Severity.ERROR,
                    message=f"Text style '{name}' has an invalid extends value {raw!r}.",
                    preset=name,
                    fix="Use a text style name or a list of text style names.",
                )
            )
    return diagnostics


def check_extends_targets_exist(theme: ThemeProvider) -> list[Diagnostic]:
    """Every ``extends`` entry must name an existing text style."""
    presets = _presets(theme)
    diagnostics: list[Diagnostic] = []
    for name, entries in _map_presets(theme).items():
        for target in _extends_names(entries):
            if isinstance(target, str) and target in presets:
                continue
            diagnostics.append(
                Diagnostic(
                    rule="check_extends_targets_exist",
                    severity=Severity.ERROR,
                    message=f"Text style '{name}' extends unknown text style {target!r}.",
                    preset=name,
                    fix=f"Define text style {target!r} or remove it from extends.",
                )
            )
    return diagnostics


def check_extends_acyclic(theme: ThemeProvider) -> list[Diagnostic]:
    """The ``extends`` graph must not contain cycles."""
    presets = _map_presets(theme)
    graph = {
        name: [t for t in _extends_names(entries) if isinstance(t, str) and t in presets]
        for name, entries in presets.items()
    }

    cycles: list[list[str]] = []
    seen_cycles: set[frozenset[str]] = set()
    done: set[str] = set()

    def visit(name: str, path: list[str]) -> None:
        if name in path:
            cycle = path[path.index(name):] + [name]
            key = frozenset(cycle)
            if key not in seen_cycles:
                seen_cycles.add(key)
                cycles.append(cycle)
            return
        if name in done:
            return
        path.append(name)
        for target in graph[name]:
            visit(target, path)
        path.pop()
        done.add(name)

    for name in graph:
        visit(name, [])

    return [
        Diagnostic(
            rule="check_extends_acyclic",
            severity=Severity.ERROR,
            message="Cyclic extends: " + " -> ".join(cycle),
            preset=cycle[0],
            fix="Remove one of the extends entries in the cycle.",
        )
        for cycle in cycles
    ]


# ---------------------------------------------------------------------------
# Semantic rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_output_flag_type(theme: ThemeProvider) -> list[Diagnostic]:
    """``output`` should be a boolean. WARNING severity."""
    diagnostics: list[Diagnostic] = []
    for name, entries in _map_presets(theme).items():
        if OUTPUT_KEY in entries and not isinstance(entries[OUTPUT_KEY], bool):
            diagnostics.append(
                Diagnostic(
                    rule="check_output_flag_type",
                    severity=Severity.WARNING,
                    message=(
                        f"Text style '{name}' has output={entries[OUTPUT_KEY]!r}; "
                        "only the boolean false suppresses the class."
                    ),
                    preset=name,
                    fix="Use true or false.",
                )
            )
    return diagnostics


def _opaque_paths(entries: Mapping[str, Any], prefix: str = "") -> Iterator[str]:
    for key, raw in entries.items():
        value = classify(raw)
        if isinstance(value, MapValue):
            yield from _opaque_paths(value.entries, f"{prefix}{key}.")
        elif isinstance(value, Opaque):
            yield f"{prefix}{key}"


def check_value_shapes(theme: ThemeProvider) -> list[Diagnostic]:
    """Values should be scalars, lists or (for text styles) maps. WARNING."""
    diagnostics: list[Diagnostic] = []
    for key in FLAT_TABLE_KEYS:
        try:
            table = theme.table(key)
        except ThemeError:
            continue
        for modifier, raw in table.items():
            if isinstance(classify(raw), (MapValue, Opaque)):
                diagnostics.append(
                    Diagnostic(
                        rule="check_value_shapes",
                        severity=Severity.WARNING,
                        message=f"'{key}.{modifier}' has unsupported value {raw!r}.",
                        table=key,
                        fix="Use a CSS value string or a list of them.",
                    )
                )
    for name, entries in _map_presets(theme).items():
        for path in _opaque_paths(entries):
            diagnostics.append(
                Diagnostic(
                    rule="check_value_shapes",
                    severity=Severity.WARNING,
                    message=f"Text style '{name}' field '{path}' has an unsupported value.",
                    preset=name,
                    fix="Use a scalar, a list of scalars or a nested object.",
                )
            )
    return diagnostics


def check_class_name_collisions(theme: ThemeProvider) -> list[Diagnostic]:
    """Two emitted text styles should not map to the same class name. WARNING.

    Presets that produce no rule (``output: false`` or not a map) are ignored.
    """
    by_class: dict[str, list[str]] = {}
    for name, entries in _map_presets(theme).items():
        if entries.get(OUTPUT_KEY) is False:
            continue
        by_class.setdefault(kebab_case(str(name)), []).append(str(name))
    diagnostics: list[Diagnostic] = []
    for class_name, names in by_class.items():
        if len(names) > 1:
            diagnostics.append(
                Diagnostic(
                    rule="check_class_name_collisions",
                    severity=Severity.WARNING,
                    message=(
                        f"Text styles {', '.join(repr(n) for n in names)} all map to "
                        f"class name '{class_name}'."
                    ),
                    preset=names[-1],
                    fix="Rename one of the text styles.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_tables_are_mappings,
    check_presets_are_mappings,
    check_extends_type,
    check_extends_targets_exist,
    check_extends_acyclic,
    check_output_flag_type,
    check_value_shapes,
    check_class_name_collisions,
]
