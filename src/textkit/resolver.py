"""Text style resolution: flattens ``extends`` chains into declaration maps.

Presets live in the ``textStyles`` theme table.  A preset may name other
presets under ``extends`` (a single name or a list); their resolved fields
are merged in list order before the preset's own fields, so later entries
win over earlier ones and own fields win over everything inherited.

    {
        "base": {"color": "red", "output": False},
        "heading": {"extends": "base", "fontWeight": 700},
    }

resolves ``heading`` to ``{"color": "red", "fontWeight": 700}``.  An
inherited ``output`` flag is never copied, so suppressing ``base`` does not
suppress ``heading``.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping

from textkit.errors import CyclicExtendsError, UnknownPresetError
from textkit.model.rule import Rule, RuleSet
from textkit.model.value import ListValue, MapValue, classify
from textkit.naming import Escape, class_selector, component_class_name, escape_class_name

__all__ = [
    "EXTENDS_KEY",
    "OUTPUT_KEY",
    "extends_targets",
    "StyleResolver",
    "resolve",
    "build_component_rules",
]

logger = logging.getLogger(__name__)

EXTENDS_KEY = "extends"
OUTPUT_KEY = "output"


def extends_targets(raw: Any) -> list[Any]:
    """Normalize an ``extends`` value to an ordered list of preset names."""
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        return list(raw)
    return [raw]


def _nested_targets(entries: Mapping[str, Any]) -> Iterator[Any]:
    """Yield ``extends`` targets of *entries* and of its nested maps."""
    for key, value in entries.items():
        if key == EXTENDS_KEY:
            yield from extends_targets(value)
        elif isinstance(value, Mapping):
            yield from _nested_targets(value)


def _copy_maps(value: Any) -> Any:
    # Only dicts are shared through the memo; leaf values pass through as-is.
    if isinstance(value, dict):
        return {key: _copy_maps(item) for key, item in value.items()}
    return value


class StyleResolver:
    """Resolves presets of one preset table, memoizing each preset by name.

    With ``strict=True`` an ``extends`` target missing from the table raises
    :class:`UnknownPresetError`; otherwise it is logged and merges nothing.
    A cycle in the ``extends`` graph always raises :class:`CyclicExtendsError`.

    The ``extends`` graph is walked with an explicit stack and resolved
    deepest first, so chain length is not bounded by the recursion limit.
    Nesting depth of a single preset's maps still recurses.
    """

    def __init__(self, presets: Mapping[str, Any], *, strict: bool = True) -> None:
        self.presets = presets
        self.strict = strict
        self._resolved: dict[str, Any] = {}
        self._in_progress: list[str] = []

    def resolve(self, name: str) -> Any:
        """Return the resolved declaration map for preset *name*.

        Declaration maps in the result are fresh; mutating them does not
        affect later calls.  Other values are returned as given.
        """
        if isinstance(name, str) and name in self.presets and name not in self._resolved:
            for dependency in self._dependency_order(name):
                self._resolve_preset(dependency, referenced_by=None)
        return _copy_maps(self._resolve_preset(name, referenced_by=None))

    def resolve_all(self) -> dict[str, Any]:
        """Resolve every preset, in table order."""
        return {name: self.resolve(name) for name in self.presets}

    # -- internals ---------------------------------------------------------

    def _targets_of(self, name: str) -> list[Any]:
        entries = self.presets[name]
        if not isinstance(entries, Mapping):
            return []
        return list(_nested_targets(entries))

    def _dependency_order(self, name: str) -> list[str]:
        """Unresolved presets reachable from *name* through ``extends``, deepest first.

        Unknown targets are left for :meth:`_resolve_preset` to report.
        """
        order: list[str] = []
        finished: set[str] = set()
        path: list[str] = [name]
        stack: list[Iterator[Any]] = [iter(self._targets_of(name))]
        while stack:
            for target in stack[-1]:
                if not isinstance(target, str) or target not in self.presets:
                    continue
                if target in self._resolved or target in finished:
                    continue
                if target in path:
                    start = path.index(target)
                    raise CyclicExtendsError(path[start:] + [target])
                path.append(target)
                stack.append(iter(self._targets_of(target)))
                break
            else:
                stack.pop()
                current = path.pop()
                finished.add(current)
                order.append(current)
        return order

    def _resolve_preset(self, name: Any, referenced_by: str | None) -> Any:
        if isinstance(name, str) and name in self._resolved:
            return self._resolved[name]
        if name in self._in_progress:
            start = self._in_progress.index(name)
            raise CyclicExtendsError(self._in_progress[start:] + [name])
        if not isinstance(name, str) or name not in self.presets:
            if self.strict:
                raise UnknownPresetError(name, referenced_by=referenced_by)
            logger.warning(
                "Skipping unknown text style %r (referenced by %r)", name, referenced_by
            )
            return {}

        self._in_progress.append(name)
        try:
            resolved = self._resolve_value(self.presets[name], owner=name)
        finally:
            self._in_progress.pop()
        self._resolved[name] = resolved
        logger.debug("Resolved text style %r", name)
        return resolved

    def _resolve_value(self, raw: Any, owner: str) -> Any:
        value = classify(raw)
        if isinstance(value, MapValue):
            return self._resolve_map(value.entries, owner)
        if isinstance(value, ListValue):
            return value.joined()
        return value.value  # Scalar or Opaque, verbatim

    def _resolve_map(self, entries: Mapping[str, Any], owner: str) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for target in extends_targets(entries.get(EXTENDS_KEY)):
            inherited = self._resolve_preset(target, referenced_by=owner)
            if not isinstance(inherited, dict):
                logger.warning(
                    "Text style %r extends %r, which is not a declaration map", owner, target
                )
                continue
            for key, value in inherited.items():
                if key == OUTPUT_KEY:
                    continue
                result[key] = value
        for key, raw in entries.items():
            if key == EXTENDS_KEY:
                continue
            result[key] = self._resolve_value(raw, owner)
        return result


def resolve(presets: Mapping[str, Any], name: str, *, strict: bool = True) -> Any:
    """Resolve a single preset *name* against *presets*."""
    return StyleResolver(presets, strict=strict).resolve(name)


def build_component_rules(
    presets: Mapping[str, Any],
    *,
    prefix: str = "c-",
    escape: Escape = escape_class_name,
    strict: bool = True,
) -> RuleSet:
    """Resolve every preset and turn each into a component class rule.

    Presets whose resolved ``output`` is ``False`` are resolved (so others
    can extend them) but produce no rule.  The ``output`` field is stripped
    from emitted declarations.
    """
    resolver = StyleResolver(presets, strict=strict)
    rules: list[Rule] = []
    for name in presets:
        resolved = resolver.resolve(name)
        if not isinstance(resolved, dict):
            logger.warning("Text style %r is not a declaration map; skipped", name)
            continue
        if resolved.get(OUTPUT_KEY) is False:
            logger.debug("Text style %r has output: false; no rule emitted", name)
            continue
        resolved.pop(OUTPUT_KEY, None)
        selector = class_selector(component_class_name(prefix, name), escape)
        rules.append(Rule(selector=selector, declarations=resolved))
    return RuleSet(name="textStyles", rules=rules)
