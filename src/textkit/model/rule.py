"""Rule model: Rule and RuleSet dataclasses."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Rule:
    """A single class rule pairing a selector with its declarations."""

    selector: str  # ".c-primary-heading", ".text-shadow-sm"
    declarations: dict[str, Any]


@dataclass(frozen=True)
class RuleSet:
    """An ordered group of rules registered with the sink in one call."""

    name: str  # theme key or group name, e.g. "textShadow", "components"
    rules: list[Rule] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    @property
    def selectors(self) -> list[str]:
        return [r.selector for r in self.rules]

    def get(self, selector: str) -> Rule | None:
        """Return the rule for *selector*, or None."""
        for rule in self.rules:
            if rule.selector == selector:
                return rule
        return None

    def as_dict(self) -> dict[str, dict[str, Any]]:
        """Return ``{selector: declarations}`` in rule order."""
        return {r.selector: r.declarations for r in self.rules}
