"""Rule sinks: where synthesized rule sets are registered."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Protocol, Sequence

from textkit.model.rule import RuleSet


class RuleSink(Protocol):
    """Receives utility and component rule sets from the plugin."""

    def add_utilities(self, rules: RuleSet, variants: Sequence[str]) -> None: ...

    def add_components(self, rules: RuleSet) -> None: ...


class RegistrationKind(StrEnum):
    UTILITIES = "utilities"
    COMPONENTS = "components"


@dataclass(frozen=True)
class Registration:
    """One recorded sink call."""

    kind: RegistrationKind
    rules: RuleSet
    variants: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": str(self.kind),
            "name": self.rules.name,
            "variants": list(self.variants),
            "rules": self.rules.as_dict(),
        }


@dataclass
class CollectingSink:
    """In-memory sink that records every registration in call order."""

    registrations: list[Registration] = field(default_factory=list)

    def add_utilities(self, rules: RuleSet, variants: Sequence[str]) -> None:
        self.registrations.append(
            Registration(RegistrationKind.UTILITIES, rules, tuple(variants))
        )

    def add_components(self, rules: RuleSet) -> None:
        self.registrations.append(Registration(RegistrationKind.COMPONENTS, rules))

    @property
    def utilities(self) -> list[Registration]:
        return [r for r in self.registrations if r.kind is RegistrationKind.UTILITIES]

    @property
    def components(self) -> list[Registration]:
        return [r for r in self.registrations if r.kind is RegistrationKind.COMPONENTS]

    def registration(self, name: str) -> Registration | None:
        """Return the first registration whose rule set is called *name*."""
        for reg in self.registrations:
            if reg.rules.name == name:
                return reg
        return None

    def all_rules(self) -> dict[str, dict[str, Any]]:
        """Merge every registered rule into one ``{selector: declarations}`` map."""
        merged: dict[str, dict[str, Any]] = {}
        for reg in self.registrations:
            merged.update(reg.rules.as_dict())
        return merged
