"""Theme validator: runs the rules over a theme and its plugin options."""

from __future__ import annotations

from typing import Callable

from textkit.config import PluginOptions
from textkit.errors import ConfigError, TextkitError
from textkit.model.diagnostic import Diagnostic, Severity
from textkit.theme import ThemeFile, ThemeProvider
from textkit.validation.rules import ALL_RULES

RuleFunc = Callable[[ThemeProvider], list[Diagnostic]]


class ValidationError(TextkitError):
    """A theme file has ERROR diagnostics; all of them are on ``diagnostics``."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        errors = [str(d) for d in diagnostics if d.is_error]
        super().__init__(f"Theme has {len(errors)} error(s): " + "; ".join(errors))


def validate(
    theme: ThemeProvider, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run every rule in :data:`ALL_RULES` (then *extra_rules*) against *theme*."""
    diagnostics: list[Diagnostic] = []
    for rule in [*ALL_RULES, *(extra_rules or [])]:
        diagnostics.extend(rule(theme))
    return diagnostics


def _check_options(theme_file: ThemeFile) -> list[Diagnostic]:
    try:
        PluginOptions.from_mapping(theme_file.options)
    except ConfigError as exc:
        return [
            Diagnostic(
                rule="check_options",
                severity=Severity.ERROR,
                message=str(exc),
                table="options",
                fix="Use only the documented plugin options with boolean or string values.",
            )
        ]
    return []


def validate_theme_file(
    theme_file: ThemeFile,
    *,
    raise_on_error: bool = False,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Validate the options and theme tables of a loaded theme file.

    With ``raise_on_error=True`` any ERROR diagnostic raises
    :class:`ValidationError` instead of being returned.
    """
    diagnostics = _check_options(theme_file)
    diagnostics.extend(validate(theme_file.provider(), extra_rules=extra_rules))
    if raise_on_error and any(d.is_error for d in diagnostics):
        raise ValidationError(diagnostics)
    return diagnostics
