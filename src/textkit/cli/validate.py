"""CLI command: textkit validate -- check a theme file for problems."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from textkit.errors import ThemeError
from textkit.model.diagnostic import Severity
from textkit.theme import load_theme_file
from textkit.validation import validate_theme_file


@click.command()
@click.argument("themefile", type=click.Path(exists=True, dir_okay=False))
def validate(themefile: str) -> None:
    """Validate the tables and text styles of a JSON theme file.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    theme_path = Path(themefile)

    try:
        theme_file = load_theme_file(theme_path)
    except ThemeError as exc:
        click.echo(f"Theme error: {exc}", err=True)
        sys.exit(1)

    diagnostics = validate_theme_file(theme_file)

    if not diagnostics:
        click.echo(f"OK: {theme_path.name} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
