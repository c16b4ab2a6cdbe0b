"""CLI command: textkit inspect -- display theme tables and text styles."""

from __future__ import annotations

import sys
from collections.abc import Mapping

import click

from textkit.config import PluginOptions
from textkit.errors import ConfigError, ThemeError
from textkit.naming import component_class_name
from textkit.resolver import EXTENDS_KEY, OUTPUT_KEY, extends_targets
from textkit.theme import load_theme_file
from textkit.utilities import UTILITY_GROUPS, FlatTable


@click.command()
@click.argument("themefile", type=click.Path(exists=True, dir_okay=False))
def inspect(themefile: str) -> None:
    """Load a theme file and display its tables and text styles.

    Shows entry counts and variants per utility table, and for each text
    style its extends chain and the class name it produces.
    """
    try:
        theme_file = load_theme_file(themefile)
        options = PluginOptions.from_mapping(theme_file.options)
        theme = theme_file.provider()
        presets = theme.table("textStyles")
    except (ThemeError, ConfigError) as exc:
        click.echo(f"Theme error: {exc}", err=True)
        sys.exit(1)

    click.echo("Tables:")
    for group in UTILITY_GROUPS:
        if not isinstance(group, FlatTable):
            continue
        try:
            count = len(theme.table(group.key))
        except ThemeError:
            click.echo(f"  {group.key}  (invalid)")
            continue
        variants = ", ".join(theme.variants(group.key)) or "none"
        click.echo(f"  {group.key}  entries={count}  variants={variants}")
    click.echo()

    click.echo(f"Text styles: {len(presets)}  prefix={options.component_prefix!r}")
    for name, entries in presets.items():
        parts = [f"  {name}"]
        if isinstance(entries, Mapping):
            chain = extends_targets(entries.get(EXTENDS_KEY))
            if chain:
                parts.append("extends=" + ",".join(str(n) for n in chain))
            if entries.get(OUTPUT_KEY) is False:
                parts.append("output=false")
            else:
                parts.append("." + component_class_name(options.component_prefix, name))
        else:
            parts.append("(not a declaration map)")
        click.echo("  ".join(parts))
