"""CLI command: textkit generate -- build CSS from a theme file."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from textkit.config import PluginOptions
from textkit.errors import TextkitError
from textkit.plugin import TextPlugin
from textkit.render import render_registrations
from textkit.sink import CollectingSink
from textkit.theme import load_theme_file


@click.command()
@click.argument("themefile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o", "--output", "output_path", type=click.Path(dir_okay=False), default=None,
    help="Write to this file instead of stdout.",
)
@click.option(
    "--format", "output_format", type=click.Choice(["css", "json"]), default="css",
    show_default=True, help="Output format.",
)
@click.option("--prefix", default=None, help="Component class prefix (overrides the theme file).")
@click.option("--no-ellipsis", is_flag=True, help="Skip the ellipsis utilities.")
@click.option("--no-hyphens", is_flag=True, help="Skip the hyphens utilities.")
@click.option("--no-text-unset", is_flag=True, help="Skip the text unset utilities.")
@click.option("--lenient", is_flag=True, help="Ignore extends targets that do not exist.")
def generate(
    themefile: str,
    output_path: str | None,
    output_format: str,
    prefix: str | None,
    no_ellipsis: bool,
    no_hyphens: bool,
    no_text_unset: bool,
    lenient: bool,
) -> None:
    """Generate utility and component rules from a JSON theme file.

    Options in the theme file's "options" object are applied first; command
    line flags override them.
    """
    try:
        theme_file = load_theme_file(themefile)
        options = dict(theme_file.options)
        if prefix is not None:
            options["componentPrefix"] = prefix
        if no_ellipsis:
            options["ellipsis"] = False
        if no_hyphens:
            options["hyphens"] = False
        if no_text_unset:
            options["textUnset"] = False
        if lenient:
            options["strictExtends"] = False

        sink = CollectingSink()
        TextPlugin(PluginOptions.from_mapping(options)).register(theme_file.provider(), sink)
    except TextkitError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output_format == "json":
        text = json.dumps([r.to_dict() for r in sink.registrations], indent=2) + "\n"
    else:
        text = render_registrations(sink.registrations)

    if output_path is None:
        click.echo(text, nl=False)
    else:
        Path(output_path).write_text(text, encoding="utf-8")
        count = sum(len(r.rules) for r in sink.registrations)
        click.echo(f"Wrote {count} rule(s) to {output_path}")
