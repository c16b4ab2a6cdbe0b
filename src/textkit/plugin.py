"""Plugin entry point: runs every utility group and the text style components."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from textkit.config import PluginOptions
from textkit.naming import Escape, escape_class_name
from textkit.resolver import build_component_rules
from textkit.sink import CollectingSink, RuleSink
from textkit.theme import ThemeProvider
from textkit.utilities import (
    UTILITY_GROUPS,
    FlatTable,
    build_fixed_utilities,
    build_table_utilities,
)

__all__ = ["TextPlugin", "generate"]

logger = logging.getLogger(__name__)


class TextPlugin:
    """Synthesizes text utilities and text style components from a theme.

    Usage:
        plugin = TextPlugin({"componentPrefix": "ts-"})
        plugin.register(ThemeProvider(theme), sink)
    """

    def __init__(self, options: PluginOptions | Mapping[str, Any] | None = None) -> None:
        if isinstance(options, PluginOptions):
            self.options = options
        else:
            self.options = PluginOptions.from_mapping(options)

    def register(
        self,
        theme: ThemeProvider,
        sink: RuleSink,
        escape: Escape = escape_class_name,
    ) -> None:
        """Build every rule set and hand it to *sink*.

        Utilities are registered group by group with their variant lists,
        then all text style components in a single call.

        Raises:
            ThemeError: If a theme table is not a mapping.
            ResolutionError: If a text style cannot be resolved.
        """
        utility_count = 0
        for group in UTILITY_GROUPS:
            if isinstance(group, FlatTable):
                rules = build_table_utilities(theme.table(group.key), group, escape)
            else:
                rules = build_fixed_utilities(group, getattr(self.options, group.option), escape)
            logger.debug("Utility group %s: %d rule(s)", group.key, len(rules))
            utility_count += len(rules)
            sink.add_utilities(rules, theme.variants(group.key))

        components = build_component_rules(
            theme.table("textStyles"),
            prefix=self.options.component_prefix,
            escape=escape,
            strict=self.options.strict_extends,
        )
        sink.add_components(components)
        logger.info(
            "Registered %d utility rule(s) and %d component rule(s)",
            utility_count,
            len(components),
        )


def generate(
    theme: Mapping[str, Any] | None = None,
    options: PluginOptions | Mapping[str, Any] | None = None,
    variants: Mapping[str, Any] | None = None,
    escape: Escape = escape_class_name,
) -> CollectingSink:
    """Run the plugin against a theme mapping and return the collected rules."""
    sink = CollectingSink()
    TextPlugin(options).register(ThemeProvider(theme, variants), sink, escape)
    return sink
