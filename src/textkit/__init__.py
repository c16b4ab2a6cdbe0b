"""textkit: text utilities and composable text style components from a theme."""

__version__ = "0.1.0"

from textkit.config import PluginOptions  # noqa: E402
from textkit.errors import (  # noqa: E402
    ConfigError,
    CyclicExtendsError,
    ResolutionError,
    TextkitError,
    ThemeError,
    UnknownPresetError,
)
from textkit.plugin import TextPlugin, generate  # noqa: E402
from textkit.resolver import StyleResolver, build_component_rules, resolve  # noqa: E402
from textkit.theme import ThemeProvider, load_theme_file  # noqa: E402

__all__ = [
    "__version__",
    "PluginOptions",
    "TextPlugin",
    "generate",
    "StyleResolver",
    "resolve",
    "build_component_rules",
    "ThemeProvider",
    "load_theme_file",
    "TextkitError",
    "ConfigError",
    "ThemeError",
    "ResolutionError",
    "UnknownPresetError",
    "CyclicExtendsError",
]
