"""Tests for the theme provider and theme file loading."""

import json

import pytest

from textkit.errors import ThemeError
from textkit.theme import DEFAULT_THEME, ThemeFile, ThemeProvider, load_theme_file


# ---------------------------------------------------------------------------
# ThemeProvider
# ---------------------------------------------------------------------------


class TestTables:
    def test_defaults_when_absent(self):
        theme = ThemeProvider()
        assert theme.table("fontVariantCaps") == DEFAULT_THEME["fontVariantCaps"]
        assert theme.table("textIndent") == {}

    def test_user_table_replaces_default(self):
        theme = ThemeProvider({"fontVariantCaps": {"small": "small-caps"}})
        assert theme.table("fontVariantCaps") == {"small": "small-caps"}

    def test_extend_layers_over_default(self):
        theme = ThemeProvider({"extend": {"fontVariantCaps": {"small": "petite-caps", "x": "y"}}})
        caps = theme.table("fontVariantCaps")
        assert caps["small"] == "petite-caps"
        assert caps["x"] == "y"
        assert caps["titling"] == "titling-caps"

    def test_extend_layers_over_user_table(self):
        theme = ThemeProvider(
            {"textIndent": {"sm": "1rem"}, "extend": {"textIndent": {"lg": "3rem"}}}
        )
        assert theme.table("textIndent") == {"sm": "1rem", "lg": "3rem"}

    def test_unknown_key_is_empty(self):
        assert ThemeProvider().table("letterSpacing") == {}

    def test_table_is_a_copy(self):
        source = {"textIndent": {"sm": "1rem"}}
        theme = ThemeProvider(source)
        theme.table("textIndent")["lg"] = "3rem"
        assert source == {"textIndent": {"sm": "1rem"}}

    def test_non_mapping_table_raises(self):
        with pytest.raises(ThemeError, match="textShadow"):
            ThemeProvider({"textShadow": "0 0 1px red"}).table("textShadow")

    def test_non_mapping_extend_raises(self):
        with pytest.raises(ThemeError, match="extend.textIndent"):
            ThemeProvider({"extend": {"textIndent": 4}}).table("textIndent")


class TestVariants:
    def test_default_responsive(self):
        assert ThemeProvider().variants("textShadow") == ["responsive"]

    def test_configured(self):
        theme = ThemeProvider(variants={"textShadow": ["hover", "focus"]})
        assert theme.variants("textShadow") == ["hover", "focus"]

    def test_single_string(self):
        assert ThemeProvider(variants={"hyphens": "print"}).variants("hyphens") == ["print"]

    def test_empty_list_disables(self):
        assert ThemeProvider(variants={"ellipsis": []}).variants("ellipsis") == []

    def test_unknown_group(self):
        assert ThemeProvider().variants("textStyles") == []


# ---------------------------------------------------------------------------
# load_theme_file
# ---------------------------------------------------------------------------


class TestLoadThemeFile:
    def test_sectioned_file(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text(
            json.dumps(
                {
                    "theme": {"textIndent": {"sm": "1rem"}},
                    "variants": {"textIndent": []},
                    "options": {"componentPrefix": "t-"},
                }
            )
        )
        loaded = load_theme_file(path)
        assert loaded == ThemeFile(
            theme={"textIndent": {"sm": "1rem"}},
            variants={"textIndent": []},
            options={"componentPrefix": "t-"},
        )
        assert loaded.provider().variants("textIndent") == []

    def test_bare_theme_object(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"textStyles": {"a": {"color": "red"}}}))
        loaded = load_theme_file(str(path))
        assert loaded.theme == {"textStyles": {"a": {"color": "red"}}}
        assert loaded.options == {}

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text("{not json")
        with pytest.raises(ThemeError, match="Invalid JSON"):
            load_theme_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ThemeError, match="Cannot read"):
            load_theme_file(tmp_path / "absent.json")

    def test_top_level_array(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text("[]")
        with pytest.raises(ThemeError, match="JSON object"):
            load_theme_file(path)

    def test_bad_section(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"theme": {}, "options": ["x"]}))
        with pytest.raises(ThemeError, match="'options'"):
            load_theme_file(path)
