"""Tests for flat utility synthesis."""

import pytest

from textkit.utilities import (
    ELLIPSIS,
    FONT_VARIANT_CAPS,
    FONT_VARIANT_LIGATURES,
    FONT_VARIANT_NUMERIC,
    HYPHENS,
    TEXT_INDENT,
    TEXT_SHADOW,
    TEXT_UNSET,
    UTILITY_GROUPS,
    build_fixed_utilities,
    build_table_utilities,
)


# ---------------------------------------------------------------------------
# Theme-driven tables
# ---------------------------------------------------------------------------


class TestTextIndent:
    def test_one_rule_per_modifier(self):
        rules = build_table_utilities({"sm": "1rem", "lg": "3rem"}, TEXT_INDENT)
        assert rules.as_dict() == {
            ".indent-sm": {"text-indent": "1rem"},
            ".indent-lg": {"text-indent": "3rem"},
        }

    def test_default_not_collapsed(self):
        rules = build_table_utilities({"default": "2em"}, TEXT_INDENT)
        assert rules.selectors == [".indent-default"]

    def test_modifier_escaped(self):
        rules = build_table_utilities({"1/2": "50%"}, TEXT_INDENT)
        assert rules.selectors == [".indent-1\\/2"]

    def test_negative_value_kept(self):
        rules = build_table_utilities({"-hang": "-1em"}, TEXT_INDENT)
        assert rules.get(".indent--hang").declarations == {"text-indent": "-1em"}


class TestTextShadow:
    def test_default_drops_suffix(self):
        rules = build_table_utilities({"default": "0 1px 2px black"}, TEXT_SHADOW)
        assert rules.as_dict() == {".text-shadow": {"text-shadow": "0 1px 2px black"}}

    def test_named_modifier(self):
        rules = build_table_utilities({"sm": "0 1px 0 black"}, TEXT_SHADOW)
        assert rules.selectors == [".text-shadow-sm"]

    def test_layers_joined(self):
        rules = build_table_utilities({"glow": ["0 0 2px red", "0 0 8px red"]}, TEXT_SHADOW)
        assert rules.get(".text-shadow-glow").declarations == {
            "text-shadow": "0 0 2px red, 0 0 8px red"
        }

    def test_order_preserved(self):
        rules = build_table_utilities({"default": "a", "sm": "b", "lg": "c"}, TEXT_SHADOW)
        assert rules.selectors == [".text-shadow", ".text-shadow-sm", ".text-shadow-lg"]


class TestFontVariantTables:
    @pytest.mark.parametrize(
        "group, modifier, selector, prop",
        [
            (FONT_VARIANT_CAPS, "small", ".caps-small", "font-variant-caps"),
            (FONT_VARIANT_NUMERIC, "tabular", ".nums-tabular", "font-variant-numeric"),
            (FONT_VARIANT_LIGATURES, "no-common", ".ligatures-no-common", "font-variant-ligatures"),
        ],
    )
    def test_naming_and_property(self, group, modifier, selector, prop):
        rules = build_table_utilities({modifier: "value"}, group)
        assert rules.as_dict() == {selector: {prop: "value"}}

    def test_empty_table(self):
        rules = build_table_utilities({}, FONT_VARIANT_CAPS)
        assert len(rules) == 0
        assert rules.name == "fontVariantCaps"


# ---------------------------------------------------------------------------
# Fixed groups
# ---------------------------------------------------------------------------


class TestFixedGroups:
    def test_ellipsis_enabled(self):
        rules = build_fixed_utilities(ELLIPSIS, True)
        assert rules.as_dict() == {
            ".ellipsis": {"text-overflow": "ellipsis"},
            ".no-ellipsis": {"text-overflow": "clip"},
        }

    def test_hyphens_enabled(self):
        rules = build_fixed_utilities(HYPHENS, True)
        assert rules.as_dict() == {
            ".hyphens-none": {"hyphens": "none"},
            ".hyphens-manual": {"hyphens": "manual"},
            ".hyphens-auto": {"hyphens": "auto"},
        }

    def test_text_unset_enabled(self):
        rules = build_fixed_utilities(TEXT_UNSET, True)
        assert len(rules) == 9
        assert rules.get(".text-size-unset").declarations == {"font-size": "inherit"}
        assert rules.get(".leading-unset").declarations == {"line-height": "inherit"}
        assert rules.get(".tracking-unset").declarations == {"letter-spacing": "inherit"}
        assert rules.get(".text-color-unset").declarations == {"color": "inherit"}
        assert all(list(r.declarations.values()) == ["inherit"] for r in rules)

    @pytest.mark.parametrize("group", [ELLIPSIS, HYPHENS, TEXT_UNSET])
    def test_disabled_group_is_empty(self, group):
        rules = build_fixed_utilities(group, False)
        assert len(rules) == 0
        assert rules.name == group.key


class TestUtilityGroups:
    def test_registration_order(self):
        assert [g.key for g in UTILITY_GROUPS] == [
            "textIndent",
            "textShadow",
            "ellipsis",
            "hyphens",
            "textUnset",
            "fontVariantCaps",
            "fontVariantNumeric",
            "fontVariantLigatures",
        ]
