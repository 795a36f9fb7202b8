"""
Unit tests for the styling-framework plugin facade.
"""

import pytest
from pydantic import ValidationError

from shadcn_oklch.core.ir import PluginOptions
from shadcn_oklch.themes import ShadcnPlugin, build_declaration_tree, shadcn_plugin


class TestRegister:
    """Tests for ShadcnPlugin.register."""

    def test_add_base_called_once_with_tree(self, recording_api):
        ShadcnPlugin().register(recording_api)

        assert len(recording_api.base_calls) == 1
        assert recording_api.base_calls[0] == build_declaration_tree()

    def test_options_flow_through(self, recording_api):
        plugin = ShadcnPlugin(PluginOptions(default_color_scheme="dark", radius="1rem"))
        plugin.register(recording_api)

        tree = recording_api.base_calls[0]
        assert list(tree) == [":root", ".light"]
        assert tree[":root"]["--radius"] == "1rem"


class TestThemeConfig:
    """Tests for ShadcnPlugin.theme_config."""

    def test_container(self):
        config = ShadcnPlugin().theme_config()
        assert config["container"] == {
            "center": True,
            "padding": "2rem",
            "screens": {"2xl": "1400px"},
        }

    def test_extend_sections(self):
        extend = ShadcnPlugin().theme_config()["extend"]
        assert set(extend) == {"colors", "borderRadius", "keyframes", "animation"}

    def test_colors_use_prefix(self):
        colors = ShadcnPlugin(PluginOptions(color_prefix="")).theme_config()["extend"]["colors"]
        assert colors["background"] == "oklch(var(--background) / <alpha-value>)"

    def test_border_radius(self):
        radius = ShadcnPlugin().theme_config()["extend"]["borderRadius"]
        assert radius == {
            "lg": "var(--radius)",
            "md": "calc(var(--radius) - 2px)",
            "sm": "calc(var(--radius) - 4px)",
        }

    def test_accordion_animations(self):
        extend = ShadcnPlugin().theme_config()["extend"]
        assert extend["keyframes"]["accordion-down"] == {
            "from": {"height": "0"},
            "to": {"height": "var(--radix-accordion-content-height)"},
        }
        assert extend["keyframes"]["accordion-up"]["to"] == {"height": "0"}
        assert extend["animation"] == {
            "accordion-down": "accordion-down 0.2s ease-out",
            "accordion-up": "accordion-up 0.2s ease-out",
        }

    def test_fragments_are_fresh_per_call(self):
        """Test that mutating one result does not leak into the next."""
        plugin = ShadcnPlugin()
        first = plugin.theme_config()
        first["container"]["padding"] = "0"
        first["extend"]["keyframes"]["accordion-up"]["to"]["height"] = "1px"

        second = plugin.theme_config()
        assert second["container"]["padding"] == "2rem"
        assert second["extend"]["keyframes"]["accordion-up"]["to"]["height"] == "0"


class TestShadcnPluginFactory:
    """Tests for shadcn_plugin."""

    def test_camel_case_options(self):
        plugin = shadcn_plugin(colorPrefix="clr", defaultColorScheme="dark")
        assert plugin.options.color_prefix == "clr"
        assert plugin.options.default_color_scheme == "dark"

    def test_snake_case_options(self):
        plugin = shadcn_plugin(color_prefix="clr")
        assert plugin.options.color_prefix == "clr"

    def test_unknown_option_rejected(self):
        with pytest.raises(ValidationError):
            shadcn_plugin(colourPrefix="clr")
