"""
Styling-framework plugin facade.

Mirrors the two halves of a Tailwind-style plugin: a handler that injects
base styles through the host's ``add_base`` hook, and a static theme
config merged into the host's theme.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from shadcn_oklch.core.ir import PluginOptions

from .assembler import DeclarationTree, ThemeAssembler

logger = logging.getLogger(__name__)


class PluginAPI(Protocol):
    """Extension points the host framework exposes to the plugin."""

    def add_base(self, declarations: DeclarationTree) -> None: ...


def container_config() -> dict[str, Any]:
    return {
        "center": True,
        "padding": "2rem",
        "screens": {"2xl": "1400px"},
    }


def border_radius_config() -> dict[str, str]:
    return {
        "lg": "var(--radius)",
        "md": "calc(var(--radius) - 2px)",
        "sm": "calc(var(--radius) - 4px)",
    }


def keyframes_config() -> dict[str, Any]:
    return {
        "accordion-down": {
            "from": {"height": "0"},
            "to": {"height": "var(--radix-accordion-content-height)"},
        },
        "accordion-up": {
            "from": {"height": "var(--radix-accordion-content-height)"},
            "to": {"height": "0"},
        },
    }


def animation_config() -> dict[str, str]:
    return {
        "accordion-down": "accordion-down 0.2s ease-out",
        "accordion-up": "accordion-up 0.2s ease-out",
    }


class ShadcnPlugin:
    """
    shadcn/ui theme plugin with OKLCH colour tokens.

    Usage:
        plugin = ShadcnPlugin(PluginOptions(default_color_scheme="dark"))
        plugin.register(host)          # host.add_base(...) is called once
        theme = plugin.theme_config()  # merge into the host theme
    """

    def __init__(
        self,
        options: PluginOptions | None = None,
        assembler: ThemeAssembler | None = None,
    ):
        self.options = options or PluginOptions()
        self.assembler = assembler or ThemeAssembler()

    def register(self, api: PluginAPI) -> None:
        """Inject the theme declarations as base styles."""
        declarations = self.assembler.build_declaration_tree(self.options)
        logger.debug(f"Registering base styles for selectors {list(declarations)}")
        api.add_base(declarations)

    def theme_config(self) -> dict[str, Any]:
        """Return the theme extension: container, colours, radii and animations."""
        return {
            "container": container_config(),
            "extend": {
                "colors": self.assembler.build_color_palette(self.options),
                "borderRadius": border_radius_config(),
                "keyframes": keyframes_config(),
                "animation": animation_config(),
            },
        }


def shadcn_plugin(**options: Any) -> ShadcnPlugin:
    """Create a plugin from keyword options (camelCase or snake_case)."""
    return ShadcnPlugin(PluginOptions(**options))
