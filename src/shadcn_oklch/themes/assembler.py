"""
Theme assembler.

Turns the built-in palettes plus user options into the two things a
styling framework needs:

1. A declaration tree (selector -> CSS custom property -> value), with
   the default scheme under ``:root`` first and every other theme under
   a ``.<theme>`` class selector.
2. A flat colour palette (token -> ``oklch(var(--...) / <alpha-value>)``)
   for the framework's colour extension point.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from shadcn_oklch.core.ir import DEFAULT_COLOR_PREFIX, PluginOptions
from shadcn_oklch.core.mapping import map_entries
from shadcn_oklch.core.merge import deep_merge
from shadcn_oklch.core.oklch import format_token

from .css_generator import generate_theme_css
from .palette import DEFAULT_THEMES, ThemeConfig

logger = logging.getLogger(__name__)

ROOT_SELECTOR = ":root"
RADIUS_VARIABLE = "--radius"

DeclarationTree = dict[str, dict[str, Any]]


def format_color_prefix(prefix: str | None) -> str:
    """Return the variable-name prefix including its trailing dash.

    ``None`` selects the default ``"color-"``; an empty string disables
    the prefix entirely.
    """
    if prefix is None:
        prefix = DEFAULT_COLOR_PREFIX
    return f"{prefix}-" if prefix else ""


def theme_selector(theme_name: str, default_scheme: str) -> str:
    """Get the CSS selector for a theme."""
    return ROOT_SELECTOR if theme_name == default_scheme else f".{theme_name}"


class ThemeAssembler:
    """Builds declaration trees from an injected set of default themes."""

    def __init__(self, default_themes: ThemeConfig = DEFAULT_THEMES):
        self.default_themes = default_themes

    def merge_themes(self, options: PluginOptions) -> dict[str, Any]:
        """Deep-merge the user's theme overrides onto the defaults."""
        return deep_merge(self.default_themes, options.themes)

    def build_declaration_tree(self, options: PluginOptions | None = None) -> DeclarationTree:
        """
        Build the selector-scoped declaration tree.

        Args:
            options: Plugin options; defaults apply when omitted.

        Returns:
            Dict of selector -> {custom property -> value}. ``:root`` is
            always the first key and carries ``--radius``.
        """
        options = options or PluginOptions()
        themes = self.merge_themes(options)
        prefix = format_color_prefix(options.color_prefix)
        default_scheme = options.resolved_color_scheme

        tree: DeclarationTree = {ROOT_SELECTOR: {RADIUS_VARIABLE: options.resolved_radius}}

        if default_scheme in themes:
            tree[ROOT_SELECTOR].update(_declarations(themes[default_scheme], prefix))
        else:
            logger.warning(
                f"Default colour scheme {default_scheme!r} not found in themes "
                f"{list(themes)}; :root only carries {RADIUS_VARIABLE}"
            )

        for theme_name, tokens in themes.items():
            if theme_name == default_scheme:
                continue
            selector = theme_selector(theme_name, default_scheme)
            logger.debug(f"Theme {theme_name!r} -> {selector}")
            tree[selector] = _declarations(tokens, prefix)

        return tree

    def build_color_palette(self, options: PluginOptions | None = None) -> dict[str, str]:
        """
        Build the colour palette extension.

        One entry per distinct token name across all merged themes,
        referencing the theme variable through ``oklch()`` so utilities
        can apply an alpha channel.
        """
        options = options or PluginOptions()
        prefix = format_color_prefix(options.color_prefix)

        palette: dict[str, str] = {}
        for tokens in self.merge_themes(options).values():
            palette.update(
                map_entries(
                    tokens,
                    value_fn=lambda _value, key, _index, _entries: (
                        f"oklch(var(--{prefix}{key}) / <alpha-value>)"
                    ),
                )
            )
        return palette

    def render_css(self, options: PluginOptions | None = None) -> str:
        """Build the declaration tree and render it as a stylesheet."""
        return generate_theme_css(self.build_declaration_tree(options))


def _declarations(tokens: Mapping[str, Any], prefix: str) -> dict[str, Any]:
    return map_entries(
        tokens,
        key_fn=lambda _value, key, _index, _entries: f"--{prefix}{key}",
        value_fn=lambda value, _key, _index, _entries: format_token(value),
    )


_default_assembler = ThemeAssembler()


def build_declaration_tree(options: PluginOptions | None = None) -> DeclarationTree:
    """Build the declaration tree against the built-in palettes."""
    return _default_assembler.build_declaration_tree(options)


def build_color_palette(options: PluginOptions | None = None) -> dict[str, str]:
    """Build the colour palette extension against the built-in palettes."""
    return _default_assembler.build_color_palette(options)
