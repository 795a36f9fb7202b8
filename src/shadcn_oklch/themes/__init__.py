"""
Theme assembly for shadcn/ui-style colour tokens.

Usage:
    from shadcn_oklch.themes import ShadcnPlugin, build_declaration_tree

    tree = build_declaration_tree()
    css = generate_theme_css(tree)
"""

from .assembler import (
    ROOT_SELECTOR,
    DeclarationTree,
    ThemeAssembler,
    build_color_palette,
    build_declaration_tree,
    format_color_prefix,
    theme_selector,
)
from .css_generator import generate_theme_css
from .palette import DEFAULT_THEMES
from .plugin import PluginAPI, ShadcnPlugin, shadcn_plugin

__all__ = [
    "DEFAULT_THEMES",
    "ROOT_SELECTOR",
    "DeclarationTree",
    "PluginAPI",
    "ShadcnPlugin",
    "ThemeAssembler",
    "build_color_palette",
    "build_declaration_tree",
    "format_color_prefix",
    "generate_theme_css",
    "shadcn_plugin",
    "theme_selector",
]
